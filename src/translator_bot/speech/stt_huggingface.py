"""Speech-to-text backend using Whisper on the Hugging Face Inference API."""

from __future__ import annotations

from dataclasses import dataclass, field

from .interfaces import SpeechRecognizer, TranscriptionError

DEFAULT_MODEL = "openai/whisper-large-v3-turbo"


@dataclass(slots=True)
class HuggingFaceRecognizer(SpeechRecognizer):
    """Send voice-message bytes to a hosted automatic-speech-recognition model."""

    token: str
    model: str = DEFAULT_MODEL
    _client: object = field(init=False, repr=False)

    def __post_init__(self) -> None:
        from huggingface_hub import InferenceClient

        self._client = InferenceClient(token=self.token)

    def transcribe(self, audio_bytes: bytes) -> str:
        if not audio_bytes:
            return ""
        try:
            result = self._client.automatic_speech_recognition(audio_bytes, model=self.model)
        except Exception as exc:  # noqa: BLE001 - provider errors surface as one type.
            raise TranscriptionError(f"Failed to transcribe audio. {exc}") from exc
        return result.text or ""
