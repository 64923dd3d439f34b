"""Speech-to-text backend powered by ``speech_recognition``."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from .interfaces import SpeechRecognizer, TranscriptionError


@dataclass(slots=True)
class SpeechRecognitionRecognizer(SpeechRecognizer):
    """Decode Telegram OGG/Opus voice notes and transcribe them with Google Web Speech."""

    language: str = "en-US"
    source_format: str = "ogg"
    sample_rate: int = 16_000
    _sr: object = field(init=False, repr=False)
    _audio_segment: object = field(init=False, repr=False)
    _recognizer: object = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            import speech_recognition as sr
            from pydub import AudioSegment
        except ImportError as exc:  # pragma: no cover - import guard
            raise RuntimeError(
                "Voice STT backend unavailable. Install extras with: pip install 'translator-bot[voice]'"
            ) from exc
        self._sr = sr
        self._audio_segment = AudioSegment
        self._recognizer = sr.Recognizer()

    def transcribe(self, audio_bytes: bytes) -> str:
        if not audio_bytes:
            return ""
        wav_bytes = self._to_wav(audio_bytes)
        with self._sr.AudioFile(io.BytesIO(wav_bytes)) as source:
            audio = self._recognizer.record(source)
        try:
            return self._recognizer.recognize_google(audio, language=self.language)
        except self._sr.UnknownValueError:
            return ""
        except self._sr.RequestError as exc:
            raise TranscriptionError(
                "Speech recognition service request failed. Check internet access or switch STT backend."
            ) from exc

    def _to_wav(self, audio_bytes: bytes) -> bytes:
        segment = self._audio_segment.from_file(io.BytesIO(audio_bytes), format=self.source_format)
        segment = segment.set_channels(1).set_frame_rate(self.sample_rate)
        buffer = io.BytesIO()
        segment.export(buffer, format="wav")
        return buffer.getvalue()
