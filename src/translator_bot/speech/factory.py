"""Startup selection of collaborator implementations."""

from __future__ import annotations

import logging

from translator_bot.config import Settings

from .interfaces import SpeechRecognizer, SpeechSynthesizer, TextTranslator, TranscriptionError

logger = logging.getLogger("translator_bot.speech.factory")

TRANSCRIPTION_BACKENDS = ("auto", "huggingface", "speechrecognition", "none")


class UnavailableRecognizer:
    """Stands in when no transcription backend is configured; every call fails."""

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def transcribe(self, audio_bytes: bytes) -> str:
        raise TranscriptionError(self.reason)


def build_recognizer(settings: Settings) -> SpeechRecognizer:
    """Pick a transcription backend from configuration and available credentials."""
    backend = settings.transcription_backend.lower()
    if backend not in TRANSCRIPTION_BACKENDS:
        raise ValueError(
            f"Unknown transcription backend {settings.transcription_backend!r}; "
            f"expected one of {', '.join(TRANSCRIPTION_BACKENDS)}"
        )

    if backend == "none":
        return UnavailableRecognizer("Voice transcription is disabled.")

    token = settings.transcription_token
    if backend in ("auto", "huggingface"):
        if token:
            from .stt_huggingface import HuggingFaceRecognizer

            logger.info("transcription_backend_selected", extra={"backend": "huggingface", "model": settings.hf_asr_model})
            return HuggingFaceRecognizer(token=token, model=settings.hf_asr_model)
        if backend == "huggingface":
            logger.error("transcription_token_missing", extra={"backend": "huggingface"})
            return UnavailableRecognizer(
                "Hugging Face client is not initialized. Please check your API keys (HF_TOKEN or GOOGLE_API_KEY)."
            )

    try:
        from .stt_speechrecognition import SpeechRecognitionRecognizer

        recognizer = SpeechRecognitionRecognizer(language=settings.speech_recognition_language)
    except RuntimeError as exc:
        logger.error("transcription_backend_unavailable", extra={"backend": "speechrecognition", "reason": str(exc)})
        return UnavailableRecognizer(
            "No transcription backend is available. Set HF_TOKEN or install 'translator-bot[voice]'."
        )

    logger.info("transcription_backend_selected", extra={"backend": "speechrecognition"})
    return recognizer


def build_translator(settings: Settings) -> TextTranslator:
    from .translation_google import GoogleTextTranslator

    return GoogleTextTranslator()


def build_synthesizer(settings: Settings) -> SpeechSynthesizer:
    from .tts_gtts import GTTSSynthesizer

    return GTTSSynthesizer()
