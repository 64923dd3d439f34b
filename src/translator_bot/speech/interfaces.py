"""Contracts for transcription, translation and speech synthesis."""

from typing import Protocol


class TranscriptionError(RuntimeError):
    """Raised when audio cannot be turned into usable text."""


class SpeechRecognizer(Protocol):
    """Converts a recorded voice message into text."""

    def transcribe(self, audio_bytes: bytes) -> str:
        """Return recognized text from raw audio input."""


class TextTranslator(Protocol):
    """Translates text into one of the supported target languages."""

    def translate(self, text: str, target_code: str) -> str:
        """Return ``text`` translated into ``target_code``."""


class SpeechSynthesizer(Protocol):
    """Converts text into playable voice-message audio."""

    def synthesize(self, text: str, language_code: str) -> bytes:
        """Return playable audio bytes for the given text."""
