"""Transcription, translation and speech-synthesis collaborators."""

from .factory import UnavailableRecognizer, build_recognizer, build_synthesizer, build_translator
from .interfaces import SpeechRecognizer, SpeechSynthesizer, TextTranslator, TranscriptionError

__all__ = [
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "TextTranslator",
    "TranscriptionError",
    "UnavailableRecognizer",
    "build_recognizer",
    "build_synthesizer",
    "build_translator",
]
