"""Text-to-speech backend powered by ``gTTS``."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from .interfaces import SpeechSynthesizer


@dataclass(slots=True)
class GTTSSynthesizer(SpeechSynthesizer):
    """Render speech as MP3 through the Google Translate TTS endpoint."""

    slow: bool = False
    tld: str = "com"
    _gtts_cls: type = field(init=False, repr=False)

    def __post_init__(self) -> None:
        from gtts import gTTS

        self._gtts_cls = gTTS

    def synthesize(self, text: str, language_code: str) -> bytes:
        buffer = io.BytesIO()
        self._gtts_cls(text=text, lang=language_code, slow=self.slow, tld=self.tld).write_to_fp(buffer)
        return buffer.getvalue()
