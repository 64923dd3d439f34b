"""Text translation through Google Translate via ``deep_translator``."""

from __future__ import annotations

from dataclasses import dataclass, field

from .interfaces import TextTranslator

# deep_translator spells regional codes with an upper-case region.
PROVIDER_CODE_OVERRIDES: dict[str, str] = {
    "zh-cn": "zh-CN",
}


@dataclass(slots=True)
class GoogleTextTranslator(TextTranslator):
    """Translate from an auto-detected source language."""

    source: str = "auto"
    _translator_cls: type = field(init=False, repr=False)

    def __post_init__(self) -> None:
        from deep_translator import GoogleTranslator

        self._translator_cls = GoogleTranslator

    def translate(self, text: str, target_code: str) -> str:
        target = PROVIDER_CODE_OVERRIDES.get(target_code, target_code)
        translated = self._translator_cls(source=self.source, target=target).translate(text)
        if translated is None:
            raise RuntimeError(f"Translator returned no text for target language {target_code}")
        return translated
