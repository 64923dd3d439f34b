"""Fixed language menu and selection-token helpers."""

from __future__ import annotations

from dataclasses import dataclass

SELECTION_PREFIX = "lang_"
BUTTONS_PER_ROW = 3
SELECTION_PROMPT = "Choose the target language for translation:"


@dataclass(frozen=True, slots=True)
class Language:
    """A selectable target language."""

    name: str
    code: str


@dataclass(frozen=True, slots=True)
class Button:
    """Inline button label plus the token it reports back when clicked."""

    label: str
    token: str


LANGUAGES: tuple[Language, ...] = (
    Language("Arabic", "ar"),
    Language("English", "en"),
    Language("French", "fr"),
    Language("Italian", "it"),
    Language("Japanese", "ja"),
    Language("Spanish", "es"),
    Language("German", "de"),
    Language("Chinese", "zh-cn"),
    Language("Russian", "ru"),
    Language("Portuguese", "pt"),
    Language("Korean", "ko"),
    Language("Turkish", "tr"),
)

# Speech synthesis has no regional Chinese variant.
TTS_CODE_OVERRIDES: dict[str, str] = {
    "zh-cn": "zh",
}

_BY_NAME = {language.name: language for language in LANGUAGES}


def language_by_name(name: str) -> Language | None:
    return _BY_NAME.get(name)


def tts_code_for(code: str) -> str:
    """Map a translation code to the code the speech synthesizer expects."""
    return TTS_CODE_OVERRIDES.get(code, code)


def selection_token(language: Language) -> str:
    return f"{SELECTION_PREFIX}{language.name}"


def is_selection_token(token: str | None) -> bool:
    return bool(token) and token.startswith(SELECTION_PREFIX)


def parse_selection_token(token: str | None) -> str | None:
    """Return the display name carried by a selection token, or None for other button types."""
    if not is_selection_token(token):
        return None
    return token[len(SELECTION_PREFIX) :]


def language_keyboard(
    languages: tuple[Language, ...] = LANGUAGES,
    *,
    per_row: int = BUTTONS_PER_ROW,
) -> list[list[Button]]:
    """Lay the language menu out as rows of ``per_row`` buttons."""
    buttons = [Button(label=language.name, token=selection_token(language)) for language in languages]
    return [buttons[index : index + per_row] for index in range(0, len(buttons), per_row)]
