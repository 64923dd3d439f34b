"""Event handlers that turn chat input into translated text and speech."""

from __future__ import annotations

import asyncio
import html
import logging

from .interaction import Interaction, InteractionPhase
from .languages import LANGUAGES, SELECTION_PROMPT, Language, language_by_name, language_keyboard, parse_selection_token, tts_code_for
from .session import ChatId, SessionStore
from .speech.interfaces import SpeechRecognizer, SpeechSynthesizer, TextTranslator, TranscriptionError
from .transport import ChatTransport

WELCOME_MESSAGE = (
    "Welcome to the Translation Voice Bot!\n\n"
    "Send me any text or a voice message, then choose the language you want to translate it to. "
    "I will send you the translation as text and voice!"
)
TOO_LONG_MESSAGE = "Text is too long. Please keep it under {limit} characters."
NO_SESSION_ALERT = "Please send some text first!"
UNKNOWN_LANGUAGE_ALERT = "Unknown language. Please choose one from the list."
EMPTY_TRANSCRIPT_MESSAGE = "Could not understand the audio."
VOICE_FILENAME = "translation.mp3"


class TranslatorBot:
    """Coordinates the session store with the transcription, translation and speech collaborators."""

    def __init__(
        self,
        *,
        sessions: SessionStore,
        recognizer: SpeechRecognizer,
        translator: TextTranslator,
        synthesizer: SpeechSynthesizer,
        languages: tuple[Language, ...] = LANGUAGES,
        max_text_length: int = 1000,
        limit_transcribed_text: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._sessions = sessions
        self._recognizer = recognizer
        self._translator = translator
        self._synthesizer = synthesizer
        self._languages = languages
        self._max_text_length = max_text_length
        self._limit_transcribed_text = limit_transcribed_text
        self._logger = logger or logging.getLogger("translator_bot.bot")

    async def handle_start(self, chat_id: ChatId, transport: ChatTransport) -> None:
        await transport.send_text(WELCOME_MESSAGE)

    async def handle_text(self, chat_id: ChatId, text: str, transport: ChatTransport) -> None:
        """Store typed text for the chat and offer the language menu."""
        if len(text) > self._max_text_length:
            self._logger.info("text_rejected", extra={"chat_id": chat_id, "length": len(text)})
            await transport.send_text(TOO_LONG_MESSAGE.format(limit=self._max_text_length))
            return

        self._sessions.put(chat_id, text)
        self._logger.info("text_received", extra={"chat_id": chat_id, "length": len(text)})
        await self.show_language_selection(transport)

    async def handle_voice(self, chat_id: ChatId, transport: ChatTransport) -> None:
        """Transcribe a voice message, store the transcript and offer the language menu."""
        interaction = Interaction(transport=transport, chat_id=chat_id)
        await interaction.open("Processing voice message...")
        try:
            await interaction.advance(InteractionPhase.DOWNLOADING)
            audio_bytes = await transport.download_voice()

            await interaction.advance(InteractionPhase.TRANSCRIBING, "Transcribing voice...")
            transcript = await asyncio.to_thread(self._recognizer.transcribe, audio_bytes)
            if not transcript or not transcript.strip():
                raise TranscriptionError(EMPTY_TRANSCRIPT_MESSAGE)

            if self._limit_transcribed_text and len(transcript) > self._max_text_length:
                raise TranscriptionError(TOO_LONG_MESSAGE.format(limit=self._max_text_length))

            await interaction.advance(InteractionPhase.TRANSCRIBED, f'Transcribed: "{transcript}"')
            self._sessions.put(chat_id, transcript)
            self._logger.info("voice_transcribed", extra={"chat_id": chat_id, "length": len(transcript)})

            await self.show_language_selection(transport)
        except Exception as exc:  # noqa: BLE001 - failures are reported in the status message.
            self._logger.exception("voice_processing_failed", extra={"chat_id": chat_id, "phase": interaction.phase.value})
            await interaction.fail(exc)
            return

        await interaction.finish(remove_status=False)

    async def handle_language_choice(self, chat_id: ChatId, token: str, transport: ChatTransport) -> None:
        """Translate the chat's pending text into the chosen language and reply with text and voice."""
        name = parse_selection_token(token)
        if name is None:
            return

        language = self._find_language(name)
        if language is None:
            await transport.answer_callback(UNKNOWN_LANGUAGE_ALERT, show_alert=True)
            return

        source_text = self._sessions.get(chat_id)
        if not source_text:
            await transport.answer_callback(NO_SESSION_ALERT, show_alert=True)
            return

        await transport.answer_callback()
        interaction = Interaction(transport=transport, chat_id=chat_id)
        await interaction.open(f"Translating to {language.name}...")
        try:
            await interaction.advance(InteractionPhase.TRANSLATING)
            translated = await asyncio.to_thread(self._translator.translate, source_text, language.code)
            self._logger.info("text_translated", extra={"chat_id": chat_id, "language": language.code, "translated": translated})

            await interaction.advance(InteractionPhase.SYNTHESIZING)
            audio = await asyncio.to_thread(self._synthesizer.synthesize, translated, tts_code_for(language.code))

            await interaction.advance(InteractionPhase.DELIVERING)
            await transport.send_text(
                f"<b>Translation ({html.escape(language.name)}):</b>\n{html.escape(translated)}",
                html=True,
            )
            await transport.send_voice(audio, VOICE_FILENAME)
        except Exception as exc:  # noqa: BLE001 - failures are reported in the status message.
            self._logger.exception(
                "translation_failed",
                extra={"chat_id": chat_id, "language": language.code, "phase": interaction.phase.value},
            )
            await interaction.fail(exc)
            return

        await interaction.finish()

    async def on_error(self, update: object, context: object) -> None:
        """Last-resort hook for exceptions escaping a handler; logs and never re-raises."""
        error = getattr(context, "error", None)
        self._logger.error(
            "handler_error",
            exc_info=(type(error), error, error.__traceback__) if error is not None else None,
            extra={"update": repr(update)},
        )

    async def show_language_selection(self, transport: ChatTransport) -> None:
        await transport.send_text(SELECTION_PROMPT, buttons=language_keyboard(self._languages))

    def _find_language(self, name: str) -> Language | None:
        if self._languages is LANGUAGES:
            return language_by_name(name)
        return next((language for language in self._languages if language.name == name), None)
