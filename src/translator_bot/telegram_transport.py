"""Telegram adapter for the bot handlers, built on python-telegram-bot."""

from __future__ import annotations

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, InputFile, Update
from telegram.constants import ParseMode
from telegram.ext import (
    Application,
    ApplicationBuilder,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from .bot import TranslatorBot
from .languages import SELECTION_PREFIX, Button


def inline_markup(buttons: list[list[Button]]) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton(button.label, callback_data=button.token) for button in row] for row in buttons]
    )


class TelegramChatTransport:
    """ChatTransport bound to one Telegram update."""

    def __init__(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        self._update = update
        self._bot = context.bot
        self._chat_id = update.effective_chat.id

    @property
    def chat_id(self) -> int:
        return self._chat_id

    async def send_text(self, text: str, *, buttons: list[list[Button]] | None = None, html: bool = False) -> int:
        message = await self._bot.send_message(
            chat_id=self._chat_id,
            text=text,
            parse_mode=ParseMode.HTML if html else None,
            reply_markup=inline_markup(buttons) if buttons else None,
        )
        return message.message_id

    async def edit_text(self, message_id: int, text: str) -> None:
        await self._bot.edit_message_text(text=text, chat_id=self._chat_id, message_id=message_id)

    async def delete_message(self, message_id: int) -> None:
        await self._bot.delete_message(chat_id=self._chat_id, message_id=message_id)

    async def send_voice(self, audio: bytes, filename: str) -> None:
        await self._bot.send_voice(chat_id=self._chat_id, voice=InputFile(audio, filename=filename))

    async def answer_callback(self, text: str | None = None, *, show_alert: bool = False) -> None:
        query = self._update.callback_query
        if query is None:
            return
        await query.answer(text=text, show_alert=show_alert)

    async def download_voice(self) -> bytes:
        message = self._update.effective_message
        if message is None or message.voice is None:
            raise ValueError("Message has no voice attachment")
        telegram_file = await message.voice.get_file()
        return bytes(await telegram_file.download_as_bytearray())


def build_application(token: str, bot: TranslatorBot) -> Application:
    """Create a polling-ready application with every bot handler registered."""
    application = ApplicationBuilder().token(token).concurrent_updates(True).build()

    async def on_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        transport = TelegramChatTransport(update, context)
        await bot.handle_start(transport.chat_id, transport)

    async def on_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        transport = TelegramChatTransport(update, context)
        await bot.handle_text(transport.chat_id, update.effective_message.text, transport)

    async def on_voice(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        transport = TelegramChatTransport(update, context)
        await bot.handle_voice(transport.chat_id, transport)

    async def on_language_choice(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        transport = TelegramChatTransport(update, context)
        await bot.handle_language_choice(transport.chat_id, update.callback_query.data, transport)

    application.add_handler(CommandHandler("start", on_start, filters=filters.UpdateType.MESSAGE))
    application.add_handler(MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND, on_text))
    application.add_handler(MessageHandler(filters.UpdateType.MESSAGE & filters.VOICE, on_voice))
    application.add_handler(CallbackQueryHandler(on_language_choice, pattern=f"^{SELECTION_PREFIX}"))
    application.add_error_handler(bot.on_error)
    return application
