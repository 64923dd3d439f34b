"""CLI startup entrypoint for the translator bot."""

from __future__ import annotations

import asyncio
import logging

import typer
from rich import print

from translator_bot.bot import TranslatorBot
from translator_bot.config import Settings, secret_value, settings
from translator_bot.languages import LANGUAGES, tts_code_for
from translator_bot.session import InMemorySessionStore
from translator_bot.speech import build_recognizer, build_synthesizer, build_translator
from translator_bot.telemetry import configure_logging

app = typer.Typer(help="Translator bot service entrypoint")

logger = logging.getLogger("translator_bot.main")


def _report_credentials(config: Settings) -> None:
    if secret_value(config.telegram_bot_token) is None:
        logger.critical("TELEGRAM_BOT_TOKEN is missing!")
    google_api_key = secret_value(config.google_api_key)
    if google_api_key is None:
        logger.warning("GOOGLE_API_KEY is missing!")
    if secret_value(config.hf_token) is None:
        if google_api_key is not None:
            logger.info("HF_TOKEN is missing, falling back to GOOGLE_API_KEY for transcription.")
        else:
            logger.info("HF_TOKEN is missing.")


def _build_bot(config: Settings) -> TranslatorBot:
    return TranslatorBot(
        sessions=InMemorySessionStore(
            ttl_seconds=config.session_ttl_seconds,
            max_entries=config.session_max_entries,
        ),
        recognizer=build_recognizer(config),
        translator=build_translator(config),
        synthesizer=build_synthesizer(config),
        max_text_length=config.max_text_length,
        limit_transcribed_text=config.limit_transcribed_text,
    )


async def _serve(token: str, bot: TranslatorBot, config: Settings) -> None:
    import uvicorn

    from translator_bot.health import create_health_app
    from translator_bot.telegram_transport import build_application

    application = build_application(token, bot)
    server = uvicorn.Server(
        uvicorn.Config(
            create_health_app(),
            host=config.health_host,
            port=config.health_port,
            log_level=config.log_level.lower(),
        )
    )

    async with application:
        await application.start()
        await application.updater.start_polling()
        logger.info("bot_started", extra={"health_port": config.health_port})
        try:
            # Returns once uvicorn receives SIGINT/SIGTERM.
            await server.serve()
        finally:
            await application.updater.stop()
            await application.stop()
    logger.info("bot_stopped")


@app.command()
def run() -> None:
    """Start polling Telegram and serve the liveness endpoint."""
    configure_logging(settings.log_level)
    _report_credentials(settings)
    token = secret_value(settings.telegram_bot_token)
    if token is None:
        print({"error": "Set TELEGRAM_BOT_TOKEN (or TRANSLATOR_BOT_TELEGRAM_BOT_TOKEN) before starting the bot."})
        raise typer.Exit(code=1)

    bot = _build_bot(settings)
    try:
        asyncio.run(_serve(token, bot, settings))
    except KeyboardInterrupt:
        # uvicorn re-raises the captured SIGINT once it has shut down.
        logger.info("bot_interrupted")


@app.command()
def start() -> None:
    """Show runtime backend configuration."""
    print(
        {
            "app_name": settings.app_name,
            "telegram_token_configured": secret_value(settings.telegram_bot_token) is not None,
            "transcription_backend": settings.transcription_backend,
            "transcription_token_configured": settings.transcription_token is not None,
            "hf_asr_model": settings.hf_asr_model,
            "max_text_length": settings.max_text_length,
            "session_ttl_seconds": settings.session_ttl_seconds,
            "session_max_entries": settings.session_max_entries,
            "health": f"{settings.health_host}:{settings.health_port}",
        }
    )


@app.command()
def languages() -> None:
    """List the languages offered in the selection menu."""
    print([{"name": language.name, "code": language.code, "speech_code": tts_code_for(language.code)} for language in LANGUAGES])


if __name__ == "__main__":
    app()
