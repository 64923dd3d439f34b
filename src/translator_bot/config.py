"""Runtime configuration for the translator bot."""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATOR_BOT_",
        env_file=".env",
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    app_name: str = "translator-bot"
    log_level: str = "INFO"

    telegram_bot_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("TRANSLATOR_BOT_TELEGRAM_BOT_TOKEN", "TELEGRAM_BOT_TOKEN"),
        description="Telegram Bot API token. Required to run the bot.",
    )
    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("TRANSLATOR_BOT_GOOGLE_API_KEY", "GOOGLE_API_KEY"),
    )
    hf_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("TRANSLATOR_BOT_HF_TOKEN", "HF_TOKEN"),
    )

    transcription_backend: str = Field(
        default="auto",
        description="One of auto, huggingface, speechrecognition, none.",
    )
    hf_asr_model: str = "openai/whisper-large-v3-turbo"
    speech_recognition_language: str = "en-US"

    max_text_length: int = 1000
    limit_transcribed_text: bool = False
    session_ttl_seconds: float | None = None
    session_max_entries: int | None = None

    health_host: str = "0.0.0.0"
    health_port: int = Field(
        default=7860,
        validation_alias=AliasChoices("TRANSLATOR_BOT_HEALTH_PORT", "PORT"),
    )

    @property
    def transcription_token(self) -> str | None:
        """Token for hosted transcription; the Google key doubles as a fallback."""
        return secret_value(self.hf_token) or secret_value(self.google_api_key)


def secret_value(secret: SecretStr | None) -> str | None:
    """Return the secret text, treating an empty value as unset."""
    if secret is None or not secret.get_secret_value():
        return None
    return secret.get_secret_value()


settings = Settings()
