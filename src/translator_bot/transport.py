"""Boundary for the messaging platform as seen by the bot handlers."""

from typing import Protocol

from .languages import Button


class ChatTransport(Protocol):
    """Outbound actions available while handling one inbound event."""

    async def send_text(self, text: str, *, buttons: list[list[Button]] | None = None, html: bool = False) -> int:
        """Send a message to the chat and return its message id."""

    async def edit_text(self, message_id: int, text: str) -> None:
        """Replace the text of a message previously sent by the bot."""

    async def delete_message(self, message_id: int) -> None:
        """Remove a message previously sent by the bot."""

    async def send_voice(self, audio: bytes, filename: str) -> None:
        """Send audio bytes as a voice message."""

    async def answer_callback(self, text: str | None = None, *, show_alert: bool = False) -> None:
        """Acknowledge the button click that triggered this event."""

    async def download_voice(self) -> bytes:
        """Fetch the voice attachment of the inbound message."""
