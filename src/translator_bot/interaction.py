"""Status-message lifecycle for a single bot interaction."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .transport import ChatTransport

logger = logging.getLogger("translator_bot.interaction")


class InteractionPhase(str, Enum):
    """Steps an interaction passes through while its status message is visible."""

    PENDING = "pending"
    ACKNOWLEDGED = "acknowledged"
    DOWNLOADING = "downloading"
    TRANSCRIBING = "transcribing"
    TRANSCRIBED = "transcribed"
    TRANSLATING = "translating"
    SYNTHESIZING = "synthesizing"
    DELIVERING = "delivering"
    COMPLETED = "completed"
    FAILED = "failed"


_TERMINAL = frozenset({InteractionPhase.COMPLETED, InteractionPhase.FAILED})


@dataclass(slots=True)
class Interaction:
    """Tracks the status message of one inbound event and edits it in place.

    ``open`` posts the status message; ``advance`` moves to a new phase and
    optionally rewrites the message; ``fail`` shows the error; ``finish`` ends
    the interaction and by default removes the message. Transport errors while
    editing or deleting are logged and do not propagate.
    """

    transport: ChatTransport
    chat_id: int | str
    message_id: int | None = None
    phase: InteractionPhase = InteractionPhase.PENDING
    history: list[InteractionPhase] = field(default_factory=list)

    async def open(self, text: str) -> None:
        self.message_id = await self.transport.send_text(text)
        self._enter(InteractionPhase.ACKNOWLEDGED)

    async def advance(self, phase: InteractionPhase, text: str | None = None) -> None:
        self._enter(phase)
        if text is not None:
            await self._edit(text)

    async def fail(self, exc: BaseException) -> None:
        self._enter(InteractionPhase.FAILED)
        await self._edit(f"Error: {error_message(exc)}")

    async def finish(self, *, remove_status: bool = True) -> None:
        self._enter(InteractionPhase.COMPLETED)
        if not remove_status or self.message_id is None:
            return
        try:
            await self.transport.delete_message(self.message_id)
        except Exception:  # noqa: BLE001 - the replies are already delivered.
            logger.exception("status_delete_failed", extra={"chat_id": self.chat_id, "message_id": self.message_id})

    @property
    def done(self) -> bool:
        return self.phase in _TERMINAL

    def _enter(self, phase: InteractionPhase) -> None:
        if self.done:
            raise RuntimeError(f"Interaction already {self.phase.value}; cannot move to {phase.value}")
        self.phase = phase
        self.history.append(phase)

    async def _edit(self, text: str) -> None:
        if self.message_id is None:
            return
        try:
            await self.transport.edit_text(self.message_id, text)
        except Exception:  # noqa: BLE001 - status edits are best effort.
            logger.exception(
                "status_edit_failed",
                extra={"chat_id": self.chat_id, "message_id": self.message_id, "phase": self.phase.value},
            )


def error_message(exc: BaseException) -> str:
    """User-facing text for a collaborator failure."""
    return str(exc) or type(exc).__name__
