import asyncio

import pytest

from translator_bot.interaction import Interaction, InteractionPhase


class StatusTransport:
    def __init__(self, fail_edit: bool = False, fail_delete: bool = False) -> None:
        self.fail_edit = fail_edit
        self.fail_delete = fail_delete
        self.log: list[tuple] = []

    async def send_text(self, text, *, buttons=None, html=False) -> int:
        self.log.append(("send", text))
        return 55

    async def edit_text(self, message_id, text) -> None:
        if self.fail_edit:
            raise RuntimeError("Bad Request: message is not modified")
        self.log.append(("edit", message_id, text))

    async def delete_message(self, message_id) -> None:
        if self.fail_delete:
            raise RuntimeError("message can't be deleted")
        self.log.append(("delete", message_id))


def test_phases_are_recorded_and_status_removed_on_finish() -> None:
    transport = StatusTransport()
    interaction = Interaction(transport=transport, chat_id=1)

    async def _run() -> None:
        await interaction.open("Working...")
        await interaction.advance(InteractionPhase.TRANSLATING)
        await interaction.advance(InteractionPhase.SYNTHESIZING, "Speaking...")
        await interaction.finish()

    asyncio.run(_run())

    assert interaction.history == [
        InteractionPhase.ACKNOWLEDGED,
        InteractionPhase.TRANSLATING,
        InteractionPhase.SYNTHESIZING,
        InteractionPhase.COMPLETED,
    ]
    assert transport.log == [("send", "Working..."), ("edit", 55, "Speaking..."), ("delete", 55)]
    assert interaction.done


def test_fail_shows_error_text() -> None:
    transport = StatusTransport()
    interaction = Interaction(transport=transport, chat_id=1)

    async def _run() -> None:
        await interaction.open("Working...")
        await interaction.fail(ValueError("quota exceeded"))

    asyncio.run(_run())

    assert transport.log[-1] == ("edit", 55, "Error: quota exceeded")
    assert interaction.phase == InteractionPhase.FAILED


def test_fail_without_message_uses_exception_type() -> None:
    transport = StatusTransport()
    interaction = Interaction(transport=transport, chat_id=1)

    async def _run() -> None:
        await interaction.open("Working...")
        await interaction.fail(TimeoutError())

    asyncio.run(_run())

    assert transport.log[-1] == ("edit", 55, "Error: TimeoutError")


def test_edit_and_delete_failures_are_contained() -> None:
    transport = StatusTransport(fail_edit=True, fail_delete=True)
    interaction = Interaction(transport=transport, chat_id=1)

    async def _run() -> None:
        await interaction.open("Working...")
        await interaction.advance(InteractionPhase.TRANSCRIBING, "Transcribing...")
        await interaction.finish()

    asyncio.run(_run())

    assert interaction.phase == InteractionPhase.COMPLETED


def test_finished_interaction_cannot_advance() -> None:
    interaction = Interaction(transport=StatusTransport(), chat_id=1)

    async def _run() -> None:
        await interaction.open("Working...")
        await interaction.finish(remove_status=False)
        await interaction.advance(InteractionPhase.TRANSLATING)

    with pytest.raises(RuntimeError):
        asyncio.run(_run())
