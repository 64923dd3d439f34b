import asyncio

import pytest

from translator_bot.session import InMemorySessionStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_put_overwrites_previous_text() -> None:
    store = InMemorySessionStore()
    store.put(1, "first")
    store.put(1, "second")

    assert store.get(1) == "second"
    assert store.get(2) is None
    assert len(store) == 1


def test_entries_never_expire_by_default() -> None:
    clock = FakeClock()
    store = InMemorySessionStore(clock=clock)
    store.put("chat-a", "hola")

    clock.now = 10**9
    assert store.get("chat-a") == "hola"


def test_ttl_expires_entries() -> None:
    clock = FakeClock()
    store = InMemorySessionStore(ttl_seconds=60, clock=clock)
    store.put(1, "hello")

    clock.now = 59
    assert store.get(1) == "hello"
    clock.now = 61
    assert store.get(1) is None
    assert len(store) == 0


def test_max_entries_evicts_least_recently_written_chat() -> None:
    store = InMemorySessionStore(max_entries=2)
    store.put(1, "a")
    store.put(2, "b")
    store.put(1, "a2")
    store.put(3, "c")

    assert store.get(2) is None
    assert store.get(1) == "a2"
    assert store.get(3) == "c"


def test_max_entries_must_be_positive() -> None:
    with pytest.raises(ValueError):
        InMemorySessionStore(max_entries=0)


def test_concurrent_chats_do_not_interfere() -> None:
    store = InMemorySessionStore()

    async def _write(chat_id: int) -> None:
        for index in range(50):
            store.put(chat_id, f"{chat_id}:{index}")
            await asyncio.sleep(0)

    async def _run() -> None:
        await asyncio.gather(*(_write(chat_id) for chat_id in range(10)))

    asyncio.run(_run())

    assert [store.get(chat_id) for chat_id in range(10)] == [f"{chat_id}:49" for chat_id in range(10)]
