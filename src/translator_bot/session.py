"""Per-chat storage of the text waiting for a language choice."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Protocol

ChatId = int | str


class SessionStore(Protocol):
    """Holds at most one pending source text per chat."""

    def put(self, chat_id: ChatId, text: str) -> None:
        """Store ``text`` for the chat, replacing anything already pending."""

    def get(self, chat_id: ChatId) -> str | None:
        """Return the pending text for the chat, if any."""


@dataclass(slots=True)
class _Entry:
    text: str
    stored_at: float


class InMemorySessionStore:
    """Process-local session store.

    Entries never expire unless ``ttl_seconds`` or ``max_entries`` is set. With
    ``max_entries`` the least recently written chat is evicted first.
    """

    def __init__(
        self,
        *,
        ttl_seconds: float | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[ChatId, _Entry] = OrderedDict()
        self._lock = threading.Lock()

    def put(self, chat_id: ChatId, text: str) -> None:
        with self._lock:
            self._entries[chat_id] = _Entry(text=text, stored_at=self._clock())
            self._entries.move_to_end(chat_id)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    self._entries.popitem(last=False)

    def get(self, chat_id: ChatId) -> str | None:
        with self._lock:
            entry = self._entries.get(chat_id)
            if entry is None:
                return None
            if self._is_expired(entry):
                del self._entries[chat_id]
                return None
            return entry.text

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _is_expired(self, entry: _Entry) -> bool:
        if self._ttl_seconds is None:
            return False
        return self._clock() - entry.stored_at > self._ttl_seconds
