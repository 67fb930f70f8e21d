"""One-shot flash messages shown on the next rendered page."""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

SUCCESS_KEY = "success_message"
ERROR_KEY = "error_message"


@dataclass(frozen=True)
class FlashMessages:
    success_message: str | None = None
    error_message: str | None = None


class FlashNotifier:
    """Transient key-value slot over a session-like mapping.

    Reading clears: ``consume()`` returns whatever was stashed and removes it,
    so each message is surfaced at most once. If the backing store expires
    first, the message is simply lost.
    """

    def __init__(self, store: MutableMapping[str, Any]):
        self._store = store

    def set_success(self, message: str) -> None:
        self._store[SUCCESS_KEY] = message

    def set_error(self, message: str) -> None:
        self._store[ERROR_KEY] = message

    def consume(self) -> FlashMessages:
        return FlashMessages(
            success_message=self._store.pop(SUCCESS_KEY, None),
            error_message=self._store.pop(ERROR_KEY, None),
        )
