from __future__ import annotations

from typing import Callable


class OperationToken:
    """Handle returned for an in-flight call; cancelling it twice is a no-op."""

    def __init__(self, cancel_action: Callable[[], object]) -> None:
        self._cancel_action = cancel_action
        self._cancel_requested = False

    @property
    def cancel_requested(self) -> bool:
        # True once cancel() was called, even if the call had already completed
        return self._cancel_requested

    def cancel(self) -> None:
        if self._cancel_requested:
            return
        self._cancel_requested = True
        self._cancel_action()
