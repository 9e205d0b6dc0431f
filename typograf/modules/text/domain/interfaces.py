from __future__ import annotations

from typing import Callable, Protocol

from .models import OperationResult, ProcessTextParameters
from .token import OperationToken

CompletionHandler = Callable[[OperationResult], None]


class ResponseExtractor(Protocol):
    def extract(self, body: str) -> str | None:
        """Return the processed text found in a decoded response body, or None."""


class TypografService(Protocol):
    def process_text(
        self,
        parameters: ProcessTextParameters,
        text: str,
        on_complete: CompletionHandler,
    ) -> OperationToken:
        """Send text to the service and report the outcome through on_complete."""

    async def process(self, parameters: ProcessTextParameters, text: str) -> OperationResult:
        """Send text to the service and return the outcome."""
