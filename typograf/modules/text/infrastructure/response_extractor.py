from __future__ import annotations

import logging
import re
from typing import Optional

from ..domain.interfaces import ResponseExtractor
from .resources import response_pattern

logger = logging.getLogger(__name__)


class RegexResponseExtractor(ResponseExtractor):
    """Pulls the processed text out of a raw SOAP response with a one-group pattern."""

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self._regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    @classmethod
    def from_resources(cls, locale: Optional[str] = None) -> "RegexResponseExtractor":
        return cls(response_pattern(locale))

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def extract(self, body: str) -> str | None:
        if self._regex.groups != 1:
            logger.warning("Response pattern must define exactly one group, got %d", self._regex.groups)
            return None
        match = self._regex.search(body)
        if match is None:
            return None
        captured = match.group(1)
        # an optional group that did not take part in the match
        if captured is None:
            return None
        return captured
