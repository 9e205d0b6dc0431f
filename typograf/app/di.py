from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .config import TypografSettings
from ..modules.text.infrastructure.http_typograf import HttpTypografService
from ..modules.text.infrastructure.response_extractor import RegexResponseExtractor

logger = logging.getLogger(__name__)


@dataclass
class TypografContainer:
    settings: TypografSettings
    client: httpx.AsyncClient
    extractor: RegexResponseExtractor
    service: HttpTypografService

    @classmethod
    def build(
        cls,
        settings: Optional[TypografSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TypografContainer":
        settings = settings or TypografSettings()
        client = httpx.AsyncClient(timeout=settings.timeout_seconds, transport=transport)
        extractor = RegexResponseExtractor.from_resources(settings.resource_locale)
        service = HttpTypografService(
            client,
            endpoint_url=settings.endpoint_url,
            extractor=extractor,
        )
        logger.debug("Typograf client configured for %s", settings.endpoint_url)
        return cls(settings=settings, client=client, extractor=extractor, service=service)

    async def shutdown(self) -> None:
        await self.service.aclose()
        await self.client.aclose()
