from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from ..domain.interfaces import CompletionHandler, ResponseExtractor, TypografService
from ..domain.models import (
    Cancelled,
    Failure,
    OperationResult,
    ProcessTextParameters,
    Success,
    TypografServiceError,
)
from ..domain.token import OperationToken
from ..utils.encoding import decode_body, resolve_encoding
from .response_extractor import RegexResponseExtractor
from .soap_request import render_request_body

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_URL = "http://typograf.artlebedev.ru/webservices/typograf.asmx"
SOAP_CONTENT_TYPE = "application/soap+xml; charset=utf-8"
DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpTypografService(TypografService):
    """Typograf web service client over SOAP/HTTP.

    Every call runs as its own asyncio task on the running loop. The shared
    ``httpx.AsyncClient`` is closed by ``aclose`` when the service created it;
    an injected client stays owned by the caller.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        endpoint_url: str = DEFAULT_ENDPOINT_URL,
        extractor: Optional[ResponseExtractor] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)
        self._endpoint_url = endpoint_url
        self._extractor = extractor if extractor is not None else RegexResponseExtractor.from_resources()
        self._pending: set[asyncio.Task[OperationResult]] = set()
        self._closed = False

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    async def __aenter__(self) -> "HttpTypografService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def process_text(
        self,
        parameters: ProcessTextParameters,
        text: str,
        on_complete: CompletionHandler,
    ) -> OperationToken:
        if self._closed:
            raise RuntimeError("Typograf service is closed")
        task = asyncio.get_running_loop().create_task(self.process(parameters, text))
        self._pending.add(task)

        def _deliver(done: asyncio.Task[OperationResult]) -> None:
            self._pending.discard(done)
            on_complete(self._task_outcome(done))

        task.add_done_callback(_deliver)
        return OperationToken(task.cancel)

    async def process(self, parameters: ProcessTextParameters, text: str) -> OperationResult:
        """Send text to the service and return the outcome.

        Failures come back as ``Failure`` values, as with ``process_text``;
        only task cancellation propagates, as ``asyncio.CancelledError``.
        """
        body = render_request_body(parameters, text).encode("utf-8")
        logger.debug("POST %s, %d bytes", self._endpoint_url, len(body))
        try:
            response = await self._client.post(
                self._endpoint_url,
                content=body,
                headers={"Content-Type": SOAP_CONTENT_TYPE},
            )
            return self._resolve_response(response)
        except httpx.HTTPError as exc:
            logger.warning("Typograf request failed: %s", exc)
            return Failure(TypografServiceError.response_error(exc))
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected failure while processing text")
            return Failure(TypografServiceError.response_error(exc))

    async def aclose(self) -> None:
        self._closed = True
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        if self._owns_client:
            await self._client.aclose()

    def _resolve_response(self, response: httpx.Response) -> OperationResult:
        if not 200 <= response.status_code <= 299:
            logger.warning("Typograf service answered with status %d", response.status_code)
            return Failure(TypografServiceError.service_unavailable())

        data = response.content
        if not data:
            logger.warning("Typograf service returned an empty body")
            return Failure(TypografServiceError.service_unavailable())

        encoding = resolve_encoding(response.charset_encoding)
        decoded = decode_body(data, encoding)
        if decoded is None:
            logger.warning("Could not decode %d response bytes as %s", len(data), encoding)
            return Failure(TypografServiceError.invalid_response_data())

        text = self._extractor.extract(decoded)
        if text is None:
            logger.warning("Response body did not match the extraction pattern")
            return Failure(TypografServiceError.invalid_response_data())

        logger.debug("Typograf response parsed, %d chars", len(text))
        return Success(text)

    @staticmethod
    def _task_outcome(task: asyncio.Task[OperationResult]) -> OperationResult:
        if task.cancelled():
            return Cancelled()
        return task.result()
