from __future__ import annotations

from . import app, modules
from .app.config import TypografSettings
from .app.di import TypografContainer
from .modules.text.domain.models import (
    Cancelled,
    EntityType,
    Failure,
    OperationResult,
    ProcessTextParameters,
    Success,
    TypografErrorKind,
    TypografServiceError,
)
from .modules.text.domain.token import OperationToken
from .modules.text.infrastructure.http_typograf import HttpTypografService
from .modules.text.infrastructure.response_extractor import RegexResponseExtractor
from .modules.text.infrastructure.soap_request import render_request_body

__all__ = [
    "Cancelled",
    "EntityType",
    "Failure",
    "HttpTypografService",
    "OperationResult",
    "OperationToken",
    "ProcessTextParameters",
    "RegexResponseExtractor",
    "Success",
    "TypografContainer",
    "TypografErrorKind",
    "TypografServiceError",
    "TypografSettings",
    "app",
    "modules",
    "render_request_body",
]
