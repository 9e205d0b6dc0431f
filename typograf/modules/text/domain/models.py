from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class EntityType(IntEnum):
    """Kind of entities the service emits for special characters."""

    HTML = 1
    XML = 2
    NONE = 3
    MIXED = 4


@dataclass(frozen=True)
class ProcessTextParameters:
    entity_type: EntityType = EntityType.NONE
    # 0 means no limit
    max_non_breaking_spaces: int = 0
    use_break_line_tags: bool = False
    use_paragraph_tags: bool = False

    def __post_init__(self) -> None:
        if self.max_non_breaking_spaces < 0:
            raise ValueError("max_non_breaking_spaces must be non-negative")

    def request_body(self, text: str) -> str:
        from ..infrastructure.soap_request import render_request_body

        return render_request_body(self, text)


class TypografErrorKind(str, Enum):
    RESPONSE_ERROR = "response_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INVALID_RESPONSE_DATA = "invalid_response_data"


@dataclass(frozen=True)
class TypografServiceError:
    kind: TypografErrorKind
    detail: BaseException | None = None

    @classmethod
    def response_error(cls, detail: BaseException) -> "TypografServiceError":
        return cls(TypografErrorKind.RESPONSE_ERROR, detail)

    @classmethod
    def service_unavailable(cls) -> "TypografServiceError":
        return cls(TypografErrorKind.SERVICE_UNAVAILABLE)

    @classmethod
    def invalid_response_data(cls) -> "TypografServiceError":
        return cls(TypografErrorKind.INVALID_RESPONSE_DATA)


@dataclass(frozen=True)
class Success:
    value: str

    is_success = True
    is_failure = False
    is_cancelled = False


@dataclass(frozen=True)
class Failure:
    error: TypografServiceError

    is_success = False
    is_failure = True
    is_cancelled = False


@dataclass(frozen=True)
class Cancelled:
    is_success = False
    is_failure = False
    is_cancelled = True


OperationResult = Union[Success, Failure, Cancelled]
