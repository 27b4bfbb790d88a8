"""Explicit decode outcome: a value, or a reason why there is none.

Malformed WKT is an expected input (users paste text into editors), so
the decoder reports it as a ``DecodeResult`` rather than raising. Tests
and callers can then assert *why* a parse failed, and editor-style
callers that prefer an exception call :meth:`DecodeResult.unwrap`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from annotation_wkt.core.exceptions import ValidationError

T = TypeVar("T")


class DecodeFailureReason(enum.Enum):
    """Why a WKT string produced no geometry.

    Values:
        EMPTY_INPUT:              Input was ``None``, empty or whitespace.
        UNKNOWN_KEYWORD:          Leading keyword is not the one expected.
        SYNTAX_ERROR:             Parentheses, separators or trailing text are malformed.
        INSUFFICIENT_POINTS:      The outer ring has fewer than 3 distinct points.
        COORDINATE_PARSE_FAILURE: The outer ring collapsed because coordinate
                                  pairs could not be parsed.
    """

    EMPTY_INPUT = "empty_input"
    UNKNOWN_KEYWORD = "unknown_keyword"
    SYNTAX_ERROR = "syntax_error"
    INSUFFICIENT_POINTS = "insufficient_points"
    COORDINATE_PARSE_FAILURE = "coordinate_parse_failure"


class WktDecodeError(ValidationError):
    """Raised by :meth:`DecodeResult.unwrap` and by the internal parser.

    Attributes:
        reason: The :class:`DecodeFailureReason`.
        position: Character offset in the input, or ``None`` if unknown.
    """

    default_operation = "decode"
    default_code = "WKT_DECODE_FAILED"

    def __init__(
        self,
        message: str,
        *,
        reason: DecodeFailureReason,
        position: int | None = None,
    ) -> None:
        self.reason = reason
        self.position = position
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["reason"] = self.reason.value
        payload["position"] = self.position
        return payload


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Why a decode produced nothing, and where in the text."""

    reason: DecodeFailureReason
    message: str
    position: int | None = None

    def to_exception(self) -> WktDecodeError:
        return WktDecodeError(self.message, reason=self.reason, position=self.position)


@dataclass(frozen=True, slots=True)
class DecodeResult(Generic[T]):
    """Outcome of a decode: exactly one of ``value`` / ``failure`` is set."""

    value: T | None = None
    failure: DecodeFailure | None = None

    @classmethod
    def success(cls, value: T) -> DecodeResult[T]:
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        reason: DecodeFailureReason,
        message: str,
        position: int | None = None,
    ) -> DecodeResult[T]:
        return cls(failure=DecodeFailure(reason=reason, message=message, position=position))

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def reason(self) -> DecodeFailureReason | None:
        return self.failure.reason if self.failure is not None else None

    def unwrap(self) -> T:
        """Return the value or raise the failure as ``WktDecodeError``."""
        if self.failure is not None:
            raise self.failure.to_exception()
        return self.value  # type: ignore[return-value]
