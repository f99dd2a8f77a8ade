"""
Protocol-agnostic outcome envelope produced by business code.

An `Outcome` is either a success carrying a value or a failure carrying
zero or more classified `ErrorInfo` records. `EndpointOutcome` pairs it
with per-request transport hints.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from outcome_http.core.errors import InvalidOutcomeStateError
from outcome_http.schemas.problem import ProblemDescription

T = TypeVar("T")


class ErrorCategory(str, enum.Enum):
    """Closed classification driving the default HTTP status and title."""
    validation = "validation"
    not_found = "not_found"
    conflict = "conflict"
    unauthorized = "unauthorized"
    forbidden = "forbidden"
    internal_server_error = "internal_server_error"
    timeout = "timeout"
    service_unavailable = "service_unavailable"
    too_many_requests = "too_many_requests"
    concurrency = "concurrency"
    problem_details = "problem_details"
    general = "general"


class ErrorInfo(BaseModel):
    """One classified failure, created where the failure happened. Read-only."""
    model_config = ConfigDict(frozen=True)

    category: ErrorCategory
    code: str = ""
    message: str = ""
    detail: Optional[str] = None
    inner_errors: tuple[ErrorInfo, ...] = ()
    extensions: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("extensions", mode="after")
    @classmethod
    def freeze_extensions(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @field_serializer("extensions")
    def serialize_extensions(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return dict(v)

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        return cls(
            category=ErrorCategory.internal_server_error,
            code=type(exc).__name__,
            message=str(exc) or "An unexpected error occurred.",
        )


class Unit:
    """Value of a successful outcome that carries no payload."""
    _instance: Optional[Unit] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()


class Outcome(Generic[T]):
    """Success value or list of errors. Never both."""

    __slots__ = ("_is_success", "_value", "_errors")

    def __init__(self, is_success: bool, value: Any = None, errors: Optional[list[ErrorInfo]] = None):
        self._is_success = is_success
        self._value = value if is_success else None
        self._errors: tuple[ErrorInfo, ...] = () if is_success else tuple(errors or ())

    @classmethod
    def success(cls, value: Any = UNIT) -> Outcome[Any]:
        return cls(True, value=value)

    @classmethod
    def failure(cls, *errors: ErrorInfo) -> Outcome[Any]:
        return cls(False, errors=list(errors))

    @classmethod
    def capture(cls, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome[Any]:
        """
        Run `fn` and wrap its return value in a success.
        Any exception becomes a failure with a single internal-server-error.
        """
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            return cls.failure(ErrorInfo.from_exception(exc))
        if isinstance(result, Outcome):
            return result
        return cls.success(result)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def value(self) -> T:
        if not self._is_success:
            raise InvalidOutcomeStateError("Cannot read the value of a failed outcome.")
        return self._value

    @property
    def errors(self) -> tuple[ErrorInfo, ...]:
        return self._errors

    def __repr__(self) -> str:
        if self._is_success:
            return f"Outcome.success({self._value!r})"
        return f"Outcome.failure({len(self._errors)} error(s))"


@dataclass(frozen=True)
class TransportMetadata:
    """Per-outcome transport hints supplied at the HTTP boundary."""
    status_override: Optional[int] = None
    precomputed_problem: Optional[ProblemDescription] = None


@dataclass(frozen=True)
class EndpointOutcome(Generic[T]):
    outcome: Outcome[T]
    transport: TransportMetadata = field(default_factory=TransportMetadata)

    @classmethod
    def of(
        cls,
        outcome: Outcome[Any],
        status: Optional[int] = None,
        problem: Optional[ProblemDescription] = None,
    ) -> EndpointOutcome[Any]:
        return cls(outcome, TransportMetadata(status_override=status, precomputed_problem=problem))
