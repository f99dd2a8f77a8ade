"""
Exception hierarchy for the outcome mapping engine.

Business failures travel as data (`Outcome` / `ErrorInfo`). These classes
cover only misuse of the engine itself, each with a machine-readable
`code` string.
"""
from __future__ import annotations


class OutcomeHttpError(Exception):
    """Base class for all engine-level errors."""
    code: str = "OUTCOME_HTTP_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(OutcomeHttpError, ValueError):
    code = "INVALID_ARGUMENT"

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None.")


class InvalidOutcomeStateError(OutcomeHttpError):
    code = "INVALID_OUTCOME_STATE"
