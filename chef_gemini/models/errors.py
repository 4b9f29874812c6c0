"""Error taxonomy for the recipe generation pipeline.

- RequestValidationError: per-field input errors, shown inline, never change pipeline state
- ModelClientError: network, HTTP status or envelope-shape failure of the Gemini call
- DecodeError: model text is not JSON (MALFORMED) or not a Recipe (SCHEMA_MISMATCH)
- SubmissionInProgressError: a submission arrived while another one is loading
"""

from enum import Enum


class FailureKind(str, Enum):
    """Coarse failure category kept in the Failed pipeline state."""

    CLIENT = "client"
    MALFORMED = "malformed"
    SCHEMA_MISMATCH = "schema_mismatch"
    UNEXPECTED = "unexpected"


class RequestValidationError(ValueError):
    """Raised when raw form input does not satisfy the request schema.

    Attributes:
        field_errors: Mapping from field name to a human-readable message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in self.field_errors.items()))


class ModelClientError(Exception):
    """Raised when the generative model call fails or its envelope is unusable."""

    kind = FailureKind.CLIENT

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class DecodeError(Exception):
    """Raised when the model text cannot be decoded into a Recipe."""

    def __init__(self, kind: FailureKind, message: str) -> None:
        if kind not in (FailureKind.MALFORMED, FailureKind.SCHEMA_MISMATCH):
            raise ValueError(f"DecodeError kind must be MALFORMED or SCHEMA_MISMATCH, got: {kind}")
        self.kind = kind
        super().__init__(message)


class SubmissionInProgressError(RuntimeError):
    """Raised when submit() is called while a previous submission is still loading."""
