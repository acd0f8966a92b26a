"""Raw storage error model."""

from collections.abc import Mapping
from typing import Any, Optional
from pydantic import BaseModel, Field


_MISSING = object()


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _read_attr(error: Any, name: str) -> Any:
    """Read an attribute; one whose getter raises reads as None."""
    try:
        return getattr(error, name, _MISSING)
    except Exception:
        return None


def _exception_text(error: BaseException) -> Optional[str]:
    try:
        return str(error)
    except Exception:
        return None


class RawError(BaseModel):
    """An error caught from the persistence layer.

    Only ``message`` is used for classification. The PostgREST ``code``,
    ``details`` and ``hint`` fields are kept for diagnostics.
    """
    message: Optional[str] = Field(None, description="Raw error text, if any")
    code: Optional[str] = Field(None, description="Postgres/PostgREST error code")
    details: Optional[str] = Field(None, description="Postgres error detail")
    hint: Optional[str] = Field(None, description="Postgres error hint")

    @property
    def text(self) -> str:
        """Message text, empty when absent."""
        return self.message or ""

    @classmethod
    def from_any(cls, error: Any) -> "RawError":
        """
        Normalize whatever a resolver caught into a RawError.

        Accepts a mapping, an object with a ``message`` attribute (such as
        postgrest's APIError), a plain exception, or None.
        """
        if error is None:
            return cls()

        if isinstance(error, RawError):
            return error

        if isinstance(error, Mapping):
            return cls(
                message=_as_text(error.get("message")),
                code=_as_text(error.get("code")),
                details=_as_text(error.get("details")),
                hint=_as_text(error.get("hint")),
            )

        message = _read_attr(error, "message")
        if message is _MISSING and isinstance(error, BaseException):
            message = _exception_text(error)

        return cls(
            message=_as_text(message),
            code=_as_text(_read_attr(error, "code")),
            details=_as_text(_read_attr(error, "details")),
            hint=_as_text(_read_attr(error, "hint")),
        )
