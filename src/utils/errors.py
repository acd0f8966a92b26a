"""Error types for the brief management API."""

from enum import Enum
from typing import Optional


class BriefManagementError(Exception):
    """Base exception for the brief management backend."""
    pass


class SupabaseError(BriefManagementError):
    """Supabase client configuration error."""
    pass


class ErrorCode(str, Enum):
    """Error codes exposed to API clients under ``extensions.code``."""
    PERMISSION_DENIED = "PERMISSION_DENIED"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ClassifiedError(BriefManagementError):
    """A storage error translated into the API error taxonomy.

    ``user_message`` is safe to show to end users. ``original_message`` and
    ``details`` are raw database diagnostics meant for logs only.
    """

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        operation_context: str,
        original_message: str = "",
        details: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.code = code
        self.user_message = user_message
        self.operation_context = operation_context
        self.original_message = original_message
        self.details = details

    def _key(self) -> tuple:
        return (
            self.code,
            self.user_message,
            self.operation_context,
            self.original_message,
            self.details,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifiedError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ClassifiedError(code={self.code.value!r}, "
            f"operation_context={self.operation_context!r})"
        )
