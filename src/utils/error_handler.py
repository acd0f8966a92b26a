"""Translation of Supabase/Postgres errors into API error codes.

Resolvers call ``handle_error`` right after catching a persistence error. The
raw message is matched against known Postgres wording, in order, first match
wins:

    "row-level security policy"       -> PERMISSION_DENIED
    "violates foreign key constraint" -> INVALID_REFERENCE
    "violates unique constraint"      -> DUPLICATE_RECORD
    anything else                     -> INTERNAL_ERROR

Matching is plain case-sensitive substring containment against the message
text the database produces today. A driver or server upgrade that rewords
these messages silently moves errors to INTERNAL_ERROR.
"""

from contextlib import contextmanager
from typing import Any, Iterator, NoReturn

from src.models.raw_error import RawError
from src.utils.errors import ClassifiedError, ErrorCode
from src.utils.logging import get_structured_logger, sanitize_message_text

logger = get_structured_logger(__name__)

RLS_VIOLATION = "row-level security policy"
FOREIGN_KEY_VIOLATION = "violates foreign key constraint"
UNIQUE_VIOLATION = "violates unique constraint"

# Order matters
CLASSIFICATION_RULES = (
    (
        RLS_VIOLATION,
        ErrorCode.PERMISSION_DENIED,
        "Permission denied: you don't have access to {operation}. "
        "Please check your authentication or permissions.",
    ),
    (
        FOREIGN_KEY_VIOLATION,
        ErrorCode.INVALID_REFERENCE,
        "Invalid reference: one of the referenced records does not exist.",
    ),
    (
        UNIQUE_VIOLATION,
        ErrorCode.DUPLICATE_RECORD,
        "Duplicate record: a record with the same unique field already exists.",
    ),
)

FALLBACK_MESSAGE = "An error occurred while {operation}."


def classify_error(raw_error: Any, operation_context: str) -> ClassifiedError:
    """
    Build the ClassifiedError for a raw persistence error without raising it.

    Args:
        raw_error: Whatever the resolver caught. Only its message is inspected.
        operation_context: What was being attempted, e.g. "creating tag".

    Returns:
        The classified error. Classification is total: unmatched messages
        (including missing ones) become INTERNAL_ERROR.
    """
    raw = RawError.from_any(raw_error)
    message = raw.text

    for marker, code, template in CLASSIFICATION_RULES:
        if marker in message:
            break
    else:
        code, template = ErrorCode.INTERNAL_ERROR, FALLBACK_MESSAGE

    return ClassifiedError(
        code=code,
        user_message=template.format(operation=operation_context),
        operation_context=operation_context,
        original_message=message,
        details=raw.details,
    )


def _describe(raw_error: Any) -> str:
    try:
        return sanitize_message_text(repr(raw_error))
    except Exception:
        return f"<unrepresentable {type(raw_error).__name__}>"


def handle_error(raw_error: Any, operation_context: str) -> NoReturn:
    """
    Log a persistence error and raise it as a ClassifiedError.

    Never returns. Call it only from code that is already handling a failure.

    Raises:
        ClassifiedError: always.
    """
    logger.error(
        f"Error while {operation_context}",
        operation=operation_context,
        error_type=type(raw_error).__name__,
        raw_error=_describe(raw_error),
    )

    raw = RawError.from_any(raw_error)
    classified = classify_error(raw, operation_context)

    logger.info(
        "Classified persistence error",
        operation=operation_context,
        error_code=classified.code.value,
        db_code=raw.code,
        db_hint=sanitize_message_text(raw.hint),
        original_error=sanitize_message_text(classified.original_message),
    )

    if isinstance(raw_error, BaseException):
        raise classified from raw_error
    raise classified


@contextmanager
def error_boundary(operation_context: str) -> Iterator[None]:
    """
    Classify any exception raised inside the block.

    Usage:
        with error_boundary("creating tag"):
            client.table("tags").insert(tag).execute()

    A ClassifiedError raised inside the block is re-raised as is.
    """
    try:
        yield
    except ClassifiedError:
        raise
    except Exception as e:
        handle_error(e, operation_context)
