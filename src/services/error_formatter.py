"""GraphQL error serialization for classified errors."""

import logging
from typing import Iterable, Optional, Sequence, Union

from src.models.graphql_error import GraphQLErrorExtensions, GraphQLErrorPayload
from src.utils.errors import ClassifiedError, ErrorCode

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def format_error(
    error: BaseException,
    path: Optional[Sequence[Union[str, int]]] = None
) -> dict:
    """
    Convert an exception raised by a resolver into a GraphQL error entry.

    Classified errors expose their user message and code, with the raw
    database message under ``extensions.originalError``. Anything else is
    reported as a generic INTERNAL_ERROR without its text.
    """
    if isinstance(error, ClassifiedError):
        payload = GraphQLErrorPayload(
            message=error.user_message,
            path=list(path) if path is not None else None,
            extensions=GraphQLErrorExtensions(
                code=error.code.value,
                original_error=error.original_message,
                details=error.details,
            ),
        )
        return payload.to_dict()

    logger.error(
        f"Unclassified error reached the API boundary: {type(error).__name__}",
        exc_info=(type(error), error, error.__traceback__),
    )
    payload = GraphQLErrorPayload(
        message=GENERIC_ERROR_MESSAGE,
        path=list(path) if path is not None else None,
        extensions=GraphQLErrorExtensions(code=ErrorCode.INTERNAL_ERROR.value),
    )
    return payload.to_dict()


def build_error_response(errors: Iterable[BaseException]) -> dict:
    """Build a GraphQL response body for a failed operation."""
    return {
        "data": None,
        "errors": [format_error(error) for error in errors],
    }
