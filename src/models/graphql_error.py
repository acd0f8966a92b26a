"""GraphQL error response models."""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class GraphQLErrorExtensions(BaseModel):
    """The ``extensions`` object of a GraphQL error."""
    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., description="Machine-readable error code")
    original_error: Optional[str] = Field(
        None,
        alias="originalError",
        description="Raw database message for diagnostic consumers, never for display"
    )
    details: Optional[str] = Field(None, description="Raw database detail, if any")


class GraphQLErrorPayload(BaseModel):
    """A single entry of a GraphQL response's ``errors`` list."""
    message: str = Field(..., description="User-facing error message")
    path: Optional[list[Union[str, int]]] = Field(
        None,
        description="Path of the field that failed, if known"
    )
    extensions: GraphQLErrorExtensions

    def to_dict(self) -> dict:
        """Serialize with GraphQL field names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
