"""
Pydantic v2 response schemas for the paginator API.

Error responses follow RFC 9457 Problem Details.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.models.pagination import PageSet

# ---------------------------------------------------------------------------
# Base / shared
# ---------------------------------------------------------------------------


class _SnakeModel(BaseModel):
    """Base model: snake_case field names, populated from attributes."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={"$schema": "https://json-schema.org/draft/2020-12/schema"},
    )


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_SnakeModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.paginator.example/problems/validation-error"],
    )
    title: str = Field(
        ...,
        description="A short, human-readable summary of the problem type.",
        examples=["Validation Error"],
    )
    status: int = Field(
        ...,
        description="The HTTP status code.",
        examples=[422],
    )
    detail: str = Field(
        ...,
        description="A human-readable explanation specific to this occurrence.",
        examples=["The request body or parameters failed validation."],
    )
    instance: str | None = Field(
        default=None,
        description="A URI reference that identifies the specific occurrence.",
        examples=["/api/v1/pagination"],
    )
    errors: list[dict[str, Any]] | None = Field(
        default=None,
        description="Validation error details (when status is 422).",
    )


# ---------------------------------------------------------------------------
# Pagination schemas
# ---------------------------------------------------------------------------


class PaginationMeta(_SnakeModel):
    """Serialisable pagination values, safe to embed in any list response."""

    page: int = Field(..., ge=1, description="Current page number (1-indexed).", examples=[2])
    per_page: int = Field(..., ge=0, description="Items per page; 0 means unbounded.", examples=[10])
    total_pages: int = Field(default=0, ge=0, description="Total number of pages.", examples=[12])
    total: int = Field(default=0, ge=0, description="Total number of items.", examples=[118])
    params: dict[str, str | list[str]] = Field(
        default_factory=dict,
        description="Extra query parameters appended to every page link.",
    )


class PaginationResponse(_SnakeModel):
    """Full paginator output for one request."""

    pagination: PaginationMeta
    offset: int = Field(..., ge=0, description="Rows to skip in the data query.")
    limit: int = Field(..., ge=0, description="Rows to return; 0 means no limit.")
    page_numbers: list[int] = Field(
        default_factory=list,
        description="Sliding window of page numbers to display.",
    )
    pinned_first: bool = Field(
        default=False, description="Page 1 lies outside the window and is shown separately."
    )
    pinned_last: bool = Field(
        default=False, description="The last page lies outside the window and is shown separately."
    )
    html: str = Field(default="", description="Rendered page-number anchors.")

    @classmethod
    def from_page_set(cls, page_set: PageSet, html: str = "") -> PaginationResponse:
        return cls(
            pagination=PaginationMeta(**page_set.to_dict()),
            offset=page_set.offset,
            limit=page_set.limit,
            page_numbers=list(page_set.page_numbers),
            pinned_first=page_set.pinned_first,
            pinned_last=page_set.pinned_last,
            html=html,
        )
