"""Pagination API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from application.services.pagination_service import PaginationService
from domain.models.pagination import PAGE_PARAM, PER_PAGE_PARAM, PaginatorConfig
from infrastructure.container import get_pagination_service

from .schemas import ErrorResponse, PaginationResponse

router = APIRouter(prefix="/pagination", tags=["Pagination"])

# Query parameters consumed by the endpoint itself and never forwarded to links.
_CONTROL_PARAMS = frozenset({"total", "url"})

# Link base path: a local path starting with a single "/", free of quotes, angle
# brackets or whitespace, since it is written into href attributes as is.
URL_PATTERN = r"""^/([^/\s"'<>`][^\s"'<>`]*)?$"""


def _link_params(request: Request, config: PaginatorConfig) -> dict[str, str | list[str]]:
    """Collect the query parameters to carry over into every page link.

    The page parameter is set per link. The default ``page``/``per_page`` names
    are dropped as well when the configuration renames them.
    """
    skipped = {config.page_param_name, PAGE_PARAM, *_CONTROL_PARAMS}
    if config.per_page_param_name != PER_PAGE_PARAM:
        skipped.add(PER_PAGE_PARAM)

    params: dict[str, str | list[str]] = {}
    for key in request.query_params.keys():
        if key in skipped:
            continue
        values = request.query_params.getlist(key)
        params[key] = values[0] if len(values) == 1 else values
    return params


@router.get(
    "",
    response_model=PaginationResponse,
    summary="Compute offset/limit and page-number links",
    responses={
        200: {"description": "Sanitised pagination values and rendered links."},
        422: {"description": "Validation error.", "model": ErrorResponse},
    },
)
async def paginate(
    request: Request,
    page: str | None = Query(None, description="Requested page; malformed values fall back to 1."),
    per_page: str | None = Query(
        None, description="Requested page size, or the unbounded sentinel (default ``all``)."
    ),
    total: int | None = Query(None, ge=0, description="Total row count reported by the caller."),
    url: str = Query(
        "/", pattern=URL_PATTERN, description="Base path for the generated page links."
    ),
    service: PaginationService = Depends(get_pagination_service),
) -> PaginationResponse:
    # ``page``/``per_page`` are declared for the OpenAPI schema only; the
    # configured parameter names are read from the raw query string.
    page_set = service.from_query(request.query_params)
    page_set = service.set_params(page_set, _link_params(request, service.config))

    if total is not None:
        page_set = service.set_total(page_set, total)

    return PaginationResponse.from_page_set(page_set, html=service.html(page_set, url))
