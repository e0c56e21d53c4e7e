"""Application service wrapping the paginator domain functions.

``PaginationService`` owns a single :class:`PaginatorConfig` so callers in the
presentation layer never have to thread configuration through by hand.
Every method is pure with respect to its inputs and never raises on bad
user input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from domain.models.pagination import PageSet, PaginatorConfig
from domain.services import link_renderer, page_calculator, page_window
from domain.services.link_renderer import QueryParams

logger = logging.getLogger(__name__)


class PaginationService:
    """Builds, windows and renders page sets for one configuration."""

    def __init__(self, config: PaginatorConfig | None = None) -> None:
        self._config = config or PaginatorConfig()

    @property
    def config(self) -> PaginatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def new(self, page: int, per_page: int) -> PageSet:
        page_set = page_calculator.build(page, per_page, self._config)
        self._log_clamping(page, per_page, page_set)
        return page_set

    def from_query(self, params: Mapping[str, Any]) -> PageSet:
        """Build a page set from raw query parameters (e.g. ``request.query_params``)."""
        page_set = page_calculator.from_raw(params, self._config)
        logger.debug(
            "Page set parsed from query: page=%d per_page=%d offset=%d",
            page_set.page,
            page_set.per_page,
            page_set.offset,
        )
        return page_set

    # ------------------------------------------------------------------
    # Totals / params
    # ------------------------------------------------------------------

    def set_total(self, page_set: PageSet, total: int) -> PageSet:
        result = page_window.apply_total(page_set, total, self._config)
        if result.page != page_set.page:
            logger.debug(
                "Page %d moved to %d for total=%d", page_set.page, result.page, total
            )
        return result

    def set_params(self, page_set: PageSet, params: QueryParams) -> PageSet:
        """Attach extra query params to be appended to every page URL."""
        return replace(page_set, params=dict(params))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def html(
        self,
        page_set: PageSet,
        url: str,
        query_params: QueryParams | None = None,
    ) -> str:
        return link_renderer.render(page_set, self._config, url, query_params)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _log_clamping(page: int, per_page: int, page_set: PageSet) -> None:
        if per_page != page_set.per_page:
            logger.debug("per_page %d clamped to %d", per_page, page_set.per_page)
        if page != page_set.page:
            logger.debug("page %d clamped to %d", page, page_set.page)
