"""Dependency injection container for the paginator service.

Builds the paginator configuration from settings once and exposes factory
functions suitable for FastAPI's ``Depends()`` system.
"""

from __future__ import annotations

import logging

from application.services.pagination_service import PaginationService
from domain.models.pagination import PaginatorConfig
from infrastructure.settings import AppSettings, get_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns all service instances."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or get_settings()

        self.paginator_config: PaginatorConfig = self._settings.paginator_config()
        self.pagination_service = PaginationService(self.paginator_config)

        logger.info(
            "ServiceContainer initialized (per_page=%d max=%d window=%d unbounded=%s)",
            self.paginator_config.default_per_page,
            self.paginator_config.max_per_page,
            self.paginator_config.window_width,
            self.paginator_config.allow_unbounded,
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global _container
    _container = None


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------


def get_pagination_service() -> PaginationService:
    return get_container().pagination_service
