"""Application settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from domain.models.pagination import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    PAGE_PARAM,
    PER_PAGE_PARAM,
    UNBOUNDED_PARAM_VALUE,
    WINDOW_WIDTH,
    PaginatorConfig,
)


class AppSettings(BaseSettings):
    """Central configuration for the paginator service."""

    model_config = {"env_prefix": "APP_", "case_sensitive": False}

    # Paginator
    paginator_default_per_page: int = DEFAULT_PER_PAGE
    paginator_max_per_page: int = MAX_PER_PAGE
    paginator_window_width: int = WINDOW_WIDTH
    paginator_page_param: str = PAGE_PARAM
    paginator_per_page_param: str = PER_PAGE_PARAM
    paginator_allow_unbounded: bool = False
    paginator_unbounded_value: str = UNBOUNDED_PARAM_VALUE

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"

    def paginator_config(self) -> PaginatorConfig:
        return PaginatorConfig(
            default_per_page=self.paginator_default_per_page,
            max_per_page=self.paginator_max_per_page,
            window_width=self.paginator_window_width,
            page_param_name=self.paginator_page_param,
            per_page_param_name=self.paginator_per_page_param,
            allow_unbounded=self.paginator_allow_unbounded,
            unbounded_param_value=self.paginator_unbounded_value,
        )


def get_settings() -> AppSettings:
    """Return the application settings singleton."""
    return AppSettings()
