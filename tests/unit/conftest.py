"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.pagination_service import PaginationService
from domain.models.pagination import PaginatorConfig


@pytest.fixture
def config() -> PaginatorConfig:
    return PaginatorConfig(
        default_per_page=10,
        max_per_page=50,
        window_width=10,
        page_param_name="page",
        per_page_param_name="per_page",
        allow_unbounded=False,
        unbounded_param_value="all",
    )


@pytest.fixture
def unbounded_config(config: PaginatorConfig) -> PaginatorConfig:
    return PaginatorConfig(
        default_per_page=config.default_per_page,
        max_per_page=config.max_per_page,
        window_width=config.window_width,
        allow_unbounded=True,
    )


@pytest.fixture
def service(config: PaginatorConfig) -> PaginationService:
    return PaginationService(config)
