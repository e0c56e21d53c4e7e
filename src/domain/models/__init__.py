from domain.models.pagination import PageSet, PaginatorConfig, default_config

__all__ = [
    "PageSet",
    "PaginatorConfig",
    "default_config",
]
