from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PER_PAGE: int = 10
MAX_PER_PAGE: int = 50
WINDOW_WIDTH: int = 10
PAGE_PARAM: str = "page"
PER_PAGE_PARAM: str = "per_page"
UNBOUNDED_PARAM_VALUE: str = "all"


@dataclass(frozen=True)
class PaginatorConfig:
    """Immutable paginator options shared across requests.

    Values are taken as configured; ``max_per_page = 0`` and similar are the
    caller's responsibility.
    """

    default_per_page: int = DEFAULT_PER_PAGE
    max_per_page: int = MAX_PER_PAGE
    window_width: int = WINDOW_WIDTH
    page_param_name: str = PAGE_PARAM
    per_page_param_name: str = PER_PAGE_PARAM
    allow_unbounded: bool = False
    unbounded_param_value: str = UNBOUNDED_PARAM_VALUE

    def __post_init__(self) -> None:
        # frozen=True requires object.__setattr__ for validation fixups
        if not self.unbounded_param_value:
            object.__setattr__(self, "unbounded_param_value", UNBOUNDED_PARAM_VALUE)


def default_config() -> PaginatorConfig:
    """Return a configuration with the built-in defaults, ignoring the environment."""
    return PaginatorConfig()


@dataclass
class PageSet:
    """Pagination values for a single query.

    ``per_page == 0`` means unbounded. ``total`` and everything after it are
    filled in once the caller reports the row count.
    """

    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    offset: int = 0
    limit: int = DEFAULT_PER_PAGE
    total: int = 0
    total_pages: int = 0
    pinned_first: bool = False
    pinned_last: bool = False
    page_numbers: list[int] = field(default_factory=list)
    params: dict[str, str | list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Externally visible fields, suitable for an API response."""
        return {
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "total": self.total,
            "params": dict(self.params),
        }
