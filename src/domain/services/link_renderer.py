"""HTML page-number links for a windowed :class:`PageSet`.

Produces a flat string of anchors in the order: pinned first page and its
ellipsis, the window, then the ellipsis and pinned last page. Only query
values are encoded; markup and class names are fixed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

from domain.models.pagination import PageSet, PaginatorConfig

CLASS_FIRST = "pg-page-first"
CLASS_ELLIPSIS_FIRST = "pg-page-ellipsis-first"
CLASS_PAGE = "pg-page"
CLASS_SELECTED = "pg-page-selected"
CLASS_ELLIPSIS_LAST = "pg-page-ellipsis-last"
CLASS_LAST = "pg-page-last"

QueryParams = Mapping[str, str | Sequence[str]]


def page_url(
    url_template: str,
    page: int,
    config: PaginatorConfig,
    extra_params: QueryParams | None = None,
) -> str:
    # Fresh dict per link; the caller's mapping is left untouched. Keys are
    # encoded in sorted order.
    query: dict[str, str | Sequence[str]] = dict(extra_params or {})
    query[config.page_param_name] = str(page)
    return url_template + "?" + urlencode(sorted(query.items()), doseq=True)


def _anchor(css_class: str, href: str, label: int) -> str:
    return f'<a class="{css_class}" href="{href}">{label}</a> '


def render(
    page_set: PageSet,
    config: PaginatorConfig,
    url_template: str,
    extra_params: QueryParams | None = None,
) -> str:
    """Render page-number anchors for *page_set*.

    *extra_params* are appended to every link with the page parameter
    overwritten per link. When omitted, the params attached to the set are
    used.
    """
    if extra_params is None:
        extra_params = page_set.params

    parts: list[str] = []

    if page_set.pinned_first:
        parts.append(_anchor(CLASS_FIRST, page_url(url_template, 1, config, extra_params), 1))
        parts.append(f'<span class="{CLASS_ELLIPSIS_FIRST}">...</span> ')

    for number in page_set.page_numbers:
        css_class = CLASS_PAGE
        if number == page_set.page:
            css_class = f"{CLASS_PAGE} {CLASS_SELECTED}"
        parts.append(
            _anchor(css_class, page_url(url_template, number, config, extra_params), number)
        )

    if page_set.pinned_last:
        last = page_set.total_pages
        parts.append(f'<span class="{CLASS_ELLIPSIS_LAST}">...</span> ')
        parts.append(_anchor(CLASS_LAST, page_url(url_template, last, config, extra_params), last))

    return "".join(parts)
