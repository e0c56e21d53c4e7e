from __future__ import annotations

from dataclasses import replace

from domain.models.pagination import PageSet, PaginatorConfig


def apply_total(page_set: PageSet, total: int, config: PaginatorConfig) -> PageSet:
    """Return a copy of *page_set* with the total-derived fields filled in.

    The window holds roughly ``config.window_width`` page numbers centred on
    the current page. When the first or last page falls outside the window it
    is flagged as pinned so it can be rendered separately.
    """
    result = replace(
        page_set,
        total=total,
        total_pages=0,
        pinned_first=False,
        pinned_last=False,
        page_numbers=[],
        params=dict(page_set.params),
    )

    # A single page (or an unbounded one) needs no window.
    if total <= result.per_page or result.per_page == 0:
        result.offset = 0
        result.page = 1
        return result

    total_pages = -(-total // result.per_page)
    result.total_pages = total_pages
    half = config.window_width // 2

    if result.page > total_pages:
        result.page = total_pages
        result.offset = (total_pages - 1) * result.per_page

    page = result.page
    first = max(page - half, 1)
    last = min(page + half, total_pages)

    if total_pages > config.window_width:
        # Front first, then back; the back adjustment sees the new ``last``.
        if last < total_pages and page <= half:
            last = first + config.window_width - 1
        if page > total_pages - half:
            first = last - config.window_width

    result.pinned_first = first != 1
    result.pinned_last = last != total_pages
    result.page_numbers = list(range(first, last + 1))
    return result
