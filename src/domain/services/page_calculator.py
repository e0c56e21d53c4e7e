"""Turns untrusted page / per-page input into a sanitised :class:`PageSet`.

Nothing here raises: missing, malformed or out-of-range values are clamped
to the configured defaults and limits.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from domain.models.pagination import PageSet, PaginatorConfig

UNBOUNDED_REQUEST: int = -1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def _first_value(params: Mapping[str, Any], key: str) -> str:
    if hasattr(params, "getlist"):
        value = params.getlist(key)
    else:
        value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return ""
    return str(value)


def _parse_int(raw: str) -> int:
    if not _DECIMAL_RE.fullmatch(raw):
        return 0
    return int(raw)


def build(page: int, per_page: int, config: PaginatorConfig) -> PageSet:
    if per_page < 0 and config.allow_unbounded:
        per_page = 0
    elif per_page < 1:
        per_page = config.default_per_page
    elif not config.allow_unbounded and per_page > config.max_per_page:
        per_page = config.max_per_page

    if page < 1:
        page = 1

    return PageSet(
        page=page,
        per_page=per_page,
        offset=(page - 1) * per_page,
        limit=per_page,
    )


def from_raw(params: Mapping[str, Any], config: PaginatorConfig) -> PageSet:
    """Build a :class:`PageSet` from query-string style key/value pairs.

    List values (``parse_qs`` output) and multi-dicts contribute their first
    value. A per-page value equal to ``config.unbounded_param_value`` asks for
    all rows.
    """
    raw_page = _first_value(params, config.page_param_name)
    raw_per_page = _first_value(params, config.per_page_param_name)

    page = _parse_int(raw_page)
    per_page = _parse_int(raw_per_page)
    if raw_per_page == config.unbounded_param_value:
        per_page = UNBOUNDED_REQUEST

    return build(page, per_page, config)
