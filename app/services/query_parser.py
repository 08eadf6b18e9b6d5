from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping

from app.schemas.query import (
    FIELD_CREATION_TIMESTAMP,
    NO_PAGINATION,
    PARAMETER_ASCENDING,
    PARAMETER_LIMIT,
    PARAMETER_PAGE,
    PARAMETER_SORT_BY,
    PARAMETER_START,
    Query,
    new_pagination,
)

_LOG = logging.getLogger("app.query")

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_int(raw: str | None) -> int | None:
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def parse_bool(raw: str | None) -> bool | None:
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return None


def _flatten(params: Any) -> dict[str, str]:
    """Collapse request parameters into a plain dict; the last value of a repeated key wins."""
    if params is None:
        return {}
    multi_items = getattr(params, "multi_items", None)
    if callable(multi_items):
        pairs: Iterable = multi_items()
    elif isinstance(params, Mapping):
        pairs = params.items()
    else:
        pairs = params
    values: dict[str, str] = {}
    for key, value in pairs:
        if isinstance(value, (list, tuple)):
            if not value:
                values[str(key)] = ""
                continue
            value = value[-1]
        values[str(key)] = "" if value is None else str(value)
    return values


def parse_query_parameters(params: Any, *, default_limit: int | None = None) -> Query:
    """Build a :class:`Query` from free-form request parameters.

    Malformed numeric or boolean values never raise: they fall back to their
    defaults and stay visible in ``filters`` as opaque strings. ``start`` is a
    legacy zero-based offset and is always copied into ``filters`` as well.
    """
    values = _flatten(params)
    consumed: set[str] = set()

    limit = _parse_int(values.get(PARAMETER_LIMIT))
    page = _parse_int(values.get(PARAMETER_PAGE))
    start = _parse_int(values.get(PARAMETER_START))
    if limit is not None:
        consumed.add(PARAMETER_LIMIT)
    if page is not None:
        consumed.add(PARAMETER_PAGE)

    if limit is None and page is None and start is None:
        pagination = NO_PAGINATION
    else:
        page_size = new_pagination(limit if limit is not None else 0, 0, default_limit=default_limit).limit
        if page is not None:
            offset = (max(page, 1) - 1) * page_size
        elif start is not None:
            offset = start
        else:
            offset = 0
        pagination = new_pagination(page_size, offset, default_limit=default_limit)

    sort_by = FIELD_CREATION_TIMESTAMP
    if PARAMETER_SORT_BY in values:
        sort_by = values[PARAMETER_SORT_BY] or FIELD_CREATION_TIMESTAMP
        consumed.add(PARAMETER_SORT_BY)

    ascending = parse_bool(values.get(PARAMETER_ASCENDING))
    if ascending is not None:
        consumed.add(PARAMETER_ASCENDING)
    elif PARAMETER_ASCENDING in values:
        _LOG.debug("ignoring unparsable ascending=%r", values[PARAMETER_ASCENDING])

    filters = {key: value for key, value in values.items() if key not in consumed}
    return Query(
        pagination=pagination,
        sort_by=sort_by,
        ascending=bool(ascending),
        filters=filters,
    )
