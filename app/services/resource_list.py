from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Optional, Protocol

from app.schemas.query import Filter, Query
from app.schemas.resources import object_meta_of
from app.schemas.universal import ListResult, new_list_result
from app.services.resource_compare import CompareFunc, default_compare
from app.services.resource_filters import FilterCallable, default_filter

_LOG = logging.getLogger("app.resource_list")

TransformFunc = Callable[[Any], Any]


def no_transform() -> TransformFunc:
    """Keep objects as they are."""
    return lambda obj: obj


class ListHandler(Protocol):
    def comparator(self) -> Optional[CompareFunc]:
        ...

    def filter(self) -> Optional[FilterCallable]:
        ...

    def transformer(self) -> Optional[TransformFunc]:
        ...


class DefaultListHandler:
    def comparator(self) -> CompareFunc:
        return default_compare()

    def filter(self) -> FilterCallable:
        return default_filter()

    def transformer(self) -> TransformFunc:
        return no_transform()


def _sort_key(compare: CompareFunc, field: str, ascending: bool):
    def _cmp(left: Any, right: Any) -> int:
        if ascending:
            left, right = right, left
        if compare(left, right, field):
            return -1
        if compare(right, left, field):
            return 1
        return 0

    return cmp_to_key(_cmp)


def _apply_transforms(obj: Any, transforms: list[TransformFunc]) -> Any:
    transformed = obj
    for transform in transforms:
        transformed = transform(obj)
        # Domain objects feed the next transform; projections do not.
        if object_meta_of(transformed) is not None:
            obj = transformed
    return transformed


def default_list(
    objects: Iterable[Any],
    query: Query,
    compare: Optional[CompareFunc] = None,
    filter_func: Optional[FilterCallable] = None,
    *transforms: Optional[TransformFunc],
) -> ListResult:
    """Filter, sort, paginate and transform ``objects`` according to ``query``.

    Every filter in ``query.filters`` must pass for an object to be kept.
    ``total_items`` counts the filtered objects before pagination. Errors
    raised by the supplied callables propagate to the caller.
    """
    filtered = []
    for obj in objects:
        if obj is None:
            continue
        if filter_func is not None and not all(
            filter_func(obj, Filter(field=field, value=value)) for field, value in query.filters.items()
        ):
            continue
        filtered.append(obj)

    if compare is not None:
        filtered.sort(key=_sort_key(compare, query.sort_by, query.ascending))

    total = len(filtered)
    start, end = query.pagination.get_valid_pagination(total)

    chain = [t for t in transforms if t is not None] or [no_transform()]
    items = [_apply_transforms(obj, chain) for obj in filtered[start:end]]
    _LOG.debug(
        "listed %d of %d objects (window %d:%d, sort_by=%s, ascending=%s)",
        len(items),
        total,
        start,
        end,
        query.sort_by,
        query.ascending,
    )
    return new_list_result(items, total)


def to_list_result(objects: Iterable[Any], query: Query, handler: Optional[ListHandler] = None) -> ListResult:
    if handler is None:
        handler = DefaultListHandler()
    return default_list(objects, query, handler.comparator(), handler.filter(), handler.transformer())
