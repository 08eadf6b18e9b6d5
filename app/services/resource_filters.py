from __future__ import annotations

from typing import Any, Callable, Optional

from app.schemas.query import (
    FIELD_ANNOTATION,
    FIELD_LABEL,
    FIELD_NAME,
    FIELD_NAMES,
    FIELD_NAMESPACE,
    FIELD_OWNER_KIND,
    FIELD_OWNER_REFERENCE,
    FIELD_UID,
    Filter,
)
from app.schemas.resources import ObjectMeta, object_meta_of

FilterCallable = Callable[[Any, Filter], bool]


class FilterFunc:
    """Predicate over ``(object, filter)`` that composes with ``&`` and ``|``."""

    __slots__ = ("_func",)

    def __init__(self, func: FilterCallable):
        self._func = func

    def __call__(self, obj: Any, flt: Filter) -> bool:
        return bool(self._func(obj, flt))

    def and_(self, other: Optional[FilterCallable]) -> "FilterFunc":
        return and_filters(self, other)

    def or_(self, other: Optional[FilterCallable]) -> "FilterFunc":
        return or_filters(self, other)

    __and__ = and_
    __or__ = or_

    def __rand__(self, other: Optional[FilterCallable]) -> "FilterFunc":
        return and_filters(other, self)

    def __ror__(self, other: Optional[FilterCallable]) -> "FilterFunc":
        return or_filters(other, self)


ALWAYS_TRUE = FilterFunc(lambda obj, flt: True)
ALWAYS_FALSE = FilterFunc(lambda obj, flt: False)


def and_filters(*funcs: Optional[FilterCallable]) -> FilterFunc:
    """Logical AND of the given predicates; ``None`` acts as always-true."""
    operands = [f if f is not None else ALWAYS_TRUE for f in funcs]

    def _and(obj: Any, flt: Filter) -> bool:
        return all(f(obj, flt) for f in operands)

    return FilterFunc(_and)


def or_filters(*funcs: Optional[FilterCallable]) -> FilterFunc:
    """Logical OR of the given predicates; ``None`` acts as always-false."""
    operands = [f if f is not None else ALWAYS_FALSE for f in funcs]

    def _or(obj: Any, flt: Filter) -> bool:
        return any(f(obj, flt) for f in operands)

    return FilterFunc(_or)


def label_match(labels: dict[str, str], clause: str) -> bool:
    fields = clause.split("=", 1)
    opposite = False
    if len(fields) == 2:
        key, value = fields
        if key.endswith("!"):
            key = key[:-1]
            opposite = True
    else:
        key, value = fields[0], "*"
    if key not in labels:
        # "k!=v" only holds for a present key carrying another value.
        return False
    actual = labels[key]
    if opposite:
        return actual != value
    return value == "*" or actual == value


def labels_match(labels: dict[str, str], expression: str) -> bool:
    """Match ``labels`` against comma-separated clauses, all of which must hold.

    Clauses look like ``key=value``, ``key!=value`` or a bare ``key``; the value
    ``*`` accepts any value of a present key.
    """
    labels = labels or {}
    for clause in expression.split(","):
        if not label_match(labels, clause.strip()):
            return False
    return True


def _match_names(meta: ObjectMeta, value: str) -> bool:
    return any(meta.name == name for name in value.split(","))


def _match_owner_reference(meta: ObjectMeta, value: str) -> bool:
    return any(ref.uid == value for ref in meta.owner_references)


def _match_owner_kind(meta: ObjectMeta, value: str) -> bool:
    return any(ref.kind == value for ref in meta.owner_references)


_META_FILTERS: dict[str, Callable[[ObjectMeta, str], bool]] = {
    FIELD_NAMES: _match_names,
    FIELD_NAME: lambda meta, value: value in meta.name,
    FIELD_UID: lambda meta, value: meta.uid == value,
    FIELD_NAMESPACE: lambda meta, value: meta.namespace == value,
    FIELD_OWNER_REFERENCE: _match_owner_reference,
    FIELD_OWNER_KIND: _match_owner_kind,
    FIELD_LABEL: lambda meta, value: labels_match(meta.labels, value),
    FIELD_ANNOTATION: lambda meta, value: labels_match(meta.annotations, value),
}


def object_meta_filter(meta: ObjectMeta, flt: Filter) -> bool:
    matcher = _META_FILTERS.get(flt.field)
    if matcher is None:
        # Unknown fields never exclude anything.
        return True
    return matcher(meta, flt.value)


def default_filter() -> FilterFunc:
    def _filter(obj: Any, flt: Filter) -> bool:
        meta = object_meta_of(obj)
        if meta is None:
            return False
        return object_meta_filter(meta, flt)

    return FilterFunc(_filter)
