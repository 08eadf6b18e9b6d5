from __future__ import annotations

from typing import Any, Callable

from app.schemas.query import FIELD_CREATION_TIMESTAMP, FIELD_NAME
from app.schemas.resources import ObjectMeta, object_meta_of

# Returns True when ``left`` is greater than ``right`` for the given field.
CompareFunc = Callable[[Any, Any, str], bool]

# Internal field token that orders names ascending under the "greater" convention.
FIELD_NAME_ASCENDING = "!" + FIELD_NAME


def object_meta_compare(left: ObjectMeta, right: ObjectMeta, sort_by: str) -> bool:
    if sort_by == FIELD_NAME:
        return left.name > right.name
    if sort_by == FIELD_NAME_ASCENDING:
        return left.name < right.name
    if sort_by == FIELD_CREATION_TIMESTAMP:
        left_time, right_time = left.created_at, right.created_at
        if left_time == right_time:
            # keep the order stable for resources created in the same second
            return left.name > right.name
        return left_time > right_time
    return False


def default_compare() -> CompareFunc:
    def _compare(left: Any, right: Any, field: str) -> bool:
        left_meta = object_meta_of(left)
        right_meta = object_meta_of(right)
        if left_meta is None or right_meta is None:
            return False
        return object_meta_compare(left_meta, right_meta, field)

    return _compare


def name_compare() -> CompareFunc:
    """Compare by name only, ascending, whatever field was requested."""

    def _compare(left: Any, right: Any, field: str) -> bool:
        left_meta = object_meta_of(left)
        right_meta = object_meta_of(right)
        if left_meta is None or right_meta is None:
            return False
        return object_meta_compare(left_meta, right_meta, FIELD_NAME_ASCENDING)

    return _compare
