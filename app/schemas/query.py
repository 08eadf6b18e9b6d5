from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.core.config import settings

# Request parameters understood by the query parser.
PARAMETER_PAGE = "page"
PARAMETER_LIMIT = "limit"
PARAMETER_START = "start"
PARAMETER_SORT_BY = "sortBy"
PARAMETER_ASCENDING = "ascending"

# Field identifiers used by filters and comparators.
FIELD_NAME = "name"
FIELD_NAMES = "names"
FIELD_UID = "uid"
FIELD_NAMESPACE = "namespace"
FIELD_CREATION_TIMESTAMP = "creationTimestamp"
FIELD_OWNER_REFERENCE = "ownerReference"
FIELD_OWNER_KIND = "ownerKind"
FIELD_LABEL = "label"
FIELD_ANNOTATION = "annotation"
FIELD_STATUS = "status"

UNLIMITED = -1


class Pagination(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: int
    offset: int = 0

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        offset = data.get("offset", 0)
        if isinstance(offset, int) and offset < 0:
            data["offset"] = 0
        limit = data.get("limit")
        if isinstance(limit, int) and limit <= 0 and limit != UNLIMITED:
            data["limit"] = settings.list_default_limit
        return data

    @property
    def unlimited(self) -> bool:
        return self.limit == UNLIMITED

    def get_valid_pagination(self, total: int) -> tuple[int, int]:
        """Return the half-open ``[start, end)`` window of this page inside ``total`` items.

        An offset past the end yields ``(0, 0)``; an offset equal to ``total``
        falls through to the regular branch and yields ``(offset, offset)``.
        """
        if self.unlimited:
            return 0, total
        if self.offset > total:
            return 0, 0
        return self.offset, min(self.offset + self.limit, total)


# Returns every item; the only pagination value that means "no restriction".
NO_PAGINATION = Pagination(limit=UNLIMITED, offset=0)


def new_pagination(limit: int, offset: int, *, default_limit: int | None = None) -> Pagination:
    if offset < 0:
        offset = 0
    if limit <= 0:
        limit = default_limit if default_limit and default_limit > 0 else settings.list_default_limit
    return Pagination(limit=limit, offset=offset)


class Filter(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    value: str = ""


class Query(BaseModel):
    model_config = ConfigDict(frozen=True)

    pagination: Pagination = NO_PAGINATION
    sort_by: str = FIELD_CREATION_TIMESTAMP
    ascending: bool = False
    filters: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("filters")
    @classmethod
    def _read_only_filters(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))
