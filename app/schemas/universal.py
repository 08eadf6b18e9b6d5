from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class ListResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: List[Any] = []
    total_items: int = Field(default=0, alias="totalItems")


def new_list_result(items: List[Any], total: int) -> ListResult:
    return ListResult(items=list(items), total_items=total)
