from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core.deps import get_query
from app.schemas.query import Query
from app.schemas.universal import ListResult
from app.services.query_parser import parse_bool
from app.services.resource_list import ListHandler, to_list_result

# Fetches the objects of one namespace from whatever backs the API.
ObjectProvider = Callable[[str], Iterable[Any]]


@dataclass
class ResourceKind:
    provider: ObjectProvider
    handler: Optional[ListHandler] = None
    backward_handler: Optional[ListHandler] = None

    def handler_for(self, backward: Optional[str]) -> Optional[ListHandler]:
        if self.backward_handler is None:
            return self.handler
        use_backward = parse_bool(backward)
        # Old clients do not send the flag at all.
        if use_backward is None or use_backward:
            return self.backward_handler
        return self.handler


class ResourceRegistry:
    def __init__(self):
        self._kinds: dict[str, ResourceKind] = {}

    def register(
        self,
        kind: str,
        provider: ObjectProvider,
        *,
        handler: Optional[ListHandler] = None,
        backward_handler: Optional[ListHandler] = None,
    ) -> None:
        self._kinds[kind] = ResourceKind(provider=provider, handler=handler, backward_handler=backward_handler)

    def get(self, kind: str) -> Optional[ResourceKind]:
        return self._kinds.get(kind)

    def kinds(self) -> list[str]:
        return sorted(self._kinds)


def build_router(registry: ResourceRegistry) -> APIRouter:
    router = APIRouter()

    @router.get("/kinds")
    def list_kinds():
        return {"kinds": registry.kinds()}

    @router.get("/namespaces/{namespace}/{kind}", response_model=ListResult)
    def list_resources(
        namespace: str,
        kind: str,
        backward: Optional[str] = None,
        query: Query = Depends(get_query),
    ):
        entry = registry.get(kind)
        if entry is None:
            raise HTTPException(status_code=404, detail=f'Unknown resource kind "{kind}"')
        return to_list_result(entry.provider(namespace), query, entry.handler_for(backward))

    return router
