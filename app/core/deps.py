from fastapi import Request

from app.core.config import settings
from app.schemas.query import Query
from app.services.query_parser import parse_query_parameters


def get_query(request: Request) -> Query:
    return parse_query_parameters(request.query_params, default_limit=settings.list_default_limit)
