from __future__ import annotations

from typing import Any

from app.schemas.query import FIELD_STATUS, Filter
from app.schemas.resources import Application, PipelineRun
from app.services.resource_compare import CompareFunc, default_compare
from app.services.resource_filters import FilterFunc, and_filters, default_filter
from app.services.resource_list import DefaultListHandler, TransformFunc, no_transform

FIELD_SYNC_STATUS = "syncStatus"
FIELD_HEALTH_STATUS = "healthStatus"


def pipeline_run_status_filter() -> FilterFunc:
    """Match ``status=<phase>`` against a PipelineRun's phase; other fields pass."""

    def _filter(obj: Any, flt: Filter) -> bool:
        if flt.field != FIELD_STATUS:
            return True
        if not isinstance(obj, PipelineRun):
            return False
        return obj.status.phase == flt.value

    return FilterFunc(_filter)


def pipeline_run_compare() -> CompareFunc:
    """Latest start time first (creation time when the run has not started), then name ascending."""

    def _compare(left: Any, right: Any, field: str) -> bool:
        if not isinstance(left, PipelineRun) or not isinstance(right, PipelineRun):
            return False
        left_time = left.status.start_time or left.metadata.created_at
        right_time = right.status.start_time or right.metadata.created_at
        if left_time != right_time:
            return left_time > right_time
        return left.metadata.name < right.metadata.name

    return _compare


class PipelineRunListHandler:
    def comparator(self) -> CompareFunc:
        return pipeline_run_compare()

    def filter(self) -> FilterFunc:
        return and_filters(default_filter(), pipeline_run_status_filter())

    def transformer(self) -> TransformFunc:
        return no_transform()


class BackwardPipelineRunListHandler(DefaultListHandler):
    """Creation-time ordering kept for clients written against the older API."""

    def filter(self) -> FilterFunc:
        return and_filters(default_filter(), pipeline_run_status_filter())


def application_status_filter() -> FilterFunc:
    def _filter(obj: Any, flt: Filter) -> bool:
        if flt.field not in (FIELD_SYNC_STATUS, FIELD_HEALTH_STATUS):
            return True
        if not isinstance(obj, Application):
            return False
        if flt.field == FIELD_SYNC_STATUS:
            return obj.status.sync_status == flt.value
        return obj.status.health_status == flt.value

    return FilterFunc(_filter)


class ApplicationListHandler:
    def comparator(self) -> CompareFunc:
        return default_compare()

    def filter(self) -> FilterFunc:
        return default_filter() & application_status_filter()

    def transformer(self) -> TransformFunc:
        return no_transform()
