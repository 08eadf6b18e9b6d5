from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class OwnerReference(_CamelModel):
    api_version: str = Field(default="", alias="apiVersion")
    kind: str = ""
    name: str = ""
    uid: str = ""


class ObjectMeta(_CamelModel):
    name: str = ""
    namespace: str = ""
    uid: str = ""
    creation_timestamp: Optional[datetime] = Field(default=None, alias="creationTimestamp")
    labels: Optional[dict[str, str]] = {}
    annotations: Optional[dict[str, str]] = {}
    owner_references: Optional[list[OwnerReference]] = Field(default_factory=list, alias="ownerReferences")

    @field_validator("labels", "annotations", "owner_references", mode="after")
    @classmethod
    def _null_as_empty(cls, value, info):
        if value is not None:
            return value
        return [] if info.field_name == "owner_references" else {}

    @field_validator("creation_timestamp")
    @classmethod
    def _timestamp_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _aware(value)

    @property
    def created_at(self) -> datetime:
        # Unset timestamps sort as the oldest possible value.
        return self.creation_timestamp or EPOCH


class Resource(_CamelModel):
    api_version: str = Field(default="devops.kubesphere.io/v1alpha3", alias="apiVersion")
    kind: str = ""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    def get_object_meta(self) -> ObjectMeta:
        return self.metadata

    @property
    def name(self) -> str:
        return self.metadata.name


class Pipeline(Resource):
    kind: str = "Pipeline"
    spec: dict[str, Any] = {}


class PipelineRunStatus(_CamelModel):
    phase: str = ""
    start_time: Optional[datetime] = Field(default=None, alias="startTime")
    completion_time: Optional[datetime] = Field(default=None, alias="completionTime")

    @field_validator("start_time", "completion_time")
    @classmethod
    def _times_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _aware(value)


class PipelineRun(Resource):
    kind: str = "PipelineRun"
    spec: dict[str, Any] = {}
    status: PipelineRunStatus = Field(default_factory=PipelineRunStatus)


class Template(Resource):
    kind: str = "Template"
    spec: dict[str, Any] = {}


class ClusterTemplate(Resource):
    kind: str = "ClusterTemplate"
    spec: dict[str, Any] = {}


class DevOpsProject(Resource):
    kind: str = "DevOpsProject"
    spec: dict[str, Any] = {}


class ApplicationStatus(_CamelModel):
    sync_status: str = Field(default="Unknown", alias="syncStatus")
    health_status: str = Field(default="Unknown", alias="healthStatus")


class Application(Resource):
    api_version: str = Field(default="gitops.kubesphere.io/v1alpha1", alias="apiVersion")
    kind: str = "Application"
    spec: dict[str, Any] = {}
    status: ApplicationStatus = Field(default_factory=ApplicationStatus)


def object_meta_of(obj: Any) -> Optional[ObjectMeta]:
    """Return the metadata of ``obj`` or ``None`` when it carries none."""
    if obj is None:
        return None
    accessor = getattr(obj, "get_object_meta", None)
    if callable(accessor):
        meta = accessor()
        return meta if isinstance(meta, ObjectMeta) else None
    meta = getattr(obj, "metadata", None)
    return meta if isinstance(meta, ObjectMeta) else None
