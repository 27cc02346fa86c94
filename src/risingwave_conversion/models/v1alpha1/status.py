from datetime import datetime

from pydantic import Field

from ..base_resource import ResourceBase
from .scale_view import ScaleViewLock


class Condition(ResourceBase):
    type: str = Field(..., description="Condition type, e.g. Running.")
    status: str = Field(..., description="True, False or Unknown.")
    last_transition_time: datetime | None = None
    reason: str = ""
    message: str = ""


class ComponentGroupReplicasStatus(ResourceBase):
    name: str = ""
    target: int = 0
    running: int = 0
    exists: bool = False


class ComponentReplicasStatus(ResourceBase):
    """Only target and running counts are tracked by v1alpha1."""

    target: int = 0
    running: int = 0
    groups: list[ComponentGroupReplicasStatus] = Field(default_factory=list)


class ComponentsReplicasStatus(ResourceBase):
    meta: ComponentReplicasStatus = Field(default_factory=ComponentReplicasStatus)
    frontend: ComponentReplicasStatus = Field(
        default_factory=ComponentReplicasStatus
    )
    compute: ComponentReplicasStatus = Field(
        default_factory=ComponentReplicasStatus
    )
    compactor: ComponentReplicasStatus = Field(
        default_factory=ComponentReplicasStatus
    )


class StorageTypeStatus(ResourceBase):
    # Plain string so that values unknown to this release still load.
    type: str = ""


class StoragesStatus(ResourceBase):
    meta: StorageTypeStatus = Field(default_factory=StorageTypeStatus)
    object: StorageTypeStatus = Field(default_factory=StorageTypeStatus)


class RisingWaveStatus(ResourceBase):
    observed_generation: int = 0
    conditions: list[Condition] = Field(default_factory=list)
    version: str = Field(default="", description="Image tag currently running.")
    storages: StoragesStatus = Field(default_factory=StoragesStatus)
    component_replicas: ComponentsReplicasStatus = Field(
        default_factory=ComponentsReplicasStatus
    )
    scale_views: list[ScaleViewLock] = Field(default_factory=list)
