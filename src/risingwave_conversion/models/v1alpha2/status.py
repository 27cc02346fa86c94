from datetime import datetime

from pydantic import Field

from ..base_resource import ResourceBase
from .meta_store import MetaStoreStatus
from .scale_view_lock import ScaleViewLock
from .state_store import StateStoreStatus


class Condition(ResourceBase):
    # Plain strings: v1alpha1 condition types pass through unchanged.
    type: str
    status: str = Field(..., description="True, False or Unknown.")
    last_transition_time: datetime | None = None
    reason: str = ""
    message: str = ""


class WorkloadReplicaStatus(ResourceBase):
    replicas: int = 0
    ready_replicas: int = 0
    available_replicas: int = 0
    updated_replicas: int = 0
    unavailable_replicas: int = 0


class NodeGroupStatus(WorkloadReplicaStatus):
    name: str = ""
    exists: bool = False


class ComponentStatus(ResourceBase):
    total: WorkloadReplicaStatus = Field(default_factory=WorkloadReplicaStatus)
    node_groups: list[NodeGroupStatus] = Field(default_factory=list)


class RisingWaveStatus(ResourceBase):
    observed_generation: int = 0
    image_tag: str = ""
    conditions: list[Condition] = Field(default_factory=list)
    meta_store: MetaStoreStatus = Field(default_factory=MetaStoreStatus)
    state_store: StateStoreStatus = Field(default_factory=StateStoreStatus)
    meta_component: ComponentStatus = Field(default_factory=ComponentStatus)
    frontend_component: ComponentStatus = Field(default_factory=ComponentStatus)
    compute_component: ComponentStatus = Field(default_factory=ComponentStatus)
    compactor_component: ComponentStatus = Field(default_factory=ComponentStatus)
    scale_view_locks: list[ScaleViewLock] = Field(default_factory=list)
