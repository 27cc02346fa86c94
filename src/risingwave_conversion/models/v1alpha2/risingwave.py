from typing import Any, Literal

from pydantic import Field

from ..base_resource import API_GROUP, KIND, ResourceBase
from .common import PartialObjectMeta
from .meta_store import MetaStoreBackend
from .node_group import Component, NodePodTemplate
from .state_store import StateStoreBackend
from .status import RisingWaveStatus

API_VERSION: str = f"{API_GROUP}/v1alpha2"


class NodeConfigurationConfigMapSource(ResourceBase):
    name: str = ""
    key: str = ""
    optional: bool | None = None


class NodeConfigurationSecretSource(ResourceBase):
    name: str = ""
    key: str = ""
    optional: bool | None = None


class NodeConfiguration(ResourceBase):
    """Where ``risingwave.toml`` comes from."""

    config_map: NodeConfigurationConfigMapSource | None = None
    secret: NodeConfigurationSecretSource | None = None
    value: str | None = None


class RisingWaveSpec(ResourceBase):
    use_kruise_workloads: bool | None = None
    sync_prometheus_service_monitor: bool | None = None
    frontend_service_type: str = "ClusterIP"
    additional_frontend_service_metadata: PartialObjectMeta = Field(
        default_factory=PartialObjectMeta
    )
    meta_store: MetaStoreBackend = Field(default_factory=MetaStoreBackend)
    state_store: StateStoreBackend = Field(default_factory=StateStoreBackend)
    image: str = ""
    pod_template: NodePodTemplate = Field(default_factory=NodePodTemplate)
    configuration: NodeConfiguration = Field(default_factory=NodeConfiguration)
    meta_component: Component = Field(default_factory=Component)
    frontend_component: Component = Field(default_factory=Component)
    compute_component: Component = Field(default_factory=Component)
    compactor_component: Component = Field(default_factory=Component)


class RisingWave(ResourceBase):
    """A RisingWave object in the v1alpha2 (hub) schema."""

    api_version: Literal["risingwave.risingwavelabs.com/v1alpha2"] = API_VERSION
    kind: Literal["RisingWave"] = KIND
    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: RisingWaveSpec = Field(default_factory=RisingWaveSpec)
    status: RisingWaveStatus = Field(default_factory=RisingWaveStatus)
