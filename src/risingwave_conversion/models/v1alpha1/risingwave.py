from typing import Any, Literal

from pydantic import AliasChoices, Field, model_validator

from ..base_resource import API_GROUP, KIND, ResourceBase, lift_inline_fields
from .common import PartialObjectMeta
from .component import ComponentGroupTemplate, Components
from .status import RisingWaveStatus
from .storage import Storages

API_VERSION: str = f"{API_GROUP}/v1alpha1"


class GlobalReplicas(ResourceBase):
    """Replicas of the default group of every component."""

    meta: int = Field(default=0, ge=0)
    frontend: int = Field(default=0, ge=0)
    compute: int = Field(default=0, ge=0)
    compactor: int = Field(default=0, ge=0)


class Global(ResourceBase):
    """Settings shared by all components. Template keys sit inline."""

    image: str = Field(default="", description="Image of RisingWave.")
    replicas: GlobalReplicas = Field(default_factory=GlobalReplicas)
    service_type: str = Field(default="ClusterIP")
    service_meta: PartialObjectMeta = Field(default_factory=PartialObjectMeta)
    template: ComponentGroupTemplate = Field(default_factory=ComponentGroupTemplate)

    @model_validator(mode="before")
    @classmethod
    def _inline_template(cls, data: Any) -> Any:
        return lift_inline_fields(data, "template", ComponentGroupTemplate, cls)


class ConfigMapSource(ResourceBase):
    name: str = ""
    key: str = ""
    optional: bool | None = None


class Configuration(ResourceBase):
    config_map: ConfigMapSource | None = Field(
        default=None,
        alias="configmap",
        validation_alias=AliasChoices("configmap", "configMap", "config_map"),
    )


class RisingWaveSpec(ResourceBase):
    enable_open_kruise: bool | None = None
    enable_default_service_monitor: bool | None = None
    global_: Global = Field(default_factory=Global, alias="global")
    storages: Storages = Field(default_factory=Storages)
    configuration: Configuration = Field(default_factory=Configuration)
    components: Components = Field(default_factory=Components)


class RisingWave(ResourceBase):
    """A RisingWave object in the v1alpha1 schema."""

    api_version: Literal["risingwave.risingwavelabs.com/v1alpha1"] = API_VERSION
    kind: Literal["RisingWave"] = KIND
    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: RisingWaveSpec = Field(default_factory=RisingWaveSpec)
    status: RisingWaveStatus = Field(default_factory=RisingWaveStatus)
