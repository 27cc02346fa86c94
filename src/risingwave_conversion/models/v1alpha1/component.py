from datetime import datetime
from typing import Any, Self

from pydantic import Field, model_validator

from ..base_resource import ResourceBase, lift_inline_fields
from .common import PartialObjectMeta


class ComponentGroupTemplate(ResourceBase):
    """
    Pod-level overrides of a group, or of every group when set globally.

    Everything here is carried to the new schema field by field.
    """

    image: str | None = None
    image_pull_policy: str | None = None
    image_pull_secrets: list[str] | None = None
    resources: dict[str, Any] | None = None
    node_selector: dict[str, str] | None = None
    tolerations: list[dict[str, Any]] | None = None
    affinity: dict[str, Any] | None = None
    metadata: PartialObjectMeta = Field(default_factory=PartialObjectMeta)
    security_context: dict[str, Any] | None = None
    priority_class_name: str | None = None
    termination_grace_period_seconds: int | None = None
    dns_config: dict[str, Any] | None = None
    env: list[dict[str, Any]] | None = None
    env_from: list[dict[str, Any]] | None = None


class ComputeGroupTemplate(ComponentGroupTemplate):
    volume_mounts: list[dict[str, Any]] | None = Field(
        default=None, description="Volume mounts of the compute container."
    )


class RollingUpdate(ResourceBase):
    max_unavailable: int | str | None = None
    partition: int | str | None = None
    max_surge: int | str | None = None


class UpgradeStrategy(ResourceBase):
    type: str = Field(
        default="",
        description="RollingUpdate, Recreate, InPlaceIfPossible or InPlaceOnly.",
    )
    rolling_update: RollingUpdate | None = None
    in_place_update_strategy: dict[str, Any] | None = None


class ComponentGroup(ResourceBase):
    """A named group of pods; the template keys sit inline on the wire."""

    name: str = Field(..., description="Group name, unique within a component.")
    replicas: int = Field(default=0, ge=0)
    upgrade_strategy: UpgradeStrategy = Field(default_factory=UpgradeStrategy)
    template: ComponentGroupTemplate | None = None

    @model_validator(mode="before")
    @classmethod
    def _inline_template(cls, data: Any) -> Any:
        return lift_inline_fields(data, "template", ComponentGroupTemplate, cls)


class ComputeGroup(ComponentGroup):
    template: ComputeGroupTemplate | None = None

    @model_validator(mode="before")
    @classmethod
    def _inline_template(cls, data: Any) -> Any:
        return lift_inline_fields(data, "template", ComputeGroupTemplate, cls)

    @property
    def volume_mounts(self) -> list[dict[str, Any]] | None:
        return self.template.volume_mounts if self.template else None


class Component(ResourceBase):
    restart_at: datetime | None = Field(
        default=None, description="Restart every pod of the component after it."
    )
    groups: list[ComponentGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_group_names(self) -> Self:
        names = [g.name for g in self.groups]
        duplicated = sorted({n for n in names if names.count(n) > 1})
        if duplicated:
            raise ValueError(f"duplicate group names: {', '.join(duplicated)}")
        return self


class ComputeComponent(Component):
    groups: list[ComputeGroup] = Field(default_factory=list)


class Components(ResourceBase):
    meta: Component = Field(default_factory=Component)
    frontend: Component = Field(default_factory=Component)
    compute: ComputeComponent = Field(default_factory=ComputeComponent)
    compactor: Component = Field(default_factory=Component)
