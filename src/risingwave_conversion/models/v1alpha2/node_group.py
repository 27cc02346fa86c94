from datetime import datetime
from typing import Any, Self

from pydantic import Field, model_validator

from ..base_resource import ResourceBase
from .common import LocalObjectReference, PersistentVolumeClaim


class NodeGroupRollingUpdate(ResourceBase):
    max_unavailable: int | str | None = None
    partition: int | str | None = None
    max_surge: int | str | None = None


class NodeGroupUpgradeStrategy(ResourceBase):
    """
    Upgrade strategy of a node group.

    Only the fields matching ``type`` are meaningful: ``rolling_update`` for
    the rolling strategy, ``in_place_update_strategy`` for the in-place ones.
    """

    # Kept as a plain string: values are copied verbatim from v1alpha1.
    type: str = ""
    rolling_update: NodeGroupRollingUpdate | None = None
    in_place_update_strategy: dict[str, Any] | None = None


class NodePodTemplate(ResourceBase):
    image: str | None = None
    image_pull_policy: str | None = None
    image_pull_secrets: list[LocalObjectReference] | None = None
    resources: dict[str, Any] | None = None
    node_selector: dict[str, str] | None = None
    tolerations: list[dict[str, Any]] | None = None
    affinity: dict[str, Any] | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    security_context: dict[str, Any] | None = None
    priority_class_name: str | None = None
    termination_grace_period_seconds: int | None = None
    dns_config: dict[str, Any] | None = None
    env: list[dict[str, Any]] | None = None
    env_from: list[dict[str, Any]] | None = None
    volume_mounts: list[dict[str, Any]] | None = None


class NodeGroup(ResourceBase):
    """A node group. The group with the empty name is the default group."""

    name: str = ""
    replicas: int = Field(default=0, ge=0)
    upgrade_strategy: NodeGroupUpgradeStrategy = Field(
        default_factory=NodeGroupUpgradeStrategy
    )
    restart_at: datetime | None = None
    template: NodePodTemplate = Field(default_factory=NodePodTemplate)
    volume_claim_templates: list[PersistentVolumeClaim] | None = None

    @property
    def is_default(self) -> bool:
        return self.name == ""


class Component(ResourceBase):
    log_level: str = ""
    node_groups: list[NodeGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_group_names(self) -> Self:
        names = [g.name for g in self.node_groups]
        duplicated = sorted({repr(n) for n in names if names.count(n) > 1})
        if duplicated:
            raise ValueError(f"duplicate node group names: {', '.join(duplicated)}")
        return self

    @property
    def default_group(self) -> NodeGroup | None:
        return next((g for g in self.node_groups if g.is_default), None)

    @property
    def named_groups(self) -> list[NodeGroup]:
        return [g for g in self.node_groups if not g.is_default]
