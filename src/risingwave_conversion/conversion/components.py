"""Expands v1alpha1 components into v1alpha2 node groups."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Final

from risingwave_conversion.models import v1alpha1, v1alpha2

from .base_converter import BaseConverter
from .pod_template import PodTemplateConverter

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_GROUP_NAME: Final[str] = ""


class ComponentExpander(BaseConverter):
    """
    Converts a component's named groups plus its default replica count into
    the unified node group list of v1alpha2.

    The output always ends with the default group (empty name) carrying the
    global replica count. The component-level restart timestamp is stamped
    on every group, the default one included.
    """

    def __init__(self, pod_templates: PodTemplateConverter | None = None) -> None:
        super().__init__()
        self._pod_templates = pod_templates or PodTemplateConverter()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def expand(
        self,
        default_replicas: int,
        restart_at: datetime | None,
        groups: Sequence[v1alpha1.ComponentGroup],
    ) -> v1alpha2.Component:
        node_groups = [
            self.convert_group(g, restart_at) for g in self._named_groups(groups)
        ]
        node_groups.append(self.build_default_group(default_replicas, restart_at))
        return v1alpha2.Component(log_level=DEFAULT_LOG_LEVEL, node_groups=node_groups)

    def expand_compute(
        self,
        default_replicas: int,
        component: v1alpha1.ComputeComponent,
        volume_claim_templates: Sequence[v1alpha1.PersistentVolumeClaim] | None,
    ) -> v1alpha2.Component:
        """
        Expand the compute component and attach its volumes.

        Claim templates are shared by every group. Volume mounts come from
        a per-group side table; the default group has no source entry and
        therefore gets no mounts.
        """
        volume_mounts: dict[str, list[dict[str, Any]]] = {
            g.name: g.volume_mounts or [] for g in component.groups
        }

        node_groups = []
        for group in self._named_groups(component.groups):
            node_group = self.convert_group(
                group, component.restart_at, volume_mounts.get(group.name, [])
            )
            node_groups.append(node_group)
        node_groups.append(
            self.build_default_group(
                default_replicas, component.restart_at, volume_mounts=[]
            )
        )

        for node_group in node_groups:
            node_group.volume_claim_templates = self.convert_volume_claim_templates(
                volume_claim_templates
            )

        return v1alpha2.Component(log_level=DEFAULT_LOG_LEVEL, node_groups=node_groups)

    def _named_groups(
        self, groups: Sequence[v1alpha1.ComponentGroup]
    ) -> list[v1alpha1.ComponentGroup]:
        # The empty name belongs to the synthetic default group, which is
        # written last and therefore wins.
        named = []
        for group in groups:
            if group.name == DEFAULT_GROUP_NAME:
                self.logger.warning(
                    "Group with empty name (%d replicas) is replaced by the "
                    "default group",
                    group.replicas,
                )
                continue
            named.append(group)
        return named

    def convert_group(
        self,
        group: v1alpha1.ComponentGroup,
        restart_at: datetime | None = None,
        volume_mounts: list[dict[str, Any]] | None = None,
    ) -> v1alpha2.NodeGroup:
        node_group = v1alpha2.NodeGroup(
            name=group.name,
            replicas=group.replicas,
            upgrade_strategy=self.convert_upgrade_strategy(group.upgrade_strategy),
            restart_at=restart_at,
            template=self._pod_templates.convert(group.template, volume_mounts),
        )
        self._log_conversion("node group", group.name)
        return node_group

    def build_default_group(
        self,
        replicas: int,
        restart_at: datetime | None,
        volume_mounts: list[dict[str, Any]] | None = None,
    ) -> v1alpha2.NodeGroup:
        """The synthetic default group: no template, global replica count."""
        return v1alpha2.NodeGroup(
            name=DEFAULT_GROUP_NAME,
            replicas=replicas,
            restart_at=restart_at,
            template=v1alpha2.NodePodTemplate(volume_mounts=volume_mounts),
        )

    def convert_upgrade_strategy(
        self, src: v1alpha1.UpgradeStrategy
    ) -> v1alpha2.NodeGroupUpgradeStrategy:
        rolling_update = None
        if src.rolling_update is not None:
            rolling_update = v1alpha2.NodeGroupRollingUpdate(
                max_unavailable=src.rolling_update.max_unavailable,
                partition=src.rolling_update.partition,
                max_surge=src.rolling_update.max_surge,
            )
        return v1alpha2.NodeGroupUpgradeStrategy(
            type=src.type,
            rolling_update=rolling_update,
            in_place_update_strategy=self._copy(src.in_place_update_strategy),
        )

    def convert_volume_claim_templates(
        self, templates: Sequence[v1alpha1.PersistentVolumeClaim] | None
    ) -> list[v1alpha2.PersistentVolumeClaim] | None:
        if templates is None:
            return None
        return [
            v1alpha2.PersistentVolumeClaim(
                metadata=v1alpha2.PersistentVolumeClaimPartialObjectMeta(
                    name=pvc.metadata.name,
                    labels=self._copy(pvc.metadata.labels),
                    annotations=self._copy(pvc.metadata.annotations),
                    finalizers=self._copy(pvc.metadata.finalizers),
                ),
                spec=self._copy(pvc.spec),
            )
            for pvc in templates
        ]
