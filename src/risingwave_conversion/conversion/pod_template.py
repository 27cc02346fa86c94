"""Field-for-field projection of pod templates."""

from __future__ import annotations

from typing import Any

from risingwave_conversion.models import v1alpha1, v1alpha2

from .base_converter import BaseConverter


class PodTemplateConverter(BaseConverter):
    """Builds a v1alpha2 ``NodePodTemplate`` from a v1alpha1 group template."""

    def convert(
        self,
        src: v1alpha1.ComponentGroupTemplate | None,
        volume_mounts: list[dict[str, Any]] | None = None,
    ) -> v1alpha2.NodePodTemplate:
        if src is None:
            return v1alpha2.NodePodTemplate(volume_mounts=self._copy(volume_mounts))

        pull_secrets = None
        if src.image_pull_secrets is not None:
            pull_secrets = [
                v1alpha2.LocalObjectReference(name=name)
                for name in src.image_pull_secrets
            ]

        return v1alpha2.NodePodTemplate(
            image=src.image,
            image_pull_policy=src.image_pull_policy,
            image_pull_secrets=pull_secrets,
            resources=self._copy(src.resources),
            node_selector=self._copy(src.node_selector),
            tolerations=self._copy(src.tolerations),
            affinity=self._copy(src.affinity),
            labels=self._copy(src.metadata.labels),
            annotations=self._copy(src.metadata.annotations),
            security_context=self._copy(src.security_context),
            priority_class_name=src.priority_class_name,
            termination_grace_period_seconds=src.termination_grace_period_seconds,
            dns_config=self._copy(src.dns_config),
            env=self._copy(src.env),
            env_from=self._copy(src.env_from),
            volume_mounts=self._copy(volume_mounts),
        )
