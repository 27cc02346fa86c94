"""Projects the v1alpha1 status onto the v1alpha2 status shape."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, Literal

from risingwave_conversion.models import v1alpha1, v1alpha2

from .base_converter import BaseConverter

META_STORE_TYPES: Final[dict[str, v1alpha2.MetaStoreBackendType]] = {
    v1alpha1.MetaStorageType.ETCD.value: v1alpha2.MetaStoreBackendType.ETCD,
    v1alpha1.MetaStorageType.MEMORY.value: v1alpha2.MetaStoreBackendType.MEMORY,
}

STATE_STORE_TYPES: Final[dict[str, v1alpha2.StateStoreBackendType]] = {
    v1alpha1.ObjectStorageType.MEMORY.value: v1alpha2.StateStoreBackendType.MEMORY,
    v1alpha1.ObjectStorageType.MINIO.value: v1alpha2.StateStoreBackendType.MINIO,
    v1alpha1.ObjectStorageType.S3.value: v1alpha2.StateStoreBackendType.S3,
    v1alpha1.ObjectStorageType.GCS.value: v1alpha2.StateStoreBackendType.GCS,
    v1alpha1.ObjectStorageType.ALIYUN_OSS.value: (
        v1alpha2.StateStoreBackendType.S3_COMPATIBLE
    ),
    v1alpha1.ObjectStorageType.HDFS.value: v1alpha2.StateStoreBackendType.HDFS,
}


class StatusTranslator(BaseConverter):
    """
    Converts the status written by the v1alpha1 reconciler.

    v1alpha1 only tracks target and running replicas, so the projection is
    lossy: ready, available and updated all repeat the running count and
    unavailable is always zero. They must not be read as independent
    observations after the conversion.
    """

    def convert(self, src: v1alpha1.RisingWaveStatus) -> v1alpha2.RisingWaveStatus:
        replicas = src.component_replicas
        return v1alpha2.RisingWaveStatus(
            observed_generation=src.observed_generation,
            image_tag=src.version,
            conditions=self.convert_conditions(src.conditions),
            meta_store=v1alpha2.MetaStoreStatus(
                backend=self.convert_meta_store_type(src.storages.meta.type)
            ),
            state_store=v1alpha2.StateStoreStatus(
                backend=self.convert_state_store_type(src.storages.object.type)
            ),
            meta_component=self.convert_replicas(replicas.meta),
            frontend_component=self.convert_replicas(replicas.frontend),
            compute_component=self.convert_replicas(replicas.compute),
            compactor_component=self.convert_replicas(replicas.compactor),
        )

    def convert_replicas(
        self, src: v1alpha1.ComponentReplicasStatus
    ) -> v1alpha2.ComponentStatus:
        total = v1alpha2.WorkloadReplicaStatus(
            **self._project(src.target, src.running)
        )
        node_groups = [
            v1alpha2.NodeGroupStatus(
                name=group.name,
                exists=group.exists,
                **self._project(group.target, group.running),
            )
            for group in src.groups
        ]
        return v1alpha2.ComponentStatus(total=total, node_groups=node_groups)

    def convert_conditions(
        self, conditions: Sequence[v1alpha1.Condition]
    ) -> list[v1alpha2.Condition]:
        return [
            v1alpha2.Condition(
                type=cond.type,
                status=cond.status,
                last_transition_time=cond.last_transition_time,
                reason=cond.reason,
                message=cond.message,
            )
            for cond in conditions
        ]

    def convert_meta_store_type(
        self, value: str
    ) -> v1alpha2.MetaStoreBackendType | Literal[""]:
        backend = META_STORE_TYPES.get(value)
        if backend is None:
            if value:
                self.logger.debug("Unknown meta storage type %r, leaving it empty", value)
            return ""
        return backend

    def convert_state_store_type(
        self, value: str
    ) -> v1alpha2.StateStoreBackendType | Literal[""]:
        backend = STATE_STORE_TYPES.get(value)
        if backend is None:
            if value:
                self.logger.debug(
                    "Unknown object storage type %r, leaving it empty", value
                )
            return ""
        return backend

    @staticmethod
    def _project(target: int, running: int) -> dict[str, int]:
        return {
            "replicas": target,
            "ready_replicas": running,
            "available_replicas": running,
            "updated_replicas": running,
            "unavailable_replicas": 0,
        }
