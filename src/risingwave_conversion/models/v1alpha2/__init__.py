from .common import (
    LocalObjectReference,
    PartialObjectMeta,
    PersistentVolumeClaim,
    PersistentVolumeClaimPartialObjectMeta,
)
from .meta_store import (
    EtcdCredentials,
    MetaStoreBackend,
    MetaStoreBackendEtcd,
    MetaStoreBackendType,
    MetaStoreStatus,
)
from .node_group import (
    Component,
    NodeGroup,
    NodeGroupRollingUpdate,
    NodeGroupUpgradeStrategy,
    NodePodTemplate,
)
from .risingwave import (
    API_VERSION,
    NodeConfiguration,
    NodeConfigurationConfigMapSource,
    NodeConfigurationSecretSource,
    RisingWave,
    RisingWaveSpec,
)
from .scale_view_lock import (
    ScaleViewLock,
    ScaleViewNodeGroupLock,
    ScaleViewReference,
)
from .state_store import (
    GCSCredentials,
    MinIOCredentials,
    S3Credentials,
    StateStoreBackend,
    StateStoreBackendGCS,
    StateStoreBackendHDFS,
    StateStoreBackendMinIO,
    StateStoreBackendS3,
    StateStoreBackendS3C,
    StateStoreBackendType,
    StateStoreStatus,
)
from .status import (
    ComponentStatus,
    Condition,
    NodeGroupStatus,
    RisingWaveStatus,
    WorkloadReplicaStatus,
)

__all__ = [
    "API_VERSION",
    "Component",
    "ComponentStatus",
    "Condition",
    "EtcdCredentials",
    "GCSCredentials",
    "LocalObjectReference",
    "MetaStoreBackend",
    "MetaStoreBackendEtcd",
    "MetaStoreBackendType",
    "MetaStoreStatus",
    "MinIOCredentials",
    "NodeConfiguration",
    "NodeConfigurationConfigMapSource",
    "NodeConfigurationSecretSource",
    "NodeGroup",
    "NodeGroupRollingUpdate",
    "NodeGroupStatus",
    "NodeGroupUpgradeStrategy",
    "NodePodTemplate",
    "PartialObjectMeta",
    "PersistentVolumeClaim",
    "PersistentVolumeClaimPartialObjectMeta",
    "RisingWave",
    "RisingWaveSpec",
    "RisingWaveStatus",
    "S3Credentials",
    "ScaleViewLock",
    "ScaleViewNodeGroupLock",
    "ScaleViewReference",
    "StateStoreBackend",
    "StateStoreBackendGCS",
    "StateStoreBackendHDFS",
    "StateStoreBackendMinIO",
    "StateStoreBackendS3",
    "StateStoreBackendS3C",
    "StateStoreBackendType",
    "StateStoreStatus",
    "WorkloadReplicaStatus",
]
