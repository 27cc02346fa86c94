from .common import (
    PartialObjectMeta,
    PersistentVolumeClaim,
    PersistentVolumeClaimPartialObjectMeta,
)
from .component import (
    Component,
    ComponentGroup,
    ComponentGroupTemplate,
    Components,
    ComputeComponent,
    ComputeGroup,
    ComputeGroupTemplate,
    RollingUpdate,
    UpgradeStrategy,
)
from .risingwave import (
    API_VERSION,
    ConfigMapSource,
    Configuration,
    Global,
    GlobalReplicas,
    RisingWave,
    RisingWaveSpec,
)
from .scale_view import ScaleViewLock, ScaleViewLockGroupLock
from .status import (
    ComponentGroupReplicasStatus,
    ComponentReplicasStatus,
    ComponentsReplicasStatus,
    Condition,
    RisingWaveStatus,
    StoragesStatus,
    StorageTypeStatus,
)
from .storage import (
    MetaStorage,
    MetaStorageEtcd,
    MetaStorageType,
    ObjectStorage,
    ObjectStorageAliyunOSS,
    ObjectStorageGCS,
    ObjectStorageHDFS,
    ObjectStorageMinIO,
    ObjectStorageS3,
    ObjectStorageType,
    Storages,
)

__all__ = [
    "API_VERSION",
    "Component",
    "ComponentGroup",
    "ComponentGroupReplicasStatus",
    "ComponentGroupTemplate",
    "ComponentReplicasStatus",
    "Components",
    "ComponentsReplicasStatus",
    "ComputeComponent",
    "ComputeGroup",
    "ComputeGroupTemplate",
    "Condition",
    "ConfigMapSource",
    "Configuration",
    "Global",
    "GlobalReplicas",
    "MetaStorage",
    "MetaStorageEtcd",
    "MetaStorageType",
    "ObjectStorage",
    "ObjectStorageAliyunOSS",
    "ObjectStorageGCS",
    "ObjectStorageHDFS",
    "ObjectStorageMinIO",
    "ObjectStorageS3",
    "ObjectStorageType",
    "PartialObjectMeta",
    "PersistentVolumeClaim",
    "PersistentVolumeClaimPartialObjectMeta",
    "RisingWave",
    "RisingWaveSpec",
    "RisingWaveStatus",
    "RollingUpdate",
    "ScaleViewLock",
    "ScaleViewLockGroupLock",
    "Storages",
    "StoragesStatus",
    "StorageTypeStatus",
    "UpgradeStrategy",
]
