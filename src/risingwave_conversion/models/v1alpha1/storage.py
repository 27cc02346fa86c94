from enum import Enum

from pydantic import Field

from ..base_resource import ResourceBase
from .common import PersistentVolumeClaim


class MetaStorageType(str, Enum):
    """Meta storage types reported in the v1alpha1 status."""

    MEMORY = "Memory"
    ETCD = "Etcd"
    UNKNOWN = "Unknown"


class ObjectStorageType(str, Enum):
    """Object storage types reported in the v1alpha1 status."""

    MEMORY = "Memory"
    MINIO = "MinIO"
    S3 = "S3"
    ALIYUN_OSS = "AliyunOSS"
    HDFS = "HDFS"
    GCS = "GCS"
    UNKNOWN = "Unknown"


# --------------------------------------------------------------------------- #
#                               Meta storage                                  #
# --------------------------------------------------------------------------- #


class MetaStorageEtcd(ResourceBase):
    endpoint: str = Field(
        ..., description="Endpoints of the etcd service, separated with comma."
    )
    secret: str = Field(
        default="",
        description="Secret holding 'username' and 'password'. Empty: no auth.",
    )


class MetaStorage(ResourceBase):
    """Meta storage union. At most one branch is expected to be set."""

    memory: bool | None = Field(
        default=None, description="Use the in-memory meta store (tests only)."
    )
    etcd: MetaStorageEtcd | None = Field(
        default=None, description="Use an etcd-backed meta store."
    )

    def populated_branches(self) -> list[str]:
        """Names of the set branches, in conversion order."""
        branches = []
        if self.memory is not None:
            branches.append("memory")
        if self.etcd is not None:
            branches.append("etcd")
        return branches

    def selected_branches(self) -> list[str]:
        """Like ``populated_branches`` but ``memory: false`` selects nothing."""
        return [
            b for b in self.populated_branches() if b != "memory" or self.memory
        ]


# --------------------------------------------------------------------------- #
#                              Object storage                                 #
# --------------------------------------------------------------------------- #


class ObjectStorageMinIO(ResourceBase):
    secret: str = Field(..., description="Secret with 'username'/'password'.")
    endpoint: str = Field(..., description="MinIO endpoint without scheme.")
    bucket: str = Field(..., description="MinIO bucket.")


class ObjectStorageS3(ResourceBase):
    secret: str = Field(
        ..., description="Secret with 'AccessKeyID'/'SecretAccessKey'."
    )
    bucket: str = Field(..., description="S3 bucket.")
    region: str = Field(default="", description="Region of the bucket.")
    endpoint: str = Field(
        default="",
        description="Custom endpoint of an S3-compatible service. Empty: AWS S3.",
    )
    virtual_hosted_style: bool = Field(
        default=False,
        description="Address the bucket in the host name instead of the path.",
    )


class ObjectStorageAliyunOSS(ResourceBase):
    secret: str = Field(
        ..., description="Secret with 'AccessKeyID'/'SecretAccessKey'."
    )
    bucket: str = Field(..., description="OSS bucket.")
    region: str = Field(..., description="OSS region, e.g. cn-hangzhou.")
    internal_endpoint: bool = Field(
        default=False, description="Use the VPC-internal OSS endpoint."
    )


class ObjectStorageHDFS(ResourceBase):
    name_node: str = Field(..., description="HDFS name node address.")
    root: str = Field(..., description="Working directory on the HDFS.")


class ObjectStorageGCS(ResourceBase):
    use_workload_identity: bool = Field(
        default=False, description="Authenticate with GKE workload identity."
    )
    secret: str = Field(
        default="", description="Secret with 'ServiceAccountCredentials'."
    )
    bucket: str = Field(..., description="GCS bucket.")
    root: str = Field(..., description="Working directory in the bucket.")


class ObjectStorage(ResourceBase):
    """Object (state) storage union. At most one branch is expected to be set."""

    memory: bool | None = Field(
        default=None, description="Use the in-memory state store (tests only)."
    )
    minio: ObjectStorageMinIO | None = None
    s3: ObjectStorageS3 | None = None
    aliyun_oss: ObjectStorageAliyunOSS | None = Field(
        default=None, alias="aliyunOSS"
    )
    hdfs: ObjectStorageHDFS | None = None
    gcs: ObjectStorageGCS | None = None

    def populated_branches(self) -> list[str]:
        """Names of the set branches, in conversion order."""
        order = ("memory", "minio", "s3", "aliyun_oss", "hdfs", "gcs")
        return [b for b in order if getattr(self, b) is not None]

    def selected_branches(self) -> list[str]:
        """Like ``populated_branches`` but ``memory: false`` selects nothing."""
        return [
            b for b in self.populated_branches() if b != "memory" or self.memory
        ]


class Storages(ResourceBase):
    meta: MetaStorage = Field(default_factory=MetaStorage)
    object: ObjectStorage = Field(default_factory=ObjectStorage)
    pvc_templates: list[PersistentVolumeClaim] | None = Field(
        default=None,
        description="Claim templates mounted by the compute nodes.",
    )
