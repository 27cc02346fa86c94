from enum import Enum
from typing import Literal, Self

from pydantic import Field, model_validator

from ..base_resource import ResourceBase


class StateStoreBackendType(str, Enum):
    """Closed set of state store branches."""

    MEMORY = "Memory"
    MINIO = "MinIO"
    S3 = "S3"
    S3_COMPATIBLE = "S3c"
    HDFS = "HDFS"
    WEBHDFS = "WebHDFS"
    GCS = "GCS"


# --------------------------------------------------------------------------- #
#                               Credentials                                   #
# --------------------------------------------------------------------------- #


class S3Credentials(ResourceBase):
    secret_name: str = Field(..., description="Secret in the pod's namespace.")
    access_key_ref: str | None = Field(
        default=None, description="Secret key of the access key."
    )
    secret_access_key_ref: str | None = Field(
        default=None, description="Secret key of the secret access key."
    )


class MinIOCredentials(ResourceBase):
    secret_name: str = Field(..., description="Secret in the pod's namespace.")
    username_key_ref: str | None = None
    password_key_ref: str | None = None


class GCSCredentials(ResourceBase):
    use_workload_identity: bool = Field(
        default=False,
        description="Use workload identity; the secret is then not required.",
    )
    secret_name: str = ""
    service_account_credentials_key_ref: str | None = None


# --------------------------------------------------------------------------- #
#                                Branches                                     #
# --------------------------------------------------------------------------- #


class StateStoreBackendMinIO(ResourceBase):
    credentials: MinIOCredentials
    endpoint: str = Field(..., description="MinIO endpoint without scheme.")
    bucket: str


class StateStoreBackendS3(ResourceBase):
    credentials: S3Credentials
    region: str = ""
    bucket: str
    data_directory: str = ""


class StateStoreBackendS3C(ResourceBase):
    """
    S3-compatible service.

    The endpoint may hold the ``${BUCKET}`` and ``${REGION}`` placeholders,
    which the RisingWave nodes resolve at runtime.
    """

    credentials: S3Credentials
    endpoint: str
    region: str = ""
    bucket: str
    data_directory: str = ""


class StateStoreBackendHDFS(ResourceBase):
    name_node: str
    root: str


class StateStoreBackendGCS(ResourceBase):
    credentials: GCSCredentials = Field(default_factory=GCSCredentials)
    bucket: str
    root: str


class StateStoreBackend(ResourceBase):
    """
    State store backend as a tagged variant.

    Same wire shape as the meta store: one optional key per branch, at most
    one of them set. An instance with no branch means "unset".
    """

    memory: bool | None = None
    minio: StateStoreBackendMinIO | None = None
    s3: StateStoreBackendS3 | None = None
    s3c: StateStoreBackendS3C | None = None
    hdfs: StateStoreBackendHDFS | None = None
    gcs: StateStoreBackendGCS | None = None

    @model_validator(mode="after")
    def _single_branch(self) -> Self:
        selected = self._selected()
        if len(selected) > 1:
            names = ", ".join(t.value for t in selected)
            raise ValueError(f"state store selects more than one backend: {names}")
        return self

    def _selected(self) -> list[StateStoreBackendType]:
        selected = []
        if self.memory:
            selected.append(StateStoreBackendType.MEMORY)
        branches = (
            (self.minio, StateStoreBackendType.MINIO),
            (self.s3, StateStoreBackendType.S3),
            (self.s3c, StateStoreBackendType.S3_COMPATIBLE),
            (self.hdfs, StateStoreBackendType.HDFS),
            (self.gcs, StateStoreBackendType.GCS),
        )
        selected.extend(kind for value, kind in branches if value is not None)
        return selected

    @property
    def backend_type(self) -> StateStoreBackendType | None:
        """The selected branch, or None when unset."""
        selected = self._selected()
        return selected[0] if selected else None


class StateStoreStatus(ResourceBase):
    backend: StateStoreBackendType | Literal[""] = ""
