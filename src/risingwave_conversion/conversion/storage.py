"""Re-discriminates the v1alpha1 storage unions into the v1alpha2 backends."""

from __future__ import annotations

from typing import Final

from risingwave_conversion.models import v1alpha1, v1alpha2

from .base_converter import BaseConverter

BUCKET_PLACEHOLDER: Final[str] = "${BUCKET}"
REGION_PLACEHOLDER: Final[str] = "${REGION}"

ALIYUN_OSS_ENDPOINT: Final[str] = "${BUCKET}.oss-${REGION}.aliyuncs.com"
INTERNAL_ALIYUN_OSS_ENDPOINT: Final[str] = (
    "${BUCKET}.oss-${REGION}-internal.aliyuncs.com"
)

_HTTPS_SCHEME: Final[str] = "https://"

# Secret keys the v1alpha1 operator always read from.
USERNAME_KEY: Final[str] = "username"
PASSWORD_KEY: Final[str] = "password"
ACCESS_KEY_ID_KEY: Final[str] = "AccessKeyID"
SECRET_ACCESS_KEY_KEY: Final[str] = "SecretAccessKey"
SERVICE_ACCOUNT_CREDENTIALS_KEY: Final[str] = "ServiceAccountCredentials"


def virtual_hosted_endpoint(endpoint: str) -> str:
    """
    Turn a path-style endpoint into a virtual-hosted one.

    ``${BUCKET}.`` goes right after a leading ``https://``, or in front of
    the endpoint when it carries no such scheme.

    >>> virtual_hosted_endpoint("https://s3.example.com")
    'https://${BUCKET}.s3.example.com'
    """
    if endpoint.startswith(_HTTPS_SCHEME):
        host = endpoint[len(_HTTPS_SCHEME) :]
        return f"{_HTTPS_SCHEME}{BUCKET_PLACEHOLDER}.{host}"
    return f"{BUCKET_PLACEHOLDER}.{endpoint}"


def aliyun_oss_endpoint(internal: bool) -> str:
    """Endpoint template of Aliyun OSS, resolved by the nodes at runtime."""
    return INTERNAL_ALIYUN_OSS_ENDPOINT if internal else ALIYUN_OSS_ENDPOINT


def s3_credentials(secret: str) -> v1alpha2.S3Credentials:
    return v1alpha2.S3Credentials(
        secret_name=secret,
        access_key_ref=ACCESS_KEY_ID_KEY,
        secret_access_key_ref=SECRET_ACCESS_KEY_KEY,
    )


class MetaStoreMapper(BaseConverter):
    """Maps ``spec.storages.meta`` onto ``spec.metaStore``."""

    def convert(self, src: v1alpha1.MetaStorage) -> v1alpha2.MetaStoreBackend:
        """
        Convert the meta storage union.

        Total: an unset source yields an empty backend. When several branches
        are set they are visited in order (memory, etcd) and the last one
        wins.
        """
        branches = src.populated_branches()
        if len(src.selected_branches()) > 1:
            self.logger.warning(
                "Meta storage sets %s, keeping only '%s'",
                ", ".join(branches),
                branches[-1],
            )

        dst = v1alpha2.MetaStoreBackend()
        for branch in branches:
            if branch == "memory":
                dst = v1alpha2.MetaStoreBackend(memory=src.memory)
            elif branch == "etcd":
                dst = v1alpha2.MetaStoreBackend(etcd=self._convert_etcd(src.etcd))
            self._log_conversion("meta store branch", branch)
        return dst

    def _convert_etcd(
        self, etcd: v1alpha1.MetaStorageEtcd
    ) -> v1alpha2.MetaStoreBackendEtcd:
        credentials = None
        if etcd.secret:
            credentials = v1alpha2.EtcdCredentials(
                secret_name=etcd.secret,
                username_key_ref=USERNAME_KEY,
                password_key_ref=PASSWORD_KEY,
            )
        return v1alpha2.MetaStoreBackendEtcd(
            credentials=credentials, endpoints=etcd.endpoint
        )


class StateStoreMapper(BaseConverter):
    """
    Maps ``spec.storages.object`` onto ``spec.stateStore``.

    Aliyun OSS and S3 with a custom endpoint both become the S3-compatible
    branch, whose endpoint may hold ``${BUCKET}``/``${REGION}`` placeholders.
    """

    def convert(self, src: v1alpha1.ObjectStorage) -> v1alpha2.StateStoreBackend:
        """
        Convert the object storage union.

        Total: an unset source yields an empty backend. Set branches are
        visited in the order memory, minio, s3, aliyunOSS, hdfs, gcs and the
        last one wins.
        """
        branches = src.populated_branches()
        if len(src.selected_branches()) > 1:
            self.logger.warning(
                "Object storage sets %s, keeping only '%s'",
                ", ".join(branches),
                branches[-1],
            )

        dst = v1alpha2.StateStoreBackend()
        for branch in branches:
            converter = getattr(self, f"_convert_{branch}")
            dst = converter(getattr(src, branch))
            self._log_conversion("state store branch", branch)
        return dst

    # ------------------------------------------------------------------ #
    # One method per v1alpha1 branch
    # ------------------------------------------------------------------ #

    def _convert_memory(self, memory: bool) -> v1alpha2.StateStoreBackend:
        return v1alpha2.StateStoreBackend(memory=memory)

    def _convert_minio(
        self, minio: v1alpha1.ObjectStorageMinIO
    ) -> v1alpha2.StateStoreBackend:
        return v1alpha2.StateStoreBackend(
            minio=v1alpha2.StateStoreBackendMinIO(
                credentials=v1alpha2.MinIOCredentials(
                    secret_name=minio.secret,
                    username_key_ref=USERNAME_KEY,
                    password_key_ref=PASSWORD_KEY,
                ),
                endpoint=minio.endpoint,
                bucket=minio.bucket,
            )
        )

    def _convert_s3(self, s3: v1alpha1.ObjectStorageS3) -> v1alpha2.StateStoreBackend:
        if not s3.endpoint:
            return v1alpha2.StateStoreBackend(
                s3=v1alpha2.StateStoreBackendS3(
                    credentials=s3_credentials(s3.secret),
                    region=s3.region,
                    bucket=s3.bucket,
                )
            )

        endpoint = s3.endpoint
        if s3.virtual_hosted_style:
            endpoint = virtual_hosted_endpoint(endpoint)
            self.logger.debug("Templated S3 endpoint %s -> %s", s3.endpoint, endpoint)

        return v1alpha2.StateStoreBackend(
            s3c=v1alpha2.StateStoreBackendS3C(
                credentials=s3_credentials(s3.secret),
                endpoint=endpoint,
                region=s3.region,
                bucket=s3.bucket,
            )
        )

    def _convert_aliyun_oss(
        self, oss: v1alpha1.ObjectStorageAliyunOSS
    ) -> v1alpha2.StateStoreBackend:
        return v1alpha2.StateStoreBackend(
            s3c=v1alpha2.StateStoreBackendS3C(
                credentials=s3_credentials(oss.secret),
                endpoint=aliyun_oss_endpoint(oss.internal_endpoint),
                region=oss.region,
                bucket=oss.bucket,
            )
        )

    def _convert_hdfs(
        self, hdfs: v1alpha1.ObjectStorageHDFS
    ) -> v1alpha2.StateStoreBackend:
        return v1alpha2.StateStoreBackend(
            hdfs=v1alpha2.StateStoreBackendHDFS(
                name_node=hdfs.name_node, root=hdfs.root
            )
        )

    def _convert_gcs(self, gcs: v1alpha1.ObjectStorageGCS) -> v1alpha2.StateStoreBackend:
        return v1alpha2.StateStoreBackend(
            gcs=v1alpha2.StateStoreBackendGCS(
                credentials=v1alpha2.GCSCredentials(
                    use_workload_identity=gcs.use_workload_identity,
                    secret_name=gcs.secret,
                    service_account_credentials_key_ref=(
                        SERVICE_ACCOUNT_CREDENTIALS_KEY if gcs.secret else None
                    ),
                ),
                bucket=gcs.bucket,
                root=gcs.root,
            )
        )
