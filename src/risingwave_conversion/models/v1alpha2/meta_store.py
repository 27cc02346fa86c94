from enum import Enum
from typing import Literal, Self

from pydantic import Field, model_validator

from ..base_resource import ResourceBase


class MetaStoreBackendType(str, Enum):
    """Closed set of meta store branches."""

    MEMORY = "Memory"
    ETCD = "Etcd"


class EtcdCredentials(ResourceBase):
    secret_name: str = Field(..., description="Secret in the pod's namespace.")
    username_key_ref: str | None = Field(
        default=None, description="Secret key of the username."
    )
    password_key_ref: str | None = Field(
        default=None, description="Secret key of the password."
    )


class MetaStoreBackendEtcd(ResourceBase):
    credentials: EtcdCredentials | None = Field(
        default=None,
        description="Credentials of the etcd. Absent: no authentication.",
    )
    endpoints: str = Field(
        ..., description="Comma separated endpoints without scheme prefix."
    )


class MetaStoreBackend(ResourceBase):
    """
    Meta store backend as a tagged variant.

    The wire form keeps one optional key per branch, but at most one of
    them may select a backend; ``memory: false`` selects nothing. An
    instance with no branch means "unset".
    """

    memory: bool | None = None
    etcd: MetaStoreBackendEtcd | None = None

    @model_validator(mode="after")
    def _single_branch(self) -> Self:
        selected = self._selected()
        if len(selected) > 1:
            names = ", ".join(t.value for t in selected)
            raise ValueError(f"meta store selects more than one backend: {names}")
        return self

    def _selected(self) -> list[MetaStoreBackendType]:
        selected = []
        if self.memory:
            selected.append(MetaStoreBackendType.MEMORY)
        if self.etcd is not None:
            selected.append(MetaStoreBackendType.ETCD)
        return selected

    @property
    def backend_type(self) -> MetaStoreBackendType | None:
        """The selected branch, or None when unset."""
        selected = self._selected()
        return selected[0] if selected else None


class MetaStoreStatus(ResourceBase):
    backend: MetaStoreBackendType | Literal[""] = ""
