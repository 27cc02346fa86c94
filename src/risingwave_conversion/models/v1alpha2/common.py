from typing import Any

from pydantic import Field

from ..base_resource import ResourceBase


class PartialObjectMeta(ResourceBase):
    """Labels and annotations attached to a generated object."""

    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


class LocalObjectReference(ResourceBase):
    name: str = ""


class PersistentVolumeClaimPartialObjectMeta(PartialObjectMeta):
    name: str = ""
    finalizers: list[str] | None = None


class PersistentVolumeClaim(ResourceBase):
    metadata: PersistentVolumeClaimPartialObjectMeta = Field(
        default_factory=PersistentVolumeClaimPartialObjectMeta
    )
    spec: dict[str, Any] = Field(default_factory=dict)
