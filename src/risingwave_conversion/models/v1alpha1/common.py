from typing import Any

from pydantic import Field

from ..base_resource import ResourceBase


class PartialObjectMeta(ResourceBase):
    """Labels and annotations attached to a generated object."""

    labels: dict[str, str] | None = Field(
        default=None, description="Labels of the object."
    )
    annotations: dict[str, str] | None = Field(
        default=None, description="Annotations of the object."
    )


class PersistentVolumeClaimPartialObjectMeta(PartialObjectMeta):
    name: str = Field(default="", description="Name of the claim template.")
    finalizers: list[str] | None = Field(
        default=None, description="Finalizers of the claim."
    )


class PersistentVolumeClaim(ResourceBase):
    """Claim template shared by all compute groups."""

    metadata: PersistentVolumeClaimPartialObjectMeta = Field(
        default_factory=PersistentVolumeClaimPartialObjectMeta,
        description="Partial object metadata of the claim.",
    )
    spec: dict[str, Any] = Field(
        default_factory=dict,
        description="Kubernetes PersistentVolumeClaimSpec, kept as-is.",
    )
