from typing import Any

from pydantic import (
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from ..base_resource import ResourceBase, lift_inline_fields


class ScaleViewNodeGroupLock(ResourceBase):
    name: str = Field(..., description="Name of the node group.")
    replicas: int = Field(
        default=0,
        ge=0,
        description="Current allowed value for updates on the group's replicas.",
    )


class ScaleViewReference(ResourceBase):
    name: str = Field(default="", description="Name of the RisingWaveScaleView.")
    uid: str = Field(default="", description="UID of the RisingWaveScaleView.")
    observed_generation: int = Field(
        default=0, description="Generation of the scale view last observed."
    )


class ScaleViewLock(ResourceBase):
    """
    Lock record owned by a RisingWaveScaleView.

    The reference is inlined on the wire: ``name``, ``uid`` and
    ``observedGeneration`` sit next to ``component`` and ``locks``.
    Enforcement of the locks is done by the admission webhooks.
    """

    reference: ScaleViewReference = Field(default_factory=ScaleViewReference)
    component: str = ""
    locks: list[ScaleViewNodeGroupLock] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _inline_reference(cls, data: Any) -> Any:
        return lift_inline_fields(data, "reference", ScaleViewReference, cls)

    @model_serializer(mode="wrap")
    def _flatten_reference(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        reference = data.pop("reference", None) or {}
        return {**reference, **data}

    @field_validator("locks")
    @classmethod
    def _unique_groups(
        cls, v: list[ScaleViewNodeGroupLock]
    ) -> list[ScaleViewNodeGroupLock]:
        seen: set[str] = set()
        for lock in v:
            if lock.name in seen:
                raise ValueError(f"node group '{lock.name}' is locked more than once")
            seen.add(lock.name)
        return v
