from pydantic import Field, field_validator

from ..base_resource import ResourceBase


class ScaleViewLockGroupLock(ResourceBase):
    name: str = Field(..., description="Name of the locked group.")
    replicas: int = Field(
        default=0, ge=0, description="Replica ceiling allowed for the group."
    )


class ScaleViewLock(ResourceBase):
    """Lock record written by the scale view controller."""

    name: str = Field(..., description="Name of the RisingWaveScaleView.")
    uid: str = Field(default="", description="UID of the RisingWaveScaleView.")
    generation: int = Field(
        default=0, description="Generation of the scale view last observed."
    )
    component: str = Field(default="", description="Targeted component.")
    group_locks: list[ScaleViewLockGroupLock] = Field(default_factory=list)

    @field_validator("group_locks")
    @classmethod
    def _unique_groups(
        cls, v: list[ScaleViewLockGroupLock]
    ) -> list[ScaleViewLockGroupLock]:
        seen: set[str] = set()
        for lock in v:
            if lock.name in seen:
                raise ValueError(f"group '{lock.name}' is locked more than once")
            seen.add(lock.name)
        return v
