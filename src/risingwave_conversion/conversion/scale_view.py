"""Maps scale view lock records between the two schemas."""

from __future__ import annotations

from collections.abc import Sequence

from risingwave_conversion.models import v1alpha1, v1alpha2

from .base_converter import BaseConverter


class ScaleViewLockLedger(BaseConverter):
    """
    Information-preserving mapping of scale view locks.

    Both directions copy the reference, the component and the ordered
    (group, replicas) pairs verbatim, so ``from_hub(to_hub(x)) == x``.
    Whether a replica update on a locked group is allowed is decided by the
    admission webhooks, not here.
    """

    def to_hub(
        self, locks: Sequence[v1alpha1.ScaleViewLock]
    ) -> list[v1alpha2.ScaleViewLock]:
        converted = []
        for lock in locks:
            converted.append(
                v1alpha2.ScaleViewLock(
                    reference=v1alpha2.ScaleViewReference(
                        name=lock.name,
                        uid=lock.uid,
                        observed_generation=lock.generation,
                    ),
                    component=lock.component,
                    locks=[
                        v1alpha2.ScaleViewNodeGroupLock(
                            name=group.name, replicas=group.replicas
                        )
                        for group in lock.group_locks
                    ],
                )
            )
            self._log_conversion("scale view lock", lock.name)
        return converted

    def from_hub(
        self, locks: Sequence[v1alpha2.ScaleViewLock]
    ) -> list[v1alpha1.ScaleViewLock]:
        converted = []
        for lock in locks:
            converted.append(
                v1alpha1.ScaleViewLock(
                    name=lock.reference.name,
                    uid=lock.reference.uid,
                    generation=lock.reference.observed_generation,
                    component=lock.component,
                    group_locks=[
                        v1alpha1.ScaleViewLockGroupLock(
                            name=group.name, replicas=group.replicas
                        )
                        for group in lock.locks
                    ],
                )
            )
            self._log_conversion("scale view lock", lock.reference.name)
        return converted
