"""Checks that a v1alpha1 object converts without silent data loss."""

from __future__ import annotations

import logging

from risingwave_conversion.exceptions import ConversionValidationError
from risingwave_conversion.models import v1alpha1

logger = logging.getLogger(__name__)


class ForwardConvertibilityValidator:
    """
    Rejects v1alpha1 objects whose conversion would be ambiguous.

    The mappers are total and would convert these objects anyway, silently
    picking the last storage branch or replacing an unnamed group with the
    default group. Strict conversion runs this validator first to surface a
    descriptive error instead.
    """

    def validate(self, src: v1alpha1.RisingWave) -> None:
        """
        Raises:
            ConversionValidationError: On the first problem found.
        """
        spec = src.spec
        self._validate_single_branch(
            spec.storages.meta.selected_branches(), "spec.storages.meta"
        )
        self._validate_single_branch(
            spec.storages.object.selected_branches(), "spec.storages.object"
        )
        self._validate_s3(spec.storages.object.s3)

        components = spec.components
        for name in ("meta", "frontend", "compute", "compactor"):
            self._validate_group_names(
                getattr(components, name).groups, f"spec.components.{name}.groups"
            )

        logger.debug("Object %s is forward-convertible", src.metadata.get("name", ""))

    @staticmethod
    def _validate_single_branch(branches: list[str], field_name: str) -> None:
        if len(branches) > 1:
            raise ConversionValidationError(
                f"{field_name} sets more than one backend",
                field_name=field_name,
                actual_value=", ".join(branches),
            )

    @staticmethod
    def _validate_s3(s3: v1alpha1.ObjectStorageS3 | None) -> None:
        if s3 is not None and s3.virtual_hosted_style and not s3.endpoint:
            raise ConversionValidationError(
                "virtual-hosted style requires a custom S3 endpoint",
                field_name="spec.storages.object.s3.endpoint",
            )

    @staticmethod
    def _validate_group_names(
        groups: list[v1alpha1.ComponentGroup], field_name: str
    ) -> None:
        # The empty name is reserved for the default group of v1alpha2.
        for index, group in enumerate(groups):
            if not group.name:
                raise ConversionValidationError(
                    "group name must not be empty",
                    field_name=f"{field_name}[{index}].name",
                )
