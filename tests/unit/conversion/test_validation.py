"""Unit tests for the forward-convertibility validator."""

from __future__ import annotations

import pytest

from risingwave_conversion.conversion.validation import ForwardConvertibilityValidator
from risingwave_conversion.exceptions import ConversionValidationError
from risingwave_conversion.models import v1alpha1


@pytest.fixture
def validator() -> ForwardConvertibilityValidator:
    return ForwardConvertibilityValidator()


class TestForwardConvertibilityValidator:
    def test_complete_manifest_passes(
        self, validator: ForwardConvertibilityValidator, v1alpha1_manifest
    ) -> None:
        validator.validate(v1alpha1.RisingWave.model_validate(v1alpha1_manifest))

    def test_empty_object_passes(self, validator: ForwardConvertibilityValidator) -> None:
        validator.validate(v1alpha1.RisingWave())

    def test_two_meta_backends(
        self, validator: ForwardConvertibilityValidator, v1alpha1_manifest
    ) -> None:
        v1alpha1_manifest["spec"]["storages"]["meta"]["memory"] = True
        src = v1alpha1.RisingWave.model_validate(v1alpha1_manifest)

        with pytest.raises(ConversionValidationError) as exc_info:
            validator.validate(src)

        error = exc_info.value
        assert error.error_code == "VALIDATION_ERROR"
        assert error.context["field_name"] == "spec.storages.meta"
        assert error.context["actual_value"] == "memory, etcd"

    def test_two_object_backends(
        self, validator: ForwardConvertibilityValidator, v1alpha1_manifest
    ) -> None:
        v1alpha1_manifest["spec"]["storages"]["object"]["hdfs"] = {
            "nameNode": "nn",
            "root": "/",
        }
        src = v1alpha1.RisingWave.model_validate(v1alpha1_manifest)

        with pytest.raises(ConversionValidationError) as exc_info:
            validator.validate(src)
        assert exc_info.value.context["field_name"] == "spec.storages.object"

    def test_memory_false_is_not_a_second_backend(
        self, validator: ForwardConvertibilityValidator, v1alpha1_manifest
    ) -> None:
        v1alpha1_manifest["spec"]["storages"]["object"]["memory"] = False
        validator.validate(v1alpha1.RisingWave.model_validate(v1alpha1_manifest))

    def test_virtual_hosted_s3_without_endpoint(
        self, validator: ForwardConvertibilityValidator, v1alpha1_manifest
    ) -> None:
        v1alpha1_manifest["spec"]["storages"]["object"]["s3"]["endpoint"] = ""
        src = v1alpha1.RisingWave.model_validate(v1alpha1_manifest)

        with pytest.raises(ConversionValidationError) as exc_info:
            validator.validate(src)
        assert (
            exc_info.value.context["field_name"] == "spec.storages.object.s3.endpoint"
        )

    def test_empty_group_name(
        self, validator: ForwardConvertibilityValidator, v1alpha1_manifest
    ) -> None:
        groups = v1alpha1_manifest["spec"]["components"]["compute"]["groups"]
        groups.append({"name": "", "replicas": 1})
        src = v1alpha1.RisingWave.model_validate(v1alpha1_manifest)

        with pytest.raises(ConversionValidationError) as exc_info:
            validator.validate(src)

        error = exc_info.value
        assert error.context["field_name"] == "spec.components.compute.groups[2].name"
        assert "spec.components.compute.groups[2].name" in error.get_recovery_hint()
