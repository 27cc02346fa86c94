"""Tests for the top-level RisingWave converter and its helpers."""

from __future__ import annotations

import copy
import logging

import pytest

from risingwave_conversion.conversion import (
    RisingWaveConverter,
    convert_backward,
    convert_forward,
)
from risingwave_conversion.exceptions import (
    ConversionNotSupportedError,
    ConversionValidationError,
)
from risingwave_conversion.models import v1alpha1, v1alpha2


@pytest.fixture
def source(v1alpha1_manifest) -> v1alpha1.RisingWave:
    return v1alpha1.RisingWave.model_validate(v1alpha1_manifest)


class TestConvertForward:
    def test_header_and_metadata(self, source: v1alpha1.RisingWave) -> None:
        dst = RisingWaveConverter().convert_forward(source)

        assert dst.api_version == "risingwave.risingwavelabs.com/v1alpha2"
        assert dst.kind == "RisingWave"
        assert dst.metadata == source.metadata
        assert dst.metadata is not source.metadata

    def test_top_level_flags(self, source: v1alpha1.RisingWave) -> None:
        spec = RisingWaveConverter().convert_forward(source).spec

        assert spec.use_kruise_workloads is True
        assert spec.sync_prometheus_service_monitor is False
        assert spec.frontend_service_type == "NodePort"
        assert spec.additional_frontend_service_metadata.labels == {"svc": "fe"}
        assert spec.additional_frontend_service_metadata.annotations == {"a": "b"}
        assert spec.image == "risingwavelabs/risingwave:v1.0.0"

    def test_global_template_becomes_pod_template(
        self, source: v1alpha1.RisingWave
    ) -> None:
        template = RisingWaveConverter().convert_forward(source).spec.pod_template

        assert template.image is None
        assert template.image_pull_policy == "IfNotPresent"
        assert template.image_pull_secrets == [
            v1alpha2.LocalObjectReference(name="registry")
        ]

    def test_stores(self, source: v1alpha1.RisingWave) -> None:
        spec = RisingWaveConverter().convert_forward(source).spec

        assert spec.meta_store.etcd is not None
        assert spec.meta_store.etcd.endpoints == "etcd:2388"
        assert spec.meta_store.etcd.credentials is not None
        assert spec.meta_store.etcd.credentials.secret_name == "etcd-auth"
        assert spec.state_store.s3c is not None
        assert spec.state_store.s3c.endpoint == "https://${BUCKET}.s3.example.com"
        assert spec.state_store.s3c.region == "us-west-2"
        assert spec.state_store.s3c.bucket == "hummock"

    def test_configuration(self, source: v1alpha1.RisingWave) -> None:
        configuration = RisingWaveConverter().convert_forward(source).spec.configuration
        assert configuration.config_map is not None
        assert configuration.config_map.name == "rw-config"
        assert configuration.config_map.key == "risingwave.toml"
        assert configuration.secret is None

    def test_components(self, source: v1alpha1.RisingWave) -> None:
        spec = RisingWaveConverter().convert_forward(source).spec

        meta = [(g.name, g.replicas) for g in spec.meta_component.node_groups]
        frontend = [(g.name, g.replicas) for g in spec.frontend_component.node_groups]
        compute = [(g.name, g.replicas) for g in spec.compute_component.node_groups]
        compactor = [
            (g.name, g.replicas) for g in spec.compactor_component.node_groups
        ]
        assert meta == [("m1", 3), ("", 1)]
        assert frontend == [("", 2)]
        assert compute == [("c1", 3), ("c2", 5), ("", 2)]
        assert compactor == [("", 1)]

    def test_compute_volumes(self, source: v1alpha1.RisingWave) -> None:
        compute = RisingWaveConverter().convert_forward(source).spec.compute_component

        mounts = [g.template.volume_mounts for g in compute.node_groups]
        assert mounts == [[{"name": "data", "mountPath": "/data"}], [], []]
        for group in compute.node_groups:
            assert [c.metadata.name for c in group.volume_claim_templates] == ["data"]
        assert compute.node_groups[0].template.image == (
            "risingwavelabs/risingwave:v1.0.1"
        )

    def test_status(self, source: v1alpha1.RisingWave) -> None:
        status = RisingWaveConverter().convert_forward(source).status

        assert status.observed_generation == 4
        assert status.image_tag == "v1.0.0"
        assert status.meta_store.backend == v1alpha2.MetaStoreBackendType.ETCD
        assert status.state_store.backend == v1alpha2.StateStoreBackendType.S3
        assert status.compute_component.total == v1alpha2.WorkloadReplicaStatus(
            replicas=5,
            ready_replicas=3,
            available_replicas=3,
            updated_replicas=3,
            unavailable_replicas=0,
        )

    def test_scale_view_locks(self, source: v1alpha1.RisingWave) -> None:
        locks = RisingWaveConverter().convert_forward(source).status.scale_view_locks

        assert len(locks) == 1
        assert locks[0].reference.name == "sv"
        assert locks[0].reference.uid == "8d1f"
        assert locks[0].reference.observed_generation == 2
        assert {(g.name, g.replicas) for g in locks[0].locks} == {("c1", 3), ("c2", 5)}

    def test_source_is_not_mutated(self, source: v1alpha1.RisingWave) -> None:
        before = source.model_copy(deep=True)
        RisingWaveConverter().convert_forward(source)
        assert source == before

    def test_output_shares_nothing_with_source(
        self, source: v1alpha1.RisingWave
    ) -> None:
        dst = RisingWaveConverter().convert_forward(source)
        dst.metadata["labels"]["app"] = "changed"
        dst.spec.compute_component.node_groups[0].template.volume_mounts.append({})
        assert source.metadata["labels"] == {"app": "risingwave"}
        assert len(source.spec.components.compute.groups[0].volume_mounts) == 1

    def test_conversion_is_deterministic(self, source: v1alpha1.RisingWave) -> None:
        converter = RisingWaveConverter()
        assert converter.convert_forward(source) == converter.convert_forward(source)

    def test_logs_summary(
        self, source: v1alpha1.RisingWave, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        RisingWaveConverter().convert_forward(source)
        assert "Converted RisingWave 'example'" in caplog.text

    def test_empty_object(self) -> None:
        dst = RisingWaveConverter().convert_forward(v1alpha1.RisingWave())

        assert dst.spec.meta_store.backend_type is None
        assert dst.spec.state_store.backend_type is None
        for component in (
            dst.spec.meta_component,
            dst.spec.frontend_component,
            dst.spec.compute_component,
            dst.spec.compactor_component,
        ):
            assert [g.name for g in component.node_groups] == [""]
            assert component.log_level == "INFO"


class TestStrictness:
    @pytest.fixture
    def ambiguous(self, v1alpha1_manifest) -> dict:
        manifest = copy.deepcopy(v1alpha1_manifest)
        manifest["spec"]["storages"]["object"]["hdfs"] = {"nameNode": "nn", "root": "/"}
        return manifest

    def test_strict_rejects_ambiguous_source(self, ambiguous: dict) -> None:
        with pytest.raises(ConversionValidationError):
            convert_forward(ambiguous)

    def test_lenient_keeps_last_branch(
        self, ambiguous: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING)
        dst = convert_forward(ambiguous, strict=False)

        assert dst.spec.state_store.backend_type == v1alpha2.StateStoreBackendType.HDFS
        assert dst.spec.state_store.s3c is None
        assert "keeping only 'hdfs'" in caplog.text

    def test_lenient_converts_unnamed_group(self) -> None:
        src = v1alpha1.RisingWave.model_validate(
            {"spec": {"components": {"meta": {"groups": [{"name": "", "replicas": 1}]}}}}
        )
        dst = RisingWaveConverter(strict=False).convert_forward(src)

        assert [(g.name, g.replicas) for g in dst.spec.meta_component.node_groups] == [
            ("", 0)
        ]

    def test_strict_rejects_unnamed_group(self) -> None:
        src = v1alpha1.RisingWave.model_validate(
            {"spec": {"components": {"meta": {"groups": [{"name": "", "replicas": 1}]}}}}
        )
        with pytest.raises(ConversionValidationError):
            RisingWaveConverter().convert_forward(src)


class TestHelpers:
    def test_convert_forward_accepts_dict(self, v1alpha1_manifest) -> None:
        dst = convert_forward(v1alpha1_manifest)
        assert isinstance(dst, v1alpha2.RisingWave)
        assert dst.metadata["name"] == "example"

    def test_convert_forward_wraps_schema_errors(self, v1alpha1_manifest) -> None:
        v1alpha1_manifest["spec"]["global"]["replicas"]["compute"] = -1

        with pytest.raises(ConversionValidationError) as exc_info:
            convert_forward(v1alpha1_manifest)

        assert exc_info.value.context["field_name"] == (
            "spec.global.replicas.compute"
        )

    def test_duplicate_group_names_rejected(self, v1alpha1_manifest) -> None:
        groups = v1alpha1_manifest["spec"]["components"]["meta"]["groups"]
        groups.append({"name": "m1", "replicas": 1})

        with pytest.raises(ConversionValidationError):
            convert_forward(v1alpha1_manifest)

    def test_wrong_api_version_rejected(self, v1alpha1_manifest) -> None:
        v1alpha1_manifest["apiVersion"] = "risingwave.risingwavelabs.com/v1alpha2"
        with pytest.raises(ConversionValidationError):
            convert_forward(v1alpha1_manifest)


class TestConvertBackward:
    def test_backward_is_not_supported(
        self, source: v1alpha1.RisingWave, caplog: pytest.LogCaptureFixture
    ) -> None:
        hub = RisingWaveConverter().convert_forward(source)

        with pytest.raises(ConversionNotSupportedError) as exc_info:
            RisingWaveConverter().convert_backward(hub)

        error = exc_info.value
        assert error.error_code == "NOT_SUPPORTED"
        assert error.context["source_version"] == v1alpha2.API_VERSION
        assert error.context["target_version"] == v1alpha1.API_VERSION
        assert "Refusing to convert" in caplog.text

    def test_helper_accepts_dict(self) -> None:
        with pytest.raises(ConversionNotSupportedError):
            convert_backward({"metadata": {"name": "example"}})
