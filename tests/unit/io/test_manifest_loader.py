"""Tests for the manifest loader and the loader factory."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from risingwave_conversion.exceptions import ManifestLoadError
from risingwave_conversion.io import LoaderFactory, ManifestLoader


@pytest.fixture
def yaml_manifest(tmp_path: Path, v1alpha1_manifest) -> Path:
    path = tmp_path / "risingwave.yaml"
    with path.open("w", encoding="utf-8") as fh:
        YAML(typ="safe", pure=True).dump(v1alpha1_manifest, fh)
    return path


class TestManifestLoader:
    def test_load_yaml(self, yaml_manifest: Path) -> None:
        data = ManifestLoader.load(yaml_manifest)
        assert data["kind"] == "RisingWave"
        assert data["spec"]["global"]["replicas"]["compute"] == 2

    def test_load_json(self, tmp_path: Path, v1alpha1_manifest) -> None:
        path = tmp_path / "risingwave.json"
        path.write_text(json.dumps(v1alpha1_manifest), encoding="utf-8")
        assert ManifestLoader.load(path) == v1alpha1_manifest

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestLoadError, match="File not found") as exc_info:
            ManifestLoader.load(tmp_path / "absent.yaml")
        assert exc_info.value.error_code == "MANIFEST_LOAD_ERROR"

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "risingwave.txt"
        path.write_text("kind: RisingWave\n", encoding="utf-8")
        with pytest.raises(ManifestLoadError, match="Unsupported extension"):
            ManifestLoader.load(path)

    def test_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("spec: [unclosed\n", encoding="utf-8")
        with pytest.raises(ManifestLoadError, match="Cannot parse broken.yaml"):
            ManifestLoader.load(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ManifestLoadError, match="must be a mapping"):
            ManifestLoader.load(path)


class TestDump:
    def test_yaml_dump_loads_back(self) -> None:
        data = {"apiVersion": "v", "spec": {"image": "rw:${TAG}", "groups": [1, 2]}}
        text = ManifestLoader.dump(data)
        assert YAML(typ="safe", pure=True).load(text) == data

    def test_json_dump(self) -> None:
        text = ManifestLoader.dump({"a": 1}, "json")
        assert text.endswith("\n")
        assert json.loads(text) == {"a": 1}

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported output format"):
            ManifestLoader.dump({}, "toml")

    def test_save_creates_parents(self, tmp_path: Path) -> None:
        path = ManifestLoader.save({"a": 1}, tmp_path / "out" / "rw.json", "json")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}


class TestLoaderFactory:
    @pytest.mark.parametrize("name", ["rw.yaml", "rw.YML", "rw.json"])
    def test_resolves_manifest_loader(self, name: str) -> None:
        assert LoaderFactory.resolve(name) is ManifestLoader

    def test_unknown_extension(self) -> None:
        with pytest.raises(ManifestLoadError, match="No loader found") as exc_info:
            LoaderFactory.resolve("rw.toml")
        assert "'.toml'" in str(exc_info.value)
        assert exc_info.value.context["path"] == "rw.toml"

    def test_missing_extension(self) -> None:
        with pytest.raises(ManifestLoadError, match="extension 'missing'"):
            LoaderFactory.resolve("risingwave")
