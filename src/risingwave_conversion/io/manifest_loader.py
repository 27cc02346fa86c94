"""Concrete Loader that supports local YAML / JSON manifests."""

from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Final

from ruamel.yaml import YAML

from ..exceptions import ManifestLoadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


def _yaml_dumper() -> YAML:
    # A fresh instance per dump: ruamel emitters are not thread-safe.
    yaml = YAML()
    yaml.indent(mapping=2, sequence=4, offset=2)
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = 4096
    return yaml


class ManifestLoader:
    """Read a RisingWave manifest from disk and return a Python `dict`."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @staticmethod
    def load(path: str | Path) -> Dict[str, Any]:
        file_path = Path(path)

        # validation
        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise ManifestLoadError(f"File not found: {file_path}", str(file_path))

        if file_path.suffix.lower() not in ManifestLoader.supported_exts:
            raise ManifestLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(ManifestLoader.supported_exts))}",
                str(file_path),
            )

        raw_text = file_path.read_text(encoding="utf-8")

        # parse
        try:
            if file_path.suffix.lower() in _YAML_EXTS:
                data: Dict[str, Any] = _yaml_parser.load(raw_text)
            else:  # .json
                data = json.loads(raw_text)
        except Exception as exc:
            raise ManifestLoadError(
                f"Cannot parse {file_path.name}: {exc}", str(file_path)
            ) from exc

        if not isinstance(data, dict):
            raise ManifestLoadError("Top-level object must be a mapping", str(file_path))

        logger.debug("Manifest loaded (%d root keys)", len(data))
        return data

    @staticmethod
    def dump(data: Dict[str, Any], fmt: str = "yaml") -> str:
        """Serialize a manifest dict as YAML or JSON."""
        if fmt == "json":
            return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        if fmt != "yaml":
            raise ValueError(f"Unsupported output format: {fmt!r}")

        stream = StringIO()
        _yaml_dumper().dump(data, stream)
        return stream.getvalue()

    @staticmethod
    def save(data: Dict[str, Any], path: str | Path, fmt: str = "yaml") -> Path:
        """Write a manifest to ``path``, creating parent directories."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(ManifestLoader.dump(data, fmt), encoding="utf-8")
        logger.debug("Manifest written to %s", file_path)
        return file_path
