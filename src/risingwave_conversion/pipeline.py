"""
ConversionPipeline – high-level orchestration from manifest to hub object.

Responsibilities
----------------
1.   Accept either a filesystem path (str/Path) or a pre-parsed dict.
2.   Invoke the I/O layer to obtain a Python dict.
3.   Check that the dict is a v1alpha1 RisingWave.
4.   Invoke the conversion layer to build a validated v1alpha2 object.
5.   Surface all domain-specific exceptions unchanged so that callers
     can handle them in a single try/except.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from .config import ConversionSettings
from .conversion import convert_forward
from .exceptions import ConversionError, ManifestLoadError
from .io.loader_factory import LoaderFactory
from .models import KIND, v1alpha1, v1alpha2

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """End-to-end converter manifest → v1alpha2 RisingWave."""

    def __init__(
        self,
        source: str | Path | Dict[str, Any],
        settings: ConversionSettings | None = None,
    ) -> None:
        """
        Parameters
        ----------
        source
            Path/str to .yaml, .yml, .json or an in-memory dict.
        settings
            Conversion settings; defaults to the environment.
        """
        if isinstance(source, (str, Path)):
            logger.debug("Loading manifest file: %s", source)
            loader_cls = LoaderFactory.resolve(source)
            self._manifest = loader_cls.load(source)
        elif isinstance(source, dict):
            logger.debug("Using in-memory manifest dictionary")
            self._manifest = source
        else:
            raise ConversionError(
                "ConversionPipeline: source must be Path | str | dict"
            )

        self._settings = settings or ConversionSettings.from_env()
        self._check_type()

    def _check_type(self) -> None:
        api_version = self._manifest.get("apiVersion", v1alpha1.API_VERSION)
        kind = self._manifest.get("kind", KIND)
        if kind != KIND:
            raise ManifestLoadError(f"Expected kind {KIND}, got {kind!r}")
        if api_version != v1alpha1.API_VERSION:
            raise ManifestLoadError(
                f"Expected apiVersion {v1alpha1.API_VERSION}, got {api_version!r}"
            )

    def run(self) -> v1alpha2.RisingWave:
        """Return a fully-validated v1alpha2 `RisingWave` (raises on failure)."""
        logger.debug("Converting manifest (strict=%s)", self._settings.strict)
        model = convert_forward(self._manifest, strict=self._settings.strict)

        spec = model.spec
        logger.info(
            "Conversion succeeded – %d node group(s), state store %s",
            sum(
                len(c.node_groups)
                for c in (
                    spec.meta_component,
                    spec.frontend_component,
                    spec.compute_component,
                    spec.compactor_component,
                )
            ),
            spec.state_store.backend_type.value
            if spec.state_store.backend_type
            else "unset",
        )
        return model

    def run_to_dict(self) -> Dict[str, Any]:
        """Like `run` but returns the manifest dict of the result."""
        return self.run().to_manifest()
