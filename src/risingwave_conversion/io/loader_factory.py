"""Pick the loader for a RisingWave manifest path by its file extension."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Dict, Protocol, cast, runtime_checkable

from ..exceptions import ManifestLoadError
from .manifest_loader import ManifestLoader


@runtime_checkable
class LoaderProtocol(Protocol):
    """What the pipeline needs from a manifest loader."""

    supported_exts: ClassVar[set[str]]

    @staticmethod
    def load(path: str | Path) -> Dict[str, Any]: ...


class LoaderFactory:
    """Maps manifest extensions (.yaml, .yml, .json) to their loader."""

    _LOADERS = (ManifestLoader,)

    @classmethod
    def resolve(cls, path: str | Path) -> type[LoaderProtocol]:
        """
        Return the loader for ``path``.

        Raises:
            ManifestLoadError: When no loader handles the extension.
        """
        suffix = Path(path).suffix.lower()
        for loader in cls._LOADERS:
            if suffix in loader.supported_exts:
                return cast(type[LoaderProtocol], loader)

        raise ManifestLoadError(
            f"No loader found for: {path} (extension {suffix or 'missing'!r})",
            str(path),
        )
