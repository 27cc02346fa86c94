from .loader_factory import LoaderFactory, LoaderProtocol
from .manifest_loader import ManifestLoader

__all__ = ["LoaderFactory", "LoaderProtocol", "ManifestLoader"]
