"""Schema conversion for RisingWave custom resources (v1alpha1 → v1alpha2)."""

from .config import ConversionSettings
from .conversion import RisingWaveConverter, convert_backward, convert_forward
from .exceptions import (
    ConversionError,
    ConversionNotSupportedError,
    ConversionValidationError,
    ManifestLoadError,
)
from .pipeline import ConversionPipeline

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionNotSupportedError",
    "ConversionPipeline",
    "ConversionSettings",
    "ConversionValidationError",
    "ManifestLoadError",
    "RisingWaveConverter",
    "convert_backward",
    "convert_forward",
]
