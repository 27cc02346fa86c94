"""
Conversion package

Converts RisingWave objects between the v1alpha1 schema and the v1alpha2
hub schema without performing any I/O.

Public helpers
--------------
convert_forward(source, strict=True) -> v1alpha2.RisingWave
    Accepts a v1alpha1 model or its manifest dict.
convert_backward(source) -> never returns
    Always raises ConversionNotSupportedError.
"""

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError

from risingwave_conversion.exceptions import ConversionValidationError
from risingwave_conversion.models import v1alpha1, v1alpha2

from .components import ComponentExpander
from .converter import RisingWaveConverter
from .pod_template import PodTemplateConverter
from .scale_view import ScaleViewLockLedger
from .status import StatusTranslator
from .storage import (
    MetaStoreMapper,
    StateStoreMapper,
    aliyun_oss_endpoint,
    virtual_hosted_endpoint,
)
from .validation import ForwardConvertibilityValidator


def _wrap_validation_error(exc: ValidationError) -> ConversionValidationError:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    return ConversionValidationError(
        f"{exc.title} is invalid: {first.get('msg', str(exc))}",
        field_name=location or None,
    )


def convert_forward(
    source: v1alpha1.RisingWave | dict[str, Any], *, strict: bool = True
) -> v1alpha2.RisingWave:
    """High-level helper used by the conversion pipeline."""
    try:
        if isinstance(source, dict):
            source = v1alpha1.RisingWave.model_validate(source)
        return RisingWaveConverter(strict=strict).convert_forward(source)
    except ValidationError as exc:
        raise _wrap_validation_error(exc) from exc


def convert_backward(source: v1alpha2.RisingWave | dict[str, Any]) -> NoReturn:
    """Backward conversion is not supported; see ``RisingWaveConverter``."""
    try:
        if isinstance(source, dict):
            source = v1alpha2.RisingWave.model_validate(source)
    except ValidationError as exc:
        raise _wrap_validation_error(exc) from exc
    RisingWaveConverter().convert_backward(source)


__all__ = [
    "ComponentExpander",
    "ForwardConvertibilityValidator",
    "MetaStoreMapper",
    "PodTemplateConverter",
    "RisingWaveConverter",
    "ScaleViewLockLedger",
    "StateStoreMapper",
    "StatusTranslator",
    "aliyun_oss_endpoint",
    "convert_backward",
    "convert_forward",
    "virtual_hosted_endpoint",
]
