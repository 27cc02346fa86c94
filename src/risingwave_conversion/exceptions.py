"""
Conversion Exception Classes

Typed exception hierarchy used across the v1alpha1 → v1alpha2 conversion.
"""

from typing import Any


class ConversionError(Exception):
    """Base exception for all RisingWave conversion errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class ConversionValidationError(ConversionError):
    """Raised when a source object cannot be converted without losing meaning."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        actual_value: Any = None,
    ) -> None:
        context = {}
        if field_name:
            context["field_name"] = field_name
        if actual_value is not None:
            context["actual_value"] = str(actual_value)
        super().__init__(message, "VALIDATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the validation error."""
        if "field_name" in self.context:
            field = self.context["field_name"]
            return f"Check the value of '{field}' in the source object"
        return "Check the source object against the v1alpha1 schema"


class ConversionNotSupportedError(ConversionError):
    """Raised when a conversion direction is not implemented."""

    def __init__(self, source_version: str, target_version: str) -> None:
        super().__init__(
            f"conversion from {source_version} to {target_version} is not supported",
            "NOT_SUPPORTED",
            {"source_version": source_version, "target_version": target_version},
        )


class ManifestLoadError(ConversionError):
    """
    Raised by the I/O layer when a manifest cannot be read or parsed.

    Examples
    --------
    * File does not exist / bad extension
    * YAML or JSON syntax error
    * Top-level object is not a mapping
    * apiVersion or kind is not the expected one
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        context = {"path": path} if path else None
        super().__init__(message, "MANIFEST_LOAD_ERROR", context)
