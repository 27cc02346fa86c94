"""Runtime settings of the converter, read from the environment."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Literal

logger = logging.getLogger(__name__)

ENV_STRICT = "RW_CONVERT_STRICT"
ENV_OUTPUT_FORMAT = "RW_CONVERT_OUTPUT_FORMAT"
ENV_LOG_LEVEL = "RW_CONVERT_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

OutputFormat = Literal["yaml", "json"]


def _parse_bool(name: str, raw: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean %s=%r, using %s", name, raw, default)
    return default


@dataclass(frozen=True)
class ConversionSettings:
    """
    Settings shared by the pipeline and the CLI.

    Attributes:
        strict: Reject sources that are not forward-convertible (several
            storage backends set, contradictory S3 options, unnamed groups)
            instead of converting them with last-writer-wins semantics.
        output_format: Serialization of the converted manifest.
        log_level: Name of the logging level used by the CLI.
    """

    strict: bool = True
    output_format: OutputFormat = "yaml"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ConversionSettings":
        env = os.environ if environ is None else environ
        settings = cls()

        if ENV_STRICT in env:
            settings = replace(
                settings, strict=_parse_bool(ENV_STRICT, env[ENV_STRICT], True)
            )

        fmt = env.get(ENV_OUTPUT_FORMAT, "").strip().lower()
        if fmt in ("yaml", "json"):
            settings = replace(settings, output_format=fmt)
        elif fmt:
            logger.warning("Ignoring unknown %s=%r", ENV_OUTPUT_FORMAT, fmt)

        level = env.get(ENV_LOG_LEVEL, "").strip().upper()
        if level:
            if isinstance(logging.getLevelName(level), int):
                settings = replace(settings, log_level=level)
            else:
                logger.warning("Ignoring unknown %s=%r", ENV_LOG_LEVEL, level)

        return settings
