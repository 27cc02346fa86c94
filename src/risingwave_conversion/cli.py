"""
Command-line interface for converting RisingWave manifests to the hub version.

This module provides the ``rw-convert`` command.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import NoReturn

from .config import ConversionSettings
from .exceptions import (
    ConversionError,
    ConversionNotSupportedError,
    ConversionValidationError,
    ManifestLoadError,
)
from .io.manifest_loader import ManifestLoader
from .models import v1alpha1, v1alpha2
from .pipeline import ConversionPipeline

EXIT_OK = 0
EXIT_VALIDATION = 1
EXIT_LOAD = 2
EXIT_NOT_SUPPORTED = 3
EXIT_CONVERSION = 7
EXIT_FILESYSTEM = 8
EXIT_UNEXPECTED = 9


def configure_logging(
    debug: bool = False, verbose: bool = False, level_name: str = "WARNING"
) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging if True.
        level_name: Level used when neither flag is given.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.getLevelName(level_name)
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rw-convert",
        description=(
            f"Convert RisingWave manifests from {v1alpha1.API_VERSION} "
            f"to {v1alpha2.API_VERSION}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert and print to stdout
  rw-convert risingwave.yaml

  # Convert to a JSON file
  rw-convert risingwave.yaml -o converted.json --format json

  # Keep last-writer-wins semantics for ambiguous storage settings
  rw-convert risingwave.yaml --no-strict

Environment:
  RW_CONVERT_STRICT, RW_CONVERT_OUTPUT_FORMAT, RW_CONVERT_LOG_LEVEL
        """,
    )
    parser.add_argument(
        "input_file", type=Path, help="v1alpha1 manifest (.yaml, .yml or .json)"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        dest="output_file",
        help="Where to write the converted manifest (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        dest="output_format",
        help="Output format (default: yaml)",
    )
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Convert ambiguous sources instead of rejecting them",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable info logging"
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> ConversionSettings:
    """Environment settings overridden by command-line flags."""
    settings = ConversionSettings.from_env()
    if args.no_strict:
        settings = replace(settings, strict=False)
    if args.output_format:
        settings = replace(settings, output_format=args.output_format)
    return settings


def run_conversion(
    input_file: Path,
    output_file: Path | None,
    settings: ConversionSettings,
    debug: bool = False,
) -> int:
    """Execute the conversion and return the process exit code."""
    logger = logging.getLogger(__name__)

    try:
        manifest = ConversionPipeline(input_file, settings).run_to_dict()
        if output_file is None:
            sys.stdout.write(ManifestLoader.dump(manifest, settings.output_format))
        else:
            ManifestLoader.save(manifest, output_file, settings.output_format)
            logger.info("Converted manifest saved to: %s", output_file)
        return EXIT_OK

    except ConversionValidationError as e:
        logger.error("Source validation failed: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        return EXIT_VALIDATION
    except ManifestLoadError as e:
        logger.error("Cannot load manifest: %s", e)
        return EXIT_LOAD
    except ConversionNotSupportedError as e:
        logger.error("Conversion not supported: %s", e)
        return EXIT_NOT_SUPPORTED
    except ConversionError as e:
        logger.error("Conversion error: %s", e)
        return EXIT_CONVERSION
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error("File system error: %s", e)
        return EXIT_FILESYSTEM
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        if debug:
            logger.exception("Full traceback:")
        return EXIT_UNEXPECTED


def main(argv: list[str] | None = None) -> NoReturn:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(args.debug, args.verbose, settings.log_level)
    sys.exit(run_conversion(args.input_file, args.output_file, settings, args.debug))


if __name__ == "__main__":
    main()
