# -*- coding: utf-8 -*-
"""Export command for survey projects.

Renders the points of a project JSON file as CSV, JSON or GeoJSON.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from survey_lib.enums import ExportFormat
from survey_lib.exporters import get_exporter
from survey_lib.io import export_to_file
from survey_lib.io import load_project_json

logger = logging.getLogger(__name__)


def _resolve_format(
    output_path: Path | None,
    target_format: ExportFormat | str | None,
) -> ExportFormat:
    """Pick the export format from the argument, else from the output suffix.

    Defaults to CSV when neither is given or when the output is a directory.
    """
    if target_format is not None:
        return ExportFormat(target_format)

    if output_path is not None and not output_path.is_dir():
        if (fmt := ExportFormat.from_extension(output_path.suffix)) is not None:
            return fmt
        raise ValueError(f"Unknown file extension: `{output_path.suffix}`")

    return ExportFormat.CSV


def _export(
    input_path: Path,
    output_path: Path | None = None,
    target_format: ExportFormat | str | None = None,
) -> str | None:
    """Export a project file.

    Args:
        input_path: Project JSON file
        output_path: Output file path (None = return as string). A directory
            receives a file named after the input with the format's extension
        target_format: Target format (ExportFormat or 'csv'/'json'/'geojson')

    Returns:
        Exported content as string if output_path is None,
        otherwise None (writes to file)

    Raises:
        FileNotFoundError: If input file doesn't exist
        ValueError: If the format is unknown or the project is invalid
    """
    project = load_project_json(input_path)
    fmt = _resolve_format(output_path, target_format)
    exporter = get_exporter(fmt)

    if output_path is None:
        return project.export_data(exporter)

    if output_path.is_dir():
        output_path = output_path / f"{input_path.stem}{fmt.extension}"

    export_to_file(output_path, project, exporter)
    return None


def export(args: list[str]) -> int:
    """Entry point for the export command."""
    parser = argparse.ArgumentParser(
        prog="survey export",
        description="Export the points of a survey project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  survey export -i lot45.json                      # CSV to stdout
  survey export -i lot45.json -f json              # JSON to stdout
  survey export -i lot45.json -o lot45.geojson     # Format from extension
  survey export -i lot45.json -o out/ -f json       # Writes out/lot45.json
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Project file path (.json)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file or directory (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=None,
        dest="target_format",
        help="Target format (from the output extension if not specified)",
    )

    parsed_args = parser.parse_args(args)

    try:
        result = _export(
            input_path=parsed_args.input_file,
            output_path=parsed_args.output_file,
            target_format=parsed_args.target_format,
        )
    except FileNotFoundError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1
    except ValueError as e:
        logger.error("Export failed: %s", e)  # noqa: TRY400
        return 1

    if result is not None:
        print(result, end="")  # noqa: T201

    return 0
