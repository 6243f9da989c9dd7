# -*- coding: utf-8 -*-
"""Measure command for survey projects.

Lists the project points, then measures every leg between consecutive
points with the selected instrument.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from survey_lib.enums import InstrumentKind
from survey_lib.instruments import get_instrument
from survey_lib.io import load_project_json

logger = logging.getLogger(__name__)


def _measure(
    input_path: Path,
    kind: InstrumentKind | str,
    brand: str,
) -> list[str]:
    """Build the measurement report of a project file.

    Returns:
        Report lines: project header, point listing, one line per leg and
        the total distance
    """
    project = load_project_json(input_path)
    instrument = get_instrument(kind, brand)

    lines = [f"Project: {project.name}"]
    if project.info is not None:
        lines.append(project.info.full_info())
    lines.extend(project.describe_points())
    lines.append(f"Instrument: {instrument.name} ({instrument.brand})")

    measurements = project.measure_distances(instrument)
    for m in measurements:
        line = f"Leg {m.from_index + 1} -> {m.to_index + 1}: {m.distance:.3f} m"
        if m.azimuth is not None:
            line += f", azimuth {m.azimuth:.4f}°"
        lines.append(line)

    lines.append(f"Total: {sum(m.distance for m in measurements):.3f} m")
    return lines


def measure(args: list[str]) -> int:
    """Entry point for the measure command."""
    parser = argparse.ArgumentParser(
        prog="survey measure",
        description="Measure the legs between consecutive project points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  survey measure -i lot45.json                          # GPS receiver
  survey measure -i lot45.json -t total_station --brand "Leica TS16"
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
        "-t",
        "--instrument",
        choices=[kind.value for kind in InstrumentKind],
        default=InstrumentKind.GPS_RECEIVER.value,
        help="Instrument used to measure distances (default: gps_receiver)",
    )
    parser.add_argument(
        "--brand",
        default="generic",
        help="Brand/model tag of the instrument",
    )

    parsed_args = parser.parse_args(args)

    try:
        lines = _measure(
            input_path=parsed_args.input_file,
            kind=parsed_args.instrument,
            brand=parsed_args.brand,
        )
    except FileNotFoundError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1
    except ValueError as e:
        logger.error("Measure failed: %s", e)  # noqa: TRY400
        return 1

    for line in lines:
        print(line)  # noqa: T201

    return 0
