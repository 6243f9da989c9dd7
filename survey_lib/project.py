# -*- coding: utf-8 -*-
"""Survey project model.

A project owns an ordered sequence of points and delegates distance
computation and export to the instrument or exporter it is handed.

Serialization is fully automatic via Pydantic:
    json_str = project.model_dump_json(indent=2)
    project = SurveyProject.model_validate_json(json_str)
"""

from __future__ import annotations

import datetime  # noqa: TC003
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from survey_lib.constants import PROJECT_FILE_VERSION
from survey_lib.enums import FormatIdentifier
from survey_lib.instruments.total_station import TotalStation
from survey_lib.models import SurveyPoint  # noqa: TC001

if TYPE_CHECKING:
    from collections.abc import Iterator

    from survey_lib.exporters.base import Exporter
    from survey_lib.instruments.base import DistanceInstrument

logger = logging.getLogger(__name__)


class ProjectInfo(BaseModel):
    """Descriptive metadata of a survey project.

    Built once by the caller (typically from a project file) and attached
    to the project; there is no process-wide instance.
    """

    name: str
    author: str = ""
    version: str = "1.0.0"
    description: str = ""
    created: datetime.date | None = None

    def full_info(self) -> str:
        """Render the metadata as a multi-line block."""
        created = self.created.isoformat() if self.created else ""
        return (
            f"{self.name}\n"
            f"Author: {self.author}\n"
            f"Version: {self.version}\n"
            f"Date: {created}\n"
            f"Description: {self.description}"
        )


@dataclass(frozen=True)
class Measurement:
    """A distance measured along one leg of the project traverse.

    ``from_index`` and ``to_index`` are 0-based positions in the project's
    point sequence. ``azimuth`` is only set by instruments that measure one.
    """

    from_index: int
    to_index: int
    distance: float
    azimuth: float | None = None


class SurveyProject(BaseModel):
    """A named, ordered collection of survey points.

    Points keep their insertion order and duplicates are allowed. The
    sequence is a frozen tuple field: assigning ``points`` raises a
    ValidationError, so it can only grow through :meth:`add_point`.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Wrapper format fields (for JSON compatibility)
    version: str = PROJECT_FILE_VERSION
    format: str = Field(default=FormatIdentifier.SURVEY_PROJECT.value)
    name: str
    info: ProjectInfo | None = None
    points: tuple[SurveyPoint, ...] = Field(default=(), frozen=True)

    def __len__(self) -> int:
        return len(self.points)

    def add_point(self, point: SurveyPoint) -> None:
        """Append a point to the project."""
        # Frozen field: bypass __setattr__, the only writer of the sequence
        self.__dict__["points"] = (*self.points, point)
        logger.debug(
            "Project %r: added point #%d (%s)",
            self.name,
            len(self.points),
            point,
        )

    def all_points(self) -> tuple[SurveyPoint, ...]:
        """Return every point, in insertion order."""
        return self.points

    def iter_points(self) -> Iterator[SurveyPoint]:
        yield from self.points

    def describe_points(self) -> list[str]:
        """One ``"Point {n}: {description}"`` line per point, 1-based."""
        return [
            f"Point {idx}: {point.describe()}"
            for idx, point in enumerate(self.points, start=1)
        ]

    def export_data(self, exporter: Exporter) -> str:
        """Serialize every point with ``exporter``."""
        logger.debug(
            "Project %r: exporting %d points with %s",
            self.name,
            len(self.points),
            exporter.name,
        )
        return exporter.export(self.points)

    def measure_distances(self, instrument: DistanceInstrument) -> list[Measurement]:
        """Measure each leg between consecutive points.

        Args:
            instrument: Instrument used for every leg. A TotalStation also
                records the azimuth of each leg.

        Returns:
            One Measurement per leg, ``len(points) - 1`` in total
        """
        if len(self.points) < 2:  # noqa: PLR2004
            logger.warning(
                "Project %r has fewer than 2 points -- nothing to measure",
                self.name,
            )
            return []

        measurements: list[Measurement] = []
        for idx, (a, b) in enumerate(zip(self.points, self.points[1:])):
            azimuth = (
                instrument.calculate_azimuth(a, b)
                if isinstance(instrument, TotalStation)
                else None
            )
            measurement = Measurement(
                from_index=idx,
                to_index=idx + 1,
                distance=instrument.measure_distance(a, b),
                azimuth=azimuth,
            )
            logger.debug("%s: %s", instrument.name, measurement)
            measurements.append(measurement)

        return measurements

    def total_distance(self, instrument: DistanceInstrument) -> float:
        """Sum of all leg distances measured with ``instrument``."""
        return sum(m.distance for m in self.measure_distances(instrument))
