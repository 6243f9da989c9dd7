# -*- coding: utf-8 -*-
"""CSV export of survey points."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from survey_lib.constants import CSV_HEADER
from survey_lib.constants import CSV_LINE_TERMINATOR
from survey_lib.enums import ExportFormat
from survey_lib.exporters.base import Exporter
from survey_lib.format import format_number

if TYPE_CHECKING:
    from collections.abc import Sequence

    from survey_lib.models import Locatable


class CSVExporter(Exporter):
    """Export points as ``Latitude,Longitude,Altitude`` rows.

    Example output::

        Latitude,Longitude,Altitude
        10.5,20.25,5
    """

    format = ExportFormat.CSV

    def export(self, points: Sequence[Locatable]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator=CSV_LINE_TERMINATOR)
        writer.writerow(CSV_HEADER)
        writer.writerows(
            (
                format_number(point.latitude),
                format_number(point.longitude),
                format_number(point.altitude),
            )
            for point in points
        )
        return buffer.getvalue()
