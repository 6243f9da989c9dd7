# -*- coding: utf-8 -*-
"""JSON export of survey points."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson

from survey_lib.constants import JSON_ENCODING
from survey_lib.enums import ExportFormat
from survey_lib.exporters.base import Exporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from survey_lib.models import Locatable


class JSONExporter(Exporter):
    """Export points as a pretty-printed JSON array.

    Each element has exactly the keys ``latitude``, ``longitude`` and
    ``altitude``, in that order.
    """

    format = ExportFormat.JSON

    def export(self, points: Sequence[Locatable]) -> str:
        data = [
            {
                "latitude": float(point.latitude),
                "longitude": float(point.longitude),
                "altitude": float(point.altitude),
            }
            for point in points
        ]
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode(JSON_ENCODING)
