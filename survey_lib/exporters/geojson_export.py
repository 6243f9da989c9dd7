# -*- coding: utf-8 -*-
"""GeoJSON export of survey points.

GeoJSON output uses WGS84 coordinates in RFC 7946 order
(longitude, latitude, elevation in meters).
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

import orjson
from geojson import Feature
from geojson import FeatureCollection
from geojson import Point

from survey_lib.constants import GEOJSON_COORDINATE_PRECISION
from survey_lib.constants import GEOJSON_ELEVATION_PRECISION
from survey_lib.constants import JSON_ENCODING
from survey_lib.enums import ExportFormat
from survey_lib.exporters.base import Exporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from survey_lib.models import Locatable


def point_to_feature(point: Locatable, index: int) -> Feature:
    """Convert a point to a GeoJSON Point feature.

    Args:
        point: Point to convert
        index: 1-based position of the point in the exported sequence

    Returns:
        Feature with ``index`` and, when known, ``id`` and ``precision``
        properties
    """
    properties: dict[str, Any] = {"index": index}
    if (point_id := getattr(point, "id", None)) is not None:
        properties["id"] = point_id
    if (precision := getattr(point, "precision", None)) is not None:
        properties["precision"] = float(precision)

    return Feature(
        geometry=Point(
            (
                round(float(point.longitude), GEOJSON_COORDINATE_PRECISION),
                round(float(point.latitude), GEOJSON_COORDINATE_PRECISION),
                round(float(point.altitude), GEOJSON_ELEVATION_PRECISION),
            ),
            precision=GEOJSON_COORDINATE_PRECISION,
        ),
        properties=properties,
    )


class GeoJSONExporter(Exporter):
    """Export points as a GeoJSON FeatureCollection."""

    format = ExportFormat.GEOJSON

    def __init__(self, *, minify: bool = False) -> None:
        self._minify = minify

    def export(self, points: Sequence[Locatable]) -> str:
        collection = FeatureCollection(
            [point_to_feature(point, idx) for idx, point in enumerate(points, start=1)]
        )
        opts = 0 if self._minify else orjson.OPT_INDENT_2
        return orjson.dumps(collection, option=opts).decode(JSON_ENCODING)
