# -*- coding: utf-8 -*-
"""Exporters rendering point sequences to text formats.

Usage::

    from survey_lib.exporters import CSVExporter

    text = project.export_data(CSVExporter())

Available exporters:

- :class:`CSVExporter` -- ``Latitude,Longitude,Altitude`` rows
- :class:`JSONExporter` -- pretty-printed array of point objects
- :class:`GeoJSONExporter` -- FeatureCollection of Point features
"""

from __future__ import annotations

from survey_lib.enums import ExportFormat
from survey_lib.exporters.base import Exporter
from survey_lib.exporters.csv_export import CSVExporter
from survey_lib.exporters.geojson_export import GeoJSONExporter
from survey_lib.exporters.json_export import JSONExporter

_EXPORTERS: dict[ExportFormat, type[Exporter]] = {
    ExportFormat.CSV: CSVExporter,
    ExportFormat.JSON: JSONExporter,
    ExportFormat.GEOJSON: GeoJSONExporter,
}


def get_exporter(fmt: ExportFormat | str) -> Exporter:
    """Build the exporter for ``fmt``.

    Args:
        fmt: ExportFormat or its string value ('csv', 'json', 'geojson')

    Returns:
        A new exporter instance

    Raises:
        ValueError: If ``fmt`` is not a known export format
    """
    return _EXPORTERS[ExportFormat(fmt)]()


__all__ = [
    "CSVExporter",
    "Exporter",
    "GeoJSONExporter",
    "JSONExporter",
    "get_exporter",
]
