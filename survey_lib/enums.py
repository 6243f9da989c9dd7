# -*- coding: utf-8 -*-
"""Enumerations for survey points, instruments and export formats."""

from enum import Enum


class PointType(str, Enum):
    """Discriminator values for the point models.

    Attributes:
        GEO: Plain geographic point
        MEASURED: Geographic point carrying a measurement precision
    """

    GEO = "geo"
    MEASURED = "measured"


class InstrumentKind(str, Enum):
    """Distance instruments available to a survey project.

    Attributes:
        GPS_RECEIVER: Great-circle distance on a spherical earth (Haversine)
        TOTAL_STATION: Local planar approximation, with azimuth support
    """

    GPS_RECEIVER = "gps_receiver"
    TOTAL_STATION = "total_station"


class ExportFormat(str, Enum):
    """Text formats a point sequence can be exported to.

    Attributes:
        CSV: Comma-separated values with a header line
        JSON: Pretty-printed array of point objects
        GEOJSON: RFC 7946 FeatureCollection of points
    """

    CSV = "csv"
    JSON = "json"
    GEOJSON = "geojson"

    @property
    def extension(self) -> str:
        """Get the file extension for this format (with dot)."""
        return {
            ExportFormat.CSV: FileExtension.CSV.value,
            ExportFormat.JSON: FileExtension.JSON.value,
            ExportFormat.GEOJSON: FileExtension.GEOJSON.value,
        }[self]

    @classmethod
    def from_extension(cls, ext: str) -> "ExportFormat | None":
        """Get export format from a file extension.

        Args:
            ext: File extension (with or without dot, case-insensitive)

        Returns:
            ExportFormat or None if not recognized
        """
        ext_lower = ext.lower().lstrip(".")
        mapping = {
            "csv": cls.CSV,
            "json": cls.JSON,
            "geojson": cls.GEOJSON,
        }
        return mapping.get(ext_lower)


class FileExtension(str, Enum):
    """File extensions for the supported formats (with dot).

    Attributes:
        CSV: CSV export extension
        JSON: JSON export and project file extension
        GEOJSON: GeoJSON export extension
    """

    CSV = ".csv"
    JSON = ".json"
    GEOJSON = ".geojson"


class FormatIdentifier(str, Enum):
    """Format identifiers stored in the project JSON envelope.

    Attributes:
        SURVEY_PROJECT: Survey project file
    """

    SURVEY_PROJECT = "survey_project"
