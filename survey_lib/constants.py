# -*- coding: utf-8 -*-
"""Constants used throughout the survey_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON, GeoJSON and CSV files
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Earth Model
# -----------------------------------------------------------------------------

#: Mean earth radius in meters (spherical model used by the Haversine formula)
EARTH_RADIUS_METERS: float = 6_371_000.0

#: Approximate meters per degree of longitude (valid near the equator)
METERS_PER_DEGREE_LONGITUDE: float = 111_320.0

#: Approximate meters per degree of latitude
METERS_PER_DEGREE_LATITUDE: float = 110_540.0

#: Full circle in degrees, used to normalize azimuths into [0, 360)
FULL_CIRCLE_DEGREES: float = 360.0

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Header line of CSV exports
CSV_HEADER: tuple[str, str, str] = ("Latitude", "Longitude", "Altitude")

#: Line terminator of CSV exports (every line, including the last)
CSV_LINE_TERMINATOR: str = "\n"

#: Decimal precision for GeoJSON coordinates (WGS84)
GEOJSON_COORDINATE_PRECISION: int = 7

#: Decimal precision for elevation values in GeoJSON
GEOJSON_ELEVATION_PRECISION: int = 2

# -----------------------------------------------------------------------------
# Project Files
# -----------------------------------------------------------------------------

#: Version of the project JSON envelope
PROJECT_FILE_VERSION: str = "1.0"
