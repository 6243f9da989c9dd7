# -*- coding: utf-8 -*-
"""Survey Library.

A Python library for land survey projects: validated geographic points,
interchangeable distance instruments (GPS receiver, total station) and
exporters (CSV, JSON, GeoJSON).

Usage:
    from survey_lib import CSVExporter
    from survey_lib import GeoPoint
    from survey_lib import GPSReceiver
    from survey_lib import SurveyProject

    project = SurveyProject(name="Lot 45")
    project.add_point(GeoPoint(latitude=-23.55, longitude=-46.63, altitude=760))
    project.add_point(GeoPoint(latitude=-23.56, longitude=-46.64, altitude=755))

    for leg in project.measure_distances(GPSReceiver("Garmin")):
        print(f"{leg.from_index} -> {leg.to_index}: {leg.distance:.2f} m")

    print(project.export_data(CSVExporter()))
"""

__version__ = "0.1.0"

from pydantic import ValidationError

# Constants
from survey_lib.constants import EARTH_RADIUS_METERS
from survey_lib.constants import JSON_ENCODING
from survey_lib.constants import METERS_PER_DEGREE_LATITUDE
from survey_lib.constants import METERS_PER_DEGREE_LONGITUDE

# Enums
from survey_lib.enums import ExportFormat
from survey_lib.enums import InstrumentKind
from survey_lib.enums import PointType
from survey_lib.exporters import CSVExporter
from survey_lib.exporters import Exporter
from survey_lib.exporters import GeoJSONExporter
from survey_lib.exporters import JSONExporter
from survey_lib.exporters import get_exporter
from survey_lib.instruments import DistanceInstrument
from survey_lib.instruments import GPSReceiver
from survey_lib.instruments import TotalStation
from survey_lib.instruments import get_instrument
from survey_lib.io import export_to_file
from survey_lib.io import load_project_json
from survey_lib.io import save_project_json
from survey_lib.models import GeoPoint
from survey_lib.models import Locatable
from survey_lib.models import MeasuredPoint
from survey_lib.models import SurveyPoint
from survey_lib.project import Measurement
from survey_lib.project import ProjectInfo
from survey_lib.project import SurveyProject

__all__ = [
    # Constants
    "EARTH_RADIUS_METERS",
    "JSON_ENCODING",
    "METERS_PER_DEGREE_LATITUDE",
    "METERS_PER_DEGREE_LONGITUDE",
    # Exporters
    "CSVExporter",
    # Instruments
    "DistanceInstrument",
    # Enums
    "ExportFormat",
    "Exporter",
    "GPSReceiver",
    # Models
    "GeoJSONExporter",
    "GeoPoint",
    "InstrumentKind",
    "JSONExporter",
    "Locatable",
    "MeasuredPoint",
    "Measurement",
    "PointType",
    # Project
    "ProjectInfo",
    "SurveyPoint",
    "SurveyProject",
    "TotalStation",
    # Errors
    "ValidationError",
    # I/O
    "export_to_file",
    "get_exporter",
    "get_instrument",
    "load_project_json",
    "save_project_json",
]
