# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared points, projects and project files for the
test suite.
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING

import pytest

from survey_lib.io import save_project_json
from survey_lib.models import GeoPoint
from survey_lib.models import MeasuredPoint
from survey_lib.project import ProjectInfo
from survey_lib.project import SurveyProject

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Sample Coordinates
# =============================================================================

#: (latitude, longitude, altitude) triples spread over the valid range
SAMPLE_COORDINATES: list[tuple[float, float, float]] = [
    (0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (10.5, 20.25, 5.0),
    (-23.5505, -46.6333, 760.0),
    (51.4779, -0.0015, 46.0),
    (90.0, 180.0, 0.0),
    (-90.0, -180.0, -10.0),
    (35.6762, 139.6503, 40.0),
    (-33.8688, 151.2093, 58.0),
    (64.1466, -21.9426, 12.0),
]


# =============================================================================
# Point Fixtures
# =============================================================================


@pytest.fixture
def origin() -> GeoPoint:
    """Point on the equator at the prime meridian."""
    return GeoPoint(latitude=0.0, longitude=0.0, altitude=0.0)


@pytest.fixture
def one_degree_east() -> GeoPoint:
    """Point on the equator one degree east of the origin."""
    return GeoPoint(latitude=0.0, longitude=1.0, altitude=0.0)


@pytest.fixture
def sample_points() -> list[GeoPoint]:
    return [
        GeoPoint(latitude=lat, longitude=lon, altitude=alt, id=idx)
        for idx, (lat, lon, alt) in enumerate(SAMPLE_COORDINATES, start=1)
    ]


# =============================================================================
# Project Fixtures
# =============================================================================


@pytest.fixture
def project_info() -> ProjectInfo:
    return ProjectInfo(
        name="Topographic Survey - Lot 45",
        author="Survey Team",
        version="1.0.0",
        description="Planimetric and altimetric survey for land regularization.",
        created=datetime.date(2025, 5, 9),
    )


@pytest.fixture
def project(project_info: ProjectInfo) -> SurveyProject:
    """Project with two plain points and one measured point."""
    project = SurveyProject(name="Lot 45", info=project_info)
    project.add_point(GeoPoint(latitude=-23.5505, longitude=-46.6333, altitude=760.0))
    project.add_point(GeoPoint(latitude=-23.5510, longitude=-46.6340, altitude=758.5))
    project.add_point(
        MeasuredPoint.create(-23.5520, -46.6345, 757.0, 0.02, id=3),
    )
    return project


@pytest.fixture
def project_file(tmp_path: Path, project: SurveyProject) -> Path:
    """The ``project`` fixture saved as a JSON project file."""
    path = tmp_path / "lot45.json"
    save_project_json(path, project)
    return path
