# -*- coding: utf-8 -*-
"""File I/O operations for survey projects.

Projects are stored as JSON using Pydantic's built-in serialization:

    from survey_lib.io import load_project_json

    project = load_project_json(Path("lot45.json"))
    export_to_file(Path("lot45.csv"), project, CSVExporter())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from survey_lib.constants import JSON_ENCODING
from survey_lib.project import SurveyProject

if TYPE_CHECKING:
    from pathlib import Path

    from survey_lib.exporters.base import Exporter

logger = logging.getLogger(__name__)

__all__ = [
    "export_to_file",
    "load_project_json",
    "save_project_json",
]


def save_project_json(path: Path, project: SurveyProject) -> None:
    """Save a project as JSON.

    Args:
        path: Path to write JSON file
        project: Project to serialize
    """
    json_str = project.model_dump_json(indent=2)
    path.write_text(json_str, encoding=JSON_ENCODING)
    logger.info("Saved project %r (%d points) to %s", project.name, len(project), path)


def load_project_json(path: Path) -> SurveyProject:
    """Load a project from JSON.

    Args:
        path: Path to JSON file

    Returns:
        Deserialized project

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file content is not a valid project
    """
    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {path}")

    json_str = path.read_text(encoding=JSON_ENCODING)
    project = SurveyProject.model_validate_json(json_str)
    logger.info("Loaded project %r (%d points) from %s", project.name, len(project), path)
    return project


def export_to_file(path: Path, project: SurveyProject, exporter: Exporter) -> None:
    """Export a project's points and write the result to ``path``.

    Args:
        path: Path to write to
        project: Project whose points are exported
        exporter: Exporter producing the file content
    """
    content = project.export_data(exporter)
    with path.open(mode="w", encoding=JSON_ENCODING, newline="") as f:
        f.write(content)
    logger.info("Exported %d points to %s (%s)", len(project), path, exporter.name)
