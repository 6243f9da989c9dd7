# -*- coding: utf-8 -*-
"""Abstract base class for point exporters.

An exporter is a pure function of a point sequence: it renders the points
to a string, in input order, and never mutates them.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from survey_lib.enums import ExportFormat
    from survey_lib.models import Locatable


class Exporter(ABC):
    """Abstract base class for point exporters."""

    format: ClassVar[ExportFormat]

    @property
    def name(self) -> str:
        """Human-readable name of the exporter (for logging / UI)."""
        return self.__class__.__name__

    @abstractmethod
    def export(self, points: Sequence[Locatable]) -> str:
        """Serialize ``points`` to text.

        Args:
            points: Points to export, in the order they should appear.

        Returns:
            The serialized document.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.name}()"
