# -*- coding: utf-8 -*-
"""Abstract base class for distance instruments.

To implement a new instrument:

1. Subclass ``DistanceInstrument``.
2. Set the ``kind`` class attribute.
3. Implement the ``measure_distance`` method.

An instrument is stateless apart from its brand/model tag. It receives two
points (anything exposing ``latitude``, ``longitude`` and ``altitude``) and
returns the distance between them in meters.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import ClassVar

if TYPE_CHECKING:
    from survey_lib.enums import InstrumentKind
    from survey_lib.models import Locatable


class DistanceInstrument(ABC):
    """Abstract base class for distance instruments.

    Subclasses must implement :meth:`measure_distance`. The contract is:

    * The result depends only on the coordinates of the two points.
    * ``measure_distance(a, b) == measure_distance(b, a)``.
    * ``measure_distance(p, p) == 0`` for any valid point.
    """

    kind: ClassVar[InstrumentKind]

    def __init__(self, brand: str) -> None:
        self._brand = brand

    @property
    def brand(self) -> str:
        """Brand/model tag of the instrument."""
        return self._brand

    @property
    def name(self) -> str:
        """Human-readable name of the instrument (for logging / UI)."""
        return self.__class__.__name__

    @abstractmethod
    def measure_distance(self, a: Locatable, b: Locatable) -> float:
        """Measure the distance between two points.

        Args:
            a: First point.
            b: Second point.

        Returns:
            Distance in meters.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.name}(brand={self._brand!r})"
