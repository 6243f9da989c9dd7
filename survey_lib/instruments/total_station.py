# -*- coding: utf-8 -*-
"""Total station: local planar approximation.

Degree differences are converted to meters with fixed scale factors
(111,320 m per degree of longitude, 110,540 m per degree of latitude).
This is not a projection: the factors only hold near the equator and at
mid-latitudes over short baselines, which is what a total station covers.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from survey_lib.constants import FULL_CIRCLE_DEGREES
from survey_lib.constants import METERS_PER_DEGREE_LATITUDE
from survey_lib.constants import METERS_PER_DEGREE_LONGITUDE
from survey_lib.enums import InstrumentKind
from survey_lib.instruments.base import DistanceInstrument

if TYPE_CHECKING:
    from survey_lib.models import Locatable


def planar_offsets(a: Locatable, b: Locatable) -> tuple[float, float, float]:
    """Local (east, north, up) offsets in meters from ``a`` to ``b``."""
    dx = (b.longitude - a.longitude) * METERS_PER_DEGREE_LONGITUDE
    dy = (b.latitude - a.latitude) * METERS_PER_DEGREE_LATITUDE
    dz = b.altitude - a.altitude
    return dx, dy, dz


class TotalStation(DistanceInstrument):
    """Distance instrument using a local planar approximation.

    Unlike :class:`GPSReceiver`, the distance is three-dimensional and
    includes the altitude difference.
    """

    kind = InstrumentKind.TOTAL_STATION

    def measure_distance(self, a: Locatable, b: Locatable) -> float:
        dx, dy, dz = planar_offsets(a, b)
        return math.sqrt(dx**2 + dy**2 + dz**2)

    def calculate_azimuth(self, a: Locatable, b: Locatable) -> float:
        """Compass bearing from ``a`` to ``b``.

        Measured clockwise from north. Identical points give 0.

        Args:
            a: Station point.
            b: Target point.

        Returns:
            Azimuth in degrees, always in [0, 360).
        """
        dx, dy, _ = planar_offsets(a, b)
        azimuth = math.degrees(math.atan2(dx, dy)) % FULL_CIRCLE_DEGREES

        # -1e-15 % 360 rounds up to exactly 360.0
        if azimuth >= FULL_CIRCLE_DEGREES:
            return 0.0
        return azimuth
