# -*- coding: utf-8 -*-
"""GPS receiver: great-circle distance on a spherical earth.

Uses the Haversine formula with a mean earth radius of 6,371 km. Altitude
is not part of the computation; two points stacked vertically are 0 m apart.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from survey_lib.constants import EARTH_RADIUS_METERS
from survey_lib.enums import InstrumentKind
from survey_lib.instruments.base import DistanceInstrument

if TYPE_CHECKING:
    from survey_lib.models import Locatable


def haversine_distance(
    lat_a: float,
    lon_a: float,
    lat_b: float,
    lon_b: float,
    radius: float = EARTH_RADIUS_METERS,
) -> float:
    """Great-circle distance between two coordinates.

    Args:
        lat_a: Latitude of the first point in decimal degrees
        lon_a: Longitude of the first point in decimal degrees
        lat_b: Latitude of the second point in decimal degrees
        lon_b: Longitude of the second point in decimal degrees
        radius: Sphere radius in meters

    Returns:
        Distance in meters

    Examples:
        >>> round(haversine_distance(0.0, 0.0, 0.0, 1.0), 1)
        111194.9
    """
    d_lat = math.radians(lat_b - lat_a)
    d_lon = math.radians(lon_b - lon_a)
    phi_a = math.radians(lat_a)
    phi_b = math.radians(lat_b)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(phi_a) * math.cos(phi_b) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push h just outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return radius * c


class GPSReceiver(DistanceInstrument):
    """Distance instrument based on the Haversine formula."""

    kind = InstrumentKind.GPS_RECEIVER

    def measure_distance(self, a: Locatable, b: Locatable) -> float:
        return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
