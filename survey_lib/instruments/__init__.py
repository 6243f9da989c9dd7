# -*- coding: utf-8 -*-
"""Distance instruments for survey projects.

Usage::

    from survey_lib.instruments import GPSReceiver
    from survey_lib.instruments import TotalStation

    gps = GPSReceiver("Garmin")
    meters = gps.measure_distance(point_a, point_b)

    station = TotalStation("Leica TS16")
    bearing = station.calculate_azimuth(point_a, point_b)

Available instruments:

- :class:`GPSReceiver` -- Haversine great-circle distance (altitude ignored)
- :class:`TotalStation` -- planar 3-D distance and azimuth
"""

from __future__ import annotations

import logging

from survey_lib.enums import InstrumentKind
from survey_lib.instruments.base import DistanceInstrument
from survey_lib.instruments.gps import GPSReceiver
from survey_lib.instruments.total_station import TotalStation

logger = logging.getLogger(__name__)

_INSTRUMENTS: dict[InstrumentKind, type[DistanceInstrument]] = {
    InstrumentKind.GPS_RECEIVER: GPSReceiver,
    InstrumentKind.TOTAL_STATION: TotalStation,
}


def get_instrument(kind: InstrumentKind | str, brand: str) -> DistanceInstrument:
    """Build the instrument for ``kind``.

    Args:
        kind: InstrumentKind or its string value ('gps_receiver', ...)
        brand: Brand/model tag of the instrument

    Returns:
        A new instrument instance

    Raises:
        ValueError: If ``kind`` is not a known instrument
    """
    instrument = _INSTRUMENTS[InstrumentKind(kind)](brand)
    logger.debug("Selected instrument %r", instrument)
    return instrument


__all__ = [
    "DistanceInstrument",
    "GPSReceiver",
    "TotalStation",
    "get_instrument",
]
