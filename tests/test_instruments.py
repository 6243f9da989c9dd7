# -*- coding: utf-8 -*-
"""Tests for the distance instruments."""

import itertools
import math
from decimal import Decimal

import pytest

from survey_lib.enums import InstrumentKind
from survey_lib.instruments import DistanceInstrument
from survey_lib.instruments import GPSReceiver
from survey_lib.instruments import TotalStation
from survey_lib.instruments import get_instrument
from survey_lib.instruments.gps import haversine_distance
from survey_lib.instruments.total_station import planar_offsets
from survey_lib.models import GeoPoint
from survey_lib.models import MeasuredPoint
from tests.conftest import SAMPLE_COORDINATES

# One degree of arc on a sphere of radius 6,371 km
ONE_DEGREE_ARC = 6_371_000.0 * math.pi / 180.0

SAMPLE_PAIRS = list(itertools.combinations(SAMPLE_COORDINATES, 2))


def _point(coords: tuple[float, float, float]) -> GeoPoint:
    lat, lon, alt = coords
    return GeoPoint(latitude=lat, longitude=lon, altitude=alt)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


class TestDistanceInstrument:
    """Tests for the DistanceInstrument base class."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            DistanceInstrument("generic")  # type: ignore[abstract]

    def test_brand(self):
        assert GPSReceiver("Garmin").brand == "Garmin"
        assert TotalStation("Leica TS16").brand == "Leica TS16"

    def test_name(self):
        assert GPSReceiver("x").name == "GPSReceiver"
        assert TotalStation("x").name == "TotalStation"

    def test_repr(self):
        assert repr(GPSReceiver("Garmin")) == "GPSReceiver(brand='Garmin')"


class TestGetInstrument:
    """Tests for get_instrument factory."""

    def test_by_enum(self):
        instrument = get_instrument(InstrumentKind.TOTAL_STATION, "Topcon")
        assert isinstance(instrument, TotalStation)
        assert instrument.brand == "Topcon"

    def test_by_string(self):
        assert isinstance(get_instrument("gps_receiver", "Trimble"), GPSReceiver)

    def test_kind_attribute(self):
        assert GPSReceiver.kind == InstrumentKind.GPS_RECEIVER
        assert TotalStation.kind == InstrumentKind.TOTAL_STATION

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            get_instrument("theodolite", "Wild")


# ---------------------------------------------------------------------------
# GPS receiver
# ---------------------------------------------------------------------------


class TestGPSReceiver:
    """Tests for the Haversine-based GPSReceiver."""

    gps = GPSReceiver("Garmin")

    def test_one_degree_longitude_at_equator(self, origin, one_degree_east):
        """Test one degree of longitude on the equator."""
        distance = self.gps.measure_distance(origin, one_degree_east)
        assert distance == pytest.approx(ONE_DEGREE_ARC)
        assert distance == pytest.approx(111_194.93, abs=0.01)

    def test_one_degree_latitude(self, origin):
        north = GeoPoint(latitude=1.0, longitude=0.0)
        assert self.gps.measure_distance(origin, north) == pytest.approx(ONE_DEGREE_ARC)

    def test_altitude_ignored(self, origin):
        """Test that a pure vertical offset has no GPS distance."""
        above = GeoPoint(latitude=0.0, longitude=0.0, altitude=1000.0)
        assert self.gps.measure_distance(origin, above) == 0.0

    def test_pole_to_pole(self):
        north = GeoPoint(latitude=90.0, longitude=0.0)
        south = GeoPoint(latitude=-90.0, longitude=0.0)
        assert self.gps.measure_distance(north, south) == pytest.approx(
            math.pi * 6_371_000.0
        )

    def test_antipodal(self):
        """Test that antipodal points give half the circumference, not NaN."""
        a = GeoPoint(latitude=0.0, longitude=0.0)
        b = GeoPoint(latitude=0.0, longitude=180.0)
        distance = self.gps.measure_distance(a, b)
        assert not math.isnan(distance)
        assert distance == pytest.approx(math.pi * 6_371_000.0)

    def test_date_line(self):
        """Test that crossing the anti-meridian takes the short way."""
        a = GeoPoint(latitude=0.0, longitude=179.5)
        b = GeoPoint(latitude=0.0, longitude=-179.5)
        assert self.gps.measure_distance(a, b) == pytest.approx(ONE_DEGREE_ARC)

    @pytest.mark.parametrize("coords", SAMPLE_COORDINATES)
    def test_same_point_is_zero(self, coords):
        point = _point(coords)
        assert self.gps.measure_distance(point, point) == 0.0

    @pytest.mark.parametrize(("a", "b"), SAMPLE_PAIRS)
    def test_symmetric(self, a, b):
        pa, pb = _point(a), _point(b)
        assert self.gps.measure_distance(pa, pb) == pytest.approx(
            self.gps.measure_distance(pb, pa)
        )

    @pytest.mark.parametrize(("a", "b"), SAMPLE_PAIRS)
    def test_bounded(self, a, b):
        """Test that no distance exceeds half the circumference."""
        distance = self.gps.measure_distance(_point(a), _point(b))
        assert 0.0 <= distance <= math.pi * 6_371_000.0 + 1e-6

    def test_measured_point(self, origin):
        """Test that MeasuredPoints are measured like GeoPoints."""
        measured = MeasuredPoint.create(0.0, 1.0, 0.0, 0.02)
        assert self.gps.measure_distance(origin, measured) == pytest.approx(
            ONE_DEGREE_ARC
        )

    def test_haversine_custom_radius(self):
        assert haversine_distance(0.0, 0.0, 0.0, 90.0, radius=1.0) == pytest.approx(
            math.pi / 2
        )


# ---------------------------------------------------------------------------
# Total station
# ---------------------------------------------------------------------------


class TestTotalStation:
    """Tests for the planar TotalStation."""

    station = TotalStation("Leica TS16")

    def test_vertical_offset(self, origin):
        """Test that a pure vertical offset is exactly the altitude delta."""
        above = GeoPoint(latitude=0.0, longitude=0.0, altitude=10.0)
        assert self.station.measure_distance(origin, above) == 10.0

    def test_longitude_scale(self, origin, one_degree_east):
        assert self.station.measure_distance(origin, one_degree_east) == (
            pytest.approx(111_320.0)
        )

    def test_latitude_scale(self, origin):
        north = GeoPoint(latitude=1.0, longitude=0.0)
        assert self.station.measure_distance(origin, north) == pytest.approx(110_540.0)

    def test_three_dimensional(self, origin):
        target = GeoPoint(latitude=0.0001, longitude=0.0001, altitude=5.0)
        dx = 0.0001 * 111_320.0
        dy = 0.0001 * 110_540.0
        assert self.station.measure_distance(origin, target) == pytest.approx(
            math.sqrt(dx**2 + dy**2 + 25.0)
        )

    @pytest.mark.parametrize("coords", SAMPLE_COORDINATES)
    def test_same_point_is_zero(self, coords):
        point = _point(coords)
        assert self.station.measure_distance(point, point) == 0.0

    @pytest.mark.parametrize(("a", "b"), SAMPLE_PAIRS)
    def test_symmetric(self, a, b):
        pa, pb = _point(a), _point(b)
        assert self.station.measure_distance(pa, pb) == pytest.approx(
            self.station.measure_distance(pb, pa)
        )

    def test_planar_offsets(self, origin):
        target = GeoPoint(latitude=-1.0, longitude=2.0, altitude=3.0)
        assert planar_offsets(origin, target) == (222_640.0, -110_540.0, 3.0)

    @pytest.mark.parametrize(
        ("latitude", "longitude", "expected"),
        [
            (1.0, 0.0, 0.0),
            (0.0, 1.0, 90.0),
            (-1.0, 0.0, 180.0),
            (0.0, -1.0, 270.0),
        ],
    )
    def test_azimuth_cardinal(self, origin, latitude, longitude, expected):
        """Test azimuths towards the four cardinal directions."""
        target = GeoPoint(latitude=latitude, longitude=longitude)
        assert self.station.calculate_azimuth(origin, target) == pytest.approx(
            expected
        )

    def test_azimuth_north_east(self, origin):
        target = GeoPoint(latitude=0.001, longitude=0.001)
        expected = math.degrees(math.atan2(111_320.0, 110_540.0))
        assert self.station.calculate_azimuth(origin, target) == pytest.approx(
            expected
        )

    def test_azimuth_north_west_is_positive(self, origin):
        target = GeoPoint(latitude=0.001, longitude=-0.001)
        azimuth = self.station.calculate_azimuth(origin, target)
        assert 270.0 < azimuth < 360.0

    def test_azimuth_is_directional(self, origin, one_degree_east):
        forward = self.station.calculate_azimuth(origin, one_degree_east)
        backward = self.station.calculate_azimuth(one_degree_east, origin)
        assert forward == pytest.approx(90.0)
        assert backward == pytest.approx(270.0)

    def test_azimuth_same_point(self, origin):
        assert self.station.calculate_azimuth(origin, origin) == 0.0

    def test_azimuth_tiny_negative_offset(self, origin):
        """Test that a bearing just west of north never reaches 360."""
        target = GeoPoint(latitude=1.0, longitude=-1e-300)
        azimuth = self.station.calculate_azimuth(origin, target)
        assert 0.0 <= azimuth < 360.0

    @pytest.mark.parametrize(
        ("a", "b"),
        SAMPLE_PAIRS + [(b, a) for a, b in SAMPLE_PAIRS],
    )
    def test_azimuth_range(self, a, b):
        azimuth = self.station.calculate_azimuth(_point(a), _point(b))
        assert 0.0 <= azimuth < 360.0


class TestDecimalCoordinates:
    """Tests measuring points built from Decimal coordinates."""

    @pytest.fixture
    def decimal_point(self):
        return GeoPoint(latitude=Decimal("1.5"), longitude=Decimal("1.5"))

    def test_gps_receiver(self, origin, decimal_point):
        """Test GPS distance matches the same point built from floats."""
        float_point = GeoPoint(latitude=1.5, longitude=1.5)
        gps = GPSReceiver("Garmin")
        assert gps.measure_distance(origin, decimal_point) == pytest.approx(
            gps.measure_distance(origin, float_point)
        )

    def test_total_station(self, origin, decimal_point):
        """Test planar distance and azimuth accept Decimal-built points."""
        station = TotalStation("Leica")
        assert station.measure_distance(origin, decimal_point) == pytest.approx(
            math.hypot(1.5 * 111_320.0, 1.5 * 110_540.0)
        )
        assert 0.0 < station.calculate_azimuth(origin, decimal_point) < 90.0

    def test_measured_point(self, origin):
        """Test MeasuredPoint.create with Decimal input."""
        point = MeasuredPoint.create(Decimal("1.5"), Decimal("0"), 0.0, 0.1)
        assert TotalStation("Leica").measure_distance(origin, point) == (
            pytest.approx(1.5 * 110_540.0)
        )
