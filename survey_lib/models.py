# -*- coding: utf-8 -*-
"""Point models for survey projects.

This module contains the Pydantic models used to represent surveyed points:
- GeoPoint: latitude, longitude and altitude with range validation
- MeasuredPoint: a GeoPoint paired with its measurement precision
- SurveyPoint: discriminated union of both, used for project storage

Latitude and longitude are validated on construction and again on every
assignment, so an out-of-range coordinate never reaches a stored point.
"""

from __future__ import annotations

from typing import Annotated
from typing import Any
from typing import Literal
from typing import Protocol
from typing import runtime_checkable

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import FiniteFloat
from pydantic import Tag
from pydantic import field_validator
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from survey_lib.enums import PointType
from survey_lib.format import format_number


@runtime_checkable
class Locatable(Protocol):
    """Read/describe capability shared by every kind of survey point."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...

    @property
    def altitude(self) -> float: ...

    def describe(self) -> str: ...


class GeoPoint(BaseModel):
    """A geographic point with altitude.

    Attributes:
        latitude: Decimal degrees in [-90, 90]
        longitude: Decimal degrees in [-180, 180]
        altitude: Meters, any finite value
        id: Optional integer identifier
    """

    model_config = ConfigDict(validate_assignment=True)

    type: Literal["geo"] = "geo"
    latitude: Latitude
    longitude: Longitude
    altitude: FiniteFloat = 0.0
    id: int | None = None

    @field_validator("latitude", "longitude", mode="after")
    @classmethod
    def coerce_to_float(cls, value: Any) -> float:
        # Latitude/Longitude keep Decimal inputs as Decimal
        return float(value)

    def describe(self) -> str:
        """Format as ``"Lat: {lat}, Lon: {lon}, Alt: {alt} m"``."""
        return (
            f"Lat: {format_number(self.latitude)}, "
            f"Lon: {format_number(self.longitude)}, "
            f"Alt: {format_number(self.altitude)} m"
        )


class MeasuredPoint(BaseModel):
    """A geographic point together with the precision it was measured at.

    The coordinates live on the wrapped ``point``; they are exposed read-only
    here so a MeasuredPoint can be used anywhere a GeoPoint is read.
    Precision is a measurement uncertainty in meters. It must be finite but
    is not range checked.
    """

    model_config = ConfigDict(validate_assignment=True)

    type: Literal["measured"] = "measured"
    point: GeoPoint
    precision: FiniteFloat

    @classmethod
    def create(
        cls,
        latitude: float,
        longitude: float,
        altitude: float,
        precision: float,
        *,
        id: int | None = None,  # noqa: A002
    ) -> MeasuredPoint:
        """Build a MeasuredPoint from raw coordinates.

        Raises:
            ValidationError: If latitude or longitude is out of range
        """
        return cls(
            point=GeoPoint(
                latitude=latitude,
                longitude=longitude,
                altitude=altitude,
                id=id,
            ),
            precision=precision,
        )

    @property
    def latitude(self) -> float:
        return self.point.latitude

    @property
    def longitude(self) -> float:
        return self.point.longitude

    @property
    def altitude(self) -> float:
        return self.point.altitude

    @property
    def id(self) -> int | None:
        return self.point.id

    def describe(self) -> str:
        return f"{self.point.describe()} (±{format_number(self.precision)} m)"


# --- Discriminated Union ---


def _get_point_type(v: Any) -> str:
    """Extract the discriminator value for point types.

    Handles both dict input (from JSON) and already-instantiated models.
    Points serialized without a ``type`` field are read as plain GeoPoints.
    """
    if isinstance(v, dict):
        return v.get("type", PointType.GEO.value)
    return getattr(v, "type", PointType.GEO.value)


SurveyPoint = Annotated[
    Annotated[GeoPoint, Tag(PointType.GEO.value)]
    | Annotated[MeasuredPoint, Tag(PointType.MEASURED.value)],
    Discriminator(_get_point_type),
]
