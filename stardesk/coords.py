"""Equatorial and horizontal sky coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Layout, Point2D
from .mathutil import HALF_PI, to_degrees, to_hours_radian, to_radian_hours, to_radians


@dataclass(frozen=True)
class RaDec:
    """Right ascension and declination, both in radians."""

    ra: float = 0.0
    dec: float = 0.0

    @classmethod
    def from_degrees(cls, ra_degrees: float, dec_degrees: float) -> RaDec:
        """Build from right ascension and declination in degrees."""
        return cls(to_radians(ra_degrees), to_radians(dec_degrees))

    @classmethod
    def from_hours(cls, ra_hours: float, dec_degrees: float) -> RaDec:
        """Build from right ascension in hours and declination in degrees."""
        return cls(to_radian_hours(ra_hours), to_radians(dec_degrees))

    @classmethod
    def from_hours_polar(cls, ra_hours: float, polar_degrees: float) -> RaDec:
        """Build from right ascension in hours and north polar distance in degrees."""
        return cls(to_radian_hours(ra_hours), HALF_PI - to_radians(polar_degrees))

    @property
    def ra_degrees(self) -> float:
        return to_degrees(self.ra)

    @property
    def ra_hours(self) -> float:
        return to_hours_radian(self.ra)

    @property
    def dec_degrees(self) -> float:
        return to_degrees(self.dec)


@dataclass
class AzimutAltitude:
    """Horizontal coordinates for a place and time, in radians."""

    azimut: float = 0.0
    altitude: float = 0.0

    def is_visible(self) -> bool:
        """True when the object is on or above the horizon."""
        return self.altitude >= 0.0

    def to_screen(self, layout: Layout) -> Point2D:
        """Stereographic projection onto a disc fitting the layout, centred at 0,0."""
        cos_alt = math.cos(self.altitude)
        x = cos_alt * math.sin(self.azimut)
        y = cos_alt * math.cos(self.azimut)
        z = math.sin(self.altitude)
        r = layout.min() / 2.0
        # negated so east/west match a sky view and north points up on screen
        xm = r * (-x / (1.0 + z))
        ym = r * (-y / (1.0 + z))
        return Point2D(xm, ym)

    def azimut_degrees(self) -> float:
        return to_degrees(self.azimut)

    def altitude_degrees(self) -> float:
        return to_degrees(self.altitude)