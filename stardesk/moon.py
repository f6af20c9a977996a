"""Low precision moon position and phase."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .coords import RaDec
from .julian import JulianDate
from .mathutil import PI, TWO_PI, to_degrees, to_radians


@dataclass(frozen=True)
class Phase:
    """Moon phase given by the phase angle i (0 full, pi new, 2pi full again)."""

    i: float

    def phase(self) -> float:
        """Relative phase, 1 at full moon down to 0 at new moon."""
        return abs(PI - self.i) / PI

    def illuminated(self) -> float:
        """Illuminated fraction of the disc, 1 full .. 0 new (not linear in phase)."""
        return (1.0 + math.cos(self.i)) / 2.0

    def is_waning(self) -> bool:
        """True for phase angles from pi on."""
        return self.i >= PI


def _sind(deg: float) -> float:
    return math.sin(to_radians(deg))


def _cosd(deg: float) -> float:
    return math.cos(to_radians(deg))


def _constrain(deg: float) -> float:
    t = math.fmod(deg, 360.0)
    if t < 0.0:
        t += 360.0
    return t


def moon_position(jd: JulianDate) -> RaDec:
    """Geocentric moon position (Astronomical Almanac D22, low precision)."""
    t = jd.e2000_centuries()
    lon = (
        218.32
        + 481267.881 * t
        + 6.29 * _sind(135.0 + 477198.87 * t)
        - 1.27 * _sind(259.3 - 413335.36 * t)
        + 0.66 * _sind(235.7 + 890534.22 * t)
        + 0.21 * _sind(269.9 + 954397.74 * t)
        - 0.19 * _sind(357.5 + 35999.05 * t)
        - 0.11 * _sind(186.5 + 966404.03 * t)
    )
    lat = (
        5.13 * _sind(93.3 + 483202.02 * t)
        + 0.28 * _sind(228.2 + 960400.89 * t)
        - 0.28 * _sind(318.3 + 6003.15 * t)
        - 0.17 * _sind(217.6 - 407332.21 * t)
    )
    l = _cosd(lat) * _cosd(lon)
    m = 0.9175 * _cosd(lat) * _sind(lon) - 0.3978 * _sind(lat)
    n = 0.3978 * _cosd(lat) * _sind(lon) + 0.9175 * _sind(lat)

    ra = math.atan2(m, l)
    if ra < 0.0:
        ra += TWO_PI
    return RaDec(ra, math.asin(n))


def moon_phase(jd: JulianDate) -> Phase:
    """Moon phase angle after Meeus 47.2-47.4 and 48.4."""
    t = jd.e2000_centuries()
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    d = to_radians(_constrain(
        297.8501921 + 445267.1114034 * t - 0.0018819 * t2 + t3 / 545868.0 - t4 / 113065000.0))
    m = to_radians(_constrain(
        357.5291092 + 35999.0502909 * t - 0.0001536 * t2 + t3 / 24490000.0))
    mp = to_radians(_constrain(
        134.9633964 + 477198.8675055 * t + 0.0087414 * t2 + t3 / 69699.0 - t4 / 14712000.0))

    i = to_radians(_constrain(
        180.0
        - to_degrees(d)
        - 6.289 * math.sin(mp)
        + 2.1 * math.sin(m)
        - 1.274 * math.sin(2.0 * d - mp)
        - 0.658 * math.sin(2.0 * d)
        - 0.214 * math.sin(2.0 * mp)
        - 0.11 * math.sin(d)
    ))
    return Phase(i)