"""Approximate planet positions from Keplerian elements."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .coords import RaDec
from .julian import JulianDate
from .mathutil import HALF_PI, TWO_PI, to_degrees, to_radians

Vector = tuple[float, float, float]

_OBLIQUITY = to_radians(23.43928)


@dataclass(frozen=True)
class Elements:
    """Keplerian elements (AU and degrees), or their rates per Julian century."""

    a: float
    e: float
    inclination: float
    mean_longitude: float
    perihelion_longitude: float
    node_longitude: float


@dataclass(frozen=True)
class RaDecPlanet(RaDec):
    """Equatorial position with the distance to the observer in AU."""

    distance: float = 0.0


def rect_to_polar(xyz: Vector) -> RaDecPlanet:
    """Convert an equatorial cartesian vector to right ascension, declination and distance."""
    x, y, z = xyz
    r = math.sqrt(x * x + y * y + z * z)
    ra = math.atan2(y, x)
    dec = math.acos(z / r)
    if ra < 0.0:
        ra += TWO_PI
    return RaDecPlanet(ra, HALF_PI - dec, r)


def _solve_kepler(m: float, e: float, ecc_anomaly: float) -> float:
    dm = m - (ecc_anomaly - to_degrees(e) * math.sin(to_radians(ecc_anomaly)))
    return dm / (1.0 - e * math.cos(to_radians(ecc_anomaly)))


@dataclass
class Planet:
    """A planet described by elements, their rates and optional long-term terms (b, c, s, f)."""

    name: str
    elements: Elements
    rates: Elements
    extra_terms: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    def heliocentric_position(self, jd: JulianDate) -> Vector:
        """Equatorial cartesian position relative to the sun, in AU."""
        t = jd.e2000_centuries()
        el, rt = self.elements, self.rates
        a = el.a + rt.a * t
        e = el.e + rt.e * t
        incl = el.inclination + rt.inclination * t
        mean_long = el.mean_longitude + rt.mean_longitude * t
        peri = el.perihelion_longitude + rt.perihelion_longitude * t
        node = el.node_longitude + rt.node_longitude * t

        arg_peri = peri - node
        m = mean_long - peri
        if any(term != 0.0 for term in self.extra_terms):
            b, c, s, f = self.extra_terms
            m += b * t * t + c * math.cos(to_radians(f * t)) + s * math.sin(to_radians(f * t))
        while m > 180.0:
            m -= 360.0

        ecc_anomaly = m + 57.29578 * e * math.sin(to_radians(m))
        de = 1.0
        n = 0
        while abs(de) > 1e-7 and n < 10:
            de = _solve_kepler(m, e, ecc_anomaly)
            ecc_anomaly += de
            n += 1

        xp = a * (math.cos(to_radians(ecc_anomaly)) - e)
        yp = a * math.sqrt(1 - e * e) * math.sin(to_radians(ecc_anomaly))

        incl = to_radians(incl)
        w = to_radians(arg_peri)
        o = to_radians(node)
        cw, sw = math.cos(w), math.sin(w)
        co, so = math.cos(o), math.sin(o)
        ci, si = math.cos(incl), math.sin(incl)
        xecl = (cw * co - sw * so * ci) * xp + (-sw * co - cw * so * ci) * yp
        yecl = (cw * so + sw * co * ci) * xp + (-sw * so + cw * co * ci) * yp
        zecl = (sw * si) * xp + (cw * si) * yp

        ce, se = math.cos(_OBLIQUITY), math.sin(_OBLIQUITY)
        return (xecl, ce * yecl - se * zecl, se * yecl + ce * zecl)

    def ra_dec(self, jd: JulianDate, earth: Planet) -> RaDecPlanet:
        """Geocentric position, given the planet that stands for earth."""
        own = self.heliocentric_position(jd)
        ref = earth.heliocentric_position(jd)
        return rect_to_polar(tuple(p - q for p, q in zip(own, ref)))