"""Observer positions on earth and the sidereal time needed to place stars."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .coords import AzimutAltitude, RaDec
from .julian import JulianDate
from .mathutil import PI, TWO_PI, to_radians


def earth_rotation_angle(jd: JulianDate) -> float:
    """Earth rotation angle in radians, in the range 0..2pi (IERS TN 32, eq. 14)."""
    t = jd.e2000_days()
    f = math.fmod(t, 1.0)
    theta = TWO_PI * (f + 0.7790572732640 + 0.00273781191135448 * t)
    theta = math.fmod(theta, TWO_PI)
    if theta < 0.0:
        theta += TWO_PI
    return theta


def greenwich_mean_sidereal_time(jd: JulianDate) -> float:
    """Greenwich mean sidereal time in radians, in the range 0..2pi (IAU 2000, eq. 42)."""
    t = jd.e2000_centuries()
    arcseconds = (
        0.014506
        + 4612.156534 * t
        + 1.3915817 * t**2
        - 0.00000044 * t**3
        - 0.000029956 * t**4
        - 0.0000000368 * t**5
    )
    gmst = earth_rotation_angle(jd) + to_radians(arcseconds / 60.0 / 60.0)
    gmst = math.fmod(gmst, TWO_PI)
    if gmst < 0.0:
        gmst += TWO_PI
    return gmst


@dataclass
class GeoPosition:
    """A place on earth; longitude and latitude in degrees, west longitudes negative."""

    lon: float = 0.0
    lat: float = 0.0

    def lon_rad(self) -> float:
        return to_radians(self.lon)

    def lat_rad(self) -> float:
        return to_radians(self.lat)

    def to_azimut_altitude(self, ra_dec: RaDec, jd: JulianDate) -> AzimutAltitude:
        """Horizontal coordinates of an equatorial position seen from here at jd.

        Azimut is counted from north (0) through east, in the range 0..2pi.
        """
        lon_rad = self.lon_rad()
        lat_rad = self.lat_rad()
        gmst = greenwich_mean_sidereal_time(jd)
        local_sidereal_time = math.fmod(gmst + lon_rad, TWO_PI)

        hour_angle = local_sidereal_time - ra_dec.ra
        if hour_angle < 0.0:
            hour_angle += TWO_PI
        if hour_angle > PI:
            hour_angle -= TWO_PI

        az = math.atan2(
            math.sin(hour_angle),
            math.cos(hour_angle) * math.sin(lat_rad) - math.tan(ra_dec.dec) * math.cos(lat_rad),
        )
        alt = math.asin(
            math.sin(lat_rad) * math.sin(ra_dec.dec)
            + math.cos(lat_rad) * math.cos(ra_dec.dec) * math.cos(hour_angle)
        )
        az -= PI
        if az < 0.0:
            az += TWO_PI
        return AzimutAltitude(az, alt)