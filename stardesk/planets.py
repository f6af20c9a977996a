"""The planets of the solar system with their orbital elements (1850-2050 short-term set)."""

from __future__ import annotations

from .julian import JulianDate
from .planet import Elements, Planet, RaDecPlanet


class PlanetNotFoundError(ValueError):
    """Raised when a planet is looked up by a name that is not known."""


def _make_others() -> list[Planet]:
    return [
        Planet(
            "Mercury",
            Elements(0.38709927, 0.20563593, 7.00497902, 252.25032350, 77.45779628, 48.33076593),
            Elements(0.00000037, 0.00001906, -0.00594749, 149472.67411175, 0.16047689, -0.12534081),
        ),
        Planet(
            "Venus",
            Elements(0.72333566, 0.00677672, 3.39467605, 181.97909950, 131.60246718, 76.67984255),
            Elements(0.00000390, -0.00004107, -0.00078890, 58517.81538729, 0.00268329, -0.27769418),
        ),
        Planet(
            "Mars",
            Elements(1.52371034, 0.09339410, 1.84969142, -4.55343205, -23.94362959, 49.55953891),
            Elements(0.00001847, 0.00007882, -0.00813131, 19140.30268499, 0.44441088, -0.29257343),
        ),
        Planet(
            "Jupiter",
            Elements(5.20288700, 0.04838624, 1.30439695, 34.39644051, 14.72847983, 100.47390909),
            Elements(-0.00011607, -0.00013253, -0.00183714, 3034.74612775, 0.21252668, 0.20469106),
        ),
        Planet(
            "Saturn",
            Elements(9.53667594, 0.05386179, 2.48599187, 49.95424423, 92.59887831, 113.66242448),
            Elements(-0.00125060, -0.00050991, 0.00193609, 1222.49362201, -0.41897216, -0.28867794),
        ),
        Planet(
            "Uranus",
            Elements(19.18916464, 0.04725744, 0.77263783, 313.23810451, 170.95427630, 74.01692503),
            Elements(-0.00196176, -0.00004397, -0.00242939, 428.48202785, 0.40805281, 0.04240589),
        ),
        Planet(
            "Neptune",
            Elements(30.06992276, 0.00859048, 1.77004347, -55.12002969, 44.96476227, 131.78422574),
            Elements(0.00026291, 0.00005105, 0.00035372, 218.45945325, -0.32241464, -0.00508664),
        ),
    ]


def _make_earth() -> Planet:
    return Planet(
        "Earth",
        Elements(1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0),
        Elements(0.00000562, -0.00004392, -0.01294668, 35999.37244981, 0.32327364, 0.0),
    )


class Planets:
    """Lazily built catalogue of earth and the other planets."""

    def __init__(self) -> None:
        self._planets: list[Planet] = []
        self._earth: Planet | None = None

    def earth(self) -> Planet:
        """The earth, used as the observer's reference."""
        if self._earth is None:
            self._earth = _make_earth()
        return self._earth

    def other_planets(self) -> list[Planet]:
        """All planets except earth, ordered by distance from the sun."""
        if not self._planets:
            self._planets = _make_others()
        return list(self._planets)

    def find(self, name: str) -> Planet:
        """The non-earth planet of that name."""
        for planet in self.other_planets():
            if planet.name == name:
                return planet
        raise PlanetNotFoundError(f"Planet {name} was not found!")

    def ra_dec(self, name: str, jd: JulianDate) -> RaDecPlanet:
        """Geocentric position of the named planet at jd."""
        return self.find(name).ra_dec(jd, self.earth())