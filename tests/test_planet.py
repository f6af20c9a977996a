import math

import pytest

from stardesk.coords import RaDec
from stardesk.julian import E2000_JULIAN, JulianDate
from stardesk.planet import Elements, Planet, RaDecPlanet, rect_to_polar

ZERO = Elements(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
EARTH = Planet(
    "Earth",
    Elements(1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0),
    Elements(0.00000562, -0.00004392, -0.01294668, 35999.37244981, 0.32327364, 0.0),
)
MARS = Planet(
    "Mars",
    Elements(1.52371034, 0.09339410, 1.84969142, -4.55343205, -23.94362959, 49.55953891),
    Elements(0.00001847, 0.00007882, -0.00813131, 19140.30268499, 0.44441088, -0.29257343),
)
DATES = [JulianDate(E2000_JULIAN + d) for d in (-2000.0, -100.5, 0.0, 90.0, 365.25, 7000.3)]


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


def test_rect_to_polar_axes():
    p = rect_to_polar((1.0, 0.0, 0.0))
    assert isinstance(p, RaDec)
    assert (p.ra, p.dec, p.distance) == pytest.approx((0.0, 0.0, 1.0))
    up = rect_to_polar((0.0, 0.0, 2.0))
    assert up.dec == pytest.approx(math.pi / 2)
    assert up.distance == pytest.approx(2.0)
    assert rect_to_polar((0.0, -1.0, 0.0)).ra == pytest.approx(1.5 * math.pi)


def test_rect_to_polar_rejects_origin():
    with pytest.raises(ZeroDivisionError):
        rect_to_polar((0.0, 0.0, 0.0))


def test_circular_orbit_start_point():
    planet = Planet("Test", Elements(1.0, 0.0, 0.0, 0.0, 0.0, 0.0), ZERO)
    assert planet.heliocentric_position(DATES[2]) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("mean_long", [0.0, 45.0, 170.0, 300.0])
def test_circular_orbit_keeps_radius(mean_long):
    planet = Planet("Test", Elements(2.5, 0.0, 12.0, mean_long, 30.0, 60.0), ZERO)
    assert _norm(planet.heliocentric_position(DATES[0])) == pytest.approx(2.5)


def test_ecliptic_quarter_orbit_tilted_by_obliquity():
    planet = Planet("Test", Elements(1.0, 0.0, 0.0, 90.0, 0.0, 0.0), ZERO)
    x, y, z = planet.heliocentric_position(DATES[2])
    assert x == pytest.approx(0.0, abs=1e-12)
    assert math.degrees(math.atan2(z, y)) == pytest.approx(23.43928)


@pytest.mark.parametrize("planet", [EARTH, MARS])
@pytest.mark.parametrize("jd", DATES)
def test_distance_between_perihelion_and_aphelion(planet, jd):
    el = planet.elements
    r = _norm(planet.heliocentric_position(jd))
    assert el.a * (1 - el.e) - 1e-3 <= r <= el.a * (1 + el.e) + 1e-3


def test_extra_terms_change_position():
    plain = Planet("X", MARS.elements, MARS.rates)
    extra = Planet("X", MARS.elements, MARS.rates, (0.0, 5.0, 0.0, 10.0))
    assert plain.heliocentric_position(DATES[3]) != pytest.approx(extra.heliocentric_position(DATES[3]))


@pytest.mark.parametrize("jd", DATES)
def test_ra_dec_distance_matches_vector_difference(jd):
    pos = MARS.ra_dec(jd, EARTH)
    assert isinstance(pos, RaDecPlanet)
    diff = [a - b for a, b in zip(MARS.heliocentric_position(jd), EARTH.heliocentric_position(jd))]
    assert pos.distance == pytest.approx(_norm(diff))
    assert 0.0 <= pos.ra < 2 * math.pi
    assert abs(pos.dec) <= math.pi / 2