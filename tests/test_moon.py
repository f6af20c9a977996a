import math
from datetime import datetime, timedelta, timezone

import pytest

from stardesk.julian import E2000_JULIAN, JulianDate
from stardesk.moon import Phase, moon_phase, moon_position
from stardesk.planet import Elements, Planet, rect_to_polar

NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)
FULL_MOON = datetime(2000, 1, 21, 4, 40, tzinfo=timezone.utc)

EARTH = Planet(
    "Earth",
    Elements(1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0),
    Elements(0.00000562, -0.00004392, -0.01294668, 35999.37244981, 0.32327364, 0.0),
)


def test_phase_full_and_new():
    full = Phase(0.0)
    new = Phase(math.pi)
    assert full.phase() == pytest.approx(1.0)
    assert full.illuminated() == pytest.approx(1.0)
    assert new.phase() == pytest.approx(0.0)
    assert new.illuminated() == pytest.approx(0.0)


def test_phase_quarter_half_illuminated():
    assert Phase(math.pi / 2).illuminated() == pytest.approx(0.5)
    assert Phase(math.pi / 2).phase() == pytest.approx(0.5)


def test_is_waning_boundary():
    assert Phase(math.pi).is_waning()
    assert Phase(1.5 * math.pi).is_waning()
    assert not Phase(0.5 * math.pi).is_waning()


def test_phase_symmetric_around_new():
    assert Phase(math.pi - 0.7).phase() == pytest.approx(Phase(math.pi + 0.7).phase())


def test_new_moon_phase_near_zero():
    assert moon_phase(JulianDate.from_datetime(NEW_MOON)).phase() < 0.05


def test_full_moon_phase_near_one():
    assert moon_phase(JulianDate.from_datetime(FULL_MOON)).phase() > 0.95


def test_waning_after_full_waxing_before():
    before = moon_phase(JulianDate.from_datetime(FULL_MOON - timedelta(days=4)))
    after = moon_phase(JulianDate.from_datetime(FULL_MOON + timedelta(days=4)))
    assert not before.is_waning()
    assert after.is_waning()


@pytest.mark.parametrize("days", [-3000.3, -10.0, 0.0, 7.25, 400.9, 9000.5])
def test_position_ranges(days):
    pos = moon_position(JulianDate(E2000_JULIAN + days))
    assert 0.0 <= pos.ra < 2 * math.pi
    assert abs(pos.dec) < math.radians(30.0)


def test_new_moon_is_next_to_the_sun():
    jd = JulianDate.from_datetime(NEW_MOON)
    moon = moon_position(jd)
    sun = rect_to_polar(tuple(-c for c in EARTH.heliocentric_position(jd)))
    cos_sep = (math.sin(moon.dec) * math.sin(sun.dec)
               + math.cos(moon.dec) * math.cos(sun.dec) * math.cos(moon.ra - sun.ra))
    sep = math.acos(max(-1.0, min(1.0, cos_sep)))
    assert sep < math.radians(10.0)