# stardesk

Sky computations behind a star desktop background: where stars, the moon
and the planets stand for a given place and moment, and how to project
them onto a screen.

It needs nothing beyond the Python standard library (3.10 or later).

## Install

```
pip install .
```

## What is inside

- `stardesk.mathutil`: angle conversions (`to_radians`, `to_degrees`,
  `to_radian_hours`, `to_hours_radian`) and `mix` for linear interpolation,
  clamped to the range of its end points unless `limit=False`.
- `stardesk.geometry`: `Layout` (drawing area with offsets and `min()`),
  `Point2D`, `MagPoint` (a point with a visual magnitude) and `NamedPoint`
  (labelled points that can be merged with `add`, joining their names).
- `stardesk.coords`: `RaDec` equatorial coordinates in radians, built with
  `from_degrees`, `from_hours` or `from_hours_polar`; `AzimutAltitude`
  horizontal coordinates with `is_visible()` and a stereographic
  `to_screen(layout)` projection centred at 0,0.
- `stardesk.julian`: `JulianDate`, built from a number or with
  `JulianDate.from_datetime`, with `e2000_days()` and `e2000_centuries()`.
- `stardesk.geo`: `GeoPosition(lon, lat)` in degrees turns a `RaDec` into
  an `AzimutAltitude` for a moment (`to_azimut_altitude`);
  `greenwich_mean_sidereal_time` and `earth_rotation_angle`.
- `stardesk.moon`: `moon_position` (low precision) and `moon_phase`,
  giving a `Phase` with `phase()`, `illuminated()` and `is_waning()`.
- `stardesk.planet`: `Planet` from Keplerian `Elements` and their rates,
  `heliocentric_position`, `ra_dec` relative to earth, and `rect_to_polar`.
- `stardesk.planets`: `Planets` with `earth()`, `other_planets()` (Mercury
  to Neptune, 1850–2050 short-term elements), `find(name)` and
  `ra_dec(name, jd)`. An unknown name raises `PlanetNotFoundError`.
- `stardesk.files`: `FileLoader` locates a data file in a `res` directory
  two levels above its start path, then in its data directory (by default
  `<sys.prefix>/share/background`); `local_dir()` creates and returns the
  per-user `background` directory. Also `read_lines`, `iter_lines` and
  `read_file`.
- `stardesk.hipparcos`: `parse_stars` reads a decoded Hipparcos JSON table
  (columns `Hpmag`, `RArad`, `DErad`, `HIP`) into `HipparcosStar` objects;
  `HipparcosFormat(loader).stars()` loads `hipparcos.json` once and returns
  an empty list when the file is missing or unreadable.

## Example

```python
from datetime import datetime, timezone

from stardesk.coords import RaDec
from stardesk.geo import GeoPosition
from stardesk.geometry import Layout
from stardesk.julian import JulianDate
from stardesk.moon import moon_phase, moon_position
from stardesk.planets import Planets

jd = JulianDate.from_datetime(datetime.now(timezone.utc))
here = GeoPosition(13.4, 52.5)          # longitude, latitude in degrees

sirius = RaDec.from_hours(6.7525, -16.7161)
horizon = here.to_azimut_altitude(sirius, jd)
if horizon.is_visible():
    print(horizon.to_screen(Layout(1920, 1080)))

print(moon_phase(jd).illuminated())
print(here.to_azimut_altitude(moon_position(jd), jd).altitude_degrees())
print(Planets().ra_dec("Jupiter", jd))
```

## What it does not do

This package computes positions only. It draws nothing, opens no window
and has no command to run. It reads star data from the Hipparcos catalogue
alone: there is no loader for constellation lines, deep-sky object lists
or the outline of the milky way, and no settings storage.

## Tests

```
pip install .[test]
pytest
```