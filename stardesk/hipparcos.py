"""Stars from the Hipparcos catalogue in its JSON table form."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from .coords import RaDec
from .files import FileLoader

_log = logging.getLogger(__name__)

STARS_DATA_FILE = "hipparcos.json"


@dataclass
class HipparcosStar:
    """A catalogue star: Hipparcos number, position and visual magnitude."""

    number: int = 0
    ra_dec: RaDec = field(default_factory=RaDec)
    vmagnitude: float = 0.0
    ident: str = ""
    flag: int = 0


@dataclass(frozen=True)
class Field:
    """A named column of the data table."""

    name: str
    index: int

    @classmethod
    def from_metadata(cls, metadata: dict[str, Any], index: int) -> Field:
        """Build from a metadata entry such as {"name": "HIP", "datatype": "INT"}."""
        return cls(str(metadata["name"]), index)

    def value(self, row: list[Any]) -> Any:
        """The value of this column in a data row."""
        return row[self.index]


def parse_stars(document: dict[str, Any]) -> list[HipparcosStar]:
    """Stars of a decoded catalogue document with "metadata" and "data" arrays.

    Rows are used only when the columns Hpmag, RArad, DErad and HIP are all
    described; RArad and DErad are in degrees. A malformed document raises ValueError.
    """
    try:
        fields: dict[str, Field] = {}
        for index, metadata in enumerate(document["metadata"]):
            column = Field.from_metadata(metadata, index)
            fields.setdefault(column.name, column)
        rows = document["data"]
        required = [fields.get(name) for name in ("Hpmag", "RArad", "DErad", "HIP")]
        if any(column is None for column in required):
            return []
        fmag, fra, fdec, fhip = required
        stars = []
        for row in rows:
            ra_dec = RaDec.from_degrees(float(fra.value(row)), float(fdec.value(row)))
            stars.append(
                HipparcosStar(
                    number=int(fhip.value(row)),
                    ra_dec=ra_dec,
                    vmagnitude=float(fmag.value(row)),
                )
            )
        return stars
    except (KeyError, TypeError, IndexError) as exc:
        raise ValueError(f"malformed star data: {exc!r}") from exc


class HipparcosFormat:
    """Loads the star catalogue once, on first request."""

    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader
        self._stars: list[HipparcosStar] = []

    def stars(self) -> list[HipparcosStar]:
        """All stars; empty when the data is unavailable."""
        if not self._stars:
            self._stars = self._read()
        return list(self._stars)

    def _read(self) -> list[HipparcosStar]:
        path = self._file_loader.find(STARS_DATA_FILE)
        if path is None:
            _log.warning("The star data %s was not found!", STARS_DATA_FILE)
            return []
        try:
            with open(path, encoding="utf-8") as stream:
                document = json.load(stream)
            return parse_stars(document)
        except (OSError, ValueError) as exc:
            _log.warning("The star data was not be loaded exception %s!", exc)
            return []