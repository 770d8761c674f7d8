"""Delivery time estimates between pairs of cities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

CITIES: tuple[str, ...] = ("Jakarta", "Bandung", "Surabaya", "Yogyakarta", "Malang")
DEFAULT_FILE = "EstimasiKota.txt"

MSG_MISSING_CITY = "Pilih kota asal dan tujuan."
MSG_SAME_CITY = "Kota asal dan tujuan tidak boleh sama."
MSG_NO_ROUTE = "Estimasi untuk rute ini belum tersedia."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EstimateError(Exception):
    """Raised when an estimate cannot be given for a route."""


def route_key(origin: str, destination: str) -> str:
    """Return the direction-independent key for a route."""
    first, second = sorted((origin, destination))
    return f"{first}-{second}"


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class EstimateTable:
    """Estimated delivery days, keyed by route."""

    estimates: dict[str, int] = field(default_factory=dict)

    def lookup(self, origin: str, destination: str) -> int:
        """Return the number of days for a route, or raise EstimateError."""
        if not origin or not destination:
            raise EstimateError(MSG_MISSING_CITY)
        if origin == destination:
            raise EstimateError(MSG_SAME_CITY)
        try:
            return self.estimates[route_key(origin, destination)]
        except KeyError:
            raise EstimateError(MSG_NO_ROUTE) from None

    def describe(self, origin: str, destination: str) -> str:
        """Return the message shown to the user for a route."""
        try:
            days = self.lookup(origin, destination)
        except EstimateError as exc:
            return str(exc)
        return f"Estimasi Dari {origin} ke {destination} adalah {days} hari"


def load_estimates(path: str | PathLike[str] = DEFAULT_FILE) -> EstimateTable:
    """Read ``city,city,days`` lines; a missing file gives an empty table."""
    table = EstimateTable()
    try:
        with Path(path).open(encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        return table
    for line in lines:
        fields = line.split(",")
        fields += [""] * (3 - len(fields))
        city1, city2, days = fields[:3]
        table.estimates[route_key(city1, city2)] = _leading_int(days)
    return table