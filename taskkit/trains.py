"""Train departures later than a given time of day."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = "Train.dat"
DEFAULT_COUNT = 8
MAX_NAME = 99

_FLIGHT_RE = re.compile(r"([^;]{1,%d});\s*(\d+);\s*(\d+):(\d+)\s*" % MAX_NAME)
_TIME_RE = re.compile(r"\s*(\d+):(\d+)")


@dataclass(frozen=True)
class Flight:
    """A train departure: destination, train number and departure time."""

    name: str
    train_id: int
    hours: int
    minutes: int

    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def format(self) -> str:
        return f"{self.name};{self.train_id};{self.hours}:{self.minutes}"


def parse_flight(line: str) -> Flight:
    """Parse a ``name;id;hh:mm`` record."""
    match = _FLIGHT_RE.fullmatch(line.strip("\r\n"))
    if match is None:
        raise ValueError(f"malformed flight record: {line!r}")
    name, train_id, hours, minutes = match.groups()
    return Flight(name, int(train_id), int(hours), int(minutes))


def read_flights(path: str | Path, count: int = DEFAULT_COUNT) -> list[Flight]:
    """Read the first ``count`` flight records from a file, skipping blank lines."""
    with open(path, encoding="utf-8") as stream:
        lines = [line.strip() for line in stream if line.strip()]
    if len(lines) < count:
        raise ValueError(f"expected {count} flights, found {len(lines)}")
    return [parse_flight(line) for line in lines[:count]]


def departures_after(flights: Iterable[Flight], hours: int, minutes: int) -> list[Flight]:
    """Return the flights that leave strictly after ``hours:minutes``."""
    limit = hours * 60 + minutes
    return [flight for flight in flights if flight.total_minutes() > limit]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List trains leaving after a given time.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    args = parser.parse_args(argv)
    try:
        flights = read_flights(args.path, args.count)
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1

    match = _TIME_RE.match(input("Введите время: "))
    if match is None:
        print("expected time as hh:mm", file=sys.stderr)
        return 1
    hours, minutes = (int(part) for part in match.groups())

    later = departures_after(flights, hours, minutes)
    for flight in later:
        print(flight.format())
    if not later:
        print("Рейсов позже этого времени нет!")
    return 0


if __name__ == "__main__":
    sys.exit(main())