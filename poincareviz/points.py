"""Reading, slicing and classifying the point files the figures are built from."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

Source = Union[str, os.PathLike, Iterable[str]]

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class PointFileError(ValueError):
    """Raised when a line of a point file does not start with enough numbers."""

    def __init__(self, line: int, expected: int) -> None:
        super().__init__(f"line {line}: expected {expected} numbers")
        self.line = line
        self.expected = expected


class Stability(enum.Enum):
    """Kind of a periodic point, as given by the flag column of its file."""

    STABLE = "stable"
    UNSTABLE = "unstable"
    DEGENERATE = "degenerate"


def classify(flag: float) -> Stability:
    """Return the stability a flag value stands for: 1 stable, 0 degenerate."""
    if flag == 1.0:
        return Stability.STABLE
    if flag == 0:
        return Stability.DEGENERATE
    return Stability.UNSTABLE


@dataclass(frozen=True)
class PointSet3D:
    """An ordered set of points in three dimensions."""

    xs: tuple[float, ...] = ()
    ys: tuple[float, ...] = ()
    zs: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        for name in ("xs", "ys", "zs"):
            object.__setattr__(self, name, tuple(float(v) for v in getattr(self, name)))
        if not len(self.xs) == len(self.ys) == len(self.zs):
            raise ValueError("coordinate columns differ in length")

    def __len__(self) -> int:
        return len(self.xs)

    def __iter__(self) -> Iterator[tuple[float, float, float]]:
        return zip(self.xs, self.ys, self.zs)

    def __getitem__(self, index: int) -> tuple[float, float, float]:
        return self.xs[index], self.ys[index], self.zs[index]

    def head(self, count: int) -> PointSet3D:
        """Return the first ``count`` points (all of them if there are fewer)."""
        if count < 0:
            raise ValueError("count must not be negative")
        return PointSet3D(self.xs[:count], self.ys[:count], self.zs[:count])


@dataclass(frozen=True)
class StabilityPoints:
    """Periodic points with a stability flag each."""

    xs: tuple[float, ...] = ()
    ys: tuple[float, ...] = ()
    zs: tuple[float, ...] = ()
    flags: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        for name in ("xs", "ys", "zs", "flags"):
            object.__setattr__(self, name, tuple(float(v) for v in getattr(self, name)))
        if not len(self.xs) == len(self.ys) == len(self.zs) == len(self.flags):
            raise ValueError("columns differ in length")

    def __len__(self) -> int:
        return len(self.xs)

    def __iter__(self) -> Iterator[tuple[float, float, float, float]]:
        return zip(self.xs, self.ys, self.zs, self.flags)

    def __getitem__(self, index: int) -> tuple[float, float, float, float]:
        return self.xs[index], self.ys[index], self.zs[index], self.flags[index]


def _lines(source: Source) -> Iterator[str]:
    if isinstance(source, (str, os.PathLike)):
        with open(source, encoding="utf-8") as handle:
            yield from handle
    else:
        yield from source


def _leading_numbers(line: str, count: int) -> tuple[float, ...] | None:
    values = []
    position = 0
    for _ in range(count):
        match = _NUMBER.match(line, position)
        if match is None:
            return None
        values.append(float(match.group(1)))
        position = match.end()
    return tuple(values)


def _rows(source: Source, count: int) -> Iterator[tuple[float, ...]]:
    for number, line in enumerate(_lines(source), start=1):
        values = _leading_numbers(line, count)
        if values is None:
            raise PointFileError(number, count)
        yield values


def _columns(source: Source, count: int) -> list[tuple[float, ...]]:
    rows = list(_rows(source, count))
    if not rows:
        return [() for _ in range(count)]
    return [tuple(column) for column in zip(*rows)]


def read_points(source: Source) -> PointSet3D:
    """Read a file of lines that each start with x, y and z."""
    xs, ys, zs = _columns(source, 3)
    return PointSet3D(xs, ys, zs)


def read_stability_points(source: Source) -> StabilityPoints:
    """Read a file of lines that each start with x, y, z and a stability flag."""
    xs, ys, zs, flags = _columns(source, 4)
    return StabilityPoints(xs, ys, zs, flags)


def select(points: PointSet3D, start: int, stop: int) -> PointSet3D:
    """Return the points with positions from ``start`` up to, not including, ``stop``."""
    start, stop = int(start), int(stop)
    if start < 0 or stop < 0:
        raise ValueError("positions must not be negative")
    return PointSet3D(points.xs[start:stop], points.ys[start:stop], points.zs[start:stop])


def split_equal(points: PointSet3D, parts: int) -> list[PointSet3D]:
    """Cut the points into ``parts`` runs of equal length; a remainder is dropped."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    size = len(points) // parts
    return [select(points, k * size, (k + 1) * size) for k in range(parts)]