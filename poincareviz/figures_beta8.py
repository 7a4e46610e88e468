"""Figures of periodic points and their manifolds for the beta 8 run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence, Union

from poincareviz.points import read_points, read_stability_points
from poincareviz.scene import (
    MANIFOLD_PALETTE,
    Colour,
    Scene,
    apply_palette,
    plot_stability_points,
)

PathLike = Union[str, os.PathLike]

MANIFOLD_SIZE = 0.2
PERIODIC_SIZE = 0.8

INVERTED_PALETTE: Mapping[int, Colour] = MappingProxyType(
    {
        18: (1 - 0.03137254901, 1 - 0.5725490196, 1 - 0.81568627451),
        25: (1, 0, 0),
        12: (0, 1, 1),
        14: (1, 1, 0),
        13: (1, 0, 1),
        17: (0, 0, 1),
        16: (0, 1, 0),
        28: (0, 1, 0),
        21: (1 - 0.50196078431, 1, 1),
        22: (0.454901960784314, 0.729411764705882, 0.925490196078431),
        23: (0, 0.921568627450980, 0.423529411764706),
        24: (0.498039215686275, 1, 0.498039215686275),
        26: (0.419607843137255, 1, 0.172549019607843),
        27: (0.705882352941176, 1, 0.490196078431373),
        29: (1, 1, 0.498039215686275),
    }
)


@dataclass(frozen=True)
class _Part:
    name: str
    colour: int
    shown: bool = True
    count: int | None = None
    symbol: int = 4


_MANIFOLD_PARTS = (
    _Part("pt7_1d_mani_stable1", 7, shown=False),
    _Part("pt7_1d_mani_stable2", 7, shown=False),
    _Part("pt7_2d_mani_unstable", 3, shown=False),
    _Part("pt6_1d_mani_stable1", 5, shown=False),
    _Part("pt6_1d_mani_stable2", 5, shown=False),
    _Part("pt6_1d_mani_unstable1", 8, shown=False),
    _Part("pt6_1d_mani_unstable2", 8, shown=False),
    _Part("pt5_1d_mani_stable1", 1, shown=False),
    _Part("pt5_1d_mani_stable2", 1, shown=False),
    _Part("pt5_2d_mani_unstable", 6, shown=False),
    _Part("pt4_1d_mani_stable1", 33, shown=False),
    _Part("pt4_1d_mani_stable2", 33, shown=False),
    _Part("pt4_1d_mani_unstable1", 32, shown=False),
    _Part("pt4_1d_mani_unstable2", 32, shown=False),
    _Part("pt3_1d_mani_stable1", 35),
    _Part("pt3to2_1d_mani", 35),
    _Part("pt3_2d_mani_unstable", 34, symbol=1),
    _Part("pt2_1d_mani_unstable1", 8, shown=False),
)

_COLOUR_PARTS = (
    _Part("pt7_1d_mani_stable1", 22, count=600),
    _Part("pt7_1d_mani_stable2", 22),
    _Part("pt7_2d_mani_unstable", 23, symbol=1),
    _Part("pt6_1d_mani_stable1", 26, shown=False),
    _Part("pt6_1d_mani_stable2", 26, shown=False),
    _Part("pt6_1d_mani_unstable1", 28, shown=False),
    _Part("pt6_1d_mani_unstable2", 28, shown=False),
    _Part("pt5_1d_mani_stable1", 1, shown=False),
    _Part("pt5_1d_mani_stable2", 1, count=1200),
    _Part("pt5_2d_mani_unstable", 16, shown=False),
    _Part("pt4_1d_mani_stable1", 27, count=500),
    _Part("pt4_1d_mani_stable2", 27, count=500),
    _Part("pt4_1d_mani_unstable1", 24, count=1000),
    _Part("pt4_1d_mani_unstable2", 24, count=1000),
    _Part("pt3_1d_mani_stable1", 1, shown=False),
    _Part("pt3to2_1d_mani", 1, shown=False),
    _Part("pt2_1d_mani_unstable1", 8, shown=False),
)

_FINITE_PARTS = (
    _Part("pt7_1d_mani_stable1", 7, shown=False),
    _Part("pt7_1d_mani_stable2", 7, shown=False),
    _Part("pt7_2d_mani_unstable", 3, shown=False),
    _Part("pt6_1d_mani_stable1", 5, shown=False),
    _Part("pt6_1d_mani_stable2", 5, shown=False),
    _Part("pt6_1d_mani_unstable1", 8, shown=False),
    _Part("pt6_1d_mani_unstable2", 8, shown=False),
    _Part("pt5_1d_mani_stable1", 1, shown=False),
    _Part("pt5_1d_mani_stable2", 1, count=700),
    _Part("pt5_2d_mani_unstable", 6, count=300000, symbol=1),
    _Part("pt4_1d_mani_stable1", 33, count=600),
    _Part("pt4_1d_mani_stable2", 33, count=600),
    _Part("pt4_1d_mani_unstable1", 32),
    _Part("pt4_1d_mani_unstable2", 32),
    _Part("pt3_1d_mani_stable1", 35, count=600),
    _Part("pt3to2_1d_mani", 35),
    _Part("pt3_2d_mani_unstable", 34, count=90000, symbol=1),
    _Part("pt2_1d_mani_unstable1", 8, shown=False),
)


def _build(
    paths: Sequence[PathLike],
    figure: str,
    parts: Sequence[_Part],
    palette: Mapping[int, Colour],
    unstable_colour: int,
) -> Scene:
    paths = list(paths)
    expected = len(parts) + 1
    if len(paths) != expected:
        raise ValueError(f"{figure} needs {expected} input files, got {len(paths)}")

    scene = Scene()
    apply_palette(scene, palette)

    scene.push_group("isolated_prdc_points")
    periodic = read_stability_points(paths[0])
    plot_stability_points(scene, periodic, 18, unstable_colour, PERIODIC_SIZE)

    for part, path in zip(parts, paths[1:]):
        scene.push_group(part.name)
        manifold = read_points(path)
        scene.set_size(MANIFOLD_SIZE)
        scene.set_colour_index(part.colour)
        if part.shown:
            scene.points(manifold, part.symbol, part.count)
    return scene


def beta8_manifolds(paths: Sequence[PathLike]) -> Scene:
    """Periodic points with only the manifolds of point 3 drawn (nineteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    return _build(paths, "beta8_manifolds", _MANIFOLD_PARTS, MANIFOLD_PALETTE, 2)


def beta8_manifolds_colour(paths: Sequence[PathLike]) -> Scene:
    """Periodic points and manifolds in the inverted colour table (eighteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    return _build(paths, "beta8_manifolds_colour", _COLOUR_PARTS, INVERTED_PALETTE, 12)


def beta8_manifolds_finite(paths: Sequence[PathLike]) -> Scene:
    """Periodic points and the finite parts of the manifolds of points 3 to 5 (nineteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    return _build(paths, "beta8_manifolds_finite", _FINITE_PARTS, MANIFOLD_PALETTE, 2)