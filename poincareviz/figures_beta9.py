"""Figures of periodic points and their manifolds for the beta 9 run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Union

from poincareviz.points import read_points, read_stability_points
from poincareviz.scene import MANIFOLD_PALETTE, Scene, apply_palette, plot_stability_points

PathLike = Union[str, os.PathLike]

MANIFOLD_SIZE = 0.2
PERIODIC_SIZE = 0.8


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
    _Part("pt4_1d_mani_unstable1", 32),
    _Part("pt4_1d_mani_unstable2", 32),
    _Part("pt4_2d_mani_stable", 33, symbol=1),
    _Part("pt3_1d_mani_stable1", 35, shown=False),
    _Part("pt3to2_1d_mani", 35, shown=False),
    _Part("pt3_2d_mani_unstable", 34, shown=False),
    _Part("pt2_1d_mani_unstable1", 8, shown=False),
    _Part("pt2_2d_mani_stable", 8, shown=False),
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
    _Part("pt5_1d_mani_stable2", 1, count=600),
    _Part("pt5_2d_mani_unstable", 6, count=250000, symbol=1),
    _Part("pt4_1d_mani_unstable1", 32, count=100),
    _Part("pt4_1d_mani_unstable2", 32, count=150),
    _Part("pt4_2d_mani_stable", 33, count=11000, symbol=1),
    _Part("pt3_1d_mani_stable1", 35, count=500),
    _Part("pt3to2_1d_mani", 35),
    _Part("pt3_2d_mani_unstable", 34, count=135000, symbol=1),
    _Part("pt2_1d_mani_unstable1", 8, shown=False),
)


def _build(paths: Sequence[PathLike], figure: str, parts: Sequence[_Part]) -> Scene:
    paths = list(paths)
    expected = len(parts) + 1
    if len(paths) != expected:
        raise ValueError(f"{figure} needs {expected} input files, got {len(paths)}")

    scene = Scene()
    apply_palette(scene, MANIFOLD_PALETTE)

    scene.push_group("isolated_prdc_points")
    periodic = read_stability_points(paths[0])
    plot_stability_points(scene, periodic, 18, 2, PERIODIC_SIZE)

    for part, path in zip(parts, paths[1:]):
        scene.push_group(part.name)
        manifold = read_points(path)
        scene.set_size(MANIFOLD_SIZE)
        scene.set_colour_index(part.colour)
        if part.shown:
            scene.points(manifold, part.symbol, part.count)
    return scene


def beta9_manifolds(paths: Sequence[PathLike]) -> Scene:
    """Periodic points with only the manifolds of point 4 drawn (nineteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    return _build(paths, "beta9_manifolds", _MANIFOLD_PARTS)


def beta9_manifolds_finite(paths: Sequence[PathLike]) -> Scene:
    """Periodic points and the finite parts of the manifolds of points 3 to 5 (eighteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    return _build(paths, "beta9_manifolds_finite", _FINITE_PARTS)