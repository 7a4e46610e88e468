"""Figures of periodic points and their manifolds for the beta 10 run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from poincareviz.points import read_points, read_stability_points
from poincareviz.scene import (
    ELECTRIC_BLUE,
    MANIFOLD_PALETTE,
    Colour,
    Scene,
    apply_palette,
    plot_stability_points,
)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class _Part:
    name: str
    colour: int
    size: float = 0.2
    shown: bool = True
    count: int | None = None
    symbol: int = 4


_POINT_PARTS = (
    _Part("pt2_1d_side1", 1, 0.1),
    _Part("pt2_1d_side2", 1, 0.1),
    _Part("pt2_2d_stable", 3, 0.3, symbol=1),
    _Part("pt3_1d_side1", 1, 0.1),
    _Part("pt4_1d_side1", 1, 0.1),
    _Part("pt4_1d_side2", 1, 0.1),
    _Part("pt5_1d_side1", 1, 0.1),
    _Part("pt5_1d_side2", 1, 0.1),
)

_MANIFOLD_PARTS = (
    _Part("pt7_1d_mani_stable1", 7),
    _Part("pt7_1d_mani_stable2", 7, count=100),
    _Part("pt7_2d_mani_unstable", 3, count=25000, symbol=1),
    _Part("pt6_1d_mani_stable1", 5, count=1350),
    _Part("pt6_1d_mani_stable2", 5, count=1450),
    _Part("pt6_1d_mani_unstable1", 8, count=450),
    _Part("pt6_1d_mani_unstable2", 8),
    _Part("pt5_1d_mani_stable1", 1, count=1000),
    _Part("pt5_1d_mani_stable2", 1, count=1500),
    _Part("pt5_2d_mani_unstable", 6, count=200000, symbol=1),
    _Part("pt4_1d_mani_unstable1", 32),
    _Part("pt4_1d_mani_unstable2", 32),
    _Part("pt4_2d_mani_stable", 33, count=6000, symbol=1),
    _Part("pt3_1d_mani_stable1", 35, count=900),
    _Part("pt3to2_1d_mani", 35),
    _Part("pt3_2d_mani_unstable", 34, count=70000, symbol=1),
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
    _Part("pt5_1d_mani_stable1", 1),
    _Part("pt5_1d_mani_stable2", 1, count=1450),
    _Part("pt5_2d_mani_unstable", 6, count=240000, symbol=1),
    _Part("pt4_1d_mani_unstable1", 32, shown=False),
    _Part("pt4_1d_mani_unstable2", 32, shown=False),
    _Part("pt4_2d_mani_stable", 33, shown=False),
    _Part("pt3_1d_mani_stable1", 35, shown=False),
    _Part("pt3to2_1d_mani", 35, shown=False),
    _Part("pt3_2d_mani_unstable", 34, shown=False),
    _Part("pt2_1d_mani_unstable1", 8, shown=False),
)


def _build(
    paths: Sequence[PathLike],
    figure: str,
    parts: Sequence[_Part],
    palette: Mapping[int, Colour] | None,
) -> Scene:
    paths = list(paths)
    expected = len(parts) + 1
    if len(paths) != expected:
        raise ValueError(f"{figure} needs {expected} input files, got {len(paths)}")

    scene = Scene()
    if palette is not None:
        apply_palette(scene, palette)

    scene.push_group("isolated_prdc_points")
    periodic = read_stability_points(paths[0])
    scene.set_colour(18, *ELECTRIC_BLUE)
    plot_stability_points(scene, periodic, 18, 2, 0.8)

    for part, path in zip(parts, paths[1:]):
        scene.push_group(part.name)
        manifold = read_points(path)
        scene.set_size(part.size)
        scene.set_colour_index(part.colour)
        if part.shown:
            scene.points(manifold, part.symbol, part.count)
    return scene


def beta10_points(paths: Sequence[PathLike]) -> Scene:
    """Periodic points with the manifolds of points 2 to 5 (nine files)."""
    return _build(paths, "beta10_points", _POINT_PARTS, None)


def beta10_manifolds(paths: Sequence[PathLike]) -> Scene:
    """Periodic points and the manifolds of points 2 to 7 (eighteen files).

    Every manifold file is read and gets its own group; the last is not drawn.
    """
    return _build(paths, "beta10_manifolds", _MANIFOLD_PARTS, MANIFOLD_PALETTE)


def beta10_manifolds_finite(paths: Sequence[PathLike]) -> Scene:
    """Periodic points and only the manifolds of point 5 drawn (eighteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    return _build(paths, "beta10_manifolds_finite", _FINITE_PARTS, MANIFOLD_PALETTE)