"""Figures of the base flow and of the first manifold runs."""

from __future__ import annotations

import os
from typing import Sequence, Union

from poincareviz.points import read_points, read_stability_points, split_equal
from poincareviz.scene import (
    ELECTRIC_BLUE,
    MANIFOLD_PALETTE,
    Scene,
    apply_palette,
    plot_stability_points,
)

PathLike = Union[str, os.PathLike]

HIGHLIGHTED_POINT = 60
STAGNATION_POINT = (0.00349774235244073, 0.258867275197351, 0.0)
TIME_SEGMENTS = 6
TIME_BREAK_POINTS = range(10, 15)
_SEGMENT_COLOURS = (18, 6, 7, 8, 2)


def _expect(paths: Sequence[PathLike], count: int, figure: str) -> list[PathLike]:
    paths = list(paths)
    if len(paths) != count:
        raise ValueError(f"{figure} needs {count} input files, got {len(paths)}")
    return paths


def _isolated_points(scene: Scene, path: PathLike) -> None:
    scene.push_group("isolated_prdc_points")
    points = read_stability_points(path)
    scene.set_colour(18, *ELECTRIC_BLUE)
    plot_stability_points(scene, points, 18, 2, 0.8)


def _manifold(scene: Scene, name: str, path: PathLike, size: float, colour: int, symbol: int) -> None:
    scene.push_group(name)
    points = read_points(path)
    scene.set_size(size)
    scene.set_colour_index(colour)
    scene.points(points, symbol)


def base_flow_re1_poincare(paths: Sequence[PathLike]) -> Scene:
    """Poincaré sections of the base flow with the stagnation point (seven files)."""
    paths = _expect(paths, 7, "base_flow_re1_poincare")
    first, second, third, fourth, fifth, sixth, seventh = (read_points(p) for p in paths)
    scene = Scene()
    apply_palette(scene, MANIFOLD_PALETTE)

    scene.set_colour_index(3)
    scene.set_size(0.2)
    scene.points(first, 4)

    scene.set_colour_index(7)
    scene.points(second, 4)
    scene.points(sixth, 1, 10000)

    scene.set_colour_index(8)
    scene.points(third, 4)
    scene.set_size(0.6)
    scene.points(third, 4, 2)
    scene.point(*third[HIGHLIGHTED_POINT], 4)

    scene.set_size(0.2)
    scene.set_colour_index(33)
    scene.points(fourth, 4)

    scene.set_colour_index(1)
    scene.points(fifth, 4)
    scene.set_colour_index(32)
    scene.points(seventh, 4)

    scene.set_size(0.8)
    scene.set_colour_index(23)
    scene.point(*STAGNATION_POINT, 4)
    return scene


def base_flow_streamline(paths: Sequence[PathLike]) -> Scene:
    """One streamline with its starting point marked (one file)."""
    (path,) = _expect(paths, 1, "base_flow_streamline")
    scene = Scene()
    scene.set_colour(18, *ELECTRIC_BLUE)
    line = read_points(path)
    scene.set_size(0.1)
    scene.points(line, 1)
    scene.set_colour_index(18)
    scene.set_size(0.5)
    scene.point(*line[0], 4)
    return scene


def manifold_time_breaks(paths: Sequence[PathLike]) -> Scene:
    """A manifold drawn whole, then over-drawn in time segments (two files)."""
    paths = _expect(paths, 2, "manifold_time_breaks")
    manifold = read_points(paths[0])
    segments = split_equal(manifold, TIME_SEGMENTS)
    periodic = read_stability_points(paths[1])

    scene = Scene()
    scene.set_size(0.7)
    scene.set_colour(18, *ELECTRIC_BLUE)

    scene.push_group("segment1")
    scene.set_colour_index(1)
    scene.points(manifold, 1)
    for number, (colour, segment) in enumerate(zip(_SEGMENT_COLOURS, segments[1:]), start=2):
        scene.push_group(f"segment{number}")
        scene.set_colour_index(colour)
        scene.points(segment, 1)

    scene.push_group("isolated_prdc_points")
    scene.set_colour(18, *ELECTRIC_BLUE)
    plot_stability_points(scene, periodic, 18, 2, 0.8, TIME_BREAK_POINTS)
    return scene


def beta3_manifolds(paths: Sequence[PathLike]) -> Scene:
    """Periodic points with the 1D and 2D manifolds of points 2 and 3 (seven files)."""
    paths = _expect(paths, 7, "beta3_manifolds")
    scene = Scene()
    _isolated_points(scene, paths[0])
    _manifold(scene, "1d_mani_pt2", paths[1], 0.2, 1, 4)
    _manifold(scene, "1d_mani_pt2to3", paths[2], 0.2, 1, 4)
    _manifold(scene, "1d_mani_pt3to4", paths[3], 0.2, 1, 4)
    _manifold(scene, "2d_mani_unstab_pt3", paths[4], 0.1, 6, 1)
    _manifold(scene, "2d_mani_stab_pt2", paths[5], 0.1, 3, 1)
    _manifold(scene, "1d_mani_pt2_continue", paths[6], 0.2, 1, 4)
    return scene