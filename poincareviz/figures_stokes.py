"""Figures of periodic points and manifolds for the Stokes-flow runs."""

from __future__ import annotations

import os
from typing import Sequence, Union

from poincareviz.points import read_points, read_stability_points
from poincareviz.scene import ELECTRIC_BLUE, Scene, plot_stability_points

PathLike = Union[str, os.PathLike]


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


def _stokes_points(scene: Scene, path: PathLike, size: float) -> None:
    scene.push_group("Stokes_P1")
    points = read_stability_points(path)
    plot_stability_points(scene, points, 18, 2, size)


def beta3_total(paths: Sequence[PathLike]) -> Scene:
    """Periodic points, three 1D manifolds and the Stokes points (five files)."""
    paths = _expect(paths, 5, "beta3_total")
    scene = Scene()
    _isolated_points(scene, paths[0])
    _manifold(scene, "1d_mani_pt2", paths[1], 0.3, 1, 4)
    _manifold(scene, "1d_mani_pt2to3", paths[2], 0.3, 1, 4)
    _manifold(scene, "1d_mani_pt3to4", paths[3], 0.3, 1, 4)
    _stokes_points(scene, paths[4], 0.3)
    return scene


def beta_pt1_total(paths: Sequence[PathLike]) -> Scene:
    """Periodic points, two 1D manifolds and the Stokes points (four files)."""
    paths = _expect(paths, 4, "beta_pt1_total")
    scene = Scene()
    _isolated_points(scene, paths[0])
    _manifold(scene, "beta_pt1_1d_mani_pt2to1", paths[1], 0.1, 1, 4)
    _manifold(scene, "beta_pt1_1d_mani_pt2to3", paths[2], 0.1, 1, 4)
    _stokes_points(scene, paths[3], 0.1)
    return scene


def beta4_manifolds(paths: Sequence[PathLike]) -> Scene:
    """Periodic points with the 1D and 2D manifolds of points 2 and 3 (seven files)."""
    paths = _expect(paths, 7, "beta4_manifolds")
    scene = Scene()
    _isolated_points(scene, paths[0])
    _manifold(scene, "1d_mani_pt3to2", paths[1], 0.2, 1, 4)
    _manifold(scene, "1d_mani_pt3to4", paths[2], 0.2, 1, 4)
    _manifold(scene, "pt3_2d_mani_unstab", paths[3], 0.2, 6, 1)
    _manifold(scene, "pt2_1d_mani_unstab", paths[4], 0.1, 8, 1)
    _manifold(scene, "pt2_1d_mani_stab", paths[5], 0.1, 7, 1)
    _manifold(scene, "1d_mani_pt3_continue", paths[6], 0.2, 1, 4)
    return scene