"""Figure of the finite-time manifolds for the beta 16 run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Union

from poincareviz.points import read_points, read_stability_points
from poincareviz.scene import MANIFOLD_PALETTE, Scene, apply_palette, plot_stability_points

PathLike = Union[str, os.PathLike]

SHOWN_PERIODIC_POINTS = range(21, 26)


@dataclass(frozen=True)
class _Part:
    name: str
    colour: int
    shown: bool = False
    count: int | None = None
    symbol: int = 4


_PARTS = (
    _Part("pt4_1d_mani_stable1", 7),
    _Part("pt4_1d_mani_stable2", 7),
    _Part("pt4_2d_mani_unstable", 3),
    _Part("pt5_1d_mani_stable1", 5),
    _Part("pt5_1d_mani_stable2", 5),
    _Part("pt5_1d_mani_unstable1", 8),
    _Part("pt5_1d_mani_unstable2", 8),
    _Part("pt6_1d_mani_stable1", 1),
    _Part("pt6_1d_mani_stable2", 1, True, 630),
    _Part("pt6_2d_mani_unstable", 6, True, 150000, 1),
    _Part("pt7_1d_mani_unstable1", 32, True),
    _Part("pt7_1d_mani_unstable2", 32, True),
    _Part("pt7_1d_mani_stable1", 33, True, 500),
    _Part("pt7_1d_mani_stable2", 33, True, 550),
    _Part("pt8_1d_mani_stable1", 35, True),
    _Part("pt8_1d_mani_stable2", 35, True),
    _Part("pt8_2d_mani_unstable", 34, True, 43000, 1),
)


def beta16_manifolds_finite(paths: Sequence[PathLike]) -> Scene:
    """Five periodic points and the finite parts of their manifolds (eighteen files).

    Every manifold file is read and gets its own group; only some are drawn.
    """
    paths = list(paths)
    expected = len(_PARTS) + 1
    if len(paths) != expected:
        raise ValueError(f"beta16_manifolds_finite needs {expected} input files, got {len(paths)}")

    scene = Scene()
    apply_palette(scene, MANIFOLD_PALETTE)

    scene.push_group("isolated_prdc_points")
    periodic = read_stability_points(paths[0])
    plot_stability_points(scene, periodic, 18, 2, 0.8, SHOWN_PERIODIC_POINTS)

    for part, path in zip(_PARTS, paths[1:]):
        scene.push_group(part.name)
        manifold = read_points(path)
        scene.set_size(0.2)
        scene.set_colour_index(part.colour)
        if part.shown:
            scene.points(manifold, part.symbol, part.count)
    return scene