"""Figures of the Stokes lines with tracked squares of points and manifold orbits."""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping, Sequence, Union

from poincareviz.points import read_points, read_stability_points, select
from poincareviz.scene import (
    LINES_PALETTE,
    Colour,
    Scene,
    apply_palette,
    plot_stability_points_sized,
)

PathLike = Union[str, os.PathLike]

SQUARE_POINTS = 96
"""Number of points in one tracked square, i.e. in one period of a track file."""

SQUARE_PALETTE: Mapping[int, Colour] = MappingProxyType(
    {
        **LINES_PALETTE,
        22: (0.454901960784314, 0.729411764705882, 0.925490196078431),
    }
)

_TRACK_FILES = ("504f", "504b", "506f", "506b", "508f", "508b", "518f", "518b")

# (group name, track file, colour index, first period, period after the last)
_TRACK_SEGMENTS = (
    ("p1pt504_initial_square", "504f", 7, 0, 1),
    ("p1pt504_forw_prds_1_300", "504f", 1, 1, 301),
    ("p1pt504_forw_prds_301_400", "504f", 1, 301, 401),
    ("p1pt504_forw_prds_401_1000", "504f", 1, 401, 1001),
    ("p1pt504_backw_prds_1_250", "504b", 6, 1, 251),
    ("p1pt506_initial_square", "506f", 7, 0, 1),
    ("p1pt506_forw_prds_1_250", "506f", 1, 1, 251),
    ("p1pt506_backw_prds_1_250", "506b", 6, 1, 251),
    ("p1pt508_initial_square", "508f", 7, 0, 1),
    ("p1pt508_forw_prds_1_15", "508f", 1, 1, 16),
    ("p1pt508_forw_prds_16_50", "508f", 1, 16, 51),
    ("p1pt508_forw_prds_51_250", "508f", 1, 51, 251),
    ("p1pt508_forw_prds_251_1000", "508f", 1, 251, 1001),
    ("p1pt508_backw_prds_1_13", "508b", 6, 1, 14),
    ("p1pt508_backw_prds_14_40", "508b", 6, 14, 41),
    ("p1pt508_backw_prds_41_1000", "508b", 6, 41, 1001),
    ("p1pt518_initial_square", "518b", 7, 0, 1),
    ("p1pt518_backw_prds_1_10", "518b", 6, 1, 11),
    ("p1pt518_backw_prds_11_100", "518b", 6, 11, 101),
    ("p1pt518_backw_prds_101_700", "518b", 6, 101, 701),
    ("p1pt518_backw_prds_701_1000", "518b", 6, 701, 1001),
    ("p1pt518_forw_prds_1_10", "518f", 1, 1, 11),
    ("p1pt518_forw_prds_11_100", "518f", 1, 11, 101),
    ("p1pt518_forw_prds_101_500", "518f", 1, 101, 501),
)


def _expect(paths: Sequence[PathLike], count: int, figure: str) -> list[PathLike]:
    paths = list(paths)
    if len(paths) != count:
        raise ValueError(f"{figure} needs {count} input files, got {len(paths)}")
    return paths


def _stokes_lines(scene: Scene, p1, p2, p1_re1) -> None:
    scene.push_group("P1_line_Stokes")
    plot_stability_points_sized(scene, p1, 18, 2, 3, 0.1, 0.2)
    scene.push_group("P2_line_Stokes")
    plot_stability_points_sized(scene, p2, 18, 2, 3, 0.1, 0.2)


def stokes_line_manifolds(paths: Sequence[PathLike]) -> Scene:
    """Stokes lines, the tracked P2 point and the Re 1 manifolds (seven files).

    An empty track file raises IndexError, as its first point is marked.
    """
    paths = _expect(paths, 7, "stokes_line_manifolds")
    p1 = read_stability_points(paths[0])
    p2 = read_stability_points(paths[1])
    track = read_points(paths[2])
    p1_re1 = read_stability_points(paths[3])
    manifold = read_points(paths[4])
    stable = read_points(paths[5])
    unstable = read_points(paths[6])

    scene = Scene()
    scene.set_size(0.1)
    apply_palette(scene, LINES_PALETTE)

    _stokes_lines(scene, p1, p2, p1_re1)

    scene.push_group("P2_pnt_track_Re1")
    scene.set_size(0.4)
    scene.set_colour_index(6)
    scene.point(*track[0], 4)
    scene.set_colour_index(1)
    scene.points(track, 1)

    scene.push_group("P1_pnts_Re1")
    plot_stability_points_sized(scene, p1_re1, 18, 2, 3, 0.4, 0.4)

    scene.push_group("pt3_1Dmanifold_Re1_part1")
    scene.set_colour_index(7)
    scene.points(manifold, 1)

    scene.push_group("pt2_stable_Re1_part1")
    scene.set_colour_index(33)
    scene.points(stable, 1)
    scene.push_group("pt2_unstable_Re1_part1")
    scene.set_colour_index(6)
    scene.points(unstable, 1)
    return scene


def square_tracks(paths: Sequence[PathLike]) -> Scene:
    """Stokes lines, tracked squares of points over periods and P2/P1 orbits (fourteen files).

    Each track file holds squares of SQUARE_POINTS points, one after another per
    period; periods past the end of a file are simply empty.
    """
    paths = _expect(paths, 14, "square_tracks")
    p1 = read_stability_points(paths[0])
    p2 = read_stability_points(paths[1])
    p1_re1 = read_stability_points(paths[2])
    tracks = {key: read_points(path) for key, path in zip(_TRACK_FILES, paths[3:11])}
    p2_orbit = read_points(paths[11])
    single_orbit = read_points(paths[12])
    manifold_orbits = read_points(paths[13])

    scene = Scene()
    scene.set_size(0.1)
    apply_palette(scene, SQUARE_PALETTE)

    _stokes_lines(scene, p1, p2, p1_re1)
    scene.push_group("P1_pnts_Re1")
    plot_stability_points_sized(scene, p1_re1, 18, 2, 3, 0.4, 0.4)

    for name, key, colour, first, after_last in _TRACK_SEGMENTS:
        scene.set_colour_index(colour)
        scene.push_group(name)
        part = select(tracks[key], SQUARE_POINTS * first, SQUARE_POINTS * after_last)
        scene.points(part, 1)

    scene.push_group("P2_pnt_track_Re1")
    scene.set_size(0.4)
    scene.set_colour_index(32)
    scene.point(*p2_orbit[0], 4)
    scene.points(p2_orbit, 1)

    scene.push_group("P1pt2_re1_single_orbit")
    scene.set_colour_index(35)
    scene.point(*single_orbit[0], 4)
    scene.points(single_orbit, 1)
    scene.push_group("P1pt2_re1_manifold_orbits")
    scene.points(manifold_orbits, 1)
    return scene