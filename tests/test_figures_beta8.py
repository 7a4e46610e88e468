import pytest

from poincareviz.figures_beta8 import (
    INVERTED_PALETTE,
    beta8_manifolds,
    beta8_manifolds_colour,
    beta8_manifolds_finite,
)
from poincareviz.points import PointFileError
from poincareviz.scene import MANIFOLD_PALETTE

POINTS_PER_FILE = 1000


def _periodic(tmp_path):
    path = tmp_path / "periodic.dat"
    path.write_text("0.1 0.2 0.3 1\n0.4 0.5 0.6 -1\n")
    return path


def _manifold(tmp_path, index, count=POINTS_PER_FILE):
    path = tmp_path / f"manifold_{index}.dat"
    path.write_text("".join(f"{i / count} {i / count} {-i / count}\n" for i in range(count)))
    return path


def _paths(tmp_path, manifolds):
    return [_periodic(tmp_path)] + [_manifold(tmp_path, k) for k in range(manifolds)]


def _layers(scene):
    return {layer.name: layer for layer in scene.layers}


def test_manifolds_draws_only_point3(tmp_path):
    scene = beta8_manifolds(_paths(tmp_path, 18))
    names = [layer.name for layer in scene.layers]
    assert names[0] == "isolated_prdc_points"
    assert len(names) == 19
    layers = _layers(scene)
    assert len(layers["pt3_1d_mani_stable1"]) == POINTS_PER_FILE
    assert len(layers["pt3to2_1d_mani"]) == POINTS_PER_FILE
    assert set(layers["pt3_2d_mani_unstable"].symbols) == {1}
    assert len(layers["pt7_1d_mani_stable1"]) == 0
    assert len(layers["pt2_1d_mani_unstable1"]) == 0
    drawn = sum(len(layer) for layer in scene.layers[1:])
    assert drawn == 3 * POINTS_PER_FILE


def test_manifolds_periodic_colours(tmp_path):
    scene = beta8_manifolds(_paths(tmp_path, 18))
    periodic = scene.layers[0]
    assert periodic.colours == [MANIFOLD_PALETTE[18], scene.colour_of(2)]
    assert periodic.sizes == [0.8, 0.8]
    assert scene.layers[-2].colours[0] == MANIFOLD_PALETTE[34]


def test_colour_figure_counts_and_palette(tmp_path):
    scene = beta8_manifolds_colour(_paths(tmp_path, 17))
    assert len(scene.layers) == 18
    layers = _layers(scene)
    assert len(layers["pt7_1d_mani_stable1"]) == 600
    assert len(layers["pt7_1d_mani_stable2"]) == POINTS_PER_FILE
    assert len(layers["pt4_1d_mani_stable1"]) == 500
    assert len(layers["pt4_1d_mani_unstable2"]) == 1000
    assert len(layers["pt5_1d_mani_stable2"]) == POINTS_PER_FILE
    assert len(layers["pt5_2d_mani_unstable"]) == 0
    assert scene.colour_of(12) == (0.0, 1.0, 1.0)
    assert scene.layers[0].colours[1] == INVERTED_PALETTE[12]
    assert layers["pt7_1d_mani_stable1"].colours[0] == INVERTED_PALETTE[22]


def test_finite_figure_counts(tmp_path):
    scene = beta8_manifolds_finite(_paths(tmp_path, 18))
    layers = _layers(scene)
    assert len(layers["pt5_1d_mani_stable2"]) == 700
    assert len(layers["pt5_2d_mani_unstable"]) == POINTS_PER_FILE
    assert len(layers["pt4_1d_mani_stable1"]) == 600
    assert len(layers["pt3_1d_mani_stable1"]) == 600
    assert len(layers["pt4_1d_mani_unstable1"]) == POINTS_PER_FILE
    assert len(layers["pt6_1d_mani_stable1"]) == 0
    assert all(size == 0.2 for size in layers["pt3to2_1d_mani"].sizes)


def test_shown_points_keep_file_order(tmp_path):
    scene = beta8_manifolds_finite(_paths(tmp_path, 18))
    layer = _layers(scene)["pt4_1d_mani_stable2"]
    assert layer.xs == sorted(layer.xs)
    assert layer.xs[0] == 0.0


@pytest.mark.parametrize(
    "figure, count",
    [(beta8_manifolds, 17), (beta8_manifolds_colour, 18), (beta8_manifolds_finite, 5)],
)
def test_wrong_number_of_files(tmp_path, figure, count):
    with pytest.raises(ValueError, match="input files"):
        figure(_paths(tmp_path, count))


def test_bad_manifold_file(tmp_path):
    paths = _paths(tmp_path, 18)
    paths[3].write_text("1 2\n")
    with pytest.raises(PointFileError):
        beta8_manifolds(paths)