import pytest

from poincareviz.points import PointSet3D, StabilityPoints
from poincareviz.scene import (
    DEFAULT_GROUP,
    ELECTRIC_BLUE,
    LINES_PALETTE,
    MANIFOLD_PALETTE,
    Scene,
    apply_palette,
    plot_stability_points,
    plot_stability_points_sized,
)


def _points(count):
    return PointSet3D(
        xs=[float(i) for i in range(count)],
        ys=[0.5] * count,
        zs=[-0.5] * count,
    )


def _stability():
    return StabilityPoints(
        xs=[0.1, 0.2, 0.3, 0.4],
        ys=[0.1, 0.2, 0.3, 0.4],
        zs=[0.0, 0.0, 0.0, 0.0],
        flags=[1.0, -1.0, 0.0, 1.0],
    )


def test_default_colour_is_white():
    scene = Scene()
    assert scene.colour_of(scene.colour_index) == (1.0, 1.0, 1.0)


def test_set_colour_round_trip():
    scene = Scene()
    scene.set_colour(40, 0.1, 0.2, 0.3)
    assert scene.colour_of(40) == (0.1, 0.2, 0.3)


def test_set_colour_rejects_out_of_range():
    with pytest.raises(ValueError):
        Scene().set_colour(40, 1.5, 0.0, 0.0)


def test_undefined_colour_raises_on_marking():
    scene = Scene()
    scene.set_colour_index(99)
    with pytest.raises(ValueError):
        scene.point(0.0, 0.0, 0.0, 4)


def test_set_size_rejects_non_positive():
    with pytest.raises(ValueError):
        Scene().set_size(0)


def test_points_record_current_state():
    scene = Scene()
    scene.set_colour(40, 0.1, 0.2, 0.3)
    scene.set_colour_index(40)
    scene.set_size(0.5)
    scene.push_group("group_a")
    pts = _points(3)
    assert scene.points(pts, 4) == 3
    layer = scene.layers[0]
    assert layer.name == "group_a"
    assert len(layer) == 3
    assert layer.xs == list(pts.xs)
    assert set(layer.colours) == {scene.colour_of(40)}
    assert set(layer.sizes) == {0.5}
    assert set(layer.symbols) == {4}


def test_points_count_limits_and_clamps():
    scene = Scene()
    assert scene.points(_points(10), 1, 4) == 4
    assert scene.points(_points(3), 1, 100) == 3
    assert len(scene.layers[0]) == 7


def test_marks_before_any_group_go_to_default():
    scene = Scene()
    scene.point(0.0, 0.5, 0.0, 4)
    assert [layer.name for layer in scene.layers] == [DEFAULT_GROUP]


def test_later_colour_change_keeps_earlier_marks():
    scene = Scene()
    scene.set_colour(40, 0.1, 0.2, 0.3)
    scene.set_colour_index(40)
    scene.point(0.0, 0.0, 0.0, 4)
    before = scene.layers[0].colours[0]
    scene.set_colour(40, 0.9, 0.9, 0.9)
    assert scene.layers[0].colours[0] == before


def test_groups_are_kept_in_order():
    scene = Scene()
    for name in ("first", "second", "third"):
        scene.push_group(name)
    assert [layer.name for layer in scene.layers] == ["first", "second", "third"]


def test_apply_palette():
    scene = Scene()
    apply_palette(scene, MANIFOLD_PALETTE)
    assert scene.colour_of(18) == ELECTRIC_BLUE
    assert all(scene.colour_of(i) == c for i, c in MANIFOLD_PALETTE.items())
    apply_palette(scene, LINES_PALETTE)
    assert scene.colour_of(21) == LINES_PALETTE[21]


def test_window_validation():
    with pytest.raises(ValueError):
        Scene(window=((1.0, -1.0), (0.0, 1.0), (-1.0, 1.0)))


def test_plot_stability_points_two_colours():
    scene = Scene()
    scene.set_colour(18, *ELECTRIC_BLUE)
    plot_stability_points(scene, _stability(), 18, 2, 0.8)
    layer = scene.layers[0]
    stable, other = scene.colour_of(18), scene.colour_of(2)
    assert layer.colours == [stable, other, other, stable]
    assert set(layer.sizes) == {0.8}
    assert scene.size == 0.8


def test_plot_stability_points_indices():
    scene = Scene()
    pts = _stability()
    plot_stability_points(scene, pts, 3, 2, 0.8, indices=range(1, 3))
    layer = scene.layers[0]
    assert layer.xs == list(pts.xs[1:3])


def test_plot_stability_points_sized():
    scene = Scene()
    scene.set_colour(18, *ELECTRIC_BLUE)
    plot_stability_points_sized(scene, _stability(), 18, 2, 3, 0.1, 0.2)
    layer = scene.layers[0]
    assert layer.colours == [
        scene.colour_of(18),
        scene.colour_of(2),
        scene.colour_of(3),
        scene.colour_of(18),
    ]
    assert layer.sizes == [0.1, 0.1, 0.2, 0.1]