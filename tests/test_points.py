import io

import pytest

from poincareviz.points import (
    PointFileError,
    PointSet3D,
    Stability,
    StabilityPoints,
    classify,
    read_points,
    read_stability_points,
    select,
    split_equal,
)


def _points(count):
    return PointSet3D(
        xs=[float(i) for i in range(count)],
        ys=[float(i) * 2 for i in range(count)],
        zs=[float(i) * 3 for i in range(count)],
    )


def test_read_points_from_stream():
    pts = read_points(io.StringIO("0.5 0.25 -1\n1e-2 2 3\n"))
    assert len(pts) == 2
    assert pts[0] == (0.5, 0.25, -1.0)
    assert pts[1] == (1e-2, 2.0, 3.0)


def test_read_points_ignores_trailing_text():
    pts = read_points(io.StringIO("1 2 3 4 extra\n"))
    assert list(pts) == [(1.0, 2.0, 3.0)]


def test_read_points_from_path(tmp_path):
    path = tmp_path / "pts.dat"
    path.write_text("1 2 3\n4 5 6\n", encoding="utf-8")
    pts = read_points(path)
    assert pts.xs == (1.0, 4.0)
    assert pts.zs == (3.0, 6.0)


def test_read_points_empty_source():
    assert len(read_points(io.StringIO(""))) == 0


def test_short_line_raises_with_line_number():
    with pytest.raises(PointFileError, match="line 2") as info:
        read_points(io.StringIO("1 2 3\n1 2\n"))
    assert info.value.line == 2


def test_blank_line_is_an_error():
    with pytest.raises(PointFileError):
        read_points(io.StringIO("1 2 3\n\n"))


def test_read_stability_points():
    pts = read_stability_points(io.StringIO("1 2 3 1\n4 5 6 -1\n"))
    assert len(pts) == 2
    assert pts[1] == (4.0, 5.0, 6.0, -1.0)
    assert pts.flags == (1.0, -1.0)


def test_stability_file_needs_four_columns():
    with pytest.raises(PointFileError):
        read_stability_points(io.StringIO("1 2 3\n"))


@pytest.mark.parametrize(
    "flag, expected",
    [
        (1.0, Stability.STABLE),
        (0.0, Stability.DEGENERATE),
        (-1.0, Stability.UNSTABLE),
        (0.5, Stability.UNSTABLE),
    ],
)
def test_classify(flag, expected):
    assert classify(flag) is expected


def test_head_limits_and_clamps():
    pts = _points(5)
    assert list(pts.head(2)) == list(pts)[:2]
    assert len(pts.head(50)) == 5


def test_head_rejects_negative():
    with pytest.raises(ValueError):
        _points(3).head(-1)


def test_select_matches_slice():
    pts = _points(10)
    part = select(pts, 3, 7)
    assert list(part) == list(pts)[3:7]


def test_select_empty_when_stop_before_start():
    assert len(select(_points(10), 6, 2)) == 0


def test_select_rejects_negative():
    with pytest.raises(ValueError):
        select(_points(3), -1, 2)


def test_split_equal_drops_remainder():
    pts = _points(13)
    parts = split_equal(pts, 6)
    assert len(parts) == 6
    assert all(len(p) == len(pts) // 6 for p in parts)
    joined = [p for part in parts for p in part]
    assert joined == list(pts)[: len(joined)]


def test_split_equal_rejects_zero_parts():
    with pytest.raises(ValueError):
        split_equal(_points(3), 0)


def test_mismatched_columns_rejected():
    with pytest.raises(ValueError):
        PointSet3D(xs=[1.0], ys=[], zs=[1.0])
    with pytest.raises(ValueError):
        StabilityPoints(xs=[1.0], ys=[1.0], zs=[1.0], flags=[])