# poincareviz

Three-dimensional scatter views of Poincaré sections, periodic points and
their stable and unstable manifolds, built from plain-text point files and
drawn with matplotlib.

## Input files

The package reads two kinds of whitespace-separated text files:

- **Point files**: every line starts with three numbers `x y z`.
- **Stability point files**: every line starts with four numbers
  `x y z s`. The flag `s` gives the kind of point: `1` is stable, `0` is
  degenerate, and any other value is unstable.

Anything after the expected numbers on a line is ignored. A line that does
not start with the expected numbers, a blank line included, stops the read
with a `PointFileError` that gives the line number.

## Installing

```
pip install .
```

Add the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Use

```python
from poincareviz.points import read_points, read_stability_points
from poincareviz.scene import Scene, plot_stability_points
from poincareviz.render import show

periodic = read_stability_points("periodic_points.dat")
manifold = read_points("manifold.dat")

scene = Scene()
scene.push_group("isolated_periodic_points")
plot_stability_points(scene, periodic, 18, 2, 0.8, None)

scene.push_group("manifold")
scene.set_size(0.2)
scene.set_colour_index(1)
scene.points(manifold, 4, len(manifold))

show(scene, "figure.png")
```

`show` saves the scene to the given file and returns its path; called
without an output it opens a matplotlib window instead.

### Points

`poincareviz.points` holds:

- `read_points` and `read_stability_points`, which load a file (or any
  iterable of lines) into a `PointSet3D` or a `StabilityPoints`.
- `PointSet3D.head`, `select` and `split_equal`, which take the first
  points, a range of positions, or equal runs (dropping a remainder).
- `classify`, which maps a flag value to a `Stability`.

### Scenes

A `Scene` records marks into named `Layer`s. Every mark keeps the colour
and size that were current when it was added. Colours are looked up by
index in the scene's colour table; `set_colour` defines one and
`apply_palette` defines several at once. The palettes `MANIFOLD_PALETTE`
and `LINES_PALETTE` are in `poincareviz.scene`.

`plot_stability_points` marks stable points in one colour and all others
in another, optionally only at chosen positions.
`plot_stability_points_sized` uses a third colour and size for degenerate
points.

`poincareviz.render.draw` draws a scene onto existing matplotlib 3D axes.

### Ready-made figures

Each of these functions takes the list of input paths, in a fixed order
and number, and returns a finished `Scene`; a list of the wrong length
raises `ValueError`.

- `poincareviz.figures_base`: `base_flow_re1_poincare`,
  `base_flow_streamline`, `manifold_time_breaks`, `beta3_manifolds`
- `poincareviz.figures_stokes`: `beta3_total`, `beta_pt1_total`,
  `beta4_manifolds`
- `poincareviz.figures_beta8`: `beta8_manifolds`,
  `beta8_manifolds_colour`, `beta8_manifolds_finite`
- `poincareviz.figures_beta9`: `beta9_manifolds`, `beta9_manifolds_finite`
- `poincareviz.figures_beta10`: `beta10_points`, `beta10_manifolds`,
  `beta10_manifolds_finite`
- `poincareviz.figures_beta16`: `beta16_manifolds_finite`
- `poincareviz.figures_tracks`: `stokes_line_manifolds`, `square_tracks`

The number of files each one needs is given in its docstring.

## What it does not do

There is no command-line program: figures are built from Python, as
above, and shown or saved with `poincareviz.render.show`.