"""Drawing a recorded scene with matplotlib."""

from __future__ import annotations

import os
from collections import defaultdict
from pathlib import Path

from poincareviz.scene import Scene

_MARKERS = {1: ".", 4: "o"}
SIZE_SCALE = 12.0


def draw(scene: Scene, axes) -> list:
    """Draw every group of the scene on three-dimensional axes; return the artists."""
    if not hasattr(axes, "set_zlim"):
        raise TypeError("axes must be three-dimensional")
    artists = []
    for layer in scene.layers:
        by_symbol = defaultdict(list)
        for x, y, z, colour, size, symbol in zip(
            layer.xs, layer.ys, layer.zs, layer.colours, layer.sizes, layer.symbols
        ):
            by_symbol[symbol].append((x, y, z, colour, size))
        for symbol, marks in by_symbol.items():
            xs, ys, zs, colours, sizes = zip(*marks)
            artists.append(
                axes.scatter(
                    xs,
                    ys,
                    zs,
                    c=list(colours),
                    s=[(size * SIZE_SCALE) ** 2 for size in sizes],
                    marker=_MARKERS.get(symbol, "o"),
                    depthshade=False,
                    label=layer.name,
                )
            )
    (x_low, x_high), (y_low, y_high), (z_low, z_high) = scene.window
    axes.set_xlim(x_low, x_high)
    axes.set_ylim(y_low, y_high)
    axes.set_zlim(z_low, z_high)
    return artists


def show(scene: Scene, output: str | os.PathLike | None = None) -> Path | None:
    """Show the scene in a window, or save it to ``output`` and return that path."""
    import matplotlib.pyplot as plt

    figure = plt.figure(facecolor="black")
    axes = figure.add_subplot(projection="3d")
    axes.set_facecolor("black")
    axes.set_axis_off()
    draw(scene, axes)
    try:
        if output is None:
            plt.show()
            return None
        path = Path(output)
        figure.savefig(path, facecolor=figure.get_facecolor())
        return path
    finally:
        plt.close(figure)