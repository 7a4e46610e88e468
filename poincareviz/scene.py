"""A recorded 3D scene of coloured point groups, with an indexed colour table."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from poincareviz.points import PointSet3D, Stability, StabilityPoints, classify

Colour = tuple[float, float, float]

DEFAULT_GROUP = "default"
DEFAULT_WINDOW = ((-1.0, 1.0), (0.0, 1.0), (-1.0, 1.0))

STANDARD_COLOURS: Mapping[int, Colour] = MappingProxyType(
    {
        0: (0.0, 0.0, 0.0),
        1: (1.0, 1.0, 1.0),
        2: (1.0, 0.0, 0.0),
        3: (0.0, 1.0, 0.0),
        4: (0.0, 0.0, 1.0),
        5: (0.0, 1.0, 1.0),
        6: (1.0, 0.0, 1.0),
        7: (1.0, 1.0, 0.0),
        8: (1.0, 0.5, 0.0),
        9: (0.5, 1.0, 0.0),
        10: (0.0, 1.0, 0.5),
        11: (0.0, 0.5, 1.0),
        12: (0.5, 0.0, 1.0),
        13: (1.0, 0.0, 0.5),
        14: (1 / 3, 1 / 3, 1 / 3),
        15: (2 / 3, 2 / 3, 2 / 3),
    }
)

ELECTRIC_BLUE: Colour = (0.03137254901, 0.5725490196, 0.81568627451)

_SHARED_COLOURS = {
    23: (1 - 0, 1 - 0.921568627450980, 1 - 0.423529411764706),
    24: (1 - 0.498039215686275, 1 - 1, 1 - 0.498039215686275),
    26: (1 - 0.419607843137255, 1 - 1, 1 - 0.172549019607843),
    27: (1 - 0.705882352941176, 1 - 1, 1 - 0.490196078431373),
    29: (1 - 1, 1 - 1, 1 - 0.498039215686275),
    30: (0.901960784313726, 0.901960784313726, 0.980392156862745),
    31: (0.960784313725490, 0.870588235294118, 0.701960784313725),
    32: (0.980392156862745, 0.501960784313726, 0.447058823529412),
    33: (0.529411764705882, 0.807843137254902, 0.921568627450980),
    34: (0.823529411764706, 0.411764705882353, 0.117647058823529),
    35: (0.678431372549020, 1, 0.184313725490196),
}

MANIFOLD_PALETTE: Mapping[int, Colour] = MappingProxyType(
    {
        18: ELECTRIC_BLUE,
        21: (1 - 0.50196078431, 1, 1),
        22: (1 - 0.454901960784314, 1 - 0.729411764705882, 1 - 0.925490196078431),
        **_SHARED_COLOURS,
    }
)

LINES_PALETTE: Mapping[int, Colour] = MappingProxyType(
    {
        18: ELECTRIC_BLUE,
        21: (0.50196078431, 1, 1),
        22: (1 - 0.454901960784314, 1 - 0.729411764705882, 1 - 0.925490196078431),
        **_SHARED_COLOURS,
    }
)


@dataclass
class Layer:
    """A named group of marks, each with its own colour, size and symbol."""

    name: str
    xs: list[float] = field(default_factory=list)
    ys: list[float] = field(default_factory=list)
    zs: list[float] = field(default_factory=list)
    colours: list[Colour] = field(default_factory=list)
    sizes: list[float] = field(default_factory=list)
    symbols: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.xs)

    def _append(self, x: float, y: float, z: float, colour: Colour, size: float, symbol: int) -> None:
        self.xs.append(float(x))
        self.ys.append(float(y))
        self.zs.append(float(z))
        self.colours.append(colour)
        self.sizes.append(size)
        self.symbols.append(symbol)


class Scene:
    """Records points with the current colour and size into named groups."""

    def __init__(self, window=DEFAULT_WINDOW) -> None:
        bounds = tuple((float(low), float(high)) for low, high in window)
        if len(bounds) != 3 or any(low >= high for low, high in bounds):
            raise ValueError("window needs three increasing (low, high) ranges")
        self.window = bounds
        self.palette: dict[int, Colour] = dict(STANDARD_COLOURS)
        self.colour_index = 1
        self.size = 1.0
        self.layers: list[Layer] = []

    def set_colour(self, index: int, red: float, green: float, blue: float) -> None:
        """Define the colour for a colour index."""
        if index < 0:
            raise ValueError("colour index must not be negative")
        colour = (float(red), float(green), float(blue))
        if any(not 0.0 <= part <= 1.0 for part in colour):
            raise ValueError("colour components must lie between 0 and 1")
        self.palette[index] = colour

    def colour_of(self, index: int) -> Colour:
        """Return the colour defined for an index."""
        try:
            return self.palette[index]
        except KeyError:
            raise ValueError(f"colour index {index} has no colour") from None

    def set_colour_index(self, index: int) -> None:
        """Choose the colour index for the marks that follow."""
        if index < 0:
            raise ValueError("colour index must not be negative")
        self.colour_index = index

    def set_size(self, size: float) -> None:
        """Choose the symbol size for the marks that follow."""
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = float(size)

    def push_group(self, name: str) -> Layer:
        """Start a new named group; the marks that follow go into it."""
        layer = Layer(name)
        self.layers.append(layer)
        return layer

    def _current_layer(self) -> Layer:
        if not self.layers:
            return self.push_group(DEFAULT_GROUP)
        return self.layers[-1]

    def points(self, points: PointSet3D, symbol: int, count: int | None = None) -> int:
        """Mark the points (or the first ``count`` of them); return how many were marked."""
        chosen = points if count is None else points.head(count)
        colour = self.colour_of(self.colour_index)
        layer = self._current_layer()
        for x, y, z in chosen:
            layer._append(x, y, z, colour, self.size, symbol)
        return len(chosen)

    def point(self, x: float, y: float, z: float, symbol: int) -> None:
        """Mark a single point."""
        colour = self.colour_of(self.colour_index)
        self._current_layer()._append(x, y, z, colour, self.size, symbol)


def apply_palette(scene: Scene, palette: Mapping[int, Colour]) -> None:
    """Define every colour of a palette in the scene."""
    for index, (red, green, blue) in palette.items():
        scene.set_colour(index, red, green, blue)


def plot_stability_points(
    scene: Scene,
    points: StabilityPoints,
    stable_colour: int,
    unstable_colour: int,
    size: float,
    indices: Iterable[int] | None = None,
) -> None:
    """Mark periodic points, stable ones in one colour and all others in another."""
    scene.set_size(size)
    chosen = points if indices is None else (points[i] for i in indices)
    for x, y, z, flag in chosen:
        stable = classify(flag) is Stability.STABLE
        scene.set_colour_index(stable_colour if stable else unstable_colour)
        scene.point(x, y, z, 4)


def plot_stability_points_sized(
    scene: Scene,
    points: StabilityPoints,
    stable_colour: int,
    unstable_colour: int,
    degenerate_colour: int,
    point_size: float,
    degenerate_size: float,
) -> None:
    """Mark periodic points in three colours, degenerate ones at their own size."""
    for x, y, z, flag in points:
        kind = classify(flag)
        if kind is Stability.STABLE:
            scene.set_colour_index(stable_colour)
            scene.set_size(point_size)
        elif kind is Stability.DEGENERATE:
            scene.set_colour_index(degenerate_colour)
            scene.set_size(degenerate_size)
        else:
            scene.set_colour_index(unstable_colour)
            scene.set_size(point_size)
        scene.point(x, y, z, 4)