from __future__ import annotations

from dataclasses import dataclass

from iconfield._constants import OPACITY_RANGE, STROKE_WIDTH_RANGE
from iconfield.model._util import _check_range
from iconfield.model.colour import PaletteEntry


@dataclass(frozen=True)
class GlyphRef:
    """Reference to a drawable icon shape.

    The layout engine only ever selects glyph references; drawing is
    left to the renderer, which passes :attr:`marker` to matplotlib.

    Attributes:
        name: Registry name of the glyph (e.g. ``"Dumbbell"``).
        marker: A matplotlib marker specification: a marker code such
            as ``"h"``, a mathtext string such as ``"$\\heartsuit$"``,
            or a ``(numsides, style, angle)`` tuple.
    """

    name: str
    marker: str | tuple[int, int, float]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("glyph name must be a non-empty string")


@dataclass(frozen=True)
class IconStyle:
    """Visual styling for one decorative icon slot.

    Attributes:
        glyph: The glyph to draw.
        colour: Palette entry the icon is painted with.
        variant: Stable identifier: the lowercase glyph name, with a
            ``-{cycle}`` suffix once the catalog wraps around the
            glyph registry.
        base_opacity: Opacity before any scroll-linked fading.
        stroke_width: Outline width handed to the drawing primitive.

    Raises:
        ValueError: If *base_opacity* or *stroke_width* is out of range.
    """

    glyph: GlyphRef
    colour: PaletteEntry
    variant: str
    base_opacity: float
    stroke_width: float

    def __post_init__(self) -> None:
        _check_range("base_opacity", self.base_opacity, OPACITY_RANGE)
        _check_range("stroke_width", self.stroke_width, STROKE_WIDTH_RANGE)
