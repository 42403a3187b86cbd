"""Default glyph registry and colour palette.

Glyph names follow the fitness-themed icon set the layer was designed
around.  Each name maps to a matplotlib marker that stands in for the
icon shape; several use mathtext symbols or ``(numsides, style, angle)``
star polygons where no single-character marker is a reasonable match.
"""

from __future__ import annotations

from types import MappingProxyType

from iconfield.model import GlyphRef, PaletteEntry

_GLYPH_MARKERS: dict[str, str | tuple[int, int, float]] = {
    "Dumbbell":       "P",
    "Droplet":        "v",
    "Apple":          "o",
    "Heart":          r"$\heartsuit$",
    "Activity":       "^",
    "Flame":          (3, 1, 0.0),   # three-point star
    "Timer":          "8",
    "Footprints":     "d",
    "Drumstick":      ">",
    "Scale":          "s",
    "ShieldCheck":    "p",
    "Salad":          "h",
    "Medal":          "*",
    "Bike":           "D",
    "Running":        "<",
    "Yoga":           (6, 2, 0.0),   # six-arm asterisk
    "Leaf":           r"$\clubsuit$",
    "Target":         "H",
    "Zap":            "X",
    "Coffee":         (4, 1, 45.0),  # four-point star, rotated
    "Sunset":         (8, 1, 0.0),
    "PersonStanding": "1",
    "Brain":          (5, 1, 0.0),
    "Smile":          r"$\diamondsuit$",
    "User":           "+",
}

#: Ordered, read-only mapping of glyph name to :class:`GlyphRef`.
GLYPH_REGISTRY: MappingProxyType[str, GlyphRef] = MappingProxyType({
    name: GlyphRef(name=name, marker=marker)
    for name, marker in _GLYPH_MARKERS.items()
})

#: The four baby-pink theme tokens, in catalog order.
DEFAULT_PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry("baby-pink-primary", "#f4a6c0"),
    PaletteEntry("baby-pink-secondary", "#f7bfd2"),
    PaletteEntry("baby-pink-accent", "#e8799f"),
    PaletteEntry("baby-pink-bright", "#ff8fb8"),
)
