"""Core data model for iconfield: immutable descriptors and viewport state.

This package provides all the data types used throughout iconfield.
Everything is re-exported here so that ``from iconfield.model import
Placement`` works.
"""

from iconfield.model.colour import Colour, PaletteEntry, normalise_colour
from iconfield.model.icon_style import GlyphRef, IconStyle
from iconfield.model.instance import IconInstance
from iconfield.model.placement import ExclusionMode, Placement
from iconfield.model.viewport import (
    HOME_PATH,
    RouteContext,
    ScrollState,
    ViewportState,
)

__all__ = [
    "Colour",
    "ExclusionMode",
    "GlyphRef",
    "HOME_PATH",
    "IconInstance",
    "IconStyle",
    "PaletteEntry",
    "Placement",
    "RouteContext",
    "ScrollState",
    "ViewportState",
    "normalise_colour",
]
