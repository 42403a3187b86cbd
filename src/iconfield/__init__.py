"""iconfield: procedural decorative-icon layout.

iconfield scatters stylized icon glyphs across a viewport on a jittered
grid, keeps them clear of a central content zone, and fades them in as
the page scrolls.  Layouts are reproducible from a seed and can be drawn
with matplotlib.

Example usage::

    from iconfield import IconLayer, LayerConfig, render_mpl

    layer = IconLayer(LayerConfig(seed=42))
    layer.on_resize(1200, 800)
    layer.on_route_change("/")
    layer.on_scroll(900)
    render_mpl(layer, "icons.png")
"""

import logging

from iconfield.construction import (
    DEFAULT_BREAKPOINTS,
    DEFAULT_PALETTE,
    GLYPH_REGISTRY,
    LayerConfig,
    generate_icons,
    generate_positions,
    load_config,
    save_config,
)
from iconfield.model import (
    ExclusionMode,
    GlyphRef,
    IconInstance,
    IconStyle,
    PaletteEntry,
    Placement,
    RouteContext,
    ScrollState,
    ViewportState,
    normalise_colour,
)
from iconfield.rendering import (
    IconLayer,
    LayerVisibility,
    bind_canvas,
    icon_count_for_width,
    render_mpl,
    render_mpl_interactive,
    resolve_opacity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_PALETTE",
    "ExclusionMode",
    "GLYPH_REGISTRY",
    "GlyphRef",
    "IconInstance",
    "IconLayer",
    "IconStyle",
    "LayerConfig",
    "LayerVisibility",
    "PaletteEntry",
    "Placement",
    "RouteContext",
    "ScrollState",
    "ViewportState",
    "bind_canvas",
    "generate_icons",
    "generate_positions",
    "icon_count_for_width",
    "load_config",
    "normalise_colour",
    "render_mpl",
    "render_mpl_interactive",
    "resolve_opacity",
    "save_config",
]
