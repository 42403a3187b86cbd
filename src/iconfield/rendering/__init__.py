"""Rendering: the presentation loop, visibility rules, and matplotlib output."""

from iconfield.rendering.interactive import bind_canvas, render_mpl_interactive
from iconfield.rendering.layer import IconLayer, icon_count_for_width
from iconfield.rendering.static import draw_icons, render_mpl
from iconfield.rendering.visibility import (
    LayerVisibility,
    fade_progress,
    is_suppressed,
    resolve_opacity,
)

__all__ = [
    "IconLayer",
    "LayerVisibility",
    "bind_canvas",
    "draw_icons",
    "fade_progress",
    "icon_count_for_width",
    "is_suppressed",
    "render_mpl",
    "render_mpl_interactive",
    "resolve_opacity",
]
