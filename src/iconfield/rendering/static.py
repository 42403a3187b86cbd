"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.markers import MarkerStyle
from matplotlib.transforms import Affine2D

from iconfield.model import Colour, IconInstance, normalise_colour
from iconfield.rendering.layer import IconLayer

_DEFAULT_VIEWPORT = (1200.0, 800.0)
_DEFAULT_ICON_SIZE = 32.0


def _prepare_axes(ax: Axes) -> None:
    """Map axes data coordinates to viewport percent, y growing downward."""
    ax.set_xlim(0, 100)
    ax.set_ylim(100, 0)
    ax.set_axis_off()


def _marker_for(instance: IconInstance) -> MarkerStyle:
    """Build the rotated marker for one icon.

    Placement rotation is clockwise on screen; matplotlib marker
    rotation is anticlockwise in display space, hence the sign flip.
    """
    transform = Affine2D().rotate_deg(-instance.placement.rotation)
    return MarkerStyle(
        instance.style.glyph.marker, fillstyle="none", transform=transform,
    )


def draw_icons(
    ax: Axes,
    instances: Sequence[IconInstance],
    *,
    icon_size: float = _DEFAULT_ICON_SIZE,
) -> None:
    """Draw icon instances into *ax*.

    Each icon is a single ``Line2D`` marker placed at its percent
    coordinates.  Marker size is ``icon_size * placement.scale`` pixels
    converted to points at the figure's dpi.  Existing lines are
    removed first so repeated calls redraw in place.

    Args:
        ax: A matplotlib ``Axes`` to draw into.
        instances: The frame to draw.
        icon_size: Base icon size in pixels.
    """
    fig = ax.get_figure()
    if not isinstance(fig, Figure):
        raise ValueError("ax is not attached to a Figure")
    pts_per_px = 72.0 / fig.dpi

    for line in ax.lines[:]:
        line.remove()
    _prepare_axes(ax)

    for inst in instances:
        p = inst.placement
        ax.plot(
            p.x, p.y,
            marker=_marker_for(inst),
            markersize=icon_size * p.scale * pts_per_px,
            markeredgewidth=inst.style.stroke_width * pts_per_px,
            markeredgecolor=inst.style.colour.rgb,
            alpha=inst.opacity,
            linestyle="None",
            zorder=inst.z_order,
        )


def render_mpl(
    source: IconLayer | Sequence[IconInstance],
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    viewport: tuple[float, float] | None = None,
    dpi: int = 100,
    background: Colour = "white",
    show: bool | None = None,
) -> Figure:
    """Render an icon frame as a static matplotlib figure.

    Example usage::

        layer = IconLayer(LayerConfig(seed=3))
        layer.on_resize(1200, 800)
        layer.on_route_change("/about")
        render_mpl(layer, "icons.png")

    Args:
        source: An :class:`IconLayer` (its current :meth:`~IconLayer.frame`
            is drawn) or an already-built sequence of
            :class:`~iconfield.model.IconInstance`.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is provided.
        ax: Optional matplotlib ``Axes`` to draw into.  The caller keeps
            control of the parent figure; *output*, *viewport*, *dpi*,
            *background* and *show* are ignored.
        viewport: Figure size in pixels ``(width, height)``.  Defaults
            to the layer's measured viewport, or 1200x800 when the layer
            is unmeasured or measured with a non-positive dimension.
        dpi: Figure resolution; together with *viewport* this fixes the
            figure size in inches.
        background: Background colour.
        show: Whether to call ``plt.show()``.  Defaults to ``True`` when
            *output* is ``None``.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    if isinstance(source, IconLayer):
        instances = source.frame()
        icon_size = source.config.icon_size
        if (
            viewport is None
            and source.viewport is not None
            and not source.viewport.is_degenerate
        ):
            viewport = (source.viewport.width, source.viewport.height)
    else:
        instances = tuple(source)
        icon_size = _DEFAULT_ICON_SIZE

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        draw_icons(ax, instances, icon_size=icon_size)
        return fig

    width, height = viewport if viewport is not None else _DEFAULT_VIEWPORT
    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.set_facecolor(bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    draw_icons(ax, instances, icon_size=icon_size)

    if output is not None:
        fig.savefig(str(output), dpi=dpi, facecolor=bg_rgb)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
