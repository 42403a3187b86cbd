"""Interactive matplotlib viewer driven by canvas resize and scroll events."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.backend_bases import FigureCanvasBase

from iconfield.model import Colour, normalise_colour
from iconfield.rendering.layer import IconLayer
from iconfield.rendering.static import draw_icons

_SCROLL_STEP_PX = 120.0  # page offset per scroll-wheel notch
_OTHER_PATH = "/other"  # any non-home route

_HELP_TEXT = """\
Scroll     Scroll page
h          Home route / other route
?          Toggle help
q          Close"""


def bind_canvas(
    canvas: FigureCanvasBase,
    layer: IconLayer,
    *,
    on_change: Callable[[], object] | None = None,
    scroll_step: float = _SCROLL_STEP_PX,
) -> list[int]:
    """Connect a matplotlib canvas to *layer* as its event source.

    ``resize_event`` feeds :meth:`IconLayer.on_resize`, ``scroll_event``
    moves the page offset by *scroll_step* pixels per notch (scrolling
    down increases the offset), and ``close_event`` closes the layer.
    Each connection's disconnect is registered with
    :meth:`IconLayer.subscribe`, so closing the layer (directly or by
    closing the figure) leaves no callback attached to the canvas.

    Args:
        canvas: The figure canvas to listen on.
        layer: The layer to drive.
        on_change: Called after every resize or scroll, typically to
            redraw.
        scroll_step: Page offset in pixels per scroll-wheel notch.

    Returns:
        The matplotlib callback ids, in connection order.
    """

    def _notify() -> None:
        if on_change is not None and layer.active:
            on_change()

    def on_resize(event: Any) -> None:
        layer.on_resize(event.width, event.height)
        _notify()

    def on_scroll(event: Any) -> None:
        layer.on_scroll(layer.scroll.offset_y - event.step * scroll_step)
        _notify()

    def on_close(event: Any) -> None:
        layer.close()

    cids = [
        canvas.mpl_connect("resize_event", on_resize),
        canvas.mpl_connect("scroll_event", on_scroll),
        canvas.mpl_connect("close_event", on_close),
    ]
    for cid in cids:
        layer.subscribe(lambda cid=cid: canvas.mpl_disconnect(cid))
    return cids


def render_mpl_interactive(
    layer: IconLayer,
    *,
    path: str | None = None,
    figsize: tuple[float, float] = (12.0, 8.0),
    dpi: int = 100,
    background: Colour = "white",
) -> IconLayer:
    """Open a window showing the icon layer as the page would.

    **Mouse:** scroll to move the page offset; on the home route the
    layer appears once the offset passes the hero threshold and fades
    in over the fade distance.  Resizing the window re-lays the icons
    out.

    **Keyboard:** **h** toggles between the home route and a non-home
    route; **?** toggles a help overlay; **q** closes the window.

    The layer is closed when the window closes and is returned so its
    final state can be inspected.

    Args:
        layer: The layer to display.
        path: Initial route path.  ``None`` keeps the layer's route.
        figsize: Initial figure size in inches.
        dpi: Resolution.
        background: Background colour.

    Returns:
        *layer*, closed.
    """
    if path is not None:
        layer.on_route_change(path)

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    help_visible = {"value": False}

    def _redraw() -> None:
        draw_icons(ax, layer.frame(), icon_size=layer.config.icon_size)
        for text in ax.texts[:]:
            text.remove()
        ax.text(
            0.01, 0.99,
            f"{layer.route.path}  scroll={layer.scroll.offset_y:.0f}px",
            transform=ax.transAxes, fontsize=8, va="top",
            fontfamily="monospace",
        )
        if help_visible["value"]:
            ax.text(
                0.01, 0.94, _HELP_TEXT,
                transform=ax.transAxes, fontsize=7, va="top",
                fontfamily="monospace",
                bbox=dict(boxstyle="round,pad=0.5", facecolor="white",
                          alpha=0.85, edgecolor="grey"),
            )
        fig.canvas.draw_idle()

    def on_key_press(event: Any) -> None:
        if event.key == "h":
            home = layer.config.home_path
            layer.on_route_change(_OTHER_PATH if layer.route.is_home else home)
        elif event.key == "?":
            help_visible["value"] = not help_visible["value"]
        else:
            return
        _redraw()

    bind_canvas(fig.canvas, layer, on_change=_redraw)
    key_cid = fig.canvas.mpl_connect("key_press_event", on_key_press)
    layer.subscribe(lambda: fig.canvas.mpl_disconnect(key_cid))

    # Matplotlib binds 'h' to its own home-view action.
    manager = fig.canvas.manager
    if manager is not None:
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            fig.canvas.mpl_disconnect(handler_id)

    width, height = fig.canvas.get_width_height()
    layer.on_resize(width, height)
    _redraw()

    plt.show()
    layer.close()
    return layer
