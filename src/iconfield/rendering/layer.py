"""The decorative icon layer: viewport, scroll and route state in, frames out.

:class:`IconLayer` reacts to three event sources (viewport resizes,
scroll changes and route changes) and turns its current state into a
tuple of :class:`~iconfield.model.IconInstance` objects for the renderer.
Placement and style sequences are keyed on ``(count, width, height)`` and
only regenerated when that key changes; scroll events only re-resolve
opacity.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from iconfield._constants import FALLBACK_ICON_COUNT
from iconfield.construction.catalog import generate_icons
from iconfield.construction.config import DEFAULT_BREAKPOINTS, LayerConfig
from iconfield.construction.positions import RandomSource, generate_positions
from iconfield.model import (
    IconInstance,
    IconStyle,
    Placement,
    RouteContext,
    ScrollState,
    ViewportState,
)
from iconfield.rendering.visibility import is_suppressed, resolve_opacity

logger = logging.getLogger(__name__)

_SequenceKey = tuple[int, float, float]


def icon_count_for_width(
    width: float,
    breakpoints: tuple[tuple[int, int], ...] = DEFAULT_BREAKPOINTS,
    fallback: int = FALLBACK_ICON_COUNT,
) -> int:
    """Return the icon count for a viewport *width*.

    Breakpoint widths are inclusive lower bounds, checked widest first:
    with the defaults, ``width >= 1024`` gives 54, ``width >= 768``
    gives 40, and anything narrower gives *fallback*.
    """
    for min_width, count in breakpoints:
        if width >= min_width:
            return count
    return fallback


class IconLayer:
    """Presentation loop for the decorative icon layer.

    The layer renders nothing until it has been measured with at least
    one :meth:`on_resize` call, so default dimensions are never used.

    Example usage::

        layer = IconLayer(LayerConfig(seed=1))
        layer.on_resize(1200, 800)
        layer.on_route_change("/")
        layer.on_scroll(900)
        icons = layer.frame()          # 54 IconInstance objects

    The layer is also a context manager; leaving the ``with`` block
    calls :meth:`close`, which releases every registered event
    subscription.

    Args:
        config: Layer parameters.  ``None`` uses ``LayerConfig()``.
        rng: Random source shared by the position and catalog
            generators.  Defaults to a generator seeded from
            ``config.seed``.
    """

    def __init__(
        self,
        config: LayerConfig | None = None,
        *,
        rng: RandomSource = None,
    ) -> None:
        self.config = config if config is not None else LayerConfig()
        self._rng = np.random.default_rng(
            rng if rng is not None else self.config.seed
        )
        self.viewport: ViewportState | None = None
        self.scroll = ScrollState()
        self.route = RouteContext.from_path(None, home_path=self.config.home_path)
        self._key: _SequenceKey | None = None
        self._placements: tuple[Placement, ...] = ()
        self._styles: tuple[IconStyle, ...] = ()
        self._subscriptions: list[Callable[[], object]] = []
        self._active = True
        self._was_suppressed: bool | None = None

    # ---- Event handlers ----

    def on_resize(self, width: float, height: float) -> None:
        """Record a new viewport measurement."""
        self.viewport = ViewportState(width=float(width), height=float(height))

    def on_scroll(self, offset_y: float) -> None:
        """Record a new vertical scroll offset (clamped at zero)."""
        self.scroll = ScrollState(offset_y=float(offset_y))

    def on_route_change(self, path: str | None) -> None:
        """Record a navigation to *path*."""
        self.route = RouteContext.from_path(path, home_path=self.config.home_path)

    # ---- Derived state ----

    @property
    def active(self) -> bool:
        """``False`` once :meth:`close` has been called."""
        return self._active

    @property
    def measured(self) -> bool:
        """Whether at least one viewport measurement has arrived."""
        return self.viewport is not None

    @property
    def icon_count(self) -> int:
        """Icon count for the current viewport width (0 before measurement)."""
        if self.viewport is None:
            return 0
        return icon_count_for_width(
            self.viewport.width,
            self.config.breakpoints,
            self.config.fallback_count,
        )

    def sequences(self) -> tuple[tuple[Placement, ...], tuple[IconStyle, ...]]:
        """Return the current ``(placements, styles)`` pair.

        Both sequences are regenerated together, and only when the
        ``(count, width, height)`` key differs from the previous call.
        Otherwise the very same tuple objects are returned.
        """
        if self.viewport is None:
            return (), ()
        count = self.icon_count
        key = (count, self.viewport.width, self.viewport.height)
        if key != self._key:
            self._placements = generate_positions(
                count, self.viewport.width, self.viewport.height,
                rng=self._rng, exclusion=self.config.exclusion,
            )
            self._styles = generate_icons(len(self._placements), rng=self._rng)
            self._key = key
            logger.debug(
                "regenerated %d icons for %gx%g viewport",
                len(self._placements), self.viewport.width, self.viewport.height,
            )
        return self._placements, self._styles

    def frame(self) -> tuple[IconInstance, ...]:
        """Zip placements, styles and scroll-resolved opacity into a frame.

        Returns an empty tuple when the layer is closed, not yet
        measured, or suppressed by the hero rule.
        """
        if not self._active or self.viewport is None:
            return ()

        cfg = self.config
        if is_suppressed(
            self.scroll.offset_y, self.route.is_home, threshold=cfg.hero_threshold,
        ):
            self._note_suppression(True)
            return ()

        placements, styles = self.sequences()
        instances: list[IconInstance] = []
        for i, (placement, style) in enumerate(zip(placements, styles)):
            opacity = resolve_opacity(
                style.base_opacity,
                self.scroll.offset_y,
                self.route.is_home,
                threshold=cfg.hero_threshold,
                fade_distance=cfg.fade_distance,
            )
            instances.append(IconInstance(
                placement=placement,
                style=style,
                opacity=opacity,
                z_order=cfg.z_base + (i % cfg.z_layers),
                key=f"{style.variant}-{i}",
                animation=1 if i % 2 == 0 else 2,
            ))
        self._note_suppression(False)
        return tuple(instances)

    def _note_suppression(self, suppressed: bool) -> None:
        if suppressed != self._was_suppressed:
            logger.debug("icon layer %s", "suppressed" if suppressed else "visible")
            self._was_suppressed = suppressed

    # ---- Lifecycle ----

    def subscribe(self, unsubscribe: Callable[[], object]) -> None:
        """Register a callable that releases one event subscription.

        Raises:
            RuntimeError: If the layer has already been closed.
        """
        if not self._active:
            raise RuntimeError("cannot subscribe to a closed IconLayer")
        self._subscriptions.append(unsubscribe)

    def close(self) -> None:
        """Release all event subscriptions and stop producing frames.

        Safe to call more than once; subscriptions are released only on
        the first call.
        """
        if not self._active:
            return
        self._active = False
        subscriptions, self._subscriptions = self._subscriptions, []
        for unsubscribe in reversed(subscriptions):
            unsubscribe()
        logger.debug("icon layer closed, released %d subscriptions", len(subscriptions))

    def __enter__(self) -> IconLayer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
