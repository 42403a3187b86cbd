"""Scroll-linked visibility: hero suppression and fade-in."""

from __future__ import annotations

from enum import StrEnum

from iconfield._constants import FADE_DISTANCE, HERO_THRESHOLD


class LayerVisibility(StrEnum):
    """Layer-level visibility states that are not a plain opacity.

    Attributes:
        SUPPRESSED: The whole icon layer must not be rendered at all.
            This is distinct from an opacity of ``0``: a suppressed
            layer emits no icons.
    """

    SUPPRESSED = "suppressed"


def is_suppressed(
    scroll_y: float,
    is_home: bool,
    *,
    threshold: float = HERO_THRESHOLD,
) -> bool:
    """Return ``True`` if the hero section hides the layer entirely."""
    return is_home and max(0.0, scroll_y) < threshold


def fade_progress(
    scroll_y: float,
    *,
    threshold: float = HERO_THRESHOLD,
    fade_distance: float = FADE_DISTANCE,
) -> float:
    """Return fade-in progress in ``[0, 1]`` for a scroll offset."""
    progress = (max(0.0, scroll_y) - threshold) / fade_distance
    return min(1.0, max(0.0, progress))


def resolve_opacity(
    base_opacity: float,
    scroll_y: float,
    is_home: bool,
    *,
    threshold: float = HERO_THRESHOLD,
    fade_distance: float = FADE_DISTANCE,
) -> float | LayerVisibility:
    """Resolve the effective opacity of an icon.

    Off the home route decoration is always fully present and
    *base_opacity* is returned unchanged.  On the home route the layer
    is suppressed below *threshold*; from *threshold* onwards opacity
    ramps linearly from ``0`` to *base_opacity* over *fade_distance*
    pixels.  Negative scroll offsets are treated as ``0``.

    Example::

        resolve_opacity(0.3, 0, True)      # LayerVisibility.SUPPRESSED
        resolve_opacity(0.3, 800, True)    # 0.15
        resolve_opacity(0.3, 100, False)   # 0.3

    Returns:
        The effective opacity, or :attr:`LayerVisibility.SUPPRESSED`.
    """
    if not is_home:
        return base_opacity
    if is_suppressed(scroll_y, is_home, threshold=threshold):
        return LayerVisibility.SUPPRESSED
    return base_opacity * fade_progress(
        scroll_y, threshold=threshold, fade_distance=fade_distance,
    )
