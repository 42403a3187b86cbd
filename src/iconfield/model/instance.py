from __future__ import annotations

from dataclasses import dataclass

from iconfield.model.icon_style import IconStyle
from iconfield.model.placement import Placement


@dataclass(frozen=True)
class IconInstance:
    """One icon ready for the rendering boundary.

    Produced by zipping ``placements[i]`` with ``styles[i]`` and
    attaching the scroll-resolved opacity.

    Attributes:
        placement: Where and how the icon is transformed.
        style: Glyph, colour and stroke.
        opacity: Effective opacity after scroll-linked fading.
        z_order: Shallow stacking order (``z_base + index % z_layers``).
        key: Stable per-frame key, ``"{variant}-{index}"``.
        animation: Which of the two alternating keyframe sets the icon
            uses (``1`` for even slots, ``2`` for odd slots).
    """

    placement: Placement
    style: IconStyle
    opacity: float
    z_order: int
    key: str
    animation: int
