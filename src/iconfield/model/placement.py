from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from iconfield._constants import (
    DELAY_RANGE,
    POSITION_CLAMP,
    ROTATION_RANGE,
    SCALE_RANGE,
)
from iconfield.model._util import _check_range


class ExclusionMode(StrEnum):
    """How the central exclusion zone is measured.

    Attributes:
        CIRCULAR: Distance from the viewport centre is measured in
            pixels and compared with a radius of 15% of the shorter
            viewport side.  The zone is a true circle for any aspect
            ratio.
        PERCENT: Distance is measured in percent of each full
            dimension and compared with 15.  The zone is an ellipse
            stretched along the longer side of a non-square viewport.
    """

    CIRCULAR = "circular"
    PERCENT = "percent"


@dataclass(frozen=True)
class Placement:
    """Position and transform for one decorative icon slot.

    Placements are produced in bulk by
    :func:`~iconfield.construction.positions.generate_positions` and
    never modified afterwards; a viewport change produces a new
    sequence.

    Attributes:
        x: Horizontal position in percent of the viewport width,
            measured from the left edge.
        y: Vertical position in percent of the viewport height,
            measured from the top edge.
        scale: Size multiplier applied to the base icon size.
        rotation: Clockwise rotation in degrees.
        delay: Animation start delay in seconds.

    Raises:
        ValueError: If any field lies outside its permitted range.
    """

    x: float
    y: float
    scale: float = 1.0
    rotation: float = 0.0
    delay: float = 0.0

    def __post_init__(self) -> None:
        _check_range("x", self.x, POSITION_CLAMP)
        _check_range("y", self.y, POSITION_CLAMP)
        _check_range("scale", self.scale, SCALE_RANGE)
        _check_range("rotation", self.rotation, ROTATION_RANGE)
        _check_range("delay", self.delay, DELAY_RANGE)
