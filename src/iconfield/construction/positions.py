"""Procedural icon placement on a jittered grid.

Slots are laid out on a grid that is wider than it is tall, each point is
jittered inside its cell, and points that land in the central exclusion
zone are moved out to an edge band so the page content stays clear.
Every slot is independent, so the whole layout is computed with
vectorised numpy operations.
"""

from __future__ import annotations

import math

import numpy as np

from iconfield._constants import (
    CELL_JITTER,
    DELAY_RANGE,
    EDGE_BANDS,
    EXCLUSION_RADIUS_FRACTION,
    GRID_COLUMN_FACTOR,
    POSITION_CLAMP,
    ROTATION_RANGE,
    SCALE_RANGE,
)
from iconfield.model import ExclusionMode, Placement

RandomSource = np.random.Generator | int | None
"""Anything accepted by :func:`numpy.random.default_rng`."""


def grid_shape(count: int) -> tuple[int, int]:
    """Return ``(columns, rows)`` for a layout of *count* slots.

    Both values are at least 1, so a grid always has a cell to place
    into even for ``count <= 1``.
    """
    columns = max(1, math.ceil(math.sqrt(max(count, 0)) * GRID_COLUMN_FACTOR))
    rows = max(1, math.ceil(count / columns))
    return columns, rows


def exclusion_mask(
    x: np.ndarray,
    y: np.ndarray,
    width: float,
    height: float,
    mode: ExclusionMode = ExclusionMode.CIRCULAR,
) -> np.ndarray:
    """Return a boolean mask of points inside the central exclusion zone.

    Args:
        x: Horizontal positions in percent of *width*.
        y: Vertical positions in percent of *height*.
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        mode: How distance to the centre is measured.  See
            :class:`~iconfield.model.ExclusionMode`.

    Returns:
        Boolean array, ``True`` where the point is too close to the
        centre.
    """
    dx = np.asarray(x, dtype=float) - 50.0
    dy = np.asarray(y, dtype=float) - 50.0
    if ExclusionMode(mode) is ExclusionMode.PERCENT:
        return np.hypot(dx, dy) < EXCLUSION_RADIUS_FRACTION * 100.0
    radius_px = EXCLUSION_RADIUS_FRACTION * min(width, height)
    return np.hypot(dx * width / 100.0, dy * height / 100.0) < radius_px


def _edge_points(rng: np.random.Generator, n: int) -> np.ndarray:
    """Draw *n* values, each from the low or the high edge band."""
    (low_lo, low_hi), (high_lo, high_hi) = EDGE_BANDS
    use_low = rng.random(n) < 0.5
    low = rng.uniform(low_lo, low_hi, n)
    high = rng.uniform(high_lo, high_hi, n)
    return np.where(use_low, low, high)


def generate_positions(
    count: int,
    width: float,
    height: float,
    *,
    rng: RandomSource = None,
    exclusion: ExclusionMode = ExclusionMode.CIRCULAR,
) -> tuple[Placement, ...]:
    """Distribute *count* icon placements across a viewport.

    Slot ``i`` sits in grid cell ``(i // columns, i % columns)``, with
    its point drawn uniformly from the central 80% of the cell and
    clamped to ``[2, 98]`` percent.  Points inside the exclusion zone
    (radius 15% of the shorter viewport side) are replaced by an
    edge-biased point whose coordinates are each drawn from ``[2, 12]``
    or ``[88, 98]``.  Scale, rotation and delay are sampled for every
    slot regardless of which branch produced its coordinates.

    Example usage::

        rng = np.random.default_rng(7)
        placements = generate_positions(54, 1200, 800, rng=rng)

    Args:
        count: Number of slots.
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        rng: A :class:`numpy.random.Generator`, an integer seed, or
            ``None`` for fresh OS entropy.
        exclusion: How the exclusion zone is measured.

    Returns:
        A tuple of *count* :class:`~iconfield.model.Placement` objects
        in slot order, or an empty tuple if *count*, *width* or
        *height* is not positive.
    """
    if count <= 0 or width <= 0 or height <= 0:
        return ()

    rng = np.random.default_rng(rng)
    columns, rows = grid_shape(count)

    slots = np.arange(count)
    row = slots // columns
    col = slots % columns

    jitter = rng.uniform(*CELL_JITTER, size=(count, 2))
    lo, hi = POSITION_CLAMP
    x = np.clip((col + jitter[:, 0]) / columns * 100.0, lo, hi)
    y = np.clip((row + jitter[:, 1]) / rows * 100.0, lo, hi)

    excluded = exclusion_mask(x, y, width, height, exclusion)
    x = np.where(excluded, _edge_points(rng, count), x)
    y = np.where(excluded, _edge_points(rng, count), y)

    scale = rng.uniform(*SCALE_RANGE, count)
    rotation = rng.uniform(*ROTATION_RANGE, count)
    delay = rng.uniform(*DELAY_RANGE, count)

    return tuple(
        Placement(
            x=float(x[i]),
            y=float(y[i]),
            scale=float(scale[i]),
            rotation=float(rotation[i]),
            delay=float(delay[i]),
        )
        for i in range(count)
    )
