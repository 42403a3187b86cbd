"""Shared constants used across the construction and rendering layers."""

POSITION_CLAMP: tuple[float, float] = (2.0, 98.0)
"""Allowed range for placement coordinates, in percent of the viewport."""

CELL_JITTER: tuple[float, float] = (0.1, 0.9)
"""Fraction of a grid cell within which a jittered point may fall."""

GRID_COLUMN_FACTOR: float = 1.5
"""Column count is ``ceil(sqrt(count) * GRID_COLUMN_FACTOR)``."""

EXCLUSION_RADIUS_FRACTION: float = 0.15
"""Central exclusion radius as a fraction of the shorter viewport side."""

EDGE_BANDS: tuple[tuple[float, float], tuple[float, float]] = (
    (2.0, 12.0),
    (88.0, 98.0),
)
"""Low and high edge bands (percent) used for displaced points."""

SCALE_RANGE: tuple[float, float] = (0.7, 1.3)
ROTATION_RANGE: tuple[float, float] = (-20.0, 20.0)
DELAY_RANGE: tuple[float, float] = (0.0, 2.0)

OPACITY_RANGE: tuple[float, float] = (0.15, 0.35)
"""Baseline opacity range for catalog entries."""

STROKE_WIDTH_RANGE: tuple[float, float] = (1.5, 2.5)

FALLBACK_ICON_COUNT: int = 30
"""Icon count for viewports narrower than every breakpoint."""

HERO_THRESHOLD: float = 650.0
"""Scroll offset (pixels) below which the home-route layer is suppressed."""

FADE_DISTANCE: float = 300.0
"""Length (pixels) of the fade-in ramp starting at the hero threshold."""
