"""Layout construction: placements, icon catalog, defaults, and config."""

from iconfield.construction.catalog import generate_icons, variant_tag
from iconfield.construction.config import (
    DEFAULT_BREAKPOINTS,
    LayerConfig,
    load_config,
    save_config,
)
from iconfield.construction.defaults import DEFAULT_PALETTE, GLYPH_REGISTRY
from iconfield.construction.positions import (
    exclusion_mask,
    generate_positions,
    grid_shape,
)

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "DEFAULT_PALETTE",
    "GLYPH_REGISTRY",
    "LayerConfig",
    "exclusion_mask",
    "generate_icons",
    "generate_positions",
    "grid_shape",
    "load_config",
    "save_config",
    "variant_tag",
]
