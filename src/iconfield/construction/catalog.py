"""Icon style catalog: glyph, colour and stroke for each slot."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np

from iconfield._constants import OPACITY_RANGE, STROKE_WIDTH_RANGE
from iconfield.construction.defaults import DEFAULT_PALETTE, GLYPH_REGISTRY
from iconfield.construction.positions import RandomSource
from iconfield.model import GlyphRef, IconStyle, PaletteEntry


def variant_tag(name: str, cycle: int) -> str:
    """Return the variant tag for *name* on pass *cycle* through the registry.

    The first pass uses the bare lowercase name; later passes append
    ``-{cycle}`` so that tags stay unique within a catalog.
    """
    tag = name.lower()
    return f"{tag}-{cycle}" if cycle > 0 else tag


def generate_icons(
    count: int,
    *,
    rng: RandomSource = None,
    registry: Mapping[str, GlyphRef] = GLYPH_REGISTRY,
    palette: Sequence[PaletteEntry] = DEFAULT_PALETTE,
) -> tuple[IconStyle, ...]:
    """Build *count* icon styles by cycling through *registry* and *palette*.

    Slot ``i`` uses glyph ``i % len(registry)`` and colour
    ``i % len(palette)``.  Baseline opacity and stroke width are sampled
    independently per slot from ``[0.15, 0.35]`` and ``[1.5, 2.5]``.

    Args:
        count: Number of slots.
        rng: A :class:`numpy.random.Generator`, an integer seed, or
            ``None`` for fresh OS entropy.
        registry: Ordered glyph registry.
        palette: Ordered colour palette.

    Returns:
        A tuple of *count* :class:`~iconfield.model.IconStyle` objects,
        or an empty tuple if *count* is not positive.

    Raises:
        ValueError: If *registry* or *palette* is empty.
    """
    if not registry:
        raise ValueError("glyph registry must not be empty")
    if not palette:
        raise ValueError("palette must not be empty")
    if count <= 0:
        return ()

    rng = np.random.default_rng(rng)
    glyphs = list(registry.values())
    opacity = rng.uniform(*OPACITY_RANGE, count)
    stroke = rng.uniform(*STROKE_WIDTH_RANGE, count)

    styles: list[IconStyle] = []
    for i in range(count):
        glyph = glyphs[i % len(glyphs)]
        styles.append(IconStyle(
            glyph=glyph,
            colour=palette[i % len(palette)],
            variant=variant_tag(glyph.name, i // len(glyphs)),
            base_opacity=float(opacity[i]),
            stroke_width=float(stroke[i]),
        ))
    return tuple(styles)
