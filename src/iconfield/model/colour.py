from __future__ import annotations

from dataclasses import dataclass

#: A colour specification accepted throughout iconfield.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"pink"``, ``"#f4a6c0"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``
#:   (e.g. ``(1.0, 0.8, 0.85)``).
#:
#: See :func:`normalise_colour` for conversion to a normalised RGB tuple.
Colour = str | float | tuple[float, float, float] | list[float]


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to a normalised (r, g, b) tuple.

    Accepts CSS colour names (e.g. ``"pink"``), hex strings
    (e.g. ``"#F4A6C0"``), grey floats (e.g. ``0.7``), or RGB tuples
    (e.g. ``(1.0, 0.3, 0.3)``).

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return (f, f, f)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (float(c) for c in colour)
        for name, val in [("r", r), ("g", g), ("b", b)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )
        return (r, g, b)

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


@dataclass(frozen=True)
class PaletteEntry:
    """A themed colour token.

    The layout engine treats *token* as opaque: it only selects entries
    by index.  *colour* is what the matplotlib renderer actually paints.

    Attributes:
        token: Theme token name (e.g. ``"baby-pink-primary"``).
        colour: Colour specification.  See :data:`Colour`.
    """

    token: str
    colour: Colour

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token must be a non-empty string")
        normalise_colour(self.colour)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """The entry's colour as a normalised ``(r, g, b)`` tuple."""
        return normalise_colour(self.colour)
