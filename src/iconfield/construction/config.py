"""Layer configuration and its JSON save/load."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from iconfield._constants import FADE_DISTANCE, FALLBACK_ICON_COUNT, HERO_THRESHOLD
from iconfield.model import HOME_PATH, ExclusionMode
from iconfield.model._util import _field_defaults

DEFAULT_BREAKPOINTS: tuple[tuple[int, int], ...] = ((1024, 54), (768, 40))
"""``(min_width, icon_count)`` tiers, widest first."""


@dataclass(frozen=True)
class LayerConfig:
    """Tunable parameters of an :class:`~iconfield.rendering.layer.IconLayer`.

    A default ``LayerConfig()`` reproduces the standard layout: 54 icons
    on desktop, 40 on tablet, 30 on mobile, hidden on the home route
    until the page has scrolled past the hero section.

    Attributes:
        breakpoints: ``(min_width, icon_count)`` pairs in strictly
            descending order of *min_width*.  A viewport at least
            *min_width* pixels wide gets *icon_count* icons; the first
            matching tier wins.
        fallback_count: Icon count for viewports narrower than every
            breakpoint.
        hero_threshold: Scroll offset (pixels) below which the layer is
            suppressed on the home route.
        fade_distance: Length (pixels) of the linear fade-in ramp that
            starts at *hero_threshold*.
        z_base: Lowest stacking order assigned to an icon.
        z_layers: Number of distinct stacking orders cycled through.
        icon_size: Base icon size in pixels before placement scaling.
        seed: Seed for the layer's random source, or ``None`` for fresh
            OS entropy.
        exclusion: How the central exclusion zone is measured.
        home_path: Route path on which hero suppression applies.
    """

    breakpoints: tuple[tuple[int, int], ...] = DEFAULT_BREAKPOINTS
    fallback_count: int = FALLBACK_ICON_COUNT
    hero_threshold: float = HERO_THRESHOLD
    fade_distance: float = FADE_DISTANCE
    z_base: int = 500
    z_layers: int = 20
    icon_size: float = 32.0
    seed: int | None = None
    exclusion: ExclusionMode = ExclusionMode.CIRCULAR
    home_path: str = HOME_PATH

    def __post_init__(self) -> None:
        widths = [w for w, _ in self.breakpoints]
        if any(a <= b for a, b in zip(widths, widths[1:])):
            raise ValueError(
                "breakpoints must be in strictly descending order of "
                f"min_width, got {list(self.breakpoints)}"
            )
        if any(n < 0 for _, n in self.breakpoints):
            raise ValueError(
                f"breakpoint icon counts must be non-negative, "
                f"got {list(self.breakpoints)}"
            )
        if self.fallback_count < 0:
            raise ValueError(
                f"fallback_count must be non-negative, got {self.fallback_count}"
            )
        if self.hero_threshold < 0:
            raise ValueError(
                f"hero_threshold must be non-negative, got {self.hero_threshold}"
            )
        if self.fade_distance <= 0:
            raise ValueError(
                f"fade_distance must be positive, got {self.fade_distance}"
            )
        if self.z_layers < 1:
            raise ValueError(f"z_layers must be at least 1, got {self.z_layers}")
        if self.icon_size <= 0:
            raise ValueError(f"icon_size must be positive, got {self.icon_size}")
        object.__setattr__(self, "exclusion", ExclusionMode(self.exclusion))

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        for key, default in defaults.items():
            value = getattr(self, key)
            if value == default:
                continue
            if key == "breakpoints":
                value = [list(tier) for tier in value]
            elif key == "exclusion":
                value = str(value)
            d[key] = value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> LayerConfig:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not
                ``LayerConfig`` fields.
        """
        known = _field_defaults(cls)
        unknown = set(d) - set(known)
        if unknown:
            raise ValueError(
                f"unknown keys in layer config: {sorted(unknown)}"
            )
        kwargs = dict(d)
        if "breakpoints" in kwargs:
            kwargs["breakpoints"] = tuple(
                (int(w), int(n)) for w, n in kwargs["breakpoints"]
            )
        if "exclusion" in kwargs:
            kwargs["exclusion"] = ExclusionMode(kwargs["exclusion"])
        return cls(**kwargs)


def save_config(path: str | Path, config: LayerConfig) -> None:
    """Save a layer configuration to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.
    """
    Path(path).write_text(json.dumps(config.to_dict(), indent=2) + "\n")


def load_config(path: str | Path) -> LayerConfig:
    """Load a layer configuration from a JSON file.

    Missing fields take their defaults.

    Raises:
        ValueError: If the file contains unknown keys or invalid values.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"layer config must be a JSON object, got {type(data).__name__}"
        )
    return LayerConfig.from_dict(data)
