"""Shared helpers for model dataclasses."""

from __future__ import annotations

import dataclasses

_field_defaults_cache: dict[type, dict] = {}


def _field_defaults(cls: type) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults (not ``MISSING`` and not
    ``default_factory``) are included.  ``LayerConfig.to_dict()``
    compares current values against these so only non-default fields
    are serialised.  Results are cached per class.
    """
    if cls not in _field_defaults_cache:
        _field_defaults_cache[cls] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
        }
    return _field_defaults_cache[cls]


def _check_range(name: str, value: float, bounds: tuple[float, float]) -> None:
    """Raise :class:`ValueError` if *value* lies outside *bounds* (inclusive)."""
    lo, hi = bounds
    if not lo <= value <= hi:
        raise ValueError(f"{name} must be in [{lo}, {hi}], got {value}")
