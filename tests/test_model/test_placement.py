"""Tests for Placement validation and serialisation."""

import pytest

from iconfield.model import Placement


class TestPlacementValidation:
    def test_defaults(self):
        p = Placement(x=50.0, y=50.0)
        assert (p.scale, p.rotation, p.delay) == (1.0, 0.0, 0.0)

    def test_bounds_are_inclusive(self):
        Placement(x=2.0, y=98.0, scale=0.7, rotation=-20.0, delay=2.0)
        Placement(x=98.0, y=2.0, scale=1.3, rotation=20.0, delay=0.0)

    @pytest.mark.parametrize("field, value", [
        ("x", 1.9),
        ("y", 98.1),
        ("scale", 0.5),
        ("rotation", 25.0),
        ("delay", -0.1),
    ])
    def test_out_of_range_raises(self, field, value):
        kwargs = dict(x=50.0, y=50.0, scale=1.0, rotation=0.0, delay=0.0)
        kwargs[field] = value
        with pytest.raises(ValueError, match=field):
            Placement(**kwargs)

    def test_frozen(self):
        p = Placement(x=50.0, y=50.0)
        with pytest.raises(AttributeError):
            p.x = 10.0  # type: ignore[misc]
