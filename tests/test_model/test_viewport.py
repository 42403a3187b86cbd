"""Tests for viewport, scroll and route state."""

from iconfield.model import RouteContext, ScrollState, ViewportState


class TestViewportState:
    def test_degenerate(self):
        assert ViewportState(0, 800).is_degenerate
        assert ViewportState(1200, -1).is_degenerate
        assert not ViewportState(1200, 800).is_degenerate


class TestScrollState:
    def test_default_is_top(self):
        assert ScrollState().offset_y == 0.0

    def test_negative_offset_clamped(self):
        assert ScrollState(offset_y=-40.0).offset_y == 0.0

    def test_positive_offset_kept(self):
        assert ScrollState(offset_y=900.0).offset_y == 900.0


class TestRouteContext:
    def test_root_is_home(self):
        assert RouteContext.from_path("/").is_home

    def test_other_path_is_not_home(self):
        route = RouteContext.from_path("/pricing")
        assert not route.is_home
        assert route.path == "/pricing"

    def test_none_treated_as_home(self):
        route = RouteContext.from_path(None)
        assert route.is_home
        assert route.path == "/"

    def test_custom_home_path(self):
        assert RouteContext.from_path("/en", home_path="/en").is_home
        assert not RouteContext.from_path("/", home_path="/en").is_home
