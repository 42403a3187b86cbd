"""Tests for the IconLayer presentation loop."""

import logging

import pytest

from iconfield.construction.config import LayerConfig
from iconfield.rendering.layer import IconLayer, icon_count_for_width


def _layer(width=1200, height=800, path="/about", scroll=0.0, **cfg):
    layer = IconLayer(LayerConfig(seed=11, **cfg))
    layer.on_resize(width, height)
    layer.on_route_change(path)
    layer.on_scroll(scroll)
    return layer


class TestIconCountForWidth:
    @pytest.mark.parametrize("width, expected", [
        (1920, 54),
        (1200, 54),
        (1024, 54),
        (1023, 40),
        (800, 40),
        (768, 40),
        (767, 30),
        (500, 30),
        (0, 30),
    ])
    def test_default_breakpoints(self, width, expected):
        assert icon_count_for_width(width) == expected

    def test_custom_breakpoints(self):
        tiers = ((2000, 100),)
        assert icon_count_for_width(2500, tiers, 5) == 100
        assert icon_count_for_width(1999, tiers, 5) == 5


class TestMeasurement:
    def test_nothing_before_first_resize(self):
        layer = IconLayer(LayerConfig(seed=1))
        layer.on_route_change("/about")
        assert not layer.measured
        assert layer.icon_count == 0
        assert layer.sequences() == ((), ())
        assert layer.frame() == ()

    def test_frame_after_resize(self):
        layer = _layer()
        assert layer.measured
        assert len(layer.frame()) == 54

    def test_degenerate_viewport_gives_empty_frame(self):
        layer = _layer(width=0, height=800)
        assert layer.frame() == ()


class TestMemoisation:
    def test_same_key_returns_same_objects(self):
        layer = _layer()
        placements, styles = layer.sequences()
        layer.on_scroll(400)
        layer.on_resize(1200, 800)
        again_p, again_s = layer.sequences()
        assert again_p is placements
        assert again_s is styles

    def test_scroll_does_not_regenerate(self):
        layer = _layer(path="/")
        first = layer.sequences()
        for offset in range(0, 2000, 50):
            layer.on_scroll(offset)
            layer.frame()
        assert layer.sequences()[0] is first[0]

    def test_height_change_regenerates(self):
        layer = _layer()
        placements, styles = layer.sequences()
        layer.on_resize(1200, 900)
        new_p, new_s = layer.sequences()
        assert new_p is not placements
        assert new_s is not styles
        assert len(new_p) == len(new_s) == 54

    def test_tier_change_regenerates_with_new_count(self):
        layer = _layer()
        layer.on_resize(800, 800)
        placements, styles = layer.sequences()
        assert len(placements) == len(styles) == 40

    def test_same_seed_same_frames(self):
        assert _layer().frame() == _layer().frame()


class TestFrame:
    def test_zip_and_attributes(self):
        layer = _layer()
        placements, styles = layer.sequences()
        frame = layer.frame()
        for i, inst in enumerate(frame):
            assert inst.placement is placements[i]
            assert inst.style is styles[i]
            assert inst.z_order == 500 + (i % 20)
            assert inst.key == f"{styles[i].variant}-{i}"
            assert inst.animation == (1 if i % 2 == 0 else 2)

    def test_non_home_uses_base_opacity(self):
        for inst in _layer(scroll=0).frame():
            assert inst.opacity == inst.style.base_opacity

    def test_home_hero_suppresses_whole_layer(self):
        assert _layer(path="/", scroll=100).frame() == ()

    def test_home_at_threshold_renders_transparent(self):
        frame = _layer(path="/", scroll=650).frame()
        assert len(frame) == 54
        assert all(inst.opacity == 0.0 for inst in frame)

    def test_desktop_home_scrolled_scenario(self):
        frame = _layer(1200, 800, path="/", scroll=900).frame()
        assert len(frame) == 54
        for inst in frame:
            assert inst.opacity == pytest.approx(
                inst.style.base_opacity * (250 / 300)
            )

    def test_route_change_toggles_suppression(self):
        layer = _layer(path="/", scroll=0)
        assert layer.frame() == ()
        layer.on_route_change("/pricing")
        assert len(layer.frame()) == 54

    def test_custom_z_layers(self):
        frame = _layer(z_base=10, z_layers=3).frame()
        assert [inst.z_order for inst in frame[:6]] == [10, 11, 12, 10, 11, 12]

    def test_regeneration_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="iconfield.rendering.layer"):
            _layer().frame()
        assert "regenerated 54 icons" in caplog.text

    def test_empty_layer_in_hero_logged_as_suppressed(self, caplog):
        layer = _layer(500, 800, path="/", scroll=0, fallback_count=0)
        with caplog.at_level(logging.DEBUG, logger="iconfield.rendering.layer"):
            assert layer.frame() == ()
        assert "icon layer suppressed" in caplog.text
        assert "icon layer visible" not in caplog.text

    def test_suppressed_frame_skips_generation(self, caplog):
        layer = _layer(path="/", scroll=0)
        with caplog.at_level(logging.DEBUG, logger="iconfield.rendering.layer"):
            layer.frame()
        assert "regenerated" not in caplog.text


class TestLifecycle:
    def test_close_releases_subscriptions_once(self):
        released = []
        layer = _layer()
        layer.subscribe(lambda: released.append("a"))
        layer.subscribe(lambda: released.append("b"))
        layer.close()
        layer.close()
        assert released == ["b", "a"]
        assert not layer.active

    def test_closed_layer_renders_nothing(self):
        layer = _layer()
        layer.close()
        assert layer.frame() == ()

    def test_subscribe_after_close_raises(self):
        layer = _layer()
        layer.close()
        with pytest.raises(RuntimeError, match="closed"):
            layer.subscribe(lambda: None)

    def test_context_manager_closes(self):
        released = []
        with _layer() as layer:
            layer.subscribe(lambda: released.append(True))
            assert len(layer.frame()) == 54
        assert released == [True]
        assert not layer.active
