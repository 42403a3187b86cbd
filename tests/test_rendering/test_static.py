"""Tests for the static matplotlib renderer."""

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from iconfield.construction.config import LayerConfig
from iconfield.rendering.layer import IconLayer
from iconfield.rendering.static import draw_icons, render_mpl


@pytest.fixture
def layer():
    layer = IconLayer(LayerConfig(seed=21))
    layer.on_resize(1200, 800)
    layer.on_route_change("/about")
    return layer


class TestDrawIcons:
    def test_one_line_per_icon(self, layer):
        fig, ax = plt.subplots()
        frame = layer.frame()
        draw_icons(ax, frame)
        assert len(ax.lines) == len(frame) == 54
        plt.close(fig)

    def test_redraw_replaces_lines(self, layer):
        fig, ax = plt.subplots()
        draw_icons(ax, layer.frame())
        draw_icons(ax, layer.frame()[:10])
        assert len(ax.lines) == 10
        plt.close(fig)

    def test_line_properties(self, layer):
        fig, ax = plt.subplots(dpi=72)
        inst = layer.frame()[0]
        draw_icons(ax, [inst], icon_size=32.0)
        (line,) = ax.lines
        assert line.get_xdata()[0] == inst.placement.x
        assert line.get_ydata()[0] == inst.placement.y
        assert line.get_alpha() == pytest.approx(inst.opacity)
        assert line.get_zorder() == inst.z_order
        assert line.get_markersize() == pytest.approx(32.0 * inst.placement.scale)
        assert line.get_markeredgewidth() == pytest.approx(inst.style.stroke_width)
        plt.close(fig)

    def test_y_axis_points_down(self, layer):
        fig, ax = plt.subplots()
        draw_icons(ax, layer.frame())
        assert ax.get_ylim() == (100.0, 0.0)
        assert ax.get_xlim() == (0.0, 100.0)
        plt.close(fig)


class TestRenderMpl:
    def test_saves_file(self, layer, tmp_path):
        out = tmp_path / "icons.png"
        fig = render_mpl(layer, out)
        assert isinstance(fig, Figure)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_figure_matches_viewport(self, layer):
        fig = render_mpl(layer, show=False, dpi=100)
        assert tuple(fig.get_size_inches()) == pytest.approx((12.0, 8.0))

    def test_accepts_instance_sequence(self, layer):
        fig = render_mpl(list(layer.frame()[:5]), show=False)
        assert len(fig.axes[0].lines) == 5

    def test_degenerate_viewport_saves_empty_figure(self, layer, tmp_path):
        layer.on_resize(0, 800)
        out = tmp_path / "empty.png"
        fig = render_mpl(layer, out)
        assert out.stat().st_size > 0
        assert len(fig.axes[0].lines) == 0
        assert tuple(fig.get_size_inches()) == pytest.approx((12.0, 8.0))

    def test_suppressed_layer_draws_nothing(self, layer):
        layer.on_route_change("/")
        fig = render_mpl(layer, show=False)
        assert len(fig.axes[0].lines) == 0

    def test_into_existing_axes(self, layer):
        fig, ax = plt.subplots()
        returned = render_mpl(layer, ax=ax)
        assert returned is fig
        assert len(ax.lines) == 54
        plt.close(fig)
