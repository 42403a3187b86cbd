"""Tests for wiring a matplotlib canvas to an IconLayer."""

import matplotlib.pyplot as plt
import pytest
from matplotlib.backend_bases import CloseEvent, MouseEvent, ResizeEvent

from iconfield.construction.config import LayerConfig
from iconfield.rendering.interactive import _SCROLL_STEP_PX, bind_canvas
from iconfield.rendering.layer import IconLayer


@pytest.fixture
def fig():
    fig = plt.figure(dpi=100)
    yield fig
    plt.close(fig)


def _resize(fig, width_in, height_in):
    fig.set_size_inches(width_in, height_in)
    ResizeEvent("resize_event", fig.canvas)._process()


def _scroll(fig, step):
    MouseEvent("scroll_event", fig.canvas, 0, 0, step=step)._process()


def _close(fig):
    CloseEvent("close_event", fig.canvas)._process()


class TestBindCanvas:
    def test_resize_measures_layer(self, fig):
        layer = IconLayer(LayerConfig(seed=2))
        bind_canvas(fig.canvas, layer)
        _resize(fig, 9, 7)
        assert layer.viewport.width == 900
        assert layer.viewport.height == 700
        assert layer.icon_count == 40

    def test_scroll_down_increases_offset(self, fig):
        layer = IconLayer()
        bind_canvas(fig.canvas, layer)
        _scroll(fig, -2)
        assert layer.scroll.offset_y == 2 * _SCROLL_STEP_PX

    def test_scroll_up_clamped_at_top(self, fig):
        layer = IconLayer()
        bind_canvas(fig.canvas, layer)
        _scroll(fig, 3)
        assert layer.scroll.offset_y == 0.0

    def test_on_change_called(self, fig):
        calls = []
        layer = IconLayer()
        bind_canvas(fig.canvas, layer, on_change=lambda: calls.append(1))
        _resize(fig, 12, 8)
        _scroll(fig, -1)
        assert len(calls) == 2

    def test_close_event_tears_down(self, fig):
        calls = []
        layer = IconLayer()
        bind_canvas(fig.canvas, layer, on_change=lambda: calls.append(1))
        _close(fig)
        assert not layer.active
        _scroll(fig, -1)
        _resize(fig, 1, 1)
        assert calls == []
        assert layer.viewport is None
        assert layer.scroll.offset_y == 0.0

    def test_layer_close_disconnects(self, fig):
        layer = IconLayer()
        cids = bind_canvas(fig.canvas, layer)
        assert len(cids) == 3
        layer.close()
        _scroll(fig, -5)
        assert layer.scroll.offset_y == 0.0
