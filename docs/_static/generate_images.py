"""Generate static images for the documentation."""

from pathlib import Path

from iconfield import ExclusionMode, IconLayer, LayerConfig, render_mpl

OUT = Path(__file__).resolve().parent


def layer_at(
    width: float,
    height: float,
    *,
    path: str = "/about",
    scroll: float = 0.0,
    seed: int = 7,
    exclusion: ExclusionMode = ExclusionMode.CIRCULAR,
) -> IconLayer:
    """Build a measured layer for a given viewport and page state."""
    layer = IconLayer(LayerConfig(seed=seed, exclusion=exclusion))
    layer.on_resize(width, height)
    layer.on_route_change(path)
    layer.on_scroll(scroll)
    return layer


def generate_docs_images() -> None:
    """Render every figure used by the documentation."""
    render_mpl(layer_at(1200, 800), OUT / "desktop.svg", show=False)
    render_mpl(layer_at(820, 1000), OUT / "tablet.svg", show=False)
    render_mpl(layer_at(390, 844), OUT / "mobile.svg", show=False)

    # Home route, part way through the fade-in ramp.
    render_mpl(
        layer_at(1200, 800, path="/", scroll=800), OUT / "fade_half.svg",
        show=False,
    )

    # Exclusion geometry on a wide viewport.
    for mode in ExclusionMode:
        render_mpl(
            layer_at(1600, 600, exclusion=mode),
            OUT / f"exclusion_{mode.value}.svg",
            show=False,
        )


if __name__ == "__main__":
    generate_docs_images()
