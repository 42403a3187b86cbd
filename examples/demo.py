"""Demo script: lay out a desktop icon field and render it with matplotlib."""

from pathlib import Path

from iconfield import IconLayer, LayerConfig, render_mpl

OUTPUT = Path(__file__).resolve().parent / "icons.png"


def main():
    layer = IconLayer(LayerConfig(seed=42))
    layer.on_resize(1200, 800)
    layer.on_route_change("/")

    for scroll in (0, 650, 800, 950):
        layer.on_scroll(scroll)
        frame = layer.frame()
        if frame:
            mean = sum(icon.opacity for icon in frame) / len(frame)
            print(f"scroll={scroll}: {len(frame)} icons, mean opacity {mean:.3f}")
        else:
            print(f"scroll={scroll}: suppressed")

    placements, styles = layer.sequences()
    print(f"Variants: {[s.variant for s in styles[:5]]} ...")
    print(f"First placement: {placements[0]}")

    render_mpl(layer, output=OUTPUT, show=False)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
