"""Example: generate Flower of Life primitives for a panned and zoomed canvas."""

from sacredgrid import GridConfig, GridEngine, ViewportBounds


def main() -> None:
    config = GridConfig(grid_type="hex", unit="cm").with_scale(1.25)
    engine = GridEngine(config)

    # canvas element 1280x800 panned 200px right and 120px down
    viewport = ViewportBounds.from_view(200.0, 120.0, config.scale, 1280.0, 800.0)
    primitives = engine.primitives(viewport)

    print(f"Viewport: {viewport}")
    print(f"Radius: {engine.radius:.3f}")
    print(f"Circles: {len(primitives.circles)}")
    print(f"Intersection points: {len(primitives.intersections)}")
    for point in primitives.intersections[:6]:
        print(f"  ({point.x:.3f}, {point.y:.3f})")


if __name__ == "__main__":
    main()
