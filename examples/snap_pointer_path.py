"""Example: snap a freehand pointer path to both grid types and measure it."""

from sacredgrid import GeometryCache, GridConfig, GridEngine
from sacredgrid.measurement import format_angle, format_distance, measure_path, total_length
from sacredgrid.units import pixels_to_units

PATH = [(3.0, 2.0), (38.0, 0.5), (57.0, 31.0), (41.0, 44.0), (120.0, -7.0)]


def main() -> None:
    cache = GeometryCache()
    for grid_type in ("hex", "diamond"):
        config = GridConfig(grid_type=grid_type, unit="cm", scale=1.0)
        engine = GridEngine(config, cache=cache)

        committed = []
        for raw in PATH:
            result = engine.pointer(raw)
            committed.append(result.point)
            status = "snapped" if result.snap.snapped else "free"
            print(
                f"[{grid_type}] {raw} -> ({result.point.x:.3f}, {result.point.y:.3f}) "
                f"{status}, {len(result.guides)} guide(s)"
            )

        for segment in measure_path(committed):
            length = pixels_to_units(segment.distance, config.unit)
            print(f"  segment {format_distance(length, config.unit)} at {format_angle(segment.angle)}")
        total = pixels_to_units(total_length(committed), config.unit)
        print(f"  total {format_distance(total, config.unit)}")

    print(f"Cached feature sources: {len(cache)}")


if __name__ == "__main__":
    main()
