"""
polycross Example: Polygon Overlap

1. Intersect two segments
2. Scan two overlapping squares for edge crossings
3. Intersect rotated copies of a regular polygon
4. Plot the result
"""

from polycross import (
    LayerConfig, find_all_intersections, find_intersection, find_layer_intersections,
    layer_polygons, unflatten_points,
)
from polycross.core.visualization import plot_intersections


def main():
    print("=" * 60)
    print("polycross Example: Polygon Overlap")
    print("=" * 60)

    print("\n[1] Segment pair...")
    p = find_intersection((0, 0), (2, 2), (0, 2), (2, 0))
    print(f"  diagonals of the 2x2 square cross at {p}")
    print(f"  parallel segments: {find_intersection((0, 0), (1, 0), (0, 1), (1, 1))}")

    print("\n[2] Offset unit squares...")
    square = [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
    offset = [0.5, 0.5, 1.5, 0.5, 1.5, 1.5, 0.5, 1.5]
    flat = find_all_intersections(square, offset)
    for q in unflatten_points(flat):
        print(f"  crossing at ({q.x:.3f}, {q.y:.3f})")

    print("\n[3] Rotated copies of a pentagon...")
    cfg = LayerConfig(segments=5, radius=100.0, copies=3, angle_deg=20.0, step_scale=0.9)
    pts = find_layer_intersections(cfg)
    print(f"  {len(pts)} merged intersection(s) across {cfg.copies} copies")

    print("\n[4] Plotting...")
    polys = layer_polygons(cfg)
    out = plot_intersections(polys[0], polys[1], find_all_intersections(polys[0], polys[1]),
                             outname='layer_overlap.png')
    print(f"  wrote {out}")


if __name__ == '__main__':
    main()
