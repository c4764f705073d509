# examples/main.py
from __future__ import annotations

from math import sqrt

from brush3d.brush import Brush
from brush3d.geom import EPS, Pt, Plane
from brush3d.pipeline import build_brush, hull_points


def write_wire_obj(path: str, pts, edges) -> None:
    """
    OBJ лише з лініями (l i j) — каркас brush'а для перегляду в MeshLab/Blender.
    """
    lines = []
    for p in pts:
        lines.append(f"v {p.x} {p.y} {p.z}")
    # OBJ індексує з 1
    for (a, b) in edges:
        lines.append(f"l {a + 1} {b + 1}")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))


def main():
    # --- 1) Вхідні дані ---
    # куб зі зрізаним кутом (+,+,+) діагональною площиною
    c = 1.0 / sqrt(3.0)
    planes = [
        Plane(Pt(1, 0, 0), 0.5),
        Plane(Pt(0, 1, 0), 0.5),
        Plane(Pt(0, 0, 1), 0.5),
        Plane(Pt(-1, 0, 0), 0.5),
        Plane(Pt(0, -1, 0), 0.5),
        Plane(Pt(0, 0, -1), 0.5),
        Plane(Pt(c, c, c), 0.5),
    ]

    # --- 2) Пайплайн: вершини + ребра + буфер ---
    # діагональна площина -> точний тест належності губить вершини, тому eps
    pts, edges, mesh = build_brush(planes, eps=EPS)

    print(f"Вершини:      {len(pts)}")
    print(f"Ребра:        {len(edges)}")
    print(f"Трикутники:   {mesh.triangle_count}")

    # --- 3) Звірка з Qhull ---
    ref = hull_points(planes, backend="scipy")
    print(f"Вершини (scipy): {len(ref)}")

    # --- 4) Валідація ---
    brush = Brush(planes, eps=EPS)
    print("VALIDATION:", brush.validate())

    # --- 5) Експорти ---
    with open("brush.off", "w", encoding="utf-8") as f:
        f.write(brush.to_off())
    print("brush.off записано (грані brush'а).")

    write_wire_obj("brush_wire.obj", pts, edges)
    print("brush_wire.obj записано (каркас).")

    # --- 6) Плита з демо: [-0.75, 0.75] x [-1, 0] x [-0.75, 0.75] ---
    slab = Brush.box((0.75, 0.5, 0.75), center=(0.0, -0.5, 0.0))
    print("Плита:", slab.validate())


if __name__ == "__main__":
    main()
