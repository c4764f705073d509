from brush3d.brush import Brush

if __name__ == "__main__":
    # плита з демо редактора: [-0.75, 0.75] x [-1, 0] x [-0.75, 0.75]
    brush = Brush.box((0.75, 0.5, 0.75), center=(0.0, -0.5, 0.0))

    pts, edges = brush.points_edges()
    print("Vertices:", len(pts))
    print("Edges:", len(edges))
    print("Triangles:", brush.to_mesh().triangle_count)

    report = brush.validate()
    print("VALIDATION:", report)

    with open("brush.off", "w", encoding="utf-8") as f:
        f.write(brush.to_off())
    print("Wrote brush.off — можна глянути в MeshLab/ParaView.")
