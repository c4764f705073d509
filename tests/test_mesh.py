import numpy as np
import pytest

from brush3d.brush import Brush
from brush3d.geom import EPS, Pt, Plane, cross, dot, sub
from brush3d.mesh import MeshData, triangulate
from brush3d.polygon import Polygon

import brushes


def test_cube_mesh_buffers(cube_planes):
    mesh = Brush(cube_planes).to_mesh()
    # 6 quads, each with its own copy of the 4 corners
    assert len(mesh.positions) == 24
    assert len(mesh.normals) == 24
    assert len(mesh.uvs) == 24
    assert mesh.triangle_count == 12
    assert all(uv == (0.0, 0.0) for uv in mesh.uvs)
    assert all(0 <= i < 24 for i in mesh.indices)


def test_normals_are_flat_per_face(cube_planes):
    mesh = Brush(cube_planes).to_mesh()
    for face, plane in enumerate(cube_planes):
        block = mesh.normals[face * 4:(face + 1) * 4]
        assert block == [tuple(plane.normal)] * 4


@pytest.mark.parametrize(
    "planes, eps",
    [
        (brushes.cube(), 0.0),
        (brushes.tetra(), 0.0),
        (brushes.chopped_cube(), EPS),
    ],
)
def test_triangle_winding_matches_stored_normal(planes, eps):
    mesh = Brush(planes, eps=eps).to_mesh()
    for a, b, c in mesh.triangles():
        pa, pb, pc = (Pt(*mesh.positions[i]) for i in (a, b, c))
        n = cross(sub(pb, pa), sub(pc, pa))
        assert dot(n, Pt(*mesh.normals[a])) > 0.0
        assert mesh.normals[a] == mesh.normals[b] == mesh.normals[c]


def test_fan_triangulation_of_pentagon():
    plane = Plane(Pt(0.0, 0.0, 1.0), 0.0)
    verts = [Pt(1.0, 0.0, 0.0), Pt(0.3, 1.0, 0.0), Pt(-0.8, 0.6, 0.0), Pt(-0.8, -0.6, 0.0), Pt(0.3, -1.0, 0.0)]
    poly = Polygon.from_plane(plane, 0, verts).sorted()
    mesh = triangulate([poly])
    assert mesh.triangles() == [(0, 1, 2), (0, 2, 3), (0, 3, 4)]
    assert {i for tri in mesh.triangles() for i in tri} == set(range(5))


def test_fan_offsets_follow_previous_polygons(chopped_cube_planes):
    polys = Brush(chopped_cube_planes, eps=EPS).polygons()
    mesh = triangulate(polys)
    tris = mesh.triangles()
    base = 0
    cursor = 0
    for poly in polys:
        n = len(poly.verts)
        own = tris[cursor:cursor + n - 2]
        assert len(own) == n - 2
        assert all(t[0] == base for t in own)
        assert {i for t in own for i in t} == set(range(base, base + n))
        base += n
        cursor += n - 2
    assert cursor == len(tris)


def test_degenerate_polygons_emit_no_triangles():
    plane = Plane(Pt(1.0, 0.0, 0.0), 0.0)
    polys = [
        Polygon.from_plane(plane, 0),
        Polygon.from_plane(plane, 1, [Pt(0.0, 0.0, 0.0)]),
        Polygon.from_plane(plane, 2, [Pt(0.0, 0.0, 0.0), Pt(0.0, 1.0, 0.0)]),
    ]
    mesh = triangulate(polys)
    assert mesh.indices == []
    assert len(mesh.positions) == 3


def test_triangulate_leaves_polygons_untouched(cube_planes):
    polys = Brush(cube_planes).polygons()
    snapshot = [p.verts for p in polys]
    triangulate(polys)
    assert [p.verts for p in polys] == snapshot


def test_empty_mesh_for_empty_region(caplog):
    brush = Brush(brushes.cube() + [Plane(Pt(1.0, 0.0, 0.0), -1.0)])
    with caplog.at_level("WARNING", logger="brush3d.brush"):
        mesh = brush.to_mesh()
    assert mesh == MeshData()
    assert "mesh is empty" in caplog.text


def test_as_arrays(cube_planes):
    arrays = Brush(cube_planes).to_mesh().as_arrays()
    assert arrays["positions"].shape == (24, 3)
    assert arrays["normals"].shape == (24, 3)
    assert arrays["uvs"].shape == (24, 2)
    assert arrays["indices"].shape == (36,)
    assert arrays["positions"].dtype == np.float32
    assert arrays["indices"].dtype == np.uint32
    assert np.all(np.abs(arrays["positions"]) == 0.5)


def test_as_arrays_of_empty_mesh():
    arrays = MeshData().as_arrays()
    assert arrays["positions"].shape == (0, 3)
    assert arrays["uvs"].shape == (0, 2)
    assert arrays["indices"].shape == (0,)
