"""
brush3d — відновлення опуклих brush'ів (BSP-редактори) з набору площин.
Перебір трійок площин -> вершини, ребра, грані з обходом, буфер для рендера.
"""

__version__ = "0.1.0"

from brush3d.geom import Pt, Plane, EPS, centroid, unique_points
from brush3d.predicates import plane_intersection, signed_distance, is_in_hull
from brush3d.brush import Brush, HullVertex, enumerate_vertices, derive_edges
from brush3d.polygon import Polygon, assemble_faces, sort_winding, tangent_frame
from brush3d.mesh import MeshData, triangulate

__all__ = [
    "Pt", "Plane", "EPS", "centroid", "unique_points",
    "plane_intersection", "signed_distance", "is_in_hull",
    "Brush", "HullVertex", "enumerate_vertices", "derive_edges",
    "Polygon", "assemble_faces", "sort_winding", "tangent_frame",
    "MeshData", "triangulate", "__version__",
]
