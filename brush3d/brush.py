from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .geom import EPS, Pt, Plane, X_AXIS, Y_AXIS, Z_AXIS, as_pt, dot, scale
from .mesh import MeshData, triangulate
from .polygon import Polygon, assemble_faces
from .predicates import is_in_hull, plane_intersection, signed_distance

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]          # неорієнтоване ребро (i, j), i < j
Triple = Tuple[int, int, int]   # індекси породжувальних площин, зростаючі


@dataclass(frozen=True)
class HullVertex:
    """
    Вершина brush'а.
    point: точка перетину трьох площин.
    planes: породжувальна трійка (i, j, k), i < j < k.
    """
    point: Pt
    planes: Triple


def enumerate_vertices(planes: Sequence[Plane], eps: float = 0.0) -> List[HullVertex]:
    """
    Перебір усіх трійок i<j<k (кубічно — для brush'ів із десятком площин це ок).
    Трійки без єдиної точки перетину пропускаємо; точку лишаємо, лише якщо
    вона всередині ВСІХ півпросторів. Порядок — порядок перебору трійок.
    """
    n = len(planes)
    if n < 3:
        raise ValueError(f"Need at least 3 planes, got {n}")

    out: List[HullVertex] = []
    skipped_parallel = 0
    for i in range(n - 2):
        for j in range(i + 1, n - 1):
            for k in range(j + 1, n):
                p = plane_intersection(planes[i], planes[j], planes[k])
                if p is None:
                    skipped_parallel += 1
                    continue
                if not is_in_hull(planes, p, eps):
                    continue
                out.append(HullVertex(p, (i, j, k)))

    logger.debug("enumerated %d hull vertices from %d planes (%d degenerate triples)",
                 len(out), n, skipped_parallel)
    return out


def derive_edges(vertices: Sequence[HullVertex]) -> List[Edge]:
    """
    Ребро між двома вершинами — якщо вони мають рівно 2 спільні породжувальні
    площини (лежать на прямій їх перетину). Квадратично за кількістю вершин.
    """
    edges: List[Edge] = []
    n = len(vertices)
    for i in range(n - 1):
        pi = set(vertices[i].planes)
        for j in range(i + 1, n):
            if len(pi.intersection(vertices[j].planes)) == 2:
                edges.append((i, j))
    return edges


class Brush:
    """
    Опуклий brush як перетин півпросторів.

    Вхід: впорядкований список Plane (порядок впливає лише на індекси).
    Усі запити рахуються заново з незмінного набору площин:
      vertices()/points()/edges()  — каркас (точки + пари індексів);
      polygons()/to_mesh()         — грані та буфер для рендера.
    eps: допуск тесту належності (0.0 — точне порівняння).
    """

    def __init__(self, planes: Iterable[Plane], eps: float = 0.0):
        self.planes: Tuple[Plane, ...] = tuple(planes)
        self.eps = eps

    @classmethod
    def box(cls, half_extents: Sequence[float], center: Sequence[float] = (0.0, 0.0, 0.0)) -> "Brush":
        """Паралелепіпед з шести осьових площин (+X, +Y, +Z, -X, -Y, -Z)."""
        hx, hy, hz = half_extents
        c = as_pt(center)
        axes = (X_AXIS, Y_AXIS, Z_AXIS)
        halves = (hx, hy, hz)
        planes = [Plane(a, dot(a, c) + h) for a, h in zip(axes, halves)]
        planes += [Plane(scale(a, -1.0), h - dot(a, c)) for a, h in zip(axes, halves)]
        return cls(planes)

    def __len__(self) -> int:
        return len(self.planes)

    def __repr__(self) -> str:
        return f"Brush({len(self.planes)} planes, eps={self.eps})"

    # ---------------- Публічний API ----------------
    def is_point_in_hull(self, p: Pt | Sequence[float]) -> bool:
        return is_in_hull(self.planes, as_pt(p), self.eps)

    def vertices(self) -> List[HullVertex]:
        return enumerate_vertices(self.planes, self.eps)

    def points(self) -> List[Pt]:
        return [v.point for v in self.vertices()]

    def edges(self) -> List[Edge]:
        return derive_edges(self.vertices())

    def points_edges(self) -> Tuple[List[Pt], List[Edge]]:
        """Каркас для лінійного рендера: точки та пари індексів у них."""
        verts = self.vertices()
        return [v.point for v in verts], derive_edges(verts)

    def polygons(self) -> List[Polygon]:
        """По одному полігону на площину, у порядку площин."""
        polys = assemble_faces(self.planes, self.vertices())
        empty = sum(1 for p in polys if p.is_degenerate())
        if empty:
            logger.debug("%d of %d planes expose no face", empty, len(polys))
        return polys

    def to_mesh(self) -> MeshData:
        mesh = triangulate(self.polygons())
        if not mesh.positions:
            logger.warning("%r has no hull vertices, mesh is empty", self)
        return mesh

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожне ребро лежить рівно на 2 відкритих гранях;
          - орієнтація граней (нормаль Ньюела) збігається з нормаллю площини;
          - вершини граней лежать на своїх площинах (до EPS);
          - характеристика Ейлера V - E + F.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        verts = self.vertices()
        edges = derive_edges(verts)
        polys = assemble_faces(self.planes, verts)
        exposed = {p.plane_index for p in polys if not p.is_degenerate()}

        bad_edges: List[Edge] = []
        for a, b in edges:
            shared = set(verts[a].planes) & set(verts[b].planes)
            if len(shared & exposed) != 2:
                bad_edges.append((a, b))

        bad_winding: List[int] = []
        off_plane: List[int] = []
        for poly in polys:
            if poly.is_degenerate():
                continue
            if dot(poly.area_vector(), poly.normal) <= 0.0:
                bad_winding.append(poly.plane_index)
            plane = self.planes[poly.plane_index]
            if any(abs(signed_distance(plane, v)) > EPS for v in poly.verts):
                off_plane.append(poly.plane_index)

        return {
            "vertices": len(verts),
            "edges": len(edges),
            "faces": len(exposed),
            "euler": len(verts) - len(edges) + len(exposed),
            "bad_edges": bad_edges,
            "bad_winding": bad_winding,
            "off_plane": off_plane,
            "empty_faces": [p.plane_index for p in polys if p.is_degenerate()],
        }

    def to_off(self) -> str:
        """
        Експорт граней у формат OFF (n-кутники, без тріангуляції).
        Вершини зварюємо за точним збігом координат, тож спільні вершини граней
        мають один індекс.
        """
        verts = self.vertices()
        index_of: Dict[Pt, int] = {}
        for v in verts:
            index_of.setdefault(v.point, len(index_of))
        faces = [p for p in assemble_faces(self.planes, verts) if not p.is_degenerate()]

        lines = ["OFF", f"{len(index_of)} {len(faces)} 0"]
        for p in index_of:
            lines.append(f"{p.x} {p.y} {p.z}")
        for face in faces:
            ids = " ".join(str(index_of[v]) for v in face.verts)
            lines.append(f"{len(face.verts)} {ids}")
        return "\n".join(lines)
