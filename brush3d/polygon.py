from __future__ import annotations
from dataclasses import dataclass, replace
from math import atan2
from typing import List, Sequence, Tuple

from .geom import Pt, Plane, X_AXIS, Y_AXIS, ZERO, add, centroid, cross, dot, norm, normalize, sub


def tangent_frame(normal: Pt) -> Tuple[Pt, Pt]:
    """
    Стабільний 2D-базис у площині грані.
    Опорна вісь — Y, якщо нормаль не надто близька до неї, інакше X.
    Нормаль не мусить бути одиничною, тому кут міряємо відносно її довжини.
    Для нульової нормалі репер нульовий (як і в ненормованому варіанті).
    """
    ref = X_AXIS if abs(dot(normal, Y_AXIS)) > 0.5 * norm(normal) else Y_AXIS
    tangent = _unit_or_zero(cross(normal, ref))
    bitangent = _unit_or_zero(cross(tangent, normal))
    return tangent, bitangent


def _unit_or_zero(v: Pt) -> Pt:
    return normalize(v) if norm(v) > 0.0 else ZERO


def sort_winding(points: Sequence[Pt], tangent: Pt, bitangent: Pt) -> List[Pt]:
    """
    Опуклий циклічний порядок: кут atan2(b, t) відносно центроїда, за спаданням.
    Для базису (t, b) з tangent_frame це обхід проти годинникової стрілки,
    якщо дивитись з боку зовнішньої нормалі.
    """
    if len(points) < 2:
        return list(points)
    c = centroid(points)

    def angle(p: Pt) -> float:
        d = sub(p, c)
        return atan2(dot(d, bitangent), dot(d, tangent))

    # sorted стабільний і з reverse=True — рівні кути лишаються в порядку перебору
    return sorted(points, key=angle, reverse=True)


@dataclass(frozen=True)
class Polygon:
    """
    Грань brush'а.
    verts: вершини на площині (після sorted() — у порядку обходу).
    normal/tangent/bitangent: репер площини.
    plane_index: індекс площини у brush (або -1, якщо невідомий).
    """
    verts: Tuple[Pt, ...]
    normal: Pt
    tangent: Pt
    bitangent: Pt
    plane_index: int = -1

    @classmethod
    def from_plane(cls, plane: Plane, index: int = -1, verts: Sequence[Pt] = ()) -> "Polygon":
        tangent, bitangent = tangent_frame(plane.normal)
        return cls(tuple(verts), plane.normal, tangent, bitangent, index)

    def center(self) -> Pt:
        """Центроїд вершин; для порожньої грані — початок координат."""
        if not self.verts:
            return ZERO
        return centroid(self.verts)

    def sorted(self) -> "Polygon":
        return replace(self, verts=tuple(sort_winding(self.verts, self.tangent, self.bitangent)))

    def is_degenerate(self) -> bool:
        return len(self.verts) < 3

    def edges(self) -> List[Tuple[Pt, Pt]]:
        """Послідовні пари вершин, включно із замикальним ребром."""
        n = len(self.verts)
        if n < 2:
            return []
        return [(self.verts[i], self.verts[(i + 1) % n]) for i in range(n)]

    def area_vector(self) -> Pt:
        """
        Нормаль Ньюела: напрям — за правилом правої руки для поточного порядку,
        довжина — подвоєна площа.
        """
        acc = ZERO
        for a, b in self.edges():
            acc = add(acc, cross(a, b))
        return acc


def assemble_faces(planes: Sequence[Plane], vertices) -> List[Polygon]:
    """
    Грані з незмінного списку HullVertex: для кожної площини відбираємо
    вершини, серед породжувальних площин яких вона є, і сортуємо обхід.
    Грані з <3 вершинами лишаються у списку (вони не дадуть трикутників).
    """
    polys: List[Polygon] = []
    for idx, plane in enumerate(planes):
        verts = [v.point for v in vertices if idx in v.planes]
        polys.append(Polygon.from_plane(plane, idx, verts).sorted())
    return polys
