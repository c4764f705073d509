# brush3d/mesh.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

import numpy as np

from .polygon import Polygon

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]


@dataclass
class MeshData:
    """
    Плаский буфер для рендера (TriangleList):
      positions — позиції вершин;
      normals   — нормаль грані, продубльована на кожну її вершину (flat shading);
      uvs       — заглушка (0, 0) для кожної вершини;
      indices   — по три індекси на трикутник.
    Будується заново на кожен запит, ядро його не кешує.
    """
    positions: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    uvs: List[Vec2] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> List[Tuple[int, int, int]]:
        ix = self.indices
        return [(ix[i], ix[i + 1], ix[i + 2]) for i in range(0, len(ix), 3)]

    def as_arrays(self) -> dict:
        """numpy-масиви у форматі, зручному для завантаження на GPU."""
        return {
            "positions": np.asarray(self.positions, dtype=np.float32).reshape(-1, 3),
            "normals": np.asarray(self.normals, dtype=np.float32).reshape(-1, 3),
            "uvs": np.asarray(self.uvs, dtype=np.float32).reshape(-1, 2),
            "indices": np.asarray(self.indices, dtype=np.uint32),
        }


def triangulate(polygons: Iterable[Polygon]) -> MeshData:
    """
    Віялова тріангуляція кожної (вже відсортованої) грані від її першої вершини:
    (first, first+i, first+i+1), i = 1..n-2. Грань з n вершинами дає n-2
    трикутники; грані з <3 вершинами трикутників не дають.
    Вхідні полігони не змінюються.
    """
    mesh = MeshData()
    for poly in polygons:
        first = len(mesh.positions)
        normal = tuple(poly.normal)
        for v in poly.verts:
            mesh.positions.append(tuple(v))
            mesh.normals.append(normal)
            mesh.uvs.append((0.0, 0.0))
        for i in range(1, len(poly.verts) - 1):
            mesh.indices.extend((first, first + i, first + i + 1))
    return mesh
