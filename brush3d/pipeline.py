from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from .geom import Pt, Plane, unique_points
from .brush import Brush, Edge
from .mesh import MeshData

logger = logging.getLogger(__name__)


def build_brush(planes: Sequence[Plane], eps: float = 0.0) -> Tuple[List[Pt], List[Edge], MeshData]:
    """
    Повний пайплайн для одного brush'а:
      - перебір вершин (трійки площин + тест належності);
      - ребра за спільними площинами -> каркас;
      - грані з обходом + віялова тріангуляція -> буфер для рендера.

    Повертає:
      points — вершини у порядку перебору трійок;
      edges  — пари індексів у points;
      mesh   — MeshData (позиції, нормалі, uv, індекси).
    """
    brush = Brush(planes, eps=eps)
    points, edges = brush.points_edges()
    mesh = brush.to_mesh()
    logger.debug("built brush: %d points, %d edges, %d triangles",
                 len(points), len(edges), mesh.triangle_count)
    return points, edges, mesh


def _halfspace_array(planes: Sequence[Plane]):
    import numpy as np
    # формат Qhull: A x + b <= 0  <=>  n . x - d <= 0
    return np.array([(p.normal.x, p.normal.y, p.normal.z, -p.distance) for p in planes], dtype=float)


def chebyshev_center(planes: Sequence[Plane]) -> Tuple[Pt, float]:
    """
    Центр найбільшої кулі всередині brush'а (ЛП через SciPy linprog):
      max r  при  n_i . x + r |n_i| <= d_i.
    Повертає (центр, радіус). Порожня/необмежена область -> ValueError.
    """
    try:
        import numpy as np
        from scipy.optimize import linprog
    except ImportError as e:
        raise RuntimeError(
            "chebyshev_center потребує SciPy. Встанови scipy."
        ) from e

    hs = _halfspace_array(planes)
    A = hs[:, :3]
    b = -hs[:, 3]
    norms = np.linalg.norm(A, axis=1).reshape(-1, 1)
    c = np.zeros(4)
    c[-1] = -1.0
    res = linprog(c, A_ub=np.hstack((A, norms)), b_ub=b,
                  bounds=[(None, None)] * 3 + [(0, None)])
    if not res.success:
        raise ValueError(f"Brush region is unbounded or empty: {res.message}")
    x, y, z, r = (float(v) for v in res.x)
    if r <= 0.0:
        raise ValueError("Brush region has no interior")
    return Pt(x, y, z), r


def hull_points(planes: Sequence[Plane], backend: str = "internal", eps: float = 0.0) -> List[Pt]:
    """
    Зварені (без дублікатів) вершини brush'а.
      backend="internal" — наш кубічний перебір трійок;
      backend="scipy"    — SciPy HalfspaceIntersection (Qhull), для звірки.
    """
    if backend.lower() == "internal":
        return unique_points(Brush(planes, eps=eps).points())

    if backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import HalfspaceIntersection
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        center, radius = chebyshev_center(planes)
        logger.debug("scipy backend: interior point %s, radius %.6g", center, radius)
        hs = HalfspaceIntersection(_halfspace_array(planes), np.array(tuple(center)))
        return unique_points(tuple(float(c) for c in row) for row in hs.intersections)

    raise ValueError(f"Unknown backend: {backend}")
