from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Sequence, Tuple

EPS = 1e-9  # допуск для «загартованих» перевірок і валідації

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

ZERO = Pt(0.0, 0.0, 0.0)
X_AXIS = Pt(1.0, 0.0, 0.0)
Y_AXIS = Pt(0.0, 1.0, 0.0)
Z_AXIS = Pt(0.0, 0.0, 1.0)

def as_pt(v: Pt | Sequence[float]) -> Pt:
    if isinstance(v, Pt):
        return v
    x, y, z = v
    return Pt(float(x), float(y), float(z))

def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y, a.z + b.z)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def scale(a: Pt, s: float) -> Pt:
    return Pt(a.x*s, a.y*s, a.z*s)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def normalize(a: Pt) -> Pt:
    n = norm(a)
    if n == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return Pt(a.x/n, a.y/n, a.z/n)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv, zs*inv)


@dataclass(frozen=True)
class Plane:
    """
    Півпростір {p : dot(normal, p) <= distance}.
    normal — зовнішня нормаль. Одиничну довжину НЕ перевіряємо: ненормована
    нормаль масштабує distance і мовчки дає інший brush.
    """
    normal: Pt
    distance: float

    @classmethod
    def from_point(cls, normal: Pt | Sequence[float], point: Pt | Sequence[float]) -> "Plane":
        """Площина з нормаллю normal (нормується), що проходить через point."""
        n = normalize(as_pt(normal))
        return cls(n, dot(n, as_pt(point)))

    def flipped(self) -> "Plane":
        """Протилежний півпростір (та сама площина)."""
        return Plane(scale(self.normal, -1.0), -self.distance)


def unique_points(points: Iterable[Pt | Tuple[float, float, float]], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    `scale=1e9` ≈ EPS=1e-9 на координату. Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int, int], Pt] = {}
    for x, y, z in points:
        key = (int(round(x*scale)), int(round(y*scale)), int(round(z*scale)))
        if key not in seen:
            seen[key] = Pt(float(x), float(y), float(z))
    return list(seen.values())
