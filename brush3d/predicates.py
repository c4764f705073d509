# brush3d/predicates.py
from __future__ import annotations
from typing import Optional, Sequence
from .geom import Pt, Plane, add, cross, dot, scale

def plane_intersection(a: Plane, b: Plane, c: Plane) -> Optional[Pt]:
    """
    Єдина точка на трьох площинах (правило Крамера для dot(n_i, p) = d_i).
    Знаменник — мішаний добуток нормалей. Якщо він нульовий (паралельні,
    збіжні або з спільною прямою площини) — None, це не помилка.
    """
    n0, n1, n2 = a.normal, b.normal, c.normal
    denom = dot(cross(n0, n1), n2)
    if abs(denom) <= 0.0:
        return None

    d0, d1, d2 = a.distance, b.distance, c.distance
    num = add(add(scale(cross(n1, n2), d0),
                  scale(cross(n2, n0), d1)),
              scale(cross(n0, n1), d2))
    return Pt(num.x / denom, num.y / denom, num.z / denom)

def signed_distance(plane: Plane, p: Pt) -> float:
    """>0 — точка за площиною (зовні), <=0 — всередині півпростору."""
    return dot(plane.normal, p) - plane.distance

def is_in_hull(planes: Sequence[Plane], p: Pt, eps: float = 0.0) -> bool:
    """
    Чи лежить p у перетині всіх півпросторів.
    eps=0.0 — точне порівняння: точка на площині завжди всередині,
    будь-яке перевищення > 0 — зовні. eps>0 — толерантний режим.
    """
    for plane in planes:
        proj = dot(plane.normal, p)
        dist = plane.distance
        if proj > dist and proj - dist > eps:
            return False
    return True
