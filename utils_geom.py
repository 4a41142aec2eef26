# utils_geom.py

from PyQt5.QtCore import QPoint
from typing import Tuple, Union

PointLike = Union[QPoint, Tuple[int, int]]

def to_point(p: PointLike) -> QPoint:
    if isinstance(p, QPoint):
        return QPoint(p)
    x, y = p  # type: ignore[misc]
    if not _is_int(x) or not _is_int(y):
        raise TypeError(f"Point coordinates must be integers, got ({x!r}, {y!r})")
    return QPoint(x, y)

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def v_add(a: QPoint, b: QPoint) -> QPoint:
    return QPoint(a.x() + b.x(), a.y() + b.y())

def v_sub(a: QPoint, b: QPoint) -> QPoint:
    return QPoint(a.x() - b.x(), a.y() - b.y())

def v_len2(a: QPoint) -> int:
    return a.x() * a.x() + a.y() * a.y()

def within_radius(p: QPoint, center: QPoint, radius: int) -> bool:
    # Exact: integer arithmetic only, boundary counts as inside
    return v_len2(v_sub(p, center)) <= radius * radius
