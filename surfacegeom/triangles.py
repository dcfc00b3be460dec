"""Triangle geometry: centres, areas, ray intersection and sampling."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _vec(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


@dataclass(eq=False)
class RayTriIntersection:
    """Where a ray meets a triangle, with barycentric weights and the ray parameter."""

    position: np.ndarray
    barycentric_coordinates: np.ndarray
    t: float


def tri_center(v0, v1, v2) -> np.ndarray:
    """Centroid of a triangle."""
    return (_vec(v0) + _vec(v1) + _vec(v2)) / 3.0


def ray_tri_intersection(ray_origin, ray_direction, v0, v1, v2) -> RayTriIntersection | None:
    """Intersect the line through ``ray_origin`` along ``ray_direction`` with a triangle.

    Returns ``None`` when the ray is parallel to the triangle or misses it. Back faces
    and hits behind the origin are reported too.
    """
    origin = _vec(ray_origin)
    direction = _vec(ray_direction)
    a, b, c = _vec(v0), _vec(v1), _vec(v2)
    edge1 = b - a
    edge2 = c - a
    pvec = np.cross(direction, edge2)
    det = float(np.dot(edge1, pvec))
    if abs(det) < _EPSILON:
        return None
    inv_det = 1.0 / det

    tvec = origin - a
    u = float(np.dot(tvec, pvec)) * inv_det
    if u < 0 or u > 1:
        return None

    qvec = np.cross(tvec, edge1)
    v = float(np.dot(direction, qvec)) * inv_det
    if v < 0 or u + v > 1:
        return None

    t = float(np.dot(edge2, qvec)) * inv_det
    return RayTriIntersection(
        position=origin + t * direction,
        barycentric_coordinates=np.array([1.0 - u - v, u, v]),
        t=t,
    )


def barycentric_interpolate(barycentric_coordinates, v0, v1, v2):
    """Blend three values with barycentric weights."""
    wx, wy, wz = (float(w) for w in barycentric_coordinates)
    return wx * _vec(v0) + wy * _vec(v1) + wz * _vec(v2)


def tri_area(v0, v1, v2) -> float:
    """Length of the cross product of two edges (twice the geometric area)."""
    a = _vec(v0)
    return float(np.linalg.norm(np.cross(_vec(v1) - a, _vec(v2) - a)))


def uniform_random_point_on_tri(v0, v1, v2, r0: float, r1: float) -> np.ndarray:
    """Map two numbers uniform on [0, 1] to a point uniformly distributed on a triangle."""
    root = float(np.sqrt(r0))
    return (1.0 - root) * _vec(v0) + (root * (1.0 - r1)) * _vec(v1) + (r1 * root) * _vec(v2)