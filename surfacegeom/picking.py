"""Helpers for picking and dragging points on a parametrized surface mesh."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from surfacegeom.triangles import RayTriIntersection

GRAB_DISTANCE = 0.06


def _vec(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _normalized(v: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / np.linalg.norm(v)


@dataclass(eq=False)
class MeshIntersection:
    """A ray hit on a mesh triangle with the surface coordinates and position of the hit."""

    i: RayTriIntersection
    triangle_index: int
    uv: np.ndarray
    position: np.ndarray


def vector_in_tangent_space_basis(v, tangent_u, tangent_v, normal) -> np.ndarray:
    """Express ``v`` (projected onto the tangent plane) in the basis of the two tangents."""
    tu, tv = _vec(tangent_u), _vec(tangent_v)
    e0 = _normalized(tu)
    e1 = _normalized(np.cross(tu, _vec(normal)))

    def in_plane(w: np.ndarray) -> tuple[float, float]:
        return float(np.dot(w, e0)), float(np.dot(w, e1))

    a, c = in_plane(tu)
    b, d = in_plane(tv)
    x, y = in_plane(_vec(v))
    # Solve [[a, b], [c, d]] @ (s, t) = (x, y).
    with np.errstate(divide="ignore", invalid="ignore"):
        inv_det = np.float64(1.0) / np.float64(a * d - b * c)
        return np.array([(d * x - b * y) * inv_det, (a * y - c * x) * inv_det])


def sort_intersections_by_distance_to_camera(intersections: list[MeshIntersection]) -> list[MeshIntersection]:
    """Sort hits in place by their ray parameter, nearest first."""
    intersections.sort(key=lambda hit: hit.i.t)
    return intersections


def check_if_point_got_grabbed(point_position, intersections_sorted_by_distance) -> bool:
    """Whether any hit lies within grabbing distance of the point.

    All hits count, so points behind a transparent surface can be grabbed.
    """
    point = _vec(point_position)
    return any(
        float(np.linalg.norm(_vec(hit.position) - point)) < GRAB_DISTANCE
        for hit in intersections_sorted_by_distance
    )


def update_grabbed_point(point_uv, point_pos, intersections: list[MeshIntersection]) -> np.ndarray:
    """Return the new coordinates of a dragged point.

    The hits are sorted in place by distance to the point's current position, so a point
    dragged on the far side of the surface stays there. With no hits the old coordinates
    are returned.
    """
    point = _vec(point_pos)
    intersections.sort(key=lambda hit: float(np.linalg.norm(_vec(hit.i.position) - point)))
    if intersections:
        return _vec(intersections[0].uv)
    return _vec(point_uv)