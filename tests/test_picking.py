import numpy as np

from surfacegeom.picking import (
    MeshIntersection,
    check_if_point_got_grabbed,
    sort_intersections_by_distance_to_camera,
    update_grabbed_point,
    vector_in_tangent_space_basis,
)
from surfacegeom.triangles import RayTriIntersection


def _hit(t, position, uv):
    position = np.asarray(position, dtype=float)
    return MeshIntersection(
        i=RayTriIntersection(position=position, barycentric_coordinates=np.array([1.0, 0.0, 0.0]), t=t),
        triangle_index=0,
        uv=np.asarray(uv, dtype=float),
        position=position,
    )


def test_tangent_basis_with_orthonormal_tangents():
    result = vector_in_tangent_space_basis([2.0, 3.0, 0.0], [1, 0, 0], [0, 1, 0], [0, 0, 1])
    assert np.allclose(result, [2.0, 3.0])


def test_tangent_basis_round_trip_skewed():
    tu = np.array([2.0, 0.0, 1.0])
    tv = np.array([0.5, 1.0, -1.0])
    normal = np.cross(tu, tv)
    normal /= np.linalg.norm(normal)
    v = 1.5 * tu - 0.75 * tv
    coords = vector_in_tangent_space_basis(v, tu, tv, normal)
    assert np.allclose(coords[0] * tu + coords[1] * tv, v)


def test_tangent_basis_ignores_normal_component():
    tu, tv, n = np.array([1.0, 0, 0]), np.array([0, 1.0, 0]), np.array([0, 0, 1.0])
    with_normal = vector_in_tangent_space_basis([1.0, -2.0, 5.0], tu, tv, n)
    without = vector_in_tangent_space_basis([1.0, -2.0, 0.0], tu, tv, n)
    assert np.allclose(with_normal, without)


def test_sort_by_ray_parameter():
    hits = [_hit(3.0, [0, 0, 0], [0, 0]), _hit(1.0, [0, 0, 0], [1, 1]), _hit(2.0, [0, 0, 0], [2, 2])]
    result = sort_intersections_by_distance_to_camera(hits)
    assert [h.i.t for h in result] == [1.0, 2.0, 3.0]
    assert [h.i.t for h in hits] == [1.0, 2.0, 3.0]


def test_point_grabbed_when_hit_close():
    hits = [_hit(1.0, [5, 5, 5], [0, 0]), _hit(2.0, [0.01, 0, 0], [0, 0])]
    assert check_if_point_got_grabbed([0, 0, 0], hits) is True


def test_point_not_grabbed_when_far():
    hits = [_hit(1.0, [1, 0, 0], [0, 0])]
    assert check_if_point_got_grabbed([0, 0, 0], hits) is False
    assert check_if_point_got_grabbed([0, 0, 0], []) is False


def test_update_grabbed_point_takes_closest():
    far = _hit(1.0, [3, 0, 0], [0.1, 0.1])
    near = _hit(2.0, [0.5, 0, 0], [0.7, 0.3])
    hits = [far, near]
    uv = update_grabbed_point([0.0, 0.0], [0, 0, 0], hits)
    assert np.allclose(uv, near.uv)
    assert hits[0] is near


def test_update_grabbed_point_without_hits_keeps_uv():
    uv = update_grabbed_point([0.25, 0.75], [0, 0, 0], [])
    assert np.allclose(uv, [0.25, 0.75])