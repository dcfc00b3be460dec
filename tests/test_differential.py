import numpy as np
import pytest

from surfacegeom.differential import (
    ChristoffelSymbols,
    PrincipalCurvatures,
    SquareSideConnectivity,
    approximate_tangent_u,
    approximate_tangent_v,
    approximate_x_uu,
    approximate_x_uv,
    approximate_x_vv,
    christoffel_symbols,
    compute_eigenvectors,
    derivative_midpoint,
    first_fundamental_form,
    gaussian_curvature,
    mixed_derivative_midpoint,
    principal_curvatures,
    second_derivative_midpoint,
    second_fundamental_form,
    surface_normal,
)


class Saddle:
    def position(self, u, v):
        return np.array([u, v, u * v])


def test_connectivity_members():
    assert {c.name for c in SquareSideConnectivity} == {"NONE", "NORMAL", "REVERSED"}
    assert SquareSideConnectivity(SquareSideConnectivity.REVERSED.value) is SquareSideConnectivity.REVERSED
    with pytest.raises(ValueError):
        SquareSideConnectivity(-1)


def test_surface_normal_is_unit_and_orthogonal():
    tu, tv = np.array([1.0, 2.0, 0.5]), np.array([-1.0, 0.3, 2.0])
    n = surface_normal(tu, tv)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.dot(n, tu) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(n, tv) == pytest.approx(0.0, abs=1e-12)


def test_first_fundamental_form_is_gram_matrix():
    tu, tv = np.array([1.0, 2.0, 0.0]), np.array([0.0, 1.0, 3.0])
    g = first_fundamental_form(tu, tv)
    assert g[0, 0] == pytest.approx(np.dot(tu, tu))
    assert g[1, 1] == pytest.approx(np.dot(tv, tv))
    assert g[0, 1] == pytest.approx(np.dot(tu, tv))
    assert np.allclose(g, g.T)


def test_second_fundamental_form_projects_on_normal():
    n = np.array([0.0, 0.0, 1.0])
    ii = second_fundamental_form([1.0, 0, 2.0], [0, 5.0, -1.0], [3.0, 3.0, 4.0], n)
    assert np.allclose(ii, [[2.0, -1.0], [-1.0, 4.0]])


def test_gaussian_curvature_ratio_of_determinants():
    first = np.array([[2.0, 0.0], [0.0, 2.0]])
    second = np.array([[1.0, 0.0], [0.0, 4.0]])
    assert gaussian_curvature(first, second) == pytest.approx(np.linalg.det(second) / np.linalg.det(first))


def test_christoffel_symbols_flat_tangents():
    result = christoffel_symbols([1.0, 0, 0], [0, 1.0, 0], [0, 2.0, 0], [0, 0, 1.0], [0, 3.0, 1.0])
    assert isinstance(result, ChristoffelSymbols)
    assert np.allclose(result.x, np.zeros((2, 2)))
    assert np.allclose(result.y, [[2.0, 0.0], [0.0, 3.0]])


def test_compute_eigenvectors_satisfy_definition():
    m = np.array([[2.0, 1.0], [0.5, 3.0]])
    pairs = compute_eigenvectors(m)
    assert pairs[0].eigenvalue >= pairs[1].eigenvalue
    for pair in pairs:
        assert np.allclose(m @ pair.eigenvector, pair.eigenvalue * pair.eigenvector)


def test_compute_eigenvectors_upper_triangular():
    m = np.array([[1.0, 2.0], [0.0, 4.0]])
    for pair in compute_eigenvectors(m):
        assert np.allclose(m @ pair.eigenvector, pair.eigenvalue * pair.eigenvector)


def test_compute_eigenvectors_diagonal_uses_axes():
    pairs = compute_eigenvectors(np.diag([5.0, 1.0]))
    assert pairs[0].eigenvalue == pytest.approx(5.0)
    assert np.allclose(pairs[0].eigenvector, [1.0, 0.0])
    assert np.allclose(pairs[1].eigenvector, [0.0, 1.0])


def test_principal_curvatures_product_is_gaussian_curvature():
    first = np.array([[2.0, 0.3], [0.3, 1.0]])
    second = np.array([[0.5, 0.2], [0.2, -0.4]])
    result = principal_curvatures(first, second)
    assert isinstance(result, PrincipalCurvatures)
    k0, k1 = result.curvature
    assert k0 * k1 == pytest.approx(gaussian_curvature(first, second))
    shape = np.linalg.inv(first) @ second
    for k, d in zip(result.curvature, result.direction):
        assert np.allclose(shape @ d, k * d)


def test_midpoint_derivatives_exact_for_quadratics():
    assert derivative_midpoint(lambda x: x * x, 3.0, 0.1) == pytest.approx(6.0)
    assert second_derivative_midpoint(lambda x: x * x, 3.0, 0.1) == pytest.approx(2.0)
    assert mixed_derivative_midpoint(lambda u, v: u * v, 1.0, 2.0, 0.1, 0.1) == pytest.approx(1.0)


def test_approximate_derivatives_of_saddle():
    s = Saddle()
    u, v = 0.7, -0.4
    assert np.allclose(approximate_tangent_u(s, u, v), [1.0, 0.0, v])
    assert np.allclose(approximate_tangent_v(s, u, v), [0.0, 1.0, u])
    assert np.allclose(approximate_x_uu(s, u, v), [0.0, 0.0, 0.0], atol=1e-9)
    assert np.allclose(approximate_x_vv(s, u, v), [0.0, 0.0, 0.0], atol=1e-9)
    assert np.allclose(approximate_x_uv(s, u, v), [0.0, 0.0, 1.0])