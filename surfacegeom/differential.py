"""Differential geometry of parametrized surfaces: fundamental forms, curvature, derivatives."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from collections.abc import Callable

import numpy as np

STEP = 0.05


def _vec(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _sqrt(x: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(np.float64(x)))


class SquareSideConnectivity(enum.Enum):
    """How the sides u = max, v = max of the parameter square are glued to u = min, v = min."""

    NONE = enum.auto()
    NORMAL = enum.auto()
    REVERSED = enum.auto()


@dataclass(eq=False)
class ChristoffelSymbols:
    """Christoffel symbols of the second kind; ``x`` and ``y`` are the 2x2 blocks per upper index."""

    x: np.ndarray
    y: np.ndarray


class PrincipalCurvatures:
    """Two principal curvatures and their directions in parameter space."""

    __slots__ = ("curvature", "direction")

    def __init__(self, c0: float, v0, c1: float, v1) -> None:
        self.curvature = (float(c0), float(c1))
        self.direction = (_vec(v0), _vec(v1))

    def __repr__(self) -> str:
        return f"PrincipalCurvatures(curvature={self.curvature}, direction={self.direction})"


@dataclass(eq=False)
class Eigenvector:
    """An eigenvector of a 2x2 matrix with its eigenvalue."""

    eigenvector: np.ndarray
    eigenvalue: float


def surface_normal(tangent_u, tangent_v) -> np.ndarray:
    """Unit normal from the two tangent vectors."""
    n = np.cross(_vec(tangent_u), _vec(tangent_v))
    with np.errstate(divide="ignore", invalid="ignore"):
        return n / np.linalg.norm(n)


def first_fundamental_form(x_u, x_v) -> np.ndarray:
    """Metric tensor: the Gram matrix of the two tangents."""
    jacobian_t = np.array([_vec(x_u), _vec(x_v)])
    return jacobian_t @ jacobian_t.T


def second_fundamental_form(x_uu, x_uv, x_vv, normalized_normal) -> np.ndarray:
    """Second derivatives projected onto the unit normal."""
    n = _vec(normalized_normal)
    uu = float(np.dot(_vec(x_uu), n))
    uv = float(np.dot(_vec(x_uv), n))
    vv = float(np.dot(_vec(x_vv), n))
    return np.array([[uu, uv], [uv, vv]])


def gaussian_curvature(first_fundamental_form, second_fundamental_form) -> float:
    """Gaussian curvature as det(II) / det(I)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(
            np.float64(np.linalg.det(_vec(second_fundamental_form)))
            / np.float64(np.linalg.det(_vec(first_fundamental_form)))
        )


def christoffel_symbols(x_u, x_v, x_uu, x_uv, x_vv) -> ChristoffelSymbols:
    """Christoffel symbols computed from first and second partial derivatives."""
    tangents = (_vec(x_u), _vec(x_v))
    second = ((_vec(x_uu), _vec(x_uv)), (_vec(x_uv), _vec(x_vv)))
    metric_inverse = np.linalg.inv(first_fundamental_form(*tangents))

    blocks = []
    for i in range(2):
        block = np.zeros((2, 2))
        for j in range(2):
            for k in range(2):
                # Each pass overwrites the entry, so only the last tangent's term is kept.
                for m in range(2):
                    block[j, k] = metric_inverse[i, m] * float(np.dot(second[j][k], tangents[m]))
        blocks.append(block)
    return ChristoffelSymbols(x=blocks[0], y=blocks[1])


def compute_eigenvectors(m) -> tuple[Eigenvector, Eigenvector]:
    """Eigenpairs of a 2x2 matrix; the first holds the larger eigenvalue."""
    mat = _vec(m)
    d = float(np.linalg.det(mat))
    t = float(mat[0, 0] + mat[1, 1])
    s = _sqrt(t * t / 4.0 - d)
    l0 = t / 2.0 + s
    l1 = t / 2.0 - s
    if mat[1, 0] != 0.0:
        return (
            Eigenvector(np.array([l0 - mat[1, 1], mat[1, 0]]), l0),
            Eigenvector(np.array([l1 - mat[1, 1], mat[1, 0]]), l1),
        )
    if mat[0, 1] != 0.0:
        return (
            Eigenvector(np.array([mat[0, 1], l0 - mat[0, 0]]), l0),
            Eigenvector(np.array([mat[0, 1], l1 - mat[0, 0]]), l1),
        )
    return (
        Eigenvector(np.array([1.0, 0.0]), l0),
        Eigenvector(np.array([0.0, 1.0]), l1),
    )


def principal_curvatures(first_fundamental_form, second_fundamental_form) -> PrincipalCurvatures:
    """Principal curvatures as eigenpairs of the shape operator I^-1 II."""
    shape_operator = np.linalg.inv(_vec(first_fundamental_form)) @ _vec(second_fundamental_form)
    first, second = compute_eigenvectors(shape_operator)
    return PrincipalCurvatures(first.eigenvalue, first.eigenvector, second.eigenvalue, second.eigenvector)


def derivative_midpoint(f: Callable, x: float, h: float):
    """Central difference approximation of f'(x)."""
    return (_vec(f(x + h)) - _vec(f(x - h))) / (2.0 * h)


def second_derivative_midpoint(f: Callable, x: float, h: float):
    """Central difference approximation of f''(x)."""
    return (_vec(f(x - h)) - 2.0 * _vec(f(x)) + _vec(f(x + h))) / (h * h)


def mixed_derivative_midpoint(f: Callable, u: float, v: float, hu: float, hv: float):
    """Central difference approximation of the mixed partial derivative d2f/dudv."""
    return (
        _vec(f(u + hu, v + hv))
        - _vec(f(u + hu, v - hv))
        - _vec(f(u - hu, v + hv))
        + _vec(f(u - hu, v - hv))
    ) / (4.0 * hu * hv)


def approximate_tangent_u(surface, u: float, v: float) -> np.ndarray:
    """Numerical partial derivative of ``surface.position`` in u."""
    return derivative_midpoint(lambda s: surface.position(s, v), u, STEP)


def approximate_tangent_v(surface, u: float, v: float) -> np.ndarray:
    """Numerical partial derivative of ``surface.position`` in v."""
    return derivative_midpoint(lambda s: surface.position(u, s), v, STEP)


def approximate_x_uu(surface, u: float, v: float) -> np.ndarray:
    """Numerical second partial derivative of ``surface.position`` in u."""
    return second_derivative_midpoint(lambda s: surface.position(s, v), u, STEP)


def approximate_x_vv(surface, u: float, v: float) -> np.ndarray:
    """Numerical second partial derivative of ``surface.position`` in v."""
    return second_derivative_midpoint(lambda s: surface.position(u, s), v, STEP)


def approximate_x_uv(surface, u: float, v: float) -> np.ndarray:
    """Numerical mixed partial derivative of ``surface.position``."""
    return mixed_derivative_midpoint(surface.position, u, v, STEP, STEP)