"""Classical surfaces with closed-form derivatives: torus, sphere, cone, helicoid,
pseudosphere and catenoid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from surfacegeom.differential import (
    ChristoffelSymbols,
    PrincipalCurvatures,
    SquareSideConnectivity,
)

_TAU = 2.0 * math.pi


def _normalized(v: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / np.linalg.norm(v)


def _div(a: float, b: float) -> float:
    """Floating point division that yields inf or nan instead of raising on zero."""
    with np.errstate(all="ignore"):
        return float(np.float64(a) / np.float64(b))


def _mat(a: float, b: float, c: float, d: float) -> np.ndarray:
    return np.array([[a, b], [c, d]], dtype=float)


def torus_position(u: float, v: float, r: float, R: float) -> np.ndarray:
    """Point of the torus with tube radius ``r`` and centre radius ``R``."""
    ring = R + r * math.cos(v)
    return np.array([ring * math.cos(u), ring * math.sin(u), r * math.sin(v)])


def torus_tangent_u(u: float, v: float, r: float, R: float) -> np.ndarray:
    """Partial derivative of the torus position in u."""
    ring = R + r * math.cos(v)
    return np.array([-ring * math.sin(u), ring * math.cos(u), 0.0])


def torus_tangent_v(u: float, v: float, r: float, R: float) -> np.ndarray:
    """Partial derivative of the torus position in v."""
    return np.array([
        -r * math.sin(v) * math.cos(u),
        -r * math.sin(v) * math.sin(u),
        r * math.cos(v),
    ])


def torus_normal(u: float, v: float, r: float, R: float) -> np.ndarray:
    """Outward unit normal of the torus."""
    return _normalized(np.array([
        math.cos(u) * math.cos(v),
        math.sin(u) * math.cos(v),
        math.sin(v),
    ]))


def torus_christoffel_symbols(u: float, v: float, r: float, R: float) -> ChristoffelSymbols:
    """Christoffel symbols of the torus."""
    ring = R + r * math.cos(v)
    a = _div(-r * math.sin(v), ring)
    return ChristoffelSymbols(
        x=_mat(0.0, a, a, 0.0),
        y=_mat(_div(ring * math.sin(v), r), 0.0, 0.0, 0.0),
    )


@dataclass(frozen=True)
class Torus:
    """Torus with tube radius ``r`` around a circle of radius ``R``."""

    r: float
    R: float

    u_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    v_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = _TAU
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def position(self, u: float, v: float) -> np.ndarray:
        return torus_position(u, v, self.r, self.R)

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        return torus_tangent_u(u, v, self.r, self.R)

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        return torus_tangent_v(u, v, self.r, self.R)

    def normal(self, u: float, v: float) -> np.ndarray:
        return torus_normal(u, v, self.r, self.R)

    def christoffel_symbols(self, u: float, v: float) -> ChristoffelSymbols:
        return torus_christoffel_symbols(u, v, self.r, self.R)

    def curvature(self, u: float, v: float) -> float:
        """Gaussian curvature."""
        return _div(math.cos(v), self.r * (self.R + self.r * math.cos(v)))

    def principal_curvatures(self, u: float, v: float) -> PrincipalCurvatures:
        return PrincipalCurvatures(
            _div(-math.cos(v), self.R + self.r * math.cos(v)),
            np.array([1.0, 0.0]),
            _div(-1.0, self.r),
            np.array([0.0, 1.0]),
        )


@dataclass(frozen=True)
class Sphere:
    """Sphere of radius ``r`` in spherical coordinates (u polar, v azimuthal)."""

    r: float

    u_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    v_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = math.pi
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def position(self, u: float, v: float) -> np.ndarray:
        r = self.r
        return np.array([
            r * math.sin(u) * math.cos(v),
            r * math.sin(u) * math.sin(v),
            r * math.cos(u),
        ])

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        r = self.r
        return np.array([
            r * math.cos(u) * math.cos(v),
            r * math.cos(u) * math.sin(v),
            -r * math.sin(u),
        ])

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        r = self.r
        return np.array([
            -r * math.sin(u) * math.sin(v),
            r * math.sin(u) * math.cos(v),
            0.0,
        ])

    def normal(self, u: float, v: float) -> np.ndarray:
        return _normalized(self.position(u, v))

    def christoffel_symbols(self, u: float, v: float) -> ChristoffelSymbols:
        # Undefined where sin(u) = 0: the whole line collapses onto a pole.
        cot = _div(1.0, math.tan(u))
        return ChristoffelSymbols(
            x=_mat(0.0, 0.0, 0.0, -0.5 * math.sin(2.0 * u)),
            y=_mat(0.0, cot, cot, 0.0),
        )

    def curvature(self, u: float, v: float) -> float:
        return _div(1.0, self.r)

    def principal_curvatures(self, u: float, v: float) -> PrincipalCurvatures:
        c = _div(-1.0, self.r * self.r)
        return PrincipalCurvatures(c, np.array([1.0, 0.0]), c, np.array([0.0, 1.0]))


@dataclass(frozen=True)
class Cone:
    """Elliptic cone with axis scales ``a`` and ``b``, cut to u in [u_min, u_max]."""

    a: float
    b: float
    u_min: float
    u_max: float

    u_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NONE
    v_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def position(self, u: float, v: float) -> np.ndarray:
        return np.array([self.a * u * math.cos(v), self.b * u * math.sin(v), u])

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        return np.array([self.a * math.cos(v), self.a * math.sin(v), 1.0])

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        return np.array([-self.a * u * math.sin(v), self.a * u * math.cos(v), 0.0])

    def normal(self, u: float, v: float) -> np.ndarray:
        return _normalized(np.array([
            -self.b * u * math.cos(v),
            -self.a * u * math.sin(v),
            self.a * self.b * u,
        ]))

    def christoffel_symbols(self, u: float, v: float) -> ChristoffelSymbols:
        k = _div(1.0, u)
        return ChristoffelSymbols(
            x=_mat(0.0, 0.0, 0.0, _div(-k * k * u, k * k + 1.0)),
            y=_mat(0.0, u, u, 0.0),
        )

    def curvature(self, u: float, v: float) -> float:
        """Gaussian curvature; a cone is developable, so it vanishes everywhere."""
        ruling_curvature = 0.0
        return ruling_curvature * abs(self.a * self.b)

    def principal_curvatures(self, u: float, v: float) -> PrincipalCurvatures:
        a = self.a
        return PrincipalCurvatures(
            0.0,
            np.array([1.0, 0.0]),
            _div(1.0, a * abs(u) * math.sqrt(1.0 + a * a)),
            np.array([0.0, 1.0]),
        )


@dataclass(frozen=True)
class Helicoid:
    """Helicoid over the parameter rectangle [u_min, u_max] x [v_min, v_max]."""

    u_min: float
    u_max: float
    v_min: float
    v_max: float

    u_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NONE
    v_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NONE

    def position(self, u: float, v: float) -> np.ndarray:
        return np.array([u * math.cos(v), u * math.sin(v), v])

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        return np.array([math.cos(v), math.sin(v), 0.0])

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        return np.array([-u * math.sin(v), u * math.cos(v), 1.0])

    def normal(self, u: float, v: float) -> np.ndarray:
        return _normalized(np.array([math.sin(v), -math.cos(v), u]))

    def christoffel_symbols(self, u: float, v: float) -> ChristoffelSymbols:
        a = u / (1.0 + u * u)
        return ChristoffelSymbols(
            x=_mat(0.0, 0.0, 0.0, -u),
            y=_mat(0.0, a, a, 0.0),
        )

    def curvature(self, u: float, v: float) -> float:
        a = 1.0 + u * u
        return -1.0 / (a * a)

    def principal_curvatures(self, u: float, v: float) -> PrincipalCurvatures:
        k = 1.0 / (1.0 + u * u)
        return PrincipalCurvatures(k, np.array([1.0, 0.0]), -k, np.array([0.0, 1.0]))


@dataclass(frozen=True)
class Pseudosphere:
    """Tractricoid of radius ``r``, a surface of constant negative curvature."""

    r: float

    u_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NONE
    v_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    # The Christoffel symbols are singular at u = 0.
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = 5.0
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def _sech_scaled(self, u: float) -> float:
        return self.r * 1.0 / (0.5 * math.exp(u) + 0.5 * math.exp(-u))

    def position(self, u: float, v: float) -> np.ndarray:
        x0 = self._sech_scaled(u)
        return np.array([
            x0 * math.cos(v),
            x0 * math.sin(v),
            self.r * u - self.r * math.tanh(u),
        ])

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        t = math.tanh(u)
        x1 = t * self._sech_scaled(u)
        return np.array([-x1 * math.cos(v), -x1 * math.sin(v), self.r * t * t])

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        x0 = self._sech_scaled(u)
        return np.array([-x0 * math.sin(v), x0 * math.cos(v), 0.0])

    def normal(self, u: float, v: float) -> np.ndarray:
        t = math.tanh(u)
        return _normalized(np.array([
            -t * math.cos(v),
            -t * math.sin(v),
            -1.0 / math.cosh(u),
        ]))

    def christoffel_symbols(self, u: float, v: float) -> ChristoffelSymbols:
        t = math.tanh(u)
        return ChristoffelSymbols(
            x=_mat(-t + _div(1.0, t), 0.0, 0.0, _div(2.0, math.sinh(2.0 * u))),
            y=_mat(0.0, -t, -t, 0.0),
        )

    def curvature(self, u: float, v: float) -> float:
        return _div(-1.0, self.r * self.r)

    def principal_curvatures(self, u: float, v: float) -> PrincipalCurvatures:
        inv_r = _div(1.0, self.r)
        return PrincipalCurvatures(
            -inv_r * abs(math.cosh(u)),
            np.array([1.0, 0.0]),
            inv_r * abs(math.sinh(u)),
            np.array([0.0, 1.0]),
        )


@dataclass(frozen=True)
class Catenoid:
    """Catenoid, the minimal surface of revolution of a catenary."""

    u_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NORMAL
    v_connectivity: ClassVar[SquareSideConnectivity] = SquareSideConnectivity.NONE
    c: ClassVar[float] = 1.0
    a: ClassVar[float] = 1.0
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = _TAU
    v_min: ClassVar[float] = -1.0
    v_max: ClassVar[float] = 1.0

    def position(self, u: float, v: float) -> np.ndarray:
        c = self.c
        x0 = c * math.cosh(v / c)
        return np.array([x0 * math.cos(u), x0 * math.sin(u), v])

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        c = self.c
        x0 = c * math.cosh(v / c)
        return np.array([-x0 * math.sin(u), x0 * math.cos(u), 0.0])

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        x0 = math.sinh(v / self.c)
        return np.array([x0 * math.cos(u), x0 * math.sin(u), 1.0])

    def normal(self, u: float, v: float) -> np.ndarray:
        return _normalized(np.array([math.cos(u), math.sin(u), -math.sinh(v / self.c)]))

    def christoffel_symbols(self, u: float, v: float) -> ChristoffelSymbols:
        c = self.c
        x0 = 1.0 / c
        x1 = math.tanh(v * x0)
        x2 = x0 * x1
        return ChristoffelSymbols(
            x=_mat(0.0, x2, x2, 0.0),
            y=_mat(-c * x1, 0.0, 0.0, x2),
        )

    def first_fundamental_form(self, u: float, v: float) -> np.ndarray:
        c = self.c
        x0 = math.cosh(v / c) ** 2
        return _mat(c * c * x0, 0.0, 0.0, x0)

    def second_fundamental_form(self, u: float, v: float) -> np.ndarray:
        c = self.c
        x0 = 1.0 / c
        x1 = math.cosh(v * x0)
        x2 = x1 / math.sqrt(x1 * x1)
        return _mat(-c * x2, 0.0, 0.0, x0 * x2)

    def principal_curvatures(self, u: float, v: float) -> PrincipalCurvatures:
        c = self.c
        ch = math.cosh(v / c)
        k = 1.0 / (c * math.sqrt(ch * ch) * ch)
        return PrincipalCurvatures(-k, np.array([1.0, 0.0]), k, np.array([0.0, 1.0]))

    def curvature(self, u: float, v: float) -> float:
        c = self.c
        return -1.0 / (c * c * math.cosh(v / c) ** 4)