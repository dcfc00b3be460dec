"""Surfaces whose derivatives and curvature are computed numerically from the position alone."""

from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from surfacegeom import differential as dg


@dataclass(eq=False)
class FundamentalForms:
    """The first and second fundamental forms at one point."""

    first: np.ndarray
    second: np.ndarray


@dataclass(eq=False)
class Derivatives:
    """First and second order partial derivatives of a map from the plane to space."""

    x_u: np.ndarray
    x_v: np.ndarray
    x_uu: np.ndarray
    x_vv: np.ndarray
    x_uv: np.ndarray


def midpoint_derivatives(f: Callable, u: float, v: float, h: float) -> Derivatives:
    """Central difference partial derivatives up to second order of ``f(u, v)``."""
    f_u_v = np.asarray(f(u, v), dtype=float)
    f_uph_v = np.asarray(f(u + h, v), dtype=float)
    f_umh_v = np.asarray(f(u - h, v), dtype=float)
    f_u_vph = np.asarray(f(u, v + h), dtype=float)
    f_u_vmh = np.asarray(f(u, v - h), dtype=float)
    two_h = 2.0 * h
    h2 = h * h
    return Derivatives(
        x_u=(f_uph_v - f_umh_v) / two_h,
        x_v=(f_u_vph - f_u_vmh) / two_h,
        x_uu=(f_umh_v - 2.0 * f_u_v + f_uph_v) / h2,
        x_vv=(f_u_vmh - 2.0 * f_u_v + f_u_vph) / h2,
        x_uv=dg.mixed_derivative_midpoint(f, u, v, h, h),
    )


class GeneratedParametrization(abc.ABC):
    """Base for surfaces that only define ``position``; everything else is derived numerically."""

    @abc.abstractmethod
    def position(self, u: float, v: float) -> np.ndarray:
        """Point of the surface at parameters (u, v)."""

    def _derivatives(self, u: float, v: float) -> Derivatives:
        return midpoint_derivatives(self.position, u, v, dg.STEP)

    def tangent_u(self, u: float, v: float) -> np.ndarray:
        """Partial derivative of the position in u."""
        return dg.approximate_tangent_u(self, u, v)

    def tangent_v(self, u: float, v: float) -> np.ndarray:
        """Partial derivative of the position in v."""
        return dg.approximate_tangent_v(self, u, v)

    def x_uu(self, u: float, v: float) -> np.ndarray:
        """Second partial derivative in u."""
        return dg.approximate_x_uu(self, u, v)

    def x_vv(self, u: float, v: float) -> np.ndarray:
        """Second partial derivative in v."""
        return dg.approximate_x_vv(self, u, v)

    def x_uv(self, u: float, v: float) -> np.ndarray:
        """Mixed partial derivative."""
        return dg.approximate_x_uv(self, u, v)

    def normal(self, u: float, v: float) -> np.ndarray:
        """Unit normal."""
        return dg.surface_normal(self.tangent_u(u, v), self.tangent_v(u, v))

    def christoffel_symbols(self, u: float, v: float) -> dg.ChristoffelSymbols:
        """Christoffel symbols from numerical derivatives."""
        d = self._derivatives(u, v)
        return dg.christoffel_symbols(d.x_u, d.x_v, d.x_uu, d.x_uv, d.x_vv)

    def curvature(self, u: float, v: float) -> float:
        """Gaussian curvature."""
        forms = self.fundamental_forms(u, v)
        return dg.gaussian_curvature(forms.first, forms.second)

    def principal_curvatures(self, u: float, v: float) -> dg.PrincipalCurvatures:
        """Principal curvatures and directions."""
        forms = self.fundamental_forms(u, v)
        return dg.principal_curvatures(forms.first, forms.second)

    def first_fundamental_form(self, u: float, v: float) -> np.ndarray:
        """Metric tensor."""
        return dg.first_fundamental_form(self.tangent_u(u, v), self.tangent_v(u, v))

    def second_fundamental_form(self, u: float, v: float) -> np.ndarray:
        """Second fundamental form."""
        d = self._derivatives(u, v)
        # The normal reuses the first derivatives computed alongside the second ones.
        normal = dg.surface_normal(d.x_u, d.x_v)
        return dg.second_fundamental_form(d.x_uu, d.x_uv, d.x_vv, normal)

    def fundamental_forms(self, u: float, v: float) -> FundamentalForms:
        """Both fundamental forms from one set of derivatives."""
        d = self._derivatives(u, v)
        normal = dg.surface_normal(d.x_u, d.x_v)
        return FundamentalForms(
            first=dg.first_fundamental_form(d.x_u, d.x_v),
            second=dg.second_fundamental_form(d.x_uu, d.x_uv, d.x_vv, normal),
        )