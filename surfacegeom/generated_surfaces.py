"""Surfaces defined only by their position: Klein bottle, projective plane and trefoil tube."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from surfacegeom import differential as dg
from surfacegeom.generated import GeneratedParametrization

_TAU = 2.0 * math.pi


class KleinBottle(GeneratedParametrization):
    """Immersed Klein bottle built from a figure-eight-like tube."""

    u_connectivity: ClassVar[dg.SquareSideConnectivity] = dg.SquareSideConnectivity.REVERSED
    v_connectivity: ClassVar[dg.SquareSideConnectivity] = dg.SquareSideConnectivity.NORMAL
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = math.pi
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def position(self, u: float, v: float) -> np.ndarray:
        k = 0.15
        r = k * (2.0 + math.sin(2.0 * u) + math.sin(4.0 * u) / 2.0)
        angle = u - math.sin(2.0 * u)
        x = math.sin(2.0 * u) / 3.0 - math.sin(4.0 * u) / 5.0 + r * math.cos(v) * math.cos(angle)
        y = math.cos(2.0 * u) - r * math.cos(v) * math.sin(angle)
        z = r * math.sin(v)
        return np.array([x, y, z]) * 2.0


class ProjectivePlane(GeneratedParametrization):
    """Boy's surface, parametrized over the unit disc in polar coordinates."""

    u_connectivity: ClassVar[dg.SquareSideConnectivity] = dg.SquareSideConnectivity.REVERSED
    v_connectivity: ClassVar[dg.SquareSideConnectivity] = dg.SquareSideConnectivity.REVERSED
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = 1.0
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def position(self, u: float, v: float) -> np.ndarray:
        w = u * cmath.exp(complex(0.0, v))
        w2 = w * w
        w3 = w2 * w
        w4 = w2 * w2
        w6 = w3 * w3
        denom = w6 + math.sqrt(5.0) * w3 - 1.0
        g1 = -1.5 * (w * (1.0 - w4) / denom).imag
        g2 = -1.5 * (w * (1.0 + w4) / denom).real
        g3 = ((1.0 + w6) / denom).imag - 0.5
        length = g1 * g1 + g2 * g2 + g3 * g3
        return np.array([g1, g2, g3]) / length


def trefoil_curve(t: float) -> np.ndarray:
    """Point on the trefoil knot."""
    n = 2
    return np.array([
        math.sin(t) + 2.0 * math.sin(n * t),
        math.cos(t) - 2.0 * math.cos(n * t),
        -math.sin(3.0 * t),
    ])


def trefoil_curve_tangent(t: float) -> np.ndarray:
    """Unit tangent direction used to frame the trefoil tube."""
    d = np.array([
        math.sin(t) + 4.0 * math.cos(2.0 * t),
        (8.0 * math.cos(t) - 1.0) * math.sin(t),
        -3.0 * math.cos(3.0 * t),
    ])
    return d / np.linalg.norm(d)


def trefoil_curve_normal(t: float) -> np.ndarray:
    """Unit normal from a numerical derivative of the tangent."""
    d = dg.derivative_midpoint(trefoil_curve_tangent, t, dg.STEP)
    return d / np.linalg.norm(d)


@dataclass
class Trefoil(GeneratedParametrization):
    """Tube of fixed radius around the trefoil knot."""

    r: float = 0.0
    R: float = 0.0

    u_connectivity: ClassVar[dg.SquareSideConnectivity] = dg.SquareSideConnectivity.NORMAL
    v_connectivity: ClassVar[dg.SquareSideConnectivity] = dg.SquareSideConnectivity.NORMAL
    u_min: ClassVar[float] = 0.0
    u_max: ClassVar[float] = _TAU
    v_min: ClassVar[float] = 0.0
    v_max: ClassVar[float] = _TAU

    def position(self, u: float, v: float) -> np.ndarray:
        radius = 0.4
        p = trefoil_curve(u)
        tangent = trefoil_curve_tangent(u)
        normal = trefoil_curve_normal(u)
        binormal = np.cross(tangent, normal)
        return p + radius * (math.cos(v) * normal + math.sin(v) * binormal)