# surfacegeom

Differential geometry of parametrized surfaces in three dimensions, together
with a few triangle and mesh helpers. Vectors and matrices are NumPy arrays.

## Modules

- `surfacegeom.differential`: `surface_normal`, `first_fundamental_form`,
  `second_fundamental_form`, `gaussian_curvature`, `christoffel_symbols`,
  `compute_eigenvectors` and `principal_curvatures`, plus central-difference
  derivatives (`derivative_midpoint`, `second_derivative_midpoint`,
  `mixed_derivative_midpoint`) and their surface forms
  (`approximate_tangent_u`, `approximate_tangent_v`, `approximate_x_uu`,
  `approximate_x_vv`, `approximate_x_uv`, all with step `STEP = 0.05`).
  It also defines `SquareSideConnectivity` (`NONE`, `NORMAL`, `REVERSED`),
  `ChristoffelSymbols` (2x2 blocks `x` and `y`), `PrincipalCurvatures`
  (`curvature` and `direction` pairs) and `Eigenvector`.
- `surfacegeom.basic_surfaces`: `Torus(r, R)`, `Sphere(r)`,
  `Cone(a, b, u_min, u_max)`, `Helicoid(u_min, u_max, v_min, v_max)`,
  `Pseudosphere(r)` and `Catenoid()`, each with closed-form `position`,
  `tangent_u`, `tangent_v`, `normal`, `christoffel_symbols`, `curvature` and
  `principal_curvatures`; `Catenoid` also has `first_fundamental_form` and
  `second_fundamental_form`. Each surface carries its parameter range
  (`u_min`, `u_max`, `v_min`, `v_max`) and how the sides of that rectangle are
  glued (`u_connectivity`, `v_connectivity`). The torus is also available
  as plain functions (`torus_position`, `torus_tangent_u`, ...).
- `surfacegeom.generated`: `GeneratedParametrization`, an abstract base class
  that derives tangents, second derivatives, the normal, both fundamental
  forms, Christoffel symbols, Gaussian and principal curvatures by finite
  differences from a single `position(u, v)` method; also
  `midpoint_derivatives`, `Derivatives` and `FundamentalForms`.
- `surfacegeom.generated_surfaces`: `KleinBottle`, `ProjectivePlane` (Boy's
  surface) and `Trefoil` (a tube around the trefoil knot), built on
  `GeneratedParametrization`, with `trefoil_curve`, `trefoil_curve_tangent`
  and `trefoil_curve_normal`.
- `surfacegeom.triangles`: `tri_center`, `tri_area` (the length of the edge
  cross product, i.e. twice the geometric area), `ray_tri_intersection`
  (returns a `RayTriIntersection` or `None`; hits behind the ray origin and on
  back faces are reported too), `barycentric_interpolate` and
  `uniform_random_point_on_tri`.
- `surfacegeom.picking`: `MeshIntersection`,
  `vector_in_tangent_space_basis`, `sort_intersections_by_distance_to_camera`,
  `check_if_point_got_grabbed` (grab distance 0.06) and
  `update_grabbed_point`, for picking and dragging points on a surface mesh.
- `surfacegeom.meshes`: `get_triangle` (three values looked up through an
  index buffer) and `matrix_multiply` (raises `ValueError` on mismatched
  shapes).
- `surfacegeom.sorting`: in-place `bubble_sort`, `selection_sort` and
  `insertion_sort` taking a `less_than(a, b)` function; each returns the list.

## Installation

```
pip install .
```

## Example

```python
from surfacegeom.basic_surfaces import Torus

torus = Torus(r=0.4, R=1.0)
print(torus.position(0.0, 0.0))
print(torus.normal(0.5, 1.0))
print(torus.principal_curvatures(0.5, 1.0).curvature)

symbols = torus.christoffel_symbols(0.5, 1.0)
print(symbols.x, symbols.y)
```

A surface defined only by its position gets every other quantity by finite
differences:

```python
import numpy as np
from surfacegeom.generated import GeneratedParametrization

class Paraboloid(GeneratedParametrization):
    def position(self, u, v):
        return np.array([u, v, u * u + v * v])

p = Paraboloid()
print(p.curvature(0.0, 0.0))
```

## What it does not do

The package computes geometry only. It does not build meshes from surfaces,
draw or render anything, or provide a command-line tool. Saddle-type surfaces
such as Enneper's surface, the hyperbolic paraboloid, the monkey saddle and
the Möbius strip are not included; any of them can be defined by subclassing
`GeneratedParametrization` with its `position`.

## Running the tests

```
pip install ".[test]"
pytest
```