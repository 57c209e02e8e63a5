"""Tensor-product Bezier surface patches and their triangulation."""

from __future__ import annotations

import math
from functools import lru_cache
from itertools import product
from typing import Iterable, Sequence

import numpy as np

from vroom.mesh_data import MeshData, Vertex


@lru_cache(maxsize=None)
def factorial(n: int) -> int:
    """Return n!, memoised."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    return math.factorial(n)


@lru_cache(maxsize=None)
def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k), memoised."""
    if not 0 <= k <= n:
        raise ValueError(f"binomial coefficient needs 0 <= k <= n, got n={n}, k={k}")
    return factorial(n) // factorial(k) // factorial(n - k)


def bernstein(n: int, k: int, t: float) -> float:
    """Return the Bernstein basis polynomial b_{k,n}(t)."""
    return binomial(n, k) * t**k * (1.0 - t) ** (n - k)


def _basis(n: int, ts: Sequence[float]) -> np.ndarray:
    return np.array([[bernstein(n, k, t) for k in range(n + 1)] for t in ts], dtype=np.float64)


def _non_negative(name: str, value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _vec3(value: Iterable[float]) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


class Bezier:
    """A Bezier patch of given degrees, sampled at a given resolution."""

    def __init__(self, degree_u: int, degree_v: int, resolution_u: int, resolution_v: int) -> None:
        self._degree_u = _non_negative("degree_u", degree_u)
        self._degree_v = _non_negative("degree_v", degree_v)
        self._resolution_u = _non_negative("resolution_u", resolution_u)
        self._resolution_v = _non_negative("resolution_v", resolution_v)
        self._control_points = np.zeros(
            ((self._degree_u + 1) * (self._degree_v + 1), 3), dtype=np.float64
        )
        self._cache: MeshData | None = None

    @property
    def degree_u(self) -> int:
        return self._degree_u

    @property
    def degree_v(self) -> int:
        return self._degree_v

    @property
    def resolution_u(self) -> int:
        return self._resolution_u

    @property
    def resolution_v(self) -> int:
        return self._resolution_v

    def _flat_index(self, u: int, v: int) -> int:
        index = u * (self._degree_v + 1) + v
        if u < 0 or v < 0 or index >= len(self._control_points):
            raise IndexError(f"control point ({u}, {v}) is out of range")
        return index

    def set_control_point(self, u: int, v: int, p: Iterable[float]) -> None:
        self._control_points[self._flat_index(u, v)] = _vec3(p)
        self._cache = None

    def set_degrees(self, degree_u: int, degree_v: int) -> None:
        """Change the degrees; the stored control points are kept as they are."""
        self._degree_u = _non_negative("degree_u", degree_u)
        self._degree_v = _non_negative("degree_v", degree_v)
        self._cache = None

    def set_resolution(self, resolution_u: int, resolution_v: int) -> None:
        self._resolution_u = _non_negative("resolution_u", resolution_u)
        self._resolution_v = _non_negative("resolution_v", resolution_v)
        self._cache = None

    def control_point(self, u: int, v: int) -> np.ndarray:
        return self._control_points[self._flat_index(u, v)].copy()

    def _grid(self) -> np.ndarray:
        rows, cols = self._degree_u + 1, self._degree_v + 1
        if rows * cols > len(self._control_points):
            raise IndexError("not enough control points for the current degrees")
        return self._control_points[: rows * cols].reshape(rows, cols, 3)

    def _surface(self, us: Sequence[float], vs: Sequence[float]) -> np.ndarray:
        grid = self._grid()
        bu = _basis(self._degree_u, us)
        bv = _basis(self._degree_v, vs)
        return np.einsum("ai,bj,ijk->abk", bu, bv, grid)

    def evaluate(self, u: float, v: float) -> np.ndarray:
        """Return the surface point at parameters (u, v)."""
        return self._surface([u], [v])[0, 0]

    def polygonize(self) -> MeshData:
        """Return the triangulated patch, recomputed only after a change."""
        if self._cache is None:
            self._cache = self._compute_mesh()
        return self._cache

    def _compute_mesh(self) -> MeshData:
        steps_u = self._resolution_u - 1
        steps_v = self._resolution_v - 1
        if steps_u <= 0 or steps_v <= 0:
            return MeshData()

        us = [s / self._resolution_u for s in range(steps_u + 1)]
        vs = [s / self._resolution_v for s in range(steps_v + 1)]
        surface = self._surface(us, vs)

        vertices: list[Vertex] = []
        with np.errstate(invalid="ignore", divide="ignore"):
            for su, sv in product(range(steps_u), range(steps_v)):
                a = surface[su, sv]
                b = surface[su + 1, sv]
                c = surface[su + 1, sv + 1]
                d = surface[su, sv + 1]
                ac = c - a
                normal0 = _normalize(np.cross(b - a, ac))
                normal1 = _normalize(np.cross(ac, d - a))
                vertices += [
                    Vertex(a, normal0),
                    Vertex(b, normal0),
                    Vertex(c, normal0),
                    Vertex(a, normal1),
                    Vertex(c, normal1),
                    Vertex(d, normal1),
                ]
        return MeshData(vertices, range(len(vertices)))