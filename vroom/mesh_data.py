"""Vertices and indexed triangle meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


def _frozen_vector(value: Iterable[float], size: int) -> np.ndarray:
    array = np.array(value, dtype=np.float32)
    if array.shape != (size,):
        raise ValueError(f"expected a vector of {size} components, got shape {array.shape}")
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class Vertex:
    """A mesh vertex: position, normal and texture coordinates."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _frozen_vector(self.position, 3))
        object.__setattr__(self, "normal", _frozen_vector(self.normal, 3))
        object.__setattr__(self, "tex_coords", _frozen_vector(self.tex_coords, 2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.normal, other.normal)
            and np.array_equal(self.tex_coords, other.tex_coords)
        )


@dataclass
class MeshData:
    """Vertices and the triangle indices into them."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = [int(i) for i in self.indices]

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return self.index_count // 3

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)