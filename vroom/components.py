"""Scene components: transform, point light and name."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


def _vec3(value: Iterable[float]) -> np.ndarray:
    array = np.array(value, dtype=np.float32)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    array.flags.writeable = False
    return array


def _rotation(angle: float, axis: int) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    i, j = [(1, 2), (2, 0), (0, 1)][axis]
    m[i, i] = c
    m[i, j] = -s
    m[j, i] = s
    m[j, j] = c
    return m


class TransformComponent:
    """Position, Euler rotation (radians) and scale, with a cached matrix."""

    def __init__(
        self,
        position: Iterable[float] = (0.0, 0.0, 0.0),
        rotation: Iterable[float] = (0.0, 0.0, 0.0),
        scale: Iterable[float] = (1.0, 1.0, 1.0),
    ) -> None:
        self._position = _vec3(position)
        self._rotation = _vec3(rotation)
        self._scale = _vec3(scale)
        self._transform: np.ndarray | None = None

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _vec3(value)
        self._transform = None

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Iterable[float]) -> None:
        self._rotation = _vec3(value)
        self._transform = None

    @property
    def scale(self) -> np.ndarray:
        return self._scale

    @scale.setter
    def scale(self, value: Iterable[float]) -> None:
        self._scale = _vec3(value)
        self._transform = None

    @property
    def transform(self) -> np.ndarray:
        """The 4x4 model matrix: translate, rotate about X, Y, Z, then scale."""
        if self._transform is None:
            translation = np.eye(4)
            translation[:3, 3] = self._position
            rx, ry, rz = (float(a) for a in self._rotation)
            matrix = (
                translation
                @ _rotation(rx, 0)
                @ _rotation(ry, 1)
                @ _rotation(rz, 2)
                @ np.diag([*self._scale, 1.0])
            ).astype(np.float32)
            matrix.flags.writeable = False
            self._transform = matrix
        return self._transform


@dataclass
class PointLightComponent:
    color: np.ndarray = field(default_factory=lambda: np.ones(3, dtype=np.float32))
    intensity: float = 1.0
    radius: float = 1.0


@dataclass
class NameComponent:
    name: str = ""