"""Named shader uniform values grouped by type."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator

import numpy as np


class UniformKind(Enum):
    """Uniform types, in the order they are applied to a shader."""

    MAT4 = "mat4"
    VEC4 = "vec4"
    VEC3 = "vec3"
    VEC2 = "vec2"
    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    TEXTURE = "texture"


def _as_array(value: Iterable[Any], shape: tuple[int, ...]) -> np.ndarray:
    array = np.array(value, dtype=np.float32)
    if array.shape != shape:
        raise ValueError(f"expected shape {shape}, got {array.shape}")
    return array


class MaterialData:
    """Holds uniform values; setting a name again replaces its value."""

    def __init__(self) -> None:
        self._uniforms: dict[UniformKind, dict[str, Any]] = {kind: {} for kind in UniformKind}

    def set_mat4_uniform(self, name: str, value: Iterable[Any]) -> None:
        self._uniforms[UniformKind.MAT4][name] = _as_array(value, (4, 4))

    def set_vec4_uniform(self, name: str, value: Iterable[float]) -> None:
        self._uniforms[UniformKind.VEC4][name] = _as_array(value, (4,))

    def set_vec3_uniform(self, name: str, value: Iterable[float]) -> None:
        self._uniforms[UniformKind.VEC3][name] = _as_array(value, (3,))

    def set_vec2_uniform(self, name: str, value: Iterable[float]) -> None:
        self._uniforms[UniformKind.VEC2][name] = _as_array(value, (2,))

    def set_float_uniform(self, name: str, value: float) -> None:
        self._uniforms[UniformKind.FLOAT][name] = float(value)

    def set_int_uniform(self, name: str, value: int) -> None:
        self._uniforms[UniformKind.INT][name] = int(value)

    def set_bool_uniform(self, name: str, value: bool) -> None:
        self._uniforms[UniformKind.BOOL][name] = bool(value)

    def set_texture_uniform(self, name: str, value: int) -> None:
        value = int(value)
        if value < 0:
            raise ValueError(f"texture unit must be non-negative, got {value}")
        self._uniforms[UniformKind.TEXTURE][name] = value

    def iter_uniforms(self) -> Iterator[tuple[UniformKind, str, Any]]:
        """Yield (kind, name, value) for every uniform, in application order."""
        for kind, table in self._uniforms.items():
            for name, value in table.items():
                yield kind, name, value

    def __len__(self) -> int:
        return sum(len(table) for table in self._uniforms.values())