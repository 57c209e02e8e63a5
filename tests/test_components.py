import math

import numpy as np
import pytest

from vroom.components import NameComponent, PointLightComponent, TransformComponent


def test_default_transform_is_identity():
    t = TransformComponent()
    assert np.allclose(t.transform, np.eye(4))
    assert np.allclose(t.scale, (1.0, 1.0, 1.0))


def test_translation_lands_in_last_column():
    t = TransformComponent()
    t.position = (1.0, 2.0, 3.0)
    assert np.allclose(t.transform[:3, 3], (1.0, 2.0, 3.0))
    assert np.allclose(t.transform[:3, :3], np.eye(3))


def test_scale_on_diagonal_without_rotation():
    t = TransformComponent(scale=(2.0, 3.0, 4.0))
    assert np.allclose(np.diag(t.transform)[:3], (2.0, 3.0, 4.0))


def test_rotation_about_z_maps_x_to_y():
    t = TransformComponent(rotation=(0.0, 0.0, math.pi / 2))
    result = t.transform @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(result, (0.0, 1.0, 0.0, 1.0), atol=1e-6)


def test_rotation_is_orthonormal_and_scale_gives_determinant():
    scale = (2.0, 3.0, 0.5)
    t = TransformComponent(rotation=(0.3, -1.1, 2.4), scale=scale)
    linear = t.transform[:3, :3].astype(np.float64)
    assert np.isclose(np.linalg.det(linear), np.prod(scale), rtol=1e-5)
    unscaled = TransformComponent(rotation=(0.3, -1.1, 2.4)).transform[:3, :3]
    assert np.allclose(unscaled.T @ unscaled, np.eye(3), atol=1e-6)


def test_cache_invalidated_on_change():
    t = TransformComponent()
    first = t.transform
    assert t.transform is first
    t.position = (5.0, 0.0, 0.0)
    assert np.allclose(t.transform[:3, 3], (5.0, 0.0, 0.0))


def test_transform_is_read_only():
    t = TransformComponent()
    matrix = t.transform
    assert matrix.flags.writeable is False
    with pytest.raises(ValueError):
        matrix[0, 0] = 2.0
    assert t.transform[0, 0] == 1.0


def test_invalid_vector_rejected():
    with pytest.raises(ValueError):
        TransformComponent(position=(1.0, 2.0))


def test_point_light_defaults():
    light = PointLightComponent()
    assert np.allclose(light.color, (1.0, 1.0, 1.0))
    assert light.intensity == 1.0
    assert light.radius == 1.0


def test_name_component():
    assert NameComponent().name == ""
    assert NameComponent("TestEntity").name == "TestEntity"