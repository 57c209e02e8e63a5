import numpy as np
import pytest

from vroom.mesh_data import MeshData, Vertex


def _triangle():
    return [
        Vertex(position=(0.0, 0.0, 0.0)),
        Vertex(position=(1.0, 0.0, 0.0)),
        Vertex(position=(1.0, 1.0, 0.0)),
    ]


def test_vertex_defaults_are_zero():
    v = Vertex()
    assert np.array_equal(v.position, np.zeros(3))
    assert np.array_equal(v.normal, np.zeros(3))
    assert np.array_equal(v.tex_coords, np.zeros(2))


def test_vertex_equality_and_immutability():
    a = Vertex(position=(1, 2, 3), normal=(0, 1, 0), tex_coords=(0.5, 0.5))
    b = Vertex(position=(1, 2, 3), normal=(0, 1, 0), tex_coords=(0.5, 0.5))
    assert a == b
    assert a != Vertex(position=(1, 2, 4))
    with pytest.raises(ValueError):
        a.position[0] = 9.0


def test_vertex_rejects_wrong_size():
    with pytest.raises(ValueError):
        Vertex(position=(1.0, 2.0))


def test_counts():
    vertices = _triangle() * 2
    mesh = MeshData(vertices, [0, 1, 2, 3, 4, 5])
    assert mesh.vertex_count == len(vertices)
    assert mesh.index_count == 6
    assert mesh.triangle_count == mesh.index_count // 3


def test_empty_mesh():
    mesh = MeshData()
    assert mesh.vertex_count == 0
    assert mesh.triangle_count == 0


def test_mesh_copies_input_lists():
    vertices = _triangle()
    indices = [0, 1, 2]
    mesh = MeshData(vertices, indices)
    vertices.append(Vertex())
    indices.append(0)
    assert mesh.vertex_count == 3
    assert mesh.indices == [0, 1, 2]


def test_mesh_equality():
    assert MeshData(_triangle(), [0, 1, 2]) == MeshData(_triangle(), [0, 1, 2])
    assert MeshData(_triangle(), [0, 1, 2]) != MeshData(_triangle(), [2, 1, 0])