import numpy as np
import pytest

from chonk.mesh import (
    CUBE_INDICES,
    CUBE_VERTICES,
    VERTEX_STRIDE,
    Mesh,
    TextureID,
    cube_mesh,
)


def test_cube_has_four_vertices_and_two_triangles_per_face():
    mesh = cube_mesh()
    assert mesh.vertex_count() == 24
    assert len(mesh.indices) == 36


def test_cube_indices_stay_within_vertices():
    mesh = cube_mesh()
    assert int(mesh.indices.max()) < mesh.vertex_count()
    assert set(mesh.indices.tolist()) == set(range(mesh.vertex_count()))


def test_cube_first_vertex_matches_data():
    mesh = cube_mesh()
    first = mesh.vertices[:VERTEX_STRIDE].tolist()
    assert first == [-0.5, -0.5, 0.5, 0.0, 0.0, 1.0]


def test_cube_face_ids_are_top_side_bottom():
    rows = cube_mesh().vertices.reshape(-1, VERTEX_STRIDE)
    face_ids = rows[:, 5]
    assert set(face_ids[16:20].tolist()) == {0.0}
    assert set(face_ids[20:24].tolist()) == {2.0}
    assert set(face_ids[:16].tolist()) == {1.0}


def test_cube_position_is_kept_apart_from_vertices():
    mesh = cube_mesh((1.0, 2.0, 3.0))
    assert mesh.position.tolist() == [1.0, 2.0, 3.0]
    np.testing.assert_array_equal(
        mesh.vertices, np.asarray(CUBE_VERTICES, dtype=np.float32)
    )


def test_default_position_is_origin():
    mesh = Mesh(CUBE_VERTICES, CUBE_INDICES)
    assert mesh.position.tolist() == [0.0, 0.0, 0.0]


def test_texture_id_defaults_to_tile_zero():
    mesh = cube_mesh()
    assert mesh.texture_id == TextureID(0, 0, 0)


def test_mesh_copies_its_input():
    vertices = list(CUBE_VERTICES)
    mesh = Mesh(vertices, CUBE_INDICES)
    vertices[0] = 100.0
    assert mesh.vertices[0] == CUBE_VERTICES[0]


def test_vertex_data_must_fill_whole_vertices():
    with pytest.raises(ValueError):
        Mesh([0.0] * (VERTEX_STRIDE + 1), [0])


def test_index_past_last_vertex_is_rejected():
    with pytest.raises(ValueError):
        Mesh([0.0] * VERTEX_STRIDE, [0, 1])


def test_new_mesh_is_not_uploaded():
    assert cube_mesh().uploaded is False