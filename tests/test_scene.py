import numpy as np
import pytest

from chonk.blocks import BlockID
from chonk.camera import Camera
from chonk.chunk import Chunk
from chonk.scene import ChunkProcess, Process, Scene


@pytest.fixture(scope="module")
def origin_chunk():
    return Chunk()


@pytest.fixture(scope="module")
def moved_chunk():
    return Chunk((16.0, 0.0, 32.0))


def make_scene():
    camera = Camera(45.0, 0.01, 100.0, 1280, 720)
    return Scene(camera, shader=object(), texture=object())


def test_push_chunk_keeps_order(origin_chunk, moved_chunk):
    scene = make_scene()
    scene.push_chunk(origin_chunk)
    scene.push_chunk(moved_chunk)
    assert scene.chunks == (origin_chunk, moved_chunk)


def test_new_scene_has_no_chunks():
    scene = make_scene()
    assert scene.chunks == ()
    assert scene.chunk_mvps() == []


def test_chunk_at_origin_uses_view_projection(origin_chunk):
    scene = make_scene()
    scene.push_chunk(origin_chunk)
    [(chunk, mvp)] = scene.chunk_mvps()
    assert chunk is origin_chunk
    np.testing.assert_allclose(mvp, scene.camera.view_projection, rtol=1e-6)


def test_mvp_places_chunk_origin_at_chunk_position(moved_chunk):
    scene = make_scene()
    scene.push_chunk(moved_chunk)
    [(_, mvp)] = scene.chunk_mvps()
    world = np.append(moved_chunk.position.astype(np.float64), 1.0)
    expected = scene.camera.view_projection @ world
    np.testing.assert_allclose(mvp @ np.array([0.0, 0.0, 0.0, 1.0]), expected, rtol=1e-5)


def test_mvps_follow_camera(origin_chunk):
    scene = make_scene()
    scene.push_chunk(origin_chunk)
    [(_, before)] = scene.chunk_mvps()
    scene.camera.position = (3.0, 2.0, -8.0)
    [(_, after)] = scene.chunk_mvps()
    assert not np.allclose(before, after)
    np.testing.assert_allclose(after, scene.camera.view_projection, rtol=1e-6)


def test_chunk_process_owns_grass_chunk():
    process = ChunkProcess()
    assert isinstance(process, Process)
    assert process.chunk.block_at(0, 0, 0).id == BlockID.GRASS
    assert process.chunk.block_at(15, 15, 15).id == BlockID.GRASS