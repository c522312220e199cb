import pytest

from chonk.blocks import Block, BlockID, Face, face_direction


def test_block_id_values_follow_declaration_order():
    assert BlockID(0) is BlockID.NONE
    assert BlockID(1) is BlockID.GRASS
    assert BlockID(8) is BlockID.LEAF
    assert [BlockID(i) for i in range(len(BlockID))] == list(BlockID)


def test_block_id_rejects_unknown_value():
    with pytest.raises(ValueError):
        BlockID(9)


def test_face_directions_fixed_by_source():
    assert face_direction(Face.FRONT) == (0, 0, -1)
    assert face_direction(Face.BACK) == (0, 0, 1)
    assert face_direction(Face.TOP) == (0, 1, 0)
    assert face_direction(Face.BOTTOM) == (0, -1, 0)


@pytest.mark.parametrize(
    "a, b",
    [(Face.FRONT, Face.BACK), (Face.LEFT, Face.RIGHT), (Face.TOP, Face.BOTTOM)],
)
def test_opposite_faces_cancel(a, b):
    summed = tuple(p + q for p, q in zip(face_direction(a), face_direction(b)))
    assert summed == (0, 0, 0)


def test_every_direction_is_unit_axis():
    for face in Face:
        direction = face_direction(face)
        assert sum(abs(c) for c in direction) == 1


def test_face_direction_accepts_int():
    assert face_direction(3) == face_direction(Face.RIGHT)


def test_face_direction_rejects_unknown_face():
    with pytest.raises(ValueError):
        face_direction(6)


def test_block_defaults_to_none():
    block = Block()
    assert block.id is BlockID.NONE
    assert (block.top_tex_id, block.side_tex_id, block.bottom_tex_id) == (0, 0, 0)