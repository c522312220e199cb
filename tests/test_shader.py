import pytest

from chonk.shader import (
    GL_FRAGMENT_SHADER,
    GL_GEOMETRY_SHADER,
    GL_INVALID_ENUM,
    GL_VERTEX_SHADER,
    Shader,
    ShaderError,
    ShaderType,
    gl_shader_type,
    read_source,
)

VERTEX_SOURCE = "#version 460 core\nvoid main() { gl_Position = vec4(0.0); }\n"
FRAGMENT_SOURCE = "#version 460 core\nout vec4 c;\nvoid main() { c = vec4(1.0); }\n"


@pytest.fixture
def shader_files(tmp_path):
    vert = tmp_path / "Default.vert.glsl"
    frag = tmp_path / "Default.frag.glsl"
    vert.write_text(VERTEX_SOURCE)
    frag.write_text(FRAGMENT_SOURCE)
    return {str(vert): ShaderType.VERTEX, str(frag): ShaderType.FRAGMENT}


def test_shader_type_values():
    assert ShaderType(0) is ShaderType.UNKNOWN
    assert ShaderType(1) is ShaderType.VERTEX
    assert ShaderType(2) is ShaderType.FRAGMENT
    assert ShaderType(3) is ShaderType.GEOMETRY


@pytest.mark.parametrize(
    "shader_type, expected",
    [
        (ShaderType.VERTEX, GL_VERTEX_SHADER),
        (ShaderType.FRAGMENT, GL_FRAGMENT_SHADER),
        (ShaderType.GEOMETRY, GL_GEOMETRY_SHADER),
        (ShaderType.UNKNOWN, GL_INVALID_ENUM),
    ],
)
def test_gl_shader_type(shader_type, expected):
    assert gl_shader_type(shader_type) == expected


def test_gl_shader_type_accepts_plain_ints():
    assert gl_shader_type(1) == gl_shader_type(ShaderType.VERTEX)


def test_gl_shader_type_constants_are_the_gl_enums():
    assert gl_shader_type(ShaderType.VERTEX) == 0x8B31
    assert gl_shader_type(ShaderType.FRAGMENT) == 0x8B30


def test_read_source_returns_file_text(tmp_path):
    path = tmp_path / "a.glsl"
    path.write_text(VERTEX_SOURCE)
    assert read_source(path) == VERTEX_SOURCE


def test_read_source_missing_file(tmp_path):
    missing = tmp_path / "missing.glsl"
    with pytest.raises(ShaderError, match="missing.glsl"):
        read_source(missing)


def test_shader_keeps_each_stage(shader_files):
    shader = Shader(shader_files)
    by_type = {stage.type: stage for stage in shader.stages}
    assert by_type[ShaderType.VERTEX].source == VERTEX_SOURCE
    assert by_type[ShaderType.FRAGMENT].source == FRAGMENT_SOURCE
    assert {stage.path for stage in shader.stages} == set(shader_files)


def test_shader_is_not_linked_before_use(shader_files):
    assert Shader(shader_files).program is None


def test_shader_missing_stage_file(tmp_path, shader_files):
    files = dict(shader_files)
    files[str(tmp_path / "nope.glsl")] = ShaderType.GEOMETRY
    with pytest.raises(ShaderError):
        Shader(files)


def test_shader_rejects_unknown_stage(tmp_path, shader_files):
    path = next(iter(shader_files))
    with pytest.raises(ShaderError):
        Shader({path: ShaderType.UNKNOWN})


def test_shader_needs_a_stage():
    with pytest.raises(ShaderError):
        Shader({})


def test_set_uniform_mat4_checks_shape(shader_files):
    shader = Shader(shader_files)
    with pytest.raises(ValueError):
        shader.set_uniform_mat4("u_MVP", [[1.0, 0.0], [0.0, 1.0]])