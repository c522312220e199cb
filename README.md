# chonk

A small voxel renderer. A chunk of 16 × 16 × 16 blocks is turned into an
indexed triangle mesh textured from a 5 × 5 tile atlas, drawn with OpenGL
through pyglet, and viewed with a free-flying perspective camera.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
chonk
```

Options:

- `--width N`, `--height N`: window size in pixels (default 1280 × 720; both
  must be positive)

The window asks for an OpenGL 4.6 context. At start-up it reads these files,
relative to the working directory:

- `assets/shaders/Default.vert.glsl` and `assets/shaders/Default.frag.glsl`
- `assets/textures/TextureAtlas.png` (an RGB or RGBA image)

A missing or unreadable shader file raises `chonk.shader.ShaderError`; a
missing or unusable image raises `chonk.texture.TextureError`. The shader
program must declare the uniforms `u_Texture0` (sampler) and `u_MVP` (mat4);
the chunk vertices feed attribute 0 (position, 3 floats) and attribute 1
(atlas UV, 2 floats).

Controls:

- `W` / `S`: move forward and back
- `A` / `D`: move left and right
- `E` / `Q`: move up and down
- mouse: look around (the first movement is ignored; pitch is held within
  ±89.9°)
- `F`: capture or release the mouse cursor
- `X`: freeze or release camera input; the cursor is captured exactly while
  the camera is free

The window title shows the current and smoothed frames per second and frame
time in milliseconds.

## Using it as a library

The parts below need no window or GL context:

- `chonk.blocks`: `BlockID`, `Face`, `Block` and `face_direction(face)`, the
  outward integer normal of a cube face.
- `chonk.geometry`: 4 × 4 numpy matrices for column vectors — `translate`,
  `rotate` (radians about an axis), `scale`, `look_at`, `perspective` — and
  `Transform`, whose `matrix()` is translation × X/Y/Z rotation × scale.
- `chonk.camera`: `Camera(fov, near_plane, far_plane, width, height)` with
  `on_resize`, `on_update(dt, pressed)` taking a set of `MoveKey` values,
  `on_mouse_motion(xrel, yrel)`, and the `view`, `projection` and
  `view_projection` matrices. Setting `position`, `forward`, `fov`,
  `near_plane` or `far_plane` recomputes the matrices.
- `chonk.chunk`: `Chunk`, `FaceTemplate`, `block_texture_ids(block_id)` giving
  the (top, side, bottom) atlas tiles, and `atlas_uv(tex_id, uv)`.
- `chonk.mesh`: `Mesh`, `TextureID` and `cube_mesh(position)`, a unit cube
  with position, UV and face-id attributes. Its `upload`, `bind` and
  `unbind` need a current GL context.

```python
from chonk.chunk import Chunk

chunk = Chunk((0.0, 0.0, 0.0))
print(chunk.block_at(0, 0, 0))   # Block(id=<BlockID.GRASS: 1>, ...)
print(chunk.vertex_count)        # 98304: 4096 blocks × 6 faces × 4 vertices
print(len(chunk.indices))        # 147456: two triangles per face
```

`chunk.vertices` is a flat float32 array of `x, y, z, u, v` per vertex and
`chunk.indices` a uint32 array. `block_at` raises `IndexError` outside the
chunk.

`chonk.shader.Shader`, `chonk.texture.Texture` and `chonk.scene.Scene` read
their files when created but only touch OpenGL when first bound or drawn.
`Scene.chunk_mvps()` returns each chunk with its model-view-projection matrix
without any GL calls.

## What it does not do

- There is no world generation: every chunk is filled with grass, and the
  viewer shows a single chunk.
- Every face of every block is meshed; hidden faces between neighbouring
  blocks are not culled.
- No shader or texture files are shipped with the package; they must be
  supplied in `assets/`.
- There is no saving or loading of worlds and no block editing.