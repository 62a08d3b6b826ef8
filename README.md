# voxalite

A simple voxel engine. It opens an OpenGL 4.6 window with pyglet, draws a
20 × 20 floor of textured cubes lit by an ambient, a directional and an
orbiting point light, and lets you walk around it with a free-look camera.

## Installing

```
pip install .
```

To also get the test dependencies:

```
pip install ".[test]"
```

## Running

```
voxalite
voxalite --assets path/to/assets
```

By default the assets are loaded from `../assets/`, relative to the
directory you start it from; `--assets` names another directory. It must
hold:

- `simple.vert`: the vertex shader
- `simple.frag`: the fragment shader
- `wooden_crate.png`: a 256×256 PNG with four channels (RGBA)

If the window, a shader, the program or the texture cannot be set up, the
error message and the stack where it arose are printed to standard error
and the command exits.

### Controls

| Input  | Action                   |
|--------|--------------------------|
| W / S  | move forward / backward  |
| A / D  | strafe left / right      |
| Mouse  | look around (yaw, pitch) |
| Esc    | quit                     |

Closing the window also quits. Only the letter keys and Escape are turned
into key events; other keys are ignored.

## Using the library

The maths types work without a window or a GL context:

```python
import math

from voxalite.camera import Camera
from voxalite.matrix4 import Matrix4
from voxalite.vector3 import Vector3

camera = Camera(
    Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
    math.pi / 4, 800.0, 600.0, 0.1, 100.0,
)
camera.adjust_yaw(0.1)
camera.translate(camera.right() * 0.5)
print(camera.position, camera.direction)

model = Matrix4.from_translation(Vector3(1.0, 2.0, 3.0))
print(model)
```

The modules:

- `voxalite.vector3`: `Vector3` (`normalized`, `cross`, `+`, `-`, `*`,
  unary `-`) and `Color`.
- `voxalite.matrix4`: column-major `Matrix4` with `from_translation`,
  `look_at`, `perspective` and multiplication.
- `voxalite.camera`: `Camera` with `right`, `adjust_yaw`, `adjust_pitch`,
  `translate` and the `view` and `projection` matrices.
- `voxalite.events`: `Key`, `KeyState`, `KeyEvent`, `MouseEvent`,
  `StopEvent`.
- `voxalite.errors`: `EngineError`, which keeps the stack from where it
  was made (`stack_trace()`); `ensure`, which raises it when a condition
  does not hold; and the `debug`, `info`, `warn`, `fatal` and `log`
  console loggers.
- `voxalite.resources`: `ResourceLoader` with `load_string` and
  `load_binary`.
- `voxalite.buffers`: `Handle`, `Buffer` and `BufferWriter`.
- `voxalite.geometry`: `UV`, `VertexData`, the cube data, `pack_vertices`,
  `pack_indices` and `Mesh`.
- `voxalite.graphics`: `ShaderType`, `Shader`, `Material`, `Texture`,
  `Sampler` and `decode_texture`.
- `voxalite.scene`: `Entity`, `DirectionalLight`, `PointLight`, `Scene`.
- `voxalite.renderer`: `Renderer`, `pack_camera_block`,
  `pack_light_block`.
- `voxalite.window`: `Window` and `translate_key`.
- `voxalite.app`: `InputState`, `build_entities` and `main`.

The GPU-backed classes (`Buffer`, `Mesh`, `Shader`, `Material`, `Texture`,
`Sampler`, `Renderer`, `Window`) take an optional `gl` argument; without
it they make OpenGL calls through pyglet and need a current GL 4.6
context.

## What it does not do

The world is a fixed floor of cubes: there is no terrain generation, no
placing or removing blocks, no collision and no saving. Mouse look follows
the pointer while it moves over the window; the pointer is not captured.

## Tests

```
pytest
```