# glcube

A small 3D scene toolkit built around a spinning cube with one colour on each face. It has
only the standard library as a dependency.

## Modules

- `glcube.linalg`: immutable `Vec4` and `Mat4` types.
  - `Vec4` has `normalized`, `scaled`, `+`, `-`, `cross`, `dot` and `format`.
  - `Mat4` has `identity`, `rows`, indexing by `m[row, col]`, `@` with a matrix or a
    vector, `transform`, `determinant`, `inverse` and `transpose`. `inverse` raises
    `ValueError` when the matrix is singular.
  - Builder functions: `translation`, `perspective_right_handed`,
    `perspective_left_handed`, `orthographic`, `euler_rotation`, `euler_rotation_xyz`,
    `quaternion_rotation` and `view`. Each one writes its cells over an optional `base`
    matrix, which is the identity by default.
  - Helper functions: `radian`, `imod` and `is_approx_equal`.
- `glcube.camera`: `Camera(width, height)` keeps its position, its `front`/`up`/`right`
  basis and a `view` matrix.
  - `process_keyboard(keys, speed)` moves the camera along the first held `Key`, checked
    in the order `FORWARD`, `BACKWARD`, `RIGHT`, `LEFT`.
  - `process_mouse(x, y, left_pressed)` turns the camera during a left-button drag. The
    accumulated angles are clamped to ±90 degrees. It returns `True` when the camera
    turned.
- `glcube.mesh`: the ready-made meshes `square()`, `cube()` and `arrow()`.
  - A `Mesh` holds interleaved vertices, indices, a stride and vertex attributes.
  - `vertex_count()` returns the number of vertices.
  - `draw(primitive)` returns a `DrawCall`. For an indexed mesh the call counts indices,
    and `Primitive.LINES` gives it a line width of 3.0.
- `glcube.shader`: `read_file` returns the text of a file and raises `ShaderError` if the
  file cannot be opened.
  - `Shader.load(vertex_path, fragment_path)` reads both stages and rejects an empty
    source.
  - `set_matrix4_uniform(name, mat)` stores a matrix for a uniform that one of the stages
    declares. It returns `False` when no stage declares that uniform.
  - `uniform(name)` returns the stored matrix.
  - `clear()` deletes the program.
- `glcube.render`: `RenderContext(width, height, window_name)` with `aspect_ratio()`,
  and `Scene(context, shader)`.
  - Each call to `Scene.frame(keys, mouse)` applies the input and updates the
    `projectionM`, `modelM` and `rotM` uniforms. It returns a `Frame` with the clear
    colour, the depth-test flag, the uniforms and the draw calls for the cube (triangles)
    and the arrows (lines).
- `glcube.containers`: `Stack` and `LinkedList`.
  - `Stack(capacity=512)` holds fewer than `capacity` items. It raises `OverflowError`
    when it is full and `IndexError` when you pop it empty.
  - `LinkedList` is singly linked and has `append`, `remove`, `insert_after`, iteration
    and `len`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
import math
from glcube.linalg import Mat4, Vec4, quaternion_rotation, translation

model = translation(0.0, 0.0, -1.0, Mat4.identity())
spin = quaternion_rotation(math.pi / 6, Vec4(1.0, 0.0, 0.0, 0.0), Mat4.identity())
point = (model @ spin).transform(Vec4(0.5, 0.5, 0.5, 1.0))
print(point.format())
```

```python
from glcube.camera import Camera, Key

camera = Camera(800, 600)
camera.process_keyboard({Key.FORWARD}, 0.05)
print(camera.view.format())
```

## Command line

```
glcube --vertex path/to/shader.vs --fragment path/to/shader.fs --frames 3 --keys w
```

The command loads the two shader sources and runs the scene for `--frames` frames. It
prints the camera's view matrix after each frame.

| Option | Default | Meaning |
| --- | --- | --- |
| `--width` | 800 | Window width. |
| `--height` | 600 | Window height. |
| `--name` | `glcube` | Window name. |
| `--frames` | 1 | Number of frames to run. |
| `--keys` | none | Letters from `w`, `a`, `s`, `d` held on every frame. |
| `--vertex` | `src/render/shader/GLSL/square.vs` | Vertex shader source. |
| `--fragment` | `src/render/shader/GLSL/square.fs` | Fragment shader source. |

If a shader file cannot be read or is empty, the command prints the error and exits with
status 1.

## What it does not do

- It opens no window and does no GPU drawing. A frame is returned as a `Frame` that
  describes what to draw, and uniform values are only stored on the `Shader` object.
- It does not compile or validate GLSL. It only reads the sources and finds the uniform
  names they declare.
- No shader files are included. You supply them yourself.