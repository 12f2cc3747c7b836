# glsandbox

Building blocks for small OpenGL 3.3 rendering scenes, on top of `pyglet`
and `numpy`: vertex meshes, generated shapes, light sources, a fly-through
camera with matrix helpers, shader programs, textures, and a stack of
scenes that can be switched while drawing.

## Installing

```
pip install .
```

A graphics driver with OpenGL 3.3 core profile support is needed to draw
anything. The geometry, light, camera and scene-stack code works without a
GL context.

## Modules

- `glsandbox.mesh` – `Vertex` (position, texture coordinates, normal) and
  `Mesh`, an indexed triangle mesh. GPU buffers are created on the first
  `render()`; `index_count`, `vertex_data` and `index_data` expose the data.
- `glsandbox.shapes` – `Polygon` (a regular polygon drawn as a triangle fan)
  and `Sphere` (a UV sphere with a vertex at each pole).
- `glsandbox.lights` – `Light`, `DirectionalLight`, `PointLight` and
  `SpotLight` (whose `calculation_edge` is the cosine of its cone angle, and
  which `set_ray` moves and re-aims), plus `calculate_average_normals` for
  smooth per-vertex normals.
- `glsandbox.camera` – `Camera`, moved with W/A/S/D through
  `key_control(window, dt)` and turned with `mouse_control` (pitch kept
  within ±89°), and the 4×4 helpers `look_at`, `perspective`, `ortho`,
  `translate`, `rotate` (radians) and `scale`. Matrices act on column
  vectors: `matrix @ vector`.
- `glsandbox.window` – `Window`, a pyglet window that tracks held keys
  (`get_key`, `reset_key`) and mouse movement (`take_x_change`,
  `take_y_change`), with the `Key` and `KeyAction` enums.
- `glsandbox.shader` – `Shader` with uniform setters (`set_int`,
  `set_float`, `set_vec3`, `set_vec4`, `set_mat4`) and light uploads (at
  most three point lights and three spot lights); `read_source`; and the
  pure functions `light_uniforms`, `directional_light_uniforms`,
  `point_light_uniforms` and `spot_light_uniforms`, which return the uniform
  names and values as a dict. Failures raise `ShaderError`.
- `glsandbox.texture` – `Texture` and `TextureFormat`; an unreadable image
  raises `TextureError`.
- `glsandbox.scene_manager` – `Scene`, `SceneManager` and `SceneData`.
- `glsandbox.scenes.basic` – `ColorScene`, `CircleScene`,
  `ShaderCircleScene` and `PyramidInterpolationScene`.
- `glsandbox.scenes.textured` – `CameraScene` and `TextureScene`.

## Scene changes are deferred

`SceneManager.add_scene` and `SceneManager.erase_scene` only record the
request; the next `SceneManager.update` applies it, so a scene can ask to
be replaced while it is being drawn.

```python
from glsandbox.scene_manager import Scene, SceneManager

class Blank(Scene):
    pass

manager = SceneManager()
manager.add_scene(Blank(), True)
manager.update()
print(type(manager.current()).__name__)   # Blank
```

## The scenes

Each scene takes a `SceneData` (a `Window` and a `SceneManager`). Scenes
load their shaders from `res/shaders/` and textures from `res/textures/`
relative to the current directory; these files are not shipped with the
package.

`Scene.draw_ui(ui)` expects an object with the methods `button(label)`,
`checkbox(label, value)`, `slider_int(label, value, low, high)`,
`color_edit3(label, color)` and `text(message)`, where the value-editing
calls return a `(changed, new_value)` pair. In `CameraScene` and
`TextureScene`, Esc leaves camera mode and frees the cursor.

## What the package does not do

There is no command to start and no menu: the package does not open a
window with a scene list or run a frame loop for you, and it ships no UI
toolkit to pass to `draw_ui`. Lighting scenes (ambient, diffuse, specular,
sphere, point and spot lights), materials and model loading are not
included; the light classes and shader uniform helpers are there to build
such scenes yourself.

## Tests

```
pip install .[test]
pytest
```