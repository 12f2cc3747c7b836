"""Flat demo scenes: clear colour, polygon, fragment-shader art and pyramids."""

from __future__ import annotations

import math

import numpy as np

from glsandbox.camera import ortho, perspective, rotate, scale, translate
from glsandbox.mesh import Mesh, Vertex
from glsandbox.scene_manager import Scene, SceneData
from glsandbox.shader import Shader
from glsandbox.shapes import Polygon

PYRAMID_INDICES = (0, 3, 1, 1, 3, 2, 2, 3, 0, 0, 1, 2)
PYRAMID_POSITIONS = (
    (-1.0, -1.0, 0.0),
    (0.0, -1.0, 1.0),
    (1.0, -1.0, 0.0),
    (0.0, 1.0, 0.0),
)
FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0

SHADER_PRESETS = {
    "Circle": ("res/shaders/CircleShader.frag", False),
    "Heart": ("res/shaders/Heart.frag", False),
    "Face": ("res/shaders/Face.frag", False),
    "Colorful Heart": ("res/shaders/ColorfulHeart.frag", True),
    "TV Noise": ("res/shaders/TVNoise.frag", True),
}

_PYRAMID_SCALE = (0.5, 0.5, 1.0)


def _clear(red: float = 0.0, green: float = 0.0, blue: float = 0.0) -> None:
    from pyglet import gl

    gl.glClearColor(red, green, blue, 1.0)
    gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)


def _ensure_program(shader: Shader, vertex_path: str, fragment_path: str) -> None:
    if not shader.program:
        shader.create_from_file(vertex_path, fragment_path)


def _spin_model(x: float, angle_degrees: float, factors=_PYRAMID_SCALE) -> np.ndarray:
    """Model matrix placed at (x, 0, -2.5), turned about Y, optionally scaled."""
    model = translate(np.identity(4), (x, 0.0, -2.5))
    model = rotate(model, math.radians(angle_degrees), (0.0, 1.0, 0.0))
    return model if factors is None else scale(model, factors)


def _advance(rotation: int) -> int:
    """Step a rotation counter by one degree, wrapping after a full turn."""
    if rotation >= 360:
        rotation -= 360
    return rotation + 1


def _pyramid_meshes(tex_coords=None) -> list[Mesh]:
    coords = tex_coords or ((0.0, 0.0),) * len(PYRAMID_POSITIONS)
    return [
        Mesh([Vertex(p, t) for p, t in zip(PYRAMID_POSITIONS, coords)], PYRAMID_INDICES)
        for _ in range(2)
    ]


def _window_perspective(window) -> np.ndarray:
    aspect = window.buffer_width() / window.buffer_height()
    return perspective(FIELD_OF_VIEW, aspect, NEAR_PLANE, FAR_PLANE)


def _render_pyramid_pair(shader, meshes, rotation, projection, view=None, texture=None):
    """Draw two counter-rotating pyramids; return the last model matrix used."""
    placements = ((-1.0, rotation), (1.0, 360 - rotation))
    model = np.identity(4)
    for mesh, (x, angle) in zip(meshes, placements):
        model = _spin_model(x, angle)
        shader.set_mat4("model", model)
        if mesh is meshes[0]:
            if view is not None:
                shader.set_mat4("view", view)
            shader.set_mat4("projection", projection)
            if texture is not None:
                texture.use()
        mesh.render()
    return model


class ColorScene(Scene):
    """Fills the screen with a colour picked in the UI."""

    def __init__(self, data: SceneData) -> None:
        self.data = data
        self.background_color = (0.0, 0.0, 0.0)

    def render(self) -> None:
        _clear(*self.background_color)

    def draw_ui(self, ui) -> None:
        changed, color = ui.color_edit3("Clear Color", self.background_color)
        if changed:
            red, green, blue = (float(c) for c in color)
            self.background_color = (red, green, blue)


class CircleScene(Scene):
    """A regular polygon in screen space whose corner count is adjustable."""

    VERTEX_SHADER = "res/shaders/Basic.vert"
    FRAGMENT_SHADER = "res/shaders/Basic.frag"
    RADIUS = 150

    def __init__(self, data: SceneData) -> None:
        self.data = data
        self.shader = Shader()
        self.segments = 4
        self.polygon: Polygon | None = None
        self.projection = np.identity(4)
        self.model = np.identity(4)
        self.init()

    def _make_polygon(self) -> Polygon:
        window = self.data.window
        return Polygon(
            window.buffer_width() / 2, window.buffer_height() / 2, self.RADIUS, self.segments
        )

    def init(self) -> None:
        window = self.data.window
        self.segments = 4
        self.polygon = self._make_polygon()
        self.projection = ortho(0.0, window.buffer_width(), 0.0, window.buffer_height(), -1.0, 1.0)
        self.model = np.identity(4)

    def update(self, dt: float) -> None:
        """The polygon is static."""

    def render(self) -> None:
        _clear()
        _ensure_program(self.shader, self.VERTEX_SHADER, self.FRAGMENT_SHADER)
        self.shader.use()
        self.model = np.identity(4)
        self.shader.set_mat4("model", self.model)
        self.shader.set_mat4("projection", self.projection)
        self.polygon.render()

    def draw_ui(self, ui) -> None:
        changed, value = ui.slider_int("Number of vertexes", self.segments, 3, 50)
        if changed:
            self.segments = int(value)
            self.polygon = self._make_polygon()


class ShaderCircleScene(Scene):
    """A screen-filling quad painted entirely by a chosen fragment shader."""

    VERTEX_SHADER = "res/shaders/CircleShader.vert"
    FRAGMENT_SHADER = "res/shaders/CircleShader.frag"

    def __init__(self, data: SceneData) -> None:
        self.data = data
        self.shader = Shader()
        self.fragment_shader = self.FRAGMENT_SHADER
        self.meshes: list[Mesh] = []
        self.canvas_width = 0.0
        self.canvas_height = 0.0
        self.time = 0.0
        self.time_needed = False
        self.projection = np.identity(4)
        self.model = np.identity(4)
        self.init()

    def init(self) -> None:
        window = self.data.window
        self.canvas_width = window.buffer_width()
        self.canvas_height = window.buffer_height()
        w, h = self.canvas_width, self.canvas_height
        corners = ((0.0, 0.0), (0.0, h), (w, h), (w, 0.0))
        vertices = [Vertex((x, y, 0.0)) for x, y in corners]
        self.meshes = [Mesh(vertices, (0, 3, 1, 3, 2, 1))]
        self.projection = ortho(0.0, w, 0.0, h, -1.0, 1.0)
        self.model = np.identity(4)

    def update(self, dt: float) -> None:
        self.time += dt

    def render(self) -> None:
        _clear()
        _ensure_program(self.shader, self.VERTEX_SHADER, self.fragment_shader)
        self.shader.use()
        self.shader.set_vec3("resolution", self.canvas_width, self.canvas_height, 0.0)
        if self.time_needed:
            self.shader.set_float("time", self.time)
        self.model = np.identity(4)
        self.shader.set_mat4("model", self.model)
        self.shader.set_mat4("projection", self.projection)
        self.meshes[0].render()

    def draw_ui(self, ui) -> None:
        """Offer one button per fragment shader; the choice loads on next render."""
        for label, (path, needs_time) in SHADER_PRESETS.items():
            if ui.button(label):
                self.shader.clear()
                self.time_needed = needs_time
                self.fragment_shader = path


class PyramidInterpolationScene(Scene):
    """Two counter-rotating pyramids showing colour interpolation."""

    VERTEX_SHADER = "res/shaders/Basic.vert"
    FRAGMENT_SHADER = "res/shaders/Basic.frag"

    def __init__(self, data: SceneData) -> None:
        self.data = data
        self.shader = Shader()
        self.meshes: list[Mesh] = []
        self.rotation = 0
        self.projection = np.identity(4)
        self.model = np.identity(4)
        self.init()

    def init(self) -> None:
        self.meshes = _pyramid_meshes()
        self.projection = _window_perspective(self.data.window)
        self.model = np.identity(4)

    def update(self, dt: float) -> None:
        self.rotation = _advance(self.rotation)

    def render(self) -> None:
        _clear()
        _ensure_program(self.shader, self.VERTEX_SHADER, self.FRAGMENT_SHADER)
        self.shader.use()
        self.model = _render_pyramid_pair(
            self.shader, self.meshes, self.rotation, self.projection
        )

    def draw_ui(self, ui) -> None:
        """This scene has no controls."""