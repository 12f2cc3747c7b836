"""Pyramid scenes viewed through a free-flying camera, plain or textured."""

from __future__ import annotations

import numpy as np

from glsandbox.camera import Camera
from glsandbox.mesh import Mesh
from glsandbox.scene_manager import Scene, SceneData
from glsandbox.scenes.basic import (
    _advance,
    _clear,
    _ensure_program,
    _pyramid_meshes,
    _render_pyramid_pair,
    _window_perspective,
)
from glsandbox.shader import Shader
from glsandbox.texture import Texture
from glsandbox.window import Key


class _FlyScene(Scene):
    """Two counter-rotating pyramids and a camera steered by keyboard and mouse."""

    VERTEX_SHADER = ""
    FRAGMENT_SHADER = ""
    TEX_COORDS = None
    HELP_TEXT = ""

    def __init__(self, data: SceneData) -> None:
        self.data = data
        self.shader = Shader()
        self.meshes: list[Mesh] = []
        self.camera = Camera()
        self.camera_mode = True
        self.rotation = 0
        self.projection = np.identity(4)
        self.model = np.identity(4)
        self.init()

    def _build(self) -> None:
        self.meshes = _pyramid_meshes(self.TEX_COORDS)
        self.projection = _window_perspective(self.data.window)
        self.model = np.identity(4)
        self.camera = Camera((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), -90.0, 0.0, 5.0, 0.5)

    def _step(self, dt: float) -> None:
        self.rotation = _advance(self.rotation)

        window = self.data.window
        if window.get_key(Key.ESCAPE):
            window.reset_key(Key.ESCAPE)
            window.reset()
            self.camera_mode = False

        if self.camera_mode:
            window.disable_cursor()
            self.camera.key_control(window, dt)
            self.camera.mouse_control(window.take_x_change(), window.take_y_change())
        else:
            window.enable_cursor()

    def _draw(self, texture: Texture | None) -> None:
        _clear()
        _ensure_program(self.shader, self.VERTEX_SHADER, self.FRAGMENT_SHADER)
        self.shader.use()
        self.model = _render_pyramid_pair(
            self.shader,
            self.meshes,
            self.rotation,
            self.projection,
            view=self.camera.view_matrix(),
            texture=texture,
        )

    def _controls(self, ui) -> None:
        changed, value = ui.checkbox("Camera Mode", self.camera_mode)
        if changed:
            self.camera_mode = bool(value)
        ui.text(self.HELP_TEXT)

    def update(self, dt: float) -> None:
        self._step(dt)

    def draw_ui(self, ui) -> None:
        self._controls(ui)


class CameraScene(_FlyScene):
    """Untextured pyramids explored with the fly-through camera."""

    VERTEX_SHADER = "res/shaders/Camera.vert"
    FRAGMENT_SHADER = "res/shaders/Basic.frag"
    HELP_TEXT = "ESC to turn off Camera Mode"

    def init(self) -> None:
        self._build()

    def update(self, dt: float) -> None:
        super().update(dt)

    def render(self) -> None:
        self._draw(None)

    def draw_ui(self, ui) -> None:
        super().draw_ui(ui)


class TextureScene(_FlyScene):
    """Pyramids wrapped in a metal texture, explored with the camera."""

    VERTEX_SHADER = "res/shaders/Texture.vert"
    FRAGMENT_SHADER = "res/shaders/Texture.frag"
    TEXTURE_PATH = "res/textures/metal.png"
    TEX_COORDS = ((0.0, 0.0), (0.5, 0.0), (1.0, 0.0), (0.5, 1.0))
    HELP_TEXT = "ESC to turn off Texture Mode"

    def init(self) -> None:
        self._build()
        self.metal_texture = Texture(self.TEXTURE_PATH)

    def update(self, dt: float) -> None:
        super().update(dt)

    def render(self) -> None:
        if not self.metal_texture.texture_id:
            self.metal_texture.load()
        self._draw(self.metal_texture)

    def draw_ui(self, ui) -> None:
        super().draw_ui(ui)