import numpy as np
import pytest

from glsandbox.camera import ortho, perspective
from glsandbox.scene_manager import SceneData
from glsandbox.scenes.basic import (
    SHADER_PRESETS,
    CircleScene,
    ColorScene,
    PyramidInterpolationScene,
    ShaderCircleScene,
)
from glsandbox.window import Window


class _ScriptedUI:
    """Answers widget calls from a script and logs what was asked."""

    def __init__(self, pressed=(), slider=None, color=None):
        self.pressed = set(pressed)
        self.answers = {"slider_int": slider, "color_edit3": color}
        self.log = []

    def button(self, label):
        self.log.append(("button", label))
        return label in self.pressed

    def _edit(self, kind, label, value, *extra):
        self.log.append((kind, label, value, *extra))
        answer = self.answers[kind]
        return (answer is not None), (value if answer is None else answer)

    def slider_int(self, label, value, low, high):
        return self._edit("slider_int", label, value, low, high)

    def color_edit3(self, label, color):
        return self._edit("color_edit3", label, tuple(color))


@pytest.fixture
def data():
    return SceneData(window=Window(1280, 800))


@pytest.fixture
def size(data):
    return data.window.buffer_width(), data.window.buffer_height()


@pytest.mark.parametrize("color", [None, (0.25, 0.5, 0.75)])
def test_color_scene_edit(data, color):
    scene = ColorScene(data)
    ui = _ScriptedUI(color=color)
    scene.draw_ui(ui)
    assert scene.background_color == (color or (0.0, 0.0, 0.0))
    assert ui.log[0][:2] == ("color_edit3", "Clear Color")


def test_circle_scene_initial_polygon(data, size):
    scene = CircleScene(data)
    assert scene.segments == 4
    assert scene.polygon.center == (size[0] / 2, size[1] / 2)
    assert scene.polygon.radius == 150
    assert len(scene.polygon.vertices) == scene.segments + 1
    assert np.allclose(scene.projection, ortho(0.0, size[0], 0.0, size[1], -1.0, 1.0))


def test_circle_scene_slider_rebuilds_polygon(data):
    scene = CircleScene(data)
    ui = _ScriptedUI(slider=10)
    scene.draw_ui(ui)
    assert ui.log == [("slider_int", "Number of vertexes", 4, 3, 50)]
    assert scene.segments == 10
    assert len(scene.polygon.vertices) == 11
    assert scene.polygon.mesh.index_count == 30


@pytest.mark.parametrize("action", ["ui", "update"])
def test_circle_scene_keeps_polygon(data, action):
    scene = CircleScene(data)
    before = scene.polygon
    if action == "ui":
        scene.draw_ui(_ScriptedUI())
    else:
        scene.update(1.0)
    assert scene.polygon is before
    assert scene.segments == 4


def test_shader_circle_quad_covers_canvas(data, size):
    scene = ShaderCircleScene(data)
    w, h = size
    assert (scene.canvas_width, scene.canvas_height) == (w, h)
    mesh = scene.meshes[0]
    assert list(mesh.index_data) == [0, 3, 1, 3, 2, 1]
    expected = np.array([[0, 0, 0], [0, h, 0], [w, h, 0], [w, 0, 0]], dtype=np.float32)
    assert np.allclose(mesh.vertex_data[:, :3], expected)


def test_shader_circle_time_accumulates(data):
    scene = ShaderCircleScene(data)
    scene.update(0.25)
    scene.update(0.5)
    assert scene.time == pytest.approx(0.75)


def test_shader_circle_default_fragment(data):
    scene = ShaderCircleScene(data)
    assert (scene.fragment_shader, scene.time_needed) == ("res/shaders/CircleShader.frag", False)


def test_shader_circle_buttons_in_order(data):
    ui = _ScriptedUI()
    ShaderCircleScene(data).draw_ui(ui)
    assert [entry[1] for entry in ui.log] == [
        "Circle",
        "Heart",
        "Face",
        "Colorful Heart",
        "TV Noise",
    ]


@pytest.mark.parametrize(
    "label, path, needs_time",
    [
        ("Circle", "res/shaders/CircleShader.frag", False),
        ("Heart", "res/shaders/Heart.frag", False),
        ("Face", "res/shaders/Face.frag", False),
        ("Colorful Heart", "res/shaders/ColorfulHeart.frag", True),
        ("TV Noise", "res/shaders/TVNoise.frag", True),
    ],
)
def test_shader_circle_button_selects_preset(data, label, path, needs_time):
    scene = ShaderCircleScene(data)
    scene.draw_ui(_ScriptedUI(pressed=[label]))
    assert SHADER_PRESETS[label] == (path, needs_time)
    assert (scene.fragment_shader, scene.time_needed) == (path, needs_time)
    assert scene.shader.program == 0


def test_pyramid_scene_meshes(data, size):
    scene = PyramidInterpolationScene(data)
    assert [mesh.index_count for mesh in scene.meshes] == [12, 12]
    assert all(np.allclose(m.vertex_data[1, :3], [0.0, -1.0, 1.0]) for m in scene.meshes)
    assert np.allclose(scene.projection, perspective(45.0, size[0] / size[1], 0.1, 100.0))


def test_pyramid_rotation_wraps(data):
    scene = PyramidInterpolationScene(data)
    for _ in range(360):
        scene.update(0.016)
    assert scene.rotation == 360
    scene.update(0.016)
    assert scene.rotation == 1


def test_pyramid_scene_has_no_controls(data):
    ui = _ScriptedUI()
    PyramidInterpolationScene(data).draw_ui(ui)
    assert ui.log == []