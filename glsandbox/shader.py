"""GLSL programs and the uniform layout the lighting shaders expect."""

from __future__ import annotations

import logging
from itertools import islice

import numpy as np

from glsandbox.lights import DirectionalLight, Light, PointLight, SpotLight

MAX_POINT_LIGHTS = 3
MAX_SPOT_LIGHTS = 3

_log = logging.getLogger(__name__)

UniformValue = int | float | tuple


class ShaderError(Exception):
    """Raised when shader source cannot be read, compiled or used."""


def read_source(path) -> str:
    """Read a shader file, ending every line with a newline."""
    try:
        with open(path, encoding="utf-8") as stream:
            return "".join(line.removesuffix("\n") + "\n" for line in stream)
    except OSError as exc:
        raise ShaderError(f"cannot read shader source {path}: {exc}") from exc


def _vec3(value) -> tuple[float, float, float]:
    x, y, z = (float(c) for c in value)
    return (x, y, z)


def light_uniforms(light: Light) -> dict[str, UniformValue]:
    """Uniform values for a plain ambient light."""
    return {
        "light.color": _vec3(light.color),
        "light.ambientIntensity": float(light.ambient_intensity),
    }


def directional_light_uniforms(light: DirectionalLight) -> dict[str, UniformValue]:
    """Uniform values for the scene's directional light."""
    return {
        "directionalLight.base.color": _vec3(light.color),
        "directionalLight.base.ambientIntensity": float(light.ambient_intensity),
        "directionalLight.direction": _vec3(light.direction),
        "directionalLight.base.diffuseIntensity": float(light.diffuse_intensity),
    }


def _point_fields(prefix: str, base: str, light: PointLight) -> dict[str, UniformValue]:
    return {
        f"{prefix}{base}.color": _vec3(light.color),
        f"{prefix}{base}.ambientIntensity": float(light.ambient_intensity),
        f"{prefix}position": _vec3(light.position),
        f"{prefix}{base}.diffuseIntensity": float(light.diffuse_intensity),
        f"{prefix}exponent": float(light.exponent),
        f"{prefix}linear": float(light.linear),
        f"{prefix}constant": float(light.constant),
    }


def point_light_uniforms(lights, limit: int = MAX_POINT_LIGHTS) -> dict[str, UniformValue]:
    """Uniform values for at most ``limit`` point lights, count first."""
    used = list(islice(lights, limit))
    uniforms: dict[str, UniformValue] = {"pointLightCount": len(used)}
    for i, light in enumerate(used):
        uniforms.update(_point_fields(f"pointLights[{i}].", "base", light))
    return uniforms


def spot_light_uniforms(lights, limit: int = MAX_SPOT_LIGHTS) -> dict[str, UniformValue]:
    """Uniform values for at most ``limit`` spot lights, count first."""
    used: list[SpotLight] = list(islice(lights, limit))
    uniforms: dict[str, UniformValue] = {"spotLightCount": len(used)}
    for i, light in enumerate(used):
        prefix = f"spotLights[{i}]."
        uniforms.update(_point_fields(prefix + "base.", "base", light))
        uniforms[prefix + "direction"] = _vec3(light.direction)
        uniforms[prefix + "edge"] = float(light.calculation_edge)
    return uniforms


class Shader:
    """A linked vertex and fragment program whose uniforms are set by name."""

    def __init__(self) -> None:
        self._program = None
        self._missing: set[str] = set()

    @property
    def program(self) -> int:
        return self._program.id if self._program is not None else 0

    def create_from_string(self, vertex_code: str, fragment_code: str) -> None:
        self._create(vertex_code, fragment_code)

    def create_from_file(self, vertex_path, fragment_path) -> None:
        vertex_code = read_source(vertex_path)
        fragment_code = read_source(fragment_path)
        self._create(vertex_code, fragment_code)

    def _create(self, vertex_code: str, fragment_code: str) -> None:
        from pyglet.graphics import shader as gl_shader

        self.clear()
        try:
            vertex = gl_shader.Shader(vertex_code, "vertex")
            fragment = gl_shader.Shader(fragment_code, "fragment")
            self._program = gl_shader.ShaderProgram(vertex, fragment)
        except gl_shader.ShaderException as exc:
            raise ShaderError(f"shader compilation failed: {exc}") from exc

    def _require(self):
        if self._program is None:
            raise ShaderError("shader program has not been created")
        return self._program

    def _set(self, name: str, value) -> None:
        program = self._require()
        if name not in program.uniforms:
            if name not in self._missing:
                _log.warning("uniform %s not found in shader program", name)
                self._missing.add(name)
            return
        program[name] = value

    def use(self) -> None:
        if self._program is not None:
            self._program.use()
        else:
            self.unbind()

    def unbind(self) -> None:
        from pyglet import gl

        gl.glUseProgram(0)

    def clear(self) -> None:
        """Delete the program; what is known about its uniforms goes with it."""
        if self._program is not None:
            self._program.delete()
            self._program = None
        self._missing.clear()

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_float(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def set_vec3(self, name: str, x: float, y: float, z: float) -> None:
        self._set(name, (float(x), float(y), float(z)))

    def set_vec4(self, name: str, x: float, y: float, z: float, w: float) -> None:
        self._set(name, (float(x), float(y), float(z), float(w)))

    def set_mat4(self, name: str, matrix) -> None:
        """Upload a 4x4 matrix that acts on column vectors."""
        array = np.asarray(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        self._set(name, tuple(float(v) for v in array.ravel(order="F")))

    def _apply(self, uniforms: dict[str, UniformValue]) -> None:
        for name, value in uniforms.items():
            if isinstance(value, tuple):
                if len(value) == 3:
                    self.set_vec3(name, *value)
                else:
                    self.set_vec4(name, *value)
            elif isinstance(value, int):
                self.set_int(name, value)
            else:
                self.set_float(name, value)

    def set_light(self, light: Light) -> None:
        self._apply(light_uniforms(light))

    def set_directional_light(self, light: DirectionalLight) -> None:
        self._apply(directional_light_uniforms(light))

    def set_point_lights(self, lights) -> None:
        self._apply(point_light_uniforms(lights, MAX_POINT_LIGHTS))

    def set_spot_lights(self, lights) -> None:
        self._apply(spot_light_uniforms(lights, MAX_SPOT_LIGHTS))