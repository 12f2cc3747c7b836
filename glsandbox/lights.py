"""Light sources and normal averaging for meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from glsandbox.mesh import Vertex

Vec3 = tuple[float, float, float]


def _normalize(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=np.float64)
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def _as_vec3(value) -> Vec3:
    x, y, z = (float(c) for c in value)
    return (x, y, z)


@dataclass(kw_only=True)
class Light:
    """An ambient light with colour and diffuse intensity."""

    color: Vec3 = (1.0, 1.0, 1.0)
    ambient_intensity: float = 1.0
    diffuse_intensity: float = 0.0

    def __post_init__(self) -> None:
        self.color = _as_vec3(self.color)


@dataclass(kw_only=True)
class DirectionalLight(Light):
    """A light shining from a fixed direction."""

    direction: Vec3 = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.direction = _as_vec3(self.direction)


@dataclass(kw_only=True)
class PointLight(Light):
    """A light at a position with quadratic attenuation."""

    position: Vec3 = (0.0, 0.0, 0.0)
    exponent: float = 0.0
    linear: float = 0.0
    constant: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.position = _as_vec3(self.position)


@dataclass(kw_only=True)
class SpotLight(PointLight):
    """A point light limited to a cone around its direction.

    ``edge`` is the cone angle in degrees; ``calculation_edge`` is its cosine,
    computed once at construction.
    """

    direction: Vec3 = (0.0, 0.0, 0.0)
    edge: float = 0.0
    calculation_edge: float = field(init=False, default=1.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        direction = np.asarray(self.direction, dtype=np.float64)
        if np.any(direction):
            direction = _normalize(direction)
        self.direction = _as_vec3(direction)
        self.calculation_edge = math.cos(math.radians(self.edge))

    def set_ray(self, position, direction) -> None:
        """Move the light and point it along a new direction."""
        self.position = _as_vec3(position)
        self.direction = _as_vec3(direction)


def calculate_average_normals(vertices: list[Vertex], indices) -> None:
    """Set each vertex normal to the normalised sum of its face normals."""
    indices = list(indices)
    for start in range(0, len(indices) - 2, 3):
        i0, i1, i2 = indices[start:start + 3]
        v1 = vertices[i1].position - vertices[i0].position
        v2 = vertices[i2].position - vertices[i0].position
        normal = _normalize(np.cross(v1, v2))
        for index in (i0, i1, i2):
            vertices[index].normal += normal
    for vertex in vertices:
        vertex.normal = _normalize(vertex.normal)