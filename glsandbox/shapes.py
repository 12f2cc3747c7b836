"""Procedurally generated shapes: a filled regular polygon and a UV sphere."""

from __future__ import annotations

import math

from glsandbox.mesh import Mesh, Vertex


class Polygon:
    """A regular polygon centred on (x, y), drawn as a triangle fan."""

    def __init__(self, x: float, y: float, radius: float, vertex_number: int) -> None:
        self.center = (float(x), float(y))
        self.radius = float(radius)
        self.vertices = [Vertex((x, y, 0.0), (0.0, 0.0))]
        self.indices: list[int] = []

        for i in range(vertex_number):
            theta = math.radians(360 / vertex_number * i)
            px = radius * math.cos(theta)
            py = radius * math.sin(theta)
            self.vertices.append(Vertex((px + x, py + y, 0.0), (0.0, 0.0)))
            if i == 0:
                continue
            last = len(self.vertices) - 1
            self.indices.extend((0, last, last - 1))

        self.indices.extend((0, 1, len(self.vertices) - 1))
        self.mesh = Mesh(self.vertices, self.indices)

    def render(self) -> None:
        self.mesh.render()

    def clear(self) -> None:
        self.mesh.clear()


class Sphere:
    """A UV sphere built from stacks of rings with a vertex at each pole."""

    def __init__(
        self, x: float, y: float, z: float, radius: float, stacks: int, sectors: int
    ) -> None:
        self.center = (float(x), float(y), float(z))
        self.radius = float(radius)
        radius_inv = 1.0 / radius

        self.vertices = [Vertex((x, y + radius, z), (0.5, 0.0), (0.0, -1.0, 0.0))]
        self.indices: list[int] = []

        for j in range(stacks):
            alpha = math.radians(90 - (180 / stacks) * j)
            for i in range(sectors + 1):
                theta = math.radians((360 / sectors) * i)
                px = radius * math.cos(alpha) * math.cos(theta)
                py = radius * math.sin(alpha)
                pz = radius * math.cos(alpha) * math.sin(theta)
                self.vertices.append(
                    Vertex(
                        (px + x, py + y, pz + z),
                        (i / (sectors + 1), j / stacks),
                        (
                            -(px - x) * radius_inv,
                            -(py - y) * radius_inv,
                            -(pz - z) * radius_inv,
                        ),
                    )
                )

        self.vertices.append(Vertex((x, y - radius, z), (0.5, 1.0), (0.0, 1.0, 0.0)))

        row = sectors + 1
        for j in range(1, stacks):
            for i in range(sectors + 1):
                upper = (j - 1) * row + i
                lower = j * row + i
                self.indices.extend((upper, lower, upper + 1))
                self.indices.extend((upper + 1, lower, lower + 1))

        bottom = len(self.vertices) - 1
        last_ring = (stacks - 1) * row
        for i in range(1, sectors + 1):
            self.indices.extend((last_ring + i, bottom, last_ring + i + 1))

        self.mesh = Mesh(self.vertices, self.indices)

    def render(self) -> None:
        self.mesh.render()

    def clear(self) -> None:
        self.mesh.clear()