"""Mesh data for the square, cube and axis arrows, and how each is drawn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
GRAY = (0.5, 0.5, 0.5)
WHITE = (1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0)

ARROW_LINE_WIDTH = 3.0

Attribute = Tuple[int, int, int]
"""Vertex attribute as (location, component count, float offset)."""


class Primitive(Enum):
    """How indices or vertices are assembled when drawn."""

    TRIANGLES = "triangles"
    LINES = "lines"


@dataclass(frozen=True)
class DrawCall:
    """Description of one draw of a mesh."""

    primitive: Primitive
    count: int
    indexed: bool
    line_width: Optional[float] = None


@dataclass(frozen=True)
class Mesh:
    """Interleaved float vertices with optional triangle or line indices."""

    vertices: Tuple[float, ...]
    indices: Tuple[int, ...] = ()
    stride: int = 3
    attributes: Tuple[Attribute, ...] = ((0, 3, 0),)

    def __post_init__(self) -> None:
        vertices = tuple(float(value) for value in self.vertices)
        indices = tuple(int(value) for value in self.indices)
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "attributes", tuple(tuple(a) for a in self.attributes))
        if self.stride < 1:
            raise ValueError("stride must be positive")
        if len(vertices) % self.stride:
            raise ValueError(
                f"{len(vertices)} floats do not split into vertices of {self.stride}"
            )
        count = len(vertices) // self.stride
        bad = [index for index in indices if not 0 <= index < count]
        if bad:
            raise ValueError(f"indices out of range for {count} vertices: {bad}")
        for _, size, offset in self.attributes:
            if offset + size > self.stride:
                raise ValueError("vertex attribute does not fit in the stride")

    def vertex_count(self) -> int:
        """Number of vertices held."""
        return len(self.vertices) // self.stride

    def draw(self, primitive: Primitive = Primitive.TRIANGLES) -> DrawCall:
        """The draw call that renders this mesh as ``primitive``."""
        if self.indices:
            width = ARROW_LINE_WIDTH if primitive is Primitive.LINES else None
            return DrawCall(primitive, len(self.indices), True, width)
        return DrawCall(primitive, self.vertex_count(), False)


_POSITION_COLOR = ((0, 3, 0), (1, 3, 3))


def square() -> Mesh:
    """A unit square in the z = 0 plane made of two triangles."""
    vertices = (
        0.5, 0.5, 0.0,
        0.5, -0.5, 0.0,
        -0.5, -0.5, 0.0,
        -0.5, 0.5, 0.0,
    )
    indices = (0, 1, 3, 1, 2, 3)
    return Mesh(vertices, indices, stride=3, attributes=((0, 3, 0),))


_CUBE_FACES = (
    (RED, ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    (GREEN, ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5))),
    (BLUE, ((0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5))),
    ((1.0, 1.0, 0.0), ((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5))),
    ((0.0, 1.0, 1.0), ((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5))),
    ((1.0, 0.0, 1.0), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5))),
)


def cube() -> Mesh:
    """A unit cube with one flat colour per face."""
    vertices = tuple(
        value
        for color, corners in _CUBE_FACES
        for corner in corners
        for value in (*corner, *color)
    )
    indices = tuple(
        base + offset
        for base in range(0, 4 * len(_CUBE_FACES), 4)
        for offset in (0, 1, 2, 2, 3, 0)
    )
    return Mesh(vertices, indices, stride=6, attributes=_POSITION_COLOR)


def arrow() -> Mesh:
    """Three coloured axis lines from the origin."""
    points = (
        ((0.0, 0.0, 0.0), BLACK),
        ((1.0, 0.0, 0.0), RED),
        ((0.0, 1.0, 0.0), BLUE),
        ((0.0, 0.0, 1.0), GREEN),
    )
    vertices = tuple(value for position, color in points for value in (*position, *color))
    indices = (0, 1, 0, 2, 0, 3)
    return Mesh(vertices, indices, stride=6, attributes=_POSITION_COLOR)