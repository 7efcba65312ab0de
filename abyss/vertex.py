"""Geometry primitives submitted to the renderer: vertices, triangles, quads and text."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

WHITE: Vec4 = (1.0, 1.0, 1.0, 1.0)


def _vec3(values: Sequence[float]) -> Vec3:
    """Widen a 2- or 3-component position to three components (z = 0)."""
    if len(values) == 2:
        return (float(values[0]), float(values[1]), 0.0)
    if len(values) == 3:
        return (float(values[0]), float(values[1]), float(values[2]))
    raise ValueError(f"expected a 2- or 3-component position, got {len(values)} components")


def _vec(values: Sequence[float], size: int) -> tuple[float, ...]:
    if len(values) != size:
        raise ValueError(f"expected {size} components, got {len(values)}")
    return tuple(float(v) for v in values)


@dataclass
class Vertex:
    """A vertex: position, colour, texture info (u, v, texture index) and uv scale."""

    pos: Vec3
    col: Vec4
    texinfo: Vec3 = (0.0, 0.0, 0.0)
    uvs: Vec2 = (1.0, 1.0)

    def __post_init__(self) -> None:
        self.pos = _vec3(self.pos)
        self.col = _vec(self.col, 4)  # type: ignore[assignment]
        self.texinfo = _vec(self.texinfo, 3)  # type: ignore[assignment]
        self.uvs = _vec(self.uvs, 2)  # type: ignore[assignment]

    @classmethod
    def create(
        cls,
        pos: Sequence[float],
        col: Sequence[float],
        texture: float = 0.0,
        texcoord: Sequence[float] | None = None,
        uvs: Sequence[float] = (1.0, 1.0),
    ) -> Vertex:
        """Build a vertex from a texture index and optional texture coordinates."""
        u, v = (0.0, 0.0) if texcoord is None else _vec(texcoord, 2)
        return cls(pos, col, (u, v, float(texture)), uvs)  # type: ignore[arg-type]

    def components(self) -> tuple[float, ...]:
        """All components flattened in layout order."""
        return (*self.pos, *self.col, *self.texinfo, *self.uvs)


@dataclass
class Triangle:
    """Three vertices."""

    v1: Vertex
    v2: Vertex
    v3: Vertex

    def __iter__(self):
        return iter((self.v1, self.v2, self.v3))


@dataclass
class Quad:
    """An axis-aligned rectangle described by its centre vertex and size."""

    v: Vertex
    size: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.size = _vec(self.size, 2)  # type: ignore[assignment]

    @classmethod
    def create(
        cls,
        size: Sequence[float] = (0.0, 0.0),
        pos: Sequence[float] = (0.0, 0.0),
        col: Sequence[float] = WHITE,
        texture: float = 0.0,
        uvs: Sequence[float] = (1.0, 1.0),
    ) -> Quad:
        """Build a quad whose top-left corner is ``pos``; the z of ``pos`` is dropped."""
        width, height = _vec(size, 2)
        x, y, _ = _vec3(pos)
        centre = (x + width / 2, y + height / 2, 0.0)
        return cls(Vertex.create(centre, col, texture, None, uvs), (width, height))


@dataclass
class Text:
    """A string to draw at a position with a colour, scale and font handle."""

    text: str
    pos: Vec3
    color: Vec4 = WHITE
    scale: float = 1.0
    font: int = 0
    _: None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        x, y, _ = _vec3(self.pos)
        self.pos = (x, y, 0.0)
        self.color = _vec(self.color, 4)  # type: ignore[assignment]
        if self.font < 0:
            raise ValueError("font handle must not be negative")