"""Reflected shader interface descriptions and per-binding vertex layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from abyss.common import map_vector


class VkFormat(IntEnum):
    """The 32-bit vertex attribute formats understood by the vertex layout code."""

    UNDEFINED = 0
    R32_UINT = 98
    R32_SINT = 99
    R32_SFLOAT = 100
    R32G32_UINT = 101
    R32G32_SINT = 102
    R32G32_SFLOAT = 103
    R32G32B32_UINT = 104
    R32G32B32_SINT = 105
    R32G32B32_SFLOAT = 106
    R32G32B32A32_UINT = 107
    R32G32B32A32_SINT = 108
    R32G32B32A32_SFLOAT = 109


_FORMAT_SIZES = {
    VkFormat.R32_SFLOAT: 4,
    VkFormat.R32G32_SFLOAT: 8,
    VkFormat.R32G32B32_SFLOAT: 12,
    VkFormat.R32G32B32A32_SFLOAT: 16,
    VkFormat.R32_SINT: 4,
    VkFormat.R32G32_SINT: 8,
    VkFormat.R32G32B32_SINT: 12,
    VkFormat.R32G32B32A32_SINT: 16,
    VkFormat.R32_UINT: 4,
    VkFormat.R32G32_UINT: 8,
    VkFormat.R32G32B32_UINT: 12,
    VkFormat.R32G32B32A32_UINT: 16,
}


@dataclass
class ShaderUniform:
    name: str
    set: int
    binding: int
    size: int


@dataclass
class ShaderInput:
    location: int
    binding: int
    offset: int
    stride: int
    format: VkFormat


@dataclass
class ShaderStorage:
    name: str
    set: int
    binding: int


@dataclass
class ShaderSampler:
    name: str
    set: int
    binding: int
    count: int


@dataclass
class ShaderDescriptor:
    """Everything reflected from a shader: uniforms, storage, samplers and inputs."""

    uniforms: list[ShaderUniform] = field(default_factory=list)
    storages: list[ShaderStorage] = field(default_factory=list)
    samplers: list[ShaderSampler] = field(default_factory=list)
    inputs: list[ShaderInput] = field(default_factory=list)

    def uniform_binding_sizes(self) -> dict[int, int]:
        """Total uniform size per binding, keys in ascending order."""
        sizes: dict[int, int] = {}
        for uniform in self.uniforms:
            sizes[uniform.binding] = sizes.get(uniform.binding, 0) + uniform.size
        return dict(sorted(sizes.items()))

    def input_binding_sizes(self) -> dict[int, int]:
        """Total input attribute size per binding, keys in ascending order."""
        sizes: dict[int, int] = {}
        for item in self.inputs:
            sizes[item.binding] = sizes.get(item.binding, 0) + self.format_size(item.format)
        return dict(sorted(sizes.items()))

    def input_binding_stride(self) -> dict[int, int]:
        """Vertex stride per binding: the summed size of its attributes."""
        return self.input_binding_sizes()

    @staticmethod
    def format_size(fmt: int) -> int:
        """Size in bytes of a supported format, or 0 for any other."""
        try:
            return _FORMAT_SIZES.get(VkFormat(fmt), 0)
        except ValueError:
            return 0


class VertexClass:
    """The vertex layout of one input binding and how many vertices a batch holds."""

    def __init__(self, descriptor: ShaderDescriptor, max_vertices: int, binding: int = 0) -> None:
        if max_vertices < 0:
            raise ValueError("max_vertices must not be negative")
        self._binding = binding
        self._max_vertices = max_vertices
        grouped = map_vector(descriptor.inputs, lambda item: item.binding)
        self._vertex_size = sum(
            descriptor.format_size(item.format) for item in grouped.get(binding, [])
        )

    @property
    def binding(self) -> int:
        return self._binding

    @property
    def vertex_size(self) -> int:
        return self._vertex_size

    @property
    def max_vertices(self) -> int:
        return self._max_vertices

    def __repr__(self) -> str:
        return (
            f"VertexClass(binding={self._binding}, vertex_size={self._vertex_size}, "
            f"max_vertices={self._max_vertices})"
        )