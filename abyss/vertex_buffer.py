"""A CPU-side accumulator that packs vertices for one batch."""

from __future__ import annotations

import struct

from abyss.shader_layout import ShaderDescriptor, VertexClass, VkFormat

# format -> (struct code, component count)
_DECODE = {
    VkFormat.R32_SFLOAT: ("f", 1),
    VkFormat.R32G32_SFLOAT: ("f", 2),
    VkFormat.R32G32B32_SFLOAT: ("f", 3),
    VkFormat.R32G32B32A32_SFLOAT: ("f", 4),
    VkFormat.R32_SINT: ("i", 1),
    VkFormat.R32G32_SINT: ("i", 2),
    VkFormat.R32G32B32_SINT: ("i", 3),
    VkFormat.R32G32B32A32_SINT: ("i", 4),
    VkFormat.R32_UINT: ("I", 1),
    VkFormat.R32G32_UINT: ("I", 2),
    VkFormat.R32G32B32_UINT: ("I", 3),
    VkFormat.R32G32B32A32_UINT: ("I", 4),
}


class VertexAccumulatorFull(Exception):
    """Raised when a vertex is stored into an accumulator that needs flushing."""


def _format_value(value: float | int) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


class VertexAccumulator:
    """Packs fixed-size vertices into a buffer sized by a vertex class.

    ``store`` writes the current vertex; ``advance`` commits it.
    """

    def __init__(self, vertex_class: VertexClass | None = None) -> None:
        self._count = 0
        self._capacity = 0
        self._vertex_size = 0
        self._buffer = bytearray()
        if vertex_class is not None:
            self.set_class(vertex_class)

    def set_class(self, vertex_class: VertexClass) -> None:
        """Switch to a new layout, discarding any accumulated vertices."""
        self.reset()
        self._capacity = vertex_class.max_vertices
        self._vertex_size = vertex_class.vertex_size
        self._buffer = bytearray(self._capacity * self._vertex_size)

    def reset(self) -> None:
        self._count = 0

    @property
    def offset(self) -> int:
        return self._vertex_size * self._count

    @property
    def vertex_size(self) -> int:
        return self._vertex_size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def bytes(self) -> int:
        return self._vertex_size * self._count

    @property
    def data(self) -> bytes:
        """The packed bytes of the committed vertices."""
        return bytes(self._buffer[: self.bytes])

    def __len__(self) -> int:
        return self._count

    def advance(self) -> VertexAccumulator:
        """Commit the current vertex and move to the next slot."""
        self._count += 1
        return self

    def store(self, data: bytes | bytearray | memoryview) -> VertexAccumulator:
        """Write one packed vertex into the current slot."""
        raw = bytes(data)
        if len(raw) != self._vertex_size:
            raise ValueError(
                f"incompatible vertex size: got {len(raw)} bytes, expected {self._vertex_size}"
            )
        if self._count >= self._capacity:
            raise VertexAccumulatorFull("VertexAccumulator requires flushing")
        start = self.offset
        self._buffer[start : start + self._vertex_size] = raw
        return self

    def format(self, descriptor: ShaderDescriptor) -> str:
        """Render the committed vertices, decoding each attribute by its format."""
        lines = ["{\n"]
        for index in range(self._count):
            base = index * self._vertex_size
            vertex = bytes(self._buffer[base : base + self._vertex_size])
            parts = ["  { "]
            offset = 0
            for item in descriptor.inputs:
                chunk = vertex[offset : offset + item.stride]
                offset += item.stride
                try:
                    code, components = _DECODE[VkFormat(item.format)]
                except (KeyError, ValueError):
                    raise ValueError(f"unsupported vertex format {item.format}") from None
                layout = struct.Struct(f"<{components}{code}")
                if len(chunk) < layout.size:
                    raise ValueError("vertex attribute extends past the vertex")
                values = layout.unpack_from(chunk)
                if components == 1:
                    parts.append(_format_value(values[0]))
                else:
                    parts.append("(" + ", ".join(_format_value(v) for v in values) + ")")
                if index != self._count - 1:
                    parts.append(", ")
            parts.append("}\n")
            lines.append("".join(parts))
        lines.append("}\n")
        return "".join(lines)