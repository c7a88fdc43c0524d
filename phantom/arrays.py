"""Index and vertex arrays that make up a mesh."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from phantom.types import IndexDataType, VertexDataType

_INDEX_ITEM_SIZE = {
    IndexDataType.INT8: 1,
    IndexDataType.INT16: 2,
    IndexDataType.INT32: 4,
    IndexDataType.INT64: 8,
}

_VERTEX_LAYOUT = {
    VertexDataType.FLOAT1: (4, 1),
    VertexDataType.FLOAT2: (4, 2),
    VertexDataType.FLOAT3: (4, 3),
    VertexDataType.FLOAT4: (4, 4),
    VertexDataType.DOUBLE1: (8, 1),
    VertexDataType.DOUBLE2: (8, 2),
    VertexDataType.DOUBLE3: (8, 3),
    VertexDataType.DOUBLE4: (8, 4),
}


@dataclass(frozen=True)
class IndexArray:
    """A group of indices; ``count`` is the number of index elements."""

    material_index: int = 0
    restart_index: int = 0
    data_type: IndexDataType = IndexDataType.INT16
    data: Optional[Any] = None
    count: int = 0

    def data_size(self) -> int:
        """Size of the index data in bytes."""
        return self.count * _INDEX_ITEM_SIZE[self.data_type]

    def index_count(self) -> int:
        """Number of indices held."""
        return self.count


@dataclass(frozen=True)
class VertexArray:
    """One vertex attribute stream; ``count`` is the number of scalar elements."""

    attribute: str = ""
    morph_target_index: int = 0
    data_type: VertexDataType = VertexDataType.FLOAT3
    data: Optional[Any] = None
    count: int = 0

    def data_size(self) -> int:
        """Size of the vertex data in bytes."""
        item_size, _ = _VERTEX_LAYOUT[self.data_type]
        return self.count * item_size

    def vertex_count(self) -> int:
        """Number of vertices, given the component count of the data type."""
        _, components = _VERTEX_LAYOUT[self.data_type]
        return self.count // components