import numpy as np
import pytest

from phantom.arrays import IndexArray, VertexArray
from phantom.types import IndexDataType, VertexDataType


def test_index_array_defaults():
    arr = IndexArray()
    assert arr.data_type is IndexDataType.INT16
    assert arr.index_count() == 0
    assert arr.data_size() == 0
    assert arr.material_index == 0


@pytest.mark.parametrize(
    "data_type, dtype",
    [
        (IndexDataType.INT8, np.int8),
        (IndexDataType.INT16, np.int16),
        (IndexDataType.INT32, np.int32),
        (IndexDataType.INT64, np.int64),
    ],
)
def test_index_array_data_size_matches_item_size(data_type, dtype):
    indices = np.arange(6, dtype=dtype)
    arr = IndexArray(data_type=data_type, data=indices, count=len(indices))
    assert arr.data_size() == indices.nbytes
    assert arr.index_count() == len(indices)


@pytest.mark.parametrize(
    "data_type, dtype, components",
    [
        (VertexDataType.FLOAT1, np.float32, 1),
        (VertexDataType.FLOAT2, np.float32, 2),
        (VertexDataType.FLOAT3, np.float32, 3),
        (VertexDataType.FLOAT4, np.float32, 4),
        (VertexDataType.DOUBLE1, np.float64, 1),
        (VertexDataType.DOUBLE2, np.float64, 2),
        (VertexDataType.DOUBLE3, np.float64, 3),
        (VertexDataType.DOUBLE4, np.float64, 4),
    ],
)
def test_vertex_array_sizes(data_type, dtype, components):
    vertices = np.ones((5, components), dtype=dtype)
    flat = vertices.ravel()
    arr = VertexArray("position", 0, data_type, flat, flat.size)
    assert arr.data_size() == vertices.nbytes
    assert arr.vertex_count() == vertices.shape[0]


def test_vertex_array_defaults():
    arr = VertexArray()
    assert arr.data_type is VertexDataType.FLOAT3
    assert arr.attribute == ""
    assert arr.vertex_count() == 0
    assert arr.data_size() == 0


def test_arrays_are_immutable():
    arr = VertexArray(attribute="normal")
    with pytest.raises(AttributeError):
        arr.attribute = "position"
    assert arr.attribute == "normal"