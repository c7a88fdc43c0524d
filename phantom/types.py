"""Type tags shared by scene objects and the parameter/texture pair."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class IndexDataType(Enum):
    INT8 = "I8  "
    INT16 = "I16 "
    INT32 = "I32 "
    INT64 = "I64 "


class VertexDataType(Enum):
    FLOAT1 = "FLT1"
    FLOAT2 = "FLT2"
    FLOAT3 = "FLT3"
    FLOAT4 = "FLT4"
    DOUBLE1 = "DUB1"
    DOUBLE2 = "DUB2"
    DOUBLE3 = "DUB3"
    DOUBLE4 = "DUB4"


class SceneObjectType(Enum):
    MESH = "MESH"
    MATERIAL = "MATL"
    TEXTURE = "TXTU"
    LIGHT_OMNI = "LGHO"
    LIGHT_INFI = "LGHI"
    LIGHT_SPOT = "LGHS"
    LIGHT_AREA = "LGHA"
    CAMERA = "CAMR"
    ANIMATION_CLIP = "ANIM"
    CLIP = "CLIP"
    VERTEX_ARRAY = "VARR"
    INDEX_ARRAY = "VARR"  # shares its tag with VERTEX_ARRAY
    GEOMETRY = "GEOM"
    TRANSFORM = "TRFM"
    TRANSLATE = "TSLT"
    ROTATE = "ROTA"
    SCALE = "SCAL"
    TRACK = "TRAC"
    SKY_BOX = "SKYB"
    TERRAIN = "TERN"
    SKIN = "Skin"
    SKELETON = "Skel"


class PrimitiveType(Enum):
    NONE = "NONE"
    POINT_LIST = "PLST"
    LINE_LIST = "LLST"
    LINE_STRIP = "LSTR"
    TRI_LIST = "TLST"
    TRI_FAN = "TFAN"
    TRI_STRIP = "TSTR"
    PATCH = "PACH"
    LINE_LIST_ADJACENCY = "LLSA"
    LINE_STRIP_ADJACENCY = "LSTA"
    TRI_LIST_ADJACENCY = "TLSA"
    TRI_STRIP_ADJACENCY = "TSTA"
    RECT_LIST = "RLST"
    LINE_LOOP = "LLOP"
    QUAD_LIST = "QLST"
    QUAD_STRIP = "QSTR"
    POLYGON = "POLY"


@dataclass
class ParameterValueMap(Generic[T]):
    """A plain value optionally overridden by a texture map."""

    value: Optional[T] = None
    value_map: Optional[Any] = None

    def __str__(self) -> str:
        out = f"Parameter Value: {self.value}\n"
        if self.value_map:
            out += f"Parameter Map: {self.value_map}\n"
        return out