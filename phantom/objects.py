"""Scene objects: meshes, geometry, lights, skins, skeletons and animation clips."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from phantom.arrays import IndexArray, VertexArray
from phantom.base import SceneBaseObject
from phantom.transform import SceneObjectTransform
from phantom.tree import SceneBaseNode
from phantom.types import PrimitiveType, SceneObjectType

_MAX_COLLISION_PARAMETERS = 10


class SceneObjectMesh(SceneBaseObject):
    """Index groups, vertex attribute streams, a primitive type and an optional skin."""

    def __init__(self) -> None:
        super().__init__(SceneObjectType.MESH)
        self.index_arrays: List[IndexArray] = []
        self.vertex_arrays: List[VertexArray] = []
        self.primitive_type = PrimitiveType.NONE
        self.skin: Optional[SceneObjectSkin] = None

    def add_index_array(self, array: IndexArray) -> None:
        """Append an index group."""
        self.index_arrays.append(array)

    def add_vertex_array(self, array: VertexArray) -> None:
        """Append a vertex attribute stream."""
        self.vertex_arrays.append(array)

    def add_skin(self, skin: "SceneObjectSkin") -> None:
        """Attach the skin that deforms this mesh."""
        self.skin = skin

    @property
    def index_group_count(self) -> int:
        """Number of index groups."""
        return len(self.index_arrays)

    def index_count(self, index: int) -> int:
        """Indices in the given group; 0 when the mesh has no index groups."""
        if not self.index_arrays:
            return 0
        return self.index_arrays[index].index_count()

    def vertex_count(self) -> int:
        """Vertices in the first attribute stream; 0 when there is none."""
        if not self.vertex_arrays:
            return 0
        return self.vertex_arrays[0].vertex_count()

    def vertex_properties_count(self) -> int:
        """Number of vertex attribute streams."""
        return len(self.vertex_arrays)


class SceneObjectGeometry(SceneBaseObject):
    """A geometry object holding level-of-detail meshes and render flags."""

    def __init__(self) -> None:
        super().__init__(SceneObjectType.GEOMETRY)
        self.meshes: List[SceneObjectMesh] = []
        self.visible = True
        self.cast_shadow = True
        self.motion_blur = True
        self.collision_parameters: List[float] = [0.0] * _MAX_COLLISION_PARAMETERS

    def add_mesh(self, mesh: SceneObjectMesh) -> None:
        """Append a mesh; the first one is the full-detail mesh."""
        self.meshes.append(mesh)

    def mesh(self) -> Optional[SceneObjectMesh]:
        """The first mesh, or None when there is none."""
        return self.meshes[0] if self.meshes else None

    def mesh_lod(self, lod: int) -> Optional[SceneObjectMesh]:
        """The mesh for a level of detail, or None when out of range."""
        return self.meshes[lod] if 0 <= lod < len(self.meshes) else None

    def set_collision_parameters(self, params: Sequence[float]) -> None:
        """Store between 1 and 9 collision parameters at the front of the table."""
        values = [float(p) for p in params]
        if not 0 < len(values) < _MAX_COLLISION_PARAMETERS:
            raise ValueError(
                f"expected 1 to {_MAX_COLLISION_PARAMETERS - 1} collision parameters, "
                f"got {len(values)}"
            )
        self.collision_parameters[: len(values)] = values


class SceneObjectLight(SceneBaseObject):
    """Base of all light objects."""


class SceneObjectDirectLight(SceneObjectLight):
    """A directional light, infinitely far away."""

    def __init__(self) -> None:
        super().__init__(SceneObjectType.LIGHT_INFI)


class SceneBoneNode(SceneBaseNode):
    """A skeleton bone carrying its runtime-times-bind-pose matrix."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.runtime_with_bind_pose_mat = np.identity(4)


class SkeletonBoneRefArray:
    """The bones a skeleton references, in skin index order."""

    def __init__(self, count: int) -> None:
        self.bone_count = count
        self.bone_nodes: List[SceneBoneNode] = []

    def append_bone(self, bone: SceneBoneNode) -> None:
        """Add the next referenced bone."""
        self.bone_nodes.append(bone)


class SceneObjectSkeleton(SceneBaseObject):
    """A skeleton: a transform and the bones it references."""

    def __init__(self) -> None:
        super().__init__(SceneObjectType.SKELETON)
        self.transform: Optional[SceneObjectTransform] = None
        self.bone_ref_arr: Optional[SkeletonBoneRefArray] = None

    def apply_transform(self, transform: SceneObjectTransform) -> None:
        """Set the skeleton's transform."""
        self.transform = transform

    def apply_bone_ref_arr(self, bone_ref_arr: SkeletonBoneRefArray) -> None:
        """Set the bone reference array."""
        self.bone_ref_arr = bone_ref_arr


def _freeze(instance: Any, values: Sequence[Any], kind: type) -> None:
    object.__setattr__(instance, "data", tuple(kind(v) for v in values))


@dataclass(frozen=True)
class SkinBoneCountArray:
    """Number of bone influences for each vertex."""

    data: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, self.data, int)

    @property
    def vertex_count(self) -> int:
        """Number of vertices described."""
        return len(self.data)


@dataclass(frozen=True)
class SkinBoneIndexArray:
    """Bone indices of all influences, vertex after vertex."""

    data: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, self.data, int)

    @property
    def data_size(self) -> int:
        """Number of indices held."""
        return len(self.data)


@dataclass(frozen=True)
class SkinBoneWeightArray:
    """Weights of all influences, matching the bone index array."""

    data: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, self.data, float)

    @property
    def data_size(self) -> int:
        """Number of weights held."""
        return len(self.data)


class SceneObjectSkin(SceneBaseObject):
    """Binds a mesh to a skeleton through per-vertex bone influences."""

    def __init__(self) -> None:
        super().__init__(SceneObjectType.SKIN)
        self.bone_count_array: Optional[SkinBoneCountArray] = None
        self.bone_index_array: Optional[SkinBoneIndexArray] = None
        self.bone_weight_array: Optional[SkinBoneWeightArray] = None
        self.skeleton: Optional[SceneObjectSkeleton] = None
        self.skin_matrix = np.identity(4)

    def apply_skin_transform(self, matrix) -> None:
        """Set the bind-shape matrix of the skin."""
        mat = np.array(matrix, dtype=float)
        if mat.shape != (4, 4):
            raise ValueError("a skin matrix must be 4x4")
        self.skin_matrix = mat


class SceneObjectAnimationClip(SceneBaseObject):
    """A set of tracks animated together."""

    def __init__(self, index: int) -> None:
        super().__init__(SceneObjectType.ANIMATION_CLIP)
        self.index = index
        self.tracks: List[Any] = []

    def add_track(self, track: Any) -> None:
        """Add a track; it must provide ``update(progress)``."""
        self.tracks.append(track)

    def update(self, progress: float) -> None:
        """Advance every track to the given time point."""
        for track in self.tracks:
            track.update(progress)