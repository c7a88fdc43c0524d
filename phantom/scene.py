"""A scene: the node graph plus every object its nodes refer to."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from phantom.camera import CameraNode
from phantom.guid import Guid
from phantom.material import SceneObjectMaterial
from phantom.nodes import SceneGeometryNode, SceneLightNode
from phantom.objects import SceneBoneNode, SceneObjectGeometry, SceneObjectLight
from phantom.tree import SceneBaseNode

_DEFAULT_MATERIAL = "default"


class Scene:
    """Objects stored by key, nodes indexed by name, and a working camera."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.scene_root_graph = SceneBaseNode(name)

        self.geometry_objects: Dict[str, SceneObjectGeometry] = {}
        self.materials: Dict[str, SceneObjectMaterial] = {}
        self.lights: Dict[str, SceneObjectLight] = {}

        # Several nodes may share a name, so those indexes hold lists.
        self.geometry_nodes: Dict[str, List[SceneGeometryNode]] = {}
        self.light_nodes: Dict[str, SceneLightNode] = {}
        self.bone_nodes: Dict[str, List[SceneBoneNode]] = {}
        self.skeleton_animation_objects: Dict[Guid, Any] = {}
        self.animation_nodes: List[SceneBaseNode] = []

        self.camera = CameraNode()
        self._default_material = SceneObjectMaterial(_DEFAULT_MATERIAL)

    def first_material(self) -> Optional[SceneObjectMaterial]:
        """The first stored material, or None when there are none."""
        return next(iter(self.materials.values()), None)

    def get_material(self, name: str) -> SceneObjectMaterial:
        """The named material, or the scene's default material."""
        return self.materials.get(name, self._default_material)

    def get_light(self, name: str) -> Optional[SceneObjectLight]:
        """The named light, or None."""
        return self.lights.get(name)

    def load_textures(self) -> None:
        """Ask every material to load its textures."""
        for material in self.materials.values():
            if material is not None:
                material.load_textures()