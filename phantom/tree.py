"""Scene graph nodes: a generic tree and nodes carrying transforms."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np

from phantom.transform import SceneObjectTransform

_ROOT_NAME = "scene"


class TreeNode:
    """A node with an owning parent link and an ordered list of children."""

    _TITLE = "Tree Node"

    def __init__(self) -> None:
        self.parent: Optional[TreeNode] = None
        self.children: List[TreeNode] = []

    def append_child(self, child: "TreeNode") -> None:
        """Attach ``child`` as the last child of this node."""
        child.parent = self
        self.children.append(child)

    def dump(self) -> str:
        """Extra node details for the text rendering; empty for a bare node."""
        return ""

    def _header(self, pad: str) -> str:
        return f"{pad}{self._TITLE}\n{pad}----------\n"

    def _extra_sections(self, depth: int) -> List[str]:
        return []

    def _render(self, depth: int) -> str:
        pad = " " * depth
        parts = [self._header(pad), self.dump(), "\n"]
        parts.extend(child._render(depth + 1) + "\n" for child in self.children)
        parts.extend(section + "\n" for section in self._extra_sections(depth))
        return "".join(parts)

    def __str__(self) -> str:
        return self._render(1)


class SceneBaseNode(TreeNode):
    """A named node with transforms and attached animation clips."""

    _TITLE = "Scene Node"

    def __init__(self, name: str = "") -> None:
        super().__init__()
        self.name = name
        self.transforms: List[SceneObjectTransform] = []
        self._transform_lookup: Dict[str, SceneObjectTransform] = {}
        self._animation_clips: Dict[int, Any] = {}
        self._object_transform: Optional[SceneObjectTransform] = None

    def _header(self, pad: str) -> str:
        return super()._header(pad) + f"{pad}Name: {self.name}\n"

    def _extra_sections(self, depth: int) -> List[str]:
        sections = [str(t) for t in self.transforms]
        sections.extend(str(clip) for _, clip in sorted(self._animation_clips.items()))
        return sections

    def calculated_transform_for_child(self) -> np.ndarray:
        """The product of this node's own transforms, last one applied first."""
        result = np.identity(4)
        for transform in reversed(self.transforms):
            result = result @ transform.matrix_first()
        return result

    def calculated_transform(self) -> np.ndarray:
        """The world transform: own transforms cascaded through the parents."""
        result = self.calculated_transform_for_child()
        for ancestor in self._ancestors():
            result = ancestor.calculated_transform_for_child() @ result
        return result

    def tree_chain(self) -> List[str]:
        """Names of the ancestors, nearest first, up to the scene root."""
        return [ancestor.name for ancestor in self._ancestors()]

    def _ancestors(self):
        parent = self.parent
        while isinstance(parent, SceneBaseNode) and parent.name != _ROOT_NAME:
            yield parent
            parent = parent.parent

    def append_transform(self, key: str, transform: SceneObjectTransform) -> None:
        """Add a transform and make it reachable under ``key``."""
        self.transforms.append(transform)
        self._transform_lookup[key] = transform

    def apply_object_transform(self, transform: SceneObjectTransform) -> None:
        """Set the transform that applies to the referenced object only."""
        self._object_transform = transform

    @property
    def object_transform(self) -> Optional[SceneObjectTransform]:
        """The object-only transform, if any."""
        return self._object_transform

    def get_transform(self, key: str) -> SceneObjectTransform:
        """The transform stored under ``key``; raises KeyError if absent."""
        try:
            return self._transform_lookup[key]
        except KeyError:
            raise KeyError(f"node {self.name!r} has no transform {key!r}") from None

    def attach_animation_clip(self, clip_index: int, clip: Any) -> None:
        """Attach a clip under ``clip_index``; an existing clip there is kept."""
        self._animation_clips.setdefault(clip_index, clip)

    @property
    def animation_clips(self) -> Dict[int, Any]:
        """Attached animation clips ordered by index."""
        return dict(sorted(self._animation_clips.items()))


class SceneNode(SceneBaseNode):
    """A scene node that refers to a scene object by key."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._scene_object_ref = ""

    def add_scene_object_ref(self, key: str) -> None:
        """Point this node at the scene object stored under ``key``."""
        self._scene_object_ref = key

    @property
    def scene_object_ref(self) -> str:
        """Key of the referenced scene object."""
        return self._scene_object_ref

    def dump(self) -> str:
        return f"{self._scene_object_ref}\n"