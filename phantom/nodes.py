"""Scene nodes that place geometry and lights in the scene graph."""

from __future__ import annotations

from typing import Any, List, Optional

from phantom.tree import SceneNode

_DEFAULT_MATERIAL = "default"


class SceneGeometryNode(SceneNode):
    """A node that places a geometry object and names its materials."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.visible = True
        self.cast_shadow = False
        self.motion_blur = False
        self.materials: List[str] = []
        self._rigid_body: Optional[Any] = None

    def add_material_ref(self, key: str) -> None:
        """Append the key of a material used by this node."""
        self.materials.append(key)

    def material_ref(self, index: int) -> str:
        """The material key at ``index``, or ``"default"`` when out of range."""
        if 0 <= index < len(self.materials):
            return self.materials[index]
        return _DEFAULT_MATERIAL

    def link_rigid_body(self, rigid_body: Any) -> None:
        """Attach a physics body to this node."""
        self._rigid_body = rigid_body

    def unlink_rigid_body(self) -> Optional[Any]:
        """Detach and return the physics body, if any."""
        rigid_body, self._rigid_body = self._rigid_body, None
        return rigid_body

    @property
    def rigid_body(self) -> Optional[Any]:
        """The attached physics body, if any."""
        return self._rigid_body

    def dump(self) -> str:
        lines = [
            f"Visible: {int(self.visible)}",
            f"Shadow: {int(self.cast_shadow)}",
            f"Motion Blur: {int(self.motion_blur)}",
            "Material(s): ",
            *self.materials,
        ]
        return super().dump() + "".join(line + "\n" for line in lines)


class SceneLightNode(SceneNode):
    """A node that places a light object."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.cast_shadow = False