"""Surface materials: colours and parameters that textures may override."""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from phantom.base import SceneBaseObject
from phantom.types import ParameterValueMap, SceneObjectType

_TEXTURE_DIR = "Textures"

_COLOR_ATTRS = {
    "diffuse": "base_color",
    "specular": "specular",
    "emission": "emission",
    "opacity": "opacity",
    "transparency": "transparency",
}

_PARAM_ATTRS = {
    "metallic": "metallic",
    "roughness": "roughness",
    "specular_power": "specular_power",
    "ao": "ambient_occlusion",
    "height": "height",
}

_TEXTURE_ATTRS = {**_COLOR_ATTRS, **_PARAM_ATTRS, "normal": "normal"}

_WHITE = (1.0, 1.0, 1.0, 1.0)


def texture_relative_name(texture_name: str) -> str:
    """Cut an exported path down to the part starting at the Textures folder."""
    start = texture_name.find(_TEXTURE_DIR)
    if start < 0:
        raise ValueError(f"texture path {texture_name!r} has no {_TEXTURE_DIR} folder")
    return texture_name[start:]


def _color(value: Sequence[float]) -> Tuple[float, ...]:
    result = tuple(float(c) for c in value)
    if len(result) != 4:
        raise ValueError("a colour needs four components")
    return result


class SceneObjectMaterial(SceneBaseObject):
    """A named material; unknown attribute names are ignored by the setters."""

    def __init__(self, name: str = "") -> None:
        super().__init__(SceneObjectType.MATERIAL)
        self.name = name
        self.base_color = ParameterValueMap(_WHITE)
        self.metallic = ParameterValueMap(0.0)
        self.roughness = ParameterValueMap(0.0)
        self.normal = ParameterValueMap((0.0, 0.0, 1.0))
        self.specular = ParameterValueMap(_WHITE)
        self.specular_power = ParameterValueMap(1.0)
        self.ambient_occlusion = ParameterValueMap(1.0)
        self.opacity = ParameterValueMap(_WHITE)
        self.transparency = ParameterValueMap(_WHITE)
        self.emission = ParameterValueMap(_WHITE)
        self.height = ParameterValueMap(0.0)

    def set_color(self, attrib: str, color: Sequence[float]) -> None:
        """Set a colour slot to a plain value, dropping any texture on it."""
        slot = _COLOR_ATTRS.get(attrib)
        if slot is not None:
            setattr(self, slot, ParameterValueMap(_color(color)))

    def set_param(self, attrib: str, param: float) -> None:
        """Set a scalar slot to a plain value, dropping any texture on it."""
        slot = _PARAM_ATTRS.get(attrib)
        if slot is not None:
            setattr(self, slot, ParameterValueMap(float(param)))

    def set_texture(self, attrib: str, texture: Any) -> None:
        """Put a texture on a slot, keeping its plain value.

        A string is taken as an exported texture path and is kept as the
        relative name from the Textures folder on.
        """
        slot = _TEXTURE_ATTRS.get(attrib)
        if slot is None:
            return
        if isinstance(texture, str):
            texture = texture_relative_name(texture)
        getattr(self, slot).value_map = texture

    def load_textures(self) -> None:
        """Load the base colour texture when it is a loadable texture object."""
        texture = self.base_color.value_map
        loader = getattr(texture, "load_texture", None)
        if callable(loader):
            loader()

    def __repr__(self) -> str:
        return f"SceneObjectMaterial(name={self.name!r})"