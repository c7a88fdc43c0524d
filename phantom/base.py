"""Common base for every scene object: a guid and a type tag."""

from __future__ import annotations

from typing import Optional

from phantom.guid import Guid, new_guid
from phantom.types import SceneObjectType


class SceneBaseObject:
    """Carries a unique id and the kind of scene object it is."""

    def __init__(self, object_type: SceneObjectType, guid: Optional[Guid] = None) -> None:
        self._guid = guid if guid is not None else new_guid()
        self.object_type = object_type

    @property
    def guid(self) -> Guid:
        """The object's unique identifier."""
        return self._guid