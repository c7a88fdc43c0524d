from phantom.base import SceneBaseObject
from phantom.guid import Guid
from phantom.types import SceneObjectType


def test_new_object_gets_valid_guid():
    obj = SceneBaseObject(SceneObjectType.MESH)
    assert obj.guid.is_valid()
    assert obj.object_type is SceneObjectType.MESH


def test_guids_are_unique():
    guids = {SceneBaseObject(SceneObjectType.GEOMETRY).guid for _ in range(50)}
    assert len(guids) == 50


def test_explicit_guid_is_kept():
    guid = Guid("01234567-89ab-cdef-0123-456789abcdef")
    obj = SceneBaseObject(SceneObjectType.MATERIAL, guid)
    assert obj.guid == guid
    assert obj.object_type is SceneObjectType.MATERIAL