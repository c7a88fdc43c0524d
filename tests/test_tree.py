import numpy as np
import pytest

from phantom.transform import SceneObjectTransform, translation_matrix
from phantom.tree import SceneBaseNode, SceneNode, TreeNode


def _translated(name, x, y, z):
    node = SceneBaseNode(name)
    node.append_transform("t", SceneObjectTransform(name, translation_matrix(x, y, z)))
    return node


def test_append_child_sets_parent():
    root = TreeNode()
    child = TreeNode()
    root.append_child(child)
    assert child.parent is root
    assert root.children == [child]


def test_tree_node_rendering():
    root = TreeNode()
    root.append_child(TreeNode())
    text = str(root)
    assert text.startswith(" Tree Node\n ----------\n")
    assert "  Tree Node\n" in text


def test_scene_node_rendering_has_name():
    node = SceneBaseNode("box")
    text = str(node)
    assert " Scene Node\n" in text
    assert " Name: box\n" in text


def test_own_transform_product():
    node = SceneBaseNode("n")
    a = translation_matrix(1.0, 0.0, 0.0)
    b = translation_matrix(0.0, 2.0, 0.0)
    node.append_transform("a", SceneObjectTransform("n", a))
    node.append_transform("b", SceneObjectTransform("n", b))
    np.testing.assert_allclose(node.calculated_transform_for_child(), b @ a)


def test_calculated_transform_cascades_parents_until_scene():
    scene = _translated("scene", 100.0, 100.0, 100.0)
    parent = _translated("parent", 1.0, 2.0, 3.0)
    child = _translated("child", 4.0, 5.0, 6.0)
    scene.append_child(parent)
    parent.append_child(child)
    expected = parent.calculated_transform_for_child() @ child.calculated_transform_for_child()
    np.testing.assert_allclose(child.calculated_transform(), expected)


def test_calculated_transform_without_transforms_is_identity():
    np.testing.assert_allclose(SceneBaseNode("x").calculated_transform(), np.identity(4))


def test_tree_chain_stops_at_scene():
    scene = SceneBaseNode("scene")
    a = SceneBaseNode("a")
    b = SceneBaseNode("b")
    c = SceneBaseNode("c")
    scene.append_child(a)
    a.append_child(b)
    b.append_child(c)
    assert c.tree_chain() == ["b", "a"]


def test_get_transform_by_key():
    node = SceneBaseNode("n")
    t = SceneObjectTransform("n", np.identity(4))
    node.append_transform("local", t)
    assert node.get_transform("local") is t
    with pytest.raises(KeyError):
        node.get_transform("missing")


def test_object_transform():
    node = SceneBaseNode("n")
    t = SceneObjectTransform("n", np.identity(4), object_only=True)
    node.apply_object_transform(t)
    assert node.object_transform is t


def test_attach_animation_clip_keeps_first_and_sorts():
    node = SceneBaseNode("n")
    node.attach_animation_clip(2, "second")
    node.attach_animation_clip(1, "first")
    node.attach_animation_clip(2, "replacement")
    assert node.animation_clips == {1: "first", 2: "second"}
    assert list(node.animation_clips) == [1, 2]


def test_scene_node_ref_and_dump():
    node = SceneNode("geo")
    node.add_scene_object_ref("mesh_key")
    assert node.scene_object_ref == "mesh_key"
    assert node.dump() == "mesh_key\n"
    assert "mesh_key\n" in str(node)