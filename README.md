# phantom

The scene layer of a small 3D engine, in plain Python. numpy does the
matrix work.

## What it provides

- `phantom.scene.Scene` stores objects by key:
  - `geometry_objects`, `materials` and `lights`
  - node indexes `geometry_nodes`, `light_nodes` and `bone_nodes`
  - a root node, `scene_root_graph`
  - a `CameraNode`, `camera`

  `get_material(name)` returns a material named `default` when the name is
  unknown. `get_light(name)` returns `None` when the name is unknown.
  `first_material()` returns the first stored material, or `None`.
  `load_textures()` asks every material to load its textures.
- `phantom.tree` has `TreeNode`, `SceneBaseNode` and `SceneNode`.
  - Nodes form a hierarchy with `append_child`.
  - Nodes hold keyed transforms, set with `append_transform` and read with
    `get_transform`.
  - Nodes hold animation clips, set with `attach_animation_clip`.
  - `calculated_transform()` multiplies a node's own transforms by those of
    its ancestors. It stops at an ancestor named `scene`.
  - `tree_chain()` lists the ancestor names, nearest first.
  - `str(node)` renders the subtree as indented text.
- `phantom.nodes` has two node types:
  - `SceneGeometryNode` holds material references. `material_ref(i)`
    returns `"default"` when `i` is out of range. The node can also link and
    unlink a rigid body.
  - `SceneLightNode` places a light.
- `phantom.objects` has the scene objects:
  - `SceneObjectMesh` and `SceneObjectGeometry` (meshes and LODs)
  - `SceneObjectLight` and `SceneObjectDirectLight`
  - `SceneObjectSkin` with its bone count, index and weight arrays
  - `SceneObjectSkeleton`, `SkeletonBoneRefArray` and `SceneBoneNode`
  - `SceneObjectAnimationClip`, whose `update(progress)` calls `update` on
    each of its tracks
- `phantom.material.SceneObjectMaterial` has colour, parameter and texture
  slots.
  - `set_color`, `set_param` and `set_texture` ignore attribute names they
    do not know.
  - A texture given as a string is cut down to the part that starts at
    `Textures` (see `texture_relative_name`). If the string has no
    `Textures` folder, this raises `ValueError`.
- `phantom.arrays` has `IndexArray` and `VertexArray`. They report their
  byte size (`data_size()`) and their index or vertex count.
- `phantom.transform` has `SceneObjectTransform` and
  `SceneObjectTranslation`, which can translate along all axes or, through
  `along_axis`, along one. It also has `translation_matrix(x, y, z)`.
- `phantom.camera` has `CameraNode`, a camera steered by yaw and pitch.
  - It moves with `process_keyboard` and a `CameraDirection`.
  - It turns with `process_mouse_movement`.
  - It builds its view and projection matrices with `calculate_vp_matrix`.
  - The module also has the helpers `look_at` and `perspective`.
- `phantom.types` has the tags `IndexDataType`, `VertexDataType`,
  `SceneObjectType` and `PrimitiveType`. It also has `ParameterValueMap`, a
  value with an optional texture map.
- Utilities:
  - `phantom.guid.Guid` and `new_guid()`: 16-byte identifiers that parse
    from hex text. Malformed text gives the invalid all-zero guid.
  - `phantom.timer.Timer`: a stopwatch.
  - `phantom.textutils.read_file` and `replace_first`.

## Example

```python
from phantom.scene import Scene
from phantom.nodes import SceneGeometryNode
from phantom.transform import SceneObjectTranslation

scene = Scene("scene")
node = SceneGeometryNode("box")
node.append_transform("move", SceneObjectTranslation("box", 1.0, 2.0, 3.0))
scene.scene_root_graph.append_child(node)

print(node.calculated_transform())
print(scene.get_material("missing").name)   # "default"

camera = scene.camera
camera.process_mouse_movement(10.0, 5.0)
camera.calculate_vp_matrix(16 / 9)
print(camera.projection_matrix)
```

## What it does not do

This package only holds and computes scene data. It does not:

- draw anything, or open a window
- talk to a graphics API, or compile shaders
- read scene or image files

Texture slots and animation tracks accept any object you supply. The
package calls `load_texture()` or `update()` on these objects, but does not
provide any.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```