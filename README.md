# vroom

Tessellated Bezier surface patches, along with the parts of a small 3D
engine that surround them. These parts are input codes and events,
callback lists and custom events, mesh, texture and material data, scene
components, and a reference-counted asset manager.

## Installation

```
pip install .
```

To install and run the tests:

```
pip install .[test]
pytest
```

## Bezier patches

`vroom.bezier.Bezier` holds a grid of control points of degree
`(degree_u, degree_v)`. It evaluates the surface and turns it into a
triangle mesh (`vroom.mesh_data.MeshData`) at a chosen sampling
resolution:

```python
from vroom.bezier import Bezier

patch = Bezier(3, 3, 50, 50)
for u in range(4):
    for v in range(4):
        patch.set_control_point(u, v, (u, 0.0, v))

point = patch.evaluate(0.5, 0.5)
mesh = patch.polygonize()
print(mesh.vertex_count, mesh.triangle_count)
```

`polygonize()` caches the mesh it returns. `set_control_point`,
`set_degrees` and `set_resolution` drop that cache, so the next call
recomputes the mesh. Each grid cell becomes two triangles, and every
triangle has its own three vertices carrying the triangle's normal. A
resolution below 2 in either direction gives an empty mesh.
`control_point(u, v)` returns a copy of a stored point.

The same module also provides the helpers `factorial`, `binomial` and
`bernstein`.

## Events

- `vroom.codes`: `KeyCode`, `MouseCode`, and `key_code_name` and
  `mouse_code_name` for display names.
- `vroom.event`: `EventType` and the `Event` record. `key_code` and
  `mouse_code` are typed views of its `code` field.
- `vroom.callbacks.CallbackList`: an ordered list of callbacks. A call to
  `trigger_all` fires all of them.
- `vroom.custom_event.CustomEvent`: passes the raw `Event` to each of its
  callbacks.
- `vroom.bimap.TwoWayMap`: a one-to-one mapping with lookup in both
  directions. Inserting a value that is already present raises
  `ValueError`.

## Assets

- `vroom.static_asset`: `StaticAsset`, `AssetInstance` and `get_extension`.
  An asset counts its live instances. `AssetInstance.copy()` adds one to
  the count. `release()`, or leaving the instance's `with` block, removes
  one.
- `vroom.material_parsing`: `read_material_parameters` and `parse_material`
  read material description files and assemble fragment shader source.
  Both raise `MaterialParseError` on a malformed or missing file.
- `vroom.shader_asset.ShaderAsset`: loads a description file that names a
  vertex shader and a fragment shader, then reads both sources. It logs
  any error and returns `False`.
- `vroom.asset_manager`: `init()`, `get_manager()` and `shutdown()` manage
  a single shared `AssetManager`. `get_asset(asset_type, asset_id)` loads
  each asset once and returns a new instance on each call. A failed load
  raises `AssetLoadError`. Asking for an ID under a different asset type
  raises `TypeError`.

## Data and components

`MeshData`, `Vertex`, `TextureData`, `MaterialData`, `TransformComponent`,
`PointLightComponent` and `NameComponent` are data holders.
`TransformComponent.transform` builds the 4x4 model matrix lazily with
numpy.

## What the package does not do

There is no window, renderer, scene graph or command-line program.
Shader sources are read as text and never compiled. Meshes are produced
as data and never drawn.