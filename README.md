# gameengine

The engine-independent core of a small 3D game engine, in plain Python with
no dependencies outside the standard library:

- `gameengine.vector`: immutable `Vector2`, `Vector3` and `Vector4`.
  `Vector2` and `Vector3` support `+`, `-`, `*` and `/` by a number;
  `Vector3` also has `dot`, `length`, `normalized` and `lerp`.
- `gameengine.quaternion`: immutable `Quaternion` (defaults to the identity)
  with `*` (quaternion product or scaling), `+`, `-`, `conjugate`, `norm`,
  `normalized`, `inverse` and `dot`, plus the functions `identity`,
  `from_axis_angle`, `slerp` and `rotate_vector`. `normalized` and `inverse`
  raise `ValueError` for a zero quaternion.
- `gameengine.matrix`: immutable `Matrix4x4` in the row-vector convention
  (translation in the last row), built from 16 numbers or 4 rows of 4, with
  `+`, `-`, `*` (matrix product or scaling), `m[i]` / `m[i, j]` indexing and
  `rows()`. Functions: `inverse` (raises `ValueError` for a singular matrix),
  `transpose`, `make_identity`, `make_translate`, `make_scale`,
  `make_rotate_x`, `make_rotate_y`, `make_rotate_z`, `make_rotate_xyz`,
  `make_rotate_from_quaternion`, `make_rotate_axis_angle` and `make_affine`
  (which takes either Euler angles as a `Vector3` or a `Quaternion`).
- `gameengine.transform`: `transform` (point transform with division by w,
  raising `ValueError` when w is zero), `transform_normal`,
  `extract_translation`, `make_perspective_fov`, `make_orthographic`,
  `make_viewport`, `look_at`, `cross`, `cotf`, `lerp`, `sign_normalize`,
  `direction_to_direction`, and the `EulerTransform` and
  `QuaternionTransform` dataclasses.
- `gameengine.easing`: the standard easing curves (`ease_in_sine` through
  `ease_in_out_bounce`), the `Ease` enumeration (each member's `function`
  property gives its curve) and `ease(kind, start, end, x)`.
- `gameengine.global_variables`: `GlobalVariables`, a store of named groups
  of int (32-bit), float, `Vector3` and bool values, saved to and loaded from
  one JSON file per group (`<directory>/<group>.json`, default directory
  `resource/GlobalVariables/`).
- `gameengine.scene`: the abstract `BaseScene` and `AbstractSceneFactory`,
  and `SceneManager`, which switches to a scheduled scene at the start of
  the next `update`.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Examples

Rotating a vector:

    import math
    from gameengine.vector import Vector3
    from gameengine.quaternion import from_axis_angle, rotate_vector

    q = from_axis_angle(Vector3(0.0, 0.0, 1.0), math.pi / 2)
    rotate_vector(Vector3(1.0, 0.0, 0.0), q)   # about (0, 1, 0)

Building a world matrix and moving a point with it:

    from gameengine.matrix import make_affine
    from gameengine.transform import transform

    world = make_affine(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(5, 0, 0))
    transform(Vector3(1, 2, 3), world)          # Vector3(6.0, 2.0, 3.0)

Easing a value:

    from gameengine.easing import Ease, ease

    ease(Ease.OUT_CUBIC, 0.0, 100.0, 0.5)       # 87.5

Tunable values kept in JSON:

    from gameengine.global_variables import GlobalVariables

    variables = GlobalVariables("resource/GlobalVariables")
    variables.add_item("Player", "speed", 0.3)  # only if not already set
    variables.save_file("Player")               # writes Player.json
    variables.load_files()                      # reads every .json file
    variables.get_float_value("Player", "speed")

The getters raise `KeyError` for an unknown group or key and `TypeError`
when the item holds a different kind of value.

Scenes:

    from gameengine.scene import AbstractSceneFactory, BaseScene, SceneManager

    class Title(BaseScene):
        def initialize(self): ...
        def finalize(self): ...
        def update(self): ...
        def draw(self): ...

    class Factory(AbstractSceneFactory):
        def create_scene(self, scene_name):
            return Title()

    manager = SceneManager(Factory())
    manager.change_scene("TITLE")
    manager.update()   # finalizes the old scene, initializes and updates the new one
    manager.draw()
    manager.finalize()

`change_scene` raises `RuntimeError` without a factory or while another
change is pending; `update`, `draw` and `finalize` raise `RuntimeError` when
no scene is active.

## What it does not do

The package has no window, renderer, input handling or audio, and no
command-line program. `BaseScene.draw` is only a hook for your own drawing
code, and `GlobalVariables` offers no editing interface: values are changed
through `set_value` and `add_item` or by editing the JSON files.