"""YAML scene description loader.

A scene document is a YAML list of entities, each tagged by ``add``:

.. code-block:: yaml

    - add: camera
      width: 100
      height: 50
      field-of-view: 1.047
      from: [0, 1.5, -5]
      to: [0, 1, 0]
      up: [0, 1, 0]

    - add: light
      at: [-10, 10, -10]
      intensity: [1, 1, 1]

    - add: sphere
      material:
        colour: [0.1, 1, 0.5]
        diffuse: 0.7
        pattern:
          type: stripe
          colour-a: [1, 1, 1]
          colour-b: [0, 0, 0]
          transform:
            - [scale, 0.25, 0.25, 0.25]
      transform:
        - [rotate-y, 0.5]
        - [translate, -0.5, 1, 0.5]

Transform lists are applied in the order written: in the example the sphere
is rotated first, then translated. ``color`` is accepted as an alias for
``colour`` everywhere. Malformed documents raise :class:`SceneError`.

Example:
    >>> from src.whitted.scene.loader import load_scene
    >>> world, camera = load_scene("examples/scenes/reflections.yaml")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from src.whitted.camera.pinhole import Camera, view_transform
from src.whitted.core.colour import Colour
from src.whitted.core.transform import IDENTITY, SingularMatrixError, Transform
from src.whitted.core.tuples import Tuple, point, vector
from src.whitted.geometry.shapes import Shape, ShapeKind
from src.whitted.materials.material import Material
from src.whitted.materials.patterns import Pattern, PatternKind
from src.whitted.scene.world import PointLight, World

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a scene document cannot be turned into a World and Camera."""


# Scalar material keys that map straight onto Material fields
_MATERIAL_SCALARS = (
    "ambient",
    "diffuse",
    "specular",
    "shininess",
    "reflectivity",
    "transparency",
    "refractive_index",
)

_PATTERN_KINDS = {kind.value: kind for kind in PatternKind}
_SHAPE_KINDS = {kind.value: kind for kind in ShapeKind}

# Number of arguments each transform operation takes
_TRANSFORM_ARITY = {
    "rotate-x": 1,
    "rotate-y": 1,
    "rotate-z": 1,
    "translate": 3,
    "scale": 3,
    "shear": 6,
}


# =============================================================================
# Value Parsing
# =============================================================================


def _number(value: Any, where: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{where}: expected a number, got {value!r}")
    return float(value)


def _triple(value: Any, where: str) -> tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneError(f"{where}: expected a list of three numbers, got {value!r}")
    x, y, z = (_number(v, where) for v in value)
    return x, y, z


def _point(value: Any, where: str) -> Tuple:
    return point(*_triple(value, where))


def _vector(value: Any, where: str) -> Tuple:
    return vector(*_triple(value, where))


def _colour(value: Any, where: str) -> Colour:
    return Colour(*_triple(value, where))


def _aliased(mapping: Mapping[str, Any], key: str) -> Any:
    """Look up a colour key, accepting the ``color`` spelling too."""
    if key in mapping:
        return mapping[key]
    return mapping.get(key.replace("colour", "color"))


def parse_transform(steps: Any, where: str = "transform") -> Transform:
    """Build a Transform from a list of named operations.

    Each step is ``[name, args...]`` with name one of ``rotate-x``,
    ``rotate-y``, ``rotate-z`` (one angle in radians), ``translate`` or
    ``scale`` (three numbers), or ``shear`` (six numbers). Steps apply in
    list order.

    Raises:
        SceneError: If a step is unknown or has the wrong arity.
    """
    if steps is None:
        return IDENTITY
    if not isinstance(steps, list):
        raise SceneError(f"{where}: expected a list of operations, got {steps!r}")

    result = IDENTITY
    for step in steps:
        if not isinstance(step, list) or not step or not isinstance(step[0], str):
            raise SceneError(f"{where}: malformed operation {step!r}")
        name, args = step[0], [_number(a, f"{where} {step[0]}") for a in step[1:]]
        if name not in _TRANSFORM_ARITY:
            raise SceneError(f"{where}: unknown operation {name!r}")
        if len(args) != _TRANSFORM_ARITY[name]:
            raise SceneError(
                f"{where}: {name} takes {_TRANSFORM_ARITY[name]} argument(s), got {len(args)}"
            )
        if name == "rotate-x":
            result = result.rotate_x(*args)
        elif name == "rotate-y":
            result = result.rotate_y(*args)
        elif name == "rotate-z":
            result = result.rotate_z(*args)
        elif name == "translate":
            result = result.translate(*args)
        elif name == "scale":
            result = result.scale(*args)
        else:
            result = result.shear(*args)
    return result


def parse_pattern(data: Any, where: str = "pattern") -> Pattern:
    if not isinstance(data, Mapping):
        raise SceneError(f"{where}: expected a mapping, got {data!r}")
    type_name = data.get("type")
    kind = _PATTERN_KINDS.get(type_name) if isinstance(type_name, str) else None
    if kind is None:
        raise SceneError(f"{where}: unknown pattern type {type_name!r}")
    transform = parse_transform(data.get("transform"), where)
    try:
        if kind is PatternKind.TEST:
            return Pattern(kind, transform=transform)

        colour_a = _aliased(data, "colour-a")
        colour_b = _aliased(data, "colour-b")
        if colour_a is None or colour_b is None:
            raise SceneError(f"{where}: {kind.value} pattern needs colour-a and colour-b")
        return Pattern(
            kind,
            _colour(colour_a, f"{where} colour-a"),
            _colour(colour_b, f"{where} colour-b"),
            transform,
        )
    except SingularMatrixError as e:
        raise SceneError(f"{where}: pattern transform is not invertible") from e


def parse_material(data: Any, where: str = "material") -> Material:
    if data is None:
        return Material()
    if not isinstance(data, Mapping):
        raise SceneError(f"{where}: expected a mapping, got {data!r}")

    kwargs: dict[str, Any] = {}
    colour = _aliased(data, "colour")
    if colour is not None:
        kwargs["colour"] = _colour(colour, f"{where} colour")
    for key in _MATERIAL_SCALARS:
        if key in data:
            kwargs[key] = _number(data[key], f"{where} {key}")
    if "pattern" in data:
        kwargs["pattern"] = parse_pattern(data["pattern"], f"{where} pattern")

    try:
        return Material(**kwargs)
    except ValueError as e:
        raise SceneError(f"{where}: {e}") from e


# =============================================================================
# Entities
# =============================================================================


def _require(entity: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in entity:
        raise SceneError(f"{where}: missing required key {key!r}")
    return entity[key]


def parse_camera(entity: Mapping[str, Any], where: str = "camera") -> Camera:
    width = _require(entity, "width", where)
    height = _require(entity, "height", where)
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (width, height)):
        raise SceneError(f"{where}: width and height must be integers")
    try:
        return Camera(
            hsize=width,
            vsize=height,
            field_of_view=_number(_require(entity, "field-of-view", where), where),
            transform=view_transform(
                _point(_require(entity, "from", where), f"{where} from"),
                _point(_require(entity, "to", where), f"{where} to"),
                _vector(_require(entity, "up", where), f"{where} up"),
            ),
        )
    except ValueError as e:
        raise SceneError(f"{where}: {e}") from e


def parse_light(entity: Mapping[str, Any], where: str = "light") -> PointLight:
    return PointLight(
        intensity=_colour(_require(entity, "intensity", where), f"{where} intensity"),
        position=_point(_require(entity, "at", where), f"{where} at"),
    )


def parse_shape(entity: Mapping[str, Any], where: str = "shape") -> Shape:
    kind = _SHAPE_KINDS[entity["add"]]
    material = parse_material(entity.get("material"), f"{where} material")
    transform = parse_transform(entity.get("transform"), f"{where} transform")
    try:
        return Shape(kind, material, transform)
    except SingularMatrixError as e:
        raise SceneError(f"{where}: transform is not invertible") from e


def parse_scene(document: Any) -> tuple[World, Camera]:
    """Build a World and Camera from a scene document.

    Args:
        document: YAML text, or the already-parsed list of entities.

    Returns:
        Tuple of (world, camera). Shapes and lights keep document order.

    Raises:
        SceneError: If the document is malformed or has no camera.
    """
    if isinstance(document, str):
        try:
            document = yaml.safe_load(document)
        except yaml.YAMLError as e:
            raise SceneError(f"Invalid YAML: {e}") from e

    if not isinstance(document, list):
        raise SceneError("Scene document must be a list of entities")

    world = World()
    camera: Camera | None = None
    for index, entity in enumerate(document):
        where = f"entity {index}"
        if not isinstance(entity, Mapping) or "add" not in entity:
            raise SceneError(f"{where}: expected a mapping with an 'add' key")
        kind = entity["add"]
        where = f"entity {index} ({kind})"
        if not isinstance(kind, str):
            raise SceneError(f"{where}: entity kind must be a string")
        if kind == "camera":
            if camera is not None:
                raise SceneError(f"{where}: scene defines more than one camera")
            camera = parse_camera(entity, where)
        elif kind == "light":
            world.add_light(parse_light(entity, where))
        elif kind in _SHAPE_KINDS:
            world.add_object(parse_shape(entity, where))
        else:
            raise SceneError(f"{where}: unknown entity kind {kind!r}")

    if camera is None:
        raise SceneError("Scene document does not define a camera")

    logger.debug(
        "Parsed scene: %d object(s), %d light(s), camera %dx%d",
        len(world.objects),
        len(world.lights),
        camera.hsize,
        camera.vsize,
    )
    return world, camera


def load_scene(path: str | Path) -> tuple[World, Camera]:
    """Read a YAML scene file and build its World and Camera.

    Raises:
        SceneError: If the document is malformed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    logger.info("Loading scene from %s", path)
    with path.open("r", encoding="utf-8") as f:
        return parse_scene(f.read())
