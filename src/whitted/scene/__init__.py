"""Scene module.

Components:
    world: World container, point lights and the reference default world
    loader: YAML scene description loader
    showcase: Demo scene factory
"""

from .loader import SceneError, load_scene, parse_scene
from .showcase import ShowcaseParams, create_showcase_scene
from .world import PointLight, World, default_world

__all__ = [
    "World",
    "PointLight",
    "default_world",
    "SceneError",
    "load_scene",
    "parse_scene",
    "ShowcaseParams",
    "create_showcase_scene",
]
