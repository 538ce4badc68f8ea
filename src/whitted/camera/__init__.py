"""Camera module: pinhole camera and look-at view transform."""

from .pinhole import Camera, view_transform

__all__ = ["Camera", "view_transform"]
