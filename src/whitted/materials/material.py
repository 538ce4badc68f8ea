"""Phong surface material.

A Material holds the coefficients used by the local illumination model plus
the reflective and refractive properties consumed by the recursive shading
steps. Defaults describe a white, fairly shiny, opaque, non-reflective
surface in vacuum.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.whitted.core.colour import WHITE, Colour
from src.whitted.materials.patterns import Pattern

# Common refractive indices
VACUUM = 1.0
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass(frozen=True)
class Material:
    """Surface properties of a shape.

    Attributes:
        colour: Base surface colour, ignored when a pattern is set.
        ambient: Ambient reflection coefficient.
        diffuse: Diffuse (Lambertian) reflection coefficient.
        specular: Specular highlight coefficient.
        shininess: Specular exponent; larger values give tighter highlights.
        reflectivity: Mirror reflection weight in [0, 1].
        transparency: Refraction weight in [0, 1].
        refractive_index: Index of refraction, at least 1.0.
        pattern: Optional procedural pattern replacing colour.
    """

    colour: Colour = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflectivity: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"Reflectivity = {self.reflectivity} is outside [0, 1].")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"Transparency = {self.transparency} is outside [0, 1].")
        if self.refractive_index < 1.0:
            raise ValueError(
                f"Index of refraction = {self.refractive_index} is less than 1.0. "
                "IOR must be >= 1.0 for physically meaningful materials."
            )
