"""Recursive Whitted-style shading.

This module turns a ray into a colour. For the nearest visible hit it
evaluates Phong lighting from every light (with a hard shadow test), then
recurses along the mirror direction and the refracted direction, blending
the two with Schlick's Fresnel approximation when a surface is both
reflective and transparent.

``colour_at`` and ``reflected_colour`` / ``refracted_colour`` are mutually
recursive. The ``remaining`` depth argument threaded through every call is
the sole termination guarantee: at depth 0 the recursive terms contribute
black.

Key constants:
    OFFSET_EPSILON: Distance the hit point is nudged along the normal to
        build over_point / under_point and avoid self-intersection acne.
    MAX_RECURSION: Default recursion budget for a camera ray.

Example:
    >>> from src.whitted.core.integrator import colour_at
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.scene.world import default_world
    >>> colour_at(default_world(), Ray(point(0, 0, -5), vector(0, 0, 1)))
    Colour(red=0.38066..., green=0.47583..., blue=0.2855...)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from src.whitted.core.colour import BLACK, Colour
from src.whitted.core.ray import Intersection, Ray, hit, intersect_world
from src.whitted.core.tuples import Tuple
from src.whitted.geometry.shapes import Shape
from src.whitted.materials.material import VACUUM, Material
from src.whitted.materials.patterns import pattern_at_object
from src.whitted.scene.world import PointLight, World

# =============================================================================
# Shading Constants
# =============================================================================

# Offset along the normal for over_point / under_point
OFFSET_EPSILON = 1e-7

# Default recursion budget for reflection / refraction
MAX_RECURSION = 5


# =============================================================================
# Pre-computation
# =============================================================================


@dataclass(frozen=True)
class PreComputation:
    """Quantities derived once per hit and shared by every shading step.

    Attributes:
        t: Ray parameter of the hit.
        object: The shape that was hit.
        point: World-space hit point.
        eye: Unit vector from the hit back toward the ray origin.
        normal: Surface normal, flipped to face the eye when inside.
        inside: True if the ray originated inside the object.
        reflect: Ray direction reflected about the (possibly flipped) normal.
        over_point: point nudged along +normal, for shadow and reflection rays.
        under_point: point nudged along -normal, for refraction rays.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    point: Tuple
    eye: Tuple
    normal: Tuple
    inside: bool
    reflect: Tuple
    over_point: Tuple
    under_point: Tuple
    n1: float
    n2: float


def _refractive_indices(
    hit_intersection: Intersection, intersections: Sequence[Intersection]
) -> tuple[float, float]:
    """Find (n1, n2) at a hit by walking the sorted intersections.

    ``containers`` holds the shapes the ray is currently inside, in the order
    they were entered. Each crossing toggles its shape in or out; the media
    either side of the hit are the innermost containers just before and just
    after the hit's own crossing.
    """
    containers: list[Shape] = []
    for intersection in intersections:
        is_hit = intersection is hit_intersection
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM

        shape = intersection.object
        if any(shape is c for c in containers):
            containers = [c for c in containers if c is not shape]
        else:
            containers.append(shape)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM
            return n1, n2
    raise ValueError("Hit intersection is not in the intersection list")


def prepare_computations(
    hit_intersection: Intersection,
    ray: Ray,
    intersections: Sequence[Intersection] | None = None,
) -> PreComputation:
    """Derive the shading state for a hit.

    Args:
        hit_intersection: The intersection being shaded. When intersections
            is given it must be one of its elements (matched by identity).
        ray: The ray that produced the intersection.
        intersections: All intersections along the ray sorted by t, used to
            find the refractive indices. Defaults to just the hit.

    Returns:
        The PreComputation for this hit.
    """
    if intersections is None:
        intersections = [hit_intersection]

    shape = hit_intersection.object
    position = ray.position(hit_intersection.t)
    normal = shape.normal_at(position)
    eye = -ray.direction

    inside = normal.dot(eye) < 0.0
    if inside:
        normal = -normal

    reflect = ray.direction.reflect(normal)
    offset = normal * OFFSET_EPSILON
    n1, n2 = _refractive_indices(hit_intersection, intersections)

    return PreComputation(
        t=hit_intersection.t,
        object=shape,
        point=position,
        eye=eye,
        normal=normal,
        inside=inside,
        reflect=reflect,
        over_point=position + offset,
        under_point=position - offset,
        n1=n1,
        n2=n2,
    )


# =============================================================================
# Local Illumination
# =============================================================================


def calculate_lighting(
    material: Material,
    shape: Shape,
    light: PointLight,
    position: Tuple,
    eye: Tuple,
    normal: Tuple,
    in_shadow: bool,
) -> Colour:
    """Phong reflection model for one light.

    Args:
        material: Surface material at the point.
        shape: Shape owning the material, needed to place its pattern.
        light: The light being evaluated.
        position: World-space point being lit.
        eye: Unit vector toward the viewer.
        normal: Unit surface normal.
        in_shadow: If True only the ambient term is returned.

    Returns:
        ambient + diffuse + specular, unclamped.
    """
    if material.pattern is not None:
        surface = pattern_at_object(material.pattern, shape, position)
    else:
        surface = material.colour
    effective_colour = surface * light.intensity
    ambient = effective_colour * material.ambient
    if in_shadow:
        return ambient

    light_vec = (light.position - position).normalize()
    light_dot_normal = light_vec.dot(normal)
    if light_dot_normal < 0.0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_colour * (material.diffuse * light_dot_normal)

    reflect_vec = (-light_vec).reflect(normal)
    reflect_dot_eye = reflect_vec.dot(eye)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular


def is_shadowed(world: World, position: Tuple) -> bool:
    """Check whether anything lies between a point and the world's first light.

    Only ``world.lights[0]`` is consulted, even when more lights exist.
    A world without lights casts no shadows.
    """
    if not world.lights:
        return False
    to_light = world.lights[0].position - position
    distance = to_light.magnitude()
    shadow_ray = Ray(position, to_light.normalize())
    nearest = hit(intersect_world(world, shadow_ray))
    return nearest is not None and nearest.t < distance


# =============================================================================
# Recursive Terms
# =============================================================================


def reflected_colour(world: World, comps: PreComputation, remaining: int) -> Colour:
    """Colour seen along the mirror direction, weighted by reflectivity."""
    reflectivity = comps.object.material.reflectivity
    if remaining <= 0 or reflectivity == 0.0:
        return BLACK
    reflect_ray = Ray(comps.over_point, comps.reflect)
    return colour_at(world, reflect_ray, remaining - 1) * reflectivity


def refracted_colour(world: World, comps: PreComputation, remaining: int) -> Colour:
    """Colour seen through the surface along the Snell's-law direction.

    Returns black when the material is opaque, the budget is spent, or the
    hit is a case of total internal reflection.
    """
    transparency = comps.object.material.transparency
    if transparency == 0.0 or remaining <= 0:
        return BLACK

    n_ratio = comps.n1 / comps.n2
    cos_i = comps.eye.dot(comps.normal)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return BLACK

    cos_t = math.sqrt(1.0 - sin2_t)
    direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye * n_ratio
    refract_ray = Ray(comps.under_point, direction)
    return colour_at(world, refract_ray, remaining - 1) * transparency


def schlick(comps: PreComputation) -> float:
    """Schlick's approximation of the Fresnel reflectance at a hit.

    Returns:
        The fraction of light reflected, in [0, 1]. 1.0 under total internal
        reflection.
    """
    cosine = comps.eye.dot(comps.normal)
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cosine * cosine)
        if sin2_t > 1.0:
            return 1.0
        cosine = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


# =============================================================================
# Shading Entry Points
# =============================================================================


def shade_hit(world: World, comps: PreComputation, remaining: int = MAX_RECURSION) -> Colour:
    """Full colour at a prepared hit: local lighting plus recursive terms."""
    shape = comps.object
    material = shape.material
    shadowed = is_shadowed(world, comps.over_point)

    surface = BLACK
    for light in world.lights:
        surface = surface + calculate_lighting(
            material, shape, light, comps.over_point, comps.eye, comps.normal, shadowed
        )

    reflected = reflected_colour(world, comps, remaining)
    refracted = refracted_colour(world, comps, remaining)

    if material.reflectivity > 0.0 and material.transparency > 0.0:
        reflectance = schlick(comps)
        return surface + reflected * reflectance + refracted * (1.0 - reflectance)
    return surface + reflected + refracted


def colour_at(world: World, ray: Ray, remaining: int = MAX_RECURSION) -> Colour:
    """Trace a ray into the world and return the colour it sees.

    Rays that hit nothing see the black background.
    """
    intersections = intersect_world(world, ray)
    nearest = hit(intersections)
    if nearest is None:
        return BLACK
    comps = prepare_computations(nearest, ray, intersections)
    return shade_hit(world, comps, remaining)
