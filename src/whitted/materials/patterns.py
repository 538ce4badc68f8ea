"""Procedural colour patterns.

Patterns are a closed set of variants (stripe, 3-D checker and a diagnostic
test pattern), each carrying its own transform and two colours. Evaluating a
pattern on a shape takes two inverse-transform steps: world space to the
shape's object space, then object space to pattern space.

Example:
    >>> from src.whitted.core.colour import BLACK, WHITE
    >>> from src.whitted.core.tuples import point
    >>> from src.whitted.materials.patterns import pattern_at, stripe_pattern
    >>> p = stripe_pattern(WHITE, BLACK)
    >>> pattern_at(p, point(1.5, 0, 0)) == BLACK
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from src.whitted.core.colour import BLACK, WHITE, Colour
from src.whitted.core.transform import IDENTITY, Transform
from src.whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from src.whitted.geometry.shapes import Shape


class PatternKind(Enum):
    """Enumeration of supported pattern types."""

    STRIPE = "stripe"
    CHECK_3D = "3d-check"
    TEST = "test"


@dataclass(frozen=True)
class Pattern:
    """A procedural pattern.

    Attributes:
        kind: Which pattern function to evaluate.
        colour_a: First colour (even cells / stripes).
        colour_b: Second colour (odd cells / stripes).
        transform: Object-to-pattern placement. Must be invertible.
    """

    kind: PatternKind
    colour_a: Colour = field(default_factory=lambda: WHITE)
    colour_b: Colour = field(default_factory=lambda: BLACK)
    transform: Transform = field(default_factory=lambda: IDENTITY)

    def __post_init__(self) -> None:
        # A singular placement would only surface per pixel otherwise
        self.transform.inverse()


def pattern_at(pattern: Pattern, pattern_point: Tuple) -> Colour:
    """Evaluate a pattern at a point already expressed in pattern space."""
    if pattern.kind is PatternKind.STRIPE:
        if math.floor(pattern_point.x) % 2 == 0:
            return pattern.colour_a
        return pattern.colour_b
    if pattern.kind is PatternKind.CHECK_3D:
        total = (
            math.floor(pattern_point.x)
            + math.floor(pattern_point.y)
            + math.floor(pattern_point.z)
        )
        return pattern.colour_a if total % 2 == 0 else pattern.colour_b
    if pattern.kind is PatternKind.TEST:
        return Colour(pattern_point.x, pattern_point.y, pattern_point.z)
    raise ValueError(f"Unknown pattern kind: {pattern.kind}")


def pattern_at_object(pattern: Pattern, shape: Shape, world_point: Tuple) -> Colour:
    """Evaluate a pattern attached to a shape at a world-space point."""
    object_point = shape.transform.inverse().apply(world_point)
    pattern_point = pattern.transform.inverse().apply(object_point)
    return pattern_at(pattern, pattern_point)


def stripe_pattern(a: Colour, b: Colour, transform: Transform = IDENTITY) -> Pattern:
    return Pattern(PatternKind.STRIPE, a, b, transform)


def checkers_pattern(a: Colour, b: Colour, transform: Transform = IDENTITY) -> Pattern:
    return Pattern(PatternKind.CHECK_3D, a, b, transform)


def debug_pattern(transform: Transform = IDENTITY) -> Pattern:
    """Diagnostic pattern whose colour encodes the pattern-space point."""
    return Pattern(PatternKind.TEST, transform=transform)

