"""Materials module.

Components:
    material: Phong surface parameters plus reflectivity and transparency
    patterns: Stripe, 3D checker and debug colour patterns
"""

from .material import DIAMOND, GLASS, VACUUM, WATER, Material
from .patterns import (
    Pattern,
    PatternKind,
    checkers_pattern,
    debug_pattern,
    pattern_at,
    pattern_at_object,
    stripe_pattern,
)

__all__ = [
    "Material",
    "VACUUM",
    "WATER",
    "GLASS",
    "DIAMOND",
    "Pattern",
    "PatternKind",
    "pattern_at",
    "pattern_at_object",
    "stripe_pattern",
    "checkers_pattern",
    "debug_pattern",
]
