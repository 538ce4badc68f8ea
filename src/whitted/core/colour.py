"""Linear RGB colour values.

Colours are unclamped while shading; clamping to the displayable range only
happens when an image is encoded (see ``src.whitted.preview.export``).
"""

from dataclasses import dataclass

from src.whitted.core.tuples import approx_equal


@dataclass(frozen=True, eq=False)
class Colour:
    """A linear RGB colour.

    Attributes:
        red: Red channel, nominally in [0, 1].
        green: Green channel, nominally in [0, 1].
        blue: Blue channel, nominally in [0, 1].
    """

    red: float
    green: float
    blue: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Colour") -> "Colour":
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Colour") -> "Colour":
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: "Colour | float") -> "Colour":
        # Hadamard product for colours, plain scaling for numbers
        if isinstance(other, Colour):
            return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Colour(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> "Colour":
        return Colour(self.red * scalar, self.green * scalar, self.blue * scalar)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_rgb255(self) -> tuple[int, int, int]:
        """Convert to 8-bit channels, truncating and clamping to [0, 255]."""
        return (_channel_to_byte(self.red), _channel_to_byte(self.green), _channel_to_byte(self.blue))


def _channel_to_byte(value: float) -> int:
    return max(0, min(255, int(value * 255)))


BLACK = Colour(0.0, 0.0, 0.0)
WHITE = Colour(1.0, 1.0, 1.0)
