"""
Geometry and color value types shared by the arcade games.

Everything here is a frozen pydantic model: the simulation hands these out
in reports and the renderers read them, so nobody gets to mutate them.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """A position in viewport pixels.

    Off-screen values are legal; hazards spawn above the top edge.

    Examples:
        >>> Point2D(x=100.0, y=-20.0).as_tuple()
        (100.0, -20.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Viewport size in pixels.

    The window and the simulation share one coordinate space, so a window
    resize is a new Resolution passed to both.

    Attributes:
        width: Pixels across (> 0)
        height: Pixels down (> 0)

    Examples:
        >>> Resolution(width=800, height=600).aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """RGBA color, each channel 0-255.

    Examples:
        >>> Color.from_hex('#00ff88').as_rgb_tuple
        (0, 255, 136)
    """
    r: int
    g: int
    b: int
    a: int = 255

    model_config = ConfigDict(frozen=True)

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def check_channel(cls, v: int) -> int:
        if not 0 <= v <= 255:
            raise ValueError(f'color channel out of range 0-255: {v}')
        return v

    @classmethod
    def from_hex(cls, value: str, alpha: int = 255) -> 'Color':
        """Parse '#rrggbb' (the '#' is optional).

        Raises:
            ValueError: If the string is not six hex digits
        """
        digits = value.lstrip('#')
        if len(digits) != 6:
            raise ValueError(f'Expected a #rrggbb color, got {value!r}')
        red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls(r=red, g=green, b=blue, a=alpha)

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """RGBA, as pygame draw calls take it."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


class Rectangle(BaseModel):
    """Axis-aligned box: top-left corner plus size.

    Examples:
        >>> box = Rectangle(x=40.0, y=50.0, width=20.0, height=20.0)
        >>> box.center.as_tuple()
        (50.0, 60.0)
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def check_size(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f'rectangle size must be positive, got {v}')
        return v

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def is_within(self, viewport: Resolution) -> bool:
        """True if the whole box lies inside [0, width] x [0, height]."""
        return (self.left >= 0 and self.top >= 0
                and self.right <= viewport.width and self.bottom <= viewport.height)
