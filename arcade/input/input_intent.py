"""
Input Intent - The unified movement request read once per tick.

Keyboard-style sources produce a set of held directions; pointer and touch
sources produce a target position. Both shapes collapse into InputIntent so
the simulation resolves movement through a single code path.
Uses a frozen dataclass since a new intent is built every frame.
"""
from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, Union

from models import Point2D


class Direction(IntFlag):
    """Held movement directions as a 4-bit set."""
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8


@dataclass(frozen=True)
class InputIntent:
    """Immutable movement intent for one tick.

    When a pointer target is present it takes precedence over the
    direction set; the player steers toward the target instead.

    Attributes:
        directions: Held directions (opposites may both be set)
        pointer: Active pointer/touch target, or None when released
    """
    directions: Direction = Direction.NONE
    pointer: Optional[Point2D] = None

    @property
    def pointer_active(self) -> bool:
        return self.pointer is not None

    @property
    def is_idle(self) -> bool:
        return self.pointer is None and self.directions == Direction.NONE

    @classmethod
    def idle(cls) -> 'InputIntent':
        return cls()

    @classmethod
    def from_directions(cls, directions: Union[Direction, int]) -> 'InputIntent':
        return cls(directions=Direction(directions))

    @classmethod
    def from_pointer(cls, target: Point2D) -> 'InputIntent':
        return cls(pointer=target)

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.pointer is not None:
            return f"InputIntent(pointer=({self.pointer.x:.1f}, {self.pointer.y:.1f}))"
        return f"InputIntent(directions={self.directions!r})"


RawIntent = Union[None, InputIntent, Direction, int, Point2D]


def normalize_intent(raw: RawIntent) -> InputIntent:
    """Collapse any accepted intent shape into an InputIntent.

    Args:
        raw: None (no input), a Direction flag set, a Point2D pointer
            target, or an InputIntent

    Returns:
        Equivalent InputIntent

    Raises:
        TypeError: If raw is none of the accepted shapes

    Examples:
        >>> normalize_intent(Direction.LEFT).directions == Direction.LEFT
        True
        >>> normalize_intent(None).is_idle
        True
    """
    if raw is None:
        return InputIntent.idle()
    if isinstance(raw, InputIntent):
        return raw
    if isinstance(raw, Point2D):
        return InputIntent.from_pointer(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return InputIntent.from_directions(raw)
    raise TypeError(
        f"intent must be None, Direction, Point2D or InputIntent, got {type(raw).__name__}"
    )
