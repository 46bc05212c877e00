"""
Common capability interface for the moving entities of Asteroid Dodge.

Hazards, pickups and debris share no state; each kind only promises to move
itself one tick forward and to say when it should be removed.
"""
from abc import ABC, abstractmethod
from typing import Callable

from models import Point2D, Resolution

# Zero-argument callable returning a uniform float in [0, 1),
# e.g. random.Random(seed).random
RandomSource = Callable[[], float]


class Entity(ABC):
    """A thing that moves on its own every tick.

    Subclasses are mutable dataclasses with at least ``x`` and ``y``
    attributes holding the entity's center.
    """

    x: float
    y: float

    @property
    def position(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

    @abstractmethod
    def advance(self) -> None:
        """Apply one tick of the entity's own motion rule."""
        pass

    @abstractmethod
    def is_expired(self, viewport: Resolution) -> bool:
        """Whether the entity should be removed without any interaction.

        Args:
            viewport: Current simulation bounds
        """
        pass
