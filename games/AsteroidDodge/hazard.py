"""
Hazard entity for Asteroid Dodge.

Hazards (asteroids) fall from just above the top edge with a slight sideways
drift. Their speed scales with the difficulty multiplier at the moment they
spawn. Dodging one until it leaves the screen scores points; touching one
costs health unless the shield absorbs it.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from models import DodgeSettings, Resolution
from games.AsteroidDodge.entity import Entity, RandomSource

OUTLINE_POINTS = 8


@dataclass
class Hazard(Entity):
    """A falling asteroid.

    The outline profile holds one radius factor per polygon vertex. It is
    drawn once at creation and never changes, so the rock keeps its shape
    for its whole life.
    """
    x: float
    y: float
    size: float
    vx: float = 0.0
    vy: float = 0.0
    rotation: float = 0.0
    rotation_speed: float = 0.0
    outline_profile: Tuple[float, ...] = field(default=(1.0,) * OUTLINE_POINTS)

    @classmethod
    def spawn(
        cls,
        viewport: Resolution,
        settings: DodgeSettings,
        difficulty: float,
        rng: RandomSource,
    ) -> 'Hazard':
        """
        Create a hazard just above the top edge.

        Args:
            viewport: Current simulation bounds
            settings: Size range and spawn offset
            difficulty: Current difficulty multiplier; scales both velocity axes
            rng: Random source

        Returns:
            New hazard with a randomized size, velocity, spin and outline
        """
        x = rng() * viewport.width
        y = -settings.hazard_spawn_offset
        size = rng() * (settings.hazard_max_size - settings.hazard_min_size) + settings.hazard_min_size
        vx = (rng() - 0.5) * 2 * difficulty
        vy = rng() * 2 * difficulty + difficulty
        rotation = rng() * math.pi * 2
        rotation_speed = (rng() - 0.5) * 0.1
        profile = tuple(0.8 + rng() * 0.2 for _ in range(OUTLINE_POINTS))
        return cls(
            x=x,
            y=y,
            size=size,
            vx=vx,
            vy=vy,
            rotation=rotation,
            rotation_speed=rotation_speed,
            outline_profile=profile,
        )

    def advance(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.rotation += self.rotation_speed

    def is_expired(self, viewport: Resolution) -> bool:
        """Past the bottom edge, or past a side edge by more than its size."""
        return (self.y > viewport.height + self.size
                or self.x < -self.size
                or self.x > viewport.width + self.size)

    def outline(self) -> List[Tuple[float, float]]:
        """Polygon vertices in viewport coordinates, rotated."""
        points = []
        for i, factor in enumerate(self.outline_profile):
            angle = (i / len(self.outline_profile)) * math.pi * 2 + self.rotation
            radius = self.size * factor
            points.append((self.x + math.cos(angle) * radius,
                           self.y + math.sin(angle) * radius))
        return points
