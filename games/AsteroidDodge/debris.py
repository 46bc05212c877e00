"""
Debris particles for Asteroid Dodge.

Purely cosmetic sparks thrown out by collisions. They fly outward, fall
under a small constant gravity and fade as their life runs out.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from models import Color, Resolution
from games.AsteroidDodge.entity import Entity, RandomSource

SHIELD_COLOR = Color.from_hex('#00ff88')
DAMAGE_COLOR = Color.from_hex('#ff6b6b')
STAR_COLOR = Color.from_hex('#ffff00')


@dataclass
class Debris(Entity):
    """A single spark."""
    x: float
    y: float
    vx: float
    vy: float
    color: Color
    life: int
    max_life: int
    size: float
    gravity: float = 0.1

    def advance(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity
        self.life -= 1

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    @property
    def fade(self) -> float:
        """Remaining life as a fraction of the original, for alpha."""
        return max(0.0, self.life / self.max_life)

    def is_expired(self, viewport: Optional[Resolution] = None) -> bool:
        # Debris ignores the viewport; only life matters
        return self.is_dead


def create_burst(
    x: float,
    y: float,
    color: Color,
    count: int,
    rng: RandomSource,
    life: int = 30,
    gravity: float = 0.1,
) -> List[Debris]:
    """
    Create a ring of debris around a point.

    Particles leave at evenly spaced angles with a random speed in [2, 5)
    and a random size in [2, 6).

    Args:
        x: Burst center x
        y: Burst center y
        color: Particle color
        count: Number of particles
        rng: Random source
        life: Ticks each particle lives
        gravity: Added to vertical velocity every tick

    Returns:
        The new particles
    """
    particles = []
    for i in range(count):
        angle = (i / count) * math.pi * 2
        speed = rng() * 3 + 2
        particles.append(Debris(
            x=x,
            y=y,
            vx=math.cos(angle) * speed,
            vy=math.sin(angle) * speed,
            color=color,
            life=life,
            max_life=life,
            size=rng() * 4 + 2,
            gravity=gravity,
        ))
    return particles
