"""
Pickup entity for Asteroid Dodge.

Pickups drift straight down at a fixed speed. A shield pickup arms the
player's shield; a star grants bonus points. Missed pickups simply fall off
the bottom of the screen.
"""

from dataclasses import dataclass

from models import DodgeSettings, PickupKind, Resolution
from games.AsteroidDodge.entity import Entity, RandomSource


@dataclass
class Pickup(Entity):
    """A collectible power-up."""
    x: float
    y: float
    kind: PickupKind
    size: float = 15.0
    vy: float = 1.5
    rotation: float = 0.0
    rotation_speed: float = 0.05

    @classmethod
    def spawn(cls, viewport: Resolution, settings: DodgeSettings, rng: RandomSource) -> 'Pickup':
        """
        Create a pickup just above the top edge.

        The kind is drawn first: a draw above ``settings.shield_threshold``
        (0.6 by default) yields a shield, so shields come up 40% of the time.
        """
        kind = PickupKind.SHIELD if rng() > settings.shield_threshold else PickupKind.STAR
        return cls(
            x=rng() * viewport.width,
            y=-settings.pickup_spawn_offset,
            kind=kind,
            size=settings.pickup_size,
            vy=settings.pickup_speed,
            rotation_speed=settings.pickup_rotation_speed,
        )

    def advance(self) -> None:
        self.y += self.vy
        self.rotation += self.rotation_speed

    def is_expired(self, viewport: Resolution) -> bool:
        return self.y > viewport.height
