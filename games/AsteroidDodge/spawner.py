"""
Spawner for Asteroid Dodge.

Each tick the spawner rolls once for a hazard and once for a pickup. Both
rolls are drawn every tick, even when a cap blocks the spawn.
"""

import math
from typing import List, Optional, Tuple

from models import DodgeSettings, Resolution
from games.AsteroidDodge.entity import RandomSource
from games.AsteroidDodge.hazard import Hazard
from games.AsteroidDodge.pickup import Pickup


class Spawner:
    """Rate- and cap-bounded creation of hazards and pickups.

    Args:
        settings: Spawn rates and caps
    """

    def __init__(self, settings: DodgeSettings):
        self.settings = settings

    def hazard_cap(self, difficulty: float) -> int:
        """Maximum live hazards at a difficulty (never below 1)."""
        return max(1, math.floor(self.settings.max_hazards * difficulty))

    def hazard_chance(self, difficulty: float) -> float:
        return self.settings.base_spawn_rate * difficulty

    def step(
        self,
        hazards: List[Hazard],
        pickups: List[Pickup],
        difficulty: float,
        viewport: Resolution,
        rng: RandomSource,
    ) -> Tuple[Optional[Hazard], Optional[Pickup]]:
        """
        Possibly append one hazard and one pickup.

        Existing entities are not touched.

        Args:
            hazards: Live hazards; a new one is appended in place
            pickups: Live pickups; a new one is appended in place
            difficulty: Current difficulty multiplier
            viewport: Current simulation bounds
            rng: Random source

        Returns:
            (new hazard or None, new pickup or None)
        """
        new_hazard = None
        new_pickup = None

        if rng() < self.hazard_chance(difficulty) and len(hazards) < self.hazard_cap(difficulty):
            new_hazard = Hazard.spawn(viewport, self.settings, difficulty, rng)
            hazards.append(new_hazard)

        if rng() < self.settings.pickup_spawn_rate and len(pickups) < self.settings.max_pickups:
            new_pickup = Pickup.spawn(viewport, self.settings, rng)
            pickups.append(new_pickup)

        return new_hazard, new_pickup
