"""
Asteroid Dodge enumerations.

These enums define the run lifecycle, pickup kinds and the discrete
events a simulation tick reports to the presentation layer.
"""

from enum import Enum


class Phase(str, Enum):
    """Coarse lifecycle of a run.

    Attributes:
        IDLE: Start screen; ticks are no-ops
        RUNNING: Gameplay advances every tick
        ENDED: Health reached zero; ticks are no-ops until reset
    """
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class PickupKind(str, Enum):
    """Kinds of collectible pickups.

    Attributes:
        SHIELD: Arms the player's shield for a fixed number of ticks
        STAR: Grants bonus score
    """
    SHIELD = "shield"
    STAR = "star"


class GameEvent(str, Enum):
    """Discrete outcomes of a tick, for effects and sounds.

    Attributes:
        HAZARD_DESTROYED: A hazard was removed by hitting the player
        HAZARD_AVOIDED: A hazard left the viewport and scored
        PICKUP_COLLECTED: The player touched a pickup
        PLAYER_DAMAGED: A hazard cost the player one health
        SHIELD_CONSUMED: The shield absorbed a hazard
        LEVEL_UP: Level and difficulty advanced
        RUN_ENDED: Health reached zero this tick
    """
    HAZARD_DESTROYED = "hazard_destroyed"
    HAZARD_AVOIDED = "hazard_avoided"
    PICKUP_COLLECTED = "pickup_collected"
    PLAYER_DAMAGED = "player_damaged"
    SHIELD_CONSUMED = "shield_consumed"
    LEVEL_UP = "level_up"
    RUN_ENDED = "run_ended"
