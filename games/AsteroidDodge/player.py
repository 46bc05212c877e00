"""
Player ship and shield status for Asteroid Dodge.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from models import DodgeSettings, Point2D, Rectangle, Resolution
from arcade.input.input_intent import Direction, InputIntent
from games.AsteroidDodge.geometry import clamp


def resolve_velocity(
    intent: InputIntent,
    position: Point2D,
    speed: float,
    deadzone: float,
) -> Tuple[float, float]:
    """
    Turn an intent into a per-tick velocity.

    With an active pointer, each axis moves at full speed toward the
    target once the offset on that axis exceeds the deadzone. Otherwise the
    held directions set the velocity; opposite directions cancel.

    Args:
        intent: Movement intent for this tick
        position: Player's current center
        speed: Pixels per tick per axis
        deadzone: Pointer offset ignored on each axis

    Returns:
        (dx, dy) in pixels per tick

    Examples:
        >>> resolve_velocity(InputIntent.from_directions(Direction.LEFT),
        ...                  Point2D(x=100, y=100), 5, 4)
        (-5.0, 0.0)
    """
    if intent.pointer is not None:
        diff_x = intent.pointer.x - position.x
        diff_y = intent.pointer.y - position.y
        dx = math.copysign(speed, diff_x) if abs(diff_x) > deadzone else 0.0
        dy = math.copysign(speed, diff_y) if abs(diff_y) > deadzone else 0.0
        return dx, dy

    held = intent.directions
    dx = 0.0
    dy = 0.0
    if held & Direction.LEFT:
        dx -= speed
    if held & Direction.RIGHT:
        dx += speed
    if held & Direction.UP:
        dy -= speed
    if held & Direction.DOWN:
        dy += speed
    return float(dx), float(dy)


@dataclass
class Player:
    """The player's ship.

    Position is the ship's center. The bounding box is a square of edge
    ``size``; collisions use half of that as a radius.
    """
    x: float
    y: float
    size: float = 20.0
    has_shield: bool = False
    shield_remaining: int = 0

    @classmethod
    def at_start(cls, viewport: Resolution, settings: DodgeSettings) -> 'Player':
        player = cls(x=0.0, y=0.0, size=settings.player_size)
        player.reposition(viewport, settings)
        return player

    @property
    def position(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def bounds(self) -> Rectangle:
        half = self.size / 2
        return Rectangle(x=self.x - half, y=self.y - half, width=self.size, height=self.size)

    def reposition(self, viewport: Resolution, settings: DodgeSettings) -> None:
        """Move to bottom-center and drop any shield."""
        self.x = viewport.width / 2
        self.y = viewport.height - settings.player_start_offset
        self.has_shield = False
        self.shield_remaining = 0
        self.clamp_to(viewport)

    def clamp_to(self, viewport: Resolution) -> None:
        """Keep the whole bounding box inside the viewport, per axis."""
        half = self.size / 2
        self.x = clamp(self.x, half, viewport.width - half)
        self.y = clamp(self.y, half, viewport.height - half)

    def arm_shield(self, duration: int) -> None:
        self.has_shield = True
        self.shield_remaining = duration

    def consume_shield(self) -> None:
        self.has_shield = False
        self.shield_remaining = 0

    def decay_shield(self) -> None:
        if not self.has_shield:
            return
        self.shield_remaining -= 1
        if self.shield_remaining <= 0:
            self.consume_shield()

    def step(self, intent: InputIntent, viewport: Resolution, settings: DodgeSettings) -> None:
        """
        Apply one tick of movement and shield decay.

        Args:
            intent: Movement intent for this tick
            viewport: Current bounds, read fresh every tick
            settings: Speed and pointer deadzone
        """
        dx, dy = resolve_velocity(intent, self.position, settings.player_speed, settings.pointer_deadzone)
        self.x += dx
        self.y += dy
        self.clamp_to(viewport)
        self.decay_shield()
