"""
Keyboard Input Source - Arrow keys and WASD.
"""
from typing import Callable, Dict, Optional, Sequence

import pygame

from arcade.input.input_intent import Direction, InputIntent
from arcade.input.sources.base import InputSource

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class KeyboardInputSource(InputSource):
    """Held-key input source.

    Directions are recomputed from scratch on every update, so nothing
    accumulates between frames. Holding opposite keys sets both bits; the
    player controller cancels them out.

    Args:
        key_state: Callable returning a sequence indexable by pygame key
            code (default: pygame.key.get_pressed)
    """

    def __init__(self, key_state: Optional[Callable[[], Sequence[bool]]] = None):
        self._key_state = key_state
        self._directions = Direction.NONE

    def update(self, dt: float) -> None:
        """Read the current key state."""
        provider = self._key_state or pygame.key.get_pressed
        pressed = provider()
        directions = Direction.NONE
        for key, direction in KEY_DIRECTIONS.items():
            if pressed[key]:
                directions |= direction
        self._directions = directions

    def poll_intent(self) -> InputIntent:
        return InputIntent.from_directions(self._directions)

    def reset(self) -> None:
        self._directions = Direction.NONE
