"""
Pointer Input Source - Mouse drag and touch steering.

While the left button or a finger is down, the ship steers toward the
pointer. Releasing it hands control back to the keyboard.
"""
from typing import Optional

import pygame

from models import Point2D, Resolution
from arcade.input.input_intent import InputIntent
from arcade.input.sources.base import InputSource


class PointerInputSource(InputSource):
    """Mouse and touch target source.

    Touch events carry coordinates normalized to [0, 1]; they are scaled
    by the viewport so both devices report pixel positions.

    Args:
        viewport: Surface size used to scale touch coordinates
    """

    def __init__(self, viewport: Resolution):
        self._viewport = viewport
        self._target: Optional[Point2D] = None

    @property
    def active(self) -> bool:
        return self._target is not None

    @property
    def target(self) -> Optional[Point2D]:
        return self._target

    def set_viewport(self, viewport: Resolution) -> None:
        """Rescale future touch events after a window resize."""
        self._viewport = viewport

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._target = Point2D(x=float(event.pos[0]), y=float(event.pos[1]))
            return True
        if event.type == pygame.MOUSEMOTION and self._target is not None:
            self._target = Point2D(x=float(event.pos[0]), y=float(event.pos[1]))
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._target = None
            return True
        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            self._target = Point2D(
                x=event.x * self._viewport.width,
                y=event.y * self._viewport.height,
            )
            return True
        if event.type == pygame.FINGERUP:
            self._target = None
            return True
        if event.type == pygame.WINDOWFOCUSLOST:
            # Treated like a cancelled touch
            self._target = None
        return False

    def update(self, dt: float) -> None:
        pass

    def poll_intent(self) -> InputIntent:
        if self._target is None:
            return InputIntent.idle()
        return InputIntent.from_pointer(self._target)

    def reset(self) -> None:
        self._target = None
