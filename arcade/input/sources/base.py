"""
Abstract base class for input sources.

This module defines the InputSource interface that all input sources must implement.
This lets the simulation be steered by keyboard, mouse, touch or a scripted
sequence without changing game logic.
"""

from abc import ABC, abstractmethod

import pygame

from arcade.input.input_intent import InputIntent


class InputSource(ABC):
    """Abstract base class for input sources.

    All input sources must implement this interface to be compatible
    with the InputManager.

    Subclasses must implement:
        - poll_intent(): Return the current movement intent
        - update(dt): Update source state once per frame

    Subclasses that react to window events override handle_event().

    Examples:
        >>> class StillSource(InputSource):
        ...     def poll_intent(self) -> InputIntent:
        ...         return InputIntent.idle()
        ...     def update(self, dt: float) -> None:
        ...         pass
    """

    @abstractmethod
    def poll_intent(self) -> InputIntent:
        """Get the latest intent.

        Unlike a queue, the intent is a snapshot: polling twice without
        an update in between returns the same value.

        Returns:
            The source's current InputIntent
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state (for time-based processing).

        Called every frame before the intent is polled.

        Args:
            dt: Delta time in seconds since last update
        """
        pass

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Offer a pygame event to the source.

        Args:
            event: Event from the pygame queue

        Returns:
            True if the source consumed the event
        """
        return False

    def reset(self) -> None:
        """Forget any held state (pressed keys, active pointer)."""
        pass
