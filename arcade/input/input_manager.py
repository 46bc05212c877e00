"""
Input manager shared by the arcade games.

This module provides the InputManager class that owns the active input source
and the latest-wins intent snapshot the simulation reads at the start of
every tick.
"""

import threading
from typing import Optional

import pygame

from arcade.input.input_intent import InputIntent, RawIntent, normalize_intent
from arcade.input.sources.base import InputSource


class InputManager:
    """Manages the active input source and the published intent snapshot.

    The snapshot is the only state shared between input capture and the
    simulation. It is guarded by a lock so a capture thread may publish
    through submit() while the game loop reads current_intent().

    Examples:
        >>> from arcade.input.sources import ScriptedInputSource
        >>> manager = InputManager(ScriptedInputSource([None]))
        >>> manager.update(1 / 60)
        >>> manager.current_intent().is_idle
        True
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize the input manager with an optional input source.

        Args:
            source: The initial input source, or None to start with no source
        """
        self._source: Optional[InputSource] = None
        self._lock = threading.Lock()
        self._intent = InputIntent.idle()
        if source is not None:
            self.set_source(source)

    def set_source(self, source: InputSource) -> None:
        """Set or change the active input source.

        The published intent is reset to idle so a held direction from the
        previous source does not leak into the new one.

        Args:
            source: The new input source to use

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source
        self.submit(InputIntent.idle())

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source.

        Returns:
            The active InputSource, or None if no source is set
        """
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Forward a pygame event to the active source.

        Returns:
            True if the source consumed the event
        """
        if self._source is None:
            return False
        return self._source.handle_event(event)

    def update(self, dt: float) -> None:
        """Update the active source and publish its intent.

        Safe to call even if no source is active; the snapshot is left as is.

        Args:
            dt: Delta time in seconds since last update
        """
        if self._source is None:
            return
        self._source.update(dt)
        self.submit(self._source.poll_intent())

    def submit(self, intent: RawIntent) -> None:
        """Publish an intent, replacing the previous one.

        Args:
            intent: Any shape accepted by normalize_intent
        """
        normalized = normalize_intent(intent)
        with self._lock:
            self._intent = normalized

    def current_intent(self) -> InputIntent:
        """Read the latest published intent."""
        with self._lock:
            return self._intent

    def clear(self) -> None:
        """Drop held state in the source and publish an idle intent.

        Useful when transitioning between screens so a button held on the
        start screen does not steer the first frames of a run.
        """
        if self._source is not None:
            self._source.reset()
        self.submit(InputIntent.idle())
