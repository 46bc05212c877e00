"""
Scripted Input Source - Replays a fixed sequence of intents.

Used by the headless runner and by tests. Each update() advances one step;
once the script runs out the source stays idle.
"""
from collections import deque
from typing import Deque, Iterable

from arcade.input.input_intent import InputIntent, RawIntent, normalize_intent
from arcade.input.sources.base import InputSource


class ScriptedInputSource(InputSource):
    """Input source fed from a list instead of a device.

    Args:
        script: Intents in any shape accepted by normalize_intent

    Examples:
        >>> from arcade.input import Direction
        >>> source = ScriptedInputSource([Direction.LEFT, None])
        >>> source.update(1 / 60)
        >>> source.poll_intent().directions == Direction.LEFT
        True
    """

    def __init__(self, script: Iterable[RawIntent] = ()):
        self._pending: Deque[InputIntent] = deque(normalize_intent(i) for i in script)
        self._current = InputIntent.idle()

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def extend(self, script: Iterable[RawIntent]) -> None:
        self._pending.extend(normalize_intent(i) for i in script)

    def update(self, dt: float) -> None:
        self._current = self._pending.popleft() if self._pending else InputIntent.idle()

    def poll_intent(self) -> InputIntent:
        return self._current

    def reset(self) -> None:
        self._pending.clear()
        self._current = InputIntent.idle()
