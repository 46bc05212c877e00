"""
Unified Input Source - Pointer when active, keyboard otherwise.
"""
import pygame

from arcade.input.input_intent import InputIntent
from arcade.input.sources.base import InputSource
from arcade.input.sources.keyboard import KeyboardInputSource
from arcade.input.sources.pointer import PointerInputSource


class UnifiedInputSource(InputSource):
    """Combines a keyboard source and a pointer source.

    An active pointer target wins over held keys for as long as the
    button or finger stays down.
    """

    def __init__(self, keyboard: KeyboardInputSource, pointer: PointerInputSource):
        self.keyboard = keyboard
        self.pointer = pointer

    def handle_event(self, event: pygame.event.Event) -> bool:
        consumed = self.pointer.handle_event(event)
        return self.keyboard.handle_event(event) or consumed

    def update(self, dt: float) -> None:
        self.keyboard.update(dt)
        self.pointer.update(dt)

    def poll_intent(self) -> InputIntent:
        if self.pointer.active:
            return self.pointer.poll_intent()
        return self.keyboard.poll_intent()

    def reset(self) -> None:
        self.keyboard.reset()
        self.pointer.reset()
