"""Input source implementations."""

from arcade.input.sources.base import InputSource
from arcade.input.sources.keyboard import KeyboardInputSource
from arcade.input.sources.pointer import PointerInputSource
from arcade.input.sources.unified import UnifiedInputSource
from arcade.input.sources.scripted import ScriptedInputSource

__all__ = [
    'InputSource',
    'KeyboardInputSource',
    'PointerInputSource',
    'UnifiedInputSource',
    'ScriptedInputSource',
]
