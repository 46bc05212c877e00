"""
Input abstraction layer for the arcade games.

Provides unified input handling that works identically with keyboard,
mouse, touch or a scripted replay.

Only the intent types are imported eagerly. The manager and the sources
need pygame and are loaded on first access, so headless code can use
Direction and InputIntent without a display library installed.
"""

from importlib import import_module

from arcade.input.input_intent import Direction, InputIntent, normalize_intent

_LAZY = {
    'InputManager': 'arcade.input.input_manager',
    'InputSource': 'arcade.input.sources',
    'KeyboardInputSource': 'arcade.input.sources',
    'PointerInputSource': 'arcade.input.sources',
    'UnifiedInputSource': 'arcade.input.sources',
    'ScriptedInputSource': 'arcade.input.sources',
}


def __getattr__(name):
    if name in _LAZY:
        value = getattr(import_module(_LAZY[name]), name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'Direction',
    'InputIntent',
    'normalize_intent',
    'InputManager',
    'InputSource',
    'KeyboardInputSource',
    'PointerInputSource',
    'UnifiedInputSource',
    'ScriptedInputSource',
]
