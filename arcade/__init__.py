"""
Arcade platform layer.

Shared services used by every game in this repository: console and
structured logging, best-score persistence, and the input abstraction
that turns keyboard, pointer and touch state into a per-tick intent.
See games/AsteroidDodge for the simulation that consumes them.
"""

from arcade.logging import get_logger

__all__ = ['get_logger']
