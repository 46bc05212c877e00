"""
Unified models library for the arcade games.

This package provides the Pydantic data models used across the repository:
- Primitives: points, viewport sizes, colors and boxes
- Dodge: Settings, enums and tick reports for Asteroid Dodge

Usage:
    >>> from models import Point2D, Resolution
    >>> from models.dodge import DodgeSettings, TickReport
    >>> from models.primitives import Color, Rectangle
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Resolution,
    Color,
    Rectangle,
)

# ============================================================================
# Asteroid Dodge models
# ============================================================================
from .dodge import (
    Phase,
    PickupKind,
    GameEvent,
    DodgeSettings,
    TickReport,
    SettingsProfile,
)

__all__ = [
    # Primitives
    "Point2D",
    "Resolution",
    "Color",
    "Rectangle",
    # Dodge
    "Phase",
    "PickupKind",
    "GameEvent",
    "DodgeSettings",
    "TickReport",
    "SettingsProfile",
]
