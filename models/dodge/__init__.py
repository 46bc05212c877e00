"""
Asteroid Dodge models package.

Enumerations for the run lifecycle and tick events, the validated
settings model, and the per-tick report.
"""

from .enums import (
    Phase,
    PickupKind,
    GameEvent,
)

from .models import (
    DodgeSettings,
    TickReport,
    SettingsProfile,
)

__all__ = [
    'Phase',
    'PickupKind',
    'GameEvent',
    'DodgeSettings',
    'TickReport',
    'SettingsProfile',
]
