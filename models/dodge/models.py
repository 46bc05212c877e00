"""
Asteroid Dodge data models.

DodgeSettings carries every numeric tunable of the simulation and is
validated once at construction so that ticking never has to check them.
TickReport is the read-only summary handed to the presentation layer
after each tick.
"""

from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from ..primitives import Resolution
from .enums import GameEvent, Phase


class DodgeSettings(BaseModel):
    """
    Tunables for one simulation.

    Distances are in viewport pixels, speeds in pixels per tick and
    durations in ticks. The defaults reproduce the classic tuning.

    Examples:
        >>> settings = DodgeSettings()
        >>> settings.viewport.width
        800
        >>> DodgeSettings(max_hazards=0)  # raises pydantic.ValidationError
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    # Viewport
    viewport_width: int = Field(default=800, gt=0, description="Simulation width in pixels")
    viewport_height: int = Field(default=600, gt=0, description="Simulation height in pixels")

    # Player
    player_speed: float = Field(default=5.0, gt=0.0, description="Pixels moved per tick per axis")
    player_size: float = Field(default=20.0, gt=0.0, description="Bounding box edge; radius is half")
    player_start_offset: float = Field(default=50.0, ge=0.0, description="Start distance above the bottom edge")
    pointer_deadzone: float = Field(default=4.0, ge=0.0, description="Pointer offset ignored per axis")
    starting_health: int = Field(default=3, ge=1)

    # Hazards
    hazard_min_size: float = Field(default=15.0, gt=0.0)
    hazard_max_size: float = Field(default=35.0, gt=0.0)
    max_hazards: int = Field(default=5, ge=1, description="Hazard cap at difficulty 1.0")
    base_spawn_rate: float = Field(default=0.02, ge=0.0, le=1.0, description="Per-tick hazard spawn chance")
    hazard_spawn_offset: float = Field(default=30.0, ge=0.0, description="Spawn distance above the top edge")

    # Pickups
    pickup_size: float = Field(default=15.0, gt=0.0)
    max_pickups: int = Field(default=3, ge=1)
    pickup_spawn_rate: float = Field(default=0.01, ge=0.0, le=1.0, description="Per-tick pickup spawn chance")
    pickup_speed: float = Field(default=1.5, gt=0.0)
    pickup_rotation_speed: float = Field(default=0.05)
    pickup_spawn_offset: float = Field(default=20.0, ge=0.0)
    shield_threshold: float = Field(
        default=0.6, ge=0.0, le=1.0,
        description="A kind draw above this yields a shield pickup",
    )

    # Scoring and status effects
    avoid_points: int = Field(default=10, ge=0)
    star_points: int = Field(default=50, ge=0)
    shield_duration: int = Field(default=300, ge=1, description="Shield lifetime in ticks")

    # Progression
    tick_rate: int = Field(default=60, ge=1, description="Nominal ticks per second")
    ticks_per_level: int = Field(default=900, ge=1)
    difficulty_growth: float = Field(default=1.05, ge=1.0)

    # Debris
    debris_life: int = Field(default=30, ge=1)
    debris_gravity: float = Field(default=0.1, ge=0.0)
    shield_absorb_burst: int = Field(default=12, ge=0)
    damage_burst: int = Field(default=16, ge=0)
    shield_pickup_burst: int = Field(default=8, ge=0)
    star_burst: int = Field(default=10, ge=0)

    @model_validator(mode='after')
    def validate_geometry(self) -> 'DodgeSettings':
        """Reject sizes that cannot fit together."""
        if self.hazard_min_size > self.hazard_max_size:
            raise ValueError(
                f"hazard_min_size ({self.hazard_min_size}) must not exceed "
                f"hazard_max_size ({self.hazard_max_size})"
            )
        if self.player_size > min(self.viewport_width, self.viewport_height):
            raise ValueError(
                f"player_size {self.player_size} does not fit in a "
                f"{self.viewport_width}x{self.viewport_height} viewport"
            )
        return self

    @property
    def viewport(self) -> Resolution:
        return Resolution(width=self.viewport_width, height=self.viewport_height)

    @property
    def shield_seconds(self) -> float:
        """Shield lifetime at the nominal tick rate."""
        return self.shield_duration / self.tick_rate

    @property
    def level_seconds(self) -> float:
        return self.ticks_per_level / self.tick_rate


class TickReport(BaseModel):
    """Immutable summary of the session after one tick.

    Attributes:
        phase: Run lifecycle phase after the tick
        score: Current run score
        health: Remaining health
        level: Current level (starts at 1)
        difficulty: Compounding difficulty multiplier
        frame_count: Ticks advanced in this run
        best_score: Best score held after the tick
        new_best_score: The best score if it improved this tick, else None
        events: Discrete outcomes of this tick

    Examples:
        >>> report = TickReport(phase=Phase.IDLE, score=0, health=3, level=1,
        ...                     difficulty=1.0, frame_count=0, best_score=0)
        >>> report.has(GameEvent.LEVEL_UP)
        False
    """
    model_config = ConfigDict(frozen=True)

    phase: Phase
    score: int
    health: int
    level: int
    difficulty: float
    frame_count: int
    best_score: int
    new_best_score: Optional[int] = None
    events: FrozenSet[GameEvent] = frozenset()

    @computed_field
    @property
    def run_ended(self) -> bool:
        return GameEvent.RUN_ENDED in self.events

    def has(self, event: GameEvent) -> bool:
        """Check whether the tick reported an event."""
        return event in self.events


class SettingsProfile(BaseModel):
    """
    A named tuning profile loaded from YAML.

    Only the keys listed under ``settings`` are overridden; everything else
    keeps the base settings' value.

    Example YAML:
        name: Relaxed
        description: Slower rocks and longer shields
        settings:
          base_spawn_rate: 0.015
          shield_duration: 420
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = Field(min_length=1)
    description: str = ""
    settings: Dict[str, Any] = Field(default_factory=dict)

    def apply(self, base: DodgeSettings) -> DodgeSettings:
        """Return base with this profile's overrides, validated."""
        return DodgeSettings(**{**base.model_dump(), **self.settings})
