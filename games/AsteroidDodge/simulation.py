"""
Asteroid Dodge simulation engine.

The engine owns everything that changes during a run: the session counters,
the player, and the hazard, pickup and debris collections. It never draws,
reads devices or touches storage directly; the host feeds it an intent each
tick and reads back a TickReport plus the entity snapshots.

Usage:
    engine = SimulationEngine(store=JsonBestScoreStore(path), seed=7)
    engine.start()
    while engine.phase is Phase.RUNNING:
        report = engine.tick(input_manager.current_intent())
        renderer.draw(engine, report)

Tick order while running:
    1. Player movement, clamping and shield decay
    2. Spawning
    3. Motion of every hazard, pickup and debris particle
    4. Hazard collisions and escapes (the run may end here)
    5. Pickup collisions and escapes, debris expiry, level progression
    6. Best-score bookkeeping
"""

import random
from dataclasses import dataclass
from itertools import chain
from typing import List, Optional, Set, Tuple

from models import Color, DodgeSettings, GameEvent, Phase, PickupKind, Resolution, TickReport
from arcade.input.input_intent import RawIntent, normalize_intent
from arcade.logging import emit_record, get_logger
from arcade.persistence import BestScoreStore, MemoryBestScoreStore
from games.AsteroidDodge.debris import DAMAGE_COLOR, SHIELD_COLOR, STAR_COLOR, Debris, create_burst
from games.AsteroidDodge.entity import RandomSource
from games.AsteroidDodge.geometry import circles_overlap
from games.AsteroidDodge.hazard import Hazard
from games.AsteroidDodge.pickup import Pickup
from games.AsteroidDodge.player import Player
from games.AsteroidDodge.spawner import Spawner

log = get_logger('simulation')


@dataclass
class SessionState:
    """Run lifecycle and progression counters.

    Owned by the engine; everything else should treat it as read-only.
    """
    phase: Phase = Phase.IDLE
    score: int = 0
    health: int = 3
    level: int = 1
    difficulty: float = 1.0
    frame_count: int = 0
    best_score: int = 0

    def reset_run(self, starting_health: int) -> None:
        """Zero the per-run counters; the best score is kept."""
        self.score = 0
        self.health = starting_health
        self.level = 1
        self.difficulty = 1.0
        self.frame_count = 0


class SimulationEngine:
    """
    Tick orchestrator for one Asteroid Dodge session.

    Several engines can coexist; nothing is shared between instances.

    Args:
        settings: Tunables (default: classic tuning)
        store: Best-score collaborator (default: in-memory store)
        seed: Seed for the default random source
        rng: Random source to use instead of a seeded random.Random
        viewport: Initial bounds (default: settings.viewport)
    """

    def __init__(
        self,
        settings: Optional[DodgeSettings] = None,
        store: Optional[BestScoreStore] = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        viewport: Optional[Resolution] = None,
    ):
        self.settings = settings or DodgeSettings()
        self._viewport = viewport or self.settings.viewport
        self._check_viewport(self._viewport)
        self._store = store if store is not None else MemoryBestScoreStore()
        self._random: RandomSource = rng or random.Random(seed).random
        self._spawner = Spawner(self.settings)

        self._player = Player.at_start(self._viewport, self.settings)
        self._hazards: List[Hazard] = []
        self._pickups: List[Pickup] = []
        self._debris: List[Debris] = []

        self.session = SessionState(
            health=self.settings.starting_health,
            best_score=self._load_best_score(),
        )

    # ------------------------------------------------------------------
    # Snapshot accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def viewport(self) -> Resolution:
        return self._viewport

    @property
    def player(self) -> Player:
        return self._player

    @property
    def hazards(self) -> Tuple[Hazard, ...]:
        return tuple(self._hazards)

    @property
    def pickups(self) -> Tuple[Pickup, ...]:
        return tuple(self._pickups)

    @property
    def debris(self) -> Tuple[Debris, ...]:
        return tuple(self._debris)

    @property
    def best_score(self) -> int:
        return self.session.best_score

    @property
    def entity_count(self) -> int:
        return len(self._hazards) + len(self._pickups) + len(self._debris)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin a new run from any phase.

        Calling start() during a run restarts it.
        """
        self._clear_entities()
        self.session.reset_run(self.settings.starting_health)
        self._player.reposition(self._viewport, self.settings)
        self.session.phase = Phase.RUNNING
        log.info("Run started (best score %d)", self.session.best_score)

    def reset(self) -> None:
        """Return to Idle, clearing entities and run counters."""
        self._clear_entities()
        self.session.reset_run(self.settings.starting_health)
        self._player.reposition(self._viewport, self.settings)
        self.session.phase = Phase.IDLE

    def set_viewport(self, viewport: Resolution) -> None:
        """Adopt new bounds, e.g. after the host window was resized.

        The player is pulled back inside immediately; every later clamp and
        expiry check reads the new bounds.

        Raises:
            ValueError: If the viewport is smaller than the player box
        """
        self._check_viewport(viewport)
        self._viewport = viewport
        self._player.clamp_to(viewport)
        log.debug("Viewport set to %s", viewport)

    def place_hazard(self, hazard: Hazard) -> None:
        """Insert a hazard directly, bypassing the spawner."""
        self._hazards.append(hazard)

    def place_pickup(self, pickup: Pickup) -> None:
        """Insert a pickup directly, bypassing the spawner."""
        self._pickups.append(pickup)

    def report(self, events: Optional[Set[GameEvent]] = None,
               new_best_score: Optional[int] = None) -> TickReport:
        """Summarize the current session without advancing it."""
        s = self.session
        return TickReport(
            phase=s.phase,
            score=s.score,
            health=s.health,
            level=s.level,
            difficulty=s.difficulty,
            frame_count=s.frame_count,
            best_score=s.best_score,
            new_best_score=new_best_score,
            events=frozenset(events or ()),
        )

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self, intent: RawIntent = None, rng: Optional[RandomSource] = None) -> TickReport:
        """
        Advance the simulation by one step.

        Outside a run this is a no-op that only reports the session.

        Args:
            intent: None, a Direction set, a Point2D pointer target or an
                InputIntent
            rng: Random source for this tick (default: the engine's own)

        Returns:
            TickReport with the session after the tick and its events
        """
        if self.session.phase is not Phase.RUNNING:
            return self.report()

        rng = rng or self._random
        events: Set[GameEvent] = set()

        self._player.step(normalize_intent(intent), self._viewport, self.settings)
        self._spawner.step(self._hazards, self._pickups, self.session.difficulty, self._viewport, rng)
        for entity in chain(self._hazards, self._pickups, self._debris):
            entity.advance()

        self._resolve_hazards(events, rng)

        if self.session.phase is Phase.ENDED:
            events.add(GameEvent.RUN_ENDED)
        else:
            self._resolve_pickups(events, rng)
            self._prune_debris()
            self._advance_progression(events)

        new_best = self._update_best_score()

        if self.session.phase is Phase.ENDED:
            self._finish_run()

        log.tick_event(self.session.frame_count, events)
        return self.report(events, new_best)

    def _resolve_hazards(self, events: Set[GameEvent], rng: RandomSource) -> None:
        """Apply hazard collisions and escapes, walking from the tail.

        Once health reaches zero, remaining overlapping hazards are still
        removed but cost nothing, so which hazard was hit first never
        changes the surviving set or the final health.
        """
        player = self._player
        s = self.settings
        for i in range(len(self._hazards) - 1, -1, -1):
            hazard = self._hazards[i]

            if circles_overlap(player.position, player.radius, hazard.position, hazard.size):
                del self._hazards[i]
                events.add(GameEvent.HAZARD_DESTROYED)
                if self.session.phase is not Phase.RUNNING:
                    continue
                if player.has_shield:
                    player.consume_shield()
                    events.add(GameEvent.SHIELD_CONSUMED)
                    self._burst(hazard.x, hazard.y, SHIELD_COLOR, s.shield_absorb_burst, rng)
                else:
                    self.session.health -= 1
                    events.add(GameEvent.PLAYER_DAMAGED)
                    self._burst(hazard.x, hazard.y, DAMAGE_COLOR, s.damage_burst, rng)
                    if self.session.health <= 0:
                        self.session.phase = Phase.ENDED
                continue

            if hazard.is_expired(self._viewport):
                del self._hazards[i]
                self.session.score += s.avoid_points
                events.add(GameEvent.HAZARD_AVOIDED)

    def _resolve_pickups(self, events: Set[GameEvent], rng: RandomSource) -> None:
        player = self._player
        s = self.settings
        for i in range(len(self._pickups) - 1, -1, -1):
            pickup = self._pickups[i]

            if circles_overlap(player.position, player.radius, pickup.position, pickup.size):
                del self._pickups[i]
                events.add(GameEvent.PICKUP_COLLECTED)
                if pickup.kind is PickupKind.SHIELD:
                    player.arm_shield(s.shield_duration)
                    self._burst(pickup.x, pickup.y, SHIELD_COLOR, s.shield_pickup_burst, rng)
                else:
                    self.session.score += s.star_points
                    self._burst(pickup.x, pickup.y, STAR_COLOR, s.star_burst, rng)
                continue

            if pickup.is_expired(self._viewport):
                del self._pickups[i]

    def _prune_debris(self) -> None:
        self._debris = [d for d in self._debris if not d.is_dead]

    def _advance_progression(self, events: Set[GameEvent]) -> None:
        s = self.session
        s.frame_count += 1
        if s.frame_count % self.settings.ticks_per_level == 0:
            s.level += 1
            s.difficulty *= self.settings.difficulty_growth
            events.add(GameEvent.LEVEL_UP)
            log.debug("Level %d reached, difficulty %.3f", s.level, s.difficulty)

    def _burst(self, x: float, y: float, color: Color, count: int, rng: RandomSource) -> None:
        self._debris.extend(create_burst(
            x, y, color, count, rng,
            life=self.settings.debris_life,
            gravity=self.settings.debris_gravity,
        ))

    # ------------------------------------------------------------------
    # Persistence and bookkeeping
    # ------------------------------------------------------------------

    def _check_viewport(self, viewport: Resolution) -> None:
        size = self.settings.player_size
        if viewport.width < size or viewport.height < size:
            raise ValueError(
                f"viewport {viewport.width}x{viewport.height} is smaller than "
                f"player_size {size}"
            )

    def _load_best_score(self) -> int:
        try:
            return max(0, int(self._store.load_best_score()))
        except Exception as e:
            log.warning("Could not load best score, starting from 0: %s", e)
            return 0

    def _update_best_score(self) -> Optional[int]:
        """Raise and persist the best score when the run beats it."""
        s = self.session
        if s.score <= s.best_score:
            return None
        s.best_score = s.score
        try:
            self._store.save_best_score(s.best_score)
        except Exception as e:
            log.warning("Could not save best score %d: %s", s.best_score, e)
        return s.best_score

    def _finish_run(self) -> None:
        s = self.session
        log.info("Run ended: score %d, level %d after %d ticks", s.score, s.level, s.frame_count)
        emit_record('runs', {
            'type': 'run',
            'score': s.score,
            'level': s.level,
            'ticks': s.frame_count,
            'difficulty': s.difficulty,
            'best_score': s.best_score,
        })

    def _clear_entities(self) -> None:
        self._hazards.clear()
        self._pickups.clear()
        self._debris.clear()
