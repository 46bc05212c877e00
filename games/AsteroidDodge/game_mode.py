"""
Asteroid Dodge - Game mode.

Glues the simulation to a pygame window: screen transitions (start screen,
run, game over), window resizing, input routing, sound and drawing. The
engine itself stays free of pygame.
"""

from typing import Optional

import pygame

from models import Phase, Resolution, TickReport
from arcade.input import InputManager, PointerInputSource, UnifiedInputSource
from arcade.logging import get_logger
from games.AsteroidDodge.audio import DodgeAudio
from games.AsteroidDodge.renderer import DodgeRenderer
from games.AsteroidDodge.simulation import SimulationEngine

log = get_logger('game_mode')

MIN_VIEWPORT = (300, 200)

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
TAP_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)


class AsteroidDodgeMode:
    """
    Asteroid Dodge played in a pygame window.

    Controls:
        - Arrows / WASD move the ship
        - Hold the mouse button or a finger to steer toward it
        - SPACE, ENTER or a click starts a run
        - R or a click on the game-over screen returns to the start screen
        - ESC quits
    """

    NAME = "Asteroid Dodge"
    DESCRIPTION = "Dodge falling asteroids, grab shields and stars."

    def __init__(
        self,
        engine: SimulationEngine,
        input_manager: InputManager,
        renderer: Optional[DodgeRenderer] = None,
        audio: Optional[DodgeAudio] = None,
    ):
        self.engine = engine
        self.input_manager = input_manager
        self.renderer = renderer or DodgeRenderer()
        self.audio = audio or DodgeAudio(audio_enabled=False)
        self.quit_requested = False
        self._report: TickReport = engine.report()

    @property
    def state(self) -> Phase:
        return self.engine.phase

    @property
    def last_report(self) -> TickReport:
        return self._report

    def get_score(self) -> int:
        return self.engine.session.score

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return

        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
            return

        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.quit_requested = True
            return

        phase = self.engine.phase
        if phase is Phase.IDLE:
            if self._is_confirm(event, START_KEYS):
                self.start()
                return
        elif phase is Phase.ENDED:
            if self._is_confirm(event, (pygame.K_r,)):
                self.back_to_start()
                return

        self.input_manager.handle_event(event)

    @staticmethod
    def _is_confirm(event: pygame.event.Event, keys) -> bool:
        if event.type == pygame.KEYDOWN:
            return event.key in keys
        if event.type == pygame.MOUSEBUTTONDOWN:
            return event.button == 1
        return event.type == pygame.FINGERDOWN

    def start(self) -> None:
        self.input_manager.clear()
        self.engine.start()
        self.renderer.reset()
        self._report = self.engine.report()

    def back_to_start(self) -> None:
        self.input_manager.clear()
        self.engine.reset()
        self.renderer.reset()
        self._report = self.engine.report()

    def resize(self, width: int, height: int) -> Resolution:
        """Re-derive the viewport from a new window size."""
        viewport = Resolution(width=max(MIN_VIEWPORT[0], width), height=max(MIN_VIEWPORT[1], height))
        self.engine.set_viewport(viewport)
        source = self.input_manager.get_source()
        if isinstance(source, UnifiedInputSource):
            source.pointer.set_viewport(viewport)
        elif isinstance(source, PointerInputSource):
            source.set_viewport(viewport)
        log.debug("Window resized to %s", viewport)
        return viewport

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def update(self, dt: float) -> TickReport:
        """Read input, advance one tick and react to its events."""
        self.input_manager.update(dt)
        report = self.engine.tick(self.input_manager.current_intent())
        self.renderer.notify(report)
        self.audio.play_events(report.events)
        if report.run_ended and report.score > 0 and report.score == report.best_score:
            log.info("New best score: %d", report.score)
        self._report = report
        return report

    def render(self, screen: pygame.Surface) -> None:
        self.renderer.render(screen, self.engine, self._report)
