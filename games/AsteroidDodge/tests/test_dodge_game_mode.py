"""
Tests for the pygame game mode and renderer.

Drawing is checked only for not crashing on an offscreen surface; the
interesting behavior is event routing and the presentation timers.
"""

from collections import defaultdict

import pygame
import pytest

from models import GameEvent, Phase, PickupKind, TickReport
from arcade.input import (
    Direction,
    InputManager,
    KeyboardInputSource,
    PointerInputSource,
    ScriptedInputSource,
    UnifiedInputSource,
)
from games.AsteroidDodge import config
from games.AsteroidDodge.audio import DodgeAudio
from games.AsteroidDodge.game_mode import AsteroidDodgeMode
from games.AsteroidDodge.hazard import Hazard
from games.AsteroidDodge.pickup import Pickup
from games.AsteroidDodge.renderer import DodgeRenderer, ship_points, star_points


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def game(engine, pygame_init):
    manager = InputManager(ScriptedInputSource())
    return AsteroidDodgeMode(engine, manager, DodgeRenderer(flicker_seed=0), DodgeAudio(audio_enabled=False))


@pytest.fixture
def unified_game(engine, pygame_init):
    source = UnifiedInputSource(
        KeyboardInputSource(key_state=lambda: defaultdict(bool)),
        PointerInputSource(engine.viewport),
    )
    return AsteroidDodgeMode(engine, InputManager(source), DodgeRenderer(flicker_seed=0),
                             DodgeAudio(audio_enabled=False))


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def click(x=100, y=100):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(x, y))


def end_run(game):
    engine = game.engine
    engine.player.consume_shield()
    engine.session.health = 1
    engine.place_hazard(Hazard(x=engine.player.x, y=engine.player.y, size=20))
    return game.update(1 / 60)


def make_report(**kwargs):
    base = dict(phase=Phase.RUNNING, score=0, health=3, level=1,
                difficulty=1.0, frame_count=0, best_score=0)
    base.update(kwargs)
    return TickReport(**base)


class TestEventRouting:
    """Test screen transitions driven by pygame events."""

    def test_space_starts_run(self, game):
        """Test SPACE on the start screen begins a run."""
        game.handle_event(key(pygame.K_SPACE))
        assert game.state is Phase.RUNNING

    def test_click_starts_run(self, game):
        """Test a left click on the start screen begins a run."""
        game.handle_event(click())
        assert game.state is Phase.RUNNING

    def test_other_keys_do_not_start(self, game):
        """Test unrelated keys leave the start screen up."""
        game.handle_event(key(pygame.K_x))
        assert game.state is Phase.IDLE

    def test_escape_quits(self, game):
        """Test ESC requests quit."""
        game.handle_event(key(pygame.K_ESCAPE))
        assert game.quit_requested

    def test_window_close_quits(self, game):
        """Test closing the window requests quit."""
        game.handle_event(pygame.event.Event(pygame.QUIT))
        assert game.quit_requested

    def test_r_returns_to_start_after_game_over(self, game):
        """Test R on the game-over screen goes back to Idle."""
        game.start()
        report = end_run(game)
        assert report.run_ended

        game.handle_event(key(pygame.K_r))
        assert game.state is Phase.IDLE
        assert game.engine.entity_count == 0

    def test_r_ignored_while_running(self, game):
        """Test R does nothing during a run."""
        game.start()
        game.handle_event(key(pygame.K_r))
        assert game.state is Phase.RUNNING

    def test_back_to_start_clears_level_banner(self, game):
        """Test returning to the start screen drops a pending level-up banner."""
        game.renderer.notify(make_report(level=2, events=frozenset({GameEvent.LEVEL_UP})))
        assert game.renderer.banner_active

        game.back_to_start()
        assert not game.renderer.banner_active

    def test_start_clears_level_banner(self, game):
        """Test a new run does not inherit the previous run's banner."""
        game.start()
        game.renderer.notify(make_report(level=3, events=frozenset({GameEvent.LEVEL_UP})))

        game.start()
        assert not game.renderer.banner_active


class TestResize:
    """Test viewport updates from window resizes."""

    def test_resize_updates_engine(self, game):
        """Test a resize event re-derives the engine viewport."""
        game.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=1024, h=768, size=(1024, 768)))
        assert (game.engine.viewport.width, game.engine.viewport.height) == (1024, 768)

    def test_resize_has_minimum(self, game):
        """Test tiny windows are clamped to a playable minimum."""
        viewport = game.resize(100, 50)
        assert (viewport.width, viewport.height) == (300, 200)

    def test_resize_rescales_touch(self, unified_game):
        """Test touch coordinates follow the new window size."""
        unified_game.start()
        unified_game.resize(400, 300)
        unified_game.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0, touch_id=0))

        pointer = unified_game.input_manager.get_source().pointer
        assert pointer.target.as_tuple() == (200, 150)


class TestUpdate:
    """Test the per-frame update."""

    def test_update_ticks_engine(self, game):
        """Test update advances the engine one tick while running."""
        game.start()
        report = game.update(1 / 60)

        assert report.frame_count == 1
        assert game.last_report == report

    def test_update_idle_is_noop(self, game):
        """Test update on the start screen leaves the session alone."""
        report = game.update(1 / 60)
        assert report.frame_count == 0
        assert report.phase is Phase.IDLE

    def test_update_uses_input(self, engine, pygame_init):
        """Test the intent published by the input manager steers the ship."""
        manager = InputManager(ScriptedInputSource())
        game = AsteroidDodgeMode(engine, manager, DodgeRenderer(), DodgeAudio(audio_enabled=False))
        game.start()
        manager.get_source().extend([Direction.RIGHT])
        game.update(1 / 60)

        assert engine.player.x == 405

    def test_score(self, game):
        """Test get_score reads the running score."""
        game.start()
        game.engine.place_hazard(Hazard(x=100, y=620, size=20, vy=1))
        game.update(1 / 60)
        assert game.get_score() == 10


class TestRenderer:
    """Test drawing and presentation timers."""

    def test_render_every_phase(self, game):
        """Test drawing the start, running and game-over screens."""
        screen = pygame.Surface((800, 600))
        game.render(screen)

        game.start()
        game.engine.place_hazard(Hazard(x=100, y=100, size=25, rotation=0.3))
        game.engine.place_pickup(Pickup(x=200, y=100, kind=PickupKind.SHIELD))
        game.engine.place_pickup(Pickup(x=300, y=100, kind=PickupKind.STAR))
        game.engine.player.arm_shield(300)
        game.update(1 / 60)
        game.render(screen)

        end_run(game)
        assert game.engine.debris
        game.render(screen)

    def test_render_after_resize(self, game):
        """Test the cached grid is rebuilt for a new surface size."""
        game.render(pygame.Surface((800, 600)))
        game.render(pygame.Surface((640, 480)))

    def test_level_banner_timer(self, pygame_init):
        """Test the banner shows for LEVEL_BANNER_FRAMES frames after a level-up."""
        renderer = DodgeRenderer()
        renderer.notify(make_report(level=2, events=frozenset({GameEvent.LEVEL_UP})))
        assert renderer.banner_active

        for _ in range(config.LEVEL_BANNER_FRAMES - 1):
            renderer.notify(make_report(level=2))
        assert renderer.banner_active

        renderer.notify(make_report(level=2))
        assert not renderer.banner_active

    def test_banner_cleared_when_run_ends(self, pygame_init):
        """Test the banner is dropped once the run is over."""
        renderer = DodgeRenderer()
        renderer.notify(make_report(level=2, events=frozenset({GameEvent.LEVEL_UP})))
        renderer.notify(make_report(phase=Phase.ENDED))
        assert not renderer.banner_active

    def test_star_points(self):
        """Test a five-point star has ten vertices, first spike straight up."""
        points = star_points(50, 50, 5, 10, 5)

        assert len(points) == 10
        assert points[0] == pytest.approx((50, 40))

    def test_ship_points(self):
        """Test the hull nose points up from the center."""
        hull = ship_points(100, 100, 20)
        assert hull[0] == (100, 90)
        assert len(hull) == 4
