"""
Pygame renderer for Asteroid Dodge.

Draws whatever the engine exposes after a tick: it reads the entity
snapshots and the latest TickReport and never changes simulation state.
Short-lived presentation effects (the level-up banner, the pulsing shield
ring, the flickering engine flame) are timed here in frames.
"""

import math
import random
from typing import List, Optional, Tuple

import pygame

from models import GameEvent, Phase, PickupKind, TickReport
from games.AsteroidDodge import config
from games.AsteroidDodge.debris import Debris
from games.AsteroidDodge.hazard import Hazard
from games.AsteroidDodge.pickup import Pickup
from games.AsteroidDodge.player import Player
from games.AsteroidDodge.simulation import SimulationEngine


def star_points(cx: float, cy: float, spikes: int, outer: float, inner: float,
                rotation: float = 0.0) -> List[Tuple[float, float]]:
    """
    Vertices of a star polygon, first spike pointing up before rotation.

    Args:
        cx: Center x
        cy: Center y
        spikes: Number of points
        outer: Spike tip radius
        inner: Notch radius
        rotation: Rotation in radians

    Returns:
        2 * spikes vertices alternating tip and notch
    """
    step = math.pi / spikes
    points = []
    for i in range(spikes * 2):
        r = outer if i % 2 == 0 else inner
        angle = i * step + rotation
        points.append((cx + math.sin(angle) * r, cy - math.cos(angle) * r))
    return points


def ship_points(x: float, y: float, size: float) -> List[Tuple[float, float]]:
    """Arrowhead hull of the player's ship, nose up."""
    half = size / 2
    return [
        (x, y - half),
        (x + half, y + half),
        (x, y + size / 3),
        (x - half, y + half),
    ]


class DodgeRenderer:
    """Draws one frame of Asteroid Dodge.

    Args:
        flicker_seed: Seed for the cosmetic flame flicker
    """

    def __init__(self, flicker_seed: Optional[int] = None):
        self._flicker = random.Random(flicker_seed)
        self._font: Optional[pygame.font.Font] = None
        self._font_medium: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None
        self._grid: Optional[pygame.Surface] = None
        self._banner_frames = 0
        self._banner_level = 1
        self._frame = 0

    # ------------------------------------------------------------------
    # Fonts and cached surfaces
    # ------------------------------------------------------------------

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, config.FONT_SIZE_SMALL)
        return self._font

    def _get_font_medium(self) -> pygame.font.Font:
        if self._font_medium is None:
            self._font_medium = pygame.font.Font(None, config.FONT_SIZE_MEDIUM)
        return self._font_medium

    def _get_font_large(self) -> pygame.font.Font:
        if self._font_large is None:
            self._font_large = pygame.font.Font(None, config.FONT_SIZE_LARGE)
        return self._font_large

    def _get_grid(self, size: Tuple[int, int]) -> pygame.Surface:
        """Grid overlay, rebuilt when the window size changes."""
        if self._grid is None or self._grid.get_size() != size:
            width, height = size
            grid = pygame.Surface(size, pygame.SRCALPHA)
            for x in range(0, width, config.GRID_SPACING):
                pygame.draw.line(grid, config.GRID_COLOR, (x, 0), (x, height))
            for y in range(0, height, config.GRID_SPACING):
                pygame.draw.line(grid, config.GRID_COLOR, (0, y), (width, y))
            self._grid = grid
        return self._grid

    # ------------------------------------------------------------------
    # Frame timing
    # ------------------------------------------------------------------

    @property
    def banner_active(self) -> bool:
        return self._banner_frames > 0

    def notify(self, report: TickReport) -> None:
        """React to a tick's events and advance presentation timers."""
        self._frame += 1
        if self._banner_frames > 0:
            self._banner_frames -= 1
        if report.has(GameEvent.LEVEL_UP):
            self._banner_frames = config.LEVEL_BANNER_FRAMES
            self._banner_level = report.level
        if report.phase is not Phase.RUNNING:
            self._banner_frames = 0

    def reset(self) -> None:
        """Drop effects left over from the previous run."""
        self._banner_frames = 0
        self._banner_level = 1

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def render(self, screen: pygame.Surface, engine: SimulationEngine,
               report: Optional[TickReport] = None) -> None:
        """
        Draw the whole frame.

        Args:
            screen: Target surface
            engine: Source of the entity snapshots
            report: Latest tick report (default: a fresh engine report)
        """
        report = report or engine.report()

        screen.fill(config.BACKGROUND_COLOR)
        screen.blit(self._get_grid(screen.get_size()), (0, 0))

        for hazard in engine.hazards:
            self._draw_hazard(screen, hazard)
        for pickup in engine.pickups:
            self._draw_pickup(screen, pickup)
        for particle in engine.debris:
            self._draw_debris(screen, particle)

        if report.phase is not Phase.IDLE:
            self._draw_player(screen, engine.player)
            if engine.player.has_shield:
                self._draw_shield_ring(screen, engine.player, report.frame_count)

        self._draw_hud(screen, report)

        if report.phase is Phase.IDLE:
            self._draw_start_screen(screen, report)
        elif report.phase is Phase.ENDED:
            self._draw_game_over(screen, report)
        elif self.banner_active:
            self._draw_level_banner(screen)

    def _draw_hazard(self, screen: pygame.Surface, hazard: Hazard) -> None:
        outline = hazard.outline()
        pygame.draw.polygon(screen, config.HAZARD_COLOR, outline)
        pygame.draw.polygon(screen, config.HAZARD_GLOW[:3], outline, 2)

    def _draw_pickup(self, screen: pygame.Surface, pickup: Pickup) -> None:
        center = (int(pickup.x), int(pickup.y))
        if pickup.kind is PickupKind.SHIELD:
            pygame.draw.circle(screen, config.SHIELD_PICKUP_COLOR, center, int(pickup.size))
            pygame.draw.circle(screen, config.SHIELD_PICKUP_INNER, center, int(pickup.size * 0.6))
            label = self._get_font().render("S", True, config.BACKGROUND_COLOR)
            screen.blit(label, label.get_rect(center=center))
        else:
            points = star_points(pickup.x, pickup.y, 5, pickup.size, pickup.size * 0.5, pickup.rotation)
            pygame.draw.polygon(screen, config.STAR_COLOR, points)
            pygame.draw.polygon(screen, config.STAR_OUTLINE, points, 2)

    def _draw_debris(self, screen: pygame.Surface, particle: Debris) -> None:
        radius = max(1, int(particle.size))
        surf = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        alpha = int(255 * particle.fade)
        pygame.draw.circle(surf, (*particle.color.as_rgb_tuple, alpha), (radius, radius), radius)
        screen.blit(surf, (int(particle.x) - radius, int(particle.y) - radius))

    def _draw_player(self, screen: pygame.Surface, player: Player) -> None:
        hull = ship_points(player.x, player.y, player.size)
        pygame.draw.polygon(screen, config.PLAYER_COLOR, hull)
        pygame.draw.polygon(screen, config.PLAYER_GLOW[:3], hull, 2)

        flame_height = 8 + self._flicker.random() * 4
        base_y = player.y + player.size / 2
        flame = [(player.x - 5, base_y), (player.x + 5, base_y), (player.x, base_y + flame_height)]
        pygame.draw.polygon(screen, config.FLAME_COLOR[:3], flame)

    def _draw_shield_ring(self, screen: pygame.Surface, player: Player, frame: int) -> None:
        radius = int(player.size + 10)
        alpha = int(255 * (0.5 + math.sin(frame * 0.1) * 0.3))
        surf = pygame.Surface((radius * 2 + 6, radius * 2 + 6), pygame.SRCALPHA)
        pygame.draw.circle(surf, (*config.SHIELD_RING_COLOR, alpha), (radius + 3, radius + 3), radius, 3)
        screen.blit(surf, (int(player.x) - radius - 3, int(player.y) - radius - 3))

    def _draw_hud(self, screen: pygame.Surface, report: TickReport) -> None:
        font = self._get_font()
        width = screen.get_width()

        score_text = font.render(f"Score: {report.score}", True, config.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        best_text = font.render(f"Best: {report.best_score}", True, config.HUD_ACCENT)
        screen.blit(best_text, (10, 34))

        health_color = config.GAME_OVER_COLOR if report.health <= 1 else config.HUD_COLOR
        health_text = font.render(f"Health: {max(0, report.health)}", True, health_color)
        screen.blit(health_text, health_text.get_rect(topright=(width - 10, 10)))

        level_text = font.render(f"Level: {report.level}", True, config.HUD_COLOR)
        screen.blit(level_text, level_text.get_rect(topright=(width - 10, 34)))

    def _draw_overlay(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(config.OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

    def _draw_centered(self, screen: pygame.Surface, font: pygame.font.Font,
                       text: str, color, dy: int) -> None:
        width, height = screen.get_size()
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(width // 2, height // 2 + dy)))

    def _draw_start_screen(self, screen: pygame.Surface, report: TickReport) -> None:
        self._draw_overlay(screen)
        self._draw_centered(screen, self._get_font_large(), "ASTEROID DODGE", config.TITLE_COLOR, -90)
        lines = [
            "Arrows / WASD to move, or drag to steer",
            "Dodge asteroids: +10 each",
            "S = shield, star = +50",
        ]
        for i, line in enumerate(lines):
            self._draw_centered(screen, self._get_font(), line, config.HUD_COLOR, -20 + i * 28)
        self._draw_centered(screen, self._get_font_medium(), "Press SPACE or click to start",
                            config.HUD_ACCENT, 90)
        if report.best_score > 0:
            self._draw_centered(screen, self._get_font(), f"Best score: {report.best_score}",
                                config.HUD_COLOR, 130)

    def _draw_game_over(self, screen: pygame.Surface, report: TickReport) -> None:
        self._draw_overlay(screen)
        self._draw_centered(screen, self._get_font_large(), "GAME OVER", config.GAME_OVER_COLOR, -60)
        self._draw_centered(screen, self._get_font_medium(), f"Final Score: {report.score}",
                            config.HUD_COLOR, 0)
        self._draw_centered(screen, self._get_font(), f"Level {report.level} | Best {report.best_score}",
                            config.HUD_ACCENT, 40)
        self._draw_centered(screen, self._get_font(), "Press R or click to play again",
                            config.HUD_COLOR, 80)

    def _draw_level_banner(self, screen: pygame.Surface) -> None:
        progress = self._banner_frames / config.LEVEL_BANNER_FRAMES
        alpha = int(255 * min(1.0, progress * 2))
        surf = self._get_font_large().render(f"LEVEL {self._banner_level}", True, config.TITLE_COLOR)
        surf.set_alpha(alpha)
        width, height = screen.get_size()
        screen.blit(surf, surf.get_rect(center=(width // 2, height // 3)))
