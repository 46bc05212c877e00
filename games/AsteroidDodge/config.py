"""
Asteroid Dodge - Configuration loader.

Loads settings from .env file with sensible defaults.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from models import DodgeSettings

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)

# Simulation defaults; profiles in profiles/*.yaml override these
DEFAULT_SETTINGS = DodgeSettings(
    viewport_width=SCREEN_WIDTH,
    viewport_height=SCREEN_HEIGHT,
    player_speed=_get_float('PLAYER_SPEED', 5.0),
    player_size=_get_float('PLAYER_SIZE', 20.0),
    max_hazards=_get_int('MAX_HAZARDS', 5),
    base_spawn_rate=_get_float('BASE_SPAWN_RATE', 0.02),
    pickup_spawn_rate=_get_float('PICKUP_SPAWN_RATE', 0.01),
    starting_health=_get_int('STARTING_HEALTH', 3),
    difficulty_growth=_get_float('DIFFICULTY_GROWTH', 1.05),
    ticks_per_level=_get_int('TICKS_PER_LEVEL', 900),
    tick_rate=FPS,
)

# Persistence
BEST_SCORE_FILE = Path(_get_str('BEST_SCORE_FILE', '~/.asteroid_dodge/best_score.json')).expanduser()

# Audio
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
AUDIO_VOLUME = _get_float('AUDIO_VOLUME', 0.4)

# Visual
BACKGROUND_COLOR = (15, 52, 96)        # #0f3460
GRID_COLOR = (14, 165, 233, 26)        # faint blue, 10% alpha
GRID_SPACING = 40
HAZARD_COLOR = (255, 107, 107)         # #ff6b6b
HAZARD_GLOW = (255, 107, 107, 128)
SHIELD_PICKUP_COLOR = (0, 255, 136)    # #00ff88
SHIELD_PICKUP_INNER = (0, 221, 119)    # #00dd77
STAR_COLOR = (255, 255, 0)             # #ffff00
STAR_OUTLINE = (255, 221, 0)           # #ffdd00
PLAYER_COLOR = (0, 255, 136)
PLAYER_GLOW = (0, 255, 136, 178)
FLAME_COLOR = (255, 165, 0, 204)
SHIELD_RING_COLOR = (0, 255, 136)
HUD_COLOR = (255, 255, 255)
HUD_ACCENT = (0, 255, 136)
OVERLAY_COLOR = (0, 0, 0, 170)
TITLE_COLOR = (0, 255, 136)
GAME_OVER_COLOR = (255, 107, 107)

# UI
FONT_SIZE_SMALL = 24
FONT_SIZE_MEDIUM = 36
FONT_SIZE_LARGE = 64
LEVEL_BANNER_FRAMES = 36  # ~600ms at 60 FPS
