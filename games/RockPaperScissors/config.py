"""
Rock Paper Scissors - Configuration loader.

Loads settings from .env file with sensible defaults.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)

# Persistence
SCORES_FILE = Path(os.getenv('RPS_SCORES_FILE', '~/.asteroid_dodge/rps_scores.json')).expanduser()
