"""
Settings Profile Loader - YAML tuning profiles with Pydantic validation.

Profiles live in profiles/<name>.yaml beside this module. Each one names a
subset of DodgeSettings fields; the loader merges them over a base
(normally config.DEFAULT_SETTINGS) and validates the result.

Examples:
    >>> loader = SettingsProfileLoader()
    >>> settings = loader.load_settings("frantic")
    >>> loader.list_profiles()
    ['classic', 'frantic', 'relaxed']
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from models import DodgeSettings, SettingsProfile
from arcade.logging import get_logger

log = get_logger('settings')

PROFILES_DIR = Path(__file__).parent / 'profiles'


class SettingsProfileLoader:
    """Loads and validates tuning profiles from YAML files.

    Attributes:
        profiles_dir: Directory containing profile YAML files
    """

    def __init__(self, profiles_dir: Optional[Path] = None):
        self.profiles_dir = Path(profiles_dir) if profiles_dir else PROFILES_DIR

    def profile_path(self, name: str) -> Path:
        return self.profiles_dir / f"{name}.yaml"

    def profile_exists(self, name: str) -> bool:
        return self.profile_path(name).exists()

    def list_profiles(self) -> List[str]:
        """List available profile names, sorted alphabetically."""
        if not self.profiles_dir.exists():
            return []
        return sorted(p.stem for p in self.profiles_dir.glob('*.yaml'))

    def load_profile(self, name: str) -> SettingsProfile:
        """Load and validate a profile file.

        Args:
            name: Profile name (file name without .yaml)

        Returns:
            Validated SettingsProfile

        Raises:
            FileNotFoundError: If the profile file doesn't exist
            ValueError: If the YAML is malformed or fails validation
        """
        yaml_path = self.profile_path(name)

        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Settings profile '{name}' not found. "
                f"Expected file: {yaml_path}"
            )

        try:
            with open(yaml_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML file '{yaml_path}': {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings profile in '{yaml_path}': expected a mapping")

        try:
            return SettingsProfile(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings profile in '{yaml_path}':\n{e}") from e

    def load_settings(self, name: str, base: Optional[DodgeSettings] = None) -> DodgeSettings:
        """Load a profile and apply it over base settings.

        Args:
            name: Profile name
            base: Settings to override (default: DodgeSettings())

        Raises:
            FileNotFoundError: If the profile file doesn't exist
            ValueError: If the profile or the merged settings are invalid
        """
        profile = self.load_profile(name)
        try:
            settings = profile.apply(base or DodgeSettings())
        except ValidationError as e:
            raise ValueError(
                f"Invalid settings in '{self.profile_path(name)}':\n{e}"
            ) from e
        log.info("Loaded settings profile '%s' (%s)", name, profile.name)
        return settings
