"""
Best-score and small-document persistence.

Games keep a single integer high score (and, for the mini-games, a handful
of tallies) across sessions. Storage is best-effort: a missing or corrupt
file reads as the defaults, never as an error.

Usage:
    store = JsonBestScoreStore(Path('~/.asteroid_dodge/best.json'))
    best = store.load_best_score()      # 0 when absent or unreadable
    store.save_best_score(best + 10)

    doc = JsonDocument(Path('rps_scores.json'))
    tallies = doc.load({'wins': 0, 'losses': 0, 'draws': 0})
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from arcade.logging import get_logger

log = get_logger('persistence')

BEST_SCORE_KEY = 'asteroid_highScore'


class JsonDocument:
    """A flat JSON object stored in a single file.

    Args:
        path: File location; parent directories are created on save
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Read the document, falling back to defaults.

        Keys present in defaults but missing from the file are filled in.
        A missing file, unreadable file, invalid JSON or a non-object
        payload all yield a copy of the defaults.

        Args:
            defaults: Values to use for absent keys

        Returns:
            Dict of stored values merged over the defaults
        """
        result = dict(defaults or {})
        if not self.path.exists():
            return result

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Could not read %s: %s", self.path, e)
            return result

        if not isinstance(data, dict):
            log.warning("Ignoring %s: expected a JSON object, got %s",
                        self.path, type(data).__name__)
            return result

        result.update(data)
        return result

    def save(self, data: Dict[str, Any]) -> None:
        """Write the document atomically.

        Raises:
            OSError: If the directory or file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        with open(tmp_path, 'w') as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)


class BestScoreStore(ABC):
    """Storage collaborator for the persisted best score.

    Implementations must tolerate absence or corruption on load by
    returning 0. Saves may raise; callers treat them as fire-and-forget.
    """

    @abstractmethod
    def load_best_score(self) -> int:
        """Return the stored best score, or 0 if none is available."""
        pass

    @abstractmethod
    def save_best_score(self, score: int) -> None:
        """Persist a new best score."""
        pass


class JsonBestScoreStore(BestScoreStore):
    """Best score kept under a single key in a JSON document.

    Other keys in the same document are preserved on save.

    Args:
        path: JSON file location
        key: Key holding the score (default: 'asteroid_highScore')
    """

    def __init__(self, path: Union[str, Path], key: str = BEST_SCORE_KEY):
        self.document = JsonDocument(path)
        self.key = key

    def load_best_score(self) -> int:
        value = self.document.load().get(self.key, 0)
        # bool is an int subclass; a stored true/false is corruption
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            log.warning("Ignoring non-numeric best score %r in %s", value, self.document.path)
            return 0
        try:
            score = int(value)
        except (ValueError, OverflowError):
            log.warning("Ignoring non-numeric best score %r in %s", value, self.document.path)
            return 0
        if score < 0:
            log.warning("Ignoring negative best score %d in %s", score, self.document.path)
            return 0
        return score

    def save_best_score(self, score: int) -> None:
        data = self.document.load()
        data[self.key] = int(score)
        self.document.save(data)
        log.debug("Saved best score %d to %s", score, self.document.path)


class MemoryBestScoreStore(BestScoreStore):
    """In-process store for tests and headless runs.

    Attributes:
        best: Currently stored value
        saves: Every value passed to save_best_score, in order
    """

    def __init__(self, best: int = 0):
        self.best = best
        self.saves: List[int] = []

    def load_best_score(self) -> int:
        return self.best

    def save_best_score(self, score: int) -> None:
        self.best = score
        self.saves.append(score)
