"""
Best-of-three rock paper scissors against a random computer.

Running tallies of wins, losses and draws survive between sessions in a
small JSON document. The match itself (round count) starts fresh each time.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from arcade.logging import get_logger
from arcade.persistence import JsonDocument

log = get_logger('rps')

CHOICES = ('rock', 'paper', 'scissors')

# choice -> the choice it defeats
BEATS = {
    'rock': 'scissors',
    'paper': 'rock',
    'scissors': 'paper',
}

TALLY_KEYS = ('playerScore', 'computerScore', 'drawScore')


class Outcome(str, Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


def determine_winner(player: str, computer: str) -> Outcome:
    """
    Outcome of one round from the player's side.

    Examples:
        >>> determine_winner('rock', 'scissors')
        <Outcome.WIN: 'win'>
        >>> determine_winner('paper', 'paper')
        <Outcome.DRAW: 'draw'>
    """
    if player == computer:
        return Outcome.DRAW
    if BEATS[player] == computer:
        return Outcome.WIN
    return Outcome.LOSE


@dataclass(frozen=True)
class RoundResult:
    player_choice: str
    computer_choice: str
    outcome: Outcome
    round_number: int

    @property
    def text(self) -> str:
        if self.outcome is Outcome.WIN:
            return "You win!"
        if self.outcome is Outcome.LOSE:
            return "Computer wins!"
        return "It's a draw!"


def _tally(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, int(value))


class Match:
    """A best-of-three match with persisted tallies.

    Args:
        document: Where tallies are stored, or None to keep them in memory
        rng: Random generator for the computer's choice (default: unseeded)
        player_name: Display name; blank shows as "You"
    """

    MAX_ROUNDS = 3

    def __init__(self, document: Optional[JsonDocument] = None,
                 rng: Optional[random.Random] = None,
                 player_name: str = ''):
        self.document = document
        self._rng = rng or random.Random()
        self.player_name = player_name
        self.rounds_played = 0

        stored = document.load() if document is not None else {}
        self.player_score = _tally(stored.get('playerScore'))
        self.computer_score = _tally(stored.get('computerScore'))
        self.draw_score = _tally(stored.get('drawScore'))

    @property
    def player_label(self) -> str:
        return self.player_name.strip() or "You"

    @property
    def is_finished(self) -> bool:
        return self.rounds_played >= self.MAX_ROUNDS

    @property
    def tallies(self) -> Dict[str, int]:
        return dict(zip(TALLY_KEYS, (self.player_score, self.computer_score, self.draw_score)))

    def play(self, choice: str) -> Optional[RoundResult]:
        """
        Play one round.

        Args:
            choice: 'rock', 'paper' or 'scissors'

        Returns:
            The round result, or None once the match has finished

        Raises:
            ValueError: If choice is not one of CHOICES
        """
        if choice not in CHOICES:
            raise ValueError(f"choice must be one of {', '.join(CHOICES)}, got {choice!r}")
        if self.is_finished:
            return None

        computer = self._rng.choice(CHOICES)
        outcome = determine_winner(choice, computer)
        if outcome is Outcome.WIN:
            self.player_score += 1
        elif outcome is Outcome.LOSE:
            self.computer_score += 1
        else:
            self.draw_score += 1
        self.rounds_played += 1

        log.debug("Round %d: %s vs %s -> %s", self.rounds_played, choice, computer, outcome.value)
        self._save()

        if self.is_finished:
            log.info("Match over: %s", self.match_winner)
        return RoundResult(choice, computer, outcome, self.rounds_played)

    @property
    def match_winner(self) -> str:
        """Match result line, judged on the stored tallies."""
        if self.player_score > self.computer_score:
            return f"{self.player_label} wins the match!"
        if self.computer_score > self.player_score:
            return "Computer wins the match!"
        return "Match Draw!"

    def reset(self) -> None:
        """Start a new match and clear the tallies."""
        self.rounds_played = 0
        self.player_score = 0
        self.computer_score = 0
        self.draw_score = 0
        self._save()

    def _save(self) -> None:
        if self.document is None:
            return
        try:
            self.document.save(self.tallies)
        except OSError as e:
            log.warning("Could not save tallies to %s: %s", self.document.path, e)
