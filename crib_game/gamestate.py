from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from crib_game.cards import Card
from crib_game.constants import WINNING_SCORE


@dataclass
class GameState:
    scores: List[int] = field(default_factory=lambda: [0, 0])
    dealer: int = 0
    round_num: int = 0
    winner: Optional[int] = None
    winning_score: int = WINNING_SCORE
    # per-round
    hands: List[List[Card]] = field(default_factory=lambda: [[], []])
    crib: List[Card] = field(default_factory=list)
    starter: Optional[Card] = None

    @staticmethod
    def other(player: int) -> int:
        return 1 - player

    @property
    def pone(self) -> int:
        return self.other(self.dealer)

    def add_points(self, player: int, points: int) -> bool:
        """Add points and return True once `player` has reached the winning score."""
        self.scores[player] += points
        if self.winner is None and self.scores[player] >= self.winning_score:
            self.winner = player
        return self.winner is not None

    def is_over(self) -> bool:
        return self.winner is not None

    def new_round(self) -> None:
        self.round_num += 1
        self.hands = [[], []]
        self.crib = []
        self.starter = None
