import re
from typing import Callable, List, Optional, Tuple
from logging import getLogger

from crib_game.cards import Card, render_cards
from crib_game.players.base_player import Player, playable_cards

logger = getLogger(__name__)


def parse_indices(text: str) -> List[int]:
    """Turn '1 4' or '1,4' into 0-based positions. Raises ValueError on non-numbers."""
    return [int(token) - 1 for token in re.split(r"[\s,]+", text.strip()) if token]


class HumanPlayer(Player):
    def __init__(self, name: str = "You", input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None, color: bool = True):
        super().__init__(name)
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.color = color

    def select_crib_cards(self, hand: List[Card], dealer_is_self: bool) -> Tuple[List[Card], List[Card]]:
        while True:
            self.output_fn("Your hand:")
            self.output_fn(render_cards(hand, with_indices=True, color=self.color))
            answer = self.input_fn("Choose 2 cards to discard to the crib (e.g. 1 4): ")
            try:
                picks = parse_indices(answer)
            except ValueError:
                picks = []
            if len(picks) != 2 or len(set(picks)) != 2 or not all(0 <= i < len(hand) for i in picks):
                self.output_fn("Invalid choice. Enter two different positions from your hand.")
                continue
            kept = [c for i, c in enumerate(hand) if i not in picks]
            discards = [hand[i] for i in sorted(picks)]
            return kept, discards

    def select_card_to_play(self, hand: List[Card], count: int, sequence: List[Card]) -> Card:
        playable = playable_cards(hand, count)
        positions = [i for i, c in enumerate(hand) if c in playable]
        while True:
            self.output_fn("Your cards:")
            self.output_fn(render_cards(hand, with_indices=True, color=self.color))
            self.output_fn(f"Playable positions: {', '.join(str(i + 1) for i in positions)}")
            answer = self.input_fn("Play a card by position: ")
            try:
                index = int(answer.strip()) - 1
            except ValueError:
                index = -1
            if index in positions:
                return hand[index]
            logger.debug(f"Rejected pegging input {answer!r}")
            self.output_fn("Invalid play.")
