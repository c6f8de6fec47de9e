import random
from typing import List, Tuple

from crib_game.cards import Card
from crib_game.players.base_player import Player, playable_cards


class RandomPlayer(Player):
    def __init__(self, name: str = "random", seed: int | None = None):
        super().__init__(name)
        self._rng = random.Random(seed)

    def select_crib_cards(self, hand: List[Card], dealer_is_self: bool) -> Tuple[List[Card], List[Card]]:
        discard = self._rng.sample(hand, 2)
        return [c for c in hand if c not in discard], discard

    def select_card_to_play(self, hand: List[Card], count: int, sequence: List[Card]) -> Card:
        return self._rng.choice(playable_cards(hand, count))
