from abc import ABC
from abc import abstractmethod
from typing import List, Tuple

from crib_game.cards import Card
from crib_game.constants import MAX_COUNT, RANK_VALUE


def playable_cards(hand: List[Card], count: int) -> List[Card]:
    return [c for c in hand if count + RANK_VALUE[c.rank] <= MAX_COUNT]


class Player(ABC):
    def __init__(self, name):
        self.name = name

    @abstractmethod
    def select_crib_cards(self, hand: List[Card], dealer_is_self: bool) -> Tuple[List[Card], List[Card]]:
        # returns (kept 4, discarded 2)
        return NotImplemented

    @abstractmethod
    def select_card_to_play(self, hand: List[Card], count: int, sequence: List[Card]) -> Card:
        # pegging decision, only asked when at least one card in hand is playable
        return NotImplemented
