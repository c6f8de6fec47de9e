import itertools
from typing import List, Sequence, Iterable, Tuple, TypeVar
from logging import getLogger

from crib_game.cards import Card, make_deck
from crib_game.constants import DEAL_SIZE, HAND_SIZE

logger = getLogger(__name__)

T = TypeVar("T")


def combinations(items: Sequence[T], size: int) -> List[List[T]]:
    """
    All subsets of `items` with exactly `size` elements.
    Each subset keeps the input order and subsets come out in lexicographic index order.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    return [list(combo) for combo in itertools.combinations(items, size)]


def get_possible_hands(hand: List[Card]) -> List[Tuple[List[Card], List[Card]]]:
    """
    Given a 6-card hand, return all possible (cards_to_keep, crib_cards) pairs,
    where cards_to_keep is a list of 4 cards and crib_cards is the 2 cards put in the crib.
    """
    if len(hand) != DEAL_SIZE:
        raise ValueError("Hand must have exactly 6 cards")
    all_combos = []
    for kept in combinations(hand, HAND_SIZE):
        crib = [c for c in hand if c not in kept]
        all_combos.append((kept, crib))
    return all_combos


def remaining_deck(exclude: Iterable[Card]) -> List[Card]:
    seen = set(exclude)
    return [c for c in make_deck() if c not in seen]
