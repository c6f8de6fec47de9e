from collections import Counter
from typing import Dict, List, Sequence
from logging import getLogger

from crib_game.cards import Card
from crib_game.constants import RANK_VALUE, FIFTEEN, MAX_COUNT
from crib_game.utils import combinations

logger = getLogger(__name__)

JACK = 11
# points for 2, 3 and 4 of a kind played back to back
PEGGING_PAIR_POINTS = {2: 2, 3: 6, 4: 12}


def is_run(cards: Sequence[Card]) -> bool:
    if len(cards) < 3:
        return False
    ranks = [c.rank for c in cards]
    if len(set(ranks)) != len(ranks):
        return False
    return max(ranks) - min(ranks) + 1 == len(ranks)


def score_fifteens(cards: List[Card]) -> int:
    points = 0
    for size in range(2, len(cards) + 1):
        for combo in combinations(cards, size):
            if sum(RANK_VALUE[c.rank] for c in combo) == FIFTEEN:
                points += 2
    return points


def score_pairs(cards: List[Card]) -> int:
    counts = Counter(c.rank for c in cards)
    return sum(n * (n - 1) for n in counts.values() if n >= 2)


def score_runs(cards: List[Card]) -> int:
    """
    Longest run size wins: every subset of that size that is a run scores its length,
    so pairs inside a run give double and triple runs. Shorter runs are not counted.
    """
    for size in range(len(cards), 2, -1):
        run_count = sum(1 for combo in combinations(cards, size) if is_run(combo))
        if run_count:
            return run_count * size
    return 0


def score_flush(hand: List[Card], starter: Card, is_crib: bool = False) -> int:
    if not hand or any(c.suit != hand[0].suit for c in hand):
        return 0
    if starter.suit == hand[0].suit:
        return 5
    # a crib only counts a flush when the starter matches too
    return 0 if is_crib else 4


def score_nobs(hand: List[Card], starter: Card) -> int:
    return 1 if any(c.rank == JACK and c.suit == starter.suit for c in hand) else 0


def score_breakdown(hand: List[Card], starter: Card, is_crib: bool = False) -> Dict[str, int]:
    full_hand = list(hand) + [starter]
    return {
        "fifteens": score_fifteens(full_hand),
        "pairs": score_pairs(full_hand),
        "runs": score_runs(full_hand),
        "flush": score_flush(hand, starter, is_crib),
        "nobs": score_nobs(hand, starter),
    }


def score_hand(hand: List[Card], starter: Card, is_crib: bool = False) -> int:
    return sum(score_breakdown(hand, starter, is_crib).values())


def count_matching_tail(sequence: Sequence[Card]) -> int:
    """Number of cards at the end of `sequence` sharing the last card's rank, contiguously."""
    if not sequence:
        return 0
    rank = sequence[-1].rank
    matching = 0
    for card in reversed(sequence):
        if card.rank != rank:
            break
        matching += 1
    return matching


def longest_tail_run(sequence: Sequence[Card]) -> int:
    """Length of the longest run formed by the last N cards played, 0 if none."""
    for size in range(len(sequence), 2, -1):
        if is_run(sequence[-size:]):
            return size
    return 0


def score_pegging_play(sequence: Sequence[Card], running_total: int, played_card: Card) -> int:
    """
    Points for playing `played_card` on top of `sequence` (the cards played since the count
    last reset) when the count stands at `running_total`. The caller checks the play is legal.
    """
    new_total = running_total + RANK_VALUE[played_card.rank]
    new_sequence = list(sequence) + [played_card]
    points = 0
    if new_total == FIFTEEN:
        points += 2
    if new_total == MAX_COUNT:
        points += 2
    points += PEGGING_PAIR_POINTS.get(count_matching_tail(new_sequence), 0)
    points += longest_tail_run(new_sequence)
    return points
