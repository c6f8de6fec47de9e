from typing import List, Tuple
from logging import getLogger

from crib_game.cards import Card
from crib_game.constants import RANK_VALUE, DEALER_CRIB_BIAS, PONE_CRIB_BIAS
from crib_game.players.base_player import Player, playable_cards
from crib_game.scoring import score_hand, score_pegging_play
from crib_game.utils import get_possible_hands, remaining_deck

logger = getLogger(__name__)


def expected_hand_score(kept: List[Card], starters: List[Card]) -> float:
    """Average score of `kept` over every possible starter card."""
    if not starters:
        return 0.0
    return sum(score_hand(kept, s, is_crib=False) for s in starters) / len(starters)


def crib_bias(discards: List[Card], dealer_is_self: bool,
              dealer_bias: float = DEALER_CRIB_BIAS, pone_bias: float = PONE_CRIB_BIAS) -> float:
    pips = sum(RANK_VALUE[c.rank] for c in discards)
    return pips * dealer_bias if dealer_is_self else -pips * pone_bias


class ComputerPlayer(Player):
    def __init__(self, name: str = "Computer", dealer_bias: float = DEALER_CRIB_BIAS,
                 pone_bias: float = PONE_CRIB_BIAS):
        super().__init__(name)
        self.dealer_bias = dealer_bias
        self.pone_bias = pone_bias

    def select_crib_cards(self, hand: List[Card], dealer_is_self: bool) -> Tuple[List[Card], List[Card]]:
        # the 46 cards we cannot see are the possible starters
        starters = remaining_deck(hand)
        best_kept, best_discards = hand[:4], hand[4:]
        best_score = float("-inf")
        for kept, discards in get_possible_hands(hand):
            score = expected_hand_score(kept, starters) + crib_bias(
                discards, dealer_is_self, self.dealer_bias, self.pone_bias)
            if score > best_score:
                best_score = score
                best_kept, best_discards = kept, discards
        logger.debug(f"{self.name} keeps {[str(c) for c in best_kept]} (value {best_score:.2f})")
        return best_kept, best_discards

    def select_card_to_play(self, hand: List[Card], count: int, sequence: List[Card]) -> Card:
        # most points first, then the highest resulting count
        def preference(card: Card):
            points = score_pegging_play(sequence, count, card)
            return points, count + RANK_VALUE[card.rank], -RANK_VALUE[card.rank]
        return max(playable_cards(hand, count), key=preference)
