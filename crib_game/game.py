from __future__ import annotations
import random
import time
from typing import Callable, List, Optional, Sequence, Tuple
from logging import getLogger

from crib_game.cards import Card, Deck, render_cards
from crib_game.constants import DEAL_SIZE, HAND_SIZE, MAX_COUNT, RANK_VALUE, SCORE_DELAY, WINNING_SCORE
from crib_game.errors import IllegalMoveError
from crib_game.gamestate import GameState
from crib_game.players.base_player import Player, playable_cards
from crib_game.scoring import score_breakdown, score_pegging_play

logger = getLogger(__name__)

JACK = 11
HIS_HEELS_POINTS = 2


class GameOver(Exception):
    """Raised internally as soon as a player reaches the winning score."""

    def __init__(self, winner: int):
        super().__init__(f"player {winner} reached the winning score")
        self.winner = winner


def cards_str(cards: Sequence[Card]) -> str:
    return " ".join(str(c) for c in cards)


class CribbageGame:
    def __init__(self, players: Sequence[Player], seed: int | None = None, rng: random.Random | None = None,
                 winning_score: int = WINNING_SCORE, delay: float = SCORE_DELAY,
                 output_fn: Callable[[str], None] = print, first_dealer: Optional[int] = None,
                 color: bool = True):
        if len(players) != 2:
            raise ValueError("Cribbage needs exactly two players")
        self.players = list(players)
        self._rng = rng if rng is not None else random.Random(seed)
        self.deck = Deck(rng=self._rng)
        self.delay = delay
        self.output_fn = output_fn
        self.color = color
        self.first_dealer = first_dealer
        self.state = GameState(winning_score=winning_score)

    def say(self, message: str) -> None:
        self.output_fn(message)

    def pause(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def award(self, player: int, points: int, reason: str) -> None:
        if self.state.is_over():
            return
        won = self.state.add_points(player, points)
        self.say(f"{self.players[player].name} +{points} ({reason}) -> {self.state.scores[player]}")
        logger.info(f"{self.players[player].name} +{points} ({reason}), scores {self.state.scores}")
        if won:
            raise GameOver(player)

    def play_game(self) -> Tuple[int, int]:
        state = self.state
        state.dealer = self.first_dealer if self.first_dealer is not None else self._rng.randrange(2)
        self.say(f"Cribbage ({self.players[0].name} vs {self.players[1].name})")
        self.say(f"First to {state.winning_score} points wins.\n")
        try:
            while not state.is_over():
                self.play_round()
        except GameOver as exc:
            logger.info(f"{self.players[exc.winner].name} won in round {state.round_num}")
        except EOFError:
            logger.info(f"Input closed, abandoning round {state.round_num}")
            raise
        winner = state.winner
        s0, s1 = state.scores
        self.say(f"\n{self.players[winner].name} won {max(s0, s1)} to {min(s0, s1)}!")
        return s0, s1

    def play_round(self) -> None:
        state = self.state
        state.new_round()
        dealer, pone = state.dealer, state.pone
        self.say(f"\n=== Round {state.round_num} ===")
        self.say(f"Dealer: {self.players[dealer].name}")
        self.say(f"Crib: {self.players[dealer].name}")
        logger.info(f"Round {state.round_num}, dealer {self.players[dealer].name}, scores {state.scores}")

        # new shuffled deck each round
        self.deck.reset()
        state.hands = [self.deck.deal(DEAL_SIZE), self.deck.deal(DEAL_SIZE)]
        self.discard_to_crib_phase()
        state.starter = self.deck.cut()
        self.say("Starter card:")
        self.say(render_cards([state.starter], color=self.color))
        logger.info(f"Starter {state.starter}")
        if state.starter.rank == JACK:
            self.award(dealer, HIS_HEELS_POINTS, "his heels")

        self.say("\nPegging phase:")
        self.pegging_phase([list(state.hands[0]), list(state.hands[1])], lead=pone)

        self.say("\nHand counting:")
        self.say(f"Counting order: {self.players[pone].name} hand, {self.players[dealer].name} hand, "
                 f"then {self.players[dealer].name} crib.")
        self.count_hand(pone, state.hands[pone], is_crib=False)
        self.count_hand(dealer, state.hands[dealer], is_crib=False)
        self.count_hand(dealer, state.crib, is_crib=True)
        self.say(f"Scores: {self.players[0].name} {state.scores[0]} - {self.players[1].name} {state.scores[1]}")
        # alternate dealer
        state.dealer = pone

    def discard_to_crib_phase(self) -> None:
        state = self.state
        state.crib = []
        for order in (0, 1):
            player = self.players[order]
            hand = state.hands[order]
            kept, discards = player.select_crib_cards(list(hand), dealer_is_self=(state.dealer == order))
            kept, discards = list(kept), list(discards)
            if (len(kept) != HAND_SIZE or len(discards) != DEAL_SIZE - HAND_SIZE
                    or set(kept + discards) != set(hand)):
                raise IllegalMoveError(f"{player.name} made an invalid discard: kept {cards_str(kept)}, "
                                       f"discarded {cards_str(discards)} from {cards_str(hand)}")
            state.hands[order] = kept
            state.crib.extend(discards)
            logger.info(f"{player.name} keeps {cards_str(kept)}, discards {cards_str(discards)}")
        self.say(f"Both players discarded 2 cards to {self.players[state.dealer].name}'s crib.")

    def count_hand(self, player: int, cards: List[Card], is_crib: bool) -> None:
        breakdown = score_breakdown(cards, self.state.starter, is_crib=is_crib)
        reason = "crib" if is_crib else "hand"
        logger.info(f"{self.players[player].name} {reason} {cards_str(cards)} + {self.state.starter}: {breakdown}")
        self.say(f"{self.players[player].name} {reason}:")
        self.say(render_cards(cards, color=self.color))
        self.pause()
        self.award(player, sum(breakdown.values()), reason)

    def pegging_phase(self, hands: List[List[Card]], lead: int) -> None:
        # pegging: play cards without exceeding 31, go logic, reset on 31 or both go
        turn = lead
        count = 0
        sequence: List[Card] = []
        passed = [False, False]
        last_player: Optional[int] = None

        while hands[0] or hands[1]:
            hand = hands[turn]
            playable = playable_cards(hand, count)
            if not playable:
                if not passed[turn]:
                    self.say(f"{self.players[turn].name}: go")
                    self.pause()
                passed[turn] = True
                opponent = GameState.other(turn)
                if passed[opponent]:
                    if 0 < count < MAX_COUNT and last_player is not None:
                        self.award(last_player, 1, "last card")
                    count = 0
                    sequence = []
                    passed = [False, False]
                    turn = opponent if last_player is None else GameState.other(last_player)
                else:
                    turn = opponent
                continue

            card = self.players[turn].select_card_to_play(list(hand), count, list(sequence))
            if card not in playable:
                raise IllegalMoveError(f"{self.players[turn].name} played {card} at count {count}")
            hand.remove(card)
            points = score_pegging_play(sequence, count, card)
            count += RANK_VALUE[card.rank]
            sequence.append(card)
            passed[turn] = False
            last_player = turn
            self.say(f"{self.players[turn].name} played {card} (count {count})")
            self.pause()
            if points > 0:
                self.award(turn, points, "pegging")
                self.pause()
            if count == MAX_COUNT:
                self.say("Reached 31. Count resets.")
                self.pause()
                count = 0
                sequence = []
                passed = [False, False]
            turn = GameState.other(turn)

        if 0 < count < MAX_COUNT and last_player is not None:
            self.award(last_player, 1, "last card")
