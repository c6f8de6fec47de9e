from dataclasses import dataclass
from typing import List, Iterable
import random
from logging import getLogger

from crib_game.constants import RANK_VALUE
from crib_game.errors import NotEnoughCardsError, EmptyDeckError

logger = getLogger(__name__)

SUITS = ["C", "D", "H", "S"]
RANKS = list(range(1, 14))  # 1=Ace, 11=Jack, 12=Queen, 13=King

RANK_LABELS = {1: "A", **{i: str(i) for i in range(2, 11)}, 11: "J", 12: "Q", 13: "K"}
SUIT_SYMBOLS = {"C": "♣", "D": "♦", "H": "♥", "S": "♠"}
RED_SUITS = {"D", "H"}

_RANK_CODES = {"a": 1, "t": 10, "j": 11, "q": 12, "k": 13, **{str(i): i for i in range(2, 11)}}

ANSI_RED = "\x1b[31m"
ANSI_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Card:
    suit: str
    rank: int

    def __str__(self) -> str:
        return self.label()

    @property
    def pip_value(self) -> int:
        return RANK_VALUE[self.rank]

    @property
    def face_value(self) -> int:
        return self.rank

    def label(self) -> str:
        return f"{RANK_LABELS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @classmethod
    def from_str(cls, text: str) -> "Card":
        """Parse a short card code such as '5h', 'th', '10d' or 'js'."""
        code = text.strip().lower()
        rank_code, suit_code = code[:-1], code[-1:].upper()
        if rank_code not in _RANK_CODES or suit_code not in SUITS:
            raise ValueError(f"Unrecognised card {text!r}")
        return cls(suit_code, _RANK_CODES[rank_code])


def pip_value(card: Card) -> int:
    return card.pip_value


def face_value(card: Card) -> int:
    return card.face_value


def build_hand(codes: Iterable[str]) -> List[Card]:
    return [Card.from_str(c) for c in codes]


def make_deck() -> List[Card]:
    return [Card(s, r) for s in SUITS for r in RANKS]


class Deck:
    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random(seed)
        self.cards: List[Card] = make_deck()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self.cards)

    def deal(self, n: int) -> List[Card]:
        if n > len(self.cards):
            raise NotEnoughCardsError(n, len(self.cards))
        hand = self.cards[:n]
        self.cards = self.cards[n:]
        return hand

    def cut(self) -> Card:
        if not self.cards:
            raise EmptyDeckError("Deck was unexpectedly empty when cutting starter card")
        return self.deal(1)[0]

    def reset(self) -> None:
        self.cards = make_deck()
        self.shuffle()


def _color(text: str, suit: str, color: bool) -> str:
    if color and suit in RED_SUITS:
        return f"{ANSI_RED}{text}{ANSI_RESET}"
    return text


def render_card(card: Card, color: bool = True) -> List[str]:
    rank = RANK_LABELS[card.rank]
    left = _color(rank.ljust(2), card.suit, color)
    right = _color(rank.rjust(2), card.suit, color)
    centre = _color(SUIT_SYMBOLS[card.suit], card.suit, color)
    return [
        "+---------+",
        f"|{left}       |",
        "|         |",
        f"|    {centre}    |",
        "|         |",
        f"|       {right}|",
        "+---------+",
    ]


def render_cards(cards: List[Card], with_indices: bool = False, color: bool = True) -> str:
    if not cards:
        return "(no cards)"
    rendered = [render_card(c, color) for c in cards]
    lines = [" ".join(card_lines[i] for card_lines in rendered) for i in range(len(rendered[0]))]
    if with_indices:
        lines.append(" ".join(f"   ({i + 1:>2})    " for i in range(len(cards))))
    return "\n".join(lines)
