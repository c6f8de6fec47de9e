import random

import pytest
from crib_game.cards import Card, Deck, build_hand, face_value, make_deck, pip_value, render_card, render_cards
from crib_game.errors import EmptyDeckError, NotEnoughCardsError


def test_cards_are_generated_correctly():
    card = Card('H', 5)
    assert str(card) == '5♥'
    assert card == Card.from_str('5h')
    assert hash(card) == hash(Card('H', 5))


@pytest.mark.parametrize("rank,expected", [(1, 1), (2, 2), (9, 9), (10, 10), (11, 10), (12, 10), (13, 10)])
def test_pip_value(rank, expected):
    assert pip_value(Card('S', rank)) == expected


def test_face_value_is_rank():
    assert [face_value(Card('C', r)) for r in range(1, 14)] == list(range(1, 14))


def test_from_str_accepts_short_codes():
    assert build_hand(["ah", "th", "10d", "JS", "kc"]) == [
        Card('H', 1), Card('H', 10), Card('D', 10), Card('S', 11), Card('C', 13)]


@pytest.mark.parametrize("code", ["", "1h", "5x", "zz", "14s"])
def test_from_str_rejects_bad_codes(code):
    with pytest.raises(ValueError):
        Card.from_str(code)


def test_make_deck_order():
    deck = make_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[:13] == [Card('C', r) for r in range(1, 14)]
    assert deck[-1] == Card('S', 13)


def test_deal_and_cut():
    deck = Deck(seed=1)
    deck.shuffle()
    hand = deck.deal(6)
    assert len(hand) == 6
    assert len(deck) == 46
    starter = deck.cut()
    assert starter not in hand
    assert len(deck) == 45


def test_deal_too_many_raises():
    deck = Deck(seed=1)
    deck.deal(50)
    with pytest.raises(NotEnoughCardsError):
        deck.deal(3)


def test_cut_empty_deck_raises():
    deck = Deck(seed=1)
    deck.deal(52)
    with pytest.raises(EmptyDeckError):
        deck.cut()


def test_reset_restores_full_shuffled_deck():
    deck = Deck(seed=3)
    deck.deal(20)
    deck.reset()
    assert len(deck) == 52
    assert sorted(deck.cards, key=lambda c: (c.suit, c.rank)) == sorted(make_deck(), key=lambda c: (c.suit, c.rank))


def test_deck_uses_passed_rng():
    d1 = Deck(rng=random.Random(7))
    d1.shuffle()
    d2 = Deck(rng=random.Random(7))
    d2.shuffle()
    assert d1.cards == d2.cards


def test_render_card_shape():
    lines = render_card(Card('S', 10))
    assert len(lines) == 7
    assert lines[1] == "|10       |"
    assert lines[3] == "|    ♠    |"
    assert lines[5] == "|       10|"
    assert all(len(line) == 11 for line in lines)


def test_render_red_card_uses_ansi_unless_disabled():
    assert "\x1b[31m" in render_card(Card('H', 1))[3]
    assert "\x1b[31m" not in render_card(Card('H', 1), color=False)[3]
    assert "\x1b[31m" not in render_card(Card('C', 1))[3]


def test_render_cards_with_indices():
    text = render_cards(build_hand(["ac", "2c"]), with_indices=True)
    lines = text.split("\n")
    assert len(lines) == 8
    assert "( 1)" in lines[-1] and "( 2)" in lines[-1]
    assert render_cards([]) == "(no cards)"
