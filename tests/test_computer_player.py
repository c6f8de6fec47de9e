import pytest

from crib_game.cards import Card, build_hand
from crib_game.players.computer_player import ComputerPlayer, crib_bias, expected_hand_score
from crib_game.utils import remaining_deck


@pytest.fixture
def player():
    return ComputerPlayer()


@pytest.mark.parametrize("dealer_is_self", [True, False])
def test_select_crib_cards_keeps_four_fives(player, dealer_is_self):
    hand = build_hand(["5c", "5d", "jc", "5h", "kd", "5s"])
    kept, discards = player.select_crib_cards(hand, dealer_is_self=dealer_is_self)
    assert kept == build_hand(["5c", "5d", "5h", "5s"])
    assert discards == build_hand(["jc", "kd"])


def test_select_crib_cards_partitions_hand(player):
    hand = [Card('H', 1), Card('H', 4), Card('C', 9), Card('C', 10), Card('S', 11), Card('H', 13)]
    kept, discards = player.select_crib_cards(hand, dealer_is_self=True)
    assert len(kept) == 4 and len(discards) == 2
    assert set(kept) | set(discards) == set(hand)


def test_select_crib_cards_deterministic(player):
    hand = [Card('H', 2), Card('H', 3), Card('H', 4), Card('H', 5), Card('H', 6), Card('H', 7)]
    assert player.select_crib_cards(hand, dealer_is_self=True) == player.select_crib_cards(hand, dealer_is_self=True)


def test_crib_bias_sign_depends_on_dealer():
    discards = build_hand(["5c", "kd"])
    assert crib_bias(discards, True) == pytest.approx(15 * 0.12)
    assert crib_bias(discards, False) == pytest.approx(-15 * 0.08)
    assert crib_bias(discards, True, dealer_bias=1.0) == pytest.approx(15)


def test_expected_hand_score_averages_over_starters():
    kept = build_hand(["2c", "4d", "6h", "8s"])
    starters = remaining_deck(kept + build_hand(["kc", "qd"]))
    assert len(starters) == 46
    value = expected_hand_score(kept, starters)
    assert 0 < value < 29
    assert expected_hand_score(kept, []) == 0.0


def test_select_card_to_play_takes_points(player):
    hand = build_hand(["5h", "7d", "9c", "js"])
    assert player.select_card_to_play(hand, count=10, sequence=build_hand(["kh"])) == Card('H', 5)


def test_select_card_to_play_makes_31(player):
    hand = build_hand(["9c", "2h", "4d"])
    assert player.select_card_to_play(hand, count=27, sequence=build_hand(["kh", "qd", "7s"])) == Card('D', 4)


def test_select_card_to_play_prefers_highest_count_without_points(player):
    hand = build_hand(["2c", "9d", "ks"])
    assert player.select_card_to_play(hand, count=0, sequence=[]) == Card('S', 13)


def test_select_card_to_play_first_card_wins_full_tie(player):
    hand = build_hand(["ks", "qh"])
    assert player.select_card_to_play(hand, count=0, sequence=[]) == Card('S', 13)


def test_select_card_to_play_ignores_unplayable(player):
    hand = build_hand(["ks", "ah"])
    assert player.select_card_to_play(hand, count=25, sequence=build_hand(["kh", "qd", "5s"])) == Card('H', 1)
