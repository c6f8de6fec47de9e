from crib_game.cards import Deck
from crib_game.game import CribbageGame
from crib_game.players import ComputerPlayer, RandomPlayer


def test_seeded_sampling_determinism():
    d1 = Deck(seed=123)
    d1.shuffle()
    h1 = d1.deal(6)
    d2 = Deck(seed=123)
    d2.shuffle()
    h2 = d2.deal(6)
    assert h1 == h2


def test_seeded_game_determinism():
    def run():
        lines = []
        game = CribbageGame([ComputerPlayer("a"), RandomPlayer("b", seed=9)], seed=2024, delay=0,
                            output_fn=lines.append, color=False)
        return game.play_game(), lines

    assert run() == run()
