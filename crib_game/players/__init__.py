from crib_game.players.base_player import Player
from crib_game.players.computer_player import ComputerPlayer
from crib_game.players.human_player import HumanPlayer
from crib_game.players.random_player import RandomPlayer

__all__ = ["Player", "ComputerPlayer", "HumanPlayer", "RandomPlayer"]
