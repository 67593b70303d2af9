"""
Reward/value functions for tic-tac-toe outcomes.
"""

from tictactoe_mcts.envs.tictactoe.board import GameEnd, Player


def get_score(perspective, game_end):
    """
    Score a finished game for one player.

    Args:
        perspective: Player whose result is wanted
        game_end: Terminal outcome (must not be GameEnd.NONE)

    Returns:
        float: 1.0 for a win, 0.0 for a loss, 0.5 for a draw
    """
    if game_end == GameEnd.NONE:
        raise ValueError("Cannot score a game that has not ended")
    if game_end == GameEnd.DRAW:
        return 0.5
    winner = Player.O if game_end == GameEnd.O_WIN else Player.X
    return 1.0 if winner == perspective else 0.0
