"""
Random baseline agent for Othello.
"""
import random

from ...core.effects import legal_moves


class RandomAgent:
    """
    Plays any capturing move, chosen uniformly.

    Used as the weak side in evaluation games. It never searches, so it is
    only as strong as the move it happens to draw.
    """

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def select_action(self, game):
        """
        Pick a legal move for the side to move.

        Returns:
            tuple or None: (row, col), or None when nothing captures and the
            player has to pass the turn
        """
        moves = legal_moves(game.board, game.current_player)
        if not moves:
            return None
        return self.rng.choice(moves)
