"""
Minimax search agent for Othello.
"""
import random

from ..search.minimax import MinimaxSearch, SearchConfig
from ..search.move_pool import MoveRecordPool


class MinimaxAgent:
    """
    An agent that plays the best move found by a fixed-depth minimax search.

    Ties between equally good moves are broken at random with the agent's own
    seeded generator. The predicted continuation of the last search is kept
    for display.
    """

    def __init__(self, max_ply=4, seed=None, verbose=False):
        """
        Initialize the minimax agent.

        Args:
            max_ply (int): Search depth in plies (1-10)
            seed (int, optional): Random seed for tie-breaking reproducibility
            verbose (bool): Print the search trace
        """
        self.config = SearchConfig(max_ply=max_ply, seed=seed, verbose=verbose)
        # Tie-break stream, seeded once from the config and kept across moves
        self.rng = random.Random(self.config.seed)
        self.pool = MoveRecordPool()
        self.last_value = 0
        self.last_chain = []

    @classmethod
    def from_config(cls, config):
        return cls(max_ply=config.max_ply, seed=config.seed, verbose=config.verbose)

    def select_action(self, game):
        """
        Select the best move for the side to move.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) coordinates of selected move, or None if the
            player has to pass
        """
        search = MinimaxSearch.from_config(game.board, self.config,
                                           pool=self.pool, rng=self.rng)
        result = search.search(game.current_player, self.config.max_ply)
        self.last_value = result.value
        self.last_chain = result.moves
        search.release(result)
        return result.move
