"""
Game implementation for Othello.
"""
from .board import Board, COMPUTER, make_players
from .effects import NO_EFFECT, compute_effect
from ..ai.search.minimax import MinimaxSearch, SearchConfig


class Game:
    """
    Manages an Othello game session.

    Handles turn order, passes, deadlock and end-of-game detection, and
    validates human moves before they reach the board.
    """

    def __init__(self, black_type=COMPUTER, white_type=COMPUTER, seed=None, verbose=False):
        """
        Initialize a new game from the standard opening.

        Args:
            black_type (str): 'human' or 'computer' for X
            white_type (str): 'human' or 'computer' for O
            seed (int, optional): Random seed for search tie-breaks
            verbose (bool): Trace searches run through this game
        """
        self.board = Board()
        self.black, self.white = make_players(black_type, white_type)
        self.board.setup_start(self.black, self.white)
        self.current_player = self.black  # X moves first
        self.search = MinimaxSearch.from_config(
            self.board, SearchConfig(seed=seed, verbose=verbose))
        self.move_count = 0
        self._passed = False
        self._deadlock = False

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'finished', 'deadlock'
        """
        if self._deadlock:
            return 'deadlock'
        if self.black.count == 0 or self.white.count == 0 or self.board.is_full():
            return 'finished'
        return 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            Player or None: Side with more discs, None while ongoing or on a tie
        """
        if self.game_state == 'ongoing' or self.black.count == self.white.count:
            return None
        return self.black if self.black.count > self.white.count else self.white

    def can_move(self, player=None):
        """Check whether ``player`` (default: side to move) has any legal move."""
        player = player or self.current_player
        result = self.search.search(player, 1)
        self.search.release(result)
        return result.value > 0

    def make_move(self, row, col):
        """
        Make a move for the current player.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)

        Returns:
            Effect: Realized gain and flipped cells; a gain of 0 means the
            move was rejected and nothing changed
        """
        if self.game_state != 'ongoing':
            return NO_EFFECT
        if not self.board.in_bounds(row, col) or not self.board.is_empty(row, col):
            return NO_EFFECT

        effect = compute_effect(self.board, row, col, self.current_player)
        if effect.gain == 0:
            return effect

        self.move_count += 1
        self._passed = False
        self.current_player = self.current_player.opponent
        return effect

    def pass_turn(self):
        """
        Pass for the current player when they cannot move.

        Two passes in a row end the game in deadlock.

        Returns:
            bool: True if the pass was accepted, False if a legal move exists
        """
        if self.game_state != 'ongoing' or self.can_move():
            return False
        if self._passed:
            self._deadlock = True
        self._passed = True
        self.current_player = self.current_player.opponent
        return True

    def suggest_move(self, max_ply):
        """
        Suggest a move for the current player without playing it.

        Returns:
            tuple or None: ((row, col), effect) or None if no legal move
        """
        result = self.search.search(self.current_player, max_ply)
        self.search.release(result)
        if result.move is None:
            return None
        return result.move, result.value
