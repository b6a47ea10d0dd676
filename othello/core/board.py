"""
Board implementation for Othello.
"""
import numpy as np


BOARD_SIZE = 8
BOARD_AREA = BOARD_SIZE * BOARD_SIZE

# Upper bound on cells flipped by a single move
MAX_CHANGES = 4 * (BOARD_SIZE - 3)

EMPTY = 0
BLACK = 1
WHITE = -1

SYMBOLS = {EMPTY: '.', BLACK: 'X', WHITE: 'O'}

HUMAN = 'human'
COMPUTER = 'computer'


def idx_weight(index):
    """Weight of a row or column index: edges count BOARD_SIZE, interior 1."""
    return BOARD_SIZE if index in (0, BOARD_SIZE - 1) else 1


def cell_weight(row, col):
    """
    Heuristic weight of a cell.

    Corners score BOARD_SIZE**2, other edge cells BOARD_SIZE, interior cells 1.
    """
    return idx_weight(row) * idx_weight(col)


_axis = np.array([idx_weight(i) for i in range(BOARD_SIZE)], dtype=np.int64)
HEURISTIC_WEIGHTS = np.outer(_axis, _axis)


class Player:
    """
    One side of an Othello game.

    Holds the marker written to the board, the live disc count and a reference
    to the opposing player. ``player_type`` is only read by the turn loop.
    """

    def __init__(self, marker, player_type=COMPUTER):
        if marker not in (BLACK, WHITE):
            raise ValueError(f"Invalid marker: {marker}")
        if player_type not in (HUMAN, COMPUTER):
            raise ValueError(f"Invalid player type: {player_type}")
        self.marker = marker
        self.player_type = player_type
        self.count = 0
        self.opponent = None

    @property
    def symbol(self):
        return SYMBOLS[self.marker]

    def __repr__(self):
        return f"Player({self.symbol}, count={self.count}, type={self.player_type})"


def make_players(black_type=COMPUTER, white_type=COMPUTER):
    """
    Create the two linked players.

    Returns:
        tuple: (black, white) with each referencing the other as opponent
    """
    black = Player(BLACK, black_type)
    white = Player(WHITE, white_type)
    black.opponent = white
    white.opponent = black
    return black, white


class Board:
    """
    Represents an 8x8 Othello board.

    Board state representation:
    - 0: empty cell
    - 1: black disc (X)
    - -1: white disc (O)
    """

    def __init__(self):
        """Initialize an empty 8x8 board."""
        self.size = BOARD_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    def setup_start(self, black, white):
        """
        Place the four opening discs and reset both players' counts.

        X holds (3,3) and (4,4); O holds (3,4) and (4,3).
        """
        self.state.fill(EMPTY)
        mid = self.size // 2
        self.state[mid - 1, mid - 1] = black.marker
        self.state[mid, mid] = black.marker
        self.state[mid - 1, mid] = white.marker
        self.state[mid, mid - 1] = white.marker
        black.count = 2
        white.count = 2

    def sync_counts(self, *players):
        """Set each player's count from the discs actually on the board."""
        for player in players:
            player.count = self.count(player.marker)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.state[row, col] == EMPTY

    def occupied(self):
        """Number of non-empty cells."""
        return int(np.count_nonzero(self.state))

    def count(self, marker):
        return int(np.count_nonzero(self.state == marker))

    def is_full(self):
        return self.occupied() == BOARD_AREA

    def get_empty_cells(self):
        """
        Get all empty positions in row-major order.

        Returns:
            list: List of (row, col) tuples
        """
        empty = []
        for row in range(self.size):
            for col in range(self.size):
                if self.state[row, col] == EMPTY:
                    empty.append((row, col))
        return empty

    def copy(self):
        board = Board()
        board.state = self.state.copy()
        return board

    def render(self):
        """ASCII rendering with column digits across the top."""
        lines = ["    " + "".join(str(c) for c in range(self.size))]
        lines.append("   +" + "-" * self.size + "+")
        for row in range(self.size):
            cells = "".join(SYMBOLS[int(v)] for v in self.state[row])
            lines.append(f"{row:2d} |{cells}|")
        lines.append("   +" + "-" * self.size + "+")
        return "\n".join(lines)

    @classmethod
    def from_rows(cls, rows):
        """
        Build a board from strings of 'X', 'O' and '.' characters.

        Args:
            rows (list): BOARD_SIZE strings of BOARD_SIZE characters each

        Returns:
            Board: New board with the given layout
        """
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells")
        lookup = {v: k for k, v in SYMBOLS.items()}
        board = cls()
        for row, text in enumerate(rows):
            for col, ch in enumerate(text):
                if ch not in lookup:
                    raise ValueError(f"Invalid cell character: {ch!r}")
                board.state[row, col] = lookup[ch]
        return board
