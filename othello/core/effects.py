"""
Move effects for Othello: legality, heuristic gain, disc flipping and undo.
"""
from collections import namedtuple
from contextlib import contextmanager
from typing import List, Tuple

from .board import BOARD_SIZE, EMPTY, HEURISTIC_WEIGHTS, MAX_CHANGES


DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

# gain: heuristic value of the move, 0 when illegal
# flips: cells captured from the opponent, in discovery order
Effect = namedtuple('Effect', ['gain', 'flips'])

NO_EFFECT = Effect(0, [])


class SearchInvariantError(RuntimeError):
    """Raised when an internal move-search invariant does not hold."""


def _capture_line(state, row, col, marker, dr, dc) -> List[Tuple[int, int]]:
    """Opponent cells captured along one direction, or [] if the line is open."""
    line = []
    r, c = row + dr, col + dc
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
        cell = state[r, c]
        if cell == EMPTY:
            return []
        if cell == marker:
            return line
        line.append((r, c))
        r, c = r + dr, c + dc
    return []


def compute_effect(board, row, col, player) -> Effect:
    """
    Apply a move for ``player`` at (row, col) if it captures anything.

    The cell must be on the board and empty. When no opponent disc is
    captured the move is illegal: the board is left untouched and a zero
    effect is returned. Otherwise the disc is placed, every captured disc is
    flipped and both players' counts are updated.

    Args:
        board: Board to mutate
        row (int): Row of the target cell
        col (int): Column of the target cell
        player: Player making the move

    Returns:
        Effect: (gain, flips) where flips lists the captured cells
    """
    state = board.state
    flips = []
    for dr, dc in DIRECTIONS:
        flips.extend(_capture_line(state, row, col, player.marker, dr, dc))

    if not flips:
        return NO_EFFECT

    if len(flips) > MAX_CHANGES:
        raise SearchInvariantError(
            f"Move ({row},{col}) flips {len(flips)} cells, more than {MAX_CHANGES}")

    gain = int(HEURISTIC_WEIGHTS[row, col])
    for r, c in flips:
        gain += int(HEURISTIC_WEIGHTS[r, c])
        state[r, c] = player.marker
    state[row, col] = player.marker

    player.count += len(flips) + 1
    player.opponent.count -= len(flips)
    return Effect(gain, flips)


def undo_effect(board, row, col, player, effect):
    """Reverse a move previously applied by compute_effect."""
    if effect.gain == 0:
        return
    state = board.state
    state[row, col] = EMPTY
    for r, c in effect.flips:
        state[r, c] = player.opponent.marker
    player.count -= len(effect.flips) + 1
    player.opponent.count += len(effect.flips)


@contextmanager
def trial_move(board, row, col, player):
    """
    Tentatively apply a move and always undo it on exit.

    Yields the Effect; a zero gain means nothing was changed.
    """
    effect = compute_effect(board, row, col, player)
    try:
        yield effect
    finally:
        undo_effect(board, row, col, player, effect)


def is_legal_move(board, row, col, player):
    """Check legality without changing the board."""
    if not board.in_bounds(row, col) or not board.is_empty(row, col):
        return False
    for dr, dc in DIRECTIONS:
        if _capture_line(board.state, row, col, player.marker, dr, dc):
            return True
    return False


def legal_moves(board, player):
    """
    Get every legal move for ``player`` in row-major order.

    Returns:
        list: List of (row, col) tuples
    """
    return [(row, col) for row, col in board.get_empty_cells()
            if is_legal_move(board, row, col, player)]
