"""
Minimax best-move search for Othello.

The search scores each legal move by its immediate heuristic gain minus the
opponent's best reply, recursing to a fixed depth. Board changes are made in
place and undone after every candidate. Equally good moves are all kept and
one is picked at random, so an injectable random source controls the outcome.
"""
import random
from collections import namedtuple
from typing import Dict, Optional

from ...core.board import BOARD_AREA
from ...core.effects import SearchInvariantError, trial_move
from .move_pool import MoveRecordPool, chain_moves


# Lower than the sum of the heuristic weights of every cell, so no reachable
# net value can fall to it.
INIT_MAX_EFFECT = -9 * BOARD_AREA

MIN_PLY = 1
MAX_PLY = 10


class SearchConfig:
    """Configuration for the minimax search."""

    def __init__(self,
                 max_ply: int = 4,
                 seed: Optional[int] = None,
                 verbose: bool = False):
        if not MIN_PLY <= max_ply <= MAX_PLY:
            raise ValueError(f"max_ply must be in [{MIN_PLY}, {MAX_PLY}], got {max_ply}")
        self.max_ply = max_ply
        self.seed = seed
        self.verbose = verbose

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'SearchConfig':
        """Create config from dictionary."""
        return cls(**config_dict)


class SearchResult(namedtuple('SearchResult', ['value', 'chain'])):
    """
    Outcome of a best-move search.

    ``value`` is the net heuristic value of the chosen move and ``chain`` the
    head of the predicted continuation (None when the player must pass).
    """

    __slots__ = ()

    @property
    def move(self):
        if self.chain is None:
            return None
        return (self.chain.row, self.chain.col)

    @property
    def moves(self):
        return chain_moves(self.chain)


class MinimaxSearch:
    """
    Search context for one game.

    Holds the shared board, the move-record pool, the random source for
    tie-breaking and the verbosity flag, so that separate games never share
    mutable state.
    """

    def __init__(self,
                 board,
                 pool: Optional[MoveRecordPool] = None,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None,
                 verbose: bool = False):
        """
        Initialize the search context.

        Args:
            board: Board searched and temporarily mutated in place
            pool: Move-record pool (a new one by default)
            rng: Random source for tie-breaks; built from ``seed`` if omitted
            seed: Random seed used when ``rng`` is not given
            verbose: Print a trace of every placement, prune and choice
        """
        self.board = board
        self.pool = pool if pool is not None else MoveRecordPool()
        self.rng = rng if rng is not None else random.Random(seed)
        self.verbose = verbose

        self.nodes = 0
        self.prunes = 0

    @classmethod
    def from_config(cls, board, config: SearchConfig, pool=None, rng=None) -> 'MinimaxSearch':
        """Build a search from a config; an explicit ``rng`` takes precedence over ``config.seed``."""
        return cls(board, pool=pool, rng=rng, seed=config.seed, verbose=config.verbose)

    def search(self, player, max_ply: int) -> SearchResult:
        """Find the best move for ``player`` looking ``max_ply`` plies ahead."""
        if not MIN_PLY <= max_ply <= MAX_PLY:
            raise ValueError(f"max_ply must be in [{MIN_PLY}, {MAX_PLY}], got {max_ply}")
        return self.best_move(player, 1, max_ply, 0, 0)

    def best_move(self, player, ply, max_ply, prev_move_effect, best_sibling_effect) -> SearchResult:
        """
        Compute the best-move chain for ``player`` at depth ``ply``.

        Args:
            player: Player to move
            ply (int): Current depth, starting at 1
            max_ply (int): Search horizon
            prev_move_effect (int): Immediate gain of the parent's move
            best_sibling_effect (int): Best net value found so far by the parent

        Returns:
            SearchResult: Value and chain of the chosen move. Value 0 with an
            empty chain means the player has no legal move.
        """
        self.nodes += 1
        board = self.board
        pool = self.pool
        max_effect = INIT_MAX_EFFECT
        best_chains = []

        for row, col in board.get_empty_cells():
            pruned = False
            with trial_move(board, row, col, player) as effect:
                if effect.gain == 0:
                    continue

                if self.verbose:
                    print(f"Ply {ply}: {player.symbol} placed at ({row},{col})")

                value = effect.gain
                child = None
                if ply < max_ply and player.count + player.opponent.count < BOARD_AREA:
                    reply = self.best_move(player.opponent, ply + 1, max_ply,
                                           effect.gain, max_effect)
                    value -= reply.value
                    child = reply.chain
                    if value <= INIT_MAX_EFFECT:
                        pool.release(child)
                        raise SearchInvariantError(
                            f"Ply {ply}: value {value} for ({row},{col}) reached the "
                            f"sentinel {INIT_MAX_EFFECT}")

                if value > max_effect:
                    for chain in best_chains:
                        pool.release(chain)
                    best_chains = []

                    # The parent keeps its current best unless this reply
                    # leaves it a better net value.
                    if ply > 1 and prev_move_effect - value < best_sibling_effect:
                        if self.verbose:
                            print(f"prune: {prev_move_effect} - {value} < {best_sibling_effect}")
                        self.prunes += 1
                        pruned = True

                    max_effect = value

                if value == max_effect:
                    best_chains.append(pool.prepend(row, col, child))
                else:
                    pool.release(child)

            if pruned:
                break

        if not best_chains:
            if self.verbose:
                print(f"Ply {ply}: no best move chosen")
            return SearchResult(0, None)

        chosen = self.rng.randrange(len(best_chains))
        for index, chain in enumerate(best_chains):
            if index != chosen:
                pool.release(chain)
        result = SearchResult(max_effect, best_chains[chosen])

        if self.verbose:
            print(f"Chose move {chosen} of {len(best_chains)}")
            print(f"Ply {ply}: {player.symbol} @ {result.move} => {max_effect}")

        return result

    def release(self, result: SearchResult):
        """Give a result's chain back to the pool once the caller is done with it."""
        self.pool.release(result.chain)

    def get_stats(self) -> dict:
        """Get search statistics."""
        stats = {'nodes': self.nodes, 'prunes': self.prunes}
        stats.update({f'pool_{k}': v for k, v in self.pool.get_stats().items()})
        return stats
