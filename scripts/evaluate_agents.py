#!/usr/bin/env python3
"""
Simple evaluation script for testing agents against each other.
"""
import argparse
import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from othello.core.board import BLACK
from othello.core.game import Game
from othello.ai.agents.random_agent import RandomAgent
from othello.ai.agents.minimax_agent import MinimaxAgent


def play_game(agent1, agent2, show_progress=False):
    """
    Play a single game between two agents.

    Args:
        agent1: Agent playing X (moves first)
        agent2: Agent playing O
        show_progress: Whether to print move-by-move progress

    Returns:
        int: Winner (1 for agent1/X, -1 for agent2/O, 0 for draw)
    """
    game = Game()

    while game.game_state == 'ongoing':
        current_agent = agent1 if game.current_player.marker == BLACK else agent2

        move = current_agent.select_action(game)
        if move is None:
            if show_progress:
                print(f"{game.current_player.symbol} passes")
            game.pass_turn()
            continue

        if show_progress:
            print(f"Move {game.move_count + 1}: {game.current_player.symbol} plays {move}")

        effect = game.make_move(*move)
        if effect.gain == 0:
            print(f"ERROR: Invalid move {move} by {game.current_player.symbol}")
            break

    if show_progress:
        print(f"Game ended after {game.move_count} moves: {game.game_state}")
        print(f"X: {game.black.count}, O: {game.white.count}")

    winner = game.winner
    return winner.marker if winner is not None else 0


def evaluate_agents(agent1_name, agent1, agent2_name, agent2, num_games=20, swap_colors=True):
    """
    Evaluate two agents by playing multiple games.

    Returns:
        dict: Results summary
    """
    results = {'agent1_wins': 0, 'agent2_wins': 0, 'draws': 0}

    print(f"Evaluating {agent1_name} vs {agent2_name}")
    print(f"Playing {num_games} games{' with color swapping' if swap_colors else ''}...")
    print()

    start_time = time.time()

    for i in range(num_games):
        swapped = swap_colors and i % 2 == 1
        if swapped:
            winner = play_game(agent2, agent1)
        else:
            winner = play_game(agent1, agent2)

        if winner == 0:
            results['draws'] += 1
        elif (winner == BLACK) != swapped:
            results['agent1_wins'] += 1
        else:
            results['agent2_wins'] += 1

        if (i + 1) % max(1, num_games // 10) == 0:
            print(f"Progress: {(i + 1) / num_games * 100:.0f}% ({i + 1}/{num_games})")

    elapsed = time.time() - start_time
    total_games = num_games
    results.update({
        'total_games': total_games,
        'agent1_win_rate': results['agent1_wins'] / total_games * 100 if total_games else 0,
        'agent2_win_rate': results['agent2_wins'] / total_games * 100 if total_games else 0,
        'draw_rate': results['draws'] / total_games * 100 if total_games else 0,
        'elapsed_time': elapsed,
    })

    print(f"\n=== Results after {total_games} games ({elapsed:.1f}s) ===")
    print(f"{agent1_name}: {results['agent1_wins']} wins ({results['agent1_win_rate']:.1f}%)")
    print(f"{agent2_name}: {results['agent2_wins']} wins ({results['agent2_win_rate']:.1f}%)")
    print(f"Draws: {results['draws']} ({results['draw_rate']:.1f}%)")

    return results


def main():
    """Main evaluation function."""
    parser = argparse.ArgumentParser(description="Evaluate the minimax agent against a random baseline")
    parser.add_argument('--games', type=int, default=20, help='Number of games to play')
    parser.add_argument('--max-ply', type=int, default=3, help='Minimax search depth (1-10)')
    parser.add_argument('--seed', type=int, default=42, help='Random seed')
    parser.add_argument('--no-swap', action='store_true', help='Keep the minimax agent as X')
    args = parser.parse_args()

    minimax_agent = MinimaxAgent(max_ply=args.max_ply, seed=args.seed)
    random_agent = RandomAgent(seed=args.seed + 1)

    return evaluate_agents(
        f"MinimaxAgent(ply={args.max_ply})", minimax_agent,
        "RandomAgent", random_agent,
        num_games=args.games,
        swap_colors=not args.no_swap,
    )


if __name__ == "__main__":
    main()
