#!/usr/bin/env python3
"""
CLI interface for playing Othello against humans or the minimax engine.
"""
import sys
import os

# Add the parent directory to Python path so we can import othello
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from othello.core.board import BOARD_SIZE, COMPUTER, HUMAN
from othello.core.game import Game
from othello.ai.agents.minimax_agent import MinimaxAgent


def ask(prompt):
    """Read a non-empty line, exiting cleanly on Ctrl-C / Ctrl-D."""
    while True:
        try:
            text = input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting...")
            sys.exit(0)
        if text:
            return text


def ask_yes_no(prompt):
    return ask(prompt).lower().startswith('y')


def ask_skill_level():
    """Prompt until a search depth in 1-10 is entered."""
    while True:
        text = ask("Enter skill level (1-10): ")
        if text.isdigit() and 1 <= int(text) <= 10:
            return int(text)


def ask_player_type(symbol):
    while True:
        text = ask(f"{symbol}: (h)uman or (c)omputer: ").lower()
        if text[0] in ('h', 'c'):
            return HUMAN if text[0] == 'h' else COMPUTER


def parse_move(move_input):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "2,4" or "2 4"

    Returns:
        tuple: (row, col) or None if invalid
    """
    parts = move_input.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        return (row, col)
    return None


def display_board(game):
    print()
    print(game.board.render())
    print()


def display_counts(game):
    print(f"X: {game.black.count};  O: {game.white.count}")


def human_turn(game, max_ply):
    """
    Read moves until a legal one is played.

    Returns:
        Effect or None: Effect of the move, None if the player quit
    """
    player = game.current_player
    display_counts(game)
    while True:
        text = ask(f"{player.symbol}: ")
        command = text[0].upper()

        if command == 'Q':
            return None
        if command == 'H':
            suggestion = game.suggest_move(max_ply)
            if suggestion is not None:
                move, effect = suggestion
                print(f"Suggest {move} with an effect of {effect}\n")
            else:
                print("No move to suggest\n")
            continue

        move = parse_move(text)
        if move is None:
            print("Invalid coordinates; re-enter:")
            continue
        if not game.board.is_empty(*move):
            print("That position already occupied; try again:")
            continue

        effect = game.make_move(*move)
        if effect.gain == 0:
            print("Zero-yield move; try again:")
            continue
        return effect


def computer_turn(game, agent):
    """Let the engine pick and play a move, printing its predicted chain."""
    player = game.current_player
    print("Computer is moving...")
    move = agent.select_action(game)
    print(f"Computer's move: {player.symbol} placed at {move[0]}, {move[1]}")
    effect = game.make_move(*move)

    print("Optimal chain:")
    mover = player
    for row, col in agent.last_chain:
        print(f"{mover.symbol}: ({row},{col})")
        mover = mover.opponent
    return effect


def main():
    """Main game loop."""
    print("=" * 40)
    print("            OTHELLO")
    print("=" * 40)

    verbose = ask_yes_no("verbose? ")
    max_ply = ask_skill_level()
    black_type = ask_player_type('X')
    white_type = ask_player_type('O')
    pause_after = not ask("Pause after computer move? : ").lower().startswith('n')

    game = Game(black_type=black_type, white_type=white_type, verbose=verbose)
    agent = MinimaxAgent(max_ply=max_ply, verbose=verbose)

    display_board(game)
    print(f"Enter: row, column (comma-separated) (both in range 0-{BOARD_SIZE - 1})")

    while game.game_state == 'ongoing':
        player = game.current_player
        print("Checking viability...")

        if game.pass_turn():
            print(f"{player.symbol} cannot move")
            if game.game_state == 'deadlock':
                print("Deadlock: game terminated")
            continue

        if player.player_type == HUMAN:
            effect = human_turn(game, max_ply)
            if effect is None:
                break
            value = effect.gain
        else:
            computer_turn(game, agent)
            value = agent.last_value

        print(f"\nEffect of move == {value}")

        if pause_after and player.player_type == COMPUTER:
            try:
                input("\nPress RETURN to continue...\n")
            except (KeyboardInterrupt, EOFError):
                break

        display_counts(game)
        display_board(game)

    winner = game.winner
    if winner is not None:
        print(f"{winner.symbol} wins {winner.count} to {winner.opponent.count}")
    elif game.game_state != 'ongoing':
        print("It's a draw!")

    released = game.search.pool.drain() + agent.pool.drain()
    print(f"{released} objects were in application heap")


if __name__ == "__main__":
    main()
