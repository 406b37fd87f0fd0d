"""
Draughts CLI - Command-line interface for the engine.

Usage:
    draughts show                 Print the starting board
    draughts play                 Two players at one terminal

Board size comes from --width/--height/--rows or DRAUGHTS_* variables.
"""

import argparse
import sys

from pydantic import ValidationError

from .config import GameConfig, configure_logging, load_config


SYMBOLS = {
    ("light", False): "o",
    ("light", True): "O",
    ("dark", False): "x",
    ("dark", True): "X",
}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Draughts - Checkers Rules Engine",
        prog="draughts",
    )
    parser.add_argument("--width", type=int, help="Board columns")
    parser.add_argument("--height", type=int, help="Board rows")
    parser.add_argument("--rows", type=int, help="Starting rows per color")
    parser.add_argument("--log-level", help="Logging level (default from DRAUGHTS_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("show", help="Print the starting board")
    subparsers.add_parser("play", help="Play a two-player game in the terminal")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = _build_config(args)
    except ValidationError as e:
        print(f"Error: invalid board settings\n{e}")
        sys.exit(1)

    if args.command == "show":
        cmd_show(config)
    elif args.command == "play":
        cmd_play(config)
    else:
        parser.print_help()
        sys.exit(1)


def _build_config(args) -> GameConfig:
    config = load_config()
    overrides = {
        name: value for name, value in (
            ("width", args.width),
            ("height", args.height),
            ("rows_per_side", args.rows),
        ) if value is not None
    }
    if overrides:
        config = GameConfig(**{**config.model_dump(), **overrides})
    return config


def render_board(board, selected=None, hints=()) -> str:
    """Text picture of the board; '*' marks move hints, [] the selection."""
    hint_cells = set(hints)
    header = "    " + "".join(f"{x:^3}" for x in range(board.width))
    lines = [header]
    for y in range(board.height):
        row = []
        for x in range(board.width):
            piece = board.piece_at(x, y)
            if piece is not None:
                mark = SYMBOLS[(piece.color.value, piece.is_king)]
            elif (x, y) in hint_cells:
                mark = "*"
            else:
                mark = "." if (x + y) % 2 == 0 else " "
            if selected == (x, y):
                row.append(f"[{mark}]")
            else:
                row.append(f" {mark} ")
        lines.append(f"{y:>3} " + "".join(row))
    return "\n".join(lines)


def cmd_show(config: GameConfig):
    """Print the starting board."""
    from .engine_core import Board

    board = Board(config.width, config.height, config.rows_per_side)
    print(render_board(board))


def cmd_play(config: GameConfig):
    """Two-player game reading 'x y' clicks from stdin."""
    from .session import GameSession, ClickOutcome

    session = GameSession(config=config)
    session.on_capture(lambda: print("Capture!"))
    session.on_game_over(lambda winner: print(f"{winner.value.upper()} WINS!"))

    print("Enter 'x y' to click a cell, 'reset' to restart, 'quit' to exit.")
    while True:
        selected = session.selected_piece.position if session.selected_piece else None
        print(render_board(session.board, selected, session.move_hints()))
        if session.is_over:
            print("Game over. Type 'reset' to play again.")
        else:
            print(f"{session.current_color.value} to move")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line in {"quit", "exit", "q"}:
            break
        if line == "reset":
            session.reset_game()
            continue

        parts = line.replace(",", " ").split()
        if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
            print("Expected two integers: x y")
            continue

        result = session.handle_cell_click(int(parts[0]), int(parts[1]))
        if result.outcome == ClickOutcome.REJECTED:
            print("Move not allowed" + (" (a capture is mandatory)" if session.must_capture() else ""))


if __name__ == "__main__":
    main()
