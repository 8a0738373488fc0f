"""Console entry point.

A minimal text front end over :class:`GameSession`: type moves such as
``e2e4``; other commands are ``moves``, ``undo``, ``restart``, ``save [id]``,
``load <id>``, ``list`` and ``quit``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from chessmentor.advisor.client import AdvisorError, MoveAdvisor, play_advisor_move
from chessmentor.bootstrap import configure_logging
from chessmentor.config import Settings
from chessmentor.core.enums import Color, GameStatus
from chessmentor.core.errors import ChessError, NotationError
from chessmentor.game.session import GameSession
from chessmentor.game.storage import SavedGameStore

_LOGGER = logging.getLogger(__name__)


def status_message(session: GameSession) -> str:
    """One-line status as shown above the board."""
    side = session.current_player.value.capitalize()
    other = session.current_player.opposite.value.capitalize()
    status = session.status
    if status is GameStatus.CHECK:
        return f"{side} is in check!"
    if status is GameStatus.CHECKMATE:
        return f"Checkmate! {other} wins!"
    if status is GameStatus.STALEMATE:
        return "Stalemate! The game is a draw."
    return f"Current Turn: {side}"


def _show(session: GameSession, out: TextIO) -> None:
    print(repr(session.state.board), file=out)
    print(status_message(session), file=out)


def _advisor_turn(
    session: GameSession, advisor: MoveAdvisor | None, color: Color | None, out: TextIO
) -> None:
    if advisor is None or session.is_over or session.current_player != color:
        return
    try:
        advice, result = play_advisor_move(session, advisor)
    except (AdvisorError, NotationError) as exc:
        print(f"Advisor failed: {exc}", file=out)
        return
    if not result.ok:
        print(f"Advisor proposed {advice.move}: {result.rejection}", file=out)
        return
    print(f"Advisor plays {advice.move}", file=out)
    if advice.explanation:
        print(advice.explanation, file=out)
    _show(session, out)


def run(
    lines: Iterable[str],
    out: TextIO,
    *,
    store: SavedGameStore | None = None,
    advisor: MoveAdvisor | None = None,
    advisor_color: Color | None = None,
) -> GameSession:
    """Play commands from *lines*, writing to *out*. Returns the final session."""
    session = GameSession()
    _show(session, out)
    _advisor_turn(session, advisor, advisor_color, out)

    for raw in lines:
        command, _, arg = raw.strip().partition(" ")
        arg = arg.strip()
        if not command:
            continue
        if command == "quit":
            break
        if command == "moves":
            for line in session.move_list():
                print(line, file=out)
            continue
        if command == "undo":
            if session.undo() is None:
                print("Nothing to undo.", file=out)
            elif advisor is not None and session.current_player == advisor_color:
                # Take back the human move that the advisor answered.
                session.undo()
            _show(session, out)
            _advisor_turn(session, advisor, advisor_color, out)
            continue
        if command == "restart":
            session.restart()
            if advisor is not None:
                advisor.reset()
            _show(session, out)
            _advisor_turn(session, advisor, advisor_color, out)
            continue
        if command in ("save", "load", "list"):
            if store is None:
                print("Saving is not configured.", file=out)
                continue
            if command == "save":
                try:
                    saved = store.save(session, arg or None)
                except ValueError as exc:
                    print(str(exc), file=out)
                    continue
                print(f"Saved as {saved.game_id}", file=out)
            elif command == "list":
                for game in store.list_games():
                    print(f"{game.game_id}  {game.saved_at:%Y-%m-%d %H:%M}", file=out)
            else:
                try:
                    session = store.load(arg)
                except (KeyError, ValueError, ChessError) as exc:
                    print(f"Cannot load {arg!r}: {exc}", file=out)
                    continue
                _LOGGER.info("Loaded game %s", arg)
                if advisor is not None:
                    advisor.reset()
                _show(session, out)
                _advisor_turn(session, advisor, advisor_color, out)
            continue

        if (
            advisor is not None
            and not session.is_over
            and session.current_player == advisor_color
        ):
            print("Waiting for the advisor's move.", file=out)
            _advisor_turn(session, advisor, advisor_color, out)
            continue

        try:
            result = session.submit_notation(command, source="human")
        except NotationError as exc:
            print(str(exc), file=out)
            continue
        if not result.ok:
            print(f"Illegal move: {result.rejection}", file=out)
            continue
        _show(session, out)
        _advisor_turn(session, advisor, advisor_color, out)

    return session


def main(argv: list[str] | None = None) -> int:
    """Launch the console game."""
    parser = argparse.ArgumentParser(prog="chessmentor", description=__doc__)
    parser.add_argument(
        "--advisor-plays",
        choices=[c.value for c in Color],
        help="let the configured advisor play this side",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)

    advisor: MoveAdvisor | None = None
    advisor_color: Color | None = None
    if args.advisor_plays:
        try:
            advisor = MoveAdvisor.from_settings(settings)
        except AdvisorError as exc:
            print(f"chessmentor: {exc}", file=sys.stderr)
            return 2
        advisor_color = Color(args.advisor_plays)

    store = SavedGameStore(settings.saves_dir)
    try:
        run(sys.stdin, sys.stdout, store=store, advisor=advisor, advisor_color=advisor_color)
    finally:
        if advisor is not None:
            advisor.client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
