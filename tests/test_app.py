"""Tests for the console front end."""

import io
import logging

import httpx

from chessmentor.advisor.client import MoveAdvisor
from chessmentor.app import main, run, status_message
from chessmentor.bootstrap import configure_logging
from chessmentor.core.enums import Color, GameStatus
from chessmentor.game.session import GameSession
from chessmentor.game.storage import SavedGameStore


def _run(commands: list[str], **kwargs) -> tuple[GameSession, str]:
    out = io.StringIO()
    session = run(commands, out, **kwargs)
    return session, out.getvalue()


def _advisor(*replies: str) -> MoveAdvisor:
    queue = list(replies)

    def handler(request):
        content = queue.pop(0)
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    client = httpx.Client(base_url="http://advisor.test/v1", transport=httpx.MockTransport(handler))
    return MoveAdvisor(client, "test-model")


class TestStatusMessage:
    def test_turn(self):
        assert status_message(GameSession()) == "Current Turn: White"

    def test_check(self):
        session = GameSession()
        for text in ("e2e4", "f7f5", "d1h5"):
            session.submit_notation(text, source="human")
        assert session.status == GameStatus.CHECK
        assert status_message(session) == "Black is in check!"


class TestRun:
    def test_initial_board_shown(self):
        _, output = _run([])
        assert "8 r n b q k b n r" in output
        assert "Current Turn: White" in output

    def test_move_switches_turn(self):
        session, output = _run(["e2e4"])
        assert session.current_player == Color.BLACK
        assert "Current Turn: Black" in output

    def test_fools_mate(self):
        session, output = _run(["f2f3", "e7e5", "g2g4", "d8h4", "a2a3"])
        assert "Checkmate! Black wins!" in output
        assert "Illegal move: game-over" in output
        assert session.is_over

    def test_illegal_move(self):
        session, output = _run(["e2e5"])
        assert "Illegal move: illegal-geometry" in output
        assert session.ply_count == 0

    def test_malformed_move(self):
        session, output = _run(["hello"])
        assert session.ply_count == 0
        assert "Illegal move" not in output

    def test_quit_stops_reading(self):
        session, _ = _run(["e2e4", "quit", "e7e5"])
        assert session.ply_count == 1

    def test_moves_undo_restart(self):
        session, output = _run(["e2e4", "g8f6", "moves", "undo", "undo", "undo"])
        assert "1. ♟ e2 to e4" in output
        assert "2. ♞ g8 to f6" in output
        assert "Nothing to undo." in output
        assert session.ply_count == 0
        session, _ = _run(["e2e4", "restart"])
        assert session.ply_count == 0

    def test_save_without_store(self):
        _, output = _run(["save"])
        assert "Saving is not configured." in output


class TestRunWithStore:
    def test_save_list_load(self, tmp_path):
        store = SavedGameStore(tmp_path)
        _, output = _run(["e2e4", "save mygame", "list"], store=store)
        assert "Saved as mygame" in output
        assert "mygame  " in output

        session, output = _run(["load mygame"], store=store)
        assert session.ply_count == 1
        assert session.current_player == Color.BLACK
        assert output.rstrip().endswith("Current Turn: Black")

    def test_load_missing(self, tmp_path):
        session, output = _run(["load ghost"], store=SavedGameStore(tmp_path))
        assert "Cannot load 'ghost'" in output
        assert session.ply_count == 0

    def test_save_invalid_id(self, tmp_path):
        _, output = _run(["save ../x"], store=SavedGameStore(tmp_path))
        assert "Invalid game id" in output


class TestRunWithAdvisor:
    def test_advisor_replies_as_black(self):
        advisor = _advisor("Move: e7e5\nExplanation: Symmetry.")
        session, output = _run(["e2e4"], advisor=advisor, advisor_color=Color.BLACK)
        assert "Advisor plays e7e5" in output
        assert "Symmetry." in output
        assert session.ply_count == 2
        assert session.history[-1].source == "advisor"

    def test_advisor_opens_as_white(self):
        advisor = _advisor("Move: d2d4")
        session, _ = _run([], advisor=advisor, advisor_color=Color.WHITE)
        assert session.ply_count == 1

    def test_advisor_illegal_move_reported(self):
        advisor = _advisor("Move: e8e6")
        session, output = _run(["e2e4"], advisor=advisor, advisor_color=Color.BLACK)
        assert "Advisor proposed e8e6: illegal-geometry" in output
        assert session.ply_count == 1

    def test_undo_takes_back_the_advisor_reply(self):
        advisor = _advisor("Move: e7e5", "Move: c7c5")
        session, _ = _run(
            ["e2e4", "undo", "d2d4"], advisor=advisor, advisor_color=Color.BLACK
        )
        assert [str(r.move) for r in session.history] == ["d2d4", "c7c5"]
        assert session.history[-1].source == "advisor"

    def test_human_cannot_move_for_the_advisor(self):
        advisor = _advisor("Move: e8e6", "Move: e7e5")
        session, output = _run(
            ["e2e4", "a7a6"], advisor=advisor, advisor_color=Color.BLACK
        )
        assert "Waiting for the advisor's move." in output
        assert [str(r.move) for r in session.history] == ["e2e4", "e7e5"]
        black = [r for r in session.history if r.piece.color == Color.BLACK]
        assert all(r.source == "advisor" for r in black)

    def test_load_hands_turn_to_advisor(self, tmp_path):
        store = SavedGameStore(tmp_path)
        _run(["e2e4", "save game"], store=store)
        advisor = _advisor("Move: e7e5")
        session, output = _run(
            ["load game"], store=store, advisor=advisor, advisor_color=Color.BLACK
        )
        assert "Advisor plays e7e5" in output
        assert session.ply_count == 2
        assert session.history[-1].source == "advisor"

    def test_advisor_failure_reported(self):
        client = httpx.Client(
            base_url="http://advisor.test/v1",
            transport=httpx.MockTransport(lambda request: httpx.Response(502)),
        )
        advisor = MoveAdvisor(client, "m")
        session, output = _run(["e2e4"], advisor=advisor, advisor_color=Color.BLACK)
        assert "Advisor failed:" in output
        assert session.current_player == Color.BLACK


class TestMain:
    def test_advisor_requested_but_not_configured(self, monkeypatch, capsys):
        monkeypatch.delenv("CHESSMENTOR_ADVISOR_BASE_URL", raising=False)
        monkeypatch.delenv("CHESSMENTOR_ADVISOR_MODEL", raising=False)
        monkeypatch.chdir("/")
        assert main(["--advisor-plays", "black"]) == 2
        assert "not configured" in capsys.readouterr().err

    def test_plays_from_stdin(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.stdin", io.StringIO("e2e4\nquit\n"))
        assert main([]) == 0
        assert "Current Turn: Black" in capsys.readouterr().out


class TestConfigureLogging:
    def test_level_name(self):
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")

    def test_unknown_level_falls_back(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.WARNING
