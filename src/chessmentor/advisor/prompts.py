"""Prompt text for the move advisor."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from chessmentor.core.notation import placement_to_string
from chessmentor.core.state import GameState


class AdvisorMode(str, Enum):
    """What the advisor is asked to do."""

    PLAYER = "player"  # play the opponent's moves
    TEACHER = "teacher"  # comment on the game and suggest a move

    def __str__(self) -> str:
        return self.value


_BASE = """\
You are an AI chess assistant designed to help users learn and improve their \
chess skills. Provide educational responses tailored to the user's skill level.

Skill levels: 1 (Beginner) to 5 (Master).

Board coordinates: moves are written as <from><to> squares, e.g. e2e4. \
Castling, en passant and pawn promotion are not available in this game.

Instructions:
1. Analyze the current game state provided in each interaction.
2. Adjust explanations based on the user's skill level.
3. Maintain a supportive and encouraging tone."""

_PLAYER = """\
You are the user's opponent. Make moves appropriate for skill level {level} \
and briefly explain the key strategic idea behind each one.

Reply in exactly this format:
Move: <from><to>
Explanation: <your explanation>"""

_TEACHER = """\
Give feedback on the user's last move, highlighting strengths and possible \
improvements, then suggest a move for the side to move.

Reply with your explanation, and put the suggestion alone on the last line:
Suggestion: <from><to>"""

_LEVELS: dict[int, str] = {
    1: "Focus on basic rules, piece movements and simple tactics. "
    "Use very simple language and avoid chess jargon.",
    2: "Introduce development, center control and pawn structure. "
    "Explain pins, forks and discovered attacks.",
    3: "Discuss pawn chains, piece coordination and strategic weaknesses. "
    "Use standard chess terminology.",
    4: "Provide in-depth analysis, weigh several candidate moves and discuss "
    "dynamic versus static advantages.",
    5: "Offer master-level insight into positional nuances and long-term plans.",
}


def build_instructions(mode: AdvisorMode | str, level: int) -> str:
    """System prompt for *mode* at skill *level* (1–5)."""
    mode = AdvisorMode(mode)
    if level not in _LEVELS:
        raise ValueError(f"Skill level must be 1-5, got {level!r}")
    template = _PLAYER if mode is AdvisorMode.PLAYER else _TEACHER
    return "\n\n".join(
        (_BASE, template.format(level=level), f"For skill level {level}: {_LEVELS[level]}")
    )


def describe_state(state: GameState, moves: Sequence[str] = ()) -> str:
    """Compact text description of a position for the advisor."""
    lines = [
        f"Board (FEN placement, rank 8 first): {placement_to_string(state.board)}",
        f"Side to move: {state.current_player}",
        f"Status: {state.status}",
    ]
    if moves:
        lines.append(f"Moves so far: {' '.join(moves)}")
    return "Current game state:\n" + "\n".join(lines)
