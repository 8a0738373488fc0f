"""Advisor boundary: an external, untrusted move proposer."""

from chessmentor.advisor.client import (
    Advice,
    AdvisorError,
    MoveAdvisor,
    parse_advice,
    play_advisor_move,
)
from chessmentor.advisor.prompts import AdvisorMode, build_instructions, describe_state

__all__ = [
    "Advice",
    "AdvisorError",
    "AdvisorMode",
    "MoveAdvisor",
    "build_instructions",
    "describe_state",
    "parse_advice",
    "play_advisor_move",
]
