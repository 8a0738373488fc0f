"""Move advisor: asks an OpenAI-compatible chat endpoint for a move.

The advisor is an untrusted peer: its reply is parsed into coordinate
notation and submitted through :meth:`GameSession.submit_notation`, exactly
like a human move.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from chessmentor.advisor.prompts import AdvisorMode, build_instructions, describe_state
from chessmentor.core.errors import ChessError

if TYPE_CHECKING:
    from chessmentor.config import Settings
    from chessmentor.core.state import GameState, MoveResult
    from chessmentor.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

_MOVE_LINE = re.compile(r"^\s*Move:\s*(\S+)\s*$", re.IGNORECASE | re.MULTILINE)
_EXPLANATION = re.compile(
    r"^\s*Explanation:\s*(.*)", re.IGNORECASE | re.MULTILINE | re.DOTALL
)
_SUGGESTION = re.compile(r"^\s*Suggestion:\s*(\S+)\s*$", re.IGNORECASE)


class AdvisorError(ChessError):
    """The advisor could not be reached or replied with something unusable."""


@dataclass(frozen=True, slots=True)
class Advice:
    """A proposed move (unvalidated coordinate notation) and its rationale."""

    move: str
    explanation: str


def parse_advice(text: str, mode: AdvisorMode | str) -> Advice:
    """Extract the proposed move and explanation from an advisor reply.

    Player replies look like ``Move: e7e5`` then ``Explanation: ...``.
    Teacher replies are free text ending in a ``Suggestion: e7e5`` line.
    """
    mode = AdvisorMode(mode)
    text = text.strip()
    if mode is AdvisorMode.PLAYER:
        move = _MOVE_LINE.search(text)
        if move is None:
            raise AdvisorError(f"No 'Move:' line in advisor reply: {text!r}")
        explanation = _EXPLANATION.search(text)
        return Advice(move.group(1), explanation.group(1).strip() if explanation else "")

    lines = text.splitlines()
    if not lines:
        raise AdvisorError("Empty advisor reply")
    suggestion = _SUGGESTION.match(lines[-1])
    if suggestion is None:
        raise AdvisorError(f"No 'Suggestion:' line at end of advisor reply: {text!r}")
    return Advice(suggestion.group(1), "\n".join(lines[:-1]).strip())


class MoveAdvisor:
    """Conversation with the advisor for a single game.

    Args:
        client: HTTP client whose ``base_url`` points at the API root
            (e.g. ``https://api.openai.com/v1``). Owned by the caller.
        model: Chat model name.
        mode: Player or teacher behaviour.
        level: Skill level 1–5.
    """

    __slots__ = ("_client", "_model", "_mode", "_instructions", "_messages")

    def __init__(
        self,
        client: httpx.Client,
        model: str,
        mode: AdvisorMode | str = AdvisorMode.PLAYER,
        level: int = 1,
    ) -> None:
        self._client = client
        self._model = model
        self._mode = AdvisorMode(mode)
        self._instructions = build_instructions(self._mode, level)
        self._messages: list[dict[str, str]] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> MoveAdvisor:
        """Build an advisor with its own client from application settings."""
        if not settings.advisor_enabled:
            raise AdvisorError("Advisor base URL and model are not configured")
        headers: dict[str, str] = {}
        if settings.advisor_api_key:
            headers["Authorization"] = f"Bearer {settings.advisor_api_key}"
        client = httpx.Client(
            base_url=str(settings.advisor_base_url).rstrip("/"),
            headers=headers,
            timeout=settings.advisor_timeout,
        )
        assert settings.advisor_model is not None
        return cls(
            client, settings.advisor_model, settings.advisor_mode, settings.advisor_level
        )

    @property
    def mode(self) -> AdvisorMode:
        return self._mode

    @property
    def client(self) -> httpx.Client:
        return self._client

    def reset(self) -> None:
        """Forget the conversation (new game)."""
        self._messages.clear()

    def request_advice(self, state: GameState, moves: list[str] | None = None) -> Advice:
        """Send the position and return the parsed reply."""
        prompt = describe_state(state, moves or ())
        messages = [
            {"role": "system", "content": self._instructions},
            *self._messages,
            {"role": "user", "content": prompt},
        ]
        reply = self._chat(messages)
        self._messages.append({"role": "user", "content": prompt})
        self._messages.append({"role": "assistant", "content": reply})
        return parse_advice(reply, self._mode)

    def _chat(self, messages: list[dict[str, str]]) -> str:
        """POST to ``/chat/completions`` and return the assistant content."""
        payload: dict[str, Any] = {"model": self._model, "messages": messages}
        try:
            resp = self._client.post("/chat/completions", json=payload)
            resp.raise_for_status()
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except httpx.HTTPError as exc:
            _LOGGER.warning("Advisor request failed: %s", exc)
            raise AdvisorError(f"Advisor request failed: {exc}") from exc
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            _LOGGER.warning("Unexpected advisor payload: %s", exc)
            raise AdvisorError("Unexpected response from advisor") from exc
        if not isinstance(content, str):
            raise AdvisorError("Unexpected content type from advisor")
        return content


def play_advisor_move(
    session: GameSession, advisor: MoveAdvisor
) -> tuple[Advice, MoveResult]:
    """Ask *advisor* for a move and submit it like a human move.

    Raises :class:`AdvisorError` for transport/format failures and
    :class:`NotationError` for a malformed move; an illegal move comes back
    as a rejected :class:`MoveResult`.
    """
    moves = [str(record.move) for record in session.history]
    advice = advisor.request_advice(session.state, moves)
    result = session.submit_notation(advice.move, source="advisor")
    if not result.ok:
        _LOGGER.warning("Advisor proposed illegal move %s: %s", advice.move, result.rejection)
    return advice, result
