"""File-backed saved-game store: one JSON document per game id."""

from __future__ import annotations

import json
import logging
import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from chessmentor.core.errors import SerializationError
from chessmentor.game.session import GameSession

_LOGGER = logging.getLogger(__name__)
_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


@dataclass(frozen=True, slots=True)
class SavedGame:
    """Listing entry for a stored game."""

    game_id: str
    saved_at: datetime


class SavedGameStore:
    """Stores sessions as ``<directory>/<game_id>.json``."""

    __slots__ = ("_directory",)

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, game_id: str) -> Path:
        if not _ID_RE.match(game_id):
            raise ValueError(f"Invalid game id: {game_id!r}")
        return self._directory / f"{game_id}.json"

    def save(self, session: GameSession, game_id: str | None = None) -> SavedGame:
        """Write *session*, overwriting any game stored under *game_id*."""
        if game_id is None:
            game_id = uuid.uuid4().hex
        path = self._path(game_id)
        saved = SavedGame(game_id, datetime.now(timezone.utc))
        document = {
            "id": saved.game_id,
            "date": saved.saved_at.isoformat(),
            "session": session.to_dict(),
        }
        self._directory.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document), encoding="utf-8")
        _LOGGER.info("Saved game %s to %s", game_id, path)
        return saved

    def load(self, game_id: str) -> GameSession:
        """Load the session stored under *game_id* (``KeyError`` if absent)."""
        document = self._read(self._path(game_id))
        if document is None:
            raise KeyError(game_id)
        try:
            return GameSession.from_dict(document["session"])
        except KeyError:
            raise SerializationError(f"Saved game {game_id!r} has no session") from None

    def delete(self, game_id: str) -> None:
        path = self._path(game_id)
        if not path.is_file():
            raise KeyError(game_id)
        path.unlink()
        _LOGGER.info("Deleted saved game %s", game_id)

    def list_games(self) -> list[SavedGame]:
        """Stored games, newest first."""
        if not self._directory.is_dir():
            return []
        games: dict[str, SavedGame] = {}
        for path in self._directory.glob("*.json"):
            try:
                document = self._read(path)
                if document is None:
                    continue
                saved_at = datetime.fromisoformat(document["date"])
                if saved_at.tzinfo is None:
                    saved_at = saved_at.replace(tzinfo=timezone.utc)
                entry = SavedGame(str(document["id"]), saved_at)
            except (SerializationError, KeyError, TypeError, ValueError):
                _LOGGER.warning("Skipping unreadable saved game: %s", path)
                continue
            known = games.get(entry.game_id)
            if known is None or entry.saved_at > known.saved_at:
                games[entry.game_id] = entry
        return sorted(games.values(), key=lambda g: g.saved_at, reverse=True)

    @staticmethod
    def _read(path: Path) -> dict | None:
        if not path.is_file():
            return None
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Corrupt saved game {path.name}: {exc}") from None
        if not isinstance(document, dict):
            raise SerializationError(f"Corrupt saved game {path.name}")
        return document
