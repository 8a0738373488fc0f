"""Game management layer: sessions with history and saved games.

Quick start::

    from chessmentor.game import GameSession, SavedGameStore

    session = GameSession()
    session.submit_notation("e2e4", source="human")
    SavedGameStore("saves").save(session)
"""

from chessmentor.game.session import GameSession, MoveRecord, MoveSource
from chessmentor.game.storage import SavedGame, SavedGameStore

__all__ = [
    "GameSession",
    "MoveRecord",
    "MoveSource",
    "SavedGame",
    "SavedGameStore",
]
