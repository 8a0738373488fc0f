"""Chess rules engine with move history, saved games and an AI move advisor."""

__version__ = "0.1.0"
