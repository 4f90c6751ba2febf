from __future__ import annotations

"""Best-score persistence for the game session."""

from pathlib import Path
from typing import Protocol

from runcat.core.results import load_result_json, save_result_json


class ScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, score: int) -> None: ...


class JsonScoreStore:
    """Keeps the best score in a small versioned JSON file.

    A missing or unreadable file reads as 0; write errors propagate.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = load_result_json(self.path)
            return max(0, int(data.get("best_score", 0)))
        except (OSError, ValueError, TypeError) as exc:
            print(f"[best] Ignoring unreadable score file {self.path}: {exc}")
            return 0

    def save(self, score: int) -> None:
        save_result_json(self.path, {"best_score": int(score)})

    def reset(self) -> None:
        self.save(0)
