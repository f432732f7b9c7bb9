"""Append-only attempt log and streak counter for one site key."""

import logging

from .interfaces import Storage
from .models import AttemptRecord

logger = logging.getLogger(__name__)


class ScoreStore:
    """Owns the attempt log and streak for a single site key.

    Every mutating call writes the full state through ``storage`` before it
    returns. Persisted layout::

        {"attempts": [<AttemptRecord.to_dict()>, ...], "streak": <int>}
    """

    def __init__(self, storage: Storage, site_key: str):
        self.storage = storage
        self.site_key = site_key
        self._attempts = []
        self._streak = 0
        self._load()

    def _load(self) -> None:
        state = self.storage.load_state(self.site_key)
        if state is None:
            return
        try:
            attempts, streak = self._parse_state(state)
        except ValueError as e:
            logger.warning(f"Ignoring malformed score state for {self.site_key}: {e}")
            return
        self._attempts = attempts
        self._streak = streak

    @staticmethod
    def _parse_state(state) -> tuple[list[AttemptRecord], int]:
        if not isinstance(state, dict):
            raise ValueError(f"state must be a dict, got {type(state).__name__}")
        raw_attempts = state.get('attempts', [])
        if not isinstance(raw_attempts, list):
            raise ValueError("attempts must be a list")
        attempts = [AttemptRecord.from_dict(r) for r in raw_attempts]
        streak = state.get('streak', 0)
        if isinstance(streak, bool) or not isinstance(streak, int) or streak < 0:
            raise ValueError(f"streak must be a non-negative integer, got {streak!r}")
        return attempts, streak

    def _save(self) -> None:
        self.storage.save_state(self.to_dict(), self.site_key)

    def to_dict(self) -> dict:
        return {
            'attempts': [r.to_dict() for r in self._attempts],
            'streak': self._streak
        }

    def append(self, record: AttemptRecord) -> None:
        self._attempts.append(record)
        self._save()

    def clear(self) -> None:
        """Empty the log and reset the streak. Irreversible."""
        self._attempts = []
        self._streak = 0
        self._save()

    def all(self) -> list[AttemptRecord]:
        """All attempts, oldest first."""
        return list(self._attempts)

    def get_streak(self) -> int:
        return self._streak

    def set_streak(self, streak: int) -> None:
        if streak < 0:
            raise ValueError(f"streak must be non-negative, got {streak}")
        self._streak = streak
        self._save()

    def __len__(self) -> int:
        return len(self._attempts)
