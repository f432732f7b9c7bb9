"""Score tracking facade used by the quiz surfaces."""

import logging
import time
import uuid

from .config import (
    ADDRESS_TYPES, DEFAULT_LEVELS,
    STREAK_EMOJI, STREAK_MAX_EMOJI, STREAK_EMOJI_CAP
)
from .interfaces import Storage
from .leveling import level_for
from .models import AttemptRecord, Level, OverallStats, validate_score
from .store import ScoreStore

logger = logging.getLogger(__name__)


def default_levels() -> list[Level]:
    return [Level.from_dict(data) for data in DEFAULT_LEVELS]


class ScoreManager:
    """Records attempts and streaks for one site and answers aggregate queries.

    Aggregates are recomputed from the full attempt log on every call.
    """

    def __init__(self, storage: Storage, site_key: str, levels: list[Level] = None):
        self.site_key = site_key
        self.store = ScoreStore(storage, site_key)
        self.levels = levels or default_levels()

    def record_score(self, question_id: str, score: float, max_score: float,
                     type: str, address: str = None) -> AttemptRecord:
        """Append one attempt. Raises ValueError without touching the log if input is invalid.

        The streak is left alone; callers follow up with ``update_streak``.
        """
        validate_score(score, max_score)
        if type not in ADDRESS_TYPES:
            raise ValueError(f"Unknown address type: {type!r}")
        record = AttemptRecord(
            f"{question_id}-{uuid.uuid4().hex[:8]}",
            int(time.time() * 1000),
            score,
            max_score,
            type,
            address
        )
        self.store.append(record)
        return record

    def update_streak(self, was_correct: bool) -> int:
        streak = self.store.get_streak() + 1 if was_correct else 0
        self.store.set_streak(streak)
        return streak

    def get_streak(self) -> int:
        return self.store.get_streak()

    @staticmethod
    def format_streak_emojis(streak: int) -> str:
        """One flame per correct answer, capped, with a star once past the cap."""
        if streak <= 0:
            return ''
        if streak <= STREAK_EMOJI_CAP:
            return STREAK_EMOJI * streak
        return STREAK_EMOJI * STREAK_EMOJI_CAP + STREAK_MAX_EMOJI

    def get_overall_stats(self) -> OverallStats:
        attempts = self.store.all()
        total_attempts = len(attempts)
        total_correct = sum(1 for r in attempts if r.is_correct)
        total_points = sum(r.score for r in attempts)
        accuracy = total_correct / total_attempts * 100 if total_attempts else 0

        status = level_for(total_points, accuracy, self.levels)
        return OverallStats(
            total_attempts=total_attempts,
            total_correct=total_correct,
            total_points=total_points,
            accuracy=accuracy,
            level=status.level,
            next_level=status.next_level,
            progress=status.progress
        )

    def get_scores_by_type(self) -> dict[str, dict]:
        """Per-type {attempts, correct, accuracy} for every address type, including 'none'."""
        scores = {t: {'attempts': 0, 'correct': 0, 'accuracy': 0} for t in ADDRESS_TYPES}
        for record in self.store.all():
            entry = scores[record.type]
            entry['attempts'] += 1
            if record.is_correct:
                entry['correct'] += 1
        for entry in scores.values():
            if entry['attempts']:
                entry['accuracy'] = entry['correct'] / entry['attempts'] * 100
        return scores

    def reset_all_scores(self) -> None:
        logger.info(f"Resetting all scores for {self.site_key}")
        self.store.clear()
