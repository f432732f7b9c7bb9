"""Domain models for ipormac application."""

import math

from .config import ADDRESS_TYPES, NONE


class GeneratedAddress:
    """A single question: the displayed token and its ground truth."""

    def __init__(self, address: str, type: str, invalid_type: str = None,
                 invalid_reason: str = None, defect: str = None,
                 corrected_address: str = None):
        self.address = address
        self.type = type
        # Only set for near-misses (type == 'none')
        self.invalid_type = invalid_type
        self.invalid_reason = invalid_reason
        self.defect = defect
        self.corrected_address = corrected_address

    @property
    def is_invalid(self) -> bool:
        return self.type == NONE

    def to_dict(self) -> dict:
        data = {
            'address': self.address,
            'type': self.type,
        }
        if self.is_invalid:
            data['invalid_type'] = self.invalid_type
            data['invalid_reason'] = self.invalid_reason
            data['defect'] = self.defect
            data['corrected_address'] = self.corrected_address
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'GeneratedAddress':
        return cls(
            data['address'],
            data['type'],
            invalid_type=data.get('invalid_type'),
            invalid_reason=data.get('invalid_reason'),
            defect=data.get('defect'),
            corrected_address=data.get('corrected_address'),
        )

    def __repr__(self) -> str:
        return f"GeneratedAddress({self.address!r}, {self.type!r})"


class AttemptRecord:
    """One answered question in the attempt log."""

    def __init__(self, id: str, timestamp: int, score: float, max_score: float,
                 type: str, address: str = None):
        self.id = id
        self.timestamp = timestamp
        self.score = score
        self.max_score = max_score
        self.type = type
        self.address = address

    @property
    def is_correct(self) -> bool:
        return self.score == self.max_score

    def to_dict(self) -> dict:
        data = {
            'id': self.id,
            'timestamp': self.timestamp,
            'score': self.score,
            'max_score': self.max_score,
            'type': self.type,
        }
        if self.address is not None:
            data['address'] = self.address
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'AttemptRecord':
        """Build a record from persisted data. Raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"Attempt record must be a dict, got {type(data).__name__}")
        try:
            record = cls(
                str(data['id']),
                int(data['timestamp']),
                data['score'],
                data['max_score'],
                data['type'],
                data.get('address'),
            )
        except KeyError as e:
            raise ValueError(f"Attempt record missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Attempt record has a bad timestamp: {e}") from e
        validate_score(record.score, record.max_score)
        if record.type not in ADDRESS_TYPES:
            raise ValueError(f"Unknown address type: {record.type!r}")
        if record.address is not None and not isinstance(record.address, str):
            raise ValueError("Attempt address must be a string")
        return record


def validate_score(score, max_score) -> None:
    """Reject scores outside [0, max_score], non-finite values and non-positive maxima."""
    for value in (score, max_score):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Score values must be numbers, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"Score values must be finite, got {value!r}")
    if max_score <= 0:
        raise ValueError(f"max_score must be positive, got {max_score}")
    if score < 0 or score > max_score:
        raise ValueError(f"score must be between 0 and {max_score}, got {score}")


class Level:
    """A named tier unlocked by joint point and accuracy thresholds."""

    def __init__(self, emoji: str, title: str, description: str,
                 min_points: float, min_accuracy: float):
        self.emoji = emoji
        self.title = title
        self.description = description
        self.min_points = min_points
        self.min_accuracy = min_accuracy

    def to_dict(self) -> dict:
        return {
            'emoji': self.emoji,
            'title': self.title,
            'description': self.description,
            'min_points': self.min_points,
            'min_accuracy': self.min_accuracy
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Level':
        return cls(
            data['emoji'],
            data['title'],
            data.get('description', ''),
            data.get('min_points', 0),
            data.get('min_accuracy', 0),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Level({self.title!r}, min_points={self.min_points}, min_accuracy={self.min_accuracy})"


class OverallStats:
    """Aggregates derived from the attempt log. Never persisted."""

    def __init__(self, total_attempts: int, total_correct: int, total_points: float,
                 accuracy: float, level: Level, next_level: Level | None, progress: float):
        self.total_attempts = total_attempts
        self.total_correct = total_correct
        self.total_points = total_points
        self.accuracy = accuracy
        self.level = level
        self.next_level = next_level
        self.progress = progress

    def to_dict(self) -> dict:
        return {
            'total_attempts': self.total_attempts,
            'total_correct': self.total_correct,
            'total_points': self.total_points,
            'accuracy': self.accuracy,
            'level': self.level.to_dict(),
            'next_level': self.next_level.to_dict() if self.next_level else None,
            'progress': self.progress
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, OverallStats):
            return NotImplemented
        return self.to_dict() == other.to_dict()
