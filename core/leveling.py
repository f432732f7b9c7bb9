"""Level selection and progress towards the next level."""

from .models import Level


class LevelStatus:
    """Result of a level lookup."""

    def __init__(self, level: Level, next_level: Level | None, progress: float):
        self.level = level
        self.next_level = next_level
        self.progress = progress


def _percent_of(current: float, required: float) -> float:
    if required <= 0:
        return 100.0
    return min(100.0, 100.0 * current / required)


def level_for(total_points: float, accuracy: float, levels: list[Level]) -> LevelStatus:
    """Find the highest level whose point and accuracy thresholds are both met.

    The first level is the floor when nothing qualifies. Progress towards the
    next level is the lesser of the points and accuracy percentages, so both
    thresholds have to be reached before it shows 100.
    """
    if not levels:
        raise ValueError("At least one level is required")

    index = 0
    for i, level in enumerate(levels):
        if total_points >= level.min_points and accuracy >= level.min_accuracy:
            index = i

    level = levels[index]
    if index + 1 >= len(levels):
        return LevelStatus(level, None, 100.0)

    next_level = levels[index + 1]
    progress = min(
        _percent_of(total_points, next_level.min_points),
        _percent_of(accuracy, next_level.min_accuracy)
    )
    return LevelStatus(level, next_level, max(0.0, progress))
