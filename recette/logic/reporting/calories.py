"""Calorie dashboard aggregation."""
from typing import Any, Dict, Optional

from recette.utilities.config import DAILY_CALORIE_GOAL


def compute_calorie_summary(food: int = 0, exercise: int = 0, steps: int = 0,
                            goal: Optional[int] = None) -> Dict[str, Any]:
    """Summarize the day's energy balance.

    Returns structure:
    {
      'goal': int, 'food': int, 'exercise': int,
      'remaining': goal - food + exercise (negative once over the goal),
      'steps': int
    }
    """
    goal_kcal = DAILY_CALORIE_GOAL if goal is None else int(goal)
    food_kcal = max(0, int(food or 0))
    exercise_kcal = max(0, int(exercise or 0))
    return {
        'goal': goal_kcal,
        'food': food_kcal,
        'exercise': exercise_kcal,
        'remaining': goal_kcal - food_kcal + exercise_kcal,
        'steps': max(0, int(steps or 0)),
    }


__all__ = ["compute_calorie_summary"]
