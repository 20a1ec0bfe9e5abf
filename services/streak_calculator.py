"""
Diet streak computation.

A streak is a run of consecutive on-diet meals in creation order. The best
streak is the longest such run anywhere in a user's history.
"""

from typing import Iterable, Sequence

from domain.models import Meal


class StreakCalculator:
    """Longest run of diet-compliant meals"""

    @staticmethod
    def best_streak(flags: Iterable[bool]) -> int:
        """
        Return the length of the longest run of True values.

        Single pass: a False flag closes the current run, and the running
        count is also compared on every True flag so a run that reaches the
        end of the sequence is counted.

        Args:
            flags: compliance flags, oldest meal first

        Returns:
            Non-negative streak length (0 for an empty sequence)
        """
        current = 0
        best = 0
        for on_diet in flags:
            if on_diet:
                current += 1
                best = max(best, current)
            else:
                best = max(best, current)
                current = 0
        return best

    @staticmethod
    def for_meals(meals: Sequence[Meal], newest_first: bool = True) -> int:
        """
        Best streak over a user's meals.

        Meals come from storage newest first by default; they are walked in
        chronological order. Run lengths do not depend on direction, only on
        adjacency, so either order yields the same answer.
        """
        ordered = reversed(meals) if newest_first else meals
        return StreakCalculator.best_streak(
            meal.is_on_diet.is_compliant for meal in ordered
        )
