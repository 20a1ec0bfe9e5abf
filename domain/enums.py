"""
Domain enums for DailyDiet application.
Contains all enumeration types used across the domain models.
"""

import enum


class DietStatus(str, enum.Enum):
    """Whether a meal was within the user's diet.

    Values match the stored and wire representation ("yes" / "no").
    """

    ON_DIET = "yes"
    OFF_DIET = "no"

    @property
    def is_compliant(self) -> bool:
        return self is DietStatus.ON_DIET

    @classmethod
    def from_flag(cls, flag: bool) -> "DietStatus":
        return cls.ON_DIET if flag else cls.OFF_DIET
