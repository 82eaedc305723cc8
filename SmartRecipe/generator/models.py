"""
Value objects passed in and out of the recipe generator.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Tuple


class MealType(str, enum.Enum):
    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


class CookingTime(str, enum.Enum):
    UNDER_30 = "UNDER_30"
    MIN_30_60 = "MIN_30_60"
    OVER_60 = "OVER_60"


class Complexity(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


@dataclass(frozen=True)
class GenerationRequest:
    """
    One recipe generation request.

    All fields are required and non-blank; callers validate them before
    generation. Values are plain strings so stored rows can be replayed as-is:
    cuisine and complexity are matched case-insensitively, meal_type and
    cooking_time are matched exactly against the enum values above.
    """
    ingredients: str
    meal_type: str
    cuisine: str
    cooking_time: str
    complexity: str

    @property
    def cuisine_key(self) -> str:
        return self.cuisine.lower()

    @property
    def complexity_key(self) -> str:
        return self.complexity.lower()


@dataclass(frozen=True)
class Estimates:
    prep_minutes: int
    servings: str
    calories: str


@dataclass(frozen=True)
class GeneratedDocument:
    instructions: Tuple[str, ...]
    tips: Tuple[str, ...]
    prep_minutes: int
    servings: str
    calories: str
    content: str
