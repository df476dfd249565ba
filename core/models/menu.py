from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Goal(str, Enum):
    lose_weight = "loseWeight"
    gain_muscle = "gainMuscle"


class MenuKey(str, Enum):
    hypocaloric = "hypocaloric"
    hypercaloric_hyperproteic = "hypercaloricHyperproteic"


MEALS_PER_MENU = 3


def _non_negative(owner: str, **values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{owner}.{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class MealEntry:
    name: str
    calories: float
    protein: float      # grams
    image_ref: str      # static path, served by whatever hosts the assets

    def __post_init__(self) -> None:
        _non_negative("MealEntry", calories=self.calories, protein=self.protein)


@dataclass(frozen=True)
class MacroRecord:
    """Grams of each macro plus a separately curated kcal total."""
    protein: float
    carbs: float
    fats: float
    calories: float

    def __post_init__(self) -> None:
        _non_negative(
            "MacroRecord",
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
            calories=self.calories,
        )


@dataclass(frozen=True)
class MenuRecord:
    key: MenuKey
    title: str
    description: str
    meals: tuple[MealEntry, ...]
    macros: MacroRecord

    def __post_init__(self) -> None:
        if len(self.meals) != MEALS_PER_MENU:
            raise ValueError(
                f"menu {self.key.value!r} needs {MEALS_PER_MENU} meals, got {len(self.meals)}"
            )
