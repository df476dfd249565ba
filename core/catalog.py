"""
core/catalog.py
────────────────────────────────────────────────────────────────────────
The two compiled-in menus and the goal → menu lookup.

Everything here is built once at import time and never mutated; callers
get the very same frozen `MenuRecord` objects on every lookup.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from core.models.menu import Goal, MacroRecord, MealEntry, MenuKey, MenuRecord

_LOG = logging.getLogger(__name__)


class UnknownGoalError(ValueError):
    pass


class UnknownMenuError(ValueError):
    pass


# ──────────────────────────────────────────────────────────────────────
#  Menu data
# ──────────────────────────────────────────────────────────────────────
_HYPOCALORIC = MenuRecord(
    key=MenuKey.hypocaloric,
    title="Menú bajo en calorías",
    description=(
        "Menú bajo en calorías y alto en proteínas diseñado para bajar grasa corporal."
    ),
    meals=(
        MealEntry(
            name="Bife de cerdo con cebollas caramelizadas",
            calories=610,
            protein=52,
            image_ref="/menus/CaramelizedOnionAppleJusRoastedPork.webp",
        ),
        MealEntry(
            name="Bife con arroz yamani y brócoli",
            calories=510,
            protein=48,
            image_ref="/menus/Steak&BrownRice.webp",
        ),
        MealEntry(
            name="Pastel de carne con papas rústicas",
            calories=750,
            protein=55,
            image_ref="/menus/CottagePie.webp",
        ),
    ),
    macros=MacroRecord(protein=201, carbs=147, fats=53, calories=1870),
)

_HYPERCALORIC_HYPERPROTEIC = MenuRecord(
    key=MenuKey.hypercaloric_hyperproteic,
    title="Menú de Aumento de Masa Muscular",
    description="Alto en proteínas y calorías para desarrollo muscular.",
    meals=(
        MealEntry(
            name="Empandas de pollo con cebolla caramelizada",
            calories=1036,
            protein=59,
            image_ref="/menus/empanadas.png",
        ),
        MealEntry(
            name="Souffle de calabaza con albóndigas",
            calories=971,
            protein=67.4,
            image_ref="/menus/suffleAlbondigas.png",
        ),
        MealEntry(
            name="Mousse de tofu con batata y chocolate",
            calories=329.6,
            protein=31,
            image_ref="/menus/mousseTofu.png",
        ),
    ),
    macros=MacroRecord(protein=227.4, carbs=179, fats=79, calories=2336.6),
)

MENUS: Mapping[MenuKey, MenuRecord] = MappingProxyType(
    {
        MenuKey.hypocaloric: _HYPOCALORIC,
        MenuKey.hypercaloric_hyperproteic: _HYPERCALORIC_HYPERPROTEIC,
    }
)

_GOAL_TO_MENU: Mapping[Goal, MenuKey] = MappingProxyType(
    {
        Goal.lose_weight: MenuKey.hypocaloric,
        Goal.gain_muscle: MenuKey.hypercaloric_hyperproteic,
    }
)


# ──────────────────────────────────────────────────────────────────────
#  Lookups
# ──────────────────────────────────────────────────────────────────────
def menu_key_for(goal: Goal | str) -> MenuKey:
    try:
        return _GOAL_TO_MENU[Goal(goal)]
    except ValueError as exc:
        raise UnknownGoalError(f"unknown goal: {goal!r}") from exc


def resolve_menu(goal: Goal | str) -> MenuRecord:
    """Menu shown for `goal`. Biometrics play no part in the choice."""
    key = menu_key_for(goal)
    _LOG.debug("goal %s resolved to menu %s", Goal(goal).value, key.value)
    return MENUS[key]


def get_menu(key: MenuKey | str) -> MenuRecord:
    try:
        return MENUS[MenuKey(key)]
    except ValueError as exc:
        raise UnknownMenuError(f"unknown menu: {key!r}") from exc


def all_menus() -> tuple[MenuRecord, ...]:
    return tuple(MENUS.values())
