# tests/test_catalog.py
from __future__ import annotations

import pytest

from core.catalog import (
    MENUS,
    UnknownGoalError,
    UnknownMenuError,
    all_menus,
    get_menu,
    menu_key_for,
    resolve_menu,
)
from core.models.menu import Goal, MacroRecord, MealEntry, MenuKey, MenuRecord


def test_lose_weight_maps_to_hypocaloric():
    menu = resolve_menu("loseWeight")
    assert menu.key is MenuKey.hypocaloric
    assert menu.title == "Menú bajo en calorías"


def test_gain_muscle_maps_to_hypercaloric():
    menu = resolve_menu(Goal.gain_muscle)
    assert menu.key is MenuKey.hypercaloric_hyperproteic
    assert menu.macros == MacroRecord(protein=227.4, carbs=179, fats=79, calories=2336.6)


def test_resolve_is_idempotent_and_returns_same_object():
    first = resolve_menu("loseWeight")
    second = resolve_menu("loseWeight")
    assert first is second
    assert first == MENUS[MenuKey.hypocaloric]


@pytest.mark.parametrize("goal", ["maintain", "", None, "LOSEWEIGHT"])
def test_unknown_goal(goal):
    with pytest.raises(UnknownGoalError):
        menu_key_for(goal)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        MENUS[MenuKey.hypocaloric] = MENUS[MenuKey.hypercaloric_hyperproteic]  # type: ignore[index]


def test_records_are_frozen():
    menu = resolve_menu("loseWeight")
    with pytest.raises(AttributeError):
        menu.title = "changed"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        menu.meals[0].calories = 1  # type: ignore[misc]


def test_every_menu_has_three_meals():
    assert [m.key for m in all_menus()] == list(MenuKey)
    for menu in all_menus():
        assert len(menu.meals) == 3
        assert all(meal.image_ref.startswith("/menus/") for meal in menu.meals)


def test_get_menu_by_key():
    assert get_menu("hypercaloricHyperproteic").key is MenuKey.hypercaloric_hyperproteic
    with pytest.raises(UnknownMenuError):
        get_menu("keto")


def test_menu_record_guards():
    meal = MealEntry(name="x", calories=1, protein=1, image_ref="/x.png")
    macros = MacroRecord(protein=1, carbs=1, fats=1, calories=17)
    with pytest.raises(ValueError):
        MenuRecord(MenuKey.hypocaloric, "t", "d", (meal, meal), macros)
    with pytest.raises(ValueError):
        MealEntry(name="x", calories=-1, protein=0, image_ref="")
    with pytest.raises(ValueError):
        MacroRecord(protein=0, carbs=-2, fats=0, calories=0)
