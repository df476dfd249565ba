from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from core.macro_breakdown import MacroBreakdown
from core.models.menu import MenuRecord


class MealOut(BaseModel):
    name: str
    calories: float
    protein: float
    image_ref: str

    model_config = ConfigDict(from_attributes=True)


class MacrosOut(BaseModel):
    protein: float
    carbs: float
    fats: float
    calories: float     # stored figure, see BreakdownOut.calorie_gap

    model_config = ConfigDict(from_attributes=True)


class SliceOut(BaseModel):
    key: str
    label: str
    grams: float
    calories: float
    color: str
    share_percent: str

    model_config = ConfigDict(from_attributes=True)


class BreakdownOut(BaseModel):
    slices: list[SliceOut]
    total_calories: float
    stored_calories: float
    calorie_gap: float
    consistent: bool

    model_config = ConfigDict(from_attributes=True)


class MenuOut(BaseModel):
    key: str
    title: str
    description: str
    meals: list[MealOut]
    macros: MacrosOut
    breakdown: BreakdownOut

    @classmethod
    def build(cls, menu: MenuRecord, breakdown: MacroBreakdown) -> "MenuOut":
        return cls(
            key=menu.key.value,
            title=menu.title,
            description=menu.description,
            meals=[MealOut.model_validate(m) for m in menu.meals],
            macros=MacrosOut.model_validate(menu.macros),
            breakdown=BreakdownOut.model_validate(breakdown),
        )


class RecResponse(BaseModel):
    goal: str
    menu_key: str
    menu: MenuOut


class SelectionOut(BaseModel):
    menu_key: str | None
    dialog_open: bool
    delivery: str | None
