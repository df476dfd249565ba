# api/v1/menus.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core.catalog import UnknownMenuError, all_menus, get_menu
from core.macro_breakdown import MacroBreakdownCalculator
from core.models.menu import MenuRecord
from services.breakdown import get_calculator
from api.v1.schemas import BreakdownOut, MenuOut

router = APIRouter()


def _menu_or_404(menu_key: str) -> MenuRecord:
    try:
        return get_menu(menu_key)
    except UnknownMenuError:
        raise HTTPException(status_code=404, detail="Menu not found")


@router.get(
    "",
    response_model=list[MenuOut],
    status_code=status.HTTP_200_OK,
    summary="List every menu with its macro breakdown",
)
async def list_menus(
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> list[MenuOut]:
    return [MenuOut.build(m, calc.breakdown(m.macros)) for m in all_menus()]


@router.get("/{menu_key}", response_model=MenuOut)
async def fetch_menu(
    menu_key: str,
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> MenuOut:
    menu = _menu_or_404(menu_key)
    return MenuOut.build(menu, calc.breakdown(menu.macros))


@router.get(
    "/{menu_key}/breakdown",
    response_model=BreakdownOut,
    summary="Calorie share of protein, carbs and fats",
)
async def fetch_breakdown(
    menu_key: str,
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> BreakdownOut:
    menu = _menu_or_404(menu_key)
    return BreakdownOut.model_validate(calc.breakdown(menu.macros))
