# api/v1/recs.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from core.catalog import resolve_menu
from core.macro_breakdown import MacroBreakdownCalculator
from services.breakdown import get_calculator
from api.v1.schemas import MenuOut, NutritionForm, RecResponse

_LOG = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RecResponse, status_code=status.HTTP_200_OK)
async def recommend(
    body: NutritionForm,
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> RecResponse:
    """
    Pick the menu for `body.goal`. Age, sex, height and weight are
    validated but do not change the answer.
    """
    menu = resolve_menu(body.goal)
    _LOG.info("recommendation: goal=%s menu=%s", body.goal.value, menu.key.value)
    return RecResponse(
        goal=body.goal.value,
        menu_key=menu.key.value,
        menu=MenuOut.build(menu, calc.breakdown(menu.macros)),
    )
