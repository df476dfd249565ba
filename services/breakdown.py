"""
services/breakdown.py
────────────────────────────────────────────────────────────────────────
Shared calculator instance, configured from settings and handed to
routers through `Depends(get_calculator)`.

The compiled-in catalog is checked once, when the calculator is first
built: each menu whose stored kcal drifts from its macro-derived total
is logged at WARNING there, not on every render.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from config import settings
from core.catalog import all_menus
from core.macro_breakdown import MacroBreakdownCalculator
from core.models.menu import MenuKey

_LOG = logging.getLogger(__name__)


def check_catalog(calc: MacroBreakdownCalculator) -> list[MenuKey]:
    """Keys of the menus whose stored kcal fall outside the tolerance."""
    drifting: list[MenuKey] = []
    for menu in all_menus():
        bd = calc.breakdown(menu.macros)
        if not bd.consistent:
            _LOG.warning(
                "menu %s: stored calories %.1f differ from macro-derived %.1f by %.1f kcal",
                menu.key.value,
                bd.stored_calories,
                bd.total_calories,
                bd.calorie_gap,
            )
            drifting.append(menu.key)
    return drifting


@lru_cache
def get_calculator() -> MacroBreakdownCalculator:
    calc = MacroBreakdownCalculator(calorie_tolerance=settings.calorie_tolerance)
    check_catalog(calc)
    return calc
