"""
core/macro_breakdown.py
────────────────────────────────────────────────────────────────────────
Turns a menu's macro grams into the three chart slices.

1. grams → kcal with the Atwater factors (protein 4, carbs 4, fat 9)
2. derived total = sum of the three
3. share = kcal / derived total * 100, one decimal, half away from zero
4. slices always come out as [protein, carbs, fats]

The record's own `calories` figure is never used for the shares; it is
only compared against the derived total so a drifting catalog entry
is flagged (`consistent=False`).

All-zero macros give three "0.0" shares instead of a division error.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from core.models.menu import MacroRecord

Logger = logging.getLogger(__name__)

KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fats": 9}

_ONE_DECIMAL = Decimal("0.1")


# ──────────────────────────────────────────────────────────────────────
#  Output types
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BreakdownSlice:
    key: str              # "protein" | "carbs" | "fats"
    label: str
    grams: float
    calories: float
    color: str
    share_percent: str    # "43.0"


@dataclass(frozen=True)
class MacroBreakdown:
    slices: tuple[BreakdownSlice, ...]
    total_calories: float     # derived from grams, what the chart shows
    stored_calories: float    # as curated in the catalog
    calorie_gap: float        # stored - derived
    consistent: bool

    def share_sum(self) -> float:
        return sum(float(s.share_percent) for s in self.slices)


def format_share(value: float) -> str:
    """
    One decimal, ties away from zero on the exact binary value, so 12.25
    gives "12.3" where ``f"{12.25:.1f}"`` would give "12.2".
    """
    if not math.isfinite(value):
        raise ValueError(f"share must be finite, got {value}")
    return str(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class MacroBreakdownCalculator:
    """Pure macro → chart-slice conversion."""

    # (key, legend label, chart colour), in display order
    _SLICES = (
        ("protein", "Proteínas", "#FF6384"),
        ("carbs", "Carbohidratos", "#36A2EB"),
        ("fats", "Grasas", "#FFCE56"),
    )

    def __init__(self, calorie_tolerance: float = 0.5) -> None:
        if calorie_tolerance < 0:
            raise ValueError("calorie_tolerance must be >= 0")
        self.calorie_tolerance = calorie_tolerance

    # --------------- public entrypoint --------------------------------
    def breakdown(self, macros: MacroRecord) -> MacroBreakdown:
        grams = {"protein": macros.protein, "carbs": macros.carbs, "fats": macros.fats}
        for key, value in grams.items():
            if value < 0:
                raise ValueError(f"{key} grams must be >= 0, got {value}")

        kcal = {key: grams[key] * KCAL_PER_GRAM[key] for key in grams}
        total = kcal["protein"] + kcal["carbs"] + kcal["fats"]

        if total == 0:
            Logger.debug("macro record has no energy, shares fall back to 0.0")

        slices = tuple(
            BreakdownSlice(
                key=key,
                label=label,
                grams=grams[key],
                calories=kcal[key],
                color=color,
                share_percent=self._share(kcal[key], total),
            )
            for key, label, color in self._SLICES
        )

        gap = macros.calories - total
        consistent = self.is_consistent(macros.calories, total)
        if not consistent:
            Logger.debug(
                "stored calories %.1f differ from macro-derived %.1f by %.1f kcal",
                macros.calories,
                total,
                gap,
            )

        return MacroBreakdown(
            slices=slices,
            total_calories=total,
            stored_calories=macros.calories,
            calorie_gap=gap,
            consistent=consistent,
        )

    # --------------- helpers -----------------------------------------
    def is_consistent(self, stored: float, derived: float) -> bool:
        # float noise (227.4 * 4 etc.) must not trip the check
        return abs(stored - derived) <= self.calorie_tolerance + 1e-9

    @staticmethod
    def _share(part: float, total: float) -> str:
        if total == 0:
            return "0.0"
        return format_share(part / total * 100)
