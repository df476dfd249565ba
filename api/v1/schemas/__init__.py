"""Re-export individual schema modules for easy imports."""

from .form import DeliveryIn, NutritionForm, Sex, field_errors
from .menu import BreakdownOut, MenuOut, RecResponse, SelectionOut

__all__ = [
    "DeliveryIn",
    "NutritionForm",
    "Sex",
    "field_errors",
    "BreakdownOut",
    "MenuOut",
    "RecResponse",
    "SelectionOut",
]
