# api/v1/schemas/form.py
from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Iterable, Mapping

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field
from pydantic_core import PydanticCustomError

from core.models.menu import Goal
from core.selection import DeliveryOption


class Sex(str, Enum):
    male = "male"
    female = "female"


INVALID_NUMBER = "Debe ingresar un número válido"

# message shown when the field is absent altogether
REQUIRED_MESSAGES = {
    "age": INVALID_NUMBER,
    "height": INVALID_NUMBER,
    "weight": INVALID_NUMBER,
    "sex": "Por favor, seleccione su sexo",
    "goal": "Por favor, selecciona un objetivo",
}


# ───────────────────────── validators ─────────────────────────
def _coerce_number(value: Any) -> float:
    """Text inputs arrive as strings; blank counts as 0 like a number input does."""
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints past the float range
            raise PydanticCustomError("number_parsing", INVALID_NUMBER) from None
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        try:
            number = float(text) if text else 0.0
        except ValueError:
            raise PydanticCustomError("number_parsing", INVALID_NUMBER) from None
    else:
        raise PydanticCustomError("number_type", INVALID_NUMBER)

    if not math.isfinite(number):
        raise PydanticCustomError("number_parsing", INVALID_NUMBER)
    return number


def _between(low: float, high: float, too_low: str, too_high: str) -> AfterValidator:
    def check(value: float) -> float:
        if value < low:
            raise PydanticCustomError("number_too_low", too_low)
        if value > high:
            raise PydanticCustomError("number_too_high", too_high)
        return value

    return AfterValidator(check)


def _one_of(choices: type, message: str) -> BeforeValidator:
    def check(value: Any) -> Any:
        try:
            return choices(value)
        except ValueError:
            raise PydanticCustomError("enum", message) from None

    return BeforeValidator(check)


Age = Annotated[
    float,
    BeforeValidator(_coerce_number),
    _between(1, 150, "La edad debe ser un número positivo", "Por favor, ingrese una edad válida"),
]
Height = Annotated[
    float,
    BeforeValidator(_coerce_number),
    _between(50, 250, "Altura debe ser al menos 50 cm", "Por favor, ingrese una altura válida"),
]
Weight = Annotated[
    float,
    BeforeValidator(_coerce_number),
    _between(20, 250, "Peso debe ser al menos 20 kg", "Por favor, ingrese un peso válido"),
]
SexChoice = Annotated[Sex, _one_of(Sex, REQUIRED_MESSAGES["sex"])]
GoalChoice = Annotated[Goal, _one_of(Goal, REQUIRED_MESSAGES["goal"])]


# ───────────────────────── models ─────────────────────────────
class NutritionForm(BaseModel):
    """What the user types in. Only `goal` decides the menu."""
    age: Age = Field(..., examples=[30])
    sex: SexChoice = Field(..., examples=["female"])
    height: Height = Field(..., description="cm", examples=[170])
    weight: Weight = Field(..., description="kg", examples=[65])
    goal: GoalChoice = Field(..., examples=["loseWeight", "gainMuscle"])


class DeliveryIn(BaseModel):
    menu_key: str
    delivery: DeliveryOption | None = None


def field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """
    Collapse pydantic / FastAPI error dicts into one message per field.
    The first error reported for a field wins.
    """
    out: dict[str, str] = {}
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        field = str(loc[0]) if loc else "form"
        if field in out:
            continue
        if err.get("type") == "missing":
            out[field] = REQUIRED_MESSAGES.get(field, err.get("msg", "Field required"))
        else:
            out[field] = err.get("msg", "")
    return out
