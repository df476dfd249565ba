"""
web/pages.py
────────────────────────────────────────────────────────────────────────
The single HTML page: nutrition form, menu dialog with the macro chart,
and the delivery choice.

The dialog state is not kept on the server; each request rebuilds it
from the posted fields and runs it through `core.selection`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from core import selection
from core.catalog import UnknownMenuError, get_menu
from core.macro_breakdown import MacroBreakdown, MacroBreakdownCalculator
from services.breakdown import get_calculator
from api.v1.schemas import NutritionForm, field_errors

_LOG = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """1869.0 → "1869", 2336.6000000000004 → "2336.6"."""
    text = f"{value:.1f}"
    return text[:-2] if text.endswith(".0") else text


templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["number"] = format_number

router = APIRouter()

_EMPTY_RING = "#e5e7eb 0% 100%"

FORM_FIELDS = ("age", "sex", "height", "weight", "goal")


def conic_gradient(breakdown: MacroBreakdown) -> str:
    """CSS conic-gradient stops, one segment per slice, sized by calorie share."""
    if breakdown.total_calories == 0:
        return _EMPTY_RING
    stops: list[str] = []
    start = 0.0
    last = len(breakdown.slices) - 1
    for i, s in enumerate(breakdown.slices):
        # rounded shares may not add up to exactly 100; the last one closes the ring
        end = 100.0 if i == last else min(start + float(s.share_percent), 100.0)
        stops.append(f"{s.color} {start:.1f}% {end:.1f}%")
        start = end
    return ", ".join(stops)


def _render(
    request: Request,
    calc: MacroBreakdownCalculator,
    state: selection.SelectionState = selection.IDLE,
    *,
    values: dict[str, Any] | None = None,
    errors: dict[str, str] | None = None,
    delivery_error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    context: dict[str, Any] = {
        "values": values or {},
        "errors": errors or {},
        "state": state,
        "can_confirm": selection.can_confirm(state),
        "delivery_options": list(selection.DeliveryOption),
        "delivery_error": delivery_error,
        "menu": None,
    }
    if state.menu_key is not None:
        menu = get_menu(state.menu_key)
        breakdown = calc.breakdown(menu.macros)
        context.update(
            menu=menu,
            breakdown=breakdown,
            gradient=conic_gradient(breakdown),
        )
    return templates.TemplateResponse(
        request, "index.html", context, status_code=status_code
    )


# ───────────────────────── form ─────────────────────────────
@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def show_form(
    request: Request,
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> HTMLResponse:
    return _render(request, calc)


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def submit_form(
    request: Request,
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> HTMLResponse:
    raw = await request.form()
    values = {k: raw.get(k) for k in FORM_FIELDS if raw.get(k) is not None}
    try:
        form = NutritionForm.model_validate(values)
    except ValidationError as exc:
        return _render(
            request,
            calc,
            values=values,
            errors=field_errors(exc.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    state = selection.submit(selection.IDLE, form.goal)
    _LOG.info("form accepted, showing menu %s", state.menu_key.value)  # type: ignore[union-attr]
    # the form is cleared once a menu is shown
    return _render(request, calc, state)


# ───────────────────────── delivery ─────────────────────────
@router.post(
    "/delivery",
    response_class=HTMLResponse,
    response_model=None,
    include_in_schema=False,
)
async def submit_delivery(
    request: Request,
    calc: MacroBreakdownCalculator = Depends(get_calculator),
) -> HTMLResponse | RedirectResponse:
    raw = await request.form()
    try:
        menu = get_menu(str(raw.get("menu_key", "")))
    except UnknownMenuError:
        raise HTTPException(status_code=404, detail="Menu not found")

    state = selection.SelectionState(menu_key=menu.key, dialog_open=True)
    option = raw.get("delivery")
    try:
        if option:
            state = selection.choose_delivery(state, str(option))
        selection.confirm(state)
    except selection.SelectionError:
        return _render(
            request,
            calc,
            state,
            delivery_error="Seleccione una opción de entrega",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
