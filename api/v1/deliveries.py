# api/v1/deliveries.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from core import selection
from core.catalog import UnknownMenuError, get_menu
from api.v1.schemas import DeliveryIn, SelectionOut

router = APIRouter()


@router.post(
    "",
    response_model=SelectionOut,
    status_code=status.HTTP_200_OK,
    summary="Confirm a delivery option and close the menu dialog",
)
async def confirm_delivery(body: DeliveryIn) -> SelectionOut:
    """
    Nothing is ordered or stored: the dialog state is confirmed and
    returned in its reset form.
    """
    try:
        menu = get_menu(body.menu_key)
    except UnknownMenuError:
        raise HTTPException(status_code=404, detail="Menu not found")

    state = selection.SelectionState(menu_key=menu.key, dialog_open=True)
    if body.delivery is not None:
        state = selection.choose_delivery(state, body.delivery)

    try:
        state = selection.confirm(state)
    except selection.SelectionError as exc:
        raise HTTPException(status_code=409, detail=str(exc))

    return SelectionOut(
        menu_key=state.menu_key.value if state.menu_key else None,
        dialog_open=state.dialog_open,
        delivery=state.delivery.value if state.delivery else None,
    )
