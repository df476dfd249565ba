"""
core/selection.py
────────────────────────────────────────────────────────────────────────
Menu dialog state for the form page.

    Idle ──submit──▶ MenuSelected + DialogOpen ──dismiss / confirm──▶ Idle

The state is an immutable record; every transition returns a new one.
A failed form validation never reaches `submit`, so the flow has no
error state of its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from core.catalog import menu_key_for
from core.models.menu import Goal, MenuKey

_LOG = logging.getLogger(__name__)


class DeliveryOption(str, Enum):
    home = "home"
    pickup = "pickup"


class SelectionError(ValueError):
    pass


@dataclass(frozen=True)
class SelectionState:
    menu_key: MenuKey | None = None
    dialog_open: bool = False
    delivery: DeliveryOption | None = None

    @property
    def idle(self) -> bool:
        return not self.dialog_open and self.menu_key is None


IDLE = SelectionState()


def submit(state: SelectionState, goal: Goal | str) -> SelectionState:
    """Validated form → open the dialog on the goal's menu."""
    key = menu_key_for(goal)
    return SelectionState(menu_key=key, dialog_open=True, delivery=None)


def choose_delivery(
    state: SelectionState, option: DeliveryOption | str
) -> SelectionState:
    if not state.dialog_open:
        raise SelectionError("no menu dialog is open")
    try:
        option = DeliveryOption(option)
    except ValueError as exc:
        raise SelectionError(f"unknown delivery option: {option!r}") from exc
    return replace(state, delivery=option)


def can_confirm(state: SelectionState) -> bool:
    return state.dialog_open and state.delivery is not None


def confirm(state: SelectionState) -> SelectionState:
    # No order is placed anywhere; confirming only closes the dialog.
    if not can_confirm(state):
        raise SelectionError("choose a delivery option first")
    _LOG.info(
        "delivery %s chosen for menu %s",
        state.delivery.value,  # type: ignore[union-attr]
        state.menu_key.value if state.menu_key else None,
    )
    return IDLE


def dismiss(state: SelectionState) -> SelectionState:
    return IDLE
