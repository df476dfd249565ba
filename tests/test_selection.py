# tests/test_selection.py
from __future__ import annotations

import pytest

from core import selection
from core.catalog import UnknownGoalError
from core.models.menu import MenuKey
from core.selection import IDLE, DeliveryOption, SelectionError, SelectionState


def test_starts_idle():
    assert IDLE.idle
    assert not selection.can_confirm(IDLE)


def test_submit_opens_dialog_on_mapped_menu():
    state = selection.submit(IDLE, "gainMuscle")
    assert state == SelectionState(
        menu_key=MenuKey.hypercaloric_hyperproteic, dialog_open=True, delivery=None
    )


def test_submit_with_unknown_goal_keeps_caller_idle():
    with pytest.raises(UnknownGoalError):
        selection.submit(IDLE, "bulk")


def test_delivery_then_confirm_resets():
    state = selection.submit(IDLE, "loseWeight")
    state = selection.choose_delivery(state, "pickup")
    assert state.delivery is DeliveryOption.pickup
    assert selection.can_confirm(state)
    assert selection.confirm(state) == IDLE


def test_choice_can_be_changed_before_confirming():
    state = selection.submit(IDLE, "loseWeight")
    state = selection.choose_delivery(state, DeliveryOption.home)
    state = selection.choose_delivery(state, DeliveryOption.pickup)
    assert state.delivery is DeliveryOption.pickup


def test_confirm_needs_a_delivery_option():
    state = selection.submit(IDLE, "loseWeight")
    with pytest.raises(SelectionError):
        selection.confirm(state)


def test_delivery_needs_open_dialog():
    with pytest.raises(SelectionError):
        selection.choose_delivery(IDLE, "home")


def test_unknown_delivery_option():
    state = selection.submit(IDLE, "loseWeight")
    with pytest.raises(SelectionError):
        selection.choose_delivery(state, "drone")


def test_dismiss_clears_everything():
    state = selection.choose_delivery(selection.submit(IDLE, "loseWeight"), "home")
    assert selection.dismiss(state) == IDLE


def test_transitions_do_not_mutate():
    opened = selection.submit(IDLE, "loseWeight")
    selection.choose_delivery(opened, "home")
    assert opened.delivery is None
