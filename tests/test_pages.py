"""
The HTML form page: render, validation round-trip, dialog, delivery.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core.macro_breakdown import MacroBreakdownCalculator
from core.models.menu import MacroRecord
from main import app
from web.pages import conic_gradient, format_number

FORM = {"age": "30", "sex": "female", "height": "165", "weight": "60", "goal": "gainMuscle"}


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_empty_form(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Formulario de Nutrición" in r.text
    assert 'role="dialog"' not in r.text


def test_valid_submission_opens_dialog(client):
    r = client.post("/", data=FORM)
    assert r.status_code == 200
    html = r.text
    assert 'role="dialog"' in html
    assert "Menú de Aumento de Masa Muscular" in html
    assert "1036 cal | 59g proteína" in html
    assert "Proteínas: 38.9%" in html
    assert "2336.6cal." in html
    # form is cleared after a successful submit
    assert 'value="30"' not in html


def test_invalid_submission_keeps_values_and_shows_field_errors(client):
    r = client.post("/", data={**FORM, "age": "0", "goal": ""})
    assert r.status_code == 422
    html = r.text
    assert "La edad debe ser un número positivo" in html
    assert "Por favor, selecciona un objetivo" in html
    assert 'value="165"' in html
    assert 'role="dialog"' not in html


def test_delivery_redirects_home(client):
    r = client.post(
        "/delivery",
        data={"menu_key": "hypocaloric", "delivery": "pickup"},
        follow_redirects=False,
    )
    assert r.status_code == 303
    assert r.headers["location"] == "/"


def test_delivery_without_choice_keeps_dialog_open(client):
    r = client.post("/delivery", data={"menu_key": "hypocaloric"})
    assert r.status_code == 422
    assert 'role="dialog"' in r.text
    assert "Seleccione una opción de entrega" in r.text


def test_delivery_unknown_menu(client):
    r = client.post("/delivery", data={"menu_key": "nope", "delivery": "home"})
    assert r.status_code == 404


# ── helpers ─────────────────────────────────────────────────────────
calc = MacroBreakdownCalculator()


def test_gradient_follows_shares():
    bd = calc.breakdown(MacroRecord(protein=201, carbs=147, fats=53, calories=1869))
    assert conic_gradient(bd) == (
        "#FF6384 0.0% 43.0%, #36A2EB 43.0% 74.5%, #FFCE56 74.5% 100.0%"
    )


def test_gradient_for_empty_record():
    bd = calc.breakdown(MacroRecord(protein=0, carbs=0, fats=0, calories=0))
    assert conic_gradient(bd) == "#e5e7eb 0% 100%"


@pytest.mark.parametrize(
    "value, text", [(1869.0, "1869"), (2336.6000000000004, "2336.6"), (67.4, "67.4"), (0, "0")]
)
def test_format_number(value, text):
    assert format_number(value) == text
