"""
scripts/show_menu.py
────────────────────────────────────────────────────────────────────────
Print a menu and its macro breakdown to the terminal:

    python -m scripts.show_menu --goal loseWeight
    python -m scripts.show_menu --all
"""
from __future__ import annotations

from argparse import ArgumentParser
from dotenv import load_dotenv
load_dotenv()

from core.catalog import all_menus, resolve_menu
from core.macro_breakdown import MacroBreakdownCalculator
from core.models.menu import Goal, MenuRecord
from services.breakdown import get_calculator


def render(menu: MenuRecord, calc: MacroBreakdownCalculator) -> str:
    bd = calc.breakdown(menu.macros)
    lines = [menu.title, menu.description, ""]
    for meal in menu.meals:
        lines.append(f"  • {meal.name}: {meal.calories:g} kcal, {meal.protein:g} g proteína")
    lines.append("")
    for s in bd.slices:
        lines.append(f"  {s.label:<14} {s.grams:>7g} g  {s.share_percent:>5}%")
    lines.append(f"  {'Total':<14} {bd.total_calories:>7.1f} kcal")
    if not bd.consistent:
        lines.append(
            f"  ! stored total {bd.stored_calories:g} kcal differs by {bd.calorie_gap:+.1f}"
        )
    return "\n".join(lines)


# ───────────────────────────────
# CLI entrypoint
# ───────────────────────────────
def main(argv: list[str] | None = None) -> None:
    ap = ArgumentParser(description="Print a menu and its macro breakdown.")
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("--goal", choices=[g.value for g in Goal])
    group.add_argument("--all", action="store_true", help="print every menu")
    args = ap.parse_args(argv)

    calc = get_calculator()
    menus = all_menus() if args.all else (resolve_menu(args.goal),)
    print("\n\n".join(render(m, calc) for m in menus))


if __name__ == "__main__":  # pragma: no cover
    main()
