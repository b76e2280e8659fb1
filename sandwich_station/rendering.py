"""Rendering helpers for the terminal host."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from sandwich_station.constant import CATEGORY_KEYS
from sandwich_station.data import asset_key_for, category_for, display_name_for, display_name_for_category
from sandwich_station.models import Grid, Ingredient, IngredientCategory

_BADGE_STYLES: dict[IngredientCategory, str] = {
    IngredientCategory.BREAD: "bold #2b1a06 on #e0b872",
    IngredientCategory.MEAT: "bold #ffffff on #b23a48",
    IngredientCategory.CHEESE: "bold #2b2300 on #f2d04b",
    IngredientCategory.VEGGIE: "bold #0b1f0f on #5fbf72",
    IngredientCategory.SAUCE: "bold #ffffff on #c4572a",
}


def badge_style(category: IngredientCategory) -> str:
    """Return a consistent badge style for category tags."""
    return _BADGE_STYLES.get(category, "bold #ffffff on #555555")


def ingredient_caption(ingredient: Ingredient) -> str:
    """Display name, with the asset key when one is configured."""
    name = display_name_for(ingredient)
    asset_key = asset_key_for(ingredient)
    if asset_key is None:
        return name
    return f"{name} ({asset_key.rsplit('/', 1)[-1]})"


def format_ingredient_label(ingredient: Ingredient) -> Text:
    """Render an ingredient with its colored category tag."""
    text = Text()
    category = category_for(ingredient)
    if category is not IngredientCategory.NONE:
        text.append(category.value[0].upper(), style=badge_style(category))
        text.append(" ")
    text.append(display_name_for(ingredient))
    return text


def format_category_bar(active: IngredientCategory) -> Text:
    """Render the category buttons, marking the open one."""
    text = Text()
    for idx, (key, category_id) in enumerate(CATEGORY_KEYS.items()):
        category = IngredientCategory(category_id)
        if idx > 0:
            text.append("  ")
        label = f"[{key.upper()}] {display_name_for_category(category)}"
        if category is active:
            text.append(label, style=badge_style(category))
        else:
            text.append(label, style="dim")
    return text


def format_grid(grid: Grid | None, highlight: tuple[int, int] | None) -> Text:
    """Render the open grid one row per line with a pointer on the highlighted cell."""
    if grid is None:
        return Text("Press a category button", style="dim")

    lines = Text()
    for row_idx, row in enumerate(grid):
        if row_idx > 0:
            lines.append("\n")
        for col_idx, ingredient in enumerate(row):
            if col_idx > 0:
                lines.append("   ")
            selected = highlight == (row_idx, col_idx)
            pointer = "➤ " if selected else "  "
            lines.append(pointer)
            lines.append(ingredient_caption(ingredient), style="bold" if selected else None)
    return lines


def format_sandwich_panel(ingredients: Sequence[Ingredient], capacity: int) -> Text:
    """Render committed ingredients in commit order."""
    if not ingredients:
        return Text("(empty plate)", style="dim")

    lines = Text()
    for idx, ingredient in enumerate(ingredients):
        if idx > 0:
            lines.append("\n")
        lines.append(f"{idx + 1}. ")
        lines.append_text(format_ingredient_label(ingredient))
    lines.append(f"\n\n{len(ingredients)}/{capacity}", style="dim")
    return lines


def format_plate_stack(ingredients: Sequence[Ingredient]) -> Text:
    """Render the physical stack with the top ingredient first."""
    text = Text()
    for ingredient in reversed(ingredients):
        text.append(f"  {display_name_for(ingredient)}\n")
    text.append("\\_________/", style="dim")
    return text
