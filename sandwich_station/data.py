"""Static ingredient catalog: category grids, asset keys and display names."""

from __future__ import annotations

from dataclasses import dataclass

from sandwich_station.constant import (
    CATEGORY_DISPLAY_NAMES,
    INGREDIENT_GRID_BY_CATEGORY,
    INGREDIENT_META_BY_ID as _INGREDIENT_META_BY_ID_RAW,
)
from sandwich_station.models import Grid, Ingredient, IngredientCategory


class CatalogConfigurationError(RuntimeError):
    """Raised at import time when the static catalog is inconsistent."""


@dataclass(frozen=True)
class IngredientMeta:
    """Canonical text metadata for an ingredient."""

    display_name: str
    asset_key: str | None = None


def build_grid_catalog(raw: dict[str, list[list[str]]]) -> dict[IngredientCategory, Grid]:
    """Convert raw grid tables into typed grids, failing loudly on gaps."""
    grids: dict[IngredientCategory, Grid] = {}
    owner: dict[Ingredient, IngredientCategory] = {}

    for category in IngredientCategory:
        if category is IngredientCategory.NONE:
            continue
        rows = raw.get(category.value)
        if not rows:
            raise CatalogConfigurationError(f"No ingredient grid configured for category {category.value!r}")

        typed_rows: list[tuple[Ingredient, ...]] = []
        for row_idx, row in enumerate(rows):
            if not row:
                raise CatalogConfigurationError(f"Grid {category.value!r} row {row_idx} is empty")
            typed_row: list[Ingredient] = []
            for ingredient_id in row:
                try:
                    ingredient = Ingredient(ingredient_id)
                except ValueError as exc:
                    raise CatalogConfigurationError(
                        f"Unknown ingredient {ingredient_id!r} in grid {category.value!r}"
                    ) from exc
                if ingredient is Ingredient.NONE:
                    raise CatalogConfigurationError(f"Grid {category.value!r} contains the empty ingredient")
                if ingredient in owner:
                    raise CatalogConfigurationError(
                        f"Ingredient {ingredient.value!r} appears in both {owner[ingredient].value!r} "
                        f"and {category.value!r}"
                    )
                owner[ingredient] = category
                typed_row.append(ingredient)
            typed_rows.append(tuple(typed_row))
        grids[category] = tuple(typed_rows)

    unknown = set(raw) - {category.value for category in grids}
    if unknown:
        raise CatalogConfigurationError(f"Grids configured for unknown categories: {', '.join(sorted(unknown))}")
    return grids


GRID_BY_CATEGORY: dict[IngredientCategory, Grid] = build_grid_catalog(INGREDIENT_GRID_BY_CATEGORY)

CATEGORY_BY_INGREDIENT: dict[Ingredient, IngredientCategory] = {
    ingredient: category
    for category, grid in GRID_BY_CATEGORY.items()
    for row in grid
    for ingredient in row
}

INGREDIENT_META_BY_ID: dict[Ingredient, IngredientMeta] = {
    Ingredient(ingredient_id): IngredientMeta(
        display_name=str(meta["display_name"]),
        asset_key=str(meta["asset_key"]) if meta.get("asset_key") is not None else None,
    )
    for ingredient_id, meta in _INGREDIENT_META_BY_ID_RAW.items()
}


def grid_for(category: IngredientCategory) -> Grid:
    """Return the fixed grid of items for a category."""
    if category is IngredientCategory.NONE:
        raise ValueError("The empty category has no ingredient grid")
    return GRID_BY_CATEGORY[category]


def asset_key_for(ingredient: Ingredient) -> str | None:
    """Return the display asset key, or None when the ingredient is unmapped."""
    meta = INGREDIENT_META_BY_ID.get(ingredient)
    if meta is None:
        return None
    return meta.asset_key


def category_for(ingredient: Ingredient) -> IngredientCategory:
    """Return the category whose grid holds the ingredient."""
    return CATEGORY_BY_INGREDIENT.get(ingredient, IngredientCategory.NONE)


def display_name_for(ingredient: Ingredient) -> str:
    meta = INGREDIENT_META_BY_ID.get(ingredient)
    if meta is None:
        return ingredient.value.replace("_", " ").title()
    return meta.display_name


def display_name_for_category(category: IngredientCategory) -> str:
    return CATEGORY_DISPLAY_NAMES.get(category.value, category.value.title())
