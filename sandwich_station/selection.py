"""Broadcast of the current pick to every input source's selection holder."""

from __future__ import annotations

from sandwich_station.models import Ingredient, IngredientCategory, SelectionContext


class SelectionHub:
    """Keeps all registered SelectionContext holders in sync.

    The first registered holder is the primary one; router checks read it.
    Every write goes to all holders within the same call.
    """

    def __init__(self, *holders: SelectionContext) -> None:
        self._holders: list[SelectionContext] = list(holders) or [SelectionContext()]

    @property
    def holders(self) -> tuple[SelectionContext, ...]:
        return tuple(self._holders)

    @property
    def primary(self) -> SelectionContext:
        return self._holders[0]

    def register(self, holder: SelectionContext) -> None:
        if any(existing is holder for existing in self._holders):
            return
        holder.selected_ingredient = self.primary.selected_ingredient
        holder.selected_ingredient_category = self.primary.selected_ingredient_category
        self._holders.append(holder)

    def select(self, ingredient: Ingredient, category: IngredientCategory | None = None) -> None:
        for holder in self._holders:
            holder.selected_ingredient = ingredient
            if category is not None:
                holder.selected_ingredient_category = category

    def clear(self) -> None:
        for holder in self._holders:
            holder.clear()
