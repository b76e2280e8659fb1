"""Grid cursor over the open ingredient category."""

from __future__ import annotations

from typing import Callable

from sandwich_station.collaborators import Collaborators
from sandwich_station.config import OPTIONS_CONTAINER
from sandwich_station.data import grid_for
from sandwich_station.debug_log import DebugLog
from sandwich_station.models import AudioCue, CursorState, Grid, Ingredient, IngredientCategory
from sandwich_station.selection import SelectionHub


class GridCursor:
    """Closed, or open on one category's grid at (row, column).

    Opening always starts at (0, 0). Moves are bounds-checked against the
    destination row, so jagged grids never leave the cursor past a row's end.
    """

    def __init__(
        self,
        collaborators: Collaborators,
        selection: SelectionHub,
        grid_source: Callable[[IngredientCategory], Grid] = grid_for,
        log: DebugLog | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._selection = selection
        self._grid_source = grid_source
        self._log = log or DebugLog(None)
        self._category = IngredientCategory.NONE
        self._grid: Grid | None = None
        self._row = 0
        self._column = 0

    @property
    def state(self) -> CursorState:
        return CursorState(active_category=self._category, grid=self._grid, row=self._row, column=self._column)

    @property
    def is_open(self) -> bool:
        return self._grid is not None

    @property
    def active_category(self) -> IngredientCategory:
        return self._category

    @property
    def current_ingredient(self) -> Ingredient:
        if self._grid is None:
            return Ingredient.NONE
        return self._grid[self._row][self._column]

    def open(self, category: IngredientCategory) -> None:
        grid = self._grid_source(category)
        render = self._collaborators.render

        render.clear_container(OPTIONS_CONTAINER)
        self._category = category
        self._grid = grid
        self._row = 0
        self._column = 0

        default_ingredient = grid[0][0]
        self._selection.select(default_ingredient, category)

        render.layout_grid(grid, OPTIONS_CONTAINER)
        render.highlight(0, 0)
        self._collaborators.animation.select_ingredient(default_ingredient)
        self._log.write(f"cursor_open category={category.value} selected={default_ingredient.value}")

    def close(self) -> None:
        self._category = IngredientCategory.NONE
        self._grid = None
        self._row = 0
        self._column = 0
        self._selection.clear()

        self._collaborators.render.clear_container(OPTIONS_CONTAINER)
        self._collaborators.animation.lower_all()
        self._log.write("cursor_close")

    def move(self, d_row: int, d_column: int) -> bool:
        """Step the cursor; returns False when the move was ignored."""
        if self._grid is None:
            self._log.write(f"cursor_move_ignored reason=closed d_row={d_row} d_column={d_column}")
            return False

        new_row = self._row + d_row
        new_column = self._column + d_column
        if not (0 <= new_row < len(self._grid)) or not (0 <= new_column < len(self._grid[new_row])):
            self._log.write(
                f"cursor_move_ignored reason=out_of_bounds from=({self._row},{self._column}) "
                f"to=({new_row},{new_column})"
            )
            return False

        self._row = new_row
        self._column = new_column
        ingredient = self._grid[new_row][new_column]
        self._selection.select(ingredient)

        self._collaborators.render.highlight(new_row, new_column)
        self._collaborators.audio.play(AudioCue.SWITCH)
        self._collaborators.animation.select_ingredient(ingredient)
        self._log.write(f"cursor_move to=({new_row},{new_column}) selected={ingredient.value}")
        return True
