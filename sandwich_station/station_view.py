"""In-memory view state standing in for the game's render, audio and model systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from sandwich_station.config import OPTIONS_CONTAINER, SANDWICH_CONTAINER
from sandwich_station.data import display_name_for
from sandwich_station.debug_log import DebugLog
from sandwich_station.models import AudioCue, Grid, Ingredient, IngredientCategory, PopUpKind


@dataclass(frozen=True)
class SubmittedSandwich:
    """A sandwich handed over, with the counterpart it went to."""

    ingredients: tuple[Ingredient, ...]
    counterpart: str


class StationView:
    """Implements every collaborator interface as state read back by the app.

    Each change calls `on_change` so the host can redraw; pop-ups go to
    `on_popup` and never block the caller.
    """

    def __init__(
        self,
        on_change: Callable[[], None] | None = None,
        on_popup: Callable[[PopUpKind], None] | None = None,
        counterpart_name: Callable[[], str] | None = None,
        log: DebugLog | None = None,
    ) -> None:
        self.on_change = on_change or (lambda: None)
        self.on_popup = on_popup or (lambda kind: None)
        self.counterpart_name = counterpart_name or (lambda: "player")
        self._log = log or DebugLog(None)

        self.options_grid: Grid | None = None
        self.highlighted: tuple[int, int] | None = None
        self.sandwich_panel: list[Ingredient] = []
        self.plate_stack: list[Ingredient] = []
        self.lifted: Ingredient = Ingredient.NONE
        self.last_cue = ""
        self.last_popup: PopUpKind | None = None
        self.submitted: list[SubmittedSandwich] = []

    # Render

    def layout_grid(self, grid: Grid, container: str) -> None:
        if container == OPTIONS_CONTAINER:
            self.options_grid = grid
            self.highlighted = None
        self.on_change()

    def highlight(self, row: int, column: int) -> None:
        if self.options_grid is None:
            return
        self.highlighted = (row, column)
        self.on_change()

    def clear_container(self, container: str) -> None:
        if container == OPTIONS_CONTAINER:
            self.options_grid = None
            self.highlighted = None
        elif container == SANDWICH_CONTAINER:
            self.sandwich_panel.clear()
        self.on_change()

    def append_ingredient(self, container: str, ingredient: Ingredient) -> None:
        if container == SANDWICH_CONTAINER:
            self.sandwich_panel.append(ingredient)
        self.on_change()

    # Audio

    def play(self, cue: AudioCue, category: IngredientCategory | None = None) -> None:
        self.last_cue = cue.value if category is None else f"{cue.value}:{category.value}"
        self._log.write(f"audio cue={self.last_cue}")
        self.on_change()

    # Animation

    def select_ingredient(self, ingredient: Ingredient) -> None:
        self.lifted = ingredient
        self.on_change()

    def lower_all(self) -> None:
        self.lifted = Ingredient.NONE
        self.on_change()

    # PopUp

    def show(self, kind: PopUpKind) -> None:
        self.last_popup = kind
        self._log.write(f"popup kind={kind.value}")
        self.on_popup(kind)

    # Submission

    def handle(self, ingredients: Sequence[Ingredient]) -> None:
        sandwich = SubmittedSandwich(ingredients=tuple(ingredients), counterpart=self.counterpart_name())
        self.submitted.append(sandwich)
        names = ", ".join(display_name_for(ingredient) for ingredient in sandwich.ingredients)
        self._log.write(f"submission counterpart={sandwich.counterpart} ingredients=[{names}]")
        self.on_change()

    # Model

    def drop_ingredient(self, ingredient: Ingredient) -> None:
        self.plate_stack.append(ingredient)
        self.on_change()

    def clear_plate(self) -> None:
        self.plate_stack.clear()
        self.on_change()
