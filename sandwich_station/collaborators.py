"""Interfaces of the systems the input layer drives but does not own."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from sandwich_station.models import AudioCue, Counterpart, Grid, Ingredient, IngredientCategory, PopUpKind


class Render(Protocol):
    def layout_grid(self, grid: Grid, container: str) -> None: ...

    def highlight(self, row: int, column: int) -> None: ...

    def clear_container(self, container: str) -> None: ...

    def append_ingredient(self, container: str, ingredient: Ingredient) -> None: ...


class Audio(Protocol):
    def play(self, cue: AudioCue, category: IngredientCategory | None = None) -> None: ...


class Animation(Protocol):
    def select_ingredient(self, ingredient: Ingredient) -> None: ...

    def lower_all(self) -> None: ...


class PopUp(Protocol):
    def show(self, kind: PopUpKind) -> None: ...


class Submission(Protocol):
    def handle(self, ingredients: Sequence[Ingredient]) -> None: ...


class Model(Protocol):
    def drop_ingredient(self, ingredient: Ingredient) -> None: ...

    def clear_plate(self) -> None: ...


class GameState(Protocol):
    customer_speaking: bool
    current_counterpart: Counterpart


@dataclass
class Collaborators:
    """Handles injected into the cursor, session and router at construction time."""

    render: Render
    audio: Audio
    animation: Animation
    popup: PopUp
    submission: Submission
    model: Model
    game_state: GameState
