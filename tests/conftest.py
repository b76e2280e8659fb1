"""Shared pytest fixtures and fakes for sandwich-station tests."""

from __future__ import annotations

from typing import Any, Sequence

import pytest

from sandwich_station.collaborators import Collaborators
from sandwich_station.cursor import GridCursor
from sandwich_station.models import (
    AudioCue,
    Grid,
    Ingredient,
    IngredientCategory,
    PopUpKind,
    SelectionContext,
    TableState,
)
from sandwich_station.router import InputRouter
from sandwich_station.selection import SelectionHub
from sandwich_station.session import SandwichSession


class RecordingCollaborators:
    """Implements every collaborator interface by recording calls in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.submitted: list[list[Ingredient]] = []

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def popups(self) -> list[PopUpKind]:
        return [call[1] for call in self.calls if call[0] == "popup"]

    def cues(self) -> list[tuple[AudioCue, IngredientCategory | None]]:
        return [(call[1], call[2]) for call in self.calls if call[0] == "play"]

    def layout_grid(self, grid: Grid, container: str) -> None:
        self.calls.append(("layout_grid", grid, container))

    def highlight(self, row: int, column: int) -> None:
        self.calls.append(("highlight", row, column))

    def clear_container(self, container: str) -> None:
        self.calls.append(("clear_container", container))

    def append_ingredient(self, container: str, ingredient: Ingredient) -> None:
        self.calls.append(("append_ingredient", container, ingredient))

    def play(self, cue: AudioCue, category: IngredientCategory | None = None) -> None:
        self.calls.append(("play", cue, category))

    def select_ingredient(self, ingredient: Ingredient) -> None:
        self.calls.append(("select_ingredient", ingredient))

    def lower_all(self) -> None:
        self.calls.append(("lower_all",))

    def show(self, kind: PopUpKind) -> None:
        self.calls.append(("popup", kind))

    def handle(self, ingredients: Sequence[Ingredient]) -> None:
        self.submitted.append(list(ingredients))
        self.calls.append(("submit", tuple(ingredients)))

    def drop_ingredient(self, ingredient: Ingredient) -> None:
        self.calls.append(("drop_ingredient", ingredient))

    def clear_plate(self) -> None:
        self.calls.append(("clear_plate",))


@pytest.fixture
def recorder() -> RecordingCollaborators:
    return RecordingCollaborators()


@pytest.fixture
def table() -> TableState:
    return TableState()


@pytest.fixture
def collaborators(recorder: RecordingCollaborators, table: TableState) -> Collaborators:
    return Collaborators(
        render=recorder,
        audio=recorder,
        animation=recorder,
        popup=recorder,
        submission=recorder,
        model=recorder,
        game_state=table,
    )


@pytest.fixture
def controller() -> SelectionContext:
    return SelectionContext("adaptive_controller")


@pytest.fixture
def debug_keyboard() -> SelectionContext:
    return SelectionContext("debug_keyboard")


@pytest.fixture
def selection(controller: SelectionContext, debug_keyboard: SelectionContext) -> SelectionHub:
    return SelectionHub(controller, debug_keyboard)


@pytest.fixture
def cursor(collaborators: Collaborators, selection: SelectionHub) -> GridCursor:
    return GridCursor(collaborators, selection)


@pytest.fixture
def session(collaborators: Collaborators, cursor: GridCursor) -> SandwichSession:
    return SandwichSession(collaborators, cursor)


@pytest.fixture
def router(
    collaborators: Collaborators,
    selection: SelectionHub,
    cursor: GridCursor,
    session: SandwichSession,
) -> InputRouter:
    return InputRouter(collaborators, selection, cursor, session)
