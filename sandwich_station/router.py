"""Button events to cursor and session transitions."""

from __future__ import annotations

from sandwich_station.collaborators import Collaborators
from sandwich_station.config import SANDWICH_CAPACITY
from sandwich_station.cursor import GridCursor
from sandwich_station.debug_log import DebugLog
from sandwich_station.models import (
    AudioCue,
    ButtonKind,
    Counterpart,
    Ingredient,
    IngredientCategory,
    InputEvent,
    InputOutcome,
    PopUpKind,
    SelectionContext,
)
from sandwich_station.selection import SelectionHub
from sandwich_station.session import SandwichSession

EMPTY_SUBMIT_POPUP_BY_COUNTERPART: dict[Counterpart, PopUpKind] = {
    Counterpart.PLAYER: PopUpKind.EMPTY_PLATE_SUBMIT_PLAYER,
    Counterpart.CUSTOMER: PopUpKind.EMPTY_PLATE_SUBMIT_CUSTOMER,
    Counterpart.ROBOT: PopUpKind.EMPTY_PLATE_SUBMIT_ROBOT,
}


def classify_empty_submit(counterpart: Counterpart) -> PopUpKind:
    """Pick the pop-up for handing over an empty plate."""
    return EMPTY_SUBMIT_POPUP_BY_COUNTERPART[counterpart]


class InputRouter:
    """Applies gating rules, then dispatches to the cursor or the session."""

    def __init__(
        self,
        collaborators: Collaborators,
        selection: SelectionHub,
        cursor: GridCursor,
        session: SandwichSession,
        log: DebugLog | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._selection = selection
        self._cursor = cursor
        self._session = session
        self._log = log or DebugLog(None)

    @property
    def _customer_speaking(self) -> bool:
        return bool(self._collaborators.game_state.customer_speaking)

    def handle(self, event: InputEvent) -> InputOutcome:
        if event.kind is ButtonKind.CATEGORY:
            return self.press_category(event.category)
        if event.kind is ButtonKind.PLATE:
            return self.press_plate()
        if event.kind is ButtonKind.SUBMIT:
            return self.press_submit()
        if event.kind is ButtonKind.TRASH:
            return self.press_trash()
        return self.press_direction(event.d_column, event.d_row)

    def press_category(self, category: IngredientCategory) -> InputOutcome:
        if category is IngredientCategory.NONE:
            raise ValueError("Category buttons must name a real category")

        if self._customer_speaking:
            self._collaborators.popup.show(PopUpKind.CUSTOMER_SPEAKING)
            self._log.write(f"category_blocked category={category.value} reason=customer_speaking")
            return InputOutcome.BLOCKED

        if self._session.is_full:
            self._collaborators.popup.show(PopUpKind.INGREDIENT_LIMIT)
            self._collaborators.audio.play(AudioCue.LIMIT_WARNING)
            self._log.write(f"category_blocked category={category.value} reason=limit size={len(self._session)}")
            return InputOutcome.BLOCKED

        # Pressing the held category again puts it back.
        if self._selection.primary.selected_ingredient_category is category:
            self._cursor.close()
            self._collaborators.audio.play(AudioCue.DESELECT)
            self._log.write(f"category_deselect category={category.value}")
            return InputOutcome.APPLIED

        self._cursor.open(category)
        self._collaborators.audio.play(AudioCue.CLICK)
        return InputOutcome.APPLIED

    def press_plate(self) -> InputOutcome:
        ingredient = self._selection.primary.selected_ingredient
        if ingredient is Ingredient.NONE:
            self._collaborators.popup.show(PopUpKind.NO_SELECTED_INGREDIENT)
            self._log.write("plate_blocked reason=no_selection")
            return InputOutcome.BLOCKED

        self._session.commit(ingredient)
        # Held ingredient is consumed; its category must be reopened to pick again.
        self._cursor.close()
        return InputOutcome.APPLIED

    def press_submit(self) -> InputOutcome:
        if self._customer_speaking:
            self._log.write("submit_ignored reason=customer_speaking")
            return InputOutcome.IGNORED

        if self._session.is_empty:
            counterpart = self._collaborators.game_state.current_counterpart
            self._collaborators.popup.show(classify_empty_submit(counterpart))
            self._log.write(f"submit_blocked reason=empty counterpart={counterpart.value}")
            return InputOutcome.BLOCKED

        self._session.submit()
        return InputOutcome.APPLIED

    def press_trash(self) -> InputOutcome:
        if self._customer_speaking:
            self._log.write("trash_ignored reason=customer_speaking")
            return InputOutcome.IGNORED

        self._session.trash()
        return InputOutcome.APPLIED

    def press_direction(self, d_column: int, d_row: int) -> InputOutcome:
        if self._cursor.move(d_row, d_column):
            return InputOutcome.APPLIED
        return InputOutcome.IGNORED

    @property
    def selection(self) -> SelectionHub:
        return self._selection

    @property
    def cursor(self) -> GridCursor:
        return self._cursor

    @property
    def session(self) -> SandwichSession:
        return self._session


def build_router(
    collaborators: Collaborators,
    *holders: SelectionContext,
    capacity: int = SANDWICH_CAPACITY,
    log: DebugLog | None = None,
) -> InputRouter:
    """Wire a hub, cursor and session around the given selection holders."""
    selection = SelectionHub(*holders)
    cursor = GridCursor(collaborators, selection, log=log)
    session = SandwichSession(collaborators, cursor, capacity=capacity, log=log)
    return InputRouter(collaborators, selection, cursor, session, log=log)
