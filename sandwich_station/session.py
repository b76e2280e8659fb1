"""The player's in-progress sandwich."""

from __future__ import annotations

from sandwich_station.collaborators import Collaborators
from sandwich_station.config import SANDWICH_CAPACITY, SANDWICH_CONTAINER
from sandwich_station.cursor import GridCursor
from sandwich_station.data import category_for
from sandwich_station.debug_log import DebugLog
from sandwich_station.models import AudioCue, Ingredient


class NoSelectionError(ValueError):
    """Raised when committing while no ingredient is held."""


class SandwichSession:
    """Ordered ingredients from the bottom slice up.

    The capacity is enforced by the router before a category can be opened,
    so commit itself never refuses a real ingredient.
    """

    def __init__(
        self,
        collaborators: Collaborators,
        cursor: GridCursor,
        capacity: int = SANDWICH_CAPACITY,
        log: DebugLog | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._cursor = cursor
        self.capacity = capacity
        self._log = log or DebugLog(None)
        self._ingredients: list[Ingredient] = []

    def __len__(self) -> int:
        return len(self._ingredients)

    @property
    def ingredients(self) -> tuple[Ingredient, ...]:
        return tuple(self._ingredients)

    @property
    def is_empty(self) -> bool:
        return not self._ingredients

    @property
    def is_full(self) -> bool:
        return len(self._ingredients) >= self.capacity

    def commit(self, ingredient: Ingredient) -> None:
        if ingredient is Ingredient.NONE:
            raise NoSelectionError("Cannot commit without a selected ingredient")

        self._collaborators.audio.play(AudioCue.DROP_ON_PLATE, category_for(ingredient))
        self._ingredients.append(ingredient)
        self._collaborators.render.append_ingredient(SANDWICH_CONTAINER, ingredient)
        self._collaborators.model.drop_ingredient(ingredient)
        self._log.write(f"session_commit ingredient={ingredient.value} size={len(self._ingredients)}")

    def submit(self) -> bool:
        """Hand the sandwich to the submission handler and reset; False when empty."""
        if not self._ingredients:
            self._log.write("session_submit_skipped reason=empty")
            return False

        submitted = list(self._ingredients)
        self._collaborators.submission.handle(submitted)
        self._ingredients.clear()
        self._cursor.close()
        self._collaborators.render.clear_container(SANDWICH_CONTAINER)
        self._collaborators.audio.play(AudioCue.SUBMIT)
        self._collaborators.model.clear_plate()
        self._log.write(f"session_submit size={len(submitted)}")
        return True

    def trash(self) -> None:
        dropped = len(self._ingredients)
        self._ingredients.clear()
        self._cursor.close()
        self._collaborators.render.clear_container(SANDWICH_CONTAINER)
        self._collaborators.audio.play(AudioCue.TRASH)
        self._collaborators.model.clear_plate()
        self._log.write(f"session_trash dropped={dropped}")
