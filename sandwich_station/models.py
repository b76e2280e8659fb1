"""Domain models for the sandwich station."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Ingredient(str, Enum):
    """A specific selectable item. NONE means nothing is held."""

    NONE = "none"
    WHITE_BREAD = "white_bread"
    WHOLE_WHEAT_BREAD = "whole_wheat_bread"
    PATTY = "patty"
    BACON = "bacon"
    CHEDDAR = "cheddar"
    SWISS = "swiss"
    LETTUCE = "lettuce"
    TOMATO = "tomato"
    ONION = "onion"
    MUSHROOM = "mushroom"
    KETCHUP = "ketchup"
    MUSTARD = "mustard"
    MAYO = "mayo"


class IngredientCategory(str, Enum):
    """Top-level ingredient grouping bound to one controller button."""

    NONE = "none"
    BREAD = "bread"
    MEAT = "meat"
    CHEESE = "cheese"
    VEGGIE = "veggie"
    SAUCE = "sauce"


class PopUpKind(str, Enum):
    NO_SELECTED_INGREDIENT = "no_selected_ingredient"
    EMPTY_PLATE_SUBMIT_PLAYER = "empty_plate_submit_player"
    EMPTY_PLATE_SUBMIT_CUSTOMER = "empty_plate_submit_customer"
    EMPTY_PLATE_SUBMIT_ROBOT = "empty_plate_submit_robot"
    CUSTOMER_SPEAKING = "customer_speaking"
    INGREDIENT_LIMIT = "ingredient_limit"


class AudioCue(str, Enum):
    SWITCH = "switch"
    CLICK = "click"
    DESELECT = "deselect"
    DROP_ON_PLATE = "drop_on_plate"
    SUBMIT = "submit"
    TRASH = "trash"
    LIMIT_WARNING = "limit_warning"


class Counterpart(str, Enum):
    """Who the finished sandwich is handed to."""

    PLAYER = "player"
    CUSTOMER = "customer"
    ROBOT = "robot"


class InputOutcome(str, Enum):
    """How an input event ended: applied, silently ignored, or blocked with a pop-up."""

    APPLIED = "applied"
    IGNORED = "ignored"
    BLOCKED = "blocked"


class ButtonKind(str, Enum):
    CATEGORY = "category"
    PLATE = "plate"
    SUBMIT = "submit"
    TRASH = "trash"
    DIRECTION = "direction"


Grid = tuple[tuple[Ingredient, ...], ...]

# (d_column, d_row); row index decreases upward.
DIRECTION_DELTAS: dict[str, tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


@dataclass(frozen=True)
class InputEvent:
    """A raw discrete button event from one input source."""

    kind: ButtonKind
    category: IngredientCategory = IngredientCategory.NONE
    d_row: int = 0
    d_column: int = 0

    @classmethod
    def category_pressed(cls, category: IngredientCategory) -> InputEvent:
        return cls(ButtonKind.CATEGORY, category=category)

    @classmethod
    def plate_pressed(cls) -> InputEvent:
        return cls(ButtonKind.PLATE)

    @classmethod
    def submit_pressed(cls) -> InputEvent:
        return cls(ButtonKind.SUBMIT)

    @classmethod
    def trash_pressed(cls) -> InputEvent:
        return cls(ButtonKind.TRASH)

    @classmethod
    def direction_pressed(cls, direction: str) -> InputEvent:
        d_column, d_row = DIRECTION_DELTAS[direction]
        return cls(ButtonKind.DIRECTION, d_row=d_row, d_column=d_column)


@dataclass(frozen=True)
class CursorState:
    """Snapshot of the grid cursor."""

    active_category: IngredientCategory = IngredientCategory.NONE
    grid: Grid | None = None
    row: int = 0
    column: int = 0


@dataclass
class SelectionContext:
    """The pick held by one input source, consumed by the plate button."""

    name: str = "primary"
    selected_ingredient: Ingredient = Ingredient.NONE
    selected_ingredient_category: IngredientCategory = IngredientCategory.NONE

    def clear(self) -> None:
        self.selected_ingredient = Ingredient.NONE
        self.selected_ingredient_category = IngredientCategory.NONE


@dataclass
class TableState:
    """Conversation state at the counter, owned by the dialogue layer."""

    customer_speaking: bool = False
    current_counterpart: Counterpart = Counterpart.PLAYER
