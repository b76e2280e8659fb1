"""Tests for the terminal host's view state and rendering helpers."""

from __future__ import annotations

from sandwich_station.config import OPTIONS_CONTAINER, SANDWICH_CONTAINER
from sandwich_station.data import grid_for
from sandwich_station.models import AudioCue, Ingredient, IngredientCategory, PopUpKind
from sandwich_station.rendering import (
    format_category_bar,
    format_grid,
    format_ingredient_label,
    format_plate_stack,
    format_sandwich_panel,
    ingredient_caption,
)
from sandwich_station.station_view import StationView


class TestStationView:
    def test_grid_highlight_and_clear(self) -> None:
        changes: list[int] = []
        view = StationView(on_change=lambda: changes.append(1))
        grid = grid_for(IngredientCategory.VEGGIE)

        view.highlight(0, 0)
        assert view.highlighted is None

        view.layout_grid(grid, OPTIONS_CONTAINER)
        view.highlight(1, 0)
        assert view.options_grid == grid
        assert view.highlighted == (1, 0)

        view.clear_container(OPTIONS_CONTAINER)
        assert view.options_grid is None
        assert view.highlighted is None
        assert len(changes) == 3

    def test_sandwich_panel_and_plate_are_separate(self) -> None:
        view = StationView()
        view.append_ingredient(SANDWICH_CONTAINER, Ingredient.PATTY)
        view.drop_ingredient(Ingredient.PATTY)

        view.clear_container(SANDWICH_CONTAINER)

        assert view.sandwich_panel == []
        assert view.plate_stack == [Ingredient.PATTY]
        view.clear_plate()
        assert view.plate_stack == []

    def test_popups_are_forwarded(self) -> None:
        shown: list[PopUpKind] = []
        view = StationView(on_popup=shown.append)

        view.show(PopUpKind.INGREDIENT_LIMIT)

        assert shown == [PopUpKind.INGREDIENT_LIMIT]
        assert view.last_popup is PopUpKind.INGREDIENT_LIMIT

    def test_audio_and_animation_state(self) -> None:
        view = StationView()
        view.play(AudioCue.DROP_ON_PLATE, IngredientCategory.SAUCE)
        view.select_ingredient(Ingredient.MAYO)
        assert view.last_cue == "drop_on_plate:sauce"
        assert view.lifted is Ingredient.MAYO

        view.play(AudioCue.TRASH)
        view.lower_all()
        assert view.last_cue == "trash"
        assert view.lifted is Ingredient.NONE

    def test_submission_records_counterpart(self) -> None:
        view = StationView(counterpart_name=lambda: "robot")
        view.handle([Ingredient.WHITE_BREAD, Ingredient.KETCHUP])

        assert len(view.submitted) == 1
        assert view.submitted[0].ingredients == (Ingredient.WHITE_BREAD, Ingredient.KETCHUP)
        assert view.submitted[0].counterpart == "robot"


class TestRendering:
    def test_grid_marks_highlight(self) -> None:
        text = format_grid(grid_for(IngredientCategory.BREAD), (1, 0))
        first, second = text.plain.splitlines()
        assert first.startswith("  White Bread")
        assert second.startswith("➤ Whole Wheat")

    def test_closed_grid_prompt(self) -> None:
        assert "category" in format_grid(None, None).plain

    def test_caption_includes_asset_key(self) -> None:
        assert ingredient_caption(Ingredient.SWISS) == "Swiss (swiss)"
        assert ingredient_caption(Ingredient.NONE) == "None"

    def test_ingredient_label_has_category_tag(self) -> None:
        assert format_ingredient_label(Ingredient.LETTUCE).plain == "V Lettuce"
        assert format_ingredient_label(Ingredient.NONE).plain == "None"

    def test_sandwich_panel(self) -> None:
        assert format_sandwich_panel([], 10).plain == "(empty plate)"
        text = format_sandwich_panel([Ingredient.WHITE_BREAD, Ingredient.PATTY], 10).plain
        assert "1. B White Bread" in text
        assert "2. M Patty" in text
        assert text.endswith("2/10")

    def test_plate_stack_shows_top_first(self) -> None:
        lines = format_plate_stack([Ingredient.WHITE_BREAD, Ingredient.CHEDDAR]).plain.splitlines()
        assert lines[0].strip() == "Cheddar"
        assert lines[1].strip() == "White Bread"

    def test_category_bar_lists_every_button(self) -> None:
        plain = format_category_bar(IngredientCategory.MEAT).plain
        for label in ("[B] Bread", "[M] Meat", "[C] Cheese", "[V] Veggie", "[S] Sauce"):
            assert label in plain
