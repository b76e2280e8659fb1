"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Header, Static

from sandwich_station.collaborators import Collaborators
from sandwich_station.constant import CATEGORY_KEYS
from sandwich_station.data import display_name_for
from sandwich_station.debug_log import DebugLog
from sandwich_station.models import (
    Counterpart,
    IngredientCategory,
    InputEvent,
    InputOutcome,
    PopUpKind,
    SelectionContext,
    TableState,
)
from sandwich_station.popup_modal import PopUpModal
from sandwich_station.rendering import (
    format_category_bar,
    format_grid,
    format_plate_stack,
    format_sandwich_panel,
)
from sandwich_station.router import InputRouter, build_router
from sandwich_station.station_view import StationView

_COUNTERPART_ORDER = (Counterpart.PLAYER, Counterpart.CUSTOMER, Counterpart.ROBOT)


class SandwichStationApp(App):
    """A Textual app that stands in for the adaptive controller at the sandwich counter."""

    TITLE = "Sandwich Station"
    SUB_TITLE = "Bread / Meat / Cheese / Veggie / Sauce"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #options-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #sandwich-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #category-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 3;
    }

    #options {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #sandwich-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #plate {
        height: auto;
        padding: 0 1;
    }

    #status {
        height: 3;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        *[(key, f"press_category('{category_id}')", category_id.title()) for key, category_id in CATEGORY_KEYS.items()],
        ("up", "press_direction('up')", "Up"),
        ("down", "press_direction('down')", "Down"),
        ("left", "press_direction('left')", "Left"),
        ("right", "press_direction('right')", "Right"),
        ("enter", "press_plate", "Plate"),
        ("p", "press_plate", "Plate"),
        Binding("ctrl+s", "press_submit", "Submit", priority=True),
        ("x", "press_trash", "Trash"),
        ("t", "toggle_customer_speaking", "Customer speaking"),
        ("n", "next_counterpart", "Next counterpart"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, log: DebugLog | None = None) -> None:
        super().__init__()
        self._debug_log = log if log is not None else DebugLog.from_env()
        self.table = TableState()
        self.controller_selection = SelectionContext("adaptive_controller")
        self.debug_selection = SelectionContext("debug_keyboard")
        self.station_view = StationView(
            on_change=self._refresh_all,
            on_popup=self._show_popup,
            counterpart_name=lambda: self.table.current_counterpart.value,
            log=self._debug_log,
        )
        collaborators = Collaborators(
            render=self.station_view,
            audio=self.station_view,
            animation=self.station_view,
            popup=self.station_view,
            submission=self.station_view,
            model=self.station_view,
            game_state=self.table,
        )
        self.router: InputRouter = build_router(
            collaborators,
            self.controller_selection,
            self.debug_selection,
            log=self._debug_log,
        )
        self._debug_log.write("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="options-pane"):
                yield Static(id="category-bar")
                yield Static(id="options")
            with Vertical(id="sandwich-pane"):
                yield Static("Sandwich", classes="pane-title")
                yield Static("(empty plate)", id="sandwich-list")
                yield Static(id="plate")
        yield Static(id="status")

    def on_mount(self) -> None:
        self._refresh_all()

    def action_press_category(self, category_id: str) -> None:
        self._route_event(InputEvent.category_pressed(IngredientCategory(category_id)))

    def action_press_direction(self, direction: str) -> None:
        self._route_event(InputEvent.direction_pressed(direction))

    def action_press_plate(self) -> None:
        self._route_event(InputEvent.plate_pressed())

    def action_press_submit(self) -> None:
        self._route_event(InputEvent.submit_pressed())

    def action_press_trash(self) -> None:
        self._route_event(InputEvent.trash_pressed())

    def action_toggle_customer_speaking(self) -> None:
        if isinstance(self.screen, PopUpModal):
            return
        self.table.customer_speaking = not self.table.customer_speaking
        self._debug_log.write(f"table customer_speaking={self.table.customer_speaking}")
        self._refresh_status()

    def action_next_counterpart(self) -> None:
        if isinstance(self.screen, PopUpModal):
            return
        idx = _COUNTERPART_ORDER.index(self.table.current_counterpart)
        self.table.current_counterpart = _COUNTERPART_ORDER[(idx + 1) % len(_COUNTERPART_ORDER)]
        self._debug_log.write(f"table counterpart={self.table.current_counterpart.value}")
        self._refresh_status()

    def _route_event(self, event: InputEvent) -> InputOutcome | None:
        # While a pop-up is up, the modal owns the keyboard.
        if isinstance(self.screen, PopUpModal):
            return None
        outcome = self.router.handle(event)
        self._debug_log.write(f"input kind={event.kind.value} outcome={outcome.value}")
        return outcome

    def _show_popup(self, kind: PopUpKind) -> None:
        self.push_screen(PopUpModal(kind))

    def _refresh_all(self) -> None:
        try:
            self.query_one("#category-bar", Static).update(
                format_category_bar(self.router.cursor.active_category)
            )
            self.query_one("#options", Static).update(
                format_grid(self.station_view.options_grid, self.station_view.highlighted)
            )
            self.query_one("#sandwich-list", Static).update(
                format_sandwich_panel(self.station_view.sandwich_panel, self.router.session.capacity)
            )
            self.query_one("#plate", Static).update(format_plate_stack(self.station_view.plate_stack))
        except NoMatches:
            return
        self._refresh_status()

    def _refresh_status(self) -> None:
        try:
            status = self.query_one("#status", Static)
        except NoMatches:
            return

        text = Text()
        text.append(f"Serving: {self.table.current_counterpart.value.title()}")
        if self.table.customer_speaking:
            text.append("  (speaking)", style="bold #f2d04b")
        text.append(f"  Cue: {self.station_view.last_cue or '-'}")
        text.append(f"  Held: {display_name_for(self.controller_selection.selected_ingredient)}")
        if self.station_view.submitted:
            last = self.station_view.submitted[-1]
            text.append(f"\nLast served to {last.counterpart}: ")
            text.append(", ".join(display_name_for(ingredient) for ingredient in last.ingredients), style="dim")
        status.update(text)
