"""Pop-up modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from sandwich_station.constant import POPUP_MESSAGES
from sandwich_station.models import PopUpKind


class PopUpModal(ModalScreen[None]):
    """Centered notice for a blocked action. Any key closes it."""

    BINDINGS = [
        ("escape", "close", "Close"),
    ]

    CSS = """
    PopUpModal {
        align: center middle;
        background: $background 60%;
    }

    #popup-dialog {
        width: 52;
        height: auto;
        border: round $warning;
        background: $panel;
        padding: 1 2;
    }

    #popup-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #popup-body {
        color: white;
        margin-bottom: 1;
    }

    #popup-help {
        color: #dddddd;
    }
    """

    def __init__(self, kind: PopUpKind) -> None:
        super().__init__()
        self.kind = kind
        self._acknowledged = False

    def compose(self) -> ComposeResult:
        message = POPUP_MESSAGES.get(self.kind.value, {})
        with Container(id="popup-dialog"):
            yield Static(message.get("title", "Notice"), id="popup-title")
            yield Static(message.get("body", self.kind.value.replace("_", " ")), id="popup-body")
            yield Static("Press any key to continue.", id="popup-help")

    def on_key(self, event: Key) -> None:
        self.action_close()
        event.stop()

    def action_close(self) -> None:
        if self._acknowledged:
            return
        self._acknowledged = True
        self.dismiss()
