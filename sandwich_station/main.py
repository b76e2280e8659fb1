"""Entry point for the sandwich-station Textual app."""

from __future__ import annotations

from sandwich_station.station_app import SandwichStationApp


def main() -> None:
    """Run the Textual application."""
    SandwichStationApp().run()


if __name__ == "__main__":
    main()
