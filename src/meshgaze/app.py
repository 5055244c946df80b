"""Meshgaze Textual application."""

from __future__ import annotations

from textual.app import App

from meshgaze.config import AppConfig
from meshgaze.screens.dashboard import DashboardScreen
from meshgaze.store import NetworkStore


class MeshgazeApp(App):
    """Main Meshgaze TUI application."""

    TITLE = "Meshgaze"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("r", "refresh", "Refresh"),
        ("n", "next_instance", "Instance"),
        ("v", "show_portal_config", "Portal"),
        ("e", "show_events", "Events"),
        ("question_mark", "help", "Help"),
    ]

    def __init__(self, config: AppConfig, store: NetworkStore | None = None) -> None:
        super().__init__()
        self.config = config
        self.store = store if store is not None else NetworkStore(selected_id=config.instance)

    def on_mount(self) -> None:
        self.push_screen(DashboardScreen(config=self.config, store=self.store))

    def _delegate(self, action: str) -> None:
        """Delegate an action to the current screen if it supports it."""
        screen = self.screen
        method = getattr(screen, action, None)
        if method:
            method()

    def action_refresh(self) -> None:
        self._delegate("action_refresh")

    def action_next_instance(self) -> None:
        self._delegate("action_next_instance")

    def action_show_portal_config(self) -> None:
        self._delegate("action_show_portal_config")

    def action_show_events(self) -> None:
        self._delegate("action_show_events")

    def action_help(self) -> None:
        from meshgaze.screens.help_screen import HelpScreen

        self.push_screen(HelpScreen())
