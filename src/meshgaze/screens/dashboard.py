"""Node status screen composing all widgets with data refresh timers."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Static

from meshgaze.chips import info_chips
from meshgaze.collectors.instances import get_instances
from meshgaze.config import AppConfig
from meshgaze.models import PeerRoutePair
from meshgaze.sampler import RateSampler
from meshgaze.snapshot import assemble_snapshot, event_log_text, peer_count, portal_config_text
from meshgaze.store import NetworkStore
from meshgaze.widgets.header_bar import HeaderBar
from meshgaze.widgets.info_chips_bar import InfoChipsBar
from meshgaze.widgets.peer_table import PeerTable
from meshgaze.widgets.stats_bar import StatsBar

logger = logging.getLogger(__name__)


class DashboardScreen(Screen):
    """Node summary, live throughput and the route table for one instance."""

    def __init__(self, config: AppConfig, store: NetworkStore) -> None:
        super().__init__()
        self.config = config
        self.store = store
        self.sampler = RateSampler(
            self._current_snapshot,
            interval=config.rate_interval,
            on_update=self._on_rates,
            si=config.si_units,
            precision=config.precision,
        )
        self._error_msg: str | None = None
        self._instance_id: str | None = None

    def compose(self) -> ComposeResult:
        yield HeaderBar()
        yield InfoChipsBar()
        yield Static(id="error-banner")
        yield PeerTable(si=self.config.si_units, precision=self.config.precision)
        yield StatsBar()
        yield Footer()

    def on_mount(self) -> None:
        self.set_interval(self.config.poll_interval, self._poll_source)
        self.sampler.start(self.set_interval)
        self.call_after_refresh(self.action_refresh)

    def on_unmount(self) -> None:
        self.sampler.stop()

    @property
    def _header(self) -> HeaderBar:
        return self.query_one(HeaderBar)

    @property
    def _chips(self) -> InfoChipsBar:
        return self.query_one(InfoChipsBar)

    @property
    def _table(self) -> PeerTable:
        return self.query_one(PeerTable)

    @property
    def _stats(self) -> StatsBar:
        return self.query_one(StatsBar)

    @property
    def _banner(self) -> Static:
        return self.query_one("#error-banner", Static)

    @property
    def error_msg(self) -> str | None:
        return self._error_msg

    # --- Data polling ---

    def _poll_source(self) -> None:
        if not (self.config.source_path or self.config.source_command):
            return

        def _work() -> None:
            listing = get_instances(
                path=self.config.source_path,
                command=self.config.source_command,
                timeout=self.config.source_timeout,
            )
            if listing is None:
                return
            self.store.update(listing.instances, listing.selected)
            self.app.call_from_thread(self._refresh_view)

        self.run_worker(_work, thread=True, exclusive=True, group="source")

    def _current_snapshot(self) -> list[PeerRoutePair]:
        return assemble_snapshot(self.store.current_detail())

    # --- UI refresh (main thread) ---

    def _refresh_view(self) -> None:
        instance = self.store.current()
        self._header.update_instance(instance, len(self.store.instance_ids))
        self._track_instance(instance.instance_id if instance is not None else None)

        if instance is not None and instance.error_msg:
            self._show_error(instance.error_msg)
            return
        self._clear_error()

        detail = instance.detail if instance is not None else None
        snapshot = assemble_snapshot(detail)
        self._table.update_data(snapshot)
        self._chips.update_chips(info_chips(detail.my_node_info) if detail else [])
        self._stats.update_peer_count(peer_count(snapshot))

    def _track_instance(self, instance_id: str | None) -> None:
        if instance_id == self._instance_id:
            return
        # Only a switch rebases; the first instance keeps the zero baseline
        if self._instance_id is not None:
            self.sampler.reset()
        self._instance_id = instance_id

    def _show_error(self, message: str) -> None:
        if self._error_msg is None:
            logger.debug("Instance entered error state: %s", message)
            self.sampler.stop()
        self._error_msg = message
        self._banner.update(f"Error: {message}")
        self._banner.add_class("visible")
        self._table.add_class("hidden")
        self._chips.update_chips([])

    def _clear_error(self) -> None:
        if self._error_msg is None:
            return
        self._error_msg = None
        self._banner.update("")
        self._banner.remove_class("visible")
        self._table.remove_class("hidden")
        self.sampler.reset()
        self.sampler.start(self.set_interval)

    def _on_rates(self, tx_rate: str, rx_rate: str) -> None:
        self._stats.update_rates(tx_rate, rx_rate)

    # --- Actions ---

    def action_refresh(self) -> None:
        self._poll_source()
        self._refresh_view()

    def action_next_instance(self) -> None:
        selected = self.store.select_next()
        if selected is None:
            self.notify("No network instances", severity="warning")
            return
        self.notify(f"Instance: {selected}")
        self._refresh_view()

    def action_show_portal_config(self) -> None:
        from meshgaze.screens.text_dialog import TextDialog

        detail = self.store.current_detail()
        if detail is None:
            self.notify("No node info yet", severity="warning")
            return
        body = portal_config_text(detail.my_node_info, self.config.portal_help_url)
        self.app.push_screen(
            TextDialog("VPN Portal Config", body, empty_text="VPN portal is not configured.")
        )

    def action_show_events(self) -> None:
        from meshgaze.screens.text_dialog import TextDialog

        detail = self.store.current_detail()
        if detail is None:
            self.notify("No node info yet", severity="warning")
            return
        self.app.push_screen(
            TextDialog("Event Log", event_log_text(detail), empty_text="No events.")
        )
