"""Header bar widget showing node hostname, version and instance."""

from __future__ import annotations

from textual.widgets import Static

from meshgaze.models import NetworkInstance


class HeaderBar(Static):
    """Top bar: hostname, node version, selected instance."""

    DEFAULT_CSS = """
    HeaderBar {
        dock: top;
        height: 1;
        background: $accent;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._instance: NetworkInstance | None = None
        self._instance_count = 0

    def on_mount(self) -> None:
        self._refresh_display()

    def update_instance(self, instance: NetworkInstance | None, instance_count: int = 0) -> None:
        self._instance = instance
        self._instance_count = instance_count
        self._refresh_display()

    def _refresh_display(self) -> None:
        parts = [" Meshgaze"]
        instance = self._instance
        if instance is None:
            parts.append("no network instance")
        else:
            node = instance.detail.my_node_info if instance.detail else None
            parts.append(node.hostname if node and node.hostname else "?")
            parts.append(f"v{node.version}" if node and node.version else "v?")
            label = f"Instance: {instance.instance_id}"
            if self._instance_count > 1:
                label += f" ({self._instance_count} total)"
            parts.append(label)
            if not instance.running:
                parts.append("stopped")
        self.update(" | ".join(parts) + " ")
