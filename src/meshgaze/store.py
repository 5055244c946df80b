"""Thread-safe holder of the latest instance listing and the selected instance."""

from __future__ import annotations

import logging
import threading

from meshgaze.models import NetworkInstance, NetworkInstanceDetail

logger = logging.getLogger(__name__)


class NetworkStore:
    """Latest network instances as published by the collector.

    Writers replace the instance list wholesale; readers get immutable
    references, so a single read is always a consistent snapshot.
    """

    def __init__(self, selected_id: str | None = None):
        self._lock = threading.Lock()
        self._instances: tuple[NetworkInstance, ...] = ()
        self._selected_id = selected_id or None

    def update(self, instances: tuple[NetworkInstance, ...], selected: str | None = None) -> None:
        """Replace all instances. The exporter's selection applies only if none is set."""
        with self._lock:
            self._instances = tuple(instances)
            if self._selected_id is None and selected:
                self._selected_id = selected
            if self._selected_id is not None and not any(
                i.instance_id == self._selected_id for i in self._instances
            ):
                logger.debug("Selected instance %s is no longer published", self._selected_id)

    @property
    def instance_ids(self) -> list[str]:
        with self._lock:
            return [i.instance_id for i in self._instances]

    @property
    def selected_id(self) -> str | None:
        with self._lock:
            return self._selected_id

    def select(self, instance_id: str) -> None:
        with self._lock:
            self._selected_id = instance_id
        logger.debug("Selected instance %s", instance_id)

    def select_next(self) -> str | None:
        """Cycle the selection through the published instances."""
        with self._lock:
            ids = [i.instance_id for i in self._instances]
            if not ids:
                return None
            current = self._current_locked()
            idx = ids.index(current.instance_id) if current is not None else -1
            self._selected_id = ids[(idx + 1) % len(ids)]
            selected = self._selected_id
        logger.debug("Selected instance %s", selected)
        return selected

    def current(self) -> NetworkInstance | None:
        """The selected instance, else the first one, else None."""
        with self._lock:
            return self._current_locked()

    def current_detail(self) -> NetworkInstanceDetail | None:
        instance = self.current()
        return instance.detail if instance is not None else None

    def _current_locked(self) -> NetworkInstance | None:
        if not self._instances:
            return None
        if self._selected_id is None:
            return self._instances[0]
        for instance in self._instances:
            if instance.instance_id == self._selected_id:
                return instance
        return None
