"""Network instance collector reading the node's JSON status export."""

from __future__ import annotations

import json
import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from meshgaze.models import NetworkInstance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstanceListing:
    """Parsed export: all instances plus the exporter's selected id, if any."""

    instances: tuple[NetworkInstance, ...] = ()
    selected: str | None = None


def get_instances(
    path: str = "",
    command: str = "",
    timeout: float = 5.0,
) -> InstanceListing | None:
    """Read instances from a command's stdout, or from a file.

    The command wins when both are configured. Returns None if no source is
    configured or the source is unavailable or unparsable.
    """
    if command:
        return _read_command(command, timeout)
    if path:
        return _read_file(path)
    return None


def _read_command(command: str, timeout: float) -> InstanceListing | None:
    try:
        argv = shlex.split(command)
    except ValueError:
        logger.warning("Cannot parse source command: %r", command)
        return None
    if not argv or not shutil.which(argv[0]):
        logger.debug("Source command not found: %s", argv[0] if argv else command)
        return None

    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, PermissionError) as e:
        logger.debug("Source command failed: %s", e)
        return None
    if result.returncode != 0:
        logger.debug("Source command exited with %d: %s", result.returncode, result.stderr.strip())
        return None
    return parse_instances_json(result.stdout)


def _read_file(path: str) -> InstanceListing | None:
    try:
        raw = Path(path).read_text()
    except (FileNotFoundError, PermissionError, IsADirectoryError, UnicodeDecodeError) as e:
        logger.debug("Cannot read source file %s: %s", path, e)
        return None
    return parse_instances_json(raw)


def parse_instances_json(raw: str) -> InstanceListing | None:
    """Parse the status export.

    Accepts a list of instances, an object with an ``instances`` list and an
    optional ``selected`` id, or a single instance object.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Invalid status JSON: %s", e)
        return None

    selected = None
    if isinstance(data, dict) and "instances" in data:
        selected = data.get("selected") or None
        items = data.get("instances")
    elif isinstance(data, dict) and ("detail" in data or "my_node_info" in data):
        # Bare detail record without an instance wrapper
        items = [data if "detail" in data else {"detail": data}]
    else:
        items = data

    if not isinstance(items, list):
        logger.warning("Status JSON has no instance list")
        return None

    instances = tuple(NetworkInstance.from_dict(item) for item in items if isinstance(item, dict))
    return InstanceListing(
        instances=instances,
        selected=str(selected) if selected is not None else None,
    )
