from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from responsiveviews.core.layout import DEFAULT_WIDE_THRESHOLD

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "config.yaml"
DEFAULT_TITLE = "Responsive Views"


@dataclass(frozen=True)
class DeviceProfile:
    name: str
    width: int
    height: int
    is_round: bool = False


@dataclass(frozen=True)
class AppConfig:
    title: str = DEFAULT_TITLE
    wide_threshold: float = DEFAULT_WIDE_THRESHOLD
    round_aware: bool = True
    devices: Dict[str, DeviceProfile] = field(default_factory=dict)

    def device(self, name: str) -> DeviceProfile:
        """Return the named device profile; raises KeyError if unknown."""
        return self.devices[name]


def _positive_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _parse_devices(raw: object, source: str) -> Dict[str, DeviceProfile]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: 'devices' must be a mapping")
    devices: Dict[str, DeviceProfile] = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            raise ValueError(f"{source}: device '{name}' must be a mapping")
        width = entry.get("width")
        height = entry.get("height")
        if not _positive_number(width) or not _positive_number(height):
            raise ValueError(f"{source}: device '{name}' needs positive 'width' and 'height'")
        is_round = entry.get("round", False)
        if not isinstance(is_round, bool):
            raise ValueError(f"{source}: device '{name}' 'round' must be true or false")
        devices[str(name)] = DeviceProfile(
            name=str(name),
            width=int(width),
            height=int(height),
            is_round=is_round,
        )
    return devices


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load the application config from *path* (the bundled file by default)."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        logger.warning("Config file %s is empty, using defaults", config_path)
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path.name}: expected a YAML mapping")

    title = raw.get("title", DEFAULT_TITLE)
    if not title or not isinstance(title, str):
        raise ValueError(f"{config_path.name}: missing or invalid 'title'")

    threshold = raw.get("wide_threshold_dp", DEFAULT_WIDE_THRESHOLD)
    if not _positive_number(threshold):
        raise ValueError(f"{config_path.name}: 'wide_threshold_dp' must be a positive number")

    round_aware = raw.get("round_aware", True)
    if not isinstance(round_aware, bool):
        raise ValueError(f"{config_path.name}: 'round_aware' must be true or false")

    return AppConfig(
        title=title.strip(),
        wide_threshold=threshold,
        round_aware=round_aware,
        devices=_parse_devices(raw.get("devices"), config_path.name),
    )
