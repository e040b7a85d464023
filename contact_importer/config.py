"""Configuration helpers for the contact importer."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .store import MAX_ENTRIES

LOGGER = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


@dataclass
class ImporterSettings:
    """Runtime settings for the command line importer."""

    capacity: int = MAX_ENTRIES
    store_path: Optional[Path] = None


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping")
    return data


def settings_from_config(config: Mapping[str, Any]) -> ImporterSettings:
    section = config.get("importer", config)
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"The importer section must be a mapping, got {type(section).__name__}")
    try:
        capacity = int(section.get("capacity", MAX_ENTRIES))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid capacity value: {section.get('capacity')!r}") from exc
    if capacity < 0:
        raise ConfigurationError("Capacity must be zero or greater")

    store_path = section.get("store_path")
    LOGGER.debug("Loaded importer settings: capacity=%s store_path=%s", capacity, store_path)

    return ImporterSettings(
        capacity=capacity,
        store_path=Path(store_path) if store_path else None,
    )
