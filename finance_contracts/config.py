"""
Configuration Loader (``finance_contracts.config``).

Responsibility
--------------
Loads the YAML settings used by the demo program and parses them into a
frozen ``DemoConfig``. The contract domain itself is configuration-free;
nothing under ``finance_contracts.domain`` may import this module.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass.
* Observation dates are non-decreasing, so stepping through them never
  moves time backwards.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Invalid values (log level, dates, indent)  -> ``ValueError``.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

_logger = logging.getLogger("finance_contracts.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DemoConfig:
    """Settings for stepping the demo portfolio."""

    log_level: str = "INFO"
    as_of_dates: tuple[date, ...] = (date(2020, 12, 24),)
    json_indent: int | None = 2

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_date(value: Any) -> date:
    """
    Parse a date from YAML (string or date object).

    Raises:
        ValueError: if ``value`` is not a valid date representation.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError(f"Cannot parse date from {value!r}")


def parse_dates(values: Any) -> tuple[date, ...]:
    """Parse a non-decreasing list of observation dates."""
    if not isinstance(values, list):
        raise ValueError(f"as_of_dates must be a list, got {values!r}")
    dates = tuple(parse_date(v) for v in values)
    for earlier, later in zip(dates, dates[1:]):
        if later < earlier:
            raise ValueError(
                f"as_of_dates must be non-decreasing: {later} follows {earlier}"
            )
    return dates


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {section!r}")
    return section


def parse_config(data: dict[str, Any]) -> DemoConfig:
    """Parse a ``DemoConfig`` from a dict, falling back to defaults per key."""
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {data!r}")
    defaults = DemoConfig()
    logging_section = _section(data, "logging")
    evaluation = _section(data, "evaluation")
    output = _section(data, "output")

    log_level = str(logging_section.get("level", defaults.log_level)).upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    if "as_of_dates" in evaluation:
        as_of_dates = parse_dates(evaluation["as_of_dates"])
    else:
        as_of_dates = defaults.as_of_dates

    json_indent = output.get("json_indent", defaults.json_indent)
    if json_indent is not None and (
        not isinstance(json_indent, int) or isinstance(json_indent, bool) or json_indent < 0
    ):
        raise ValueError(f"json_indent must be a non-negative integer, got {json_indent!r}")

    return DemoConfig(
        log_level=log_level,
        as_of_dates=as_of_dates,
        json_indent=json_indent,
    )


def load_config(path: Path | str | None = None) -> DemoConfig:
    """
    Load demo settings from ``path``, or the packaged defaults.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if a setting is invalid.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    config = parse_config(load_yaml_file(config_path))
    _logger.debug(
        "config_loaded",
        extra={"config_path": str(config_path), "checksum": compute_checksum(config)},
    )
    return config


def compute_checksum(config: DemoConfig) -> str:
    """SHA-256 of the canonical JSON form of ``config``."""
    canonical = json.dumps(asdict(config), sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
