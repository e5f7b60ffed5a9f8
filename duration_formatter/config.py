from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from duration_formatter.errors import ConfigError, InvalidUnitsError
from duration_formatter.logging_config import logger
from duration_formatter.units import resolve_units

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "formatter.yaml"
DEFAULT_PRESET = "long"


@dataclass(frozen=True)
class Preset:
    name: str
    concise: bool
    accuracy: Optional[int] = None
    units: str = "full"


BUILTIN_PRESETS: dict[str, Preset] = {
    "long": Preset("long", concise=False),
    "concise": Preset("concise", concise=True),
    "concise_low_accuracy": Preset("concise_low_accuracy", concise=True, accuracy=3),
}


def config_path() -> Path:
    return Path(os.getenv("DURATION_FORMATTER_CONFIG", str(DEFAULT_CONFIG_PATH)))


def _parse_preset(name: str, raw: Any) -> Preset:
    if not isinstance(raw, dict):
        raise ConfigError(f"preset {name!r} must be a mapping")
    concise = raw.get("concise")
    if not isinstance(concise, bool):
        raise ConfigError(f"preset {name!r}: 'concise' must be true or false")
    accuracy = raw.get("accuracy")
    if accuracy is not None and (isinstance(accuracy, bool) or not isinstance(accuracy, int) or accuracy < 1):
        raise ConfigError(f"preset {name!r}: 'accuracy' must be a positive integer")
    units = raw.get("units", "full")
    if not isinstance(units, str):
        raise ConfigError(f"preset {name!r}: unknown units {units!r}")
    try:
        resolve_units(units)
    except InvalidUnitsError as exc:
        raise ConfigError(f"preset {name!r}: {exc}") from exc
    return Preset(name=name, concise=concise, accuracy=accuracy, units=units.lower())


def _read_section(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    section = data.get("formatter", {}) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'formatter' must be a mapping")
    return section


def _load(path: str | Path | None) -> tuple[dict[str, Preset], str]:
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        logger.info("Preset config %s not found, using built-in presets", path)
        return dict(BUILTIN_PRESETS), DEFAULT_PRESET
    section = _read_section(path)
    presets = dict(BUILTIN_PRESETS)
    raw_presets = section.get("presets", {}) or {}
    if not isinstance(raw_presets, dict):
        raise ConfigError(f"{path}: 'presets' must be a mapping")
    for name, raw in raw_presets.items():
        presets[str(name)] = _parse_preset(str(name), raw)
    default = section.get("default_preset", DEFAULT_PRESET)
    if not isinstance(default, str) or not default:
        raise ConfigError(f"{path}: 'default_preset' must be a preset name, got {default!r}")
    return presets, default


def load_presets(path: str | Path | None = None) -> dict[str, Preset]:
    """Load formatter presets from YAML, falling back to the built-in ones."""
    return _load(path)[0]


def default_preset_name(path: str | Path | None = None) -> str:
    return _load(path)[1]


def get_preset(name: str | None = None, path: str | Path | None = None) -> Preset:
    presets, default = _load(path)
    name = name or default
    try:
        return presets[name]
    except KeyError:
        raise ConfigError(f"unknown preset {name!r}; available: {', '.join(sorted(presets))}") from None
