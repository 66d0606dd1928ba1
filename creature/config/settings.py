"""Runtime settings for the creature animation shell.

Values are layered: built-in defaults, then a YAML file, then ``CREATURE_*``
environment variables, then command-line flags. The solver core never reads
these; they only shape the window, the log and which creature gets built.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Sequence

import yaml

from .constants import DEFAULT_LINK_LENGTH, DEFAULT_SPINE_SEGMENTS, DEFAULTS, KEYBOARD_STEP, PRESET_NAMES

WINDOW_WIDTH = DEFAULTS["WINDOW_WIDTH"]
WINDOW_HEIGHT = DEFAULTS["WINDOW_HEIGHT"]
FPS = DEFAULTS["FPS"]

BACKGROUND = (245, 241, 232)

CONFIG_ENV_VAR = "CREATURE_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/default.yaml")
LOG_DIRECTORY = Path(os.getenv("CREATURE_LOG_DIR", "logs"))
DEBUG_LOG_FILE = os.getenv("CREATURE_DEBUG_LOG", "creature_debug.log")
DEBUG_LOG_LEVEL = os.getenv("CREATURE_DEBUG_LOG_LEVEL", "INFO")
DEBUG_MODE = False
PRESET = "lizard"
SPINE_SEGMENTS = DEFAULT_SPINE_SEGMENTS
LINK_LENGTH = DEFAULT_LINK_LENGTH
CREATURE_TEMPLATE = ""

TEMPLATE_DIR = Path(os.getenv("CREATURE_TEMPLATE_DIR", "creature_templates"))


@dataclass(frozen=True)
class SimulationSettings:
    WINDOW_WIDTH: int = WINDOW_WIDTH
    WINDOW_HEIGHT: int = WINDOW_HEIGHT
    FPS: int = FPS
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL
    DEBUG_MODE: bool = DEBUG_MODE
    PRESET: str = PRESET
    SPINE_SEGMENTS: int = SPINE_SEGMENTS
    LINK_LENGTH: float = LINK_LENGTH
    KEYBOARD_STEP: int = KEYBOARD_STEP
    CREATURE_TEMPLATE: str = CREATURE_TEMPLATE

    def with_updates(self, overrides: Dict[str, Any]) -> "SimulationSettings":
        values = {**asdict(self), **overrides}
        _check_values(values)
        return SimulationSettings(**values)


_ACTIVE_SETTINGS = SimulationSettings()


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError(f"Expected a boolean, got {value!r}")


def _to_number(caster: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def convert(value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValueError(f"Expected a number, got {value!r}")
        number = float(value)
        return caster(number) if caster is float else caster(round(number))

    return convert


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got {value!r}")
    return value


def _to_path(value: Any) -> Path:
    if isinstance(value, Path):
        return value
    return Path(_to_str(value))


# Field name -> converter applied to config-file and environment values.
_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "WINDOW_WIDTH": _to_number(int),
    "WINDOW_HEIGHT": _to_number(int),
    "FPS": _to_number(int),
    "LOG_DIRECTORY": _to_path,
    "DEBUG_LOG_FILE": _to_str,
    "DEBUG_LOG_LEVEL": _to_str,
    "DEBUG_MODE": _to_bool,
    "PRESET": _to_str,
    "SPINE_SEGMENTS": _to_number(int),
    "LINK_LENGTH": _to_number(float),
    "KEYBOARD_STEP": _to_number(int),
    "CREATURE_TEMPLATE": _to_str,
}

# Fields readable from the environment, as CREATURE_<FIELD> (CREATURE_TEMPLATE as is).
_ENV_FIELDS = (
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "FPS",
    "DEBUG_MODE",
    "PRESET",
    "SPINE_SEGMENTS",
    "LINK_LENGTH",
    "KEYBOARD_STEP",
    "CREATURE_TEMPLATE",
)

_RANGES: Dict[str, tuple[float, float]] = {
    "WINDOW_WIDTH": (200, 7680),
    "WINDOW_HEIGHT": (200, 4320),
    "FPS": (1, 360),
    "SPINE_SEGMENTS": (1, 90),
    "LINK_LENGTH": (1.0, 120.0),
    "KEYBOARD_STEP": (1, 500),
}

_CHOICES: Dict[str, tuple[str, ...]] = {
    "DEBUG_LOG_LEVEL": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    "PRESET": PRESET_NAMES,
}


def _convert(field: str, value: Any) -> Any:
    try:
        return _CONVERTERS[field](value)
    except ValueError as error:
        raise ValueError(f"{field}: {error}") from error


def _check_values(values: Dict[str, Any]) -> None:
    """Range- and choice-check ``values`` in place, canonicalising choice case."""

    for field, (lower, upper) in _RANGES.items():
        current = values[field]
        if not lower <= current <= upper:
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICES.items():
        current = values[field]
        matches = [choice for choice in choices if isinstance(current, str) and choice.lower() == current.lower()]
        if not matches:
            raise ValueError(f"{field} must be one of {list(choices)} (got {current})")
        values[field] = matches[0]


def _env_name(field: str) -> str:
    return field if field.startswith("CREATURE_") else f"CREATURE_{field}"


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    return {
        field: _convert(field, env[_env_name(field)])
        for field in _ENV_FIELDS
        if _env_name(field) in env
    }


def _file_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            document = yaml.safe_load(handle)
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"Config file {path} must define a mapping")

    known = {item.name for item in fields(SimulationSettings)}
    overrides: Dict[str, Any] = {}
    for raw_key, value in document.items():
        field = str(raw_key).upper()
        if field not in known:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[field] = _convert(field, value)
    return overrides


def _config_file(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    """Pick the YAML file to read: the flag, then the env var, then the default if present."""

    named = cli_value or env.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    return DEFAULT_CONFIG_FILE if DEFAULT_CONFIG_FILE.exists() else None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Animate a procedural creature that follows the pointer")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--window-width", dest="WINDOW_WIDTH", type=int, help="Window width in pixels")
    parser.add_argument("--window-height", dest="WINDOW_HEIGHT", type=int, help="Window height in pixels")
    parser.add_argument("--fps", dest="FPS", type=int, help="Target frames per second")
    parser.add_argument("--preset", dest="PRESET", type=str, help=f"Creature preset ({', '.join(PRESET_NAMES)})")
    parser.add_argument("--spine-segments", dest="SPINE_SEGMENTS", type=int, help="Spine segments for the preset")
    parser.add_argument("--link-length", dest="LINK_LENGTH", type=float, help="Spine link length for the preset")
    parser.add_argument("--keyboard-step", dest="KEYBOARD_STEP", type=int, help="Pixels the arrow keys move the target")
    parser.add_argument("--template", dest="CREATURE_TEMPLATE", type=str, help="Saved creature template to load")
    parser.add_argument("--log-level", dest="DEBUG_LOG_LEVEL", type=str, help="Debug log level")
    parser.add_argument(
        "--debug",
        dest="DEBUG_MODE",
        action="store_const",
        const=True,
        help="Draw every segment as a circle instead of the outline",
    )
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> SimulationSettings:
    """Resolve settings from config file, environment and ``args``, later layers winning."""

    env = os.environ if env is None else env
    parsed = vars(_build_arg_parser().parse_args(args=args))
    config_path = _config_file(parsed.pop("config"), env)

    overrides: Dict[str, Any] = {}
    if config_path is not None:
        overrides.update(_file_overrides(config_path))
    overrides.update(_env_overrides(env))
    overrides.update({field: value for field, value in parsed.items() if value is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: SimulationSettings) -> SimulationSettings:
    """Make ``new_settings`` active and mirror them into this module's globals."""

    global _ACTIVE_SETTINGS

    _ACTIVE_SETTINGS = new_settings
    globals().update(asdict(new_settings))
    return _ACTIVE_SETTINGS


def current_settings() -> SimulationSettings:
    return _ACTIVE_SETTINGS
