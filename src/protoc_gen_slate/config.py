"""Plugin options.

Options arrive as the protoc parameter string
(``--slate_opt=languages=ruby;protobuf,index_path=index.md``) and may be
complemented by a TOML file given through the ``config`` key.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError
from .log import get_logger

LOGGER = get_logger("config")

UNIT_PACKAGE = "package"
UNIT_FILE = "file"
UNITS = (UNIT_PACKAGE, UNIT_FILE)
DEFAULT_SOURCE_DIR = Path("schemas")
_KNOWN_KEYS = {"languages", "index_path", "source_dir", "unit"}
_TOOL_TABLE = "protoc-gen-slate"


@dataclass(frozen=True)
class SlateOptions:
    """Options shared by every unit rendered in one run."""

    languages: tuple[str, ...] = ()
    index_path: str | None = None
    source_dir: Path = field(default=DEFAULT_SOURCE_DIR)
    unit: str = UNIT_PACKAGE

    @property
    def has_index(self) -> bool:
        """Whether an aggregated index document is requested."""
        return bool(self.index_path)


def parse_languages(value: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Split a semicolon-separated language list, keeping its order."""
    if isinstance(value, str):
        items = value.split(";")
    elif isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        items = list(value)
    else:
        raise ConfigError("'languages' must be a string or a list of strings")
    return tuple(item.strip() for item in items if item.strip())


def parse_parameter(parameter: str) -> SlateOptions:
    """Parse a protoc plugin parameter string into :class:`SlateOptions`."""
    values: dict[str, Any] = {}
    config_path: str | None = None
    for pair in parameter.split(","):
        if not pair.strip():
            continue
        key, _, value = pair.partition("=")
        key = key.strip()
        if key == "config":
            config_path = value.strip()
        else:
            values[key] = value.strip()

    merged: dict[str, Any] = {}
    if config_path:
        merged.update(load_config(config_path))
    merged.update(values)
    return options_from_mapping(merged)


def load_config(path: str | Path) -> dict[str, Any]:
    """Load option values from the TOML file at *path*.

    Values may sit at the top level or below ``[tool.protoc-gen-slate]``.
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as err:
        raise ConfigError(f"cannot read config file '{config_path}': {err}") from err
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(f"invalid TOML in config file '{config_path}': {err}") from err

    tool = data.get("tool")
    if isinstance(tool, dict) and _TOOL_TABLE in tool:
        table = tool[_TOOL_TABLE]
    else:
        table = {key: value for key, value in data.items() if key != "tool"}
    if not isinstance(table, dict):
        raise ConfigError(f"config section '{_TOOL_TABLE}' must be a table")
    return dict(table)


def options_from_mapping(values: Mapping[str, Any]) -> SlateOptions:
    """Build :class:`SlateOptions` from raw option values."""
    for key in values:
        if key not in _KNOWN_KEYS:
            LOGGER.warning("ignoring unknown option '%s'", key)

    languages = parse_languages(values.get("languages", ""))

    index_path = values.get("index_path") or None
    if index_path is not None and not isinstance(index_path, str):
        raise ConfigError("'index_path' must be a string")

    source_dir = values.get("source_dir") or DEFAULT_SOURCE_DIR
    if not isinstance(source_dir, (str, Path)):
        raise ConfigError("'source_dir' must be a string")

    unit = values.get("unit") or UNIT_PACKAGE
    if unit not in UNITS:
        raise ConfigError(f"'unit' must be one of {', '.join(UNITS)}, got '{unit}'")

    return SlateOptions(
        languages=languages,
        index_path=index_path,
        source_dir=Path(source_dir),
        unit=unit,
    )
