"""Parsing of window geometry and persistence of the last window size."""

from __future__ import annotations

import json
import logging
import re
import sys
from pathlib import Path

from gridglide.dimensions import Dimensions

logger = logging.getLogger(__name__)

if sys.platform == "win32":
    _SETTINGS_PATH = "AppData/Local/nvim-data/neovide-settings.json"
else:
    _SETTINGS_PATH = ".local/share/nvim/neovide-settings.json"

DEFAULT_WINDOW_GEOMETRY = Dimensions(width=100, height=50)

_U64_MAX = 2**64 - 1
_DIMENSION_RE = re.compile(r"\+?[0-9]+")


def default_settings_path() -> Path:
    """Location of the saved window size file in the user's home directory."""
    return Path.home() / _SETTINGS_PATH


def _resolve(path: str | Path | None) -> Path:
    return default_settings_path() if path is None else Path(path)


def _unsigned_field(data: dict, key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise ValueError(f"invalid value for `{key}`: {value!r}")
    return value


def try_to_load_last_window_size(path: str | Path | None = None) -> Dimensions:
    """Read the saved window size.

    Raises OSError when the file cannot be read and ValueError when its content
    is not a valid size.
    """
    text = _resolve(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(str(error)) from error
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object with width and height")
    geometry = Dimensions(_unsigned_field(data, "width"), _unsigned_field(data, "height"))
    logger.debug("Loaded Window Size: %r", geometry)
    return geometry


def maybe_save_window_size(
    grid_size: Dimensions | None,
    remember_window_size: bool,
    path: str | Path | None = None,
) -> None:
    """Save the grid size if it is to be remembered, else the default size."""
    if remember_window_size and grid_size is not None:
        saved = grid_size
    else:
        saved = DEFAULT_WINDOW_GEOMETRY
    payload = json.dumps(
        {"width": saved.width, "height": saved.height}, separators=(",", ":")
    )
    logger.debug("Saved Window Size: %s", payload)
    _resolve(path).write_text(payload, encoding="utf-8")


def parse_window_geometry(
    geometry: str | None, path: str | Path | None = None
) -> Dimensions:
    """Parse '<width>x<height>', or fall back to the saved or default size.

    Raises ValueError with a user-facing message on malformed input.
    """
    if geometry is None:
        try:
            return try_to_load_last_window_size(path)
        except (OSError, ValueError):
            return DEFAULT_WINDOW_GEOMETRY

    invalid_parse_err = (
        f"Invalid geometry: {geometry}\nValid format: <width>x<height>"
    )
    dimensions = []
    for part in geometry.split("x"):
        if not _DIMENSION_RE.fullmatch(part):
            raise ValueError(invalid_parse_err)
        value = int(part)
        if value > _U64_MAX:
            raise ValueError(invalid_parse_err)
        if value == 0:
            raise ValueError(
                "Invalid geometry: Window dimensions should be greater than 0."
            )
        dimensions.append(value)

    if len(dimensions) != 2:
        raise ValueError(invalid_parse_err)
    width, height = dimensions
    return Dimensions(width, height)