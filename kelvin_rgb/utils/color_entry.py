"""Parse color temperature entries from user configuration."""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from typing import Any

import voluptuous as vol

from ..color import Color
from ..const import CONF_KELVIN
from .temperature import rgb_from_temperature, to_kelvin

_LOGGER = logging.getLogger(__name__)


def _kelvin(value: Any) -> float:
    """Coerce a configured temperature to float. Booleans are rejected."""
    if isinstance(value, bool):
        raise vol.Invalid(f"expected a number, got {value!r}")
    try:
        return to_kelvin(value)
    except (TypeError, ValueError) as e:
        raise vol.Invalid(f"expected a number, got {value!r}") from e


COLOR_ENTRY_SCHEMA = vol.Schema(
    {vol.Required(CONF_KELVIN): _kelvin},
    extra=vol.ALLOW_EXTRA,
)


class ColorEntryError(ValueError):
    """Raised when a color entry cannot be turned into a Color."""


def _load_entry(entry: str) -> Any:
    json_txt = entry.strip()
    if not json_txt.startswith("{"):
        json_txt = f"{{{json_txt}}}"
    try:
        return json.loads(json_txt)
    except json.JSONDecodeError as e:
        raise ColorEntryError(f"Invalid color entry {entry!r}: {e}") from e


def color_from_entry(entry: str | Mapping[str, Any]) -> Color:
    """Return the Color for an entry such as '"kelvin": 2700'.

    Strings are read as the body of a JSON object, braces optional. Keys
    other than 'kelvin' are ignored.
    """
    data = _load_entry(entry) if isinstance(entry, str) else entry
    if not isinstance(data, Mapping):
        raise ColorEntryError(f"Color entry must be an object, got {data!r}")
    try:
        validated = COLOR_ENTRY_SCHEMA(dict(data))
    except vol.Invalid as e:
        raise ColorEntryError(f"Invalid color entry: {e}") from e

    kelvin = validated[CONF_KELVIN]
    _LOGGER.debug("Color entry requests %s K", kelvin)
    return rgb_from_temperature(kelvin)
