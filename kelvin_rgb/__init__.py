"""Convert color temperatures in Kelvin to approximate RGB colors."""

from .color import Color
from .const import MAX_KELVIN, MIN_KELVIN
from .utils.color_entry import COLOR_ENTRY_SCHEMA, ColorEntryError, color_from_entry
from .utils.temperature import rgb_from_temperature

__all__ = [
    "COLOR_ENTRY_SCHEMA",
    "MAX_KELVIN",
    "MIN_KELVIN",
    "Color",
    "ColorEntryError",
    "color_from_entry",
    "rgb_from_temperature",
]
