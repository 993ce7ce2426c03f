"""Color temperature to RGB conversion.

Uses the empirical black-body fit popularised by Tanner Helland. Each channel
is an independent closed-form curve over the temperature scaled down by 100,
with breakpoints at 66 (red, green and blue switch formulas) and 19 (blue is
off below it).
"""

from __future__ import annotations

import logging
import math

from ..color import Color
from ..const import (
    BLUE_CUTOFF,
    BLUE_LOG_OFFSET,
    BLUE_LOG_SCALE,
    BLUE_SHIFT,
    CHANNEL_MAX,
    CHANNEL_MIN,
    GREEN_EXPONENT,
    GREEN_LOG_OFFSET,
    GREEN_LOG_SCALE,
    GREEN_OFFSET,
    GREEN_SCALE,
    KELVIN_SCALE,
    MAX_KELVIN,
    MIN_KELVIN,
    RED_EXPONENT,
    RED_OFFSET,
    RED_SCALE,
    WARM_BREAKPOINT,
)

_LOGGER = logging.getLogger(__name__)


def _saturate(value: float) -> int:
    """Clamp to 0-255 and truncate toward zero. NaN maps to 0."""
    if math.isnan(value) or value < CHANNEL_MIN:
        return CHANNEL_MIN
    if value > CHANNEL_MAX:
        return CHANNEL_MAX
    return int(value)


def _clamp_kelvin(kelvin: float) -> float:
    # NaN fails both comparisons and passes through unchanged
    if kelvin < MIN_KELVIN:
        _LOGGER.debug("Clamping %s K up to %s K", kelvin, MIN_KELVIN)
        return MIN_KELVIN
    if kelvin > MAX_KELVIN:
        _LOGGER.debug("Clamping %s K down to %s K", kelvin, MAX_KELVIN)
        return MAX_KELVIN
    return kelvin


def to_kelvin(temperature: float) -> float:
    """Widen a real number to float, pinning values beyond float range to a bound."""
    try:
        return float(temperature)
    except OverflowError:
        return MAX_KELVIN if temperature > 0 else MIN_KELVIN


def _red(temp: float) -> int:
    if temp <= WARM_BREAKPOINT:
        return CHANNEL_MAX
    return _saturate(RED_SCALE * (temp - RED_OFFSET) ** RED_EXPONENT)


def _green(temp: float) -> int:
    if temp <= WARM_BREAKPOINT:
        return _saturate(GREEN_LOG_SCALE * math.log(temp) - GREEN_LOG_OFFSET)
    return _saturate(GREEN_SCALE * (temp - GREEN_OFFSET) ** GREEN_EXPONENT)


def _blue(temp: float) -> int:
    if temp >= WARM_BREAKPOINT:
        return CHANNEL_MAX
    if temp <= BLUE_CUTOFF:
        return CHANNEL_MIN
    return _saturate(BLUE_LOG_SCALE * math.log(temp - BLUE_SHIFT) - BLUE_LOG_OFFSET)


def rgb_from_temperature(temperature: float) -> Color:
    """Convert a color temperature in Kelvin to an approximate RGB Color.

    Accepts any real number (int, float, Decimal, Fraction...). The value is
    widened to a float and clamped to [1000, 40000] K, so the conversion never
    fails for numeric input. Infinities clamp to the nearest bound; NaN
    propagates through every curve and yields Color(0, 0, 0).
    """
    temp = _clamp_kelvin(to_kelvin(temperature)) / KELVIN_SCALE
    return Color(_red(temp), _green(temp), _blue(temp))
