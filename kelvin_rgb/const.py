"""Constants for the kelvin_rgb library."""

from typing import Final

MIN_KELVIN: Final = 1000.0
MAX_KELVIN: Final = 40000.0
KELVIN_SCALE: Final = 100.0

# Breakpoints in scaled (kelvin / 100) space
WARM_BREAKPOINT: Final = 66.0
BLUE_CUTOFF: Final = 19.0

CHANNEL_MIN: Final = 0
CHANNEL_MAX: Final = 255

# Red, above WARM_BREAKPOINT
RED_SCALE: Final = 329.698727446
RED_OFFSET: Final = 60.0
RED_EXPONENT: Final = -0.1332047592

# Green, at or below WARM_BREAKPOINT
GREEN_LOG_SCALE: Final = 99.4708025861
GREEN_LOG_OFFSET: Final = 161.1195681661

# Green, above WARM_BREAKPOINT
GREEN_SCALE: Final = 288.1221695283
GREEN_OFFSET: Final = 60.0
GREEN_EXPONENT: Final = -0.0755148492

# Blue, between BLUE_CUTOFF and WARM_BREAKPOINT
BLUE_LOG_SCALE: Final = 138.5177312231
BLUE_SHIFT: Final = 10.0
BLUE_LOG_OFFSET: Final = 305.0447927307

CONF_KELVIN: Final = "kelvin"
