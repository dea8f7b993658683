"""Weather presentation translator.

Pure conversion functions with no I/O: unit conversion, condition
classification and derivation of display strings from a snapshot.
"""

from weather_lookup.presentation.conditions import CONDITION_ICONS, DEFAULT_ICON, classify, is_night
from weather_lookup.presentation.translator import PLACEHOLDER, derive
from weather_lookup.presentation.units import format_temperature, to_fahrenheit

__all__ = [
    "CONDITION_ICONS",
    "DEFAULT_ICON",
    "PLACEHOLDER",
    "classify",
    "derive",
    "format_temperature",
    "is_night",
    "to_fahrenheit",
]
