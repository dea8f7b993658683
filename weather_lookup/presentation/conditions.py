"""Condition text to icon identifier classification.

Icon identifiers are SF Symbols style names; how they are drawn is up to
the renderer.
"""

from types import MappingProxyType

DEFAULT_ICON = "cloud.sun.fill"
NIGHT_ICON = "moon.stars.fill"
DAY_FALLBACK_ICON = "cloud.fill"

# weatherapi.com condition phrases, lower-cased
CONDITION_ICONS = MappingProxyType(
    {
        "sunny": "sun.max.fill",
        "clear": "sun.max.fill",
        "partly cloudy": "cloud.sun.fill",
        "cloudy": "cloud.fill",
        "overcast": "cloud.fill",
        "mist": "cloud.fog.fill",
        "fog": "cloud.fog.fill",
        "freezing fog": "cloud.fog.fill",
        "patchy rain possible": "cloud.rain.fill",
        "patchy snow possible": "cloud.snow.fill",
        "patchy sleet possible": "cloud.sleet.fill",
        "patchy freezing drizzle possible": "cloud.hail.fill",
        "thundery outbreaks possible": "cloud.bolt.fill",
        "blowing snow": "wind.snow",
        "blizzard": "wind.snow",
        "patchy light drizzle": "cloud.drizzle.fill",
        "light rain": "cloud.rain.fill",
        "moderate rain at times": "cloud.heavyrain.fill",
        "heavy rain": "cloud.heavyrain.fill",
        "light freezing rain": "cloud.sleet.fill",
        "moderate or heavy freezing rain": "cloud.sleet.fill",
        "light sleet": "cloud.sleet.fill",
        "moderate or heavy sleet": "cloud.sleet.fill",
        "patchy light rain with thunder": "cloud.bolt.rain.fill",
        "moderate or heavy rain with thunder": "cloud.bolt.rain.fill",
        "patchy light snow with thunder": "cloud.bolt.snow.fill",
        "moderate or heavy snow with thunder": "cloud.bolt.snow.fill",
        "ice pellets": "cloud.hail.fill",
        "light rain shower": "cloud.drizzle.fill",
        "moderate or heavy rain shower": "cloud.rain.fill",
        "torrential rain shower": "cloud.heavyrain.fill",
        "light sleet showers": "cloud.sleet.fill",
        "moderate or heavy sleet showers": "cloud.sleet.fill",
        "light snow showers": "cloud.snow.fill",
        "moderate or heavy snow showers": "cloud.snow.fill",
        "patchy light rain in area with thunder": "cloud.bolt.rain.fill",
        "moderate or heavy rain in area with thunder": "cloud.bolt.rain.fill",
        "patchy snow in area with thunder": "cloud.bolt.snow.fill",
        "moderate or heavy snow in area with thunder": "cloud.bolt.snow.fill",
    }
)


def is_night(hour: int) -> bool:
    """Wall-clock night: before 06:00 or after 18:59.

    An approximation; ignores timezone, season and actual sunrise/sunset.
    """
    return hour < 6 or hour > 18


def classify(condition_text: str, hour: int) -> str:
    """Map provider condition text to an icon identifier.

    Matching ignores case and surrounding whitespace. Unknown text never
    fails: it falls back to a night or a cloudy icon depending on the hour.
    """
    icon = CONDITION_ICONS.get(condition_text.strip().lower())
    if icon is not None:
        return icon
    return NIGHT_ICON if is_night(hour) else DAY_FALLBACK_ICON
