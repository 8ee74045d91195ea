"""Domain service helpers for parsing and validating light commands.

Request payloads carry a command name and a loosely typed value. They are
turned into a ``LightCommand`` here, so the shape of the value is checked
once and before any upstream call.
"""

import math
from numbers import Real
from typing import Any, Callable, Dict

from artemis.domain.entities.errors import (
    InvalidValueError,
    OutOfRangeError,
    UnsupportedCommandError,
)
from artemis.domain.entities.light import (
    BrightnessCommand,
    ColorCommand,
    ColorValue,
    LightCommand,
    LightCommandName,
    PowerCommand,
)

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100
COLOR_CHANNEL_MIN = 0
COLOR_CHANNEL_MAX = 255

COLOR_CHANNELS = ("r", "g", "b")


def ensure_in_range(field: str, value: int, minimum: int, maximum: int) -> int:
    """Return ``value`` or raise OutOfRangeError if it is outside the bounds."""
    if not minimum <= value <= maximum:
        raise OutOfRangeError(field, value, minimum, maximum)
    return value


def ensure_brightness(level: int) -> int:
    return ensure_in_range("brightness", level, BRIGHTNESS_MIN, BRIGHTNESS_MAX)


def ensure_color(r: int, g: int, b: int) -> ColorValue:
    for channel, value in zip(COLOR_CHANNELS, (r, g, b)):
        ensure_in_range(channel, value, COLOR_CHANNEL_MIN, COLOR_CHANNEL_MAX)
    return ColorValue(r=r, g=g, b=b)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true is not a number here.
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def _parse_turn(value: Any) -> LightCommand:
    if not isinstance(value, bool):
        raise InvalidValueError(LightCommandName.TURN.value, "boolean")
    return PowerCommand(on=value)


def _parse_brightness(value: Any) -> LightCommand:
    if not _is_number(value):
        raise InvalidValueError(LightCommandName.BRIGHTNESS.value, "number")
    return BrightnessCommand(level=int(value))


def _parse_color(value: Any) -> LightCommand:
    if not isinstance(value, dict):
        raise InvalidValueError(
            LightCommandName.COLOR.value, "object with r, g, b"
        )
    if not all(_is_number(value.get(channel)) for channel in COLOR_CHANNELS):
        raise InvalidValueError(
            LightCommandName.COLOR.value, "object with r, g, b numeric fields"
        )
    r, g, b = (int(value[channel]) for channel in COLOR_CHANNELS)
    return ColorCommand(color=ColorValue(r=r, g=g, b=b))


_PARSERS: Dict[str, Callable[[Any], LightCommand]] = {
    LightCommandName.TURN.value: _parse_turn,
    LightCommandName.BRIGHTNESS.value: _parse_brightness,
    LightCommandName.COLOR.value: _parse_color,
}


def parse_light_command(command: str, value: Any) -> LightCommand:
    """Build a typed light command from a request's command name and value.

    Range checks are left to the gateway operations; this only checks shape.

    Raises:
        UnsupportedCommandError: If ``command`` is not an exact known name.
        InvalidValueError: If ``value`` does not have the command's shape.
    """
    parser = _PARSERS.get(command)
    if parser is None:
        raise UnsupportedCommandError(command)
    return parser(value)
