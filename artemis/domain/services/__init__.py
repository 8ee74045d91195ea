"""Pure domain services."""

from .light_commands import (
    ensure_brightness,
    ensure_color,
    ensure_in_range,
    parse_light_command,
)

__all__ = [
    "ensure_brightness",
    "ensure_color",
    "ensure_in_range",
    "parse_light_command",
]
