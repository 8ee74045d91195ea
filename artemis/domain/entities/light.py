"""Domain entities for the cloud light API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

DEVICE_TYPE_LIGHT = "light"


class LightCommandName(str, Enum):
    """Command names accepted by the light control router."""

    TURN = "turn"
    BRIGHTNESS = "brightness"
    COLOR = "color"


@dataclass(frozen=True, slots=True)
class ColorValue:
    """RGB color, one integer channel each."""

    r: int
    g: int
    b: int


@dataclass(frozen=True, slots=True)
class PowerCommand:
    on: bool
    name: LightCommandName = field(default=LightCommandName.TURN, init=False)


@dataclass(frozen=True, slots=True)
class BrightnessCommand:
    level: int
    name: LightCommandName = field(default=LightCommandName.BRIGHTNESS, init=False)


@dataclass(frozen=True, slots=True)
class ColorCommand:
    color: ColorValue
    name: LightCommandName = field(default=LightCommandName.COLOR, init=False)


LightCommand = Union[PowerCommand, BrightnessCommand, ColorCommand]


@dataclass(frozen=True, slots=True)
class LightDevice:
    """Snapshot of a light as reported by one account's device listing."""

    device_id: str
    name: str
    model: str
    capabilities: List[str] = field(default_factory=list)
    controllable: bool = True
    retrievable: bool = True
    device_type: str = DEVICE_TYPE_LIGHT
    account_index: int = 0


@dataclass(frozen=True, slots=True)
class LightState:
    """Current state of a light.

    ``is_on`` is always set; the remaining properties are only present when
    the upstream reported them.
    """

    device_id: str
    model: str
    is_on: bool
    online: Optional[bool] = None
    brightness: Optional[int] = None
    color: Optional[ColorValue] = None
