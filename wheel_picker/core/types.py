"""Shared types for wheel-picker: HueSweep, WheelRaster, PickState, FieldStore."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

import numpy as np
from PIL import Image

RGB = tuple[int, int, int]
RGBF = tuple[float, float, float]

# One rim colour per degree of the wheel
SWEEP_STEPS = 360


class HueSweep:
    """A self-registering rim colour sequence.

    Usage in a sweep module:

        sweep = HueSweep(name='hsv', help='Exact HSV hue rotation')

        @sweep.run
        def run(steps):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, steps: int = SWEEP_STEPS) -> list[RGBF]:
        """Return one rim colour per step."""
        if self._run_fn is None:
            raise RuntimeError(f'Sweep {self.name} has no run function')
        stops = list(self._run_fn(steps))
        if len(stops) != steps:
            raise RuntimeError(f'Sweep {self.name} returned {len(stops)} stops, expected {steps}')
        return stops


@dataclass(frozen=True)
class WheelRaster:
    """A generated colour wheel."""

    image: Image.Image  # RGBA, size x size, transparent outside the disc
    size: int
    centre: str  # colour token as given
    centre_rgb: RGB
    sweep: str
    rim: list[RGB] = field(default_factory=list)  # rim colour of step n at index n-1
    owner: np.ndarray | None = None  # step that last painted each pixel, 0 = unpainted

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """RGBA at (x, y). Out of bounds reads as a zero pixel."""
        if x < 0 or y < 0 or x >= self.image.width or y >= self.image.height:
            return (0, 0, 0, 0)
        return self.image.getpixel((x, y))


class PickerMode(enum.Enum):
    HIDDEN = 'hidden'
    ARMED = 'armed'
    PREVIEW_LOCK = 'preview-lock'


@dataclass
class PickState:
    """Mutable picker state, only touched from the event thread."""

    enabled: bool = False
    current_colour: str | None = None  # '#rrggbb'
    visible: bool = False

    @property
    def mode(self) -> PickerMode:
        if not self.visible:
            return PickerMode.HIDDEN
        return PickerMode.ARMED if self.enabled else PickerMode.PREVIEW_LOCK


class FieldStore(Protocol):
    """Host-side storage for the bound colour field."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...


@dataclass
class DictFieldStore:
    """In-memory FieldStore. Records every write in `writes`."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value
        self.writes.append((name, value))
