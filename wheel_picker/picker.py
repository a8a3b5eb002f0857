"""Pointer-to-colour resolver and toggle state machine.

The picker owns one generated wheel and a PickState. The host feeds it three
inputs: pointer moved at (x, y), wheel surface clicked, preview clicked.

  HIDDEN       wheel not shown, pointer moves ignored
  ARMED        wheel shown, pointer moves resolve colours
  PREVIEW_LOCK wheel shown, colour frozen until the surface is clicked again

Every resolved colour is pushed to the FieldStore straight away. The host is
told about toggles through notify_changed and pulls values via get_outputs().
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from wheel_picker import registry
from wheel_picker.core.env import DEFAULT_CENTRE, DEFAULT_SIZE, DEFAULT_SWEEP
from wheel_picker.core.generator import generate
from wheel_picker.core.palette import to_hex
from wheel_picker.core.types import RGBF, FieldStore, PickerMode, PickState, WheelRaster


def build_wheel(
    size: int = DEFAULT_SIZE,
    centre: str = DEFAULT_CENTRE,
    sweep: str | Sequence[RGBF] = DEFAULT_SWEEP,
) -> WheelRaster:
    """Generate a wheel from a registered sweep name or an explicit rim sequence."""
    if isinstance(sweep, str):
        return generate(size, centre, registry.get(sweep).execute(), sweep=sweep)
    return generate(size, centre, list(sweep))


class WheelColourPicker:
    """Resolves pointer positions on a colour wheel into a bound hex field."""

    def __init__(
        self,
        store: FieldStore,
        field_name: str,
        notify_changed: Callable[[], None],
        size: int = DEFAULT_SIZE,
        centre: str = DEFAULT_CENTRE,
        sweep: str = DEFAULT_SWEEP,
    ):
        self.store = store
        self.field_name = field_name
        self._notify_changed = notify_changed
        self.raster = build_wheel(size, centre, sweep)
        self.state = PickState(current_colour=store.get(field_name))
        # Swatch background; stays unset when the field has no value yet
        self.preview_colour: str | None = self.state.current_colour or None

    @property
    def mode(self) -> PickerMode:
        return self.state.mode

    @property
    def enabled(self) -> bool:
        return self.state.enabled

    def toggle_visibility(self) -> None:
        """Show and arm the wheel, or hide and disarm it."""
        if not self.state.enabled:
            self.state.enabled = True
            self.state.visible = True
        else:
            self.state.enabled = False
            self.state.visible = False
        self._notify_changed()

    def toggle_freeze(self) -> None:
        """Flip whether pointer moves update the colour. Visibility is untouched."""
        self.state.enabled = not self.state.enabled
        self._notify_changed()

    def on_pointer_move(self, x: float, y: float) -> str | None:
        """Resolve the pixel under the pointer. Returns the new colour, or None when disabled."""
        if not self.state.enabled:
            return None
        if math.isfinite(x) and math.isfinite(y):
            r, g, b, _a = self.raster.pixel(int(x), int(y))
        else:
            # NaN or infinite pointer: nowhere on the raster
            r = g = b = 0
        colour = to_hex(r, g, b)
        self.state.current_colour = colour
        self.preview_colour = colour
        self.store.set(self.field_name, colour)
        return colour

    # Abstract host inputs
    def on_surface_click(self) -> None:
        self.toggle_freeze()

    def on_preview_click(self) -> None:
        self.toggle_visibility()

    def refresh(self) -> None:
        """Host-driven update: push the current colour back to the store."""
        if self.state.current_colour is not None:
            self.store.set(self.field_name, self.state.current_colour)

    def get_outputs(self) -> dict[str, str | None]:
        return {'colour_property': self.state.current_colour}

    def rebuild(self, size: int | None = None, centre: str | None = None, sweep: str | None = None) -> bool:
        """Regenerate the wheel if size, centre or sweep changed. Returns True when rebuilt."""
        size = self.raster.size if size is None else max(int(size), 0)
        centre = self.raster.centre if centre is None else centre
        sweep = self.raster.sweep if sweep is None else sweep
        if (size, centre, sweep) == (self.raster.size, self.raster.centre, self.raster.sweep):
            return False
        self.raster = build_wheel(size, centre, sweep)
        return True
