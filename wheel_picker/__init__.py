"""wheel-picker — procedural colour wheel and pixel-based colour picker."""

from wheel_picker.core.types import DictFieldStore, FieldStore, PickerMode, PickState, WheelRaster
from wheel_picker.picker import WheelColourPicker, build_wheel

__all__ = [
    'DictFieldStore',
    'FieldStore',
    'PickState',
    'PickerMode',
    'WheelColourPicker',
    'WheelRaster',
    'build_wheel',
]
