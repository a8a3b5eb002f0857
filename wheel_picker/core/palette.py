"""Colour tokens and hex packing.

Centre colours are opaque tokens (`white`, `#fff`, `rgb(1,2,3)`) resolved
through PIL.ImageColor. Anything PIL cannot read degrades to black, and
channels PIL passes through out of range are clamped to [0, 255].
"""

from PIL import ImageColor

from wheel_picker.core.types import RGB


def parse_colour(token: str | None) -> RGB:
    """Resolve a colour token to RGB. Invalid or empty tokens return black."""
    if not token:
        return (0, 0, 0)
    try:
        rgb = ImageColor.getrgb(token.strip())
    except ValueError:
        return (0, 0, 0)
    r, g, b = (min(255, max(0, int(c))) for c in rgb[:3])
    return (r, g, b)


def pack_colour(r: int, g: int, b: int) -> str:
    """Pack channels as R*65536 + G*256 + B, six lowercase hex digits."""
    value = (int(r) & 0xFF) * 65536 + (int(g) & 0xFF) * 256 + (int(b) & 0xFF)
    return f'{value:06x}'


def unpack_colour(packed: str) -> RGB:
    value = int(packed.lstrip('#'), 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def to_hex(r: int, g: int, b: int) -> str:
    return '#' + pack_colour(r, g, b)
