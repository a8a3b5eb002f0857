"""Colour wheel raster generation by angle-sweep compositing.

For every degree step the generator paints a full radial-gradient disc
(centre colour at the middle, the step's rim colour at radius size/2) into a
scratch layer, erases everything outside the wedge [step-1, step+1] degrees
and alpha-composites what is left onto the wheel. Wedges overlap by one
degree, so each pixel ends up owned by the last step covering it and the
disc has no unpainted seams, including the 359 -> 0 wraparound.

Angles follow screen convention: 0 degrees points right and angles grow
clockwise because y grows downward.

Pixels are measured from their top-left corner, not their centre, so the
pixel at (size//2, size//2) sits exactly on the wheel centre and carries the
centre colour unmixed. That holds for even sizes only: with an odd size the
nearest pixel is half a pixel off in both axes and picks up a trace of the
rim colour. Column 0 touches the rim while the last column stays one pixel
inside it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from PIL import Image

from wheel_picker.core.palette import parse_colour
from wheel_picker.core.types import RGB, RGBF, SWEEP_STEPS, WheelRaster

WEDGE_HALF_WIDTH = 1.0  # degrees either side of the step angle


def _round_rgb(colour: RGBF) -> RGB:
    r, g, b = (min(255, max(0, math.floor(c + 0.5))) for c in colour)
    return (r, g, b)


def _geometry(size: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Per-pixel radius fraction, screen angle in degrees and disc mask."""
    half = size / 2
    ys, xs = np.mgrid[0:size, 0:size]
    dx = xs - half
    dy = ys - half
    radius = np.hypot(dx, dy)
    frac = np.clip(radius / half, 0.0, 1.0)
    angle = np.degrees(np.arctan2(dy, dx)) % 360.0
    return frac, angle, radius <= half


def _wedge(angle: np.ndarray, step: int) -> np.ndarray:
    """Mask of pixels within [step-1, step+1] degrees, wrapping at 360."""
    start = step - WEDGE_HALF_WIDTH
    return np.mod(angle - start, 360.0) <= 2 * WEDGE_HALF_WIDTH


def generate(size: int, centre: str, rim: Sequence[RGBF], sweep: str = 'custom') -> WheelRaster:
    """Build a wheel of side `size` from one rim colour per degree step.

    `size <= 0` yields an empty raster rather than an error; every pixel read
    from it comes back as a zero pixel.
    """
    if len(rim) != SWEEP_STEPS:
        raise ValueError(f'expected {SWEEP_STEPS} rim colours, got {len(rim)}')

    side = max(int(size), 0)
    centre_rgb = parse_colour(centre)
    stops = [_round_rgb(c) for c in rim]
    owner = np.zeros((side, side), dtype=np.int16)
    wheel = Image.new('RGBA', (side, side), (0, 0, 0, 0))

    if side == 0:
        owner.flags.writeable = False
        return WheelRaster(wheel, side, centre, centre_rgb, sweep, stops, owner)

    frac, angle, disc = _geometry(side)
    inner = np.array(centre_rgb, dtype=float)

    for step in range(1, SWEEP_STEPS + 1):
        mask = disc & _wedge(angle, step)
        if not mask.any():
            continue
        outer = np.array(stops[step - 1], dtype=float)

        # Scratch layer: gradient disc with everything outside the wedge erased
        scratch = np.zeros((side, side, 4), dtype=np.uint8)
        t = frac[mask][:, None]
        scratch[mask, :3] = np.clip(np.rint(inner + (outer - inner) * t), 0, 255).astype(np.uint8)
        scratch[mask, 3] = 255

        wheel = Image.alpha_composite(wheel, Image.fromarray(scratch))
        owner[mask] = step

    owner.flags.writeable = False
    return WheelRaster(wheel, side, centre, centre_rgb, sweep, stops, owner)
