"""Exact HSV hue rotation at full saturation and value.

Step n carries hue n degrees (step 360 is back at 0, pure red). Within each
60-degree segment exactly one channel moves and the other two sit at 0 or
255. This is the default sweep.

Example:
    wheel-picker render wheel.png --sweep hsv
"""

import colorsys

from wheel_picker.core.types import HueSweep

sweep = HueSweep(
    name='hsv',
    help='Exact HSV hue per degree (default). Ends back on pure red.',
)


@sweep.run
def run(steps: int) -> list[tuple[float, float, float]]:
    stops = []
    for n in range(1, steps + 1):
        r, g, b = colorsys.hsv_to_rgb((n % steps) / steps, 1.0, 1.0)
        stops.append((r * 255, g * 255, b * 255))
    return stops
