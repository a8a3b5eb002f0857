"""Tri-state hue cursor: walk the RGB ring one channel at a time.

Starts at pure red [255, 0, 0] with the pivot on red. Each step either
raises the pivot channel by 4.322 (clamped to 255), or lowers the channel
before the pivot by 4.322 (clamped to 0), or, when both are settled, snaps
the pivot to 255 and moves the pivot to the next channel. Never two
channels in one step.

This approximates HSV hue rotation without trigonometry. With 360 steps the
last segment does not quite finish: the final rim colour is red with a
little blue left in it. Use the `hsv` sweep for an exact ring.

Example:
    wheel-picker render wheel.png --sweep cursor
"""

from wheel_picker.core.types import HueSweep

sweep = HueSweep(
    name='cursor',
    help='Tri-state channel cursor (rise pivot, fall previous, advance). Close to HSV, not exact.',
)

STEP = 4.322  # per-degree channel change; 6 * 255 / 360 rounded up


@sweep.run
def run(steps: int) -> list[tuple[float, float, float]]:
    hue = [255.0, 0.0, 0.0]
    pivot = 0
    stops = []
    for _ in range(steps):
        before = (pivot + 2) % 3
        if hue[pivot] < 255:
            hue[pivot] = min(hue[pivot] + STEP, 255.0)
        elif hue[before] > 0:
            hue[before] = max(hue[before] - STEP, 0.0)
        else:
            hue[pivot] = 255.0
            pivot = (pivot + 1) % 3
        stops.append((hue[0], hue[1], hue[2]))
    return stops
