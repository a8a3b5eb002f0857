"""Report builder — text and JSON summaries of a generated wheel."""

import json
from typing import Any

import numpy as np

from wheel_picker.core.palette import to_hex
from wheel_picker.core.types import WheelRaster

STOP_EVERY = 60  # degrees between listed rim stops


def summarize(raster: WheelRaster) -> dict[str, Any]:
    """Collect size, coverage and rim stops for a wheel."""
    side = raster.size
    owner = raster.owner if raster.owner is not None else np.zeros((side, side), dtype=np.int16)
    painted = int(np.count_nonzero(owner))

    if side:
        ys, xs = np.mgrid[0:side, 0:side]
        disc = np.hypot(xs - side / 2, ys - side / 2) <= side / 2
        in_disc = int(disc.sum())
        gaps = int(np.count_nonzero(disc & (owner == 0)))
    else:
        in_disc = gaps = 0

    stops = []
    for degree in range(0, len(raster.rim), STOP_EVERY):
        # step 360 paints the 0 degree ray last
        r, g, b = raster.rim[degree - 1]
        stops.append({'angle': degree, 'hex': to_hex(r, g, b)})

    return {
        'size': side,
        'centre': raster.centre,
        'centre_hex': to_hex(*raster.centre_rgb),
        'sweep': raster.sweep,
        'painted': painted,
        'disc_pixels': in_disc,
        'gaps': gaps,
        'coverage_pct': round(100.0 * (in_disc - gaps) / in_disc, 1) if in_disc else 0.0,
        'stops': stops,
    }


def format_text(summary: dict[str, Any], path: str | None = None) -> str:
    """Format a wheel summary as human-readable text."""
    size = summary['size']
    header = f'wheel-picker: {size}×{size} sweep={summary["sweep"]}'
    if path:
        header += f' — {path}'
    lines = [header, '']
    lines.append(f'  centre: {summary["centre"]} ({summary["centre_hex"]})')
    lines.append(f'  painted: {summary["painted"]}/{summary["disc_pixels"]} disc pixels')
    mark = '✓' if summary['gaps'] == 0 else '✗'
    lines.append(f'  coverage: {summary["coverage_pct"]:.1f}%  gaps={summary["gaps"]}  {mark}')
    if summary['stops']:
        parts = [f'{s["angle"]}°:{s["hex"]}' for s in summary['stops']]
        lines.append(f'  rim: {", ".join(parts)}')
    return '\n'.join(lines)


def format_json(summary: dict[str, Any], path: str | None = None) -> str:
    """Format a wheel summary as JSON."""
    obj = dict(summary)
    if path:
        obj['image'] = path
    return json.dumps(obj, indent=2)
