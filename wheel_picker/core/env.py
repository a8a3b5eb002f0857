"""Environment and .env configuration for wheel-picker.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read after loading:
  WHEEL_SIZE    wheel side length in pixels (default 200)
  WHEEL_CENTRE  centre colour token (default white)
  WHEEL_SWEEP   hue sweep name (default hsv)
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SIZE = 200
DEFAULT_CENTRE = 'white'
DEFAULT_SWEEP = 'hsv'


@dataclass(frozen=True)
class WheelSettings:
    size: int = DEFAULT_SIZE
    centre: str = DEFAULT_CENTRE
    sweep: str = DEFAULT_SWEEP


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings() -> WheelSettings:
    """Read WHEEL_* variables. Unusable values fall back to defaults."""
    raw_size = os.environ.get('WHEEL_SIZE', '').strip()
    try:
        size = int(raw_size) if raw_size else DEFAULT_SIZE
    except ValueError:
        size = DEFAULT_SIZE
    return WheelSettings(
        size=size,
        centre=os.environ.get('WHEEL_CENTRE', '').strip() or DEFAULT_CENTRE,
        sweep=os.environ.get('WHEEL_SWEEP', '').strip() or DEFAULT_SWEEP,
    )
