"""wheel-picker — Render colour wheels and resolve picks from the command line.

Usage: uv run wheel-picker <command> [options]

Hue sweeps are auto-discovered from wheel_picker/sweeps/.
Each sweep module's docstring is its documentation.
Run `wheel-picker help <sweep>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, wheel-picker looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  WHEEL_SIZE, WHEEL_CENTRE and WHEEL_SWEEP supply option defaults.
"""

import argparse
import importlib
import sys

from wheel_picker import registry
from wheel_picker.core.env import load_env, load_settings
from wheel_picker.core.report import format_json, format_text, summarize
from wheel_picker.core.types import DictFieldStore
from wheel_picker.picker import WheelColourPicker, build_wheel

FIELD_NAME = 'colour'


def _load_sweep_module(name: str) -> object:
    """Load the raw module for a sweep (for docstring access)."""
    return importlib.import_module(f'wheel_picker.sweeps.{name}')


def _short_doc(name: str) -> str:
    doc = (_load_sweep_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _add_wheel_options(p: argparse.ArgumentParser) -> None:
    # Defaults are filled from WheelSettings after .env loading
    p.add_argument('-s', '--size', type=int, default=None, help='Wheel side length in pixels (env WHEEL_SIZE)')
    p.add_argument('-c', '--centre', default=None, help='Centre colour token, e.g. white or #808080 (env WHEEL_CENTRE)')
    p.add_argument('--sweep', default=None, help='Hue sweep name (env WHEEL_SWEEP, default hsv)')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  wheel-picker render wheel.png\n'
        '  wheel-picker render wheel.png --size 400 --centre "#808080" --json\n'
        '  wheel-picker render wheel.png --sweep cursor\n'
        '  wheel-picker pick 150 100\n'
        '  wheel-picker sweeps\n'
        '  wheel-picker help cursor\n'
    )
    parser = argparse.ArgumentParser(
        prog='wheel-picker',
        description='Render colour wheels and resolve pointer picks.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    render = sub.add_parser('render', help='Generate a wheel and save it as PNG')
    render.add_argument('output', help='Output PNG path')
    _add_wheel_options(render)
    render.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    pick = sub.add_parser('pick', help='Arm a picker and print the colour under (x, y)')
    pick.add_argument('x', type=float)
    pick.add_argument('y', type=float)
    _add_wheel_options(pick)

    sub.add_parser('sweeps', help='List available hue sweeps')

    help_parser = sub.add_parser('help', help='Print full docs for a sweep')
    help_parser.add_argument('sweep_name', nargs='?', help='Sweep name')

    return parser


def _apply_settings(args: argparse.Namespace) -> None:
    settings = load_settings()
    if args.size is None:
        args.size = settings.size
    if args.centre is None:
        args.centre = settings.centre
    if args.sweep is None:
        args.sweep = settings.sweep


def _print_sweeps() -> None:
    print('Available sweeps:\n')
    for name in sorted(registry.all_sweeps()):
        print(f'  {name:<10} {_short_doc(name)}')
    print('\nRun: wheel-picker help <sweep> for full docs.')


def _print_help(name: str | None) -> None:
    """Print full module docstring for a sweep."""
    if name is None:
        _print_sweeps()
        return

    sweeps = registry.all_sweeps()
    if name not in sweeps:
        print(f'Unknown sweep: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(sweeps))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_sweep_module(name).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {name!r})')


def _check_sweep(name: str) -> None:
    if name not in registry.all_sweeps():
        print(f'Error: unknown sweep: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(registry.all_sweeps()))}', file=sys.stderr)
        sys.exit(1)


def _render(args: argparse.Namespace) -> None:
    _check_sweep(args.sweep)
    raster = build_wheel(args.size, args.centre, args.sweep)
    if raster.size == 0:
        print(f'Error: wheel size must be positive, got {args.size}', file=sys.stderr)
        sys.exit(1)
    raster.image.save(args.output)
    summary = summarize(raster)
    if args.json:
        print(format_json(summary, path=args.output))
    else:
        print(format_text(summary, path=args.output))


def _pick(args: argparse.Namespace) -> None:
    _check_sweep(args.sweep)
    picker = WheelColourPicker(
        DictFieldStore(),
        FIELD_NAME,
        notify_changed=lambda: None,
        size=args.size,
        centre=args.centre,
        sweep=args.sweep,
    )
    picker.toggle_visibility()
    print(picker.on_pointer_move(args.x, args.y))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'wheel-picker: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'sweeps':
        _print_sweeps()
        return

    if args.command == 'help':
        _print_help(args.sweep_name)
        return

    _apply_settings(args)
    if args.command == 'render':
        _render(args)
    elif args.command == 'pick':
        _pick(args)


if __name__ == '__main__':
    main()
