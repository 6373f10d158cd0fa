"""uikit-css — Generate CSS variables and Tailwind config from Apple UIKit colours.

Usage: uv run uikit-css <generator> [options]

Generators are auto-discovered from uikit_css/generators/.
Each generator module's docstring is its documentation.
Run `uikit-css help <generator>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, uikit-css looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  Command-line options override both.
"""

import argparse
import sys

from uikit_css import registry, tables
from uikit_css.core.env import load_env, resolve_settings
from uikit_css.core.formatter import FormatterError
from uikit_css.core.report import format_json, format_text
from uikit_css.core.types import BuildReport


def _short_help(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    generators = registry.all_generators()

    epilog = (
        'Examples:\n'
        '  uikit-css all\n'
        '  uikit-css all --out-dir ./dist --json\n'
        '  uikit-css v4 --platform ios --formatter prettier\n'
        '  uikit-css css --prefix ui-\n'
        '  uikit-css swatches --platform macos\n'
        '  uikit-css help v4\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  UIKIT_CSS_OUT_DIR     output root (default: src)\n'
        '  UIKIT_CSS_FORMATTER   builtin | prettier (default: builtin)\n'
        '  UIKIT_CSS_PREFIX      custom-property prefix (default: none)\n'
        '  UIKIT_CSS_PLATFORMS   comma-separated, e.g. ios,macos (default: all)\n'
    )
    parser = argparse.ArgumentParser(
        prog='uikit-css',
        description='Generate CSS variables and Tailwind config from Apple UIKit colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='generator', help='Generator to run')

    # Auto-register each generator as a subcommand using module docstring
    for name in sorted(generators):
        p = sub.add_parser(name, help=_short_help(name))
        p.add_argument('-o', '--out-dir', help='Output root directory (default: src)')
        p.add_argument('-f', '--formatter', help='Formatter: builtin or prettier (default: builtin)')
        p.add_argument('-p', '--prefix', default=None, help='Prefix inserted into every custom-property name')
        p.add_argument(
            '--platform',
            action='append',
            choices=sorted(tables.PLATFORMS),
            help='Platform to build (repeatable, default: all)',
        )
        p.add_argument('-j', '--json', action='store_true', help='Output JSON report instead of text')

    # `help` subcommand — prints full module docstring for a generator
    help_parser = sub.add_parser('help', help='Print full docs for a generator')
    help_parser.add_argument('command', nargs='?', help='Generator name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a generator."""
    generators = registry.all_generators()

    if command is None:
        print('Available generators:\n')
        for name in sorted(generators):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: uikit-css help <generator> for full docs.')
        return

    if command not in generators:
        print(f'Unknown generator: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(generators))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'uikit-css: loaded {env_path}', file=sys.stderr)

    if not args.generator:
        parser.print_help()
        sys.exit(1)

    if args.generator == 'help':
        _print_help(getattr(args, 'command', None))
        return

    settings = resolve_settings(
        out_dir=args.out_dir,
        formatter=args.formatter,
        prefix=args.prefix,
        platforms=args.platform,
    )
    report = BuildReport(out_dir=str(settings.out_dir), formatter=settings.formatter)

    try:
        platforms = tables.select(settings.platforms)
        registry.get(args.generator).execute(platforms, settings, report)
    except (OSError, FormatterError, ValueError) as e:
        print(f'uikit-css: error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
