"""Environment and settings loading for uikit-css.

Load order for .env (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings resolution (first wins): CLI flag, environment, default.

  UIKIT_CSS_OUT_DIR     output root              (default: src)
  UIKIT_CSS_FORMATTER   builtin | prettier       (default: builtin)
  UIKIT_CSS_PREFIX      custom-property prefix   (default: empty)
  UIKIT_CSS_PLATFORMS   comma-separated names    (default: all)
"""

import os
from pathlib import Path

from uikit_css.core.types import BuildSettings

ENV_PREFIX = 'UIKIT_CSS_'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip().removeprefix('export ').strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def _split_platforms(raw: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in raw.split(',') if p.strip())


def resolve_settings(
    out_dir: str | None = None,
    formatter: str | None = None,
    prefix: str | None = None,
    platforms: list[str] | None = None,
) -> BuildSettings:
    """Merge explicit values (CLI) over UIKIT_CSS_* env vars over defaults."""
    env = os.environ
    defaults = BuildSettings()
    # prefix may legitimately be set to '' on the command line
    if prefix is None:
        prefix = env.get(f'{ENV_PREFIX}PREFIX', defaults.prefix)
    return BuildSettings(
        out_dir=Path(out_dir or env.get(f'{ENV_PREFIX}OUT_DIR') or defaults.out_dir),
        formatter=formatter or env.get(f'{ENV_PREFIX}FORMATTER') or defaults.formatter,
        prefix=prefix,
        platforms=tuple(platforms) if platforms else _split_platforms(env.get(f'{ENV_PREFIX}PLATFORMS', '')),
    )
