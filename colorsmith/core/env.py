"""Environment and .env configuration for colorsmith.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  COLORSMITH_LEVEL      default accessibility level (AA, AAA, AA-large, AAA-large)
  COLORSMITH_HARMONY    default harmony scheme (complementary, triadic, analogous)
  COLORSMITH_STEPS      default number of scale steps
  COLORSMITH_SEMANTICS  0/false/no/off disables semantic scales
  COLORSMITH_PREFIX     CSS custom-property prefix
  COLORSMITH_SELECTOR   CSS selector wrapping the properties
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from colorsmith.core.palette import DEFAULT_PREFIX, DEFAULT_SELECTOR
from colorsmith.core.types import PaletteOptions

_FALSE_WORDS = {'0', 'false', 'no', 'off'}


@dataclass(frozen=True)
class Settings:
    """Defaults for the CLI, resolved from the environment."""

    options: PaletteOptions = field(default_factory=PaletteOptions)
    prefix: str = DEFAULT_PREFIX
    selector: str = DEFAULT_SELECTOR


def find_dotenv(start: Path) -> Path | None:
    """First .env in `start` or its parents. Never looks above a .git boundary."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines into a dict. Quotes around values are stripped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
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
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from COLORSMITH_* variables. Raises ValueError on bad values."""
    env = os.environ if environ is None else environ
    defaults = PaletteOptions()

    steps_raw = env.get('COLORSMITH_STEPS')
    try:
        steps = int(steps_raw) if steps_raw else defaults.steps
    except ValueError:
        raise ValueError(f'COLORSMITH_STEPS must be an integer, got {steps_raw!r}') from None

    semantics_raw = env.get('COLORSMITH_SEMANTICS')
    include_semantics = defaults.include_semantics
    if semantics_raw:
        include_semantics = semantics_raw.strip().lower() not in _FALSE_WORDS

    options = PaletteOptions(
        accessibility=env.get('COLORSMITH_LEVEL') or defaults.accessibility,
        harmony=env.get('COLORSMITH_HARMONY') or defaults.harmony,
        steps=steps,
        include_semantics=include_semantics,
    )
    return Settings(
        options=options,
        prefix=env.get('COLORSMITH_PREFIX', DEFAULT_PREFIX),
        selector=env.get('COLORSMITH_SELECTOR') or DEFAULT_SELECTOR,
    )
