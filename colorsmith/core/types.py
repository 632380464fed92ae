"""Shared types for colorsmith: RGB, HSL, Palette, PaletteOptions, AuditReport, Command."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

# Step keys of a full scale, lightest first. 500 is the base tone.
STEP_KEYS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

HARMONY_SCHEMES: tuple[str, ...] = ('complementary', 'triadic', 'analogous')
ACCESSIBILITY_LEVELS: tuple[str, ...] = ('AA', 'AAA', 'AA-large', 'AAA-large')
SEMANTIC_NAMES: tuple[str, ...] = ('success', 'warning', 'error', 'info')

ColorScale = dict[int, str]


class InvalidColorFormat(ValueError):
    """Raised when a string is not a #rgb or #rrggbb hex colour."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'Invalid hex colour: {value!r} (expected #rgb or #rrggbb)')


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class PaletteOptions:
    """Options for palette generation. Validated on construction."""

    accessibility: str = 'AA'
    harmony: str = 'complementary'
    steps: int = 11
    include_semantics: bool = True

    def __post_init__(self) -> None:
        if self.accessibility not in ACCESSIBILITY_LEVELS:
            raise ValueError(
                f'Unknown accessibility level: {self.accessibility}. Available: {", ".join(ACCESSIBILITY_LEVELS)}'
            )
        if self.harmony not in HARMONY_SCHEMES:
            raise ValueError(f'Unknown harmony scheme: {self.harmony}. Available: {", ".join(HARMONY_SCHEMES)}')
        if self.steps < 1:
            raise ValueError(f'steps must be >= 1, got {self.steps}')


@dataclass
class Palette:
    """A named collection of colour scales."""

    primary: ColorScale
    neutral: ColorScale
    secondary: ColorScale | None = None
    accent: ColorScale | None = None
    semantic: dict[str, ColorScale] = field(default_factory=dict)

    def names(self) -> list[str]:
        """Top-level keys present in this palette, in output order."""
        names = ['primary']
        if self.secondary is not None:
            names.append('secondary')
        if self.accent is not None:
            names.append('accent')
        names.append('neutral')
        if self.semantic:
            names.append('semantic')
        return names

    def scales(self) -> Iterator[tuple[str, ColorScale]]:
        """Yield (name, scale) for every scale, semantic scales flattened by their own name."""
        yield 'primary', self.primary
        if self.secondary is not None:
            yield 'secondary', self.secondary
        if self.accent is not None:
            yield 'accent', self.accent
        yield 'neutral', self.neutral
        yield from self.semantic.items()

    def to_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        for name in self.names():
            if name == 'semantic':
                obj[name] = {k: _str_keys(v) for k, v in self.semantic.items()}
            else:
                obj[name] = _str_keys(getattr(self, name))
        return obj


def _str_keys(scale: ColorScale) -> dict[str, str]:
    return {str(step): colour for step, colour in scale.items()}


@dataclass
class AuditReport:
    """Accumulates per-step contrast results for text/JSON output."""

    base: str = ''
    level: str = 'AA'
    threshold: float = 4.5
    scales: dict[str, dict[int, dict[str, Any]]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, scale_name: str, step: int, data: dict[str, Any]) -> None:
        """Add the result for one step of a scale."""
        if scale_name not in self.scales:
            self.scales[scale_name] = {}
        self.scales[scale_name][step] = data

    def record_pass(self, scale_name: str) -> None:
        self.pass_count += 1

    def record_fail(self, scale_name: str) -> None:
        self.fail_count += 1

    @property
    def failures(self) -> list[tuple[str, int]]:
        return [
            (scale_name, step)
            for scale_name, steps in self.scales.items()
            for step, data in steps.items()
            if not data.get('pass', False)
        ]


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='css', help='Print CSS custom properties')

        @command.arguments
        def arguments(parser):
            parser.add_argument('base')

        @command.run
        def run(args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._args_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse configuration function."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function. Returns the process exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        code = self._run_fn(args)
        return 0 if code is None else int(code)
