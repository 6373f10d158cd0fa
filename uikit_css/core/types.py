"""Shared types for uikit-css: ThemeColors, ColorTable, Platform, Generator, BuildReport."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ThemeColors:
    """Light and dark name -> colour value mappings for one context."""

    light: Mapping[str, str] = field(default_factory=dict)
    dark: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'light', _freeze(self.light))
        object.__setattr__(self, 'dark', _freeze(self.dark))


@dataclass(frozen=True)
class ColorTable:
    """Raw hues (palette) plus semantic UI roles (elements)."""

    palette: ThemeColors = field(default_factory=ThemeColors)
    elements: ThemeColors = field(default_factory=ThemeColors)

    def merged_light(self) -> dict[str, str]:
        """Light palette overlaid with light elements. Elements win on collision."""
        return {**self.palette.light, **self.elements.light}

    def merged_dark(self) -> dict[str, str]:
        return {**self.palette.dark, **self.elements.dark}

    def all_keys(self) -> list[str]:
        """Light keys in insertion order, then dark-only keys."""
        keys = dict.fromkeys(self.merged_light())
        keys.update(dict.fromkeys(self.merged_dark()))
        return list(keys)


@dataclass(frozen=True)
class Platform:
    """A named colour table, e.g. 'ios' or 'macos'."""

    name: str
    table: ColorTable


@dataclass(frozen=True)
class GenerationTarget:
    """Where one pass writes, and the naming prefix for emitted variables."""

    output_path: Path
    prefix: str = ''


@dataclass(frozen=True)
class BuildSettings:
    """Resolved configuration for a build run (see core.env.resolve_settings)."""

    out_dir: Path = Path('src')
    formatter: str = 'builtin'
    prefix: str = ''
    platforms: tuple[str, ...] = ()


class Generator:
    """A self-registering output pass.

    Usage in a generator module:

        generator = Generator(name='v4', help='Tailwind v4 stylesheet', subdir='v4', extension='.css')

        @generator.run
        def run(platform, target, settings, report):
            ...

    A generator built with per_platform=False gets the whole platform list
    instead: run(platforms, settings, report). Used by composite passes.
    """

    def __init__(self, name: str, help: str = '', subdir: str = '', extension: str = '', per_platform: bool = True):
        self.name = name
        self.help = help
        self.subdir = subdir
        self.extension = extension
        self.per_platform = per_platform
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def target(self, settings: BuildSettings, platform: Platform) -> GenerationTarget:
        """Output location for this pass and platform: <out_dir>/<subdir>/<platform><extension>."""
        path = Path(settings.out_dir) / self.subdir / f'{platform.name}{self.extension}'
        return GenerationTarget(output_path=path, prefix=settings.prefix)

    def execute(self, platforms: list[Platform], settings: BuildSettings, report: BuildReport) -> None:
        """Execute the generator's run function once per platform, in order."""
        if self._run_fn is None:
            raise RuntimeError(f'Generator {self.name} has no run function')
        if not self.per_platform:
            self._run_fn(platforms, settings, report)
            return
        for platform in platforms:
            self._run_fn(platform, self.target(settings, platform), settings, report)


@dataclass
class BuildReport:
    """Accumulates what each pass wrote, for text/JSON output."""

    out_dir: str = ''
    formatter: str = ''
    outputs: dict[str, dict[str, dict[str, Any]]] = field(default_factory=dict)
    file_count: int = 0

    def add(self, platform_name: str, generator_name: str, data: dict[str, Any]) -> None:
        """Add pass results for a platform."""
        if platform_name not in self.outputs:
            self.outputs[platform_name] = {}
        self.outputs[platform_name][generator_name] = data
        if 'path' in data:
            self.file_count += 1
