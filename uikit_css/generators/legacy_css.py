"""Legacy CSS variables: raw channel triples, wrapped with rgb() at the point of use.

Writes <out_dir>/css/<platform>.css:

  :root, [data-theme='light'] { --uikit-red: 255 59 48; ... }
  @media (prefers-color-scheme: dark) { :root { --uikit-red: 255 69 58; ... } }
  [data-theme='dark'] { --uikit-red: 255 69 58; ... }

Consume as `color: rgb(var(--uikit-red))` or, for opaque colours,
`rgb(var(--uikit-red) / 0.5)`. Names are kebab-case. Values that carry
alpha keep their ' / A' suffix. The variable prefix is 'uikit-' unless
--prefix is given.

Example:
    uikit-css css
    uikit-css css --prefix ui-
"""

import sys

from uikit_css.core.colour import camel_to_kebab, hex_to_rgb
from uikit_css.core.formatter import get_formatter
from uikit_css.core.types import BuildReport, BuildSettings, ColorTable, GenerationTarget, Generator, Platform
from uikit_css.core.writer import write_output

generator = Generator(
    name='css',
    help='Legacy CSS variables (R G B triples) with light/dark selectors and media query.',
    subdir='css',
    extension='.css',
)

BANNER = '/* This file is auto-generated by uikit-css */'
DEFAULT_PREFIX = 'uikit-'


def _declarations(colors: dict[str, str], prefix: str) -> list[str]:
    return [f'--{prefix}{camel_to_kebab(key)}: {hex_to_rgb(value)};' for key, value in colors.items() if value]


def render(table: ColorTable, prefix: str = '') -> str:
    """Assemble the unformatted stylesheet, banner included."""
    prefix = prefix or DEFAULT_PREFIX
    light = _declarations(table.merged_light(), prefix)
    dark = _declarations(table.merged_dark(), prefix)
    return '\n'.join(
        [
            BANNER,
            ":root,\n[data-theme='light'] {",
            *light,
            '}',
            '',
            '@media (prefers-color-scheme: dark) {',
            ':root {',
            *dark,
            '}',
            '}',
            '',
            "[data-theme='dark'] {",
            *dark,
            '}',
        ]
    )


@generator.run
def run(platform: Platform, target: GenerationTarget, settings: BuildSettings, report: BuildReport) -> None:
    text = get_formatter(settings.formatter).format(render(platform.table, target.prefix), 'css')
    size = write_output(target.output_path, text)
    report.add(
        platform.name,
        generator.name,
        {
            'path': str(target.output_path),
            'bytes': size,
            'variables': len(platform.table.all_keys()),
        },
    )
    print(f'uikit-css: generated {generator.name} {platform.name} -> {target.output_path}', file=sys.stderr)
