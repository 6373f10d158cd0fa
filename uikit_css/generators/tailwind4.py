"""Tailwind v4 stylesheet with theme-aware colour variables.

Writes <out_dir>/v4/<platform>.css containing:

  @theme inline     Aliases per colour, wrapping the raw variable in rgb()/rgba():
                      --color-placeholder-text: rgb(var(--color-placeholderText));
                    plus -light / -dark variants where the table has them.
  @layer base       :root declares every raw channel triple, light and dark.
                    Light is the default for --color-<name>. Dark is switched
                    on by @media (prefers-color-scheme: dark) or by
                    [data-theme='dark'] on an ancestor.
  @custom-variant   light / dark variants keyed on [data-theme].

Alias names are kebab-case; the raw variables keep the table key verbatim.
Palette and elements are merged, elements win on a name collision.
A --prefix is inserted after '--color-' in every variable name.

Example:
    uikit-css v4
    uikit-css v4 --platform ios --formatter prettier
"""

import sys

from uikit_css.core.colour import camel_to_kebab, color_function, hex_to_rgb
from uikit_css.core.formatter import get_formatter
from uikit_css.core.types import BuildReport, BuildSettings, ColorTable, GenerationTarget, Generator, Platform
from uikit_css.core.writer import write_output

generator = Generator(
    name='v4',
    help='Tailwind v4 stylesheet: @theme aliases, light defaults, dark overrides.',
    subdir='v4',
    extension='.css',
)

BANNER = '/* This file is auto-generated by uikit-css for Tailwind v4 */'

CUSTOM_VARIANTS = (
    '@custom-variant light (&:where([data-theme="light"], [data-theme="light"] *));\n'
    '@custom-variant dark (&:where([data-theme="dark"], [data-theme="dark"] *));'
)


def build_sections(table: ColorTable, prefix: str = '') -> dict[str, list[str]]:
    """Build the declaration lines for each section of the stylesheet.

    Keys: 'theme', 'light', 'dark', 'media', 'selector'.
    """
    light_colors = table.merged_light()
    dark_colors = table.merged_dark()
    var = f'--color-{prefix}'

    theme: list[str] = []
    light: list[str] = []
    dark: list[str] = []

    for key in table.all_keys():
        light_value = light_colors.get(key)
        dark_value = dark_colors.get(key)
        if not light_value and not dark_value:
            continue
        kebab = camel_to_kebab(key)
        fn = color_function(*(v for v in (light_value, dark_value) if v))

        suffixes = ['']
        if light_value:
            suffixes.append('-light')
        if dark_value:
            suffixes.append('-dark')
        for suffix in suffixes:
            theme.append(f'{var}{kebab}{suffix}: {fn}(var({var}{key}{suffix}));')

        if light_value:
            rgb = hex_to_rgb(light_value)
            light.append(f'{var}{key}: {rgb};')
            light.append(f'{var}{key}-light: {rgb};')
        if dark_value:
            rgb = hex_to_rgb(dark_value)
            dark.append(f'{var}{key}: {rgb};')
            dark.append(f'{var}{key}-dark: {rgb};')

    overrides = [f'{var}{key}: var({var}{key}-dark);' for key in table.all_keys() if dark_colors.get(key)]

    return {
        'theme': theme,
        'light': light,
        'dark': dark,
        'media': overrides,
        'selector': list(overrides),
    }


def render(table: ColorTable, prefix: str = '') -> str:
    """Assemble the unformatted stylesheet, banner included."""
    s = build_sections(table, prefix)
    return '\n'.join(
        [
            BANNER,
            "@import 'tailwindcss';",
            '',
            '@theme inline {',
            '/* UIKit Colors - Auto-generated */',
            *s['theme'],
            '}',
            '',
            '/* Define color values */',
            '@layer base {',
            ':root {',
            '/* Light mode colors (default) */',
            *s['light'],
            *s['dark'],
            '}',
            '',
            '/* Dark mode overrides using media query */',
            '@media (prefers-color-scheme: dark) {',
            ':root {',
            *s['media'],
            '}',
            '}',
            '',
            '/* Dark mode overrides using data attribute */',
            "[data-theme='dark'] {",
            *s['selector'],
            '}',
            '}',
            '',
            '/* Custom variants for light/dark colors */',
            CUSTOM_VARIANTS,
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
