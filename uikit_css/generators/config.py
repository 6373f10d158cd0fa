"""Tailwind config preset mapping colour names onto the legacy CSS variables.

Writes <out_dir>/tailwind/<platform>.js, a CommonJS preset:

  module.exports = {
    theme: { extend: { colors: { uikit: {
      "red": "rgb(var(--uikit-red) / <alpha-value>)",
      "separator": "rgb(var(--uikit-separator))",
      ...

Opaque colours get Tailwind's <alpha-value> placeholder so opacity
modifiers (bg-uikit-red/50) work. Colours whose light or dark value carries
alpha already have it inside the variable, so they are wrapped as-is.
Pair with the stylesheet from the `css` pass.

Example:
    uikit-css config
"""

import json
import sys

from uikit_css.core.colour import camel_to_kebab, has_alpha
from uikit_css.core.formatter import get_formatter
from uikit_css.core.types import BuildReport, BuildSettings, ColorTable, GenerationTarget, Generator, Platform
from uikit_css.core.writer import write_output
from uikit_css.generators.legacy_css import DEFAULT_PREFIX

generator = Generator(
    name='config',
    help='Tailwind config preset (CommonJS) referencing the legacy CSS variables.',
    subdir='tailwind',
    extension='.js',
)

BANNER = '/* This file is auto-generated by uikit-css */'
COLOR_GROUP = 'uikit'


def build_colors(table: ColorTable, prefix: str = '') -> dict[str, str]:
    """Colour name (kebab-case) -> CSS colour expression, in key order."""
    prefix = prefix or DEFAULT_PREFIX
    light_colors = table.merged_light()
    dark_colors = table.merged_dark()

    colors: dict[str, str] = {}
    for key in table.all_keys():
        values = [v for v in (light_colors.get(key), dark_colors.get(key)) if v]
        if not values:
            continue
        kebab = camel_to_kebab(key)
        if any(has_alpha(v) for v in values):
            colors[kebab] = f'rgb(var(--{prefix}{kebab}))'
        else:
            colors[kebab] = f'rgb(var(--{prefix}{kebab}) / <alpha-value>)'
    return colors


def render(table: ColorTable, prefix: str = '') -> str:
    """Assemble the unformatted config module, banner included."""
    config = {'theme': {'extend': {'colors': {COLOR_GROUP: build_colors(table, prefix)}}}}
    return f'{BANNER}\nmodule.exports = {json.dumps(config, indent=2)};\n'


@generator.run
def run(platform: Platform, target: GenerationTarget, settings: BuildSettings, report: BuildReport) -> None:
    text = get_formatter(settings.formatter).format(render(platform.table, target.prefix), 'babel')
    size = write_output(target.output_path, text)
    report.add(
        platform.name,
        generator.name,
        {
            'path': str(target.output_path),
            'bytes': size,
            'variables': len(build_colors(platform.table)),
        },
    )
    print(f'uikit-css: generated {generator.name} {platform.name} -> {target.output_path}', file=sys.stderr)
