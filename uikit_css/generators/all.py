"""Run the full build: legacy CSS, Tailwind config, then Tailwind v4 CSS.

Passes run in that fixed order, each over every selected platform
(ios, then macos). The first failure aborts the rest of the build;
files already written by earlier passes are left in place.

Skips: swatches (preview only — run explicitly if needed).

Example:
    uikit-css all
    uikit-css all --out-dir ./dist --formatter prettier
    uikit-css all --json
"""

from uikit_css.core.types import BuildReport, BuildSettings, Generator, Platform

generator = Generator(
    name='all',
    help='Full build: css, config, then v4, for every platform.',
    per_platform=False,
)

PIPELINE = ('css', 'config', 'v4')


@generator.run
def run(platforms: list[Platform], settings: BuildSettings, report: BuildReport) -> None:
    from uikit_css.registry import get

    for name in PIPELINE:
        get(name).execute(platforms, settings, report)
