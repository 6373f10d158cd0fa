"""Render a PNG swatch sheet of every colour, light and dark side by side.

One row per colour name (palette then elements, same order as the
stylesheets). Each row has the name, a light cell composited over white and
a dark cell composited over black, so translucent fills and labels show as
they would on the system background. A colour missing on one side leaves
that cell as bare background.

Not part of `all` — run it explicitly.

Example:
    uikit-css swatches
    uikit-css swatches --platform macos --out-dir ./preview
"""

import io
import sys

import numpy as np
from PIL import Image, ImageDraw

from uikit_css.core.colour import parse_channels
from uikit_css.core.types import BuildReport, BuildSettings, ColorTable, GenerationTarget, Generator, Platform
from uikit_css.core.writer import write_output

generator = Generator(
    name='swatches',
    help='PNG swatch sheet: every colour, light over white and dark over black.',
    subdir='swatches',
    extension='.png',
)

ROW_HEIGHT = 24
LABEL_WIDTH = 260
CELL_WIDTH = 120
PADDING = 4
LIGHT_BG = (255, 255, 255)
DARK_BG = (0, 0, 0)
LABEL_BG = (242, 242, 247)
LABEL_FG = (60, 60, 67)


def composite(value: str, background: tuple[int, int, int]) -> tuple[int, int, int]:
    """Blend a colour value over an opaque background (straight alpha)."""
    r, g, b, alpha = parse_channels(value)
    fg = np.array([r, g, b], dtype=float)
    bg = np.array(background, dtype=float)
    out = np.rint(fg * alpha + bg * (1.0 - alpha)).astype(int)
    return (int(out[0]), int(out[1]), int(out[2]))


def cell_origin(row: int, column: int) -> tuple[int, int]:
    """Top-left pixel of a swatch cell. Column 0 is light, 1 is dark."""
    return (LABEL_WIDTH + column * CELL_WIDTH, row * ROW_HEIGHT)


def render(table: ColorTable) -> Image.Image:
    keys = table.all_keys()
    light_colors = table.merged_light()
    dark_colors = table.merged_dark()

    width = LABEL_WIDTH + 2 * CELL_WIDTH
    height = max(1, len(keys)) * ROW_HEIGHT
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :LABEL_WIDTH] = LABEL_BG
    arr[:, LABEL_WIDTH : LABEL_WIDTH + CELL_WIDTH] = LIGHT_BG
    arr[:, LABEL_WIDTH + CELL_WIDTH :] = DARK_BG

    for row, key in enumerate(keys):
        for column, (colors, bg) in enumerate(((light_colors, LIGHT_BG), (dark_colors, DARK_BG))):
            value = colors.get(key)
            if not value:
                continue
            x, y = cell_origin(row, column)
            arr[y + 1 : y + ROW_HEIGHT - 1, x + 1 : x + CELL_WIDTH - 1] = composite(value, bg)

    image = Image.fromarray(arr, 'RGB')
    draw = ImageDraw.Draw(image)
    for row, key in enumerate(keys):
        draw.text((PADDING, row * ROW_HEIGHT + PADDING), key, fill=LABEL_FG)
    return image


@generator.run
def run(platform: Platform, target: GenerationTarget, settings: BuildSettings, report: BuildReport) -> None:
    image = render(platform.table)
    buf = io.BytesIO()
    image.save(buf, format='PNG')
    size = write_output(target.output_path, buf.getvalue())
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
