"""macOS system colours (AppKit), as pre-expanded 'R G B' / 'R G B / A' channel strings."""

from uikit_css.core.types import ColorTable, Platform, ThemeColors

LIGHT_PALETTE = {
    'red': '255 59 48',
    'orange': '255 149 0',
    'yellow': '255 204 0',
    'green': '40 205 65',
    'mint': '0 199 190',
    'teal': '89 173 196',
    'cyan': '85 190 240',
    'blue': '0 122 255',
    'indigo': '88 86 214',
    'purple': '175 82 222',
    'pink': '255 45 85',
    'brown': '162 132 94',
    'gray': '142 142 147',
}

DARK_PALETTE = {
    'red': '255 69 58',
    'orange': '255 159 10',
    'yellow': '255 214 10',
    'green': '50 215 75',
    'mint': '102 212 207',
    'teal': '106 196 220',
    'cyan': '90 200 245',
    'blue': '10 132 255',
    'indigo': '94 92 230',
    'purple': '191 90 242',
    'pink': '255 55 95',
    'brown': '172 142 104',
    'gray': '152 152 157',
}

LIGHT_ELEMENTS = {
    # Text
    'label': '0 0 0 / 0.85',
    'secondaryLabel': '0 0 0 / 0.5',
    'tertiaryLabel': '0 0 0 / 0.26',
    'quaternaryLabel': '0 0 0 / 0.1',
    'text': '0 0 0',
    'placeholderText': '0 0 0 / 0.25',
    'selectedText': '0 0 0',
    'textBackground': '255 255 255',
    'selectedTextBackground': '179 215 255',
    'headerText': '0 0 0 / 0.85',
    'link': '0 104 218',
    # Content
    'separator': '0 0 0 / 0.1',
    'selectedContentBackground': '0 99 225',
    'unemphasizedSelectedContentBackground': '220 220 220',
    'grid': '230 230 230',
    # Windows and controls
    'windowBackground': '236 236 236',
    'underPageBackground': '150 150 150 / 0.9',
    'controlBackground': '255 255 255',
    'control': '255 255 255',
    'controlText': '0 0 0 / 0.85',
    'disabledControlText': '0 0 0 / 0.25',
    'controlAccent': '0 122 255',
    'findHighlight': '255 255 0',
}

DARK_ELEMENTS = {
    # Text
    'label': '255 255 255 / 0.85',
    'secondaryLabel': '255 255 255 / 0.55',
    'tertiaryLabel': '255 255 255 / 0.25',
    'quaternaryLabel': '255 255 255 / 0.1',
    'text': '255 255 255',
    'placeholderText': '255 255 255 / 0.25',
    'selectedText': '255 255 255',
    'textBackground': '30 30 30',
    'selectedTextBackground': '63 99 139',
    'headerText': '255 255 255',
    'link': '65 156 255',
    # Content
    'separator': '255 255 255 / 0.1',
    'selectedContentBackground': '0 88 208',
    'unemphasizedSelectedContentBackground': '70 70 70',
    'grid': '26 26 26',
    # Windows and controls
    'windowBackground': '50 50 50',
    'underPageBackground': '40 40 40',
    'controlBackground': '30 30 30',
    'control': '255 255 255 / 0.25',
    'controlText': '255 255 255 / 0.85',
    'disabledControlText': '255 255 255 / 0.25',
    'controlAccent': '10 132 255',
    'findHighlight': '255 255 0',
}

TABLE = ColorTable(
    palette=ThemeColors(light=LIGHT_PALETTE, dark=DARK_PALETTE),
    elements=ThemeColors(light=LIGHT_ELEMENTS, dark=DARK_ELEMENTS),
)

PLATFORM = Platform(name='macos', table=TABLE)
