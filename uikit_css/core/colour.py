"""Colour value helpers: hex expansion, alpha detection, CSS naming.

Colour values are plain strings. The tables ship pre-expanded channel
strings ("255 59 48" or "84 84 86 / 0.34"); a 6-digit hex triple is also
accepted and expanded on demand.
"""

import re

_HEX_RE = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE | re.ASCII)
_CAMEL_RE = re.compile(r'([a-z0-9])([A-Z])')
_CHANNELS_RE = re.compile(r'\s*([0-9]{1,3})\s+([0-9]{1,3})\s+([0-9]{1,3})\s*(?:/\s*([0-9]*\.?[0-9]+)\s*)?')


def hex_to_rgb(value: str) -> str:
    """Expand '#rrggbb' into 'r g b'. Anything else is returned unchanged."""
    m = _HEX_RE.fullmatch(value)
    if not m:
        return value
    return ' '.join(str(int(group, 16)) for group in m.groups())


def camel_to_kebab(name: str) -> str:
    """'placeholderText' -> 'placeholder-text'. Idempotent on kebab input."""
    return _CAMEL_RE.sub(r'\1-\2', name).lower()


def has_alpha(value: str) -> bool:
    """Textual alpha check, done on the raw value before hex expansion."""
    return '/' in value or 'rgba' in value or 'hsla' in value


def color_function(*values: str) -> str:
    """'rgba' if any of the values carries alpha, else 'rgb'."""
    return 'rgba' if any(has_alpha(v) for v in values) else 'rgb'


def parse_channels(value: str) -> tuple[int, int, int, float]:
    """Parse a colour value into (r, g, b, alpha).

    Accepts '#rrggbb', 'R G B' and 'R G B / A'. Alpha defaults to 1.0.
    Raises ValueError for anything else, or for out-of-range channels.
    """
    m = _CHANNELS_RE.fullmatch(hex_to_rgb(value))
    if not m:
        raise ValueError(f'Unparseable colour value: {value!r}')
    r, g, b = int(m.group(1)), int(m.group(2)), int(m.group(3))
    alpha = float(m.group(4)) if m.group(4) is not None else 1.0
    if max(r, g, b) > 255 or not 0.0 <= alpha <= 1.0:
        raise ValueError(f'Colour value out of range: {value!r}')
    return (r, g, b, alpha)
