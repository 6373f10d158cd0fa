"""Static colour tables, one module per platform.

Each module exposes LIGHT_PALETTE, DARK_PALETTE, LIGHT_ELEMENTS,
DARK_ELEMENTS, the assembled TABLE and a PLATFORM. Build order is the
order of PLATFORMS.
"""

from uikit_css.core.types import Platform
from uikit_css.tables import ios, macos

PLATFORMS: dict[str, Platform] = {
    ios.PLATFORM.name: ios.PLATFORM,
    macos.PLATFORM.name: macos.PLATFORM,
}


def select(names: tuple[str, ...] | list[str] = ()) -> list[Platform]:
    """Platforms by name, in build order. Empty selects all."""
    if not names:
        return list(PLATFORMS.values())
    unknown = [n for n in names if n not in PLATFORMS]
    if unknown:
        raise ValueError(f'Unknown platform: {", ".join(unknown)}. Available: {", ".join(PLATFORMS)}')
    return [p for name, p in PLATFORMS.items() if name in names]
