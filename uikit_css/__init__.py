"""uikit-css: generate CSS and Tailwind config from Apple UIKit colour tables."""

__version__ = '0.3.0'
