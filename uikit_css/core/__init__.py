"""uikit_css.core — Foundation layer.

Contains the colour helpers, type definitions, formatter, output writer,
settings loader and report builder.
This module has NO dependencies on uikit_css.generators or uikit_css.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
