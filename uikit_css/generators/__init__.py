"""Output passes.

Every .py file in this package that defines a `generator` object is
auto-registered by uikit_css.registry.discover().
"""
