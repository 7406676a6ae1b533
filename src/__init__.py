"""
mdattrs - Trailing {#id .class key=value} annotations for Markdown

Attaches identifiers, classes and attributes to headings and code fences.
"""

__version__ = "1.0.0"

from .lib import (
    attrs_scan,
    attrs_merge,
    attrs_plugin,
    highlight_plugin,
    Renderer,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "attrs_scan",
    "attrs_merge",
    "attrs_plugin",
    "highlight_plugin",
    "Renderer",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
