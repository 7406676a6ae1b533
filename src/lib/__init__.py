"""
mdattrs - Trailing {#id .class key=value} annotations for Markdown

Attaches identifiers, classes and attributes to headings and code fences.
"""

__version__ = "1.0.0"

from .scanner import attrs_scan
from .merge import attrs_merge, attrs_flatten
from .plugin import attrs_plugin
from .highlight import highlight_plugin
from .renderer import Renderer, RenderError
from .log import LOG, state_connectToLogger

__all__ = [
    "attrs_scan",
    "attrs_merge",
    "attrs_flatten",
    "attrs_plugin",
    "highlight_plugin",
    "Renderer",
    "RenderError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
