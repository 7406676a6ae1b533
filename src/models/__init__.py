"""
Models package for mdattrs

Contains data structures and type definitions for scanning and rendering.
"""

from .state import ProgramState, pipeline
from .attrs import AttrPair, ScanResult, ScanState

__all__ = [
    "ProgramState",
    "pipeline",
    "AttrPair",
    "ScanResult",
    "ScanState",
]
