"""
Annotation scanner data models

Types produced and consumed by the backward attribute scanner.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


AttrPair = Tuple[str, str]


class ScanState(Enum):
    """
    States of the backward annotation scanner

    The scanner reads from the end of the string towards its start, so each
    state describes what was just seen to the *right* of the cursor.
    """
    START = "start"          # nothing read yet, expecting the closing }
    BLANK = "blank"          # between tokens
    KEY = "key"              # reading a key (value already complete)
    EQUAL = "equal"          # just closed a quoted value, expecting = or \
    QUOTED = "quoted"        # inside "..."
    UNQUOTED = "unquoted"    # inside a bare value


@dataclass
class ScanResult:
    """
    Result of scanning a string for a trailing {...} annotation

    Attributes:
        remainder: Text with the annotation removed and trailing whitespace
                   trimmed. On failure this is the input string itself.
        attrs: Extracted (key, value) pairs in source order. Never empty
               on success.
        boundary: Index of the opening '{' on success, None on failure.

    Example:
        For "Title {#intro .wide}":
        ScanResult(
            remainder="Title",
            attrs=[("id", "intro"), ("class", "wide")],
            boundary=6
        )
    """
    remainder: str
    attrs: List[AttrPair] = field(default_factory=list)
    boundary: Optional[int] = None

    @property
    def matched(self) -> bool:
        """True if an annotation was found and consumed"""
        return bool(self.attrs)
