"""
Backward scanner for trailing {#id .class key=value} annotations

Recognizes an attribute annotation anchored at the very end of a string
(a heading line or a code fence info string) and splits it from the text it
decorates.

The scan runs once, right to left, starting from the closing brace. Reading
backwards means the only anchor needed is the end of the string: braces that
appear earlier in ordinary text never have to be matched.

Syntax inside the braces:
- #value          -> ("id", value)
- .value          -> ("class", value)
- key=value       -> (key, value)
- key="va lue"    -> (key, "va lue"), with \\" standing for a literal quote

Any malformed annotation makes the whole scan fail, and the input is
returned untouched. There is no partial result.

Example:
    >>> result = attrs_scan('Install {#setup .step level="2"}')
    >>> result.remainder
    'Install'
    >>> result.attrs
    [('id', 'setup'), ('class', 'step'), ('level', '2')]
"""

from typing import List, Optional

from ..models.attrs import AttrPair, ScanResult, ScanState


WHITESPACE = frozenset(" \t\n\r\x0c")


def attrs_scan(text: str) -> ScanResult:
    """
    Extract a trailing attribute annotation from text

    Args:
        text: String whose last character may close an annotation

    Returns:
        ScanResult. On failure `remainder` is `text` itself and `attrs`
        is empty; on success `remainder` is the text before the opening
        brace with trailing whitespace removed.

    Example:
        >>> attrs_scan("{#foo}").attrs
        [('id', 'foo')]
        >>> attrs_scan("{val #foo}").matched
        False
    """
    failure = ScanResult(remainder=text)

    attrs: List[AttrPair] = []
    state = ScanState.START
    # Both buffers collect characters right to left and are reversed on emit
    key: List[str] = []
    value: List[str] = []
    boundary: Optional[int] = None

    for index in range(len(text) - 1, -1, -1):
        char = text[index]

        if state is ScanState.START:
            if char != '}':
                return failure
            state = ScanState.BLANK

        elif state is ScanState.BLANK:
            if char == '{':
                boundary = index
                break
            elif char == '"':
                value = []
                state = ScanState.QUOTED
            elif char in WHITESPACE:
                pass
            else:
                value = [char]
                state = ScanState.UNQUOTED

        elif state is ScanState.QUOTED:
            if char == '"':
                state = ScanState.EQUAL
            else:
                value.append(char)

        elif state is ScanState.EQUAL:
            if char == '\\':
                # { key="va\"l" }
                value.append('"')
                state = ScanState.QUOTED
            elif char == '=':
                key = []
                state = ScanState.KEY
            else:
                return failure

        elif state is ScanState.UNQUOTED:
            if char == '#':
                attrs.insert(0, ("id", ''.join(reversed(value))))
                state = ScanState.BLANK
            elif char == '.':
                attrs.insert(0, ("class", ''.join(reversed(value))))
                state = ScanState.BLANK
            elif char == '=':
                key = []
                state = ScanState.KEY
            elif char == '{' or char in WHITESPACE:
                # Bare value without #, . or key=
                return failure
            else:
                value.append(char)

        elif state is ScanState.KEY:
            if char == '{' or char in WHITESPACE:
                attrs.insert(0, (''.join(reversed(key)), ''.join(reversed(value))))
                if char == '{':
                    boundary = index
                    break
                state = ScanState.BLANK
            else:
                key.append(char)

    else:
        # Ran out of input before reaching the opening brace
        return failure

    if not attrs:
        return failure

    return ScanResult(
        remainder=text[:boundary].rstrip(),
        attrs=attrs,
        boundary=boundary,
    )
