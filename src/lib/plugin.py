"""
markdown-it plugin attaching trailing {...} annotations to block tokens

Hosts:
- ATX and setext headings: the last text run of the heading
      # My heading {#foo}            -> <h1 id="foo">My heading</h1>
- Fenced code blocks: the info string
      ```python {.numberLines}       -> <pre><code class="numberLines language-python">

A node whose candidate string carries no valid annotation is left exactly
as it was.
"""

from typing import Any, List, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from .scanner import attrs_scan
from .merge import attrs_collection, attrs_merge, attrs_publish
from .log import LOG


def attrs_plugin(md: MarkdownIt, *, headings: bool = True, fences: bool = True) -> None:
    """
    Extract trailing attribute annotations from headings and code fences

    Args:
        md: MarkdownIt instance to extend
        headings: Annotate ATX and setext headings
        fences: Annotate fenced code blocks

    Example:
        >>> md = MarkdownIt("commonmark").use(attrs_plugin)
        >>> md.render("# Title {#top}")
        '<h1 id="top">Title</h1>\\n'
    """

    def trailing_attrs(state: StateCore) -> None:
        tokens = state.tokens
        for index, token in enumerate(tokens):
            if headings and token.type == "heading_open":
                annotated = heading_annotate(token, tokens[index + 1])
            elif fences and token.type == "fence":
                annotated = fence_annotate(token)
            else:
                continue

            if annotated:
                state.env["attrs_annotated"] = state.env.get("attrs_annotated", 0) + 1

    md.core.ruler.push("trailing_attrs", trailing_attrs)


def heading_annotate(heading: Token, inline: Token) -> bool:
    """
    Apply an annotation found at the end of a heading

    Args:
        heading: heading_open token receiving the attributes
        inline: inline token holding the heading text

    Returns:
        True if the heading was annotated
    """
    text = lastText_get(inline)
    if text is None:
        return False

    original = text.content
    result = attrs_scan(original)
    if not result.matched:
        return False

    attrs_merge(attrs_collection(heading), result)

    text.content = result.remainder
    if inline.content.endswith(original):
        inline.content = inline.content[: len(inline.content) - len(original)] + result.remainder
    attrs_publish(heading)

    LOG(f"{heading.tag} at {line_describe(heading)}: {len(result.attrs)} attribute(s)", level=3)
    return True


def fence_annotate(fence: Token) -> bool:
    """
    Apply an annotation found at the end of a code fence info string

    Args:
        fence: fence token receiving the attributes

    Returns:
        True if the fence was annotated
    """
    result = attrs_scan(fence.info)
    if not result.matched:
        return False

    attrs_merge(attrs_collection(fence), result)

    fence.info = result.remainder
    attrs_publish(fence)

    LOG(f"fence at {line_describe(fence)}: {len(result.attrs)} attribute(s)", level=3)
    return True


def lastText_get(inline: Token) -> Optional[Token]:
    """Last child of an inline token if it is a plain text run"""
    if inline.type != "inline" or not inline.children:
        return None
    last = inline.children[-1]
    return last if last.type == "text" else None


def line_describe(token: Token) -> str:
    """Human-readable source line of a block token"""
    return f"line {token.map[0] + 1}" if token.map else "unknown line"


def headings_count(tokens: List[Any]) -> int:
    """Number of headings in a token stream"""
    return sum(1 for token in tokens if token.type == "heading_open")
