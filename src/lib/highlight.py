"""
Pygments highlighting for fenced and indented code blocks

Runs as a markdown-it core rule after trailing_attrs, so the fence info
string no longer carries its annotation when the language is looked up.
Highlighted blocks keep every attribute the annotation attached and gain
the "code" class:

    ``` {#foo}
    bar
    ```

    -> <pre><code id="foo" class="code">...bar...</code></pre>
"""

from typing import Any, Optional

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.rules_core import StateCore
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, TextLexer
from pygments.util import ClassNotFound

from ..config import appsettings
from .lexer import AnnotationLexer
from .merge import attrs_collection, attrs_publish
from .log import LOG


CODE_TOKENS = ("fence", "code_block")


def lexer_get(language: Optional[str]) -> Lexer:
    """
    Find a Pygments lexer for a fence language

    Args:
        language: First word of the info string, or None for indented blocks

    Returns:
        AnnotationLexer for the annotation aliases, the matching Pygments
        lexer, or TextLexer when the language is empty or unknown.
        Leading and trailing newlines of the code are kept.
    """
    if not language:
        return TextLexer(stripnl=False)
    if appsettings.annotationLexer_is(language):
        return AnnotationLexer(stripnl=False)
    try:
        return get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        LOG(f"No lexer for '{language}', using plain text", level=2)
        return TextLexer(stripnl=False)


def language_get(token: Any) -> Optional[str]:
    """Language named by a fence info string, None for indented code"""
    if token.type != "fence" or not token.info:
        return None
    info = unescapeAll(token.info).strip()
    return info.split(maxsplit=1)[0] if info else None


def highlight_plugin(
    md: MarkdownIt,
    *,
    style: str = "monokai",
    noclasses: bool = True,
) -> None:
    """
    Highlight code blocks with Pygments

    Args:
        md: MarkdownIt instance to extend
        style: Pygments style name
        noclasses: Inline styles (True) or CSS classes (False)
    """
    formatter = HtmlFormatter(nowrap=True, style=style, noclasses=noclasses)

    def code_highlight(state: StateCore) -> None:
        for token in state.tokens:
            if token.type not in CODE_TOKENS:
                continue
            lexer = lexer_get(language_get(token))
            token.meta["highlighted"] = highlight(token.content, lexer, formatter)
            attrs_collection(token).append(("class", "code"))
            attrs_publish(token)
            LOG(f"{token.type}: highlighted with {lexer.name}", level=3)

    def code_render(self, tokens, idx, options, env):
        token = tokens[idx]
        if "highlighted" not in token.meta:
            return getattr(self, token.type)(tokens, idx, options, env)
        return (
            "<pre><code"
            + self.renderAttrs(token)
            + ">"
            + token.meta["highlighted"]
            + "</code></pre>\n"
        )

    md.core.ruler.push("code_highlight", code_highlight)
    for name in CODE_TOKENS:
        md.add_render_rule(name, code_render)


def styleDefs_get(style: str, selector: str = "pre code") -> str:
    """
    CSS rules for class-based highlighting

    Args:
        style: Pygments style name
        selector: CSS selector prefixed to every rule

    Returns:
        Stylesheet text for HtmlFormatter(noclasses=False) output
    """
    return HtmlFormatter(style=style).get_style_defs(selector)
