"""
Pygments lexer for {#id .class key=value} annotations

Used when a fenced code block is tagged with the `mdattrs` (or `attrs`)
language, e.g. to document the annotation syntax itself.

Token types:
- Punctuation: Braces
- Name.Tag: Identifiers (#intro)
- Name.Class: Classes (.wide)
- Name.Attribute / Operator: Keys and the '=' sign
- String / String.Double: Unquoted and quoted values
- String.Escape: \\" inside quoted values
- Error: Bare values that make an annotation invalid
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Whitespace,
    Punctuation,
    Name,
    Operator,
    String,
    Error,
)


class AnnotationLexer(RegexLexer):
    """
    Lexer for trailing attribute annotations

    Example:
        ## Setup {#setup .step level="2"}

    Tokens:
        ## Setup  → Text
        {         → Punctuation
        #setup    → Name.Tag
        .step     → Name.Class
        level     → Name.Attribute
        =         → Operator
        "2"       → String.Double
        }         → Punctuation
    """

    name = 'Markdown attributes'
    aliases = ['mdattrs', 'attrs']
    filenames = []

    tokens = {
        'root': [
            (r'\{', Punctuation, 'annotation'),
            (r'[^{]+', Text),
        ],

        'annotation': [
            (r'\}', Punctuation, '#pop'),
            (r'\s+', Whitespace),

            (r'#[^\s{}]+', Name.Tag),
            (r'\.[^\s{}]+', Name.Class),

            # key="quoted value"
            (r'([^\s{}="]+)(=)(")',
             bygroups(Name.Attribute, Operator, String.Double), 'quoted'),

            # key=value
            (r'([^\s{}="]+)(=)([^\s{}"]*)',
             bygroups(Name.Attribute, Operator, String)),

            # Bare values and stray braces are not valid tokens
            (r'[^\s{}]+', Error),
            (r'\{', Error),
        ],

        'quoted': [
            (r'\\"', String.Escape),
            (r'"', String.Double, '#pop'),
            (r'[^"\\]+', String.Double),
            (r'\\', String.Double),
        ],
    }


def get_lexer(**options) -> AnnotationLexer:
    """
    Get an AnnotationLexer instance

    Args:
        **options: Standard Pygments lexer options (stripnl, ensurenl, ...)

    Returns:
        AnnotationLexer instance ready for use with Pygments
    """
    return AnnotationLexer(**options)
