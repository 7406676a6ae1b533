"""
Renderer for annotated Markdown documents

Turns Markdown source into a standalone HTML page, applying trailing
{...} annotations and optional Pygments highlighting.
"""

from html import escape
from typing import Any, Dict, List, Optional
from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..config import appsettings
from .plugin import attrs_plugin, headings_count
from .highlight import highlight_plugin, styleDefs_get
from .log import LOG


class RenderError(Exception):
    """Raised when a rendered document cannot be written"""
    pass


class Renderer:
    """
    Renders Markdown with attribute annotations to HTML

    Responsibilities:
    - Build the markdown-it parser with the annotation and highlight plugins
    - Parse source to tokens
    - Render tokens to an HTML fragment and a full document
    - Write the document to the output directory
    """

    def __init__(
        self,
        output_dir: str,
        verbosity: int = 1,
        highlight: Optional[bool] = None,
        style: Optional[str] = None,
        preset: Optional[str] = None,
    ) -> None:
        """
        Initialize renderer

        Args:
            output_dir: Directory for rendered output
            verbosity: Output verbosity level (0-3)
            highlight: Highlight code blocks (default: settings)
            style: Pygments style name (default: settings)
            preset: markdown-it preset name (default: settings)
        """
        self.output_dir = Path(output_dir)
        self.verbosity = verbosity
        self.highlight = appsettings.highlight_enabled if highlight is None else highlight
        self.style = style or appsettings.highlight_style
        self.preset = preset or appsettings.markdown_preset
        self.md = self.markdown_build()

    def markdown_build(self) -> MarkdownIt:
        """
        Create the markdown-it parser

        The annotation plugin is registered first so code highlighting sees
        fence info strings with their annotation already removed.
        """
        md = MarkdownIt(self.preset).use(
            attrs_plugin,
            headings=appsettings.annotate_headings,
            fences=appsettings.annotate_fences,
        )
        if self.highlight:
            md.use(
                highlight_plugin,
                style=self.style,
                noclasses=appsettings.highlight_noclasses,
            )
        LOG(f"markdown-it preset '{self.preset}', highlighting {'on' if self.highlight else 'off'}", level=2)
        return md

    def tokens_parse(self, source: str, env: Optional[Dict[str, Any]] = None) -> List[Token]:
        """
        Parse Markdown source into a token stream

        Args:
            source: Markdown text
            env: markdown-it environment, receives "attrs_annotated"

        Returns:
            Flat list of block tokens (inline tokens carry children)
        """
        env = {} if env is None else env
        tokens = self.md.parse(source, env)
        LOG(f"Parsed {len(tokens)} tokens, {env.get('attrs_annotated', 0)} annotated", level=2)
        return tokens

    def html_render(self, tokens: List[Token], env: Optional[Dict[str, Any]] = None) -> str:
        """Render a token stream to an HTML fragment"""
        return self.md.renderer.render(tokens, self.md.options, {} if env is None else env)

    def htmlDocument_build(self, content: str, title: str = "") -> str:
        """
        Build complete HTML document

        Args:
            content: Rendered HTML fragment
            title: Document title

        Returns:
            Complete HTML document
        """
        css = ""
        if self.highlight and not appsettings.highlight_noclasses:
            css = f"\n<style>\n{styleDefs_get(self.style)}\n</style>"

        return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>{css}
</head>
<body>
{content}</body>
</html>
"""

    def render(self, source: str, title: str = "") -> Dict[str, Any]:
        """
        Render source to a standalone HTML file

        Args:
            source: Markdown text
            title: Document title

        Returns:
            dict with rendering results and statistics (see document_write)

        Raises:
            RenderError: If the output file cannot be written
        """
        env: Dict[str, Any] = {}
        tokens = self.tokens_parse(source, env)
        return self.document_write(tokens, env, title)

    def document_write(
        self, tokens: List[Token], env: Dict[str, Any], title: str = ""
    ) -> Dict[str, Any]:
        """
        Render an already parsed token stream and write the HTML file

        Args:
            tokens: Output of tokens_parse()
            env: Environment filled by tokens_parse()
            title: Document title

        Returns:
            dict with status, output_file, heading_count, annotated_count

        Raises:
            RenderError: If the output file cannot be written
        """
        html = self.htmlDocument_build(self.html_render(tokens, env), title)

        output_file = self.output_dir / appsettings.output_filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_file.write_text(html, encoding='utf-8')
        except OSError as e:
            raise RenderError(f"Cannot write {output_file}: {e}") from e
        LOG(f"Wrote {output_file}", level=2)

        return {
            'status': True,
            'output_file': str(output_file),
            'heading_count': headings_count(tokens),
            'annotated_count': env.get('attrs_annotated', 0),
        }
