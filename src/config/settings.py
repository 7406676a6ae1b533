"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDATTRS_ prefix (e.g., MDATTRS_HIGHLIGHT_STYLE=friendly).

Settings can also be loaded from a .env file in the project root.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDATTRS_ prefix.

    Examples:
        MDATTRS_MARKDOWN_PRESET=gfm-like
        MDATTRS_HIGHLIGHT_ENABLED=false
        MDATTRS_ANNOTATE_FENCES=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MDATTRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Parser configuration
    markdown_preset: str = Field(
        default="commonmark",
        description="markdown-it preset used to parse documents",
    )

    annotate_headings: bool = Field(
        default=True,
        description="Extract trailing {...} annotations from ATX and setext headings",
    )

    annotate_fences: bool = Field(
        default=True,
        description="Extract trailing {...} annotations from code fence info strings",
    )

    # Highlighting configuration
    highlight_enabled: bool = Field(
        default=True,
        description="Highlight fenced and indented code blocks with Pygments",
    )

    highlight_style: str = Field(
        default="monokai",
        description="Pygments style used for highlighted code",
    )

    highlight_noclasses: bool = Field(
        default=True,
        description="Emit inline styles instead of CSS classes for highlighted code",
    )

    annotation_lexer_aliases: List[str] = Field(
        default=["mdattrs", "attrs"],
        description="Fence languages rendered with the annotation lexer",
    )

    # Output configuration
    output_filename: str = Field(
        default="index.html",
        description="Name of the rendered HTML file written to the output directory",
    )

    def annotationLexer_is(self, language: str) -> bool:
        """
        Check whether a fence language selects the annotation lexer.

        Args:
            language: First word of a code fence info string

        Returns:
            True if the language is one of annotation_lexer_aliases
            (case-insensitive)

        Example:
            >>> settings = AppSettings()
            >>> settings.annotationLexer_is("MDATTRS")
            True
        """
        return language.lower() in {alias.lower() for alias in self.annotation_lexer_aliases}


# Singleton instance - import this in your code
appsettings = AppSettings()
