#!/usr/bin/env python3
"""
mdattrs - Markdown renderer with trailing attribute annotations

Renders a Markdown file to a standalone HTML page. Headings and fenced code
blocks may end with an annotation carrying an identifier, classes and
attributes:

    # Installation {#install .chapter}

    ```python {#example .numberLines startFrom="10"}
    print("hello")
    ```

As with other ChRIS plugins, the tool takes an input and an output directory.

Usage:
    mdattrs inputdir/ outputdir/ --inputFile README.md

Examples:
    # Basic rendering
    mdattrs . output/ --inputFile notes.md

    # Different Pygments style, into a subdirectory
    mdattrs . output/ --inputFile notes.md --style friendly --outputSubdir notes/

    # No highlighting, debug logging
    mdattrs . output/ --inputFile notes.md --noHighlight -vv
"""

import sys
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from pathlib import Path

from chris_plugin import chris_plugin
from .lib import Renderer, RenderError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  mdattrs
  Markdown with {#id .class key=value}
"""

# Define CLI arguments
parser = ArgumentParser(
    description="mdattrs - Render Markdown with trailing {#id .class key=value} annotations",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input Markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the rendered page",
)

parser.add_argument(
    "--style",
    default=None,
    type=str,
    help="Pygments style for code blocks. Defaults to MDATTRS_HIGHLIGHT_STYLE",
)

parser.add_argument(
    "--noHighlight",
    action="store_true",
    default=False,
    help="Render code blocks without syntax highlighting",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the Markdown file
            - htmlOutputdir: Created output directory path
            - renderer: Renderer configured from CLI options
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """
    state = inputstate.copy()

    LOG(DISPLAY_TITLE, level=3)
    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.htmlOutputdir = state.outputdir / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.renderer = Renderer(
        output_dir=str(state.htmlOutputdir),
        verbosity=state.verbosity,
        highlight=False if state.noHighlight else None,
        style=state.style,
    )

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read the Markdown file and parse it into tokens.

    Annotations are applied during parsing, so the resulting tokens already
    carry their extracted attributes.

    Args:
        inputstate: Program state with inputSourceFile and renderer set

    Returns:
        ProgramState with added fields:
            - sourceText: Markdown text
            - parsedTokens: markdown-it token stream
            - parseEnv: markdown-it environment (annotation count)

    Exits:
        1 if the file cannot be read
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)
    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG("Parsing Markdown...", level=1)
    state.parseEnv = {}
    state.parsedTokens = state.renderer.tokens_parse(state.sourceText, state.parseEnv)
    return state


def html_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the Markdown source to a standalone HTML page.

    Args:
        inputstate: Program state with parsedTokens and renderer

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool
                - output_file: str (path to the written page)
                - heading_count: int
                - annotated_count: int

    Exits:
        1 if parsing did not run or rendering fails
    """
    state = inputstate.copy()

    LOG("Rendering HTML...", level=1)

    if state.parsedTokens is None:
        print("Error: No parsed source available", file=sys.stderr)
        sys.exit(1)

    try:
        state.renderResult = state.renderer.document_write(
            state.parsedTokens, state.parseEnv, title=state.inputSourceFile.stem
        )
    except RenderError as e:
        print(f"Render error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display rendering results to the user.

    Args:
        inputstate: Program state with renderResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    LOG("✓ Rendering successful!", level=1)
    LOG(f"  Output: {state.renderResult['output_file']}", level=1)
    LOG(f"  Headings: {state.renderResult['heading_count']}", level=1)
    LOG(f"  Annotated blocks: {state.renderResult['annotated_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="mdattrs - Markdown renderer with attribute annotations",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a Markdown file to HTML.

    Pipeline:
        1. env_check: Validate paths and environment
        2. source_parse: Read and parse the Markdown file
        3. html_render: Render and write the HTML page
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the Markdown file
        outputdir: Directory where the page will be written
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, html_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
