"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the rendering pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputSubdir,
          style, noHighlight
        - env_check: inputSourceFile, htmlOutputdir, renderer, envOK
        - source_parse: sourceText, parsedTokens, parseEnv
        - html_render: renderResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the Markdown source
        outputdir: Base output directory
        verbosity: Logging verbosity level (1-3)
        inputFile: Input Markdown filename (relative to inputdir)
        outputSubdir: Subdirectory within outputdir for output
        style: Pygments style override
        noHighlight: Disable code highlighting
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the Markdown file
        htmlOutputdir: Final output directory (outputdir + outputSubdir)
        renderer: Renderer built once from the CLI options and shared by later stages
        sourceText: Markdown text read from inputSourceFile
        parsedTokens: markdown-it token stream
        parseEnv: markdown-it environment filled while parsing
        renderResult: Rendering results (output_file, heading_count, ...)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputSubdir: str = field(default=".")
    style: Optional[str] = field(default=None)
    noHighlight: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputdir: Path = field(default=Path("/"))
    renderer: Optional[Any] = field(default=None)  # Renderer at runtime
    sourceText: str = field(default="")
    parsedTokens: Optional[List[Any]] = field(default=None)  # List[Token] at runtime
    parseEnv: Dict[str, Any] = field(default_factory=dict)
    renderResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields are ignored.

        Args:
            options: Parsed CLI arguments
            inputdir: Directory containing source files
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**{**filtered_options, "inputdir": inputdir, "outputdir": outputdir})

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_parse,
            html_render,
            results_report
        )

    This is equivalent to:
        results_report(html_render(source_parse(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
