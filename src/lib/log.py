"""
Centralized logging using Loguru with context-aware verbosity.

The LOG() function checks the verbosity of whatever ProgramState (or any
object with a `verbosity` attribute) was attached to the current context,
so markdown-it rules and rendering helpers can log without having the state
passed through their signatures.

Usage:
    from mdattrs.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Rendering document", level=1)
    LOG("Parsed 120 tokens", level=2)
    LOG("heading_open line 3: 2 attribute(s)", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold the current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Attach a state object to the logging context.

    Args:
        state: Object with an integer `verbosity` attribute
    """
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the attached state, 0 if none is attached"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state is not None else 0


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the current verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Extra loguru arguments

    The record is attributed to the caller, not to LOG() itself.
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
