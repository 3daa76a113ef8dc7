"""Diagnostic output on stderr.

The handlers return response bodies to the caller and never print them;
everything written here is a side-channel notice (cache hits, request
errors) that goes to stderr so it never mixes with a caller's own stdout.

The module exposes two layers:

1. :class:`OutputManager` -- holds the colour and quiet/verbose flags and a
   Rich :class:`~rich.console.Console` bound to stderr.
2. Module-level helpers (:func:`get_output`, :func:`set_output`,
   :func:`reset_output`) managing a process-global instance so the handlers
   do not need a manager passed around.

Colour is disabled when ``NO_COLOR`` is set or ``TERM=dumb``.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console


class OutputManager:
    """Writes diagnostics to stderr.

    Args:
        no_color: Disable all colour and Rich markup.
        quiet: Suppress informational messages. Warnings and errors are
            still written.
        verbose: Enable debug-level messages.
    """

    def __init__(
        self,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def is_quiet(self) -> bool:
        """Whether quiet mode is enabled."""
        return self._quiet

    @property
    def is_verbose(self) -> bool:
        """Whether verbose mode is enabled."""
        return self._verbose

    def info(self, message: str) -> None:
        """Print an informational message. Suppressed by ``quiet``."""
        if not self._quiet:
            if self._no_color:
                print(message, file=sys.stderr, flush=True)
            else:
                self._stderr.print(message, markup=False)

    def warning(self, message: str) -> None:
        """Print a yellow warning. NOT suppressed by ``quiet``."""
        if self._no_color:
            print(f"Warning: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print("[yellow]Warning:[/yellow] ", end="")
            self._stderr.print(message, markup=False)

    def error(self, message: str) -> None:
        """Print a bold-red error. Never suppressed."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print("[bold red]Error:[/bold red] ", end="")
            self._stderr.print(message, markup=False)

    def debug(self, message: str) -> None:
        """Print a debug message. Only shown when ``verbose`` is on."""
        if self._verbose:
            if self._no_color:
                print(f"[debug] {message}", file=sys.stderr, flush=True)
            else:
                self._stderr.print(f"[debug] {message}", style="dim", markup=False)


def _should_disable_color() -> bool:
    """Return True when NO_COLOR is set (any value) or TERM=dumb."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False


# ------------------------------------------------------------------ #
# Global output instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance."""
    global _output
    _output = output


def reset_output() -> None:
    """Reset the global :class:`OutputManager` to ``None``.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _output
    _output = None
