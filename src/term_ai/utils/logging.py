"""
Logging setup for term-ai.

stdout is reserved for the model's answer (it is usually piped into a shell),
so every log record and error message goes to stderr.

Three verbosity levels:
- Normal: warnings and errors only
- Verbose (--verbose): rich-formatted INFO logs (tool calls, iterations, timing)
- Debug (--debug): unformatted DEBUG logs including request payloads
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

TERM_AI_THEME = Theme({
    "error": "bold red",
    "warning": "yellow",
})

_console: Console | None = None


def get_console() -> Console:
    """Get the shared stderr console instance."""
    global _console
    if _console is None:
        _console = Console(theme=TERM_AI_THEME, stderr=True)
    return _console


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        verbose: Show INFO records through a RichHandler.
        debug: Show DEBUG records with a plain timestamped format.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S",
            force=True,
        )
    else:
        logging.basicConfig(
            level=logging.INFO if verbose else logging.WARNING,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(
                console=get_console(),
                show_path=False,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
                markup=False,
            )],
            force=True,
        )

    # Reduce noise from third-party libraries
    noisy_loggers = [
        "urllib3",
        "urllib3.connectionpool",
        "requests",
        "charset_normalizer",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING if not debug else logging.INFO)


def print_error(message: str) -> None:
    """Print a single error line on stderr."""
    get_console().print(f"[error]Error:[/error] {escape(message)}", highlight=False, soft_wrap=True)
