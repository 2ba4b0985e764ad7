"""Rich console configuration for CLI output."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

THEME = Theme(
    {
        "info": "cyan",
        "error": "red bold",
        "success": "green",
        "muted": "dim",
        "header": "bold blue",
        "value": "bold",
        "valid": "green",
        "invalid": "red",
    }
)

PACKAGE_LOGGER = "brdoc_validator"

# Global console instance
console = Console(theme=THEME)


def configure_logging(verbose: bool) -> None:
    """Route brdoc_validator logs through Rich at DEBUG when verbose.

    Only the package logger is touched; root handlers are left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    if not verbose:
        logger.setLevel(logging.NOTSET)
        return

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Erro:[/error] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")
