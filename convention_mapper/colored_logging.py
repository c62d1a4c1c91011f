"""
Console logging for the convention-mapper command line.

The report of a built type map is written through the standard logging
module. Records are colored by level, and INFO records are further colored
by the marker they start with (see ``MARKERS``) so resolved members,
progress steps and section headers stand apart in a terminal.
"""

import logging
import sys
from typing import IO, Optional


class ColoredFormatter(logging.Formatter):
    """
    Formatter that wraps each rendered record in an ANSI color.

    Coloring is switched off when the target stream is not a terminal.
    """

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }

    SUCCESS = '\033[92m'
    PROGRESS = '\033[94m'
    HIGHLIGHT = '\033[96m'
    BOLD = '\033[1m'
    RESET = '\033[0m'

    MARKERS = {
        '✓': BOLD + SUCCESS,
        '→': PROGRESS,
        '•': HIGHLIGHT,
    }

    DEFAULT_FORMAT = "%(levelname)s: %(message)s"

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True, stream: Optional[IO] = None):
        super().__init__(fmt or self.DEFAULT_FORMAT)
        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and _is_terminal(stream)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.color_for(record) if self.use_colors else None
        if not color:
            return text
        return f"{color}{text}{self.RESET}"

    def color_for(self, record: logging.LogRecord) -> Optional[str]:
        """Pick the color of a record, or None to leave it plain."""
        if record.levelno != logging.INFO:
            return self.LEVEL_COLORS.get(record.levelno)

        message = record.getMessage().strip()
        if message and set(message) == {'='}:
            return self.BOLD
        if message[:1] in self.MARKERS:
            return self.MARKERS[message[:1]]
        if message.isupper():
            return self.BOLD + self.HIGHLIGHT
        return None


def _is_terminal(stream: IO) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def setup_colored_logging(
    level: int = logging.INFO,
    use_colors: bool = True,
    stream: Optional[IO] = None,
) -> None:
    """
    Route all records through a single colored console handler.

    Args:
        level: Threshold for both the root logger and the handler
        use_colors: Set to False for CI logs and redirected output
        stream: Target stream, stderr when omitted
    """
    stream = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(use_colors=use_colors, stream=stream))
    handler.setLevel(level)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def get_colored_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _log_marked(logger: logging.Logger, marker: str, message: str) -> None:
    logger.info(f"{marker} {message}")


def log_success(logger: logging.Logger, message: str) -> None:
    _log_marked(logger, '✓', message)


def log_progress(logger: logging.Logger, message: str) -> None:
    _log_marked(logger, '→', message)


def log_highlight(logger: logging.Logger, message: str) -> None:
    """Log a resolved item, e.g. one destination member and its source path."""
    _log_marked(logger, '•', message)


def log_section(logger: logging.Logger, title: str, width: int = 60) -> None:
    """Log an upper-cased title between two rules."""
    rule = "=" * width
    logger.info(rule)
    logger.info(f"  {title.upper()}")
    logger.info(rule)
