"""
Colored logging formatter for Laravel Auto Generator.

Console output of the CLI is colored by level, and INFO lines are tinted
by what they report (success, progress, discovery, section headers).
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """
    Logging formatter that adds ANSI color codes to log messages.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }

    SPECIAL_COLORS = {
        'success': '\033[92m',    # Bright Green
        'progress': '\033[94m',   # Bright Blue
        'highlight': '\033[96m',  # Bright Cyan
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'

    SUCCESS_INDICATORS = ('✓', 'complete', 'successfully', 'written', 'wrote', 'bundled')
    PROGRESS_INDICATORS = ('→', 'loading', 'generating', 'rendering', 'writing', 'bundling', 'discovering')
    HIGHLIGHT_INDICATORS = ('•', 'found', 'discovered', 'skipping', 'ignored')

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True, stream=None):
        """
        Args:
            fmt: Log format string (uses "LEVEL: message" if None)
            use_colors: Whether to use colors at all
            stream: Stream the handler writes to, used for the TTY check
        """
        if fmt is None:
            fmt = "%(levelname)s: %(message)s"
        super().__init__(fmt)

        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        if not self.use_colors:
            return formatted_message

        if record.levelname in ('ERROR', 'CRITICAL', 'WARNING'):
            return self._wrap(formatted_message, self.COLORS[record.levelname])

        message = record.getMessage().lower()
        if self._matches(message, self.SUCCESS_INDICATORS):
            return self._wrap(formatted_message, self.SPECIAL_COLORS['success'] + self.BOLD)
        if self._matches(message, self.PROGRESS_INDICATORS):
            return self._wrap(formatted_message, self.SPECIAL_COLORS['progress'])
        if self._matches(message, self.HIGHLIGHT_INDICATORS):
            return self._wrap(formatted_message, self.SPECIAL_COLORS['highlight'])
        if self._is_section_message(message):
            return self._wrap(formatted_message, self.BOLD + self.SPECIAL_COLORS['highlight'])
        if record.levelname == 'DEBUG':
            return self._wrap(formatted_message, self.COLORS['DEBUG'])
        return formatted_message

    def _wrap(self, text: str, color: str) -> str:
        return f"{color}{text}{self.RESET}"

    @staticmethod
    def _matches(message: str, indicators) -> bool:
        return any(indicator in message for indicator in indicators)

    @staticmethod
    def _is_section_message(message: str) -> bool:
        """Section headers are long runs of '='."""
        return '=' * 20 in message


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Set up colored console logging on the root logger.

    Args:
        level: Logging level (default: INFO)
        use_colors: Whether to use colors (default: True)
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors, stream=sys.stderr))
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    # Remove existing handlers to avoid duplicated lines on repeated CLI runs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def get_colored_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name (typically __name__)."""
    return logging.getLogger(name)


def log_success(logger: logging.Logger, message: str) -> None:
    logger.info(f"✓ {message}")


def log_progress(logger: logging.Logger, message: str) -> None:
    logger.info(f"→ {message}")


def log_highlight(logger: logging.Logger, message: str) -> None:
    logger.info(f"• {message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a section header."""
    separator = "=" * 60
    logger.info(separator)
    logger.info(f"  {section_name.upper()}")
    logger.info(separator)
