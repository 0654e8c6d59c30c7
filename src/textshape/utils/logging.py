"""Logging utilities for textshape."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_HANDLER_TAG = "_textshape_handler"


@dataclass
class LayoutStats:
    """Statistics from one text conversion."""

    lines: int = 0
    glyphs_placed: int = 0
    glyphs_empty: int = 0
    contours: int = 0


def reset_handlers() -> None:
    """Close and detach handlers installed by an earlier configure_logging call."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Unlike a batch run, a single conversion does not warrant a log file by
    default, so the file handler is only attached when a path is given.
    Handlers from an earlier call are closed and replaced.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    reset_handlers()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(console_handler, _HANDLER_TAG, True)
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("textshape")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class LayoutLogger:
    """Logger for tracking layout progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("textshape")
        self._stats = LayoutStats()

    def log_glyph(self, char: str, glyph_index: int, contours: int) -> None:
        """Log a glyph that produced ink."""
        self._logger.debug(
            "Glyph composed",
            char=char,
            glyph_index=glyph_index,
            contours=contours,
        )
        self._stats.glyphs_placed += 1
        self._stats.contours += contours

    def log_empty_glyph(self, char: str, glyph_index: int) -> None:
        """Log a glyph without ink (whitespace and similar)."""
        self._logger.debug("Glyph empty", char=char, glyph_index=glyph_index)
        self._stats.glyphs_empty += 1

    def log_line(self, line_no: int, advance: float, shift: float, y_offset: float) -> None:
        """Log placement of one line."""
        self._logger.debug(
            "Line placed",
            line=line_no,
            advance=round(advance, 2),
            shift=round(shift, 2),
            y_offset=round(y_offset, 2),
        )
        self._stats.lines += 1

    def log_glyph_error(self, char: str, error: Exception) -> None:
        """Log a glyph load failure before it propagates."""
        self._logger.error(
            "Glyph load failed",
            char=char,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> LayoutStats:
        """Get current layout statistics."""
        return self._stats
