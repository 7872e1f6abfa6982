"""
Logging Configuration for Gridiron GM Core

The library modules only create loggers (``logging.getLogger(__name__)``);
applications call ``setup_logging`` once at startup to attach handlers.

Usage Example:
    from logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs", enable_file=True)

    logger = get_logger(__name__)
    logger.info("League created")

Log Files Created (when ``enable_file``):
- logs/gridiron_gm.log: Main log (INFO+)
- logs/gridiron_gm_debug.log: Per-game detail (DEBUG+)
- logs/gridiron_gm_error.log: Errors only (ERROR+)

Each file rotates at 10MB with 5 backups.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Dict, List, Optional


DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "gridiron_gm"

# Logger names per subsystem, for the module presets below
SUBSYSTEM_LOGGERS: Dict[str, List[str]] = {
    'scheduling': [
        "scheduling",
        "scheduling.schedule_generator",
        "scheduling.placement",
    ],
    'playoffs': [
        "playoff_system",
        "playoff_system.playoff_controller",
        "playoff_system.playoff_seeder",
        "playoff_system.playoff_manager",
    ],
    'salary_cap': [
        "salary_cap",
        "salary_cap.cap_ledger",
        "salary_cap.contract_manager",
        "salary_cap.tag_manager",
    ],
    'season': [
        "season",
        "season.season_simulator",
        "season.offseason_controller",
    ],
}


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to the level name.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _level(level: str) -> int:
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def _rotating_handler(log_dir: str, suffix: str, level: int, fmt: str,
                      max_bytes: int, backup_count: int) -> logging.Handler:
    filename = f"{LOG_FILE_PREFIX}{suffix}.log"
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, filename),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Configure the root logger.

    Replaces any handlers already on the root logger.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for rotating log files
        enable_console: Attach a colored stream handler
        enable_file: Attach main, debug and error rotating files
        max_bytes: Size per file before rotation
        backup_count: Rotated files kept per log
        format_style: "detailed" or "simple" for the main file

    Raises:
        ValueError: Unknown level name
    """
    root_level = _level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(root_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        main_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

        root_logger.addHandler(
            _rotating_handler(log_dir, "", logging.INFO, main_format, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count)
        )

    root_logger.info(
        f"Logging initialized - Level: {level}, Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with traceback and context.

    ``SimulationException`` subclasses contribute their error code.

    Example:
        >>> try:
        ...     make_schedule(league)
        ... except GamePlacementError as e:
        ...     log_exception(logger, e, context={"year": league.year})
    """
    context_items = dict(context or {})
    error_code = getattr(exception, 'error_code', None)
    if error_code:
        context_items.setdefault('error_code', error_code)

    context_str = ""
    if context_items:
        context_str = f" [{', '.join(f'{k}={v}' for k, v in context_items.items())}]"

    logger.log(
        _level(level),
        f"Exception occurred{context_str}: {type(exception).__name__}: {exception}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Set the level for one module's logger (None keeps the inherited level).

    Example:
        >>> configure_module_logger("scheduling.placement", level="DEBUG")
    """
    logger = logging.getLogger(module_name)
    if level:
        logger.setLevel(_level(level))
    logger.propagate = propagate
    return logger


def configure_subsystem(subsystem: str, level: str = "INFO") -> List[logging.Logger]:
    """
    Apply one level to every logger of a subsystem.

    Args:
        subsystem: Key of ``SUBSYSTEM_LOGGERS`` (scheduling, playoffs, salary_cap, season)

    Raises:
        KeyError: Unknown subsystem
    """
    return [configure_module_logger(name, level=level) for name in SUBSYSTEM_LOGGERS[subsystem]]


class LogContext:
    """
    Context manager for a temporary log level.

    Example:
        >>> with LogContext(get_logger("scheduling.placement"), "DEBUG"):
        ...     make_schedule(league)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = _level(level)
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


def setup_development_logging(log_dir: str = "logs") -> None:
    """DEBUG to the console and to files, detailed format."""
    setup_logging(level="DEBUG", log_dir=log_dir, enable_console=True, enable_file=True)


def setup_testing_logging() -> None:
    """Console only, warnings and above."""
    setup_logging(level="WARNING", enable_console=True, enable_file=False)
