import logging
import logging.handlers
import sys
from pathlib import Path

LOGGER_ROOT = "wordle"


class ConsoleFormatter(logging.Formatter):
    """Formatter with level colors for the console and call-site info for log files."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors=False, include_extra_info=False):
        self.use_colors = use_colors

        if include_extra_info:
            fmt = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s:%(lineno)-4d | %(message)s'
        else:
            fmt = '%(asctime)s | %(levelname)-8s | %(name)-15s | %(message)s'

        super().__init__(fmt, datefmt='%Y-%m-%d %H:%M:%S')

    def format(self, record):
        if not self.use_colors:
            return super().format(record)

        # colorize a copy so file handlers sharing the record see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        colored.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(colored)


def setup_logging(log_dir=None, debug_mode=False):
    """Set up console and rotating file logging for the archiver."""

    logger = logging.getLogger(LOGGER_ROOT)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # === CONSOLE HANDLER ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    console_handler.setFormatter(ConsoleFormatter(use_colors=sys.stdout.isatty()))
    logger.addHandler(console_handler)

    if log_dir is None:
        return logger

    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # === MAIN LOG FILE HANDLER ===
    main_log_file = logs_dir / 'wordle_archiver.log'
    main_handler = logging.handlers.RotatingFileHandler(
        main_log_file,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=3,
        encoding='utf-8'
    )
    main_handler.setLevel(logging.DEBUG)
    main_handler.setFormatter(ConsoleFormatter(include_extra_info=True))
    logger.addHandler(main_handler)

    # === ERROR LOG FILE HANDLER ===
    error_log_file = logs_dir / 'wordle_errors.log'
    error_handler = logging.handlers.RotatingFileHandler(
        error_log_file,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=3,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(ConsoleFormatter(include_extra_info=True))
    logger.addHandler(error_handler)

    # requests/urllib3 only matter when something goes wrong
    logging.getLogger('urllib3').setLevel(logging.DEBUG if debug_mode else logging.WARNING)

    logger.debug(f"Main log: {main_log_file}")
    logger.debug(f"Error log: {error_log_file}")
    return logger


def get_logger(name):
    """Get a logger for a specific module/component."""
    return logging.getLogger(f'{LOGGER_ROOT}.{name}')
