"""
Category logger for the animation engine

One line per event, grouped by subsystem, keyword details hanging below:

[14:23:45] CHAIN     ✓ intro: completed
           ├─ steps: 3
           └─ elapsed_ms: 902

Modules bind their category once at import time:

    log = get_logger().for_category(LogCategory.DRIVER)
"""

from datetime import datetime
from typing import Dict, List, Tuple

from models.enums import LogCategory, LogLevel

RESET = '\033[0m'
DIM = '\033[2m'

# Subsystem palette
CATEGORY_COLORS: Dict[LogCategory, str] = {
    LogCategory.CONFIG: '\033[36m',
    LogCategory.ANIMATION: '\033[93m',
    LogCategory.CURVE: '\033[95m',
    LogCategory.STAGGER: '\033[92m',
    LogCategory.CHAIN: '\033[96m',
    LogCategory.DRIVER: '\033[94m',
    LogCategory.TASK: '\033[35m',
    LogCategory.SYSTEM: '\033[97m',
}

# level -> (priority, symbol, colour)
LEVEL_STYLES: Dict[LogLevel, Tuple[int, str, str]] = {
    LogLevel.DEBUG: (0, '·', DIM),
    LogLevel.INFO: (1, '✓', '\033[32m'),
    LogLevel.WARN: (2, '⚠', '\033[33m'),
    LogLevel.ERROR: (3, '✗', '\033[31m'),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Console logger shared by every subsystem

    min_level and use_colors are plain attributes; configure_logger()
    changes them on the shared instance so bound loggers follow along.
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
        self.min_level = min_level
        self.use_colors = use_colors

    def enabled(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][0] >= LEVEL_STYLES[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def format(self, category: LogCategory, message: str, level: LogLevel, details: Dict) -> List[str]:
        """Render one event as its header line plus one line per detail"""
        _, symbol, color = LEVEL_STYLES[level]
        header = " ".join((
            datetime.now().strftime('[%H:%M:%S]'),
            self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, '')),
            self._paint(symbol, color),
            self._paint(message, color),
        ))

        lines = [header]
        last = len(details) - 1
        for i, (key, value) in enumerate(details.items()):
            branch = self._paint("└─" if i == last else "├─", DIM)
            lines.append(f"{DETAIL_INDENT}{branch} {key}: {value}")
        return lines

    def log(self, category: LogCategory, message: str, level: LogLevel = LogLevel.INFO, **details):
        if not self.enabled(level):
            return
        for line in self.format(category, message, level, details):
            print(line)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        """Logger with the category filled in"""
        return BoundLogger(self, category)


class BoundLogger:
    """Category-bound view of a Logger"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self.category = category

    def debug(self, message: str, **details):
        self._base.log(self.category, message, LogLevel.DEBUG, **details)

    def info(self, message: str, **details):
        self._base.log(self.category, message, LogLevel.INFO, **details)

    def warn(self, message: str, **details):
        self._base.log(self.category, message, LogLevel.WARN, **details)

    def error(self, message: str, **details):
        self._base.log(self.category, message, LogLevel.ERROR, **details)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True):
    """Reconfigure the shared logger in place"""
    _logger.min_level = min_level
    _logger.use_colors = use_colors
