import logging
from contextlib import contextmanager
import sys
from python_log_indenter import IndentedLoggerAdapter

LOGGER_NAME = "servicecatalog-schema"

class ColorFormatter(logging.Formatter):
    """Colored console formatter with customizable format string"""

    lightgray = "\x1b[1;30m"
    gray = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    def __init__(self, format_string=None, use_colors=True):
        super().__init__()
        self.use_colors = use_colors
        self.format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        colors = {
            logging.DEBUG: self.lightgray,
            logging.INFO: self.gray,
            logging.WARNING: self.yellow,
            logging.ERROR: self.red,
            logging.CRITICAL: self.bold_red
        }
        if self.use_colors:
            self.FORMATS = {level: color + self.format_string + self.reset for level, color in colors.items()}
        else:
            self.FORMATS = {level: self.format_string for level in colors}

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.format_string)
        return logging.Formatter(log_fmt).format(record)


class SimpleFormatter(logging.Formatter):
    """Plain `LEVEL: message` lines"""

    def __init__(self, format_string=None):
        super().__init__(format_string or "%(levelname)s: %(message)s")

_logger = None
_logger_config = None

def logger(
    level: str = None,
    format_type: str = None,
    use_indentation: bool = None,
    use_colors: bool = None,
    reset: bool = False
):
    """
    Get or create the generator's logger.

    The logger writes to stderr only, stdout carries the generated schema.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) - None keeps the configured one
        format_type: Formatter type ('color' or 'simple') - None keeps the configured one
        use_indentation: Wrap the logger in an IndentedLoggerAdapter
        use_colors: Force color usage on/off (auto-detect if None)
        reset: Force recreation of the logger

    Returns:
        Configured logger (or IndentedLoggerAdapter) instance
    """
    global _logger, _logger_config

    previous = _logger_config or {}
    level = level if level is not None else previous.get('level', 'INFO')
    format_type = format_type if format_type is not None else previous.get('format_type', 'color')
    use_indentation = use_indentation if use_indentation is not None else previous.get('use_indentation', True)
    use_colors = use_colors if use_colors is not None else previous.get('use_colors', None)

    current_config = {
        'level': level,
        'format_type': format_type,
        'use_indentation': use_indentation,
        'use_colors': use_colors
    }

    if not reset and _logger is not None and _logger_config == current_config:
        return _logger

    if use_colors is None:
        use_colors = hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()

    log = logging.getLogger(LOGGER_NAME)
    log.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    log.setLevel(numeric_level)

    if format_type == "simple":
        formatter = SimpleFormatter()
    else:
        formatter = ColorFormatter(use_colors=use_colors)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)
    log.addHandler(handler)

    if use_indentation:
        _logger = IndentedLoggerAdapter(log)
        _logger.setLevel(numeric_level)
    else:
        _logger = log

    _logger_config = current_config

    return _logger

def set_log_level(level: str):
    """Set the level of the live logger and its handlers"""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    if _logger is None:
        logger(level=level.upper())
        return

    _logger_config['level'] = level.upper()
    underlying_logger = _logger.logger if hasattr(_logger, 'logger') else _logger
    underlying_logger.setLevel(numeric_level)
    for handler in underlying_logger.handlers:
        handler.setLevel(numeric_level)
    _logger.setLevel(numeric_level)

def fatal(message: str, exc_info=None):
    """Log at CRITICAL and terminate the process with exit status 1"""
    logger().critical(message, exc_info=exc_info)
    sys.exit(1)

@contextmanager
def indented_log():
    """Indent everything logged inside the block by one level"""
    log = logger()
    if not hasattr(log, 'push'):
        yield log
        return
    log.push()
    log.add()
    try:
        yield log
    finally:
        log.pop()
