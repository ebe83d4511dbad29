from .common import logger, set_log_level
