import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import settings

logger = logging.getLogger("canvas_csv")
logger.addHandler(logging.NullHandler())

# stdout may carry CSV rows, so diagnostics go to stderr
err_console = Console(stderr=True)


def get_logger(name=None):
    if name:
        return logging.getLogger(f"canvas_csv.{name}")
    return logger


def configure_logging(verbosity: int = 0) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(settings.log_level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
