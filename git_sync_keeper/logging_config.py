"""Logging configuration for git-sync-keeper

Every git invocation is logged by the command runner at DEBUG, so GitPython's
own ``git.cmd`` logger is held at WARNING unless debugging.
"""
import logging
import sys
from pathlib import Path

LOG_DIR = Path.home() / '.git-sync-keeper'
LOG_FILE_NAME = 'git-sync-keeper.log'
GITPYTHON_COMMAND_LOGGER = 'git.cmd'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter coloring the level name when stderr is a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def format(self, record):
        if sys.stderr.isatty():
            levelname = record.levelname
            if levelname in self.COLORS:
                record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        return super().format(record)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, show INFO level messages (service setup, skipped commits)
        debug: If True, show DEBUG level messages (every git invocation) and
            also write them to ~/.git-sync-keeper/git-sync-keeper.log
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.getLogger(GITPYTHON_COMMAND_LOGGER).setLevel(
        logging.DEBUG if debug else logging.WARNING
    )

    if debug:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_DIR / LOG_FILE_NAME, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if debug:
        formatter = ColoredFormatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT)
    else:
        formatter = ColoredFormatter(fmt='[%(name)s] %(message)s')

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger named after the module, without the package prefix.

    ``git_sync_keeper.services.git.commands`` becomes ``git.commands``.
    """
    if name.startswith('git_sync_keeper.'):
        name = name.replace('git_sync_keeper.', '')
    if name.startswith('services.'):
        name = name.replace('services.', '')

    return logging.getLogger(name)
