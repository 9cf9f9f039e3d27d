"""
Logging configuration for the fastacheck package.

Log records go to stderr through a rich handler so that standard output stays
reserved for the record table. A plain-text log file can be added for batch
runs.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGFILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOGFILE_DATEFMT = '%Y-%m-%d %H:%M:%S'


def init_logging(
    loglevel: str = 'INFO', logfile: Optional[Union[str, Path]] = None
) -> None:
    """
    Configure the root logger for a validation run.

    Parameters
    ----------
    loglevel : str, optional
        Level name ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), case
        insensitive. Defaults to "INFO".
    logfile : str or Path, optional
        Also write log records to this file. Missing parent directories are
        created.

    Raises
    ------
    ValueError
        If ``loglevel`` is not a known level name.
    """
    numeric_level = getattr(logging, loglevel.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {loglevel}')

    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(numeric_level)
    root_logger.addHandler(console_handler)

    if not logfile:
        logging.debug(f'Logging initialized with level: {loglevel}')
        return

    logfile_path = Path(logfile)
    try:
        logfile_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(logfile_path, mode='w', encoding='utf-8')
    except OSError as e:
        # Keep console logging if the file cannot be opened
        logging.warning(f'Failed to create log file {logfile}: {e}')
        logging.warning('Continuing with console-only logging')
        return

    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(
        logging.Formatter(fmt=LOGFILE_FORMAT, datefmt=LOGFILE_DATEFMT)
    )
    root_logger.addHandler(file_handler)
    logging.debug(f'Logging initialized with level: {loglevel}')
    logging.info(f'Log file: {logfile_path.absolute()}')
