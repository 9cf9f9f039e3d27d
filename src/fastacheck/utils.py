"""
Utility functions for fastacheck.

File validation and path handling helpers shared by the byte sources and
the command line interface.
"""

import logging
from pathlib import Path
import sys
from typing import Union


def isfile(path: Union[str, Path]) -> Path:
    """
    Check if file exists and return absolute path.

    Parameters
    ----------
    path : str or Path
        Path to file to check.

    Returns
    -------
    Path
        Absolute path to file if found.

    Raises
    ------
    SystemExit
        If file is not found, logs error and exits with code 1.
    """
    file_path = Path(path)
    if not file_path.is_file():
        logging.error(f'Input file not found: {path}')
        sys.exit(1)
    return file_path.absolute()


def file_suffix(path: Union[str, Path]) -> str:
    """
    Return the lower-cased text after the last dot of a file name.

    Examples
    --------
    >>> file_suffix('genomes/sample.FASTA.gz')
    'gz'
    >>> file_suffix('sample')
    ''
    """
    name = Path(path).name
    if '.' not in name:
        return ''
    return name.rsplit('.', 1)[1].lower()
