"""
Sequence identifier extraction from FASTA deflines.
"""

import re
from typing import Union

# Marker plus everything up to the first whitespace character
SEQID_PATTERN = re.compile(r'^(>.*?)(?:\s|$)')


def extract_seqid(defline: Union[str, bytes, bytearray]) -> str:
    """
    Extract the sequence identifier from a defline.

    The identifier keeps its leading ``>`` marker and runs up to, but not
    including, the first whitespace character or the end of the line.

    Parameters
    ----------
    defline : str or bytes
        Raw header text, starting with ``>``. Bytes are decoded as latin-1 so
        every byte maps to exactly one character.

    Returns
    -------
    str
        The identifier, or an empty string if the defline is empty or does
        not start with ``>``.

    Examples
    --------
    >>> extract_seqid('>seq1 Severe acute respiratory syndrome\\n')
    '>seq1'
    >>> extract_seqid('seq1')
    ''
    """
    if isinstance(defline, (bytes, bytearray)):
        defline = bytes(defline).decode('latin-1')
    match = SEQID_PATTERN.match(defline)
    if match is None:
        return ''
    return match.group(1)
