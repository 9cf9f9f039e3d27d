"""
Chunked byte sources for plain and gzip-compressed FASTA files.

The scanner only needs one operation from its input: fill a buffer with the
next chunk of raw bytes and say how many bytes were written. Both sources
here provide that through ``read_next_chunk`` so the scanner never needs to
know whether the file is compressed.
"""

from abc import ABC, abstractmethod
import gzip
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from fastacheck.utils import file_suffix

DEFAULT_CHUNK_SIZE = 4 * 1024 * 1024

GZIP_SUFFIXES = frozenset(['gz'])
PLAIN_SUFFIXES = frozenset(['fa', 'fsa', 'fna', 'fasta'])


class FastaCheckError(Exception):
    """Base class for fastacheck errors."""


class UnsupportedFormatError(FastaCheckError, ValueError):
    """Raised when a file suffix does not select a known byte source."""


class ByteSource(ABC):
    """
    Context managed producer of raw byte chunks.

    Parameters
    ----------
    path : Union[str, Path]
        File to read.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._handle: Optional[BinaryIO] = None
        self.bytes_read = 0

    @abstractmethod
    def _open(self) -> BinaryIO:
        """Open the underlying binary stream."""

    def __enter__(self):
        self._handle = self._open()
        logging.debug(f'Opened {type(self).__name__} for {self.path}')
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def read_next_chunk(self, buffer: bytearray) -> int:
        """
        Fill ``buffer`` with the next chunk of bytes.

        Parameters
        ----------
        buffer : bytearray
            Destination buffer. Its length is the maximum chunk size.

        Returns
        -------
        int
            Number of bytes written to the start of ``buffer``. Zero signals
            end of input. Bytes past this count are left over from earlier
            reads and must be ignored.

        Raises
        ------
        RuntimeError
            If the source is used outside a ``with`` block.
        OSError
            If the underlying file cannot be read or decompressed.
        """
        if self._handle is None:
            raise RuntimeError('Byte source not opened. Use as context manager.')
        count = self._handle.readinto(buffer) or 0
        self.bytes_read += count
        return count


class PlainByteSource(ByteSource):
    """Byte source for uncompressed FASTA files."""

    def _open(self) -> BinaryIO:
        return open(self.path, 'rb')


class GzipByteSource(ByteSource):
    """Byte source that decompresses a gzip FASTA file on the fly."""

    def _open(self) -> BinaryIO:
        return gzip.open(self.path, 'rb')


def open_byte_source(path: Union[str, Path]) -> ByteSource:
    """
    Select a byte source from the file suffix.

    Parameters
    ----------
    path : Union[str, Path]
        Input FASTA path. ``.gz`` selects decompression; ``.fa``, ``.fsa``,
        ``.fna`` and ``.fasta`` are read as plain text. Matching ignores case.

    Returns
    -------
    ByteSource
        Unopened byte source; use it as a context manager.

    Raises
    ------
    UnsupportedFormatError
        If the suffix is not recognised.
    """
    suffix = file_suffix(path)
    if suffix in GZIP_SUFFIXES:
        return GzipByteSource(path)
    if suffix in PLAIN_SUFFIXES:
        return PlainByteSource(path)
    raise UnsupportedFormatError(
        'The suffix of sequence file should be one of [.fa, .fsa, .fna, .fasta] '
        f'or it should be a combination of those with .gz (got: {Path(path).name})'
    )
