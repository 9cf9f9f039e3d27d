"""
Single-pass streaming scanner for FASTA validation.

The scanner consumes raw bytes one at a time and decides whether each byte
belongs to a defline or to a sequence body using only the current byte, the
two bytes before it and a small amount of running state. No record is ever
held in memory beyond its defline, so arbitrarily large files can be checked
with a fixed size read buffer.

Records are finalized lazily: the identifier, length and N content checks for
a record run when the body of the following record begins, or when the input
ends. State is kept in a ``ScanState`` instance, so input can be fed in
chunks of any size without changing the result.
"""

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from fastacheck import rules
from fastacheck.byte_source import DEFAULT_CHUNK_SIZE, ByteSource, open_byte_source
from fastacheck.defline import extract_seqid
from fastacheck.profile import SARS_COV_2, ValidationProfile
from fastacheck.report import ValidationReport

NEWLINE = ord('\n')
HEADER_MARK = ord('>')


@dataclass
class ScanState:
    """
    Running context of one scan.

    ``prev1`` and ``prev2`` are the last two bytes seen; None means the start
    of the stream, which counts as the start of a line. ``seq_len`` is None
    until the first sequence body begins. ``last_base`` is the last
    non-newline body byte of the current record.
    """

    line_number: int = 1
    column: int = 0
    prev1: Optional[int] = None
    prev2: Optional[int] = None
    in_header: bool = False
    seq_len: Optional[int] = None
    n_count: int = 0
    last_base: Optional[int] = None
    defline: bytearray = field(default_factory=bytearray)
    previous_defline: bytearray = field(default_factory=bytearray)

    @property
    def at_line_start(self) -> bool:
        return self.prev1 is None or self.prev1 == NEWLINE


class RecordScanner:
    """
    Byte level FASTA record scanner.

    Feed it chunks with ``feed`` and call ``finish`` once the input is
    exhausted, or let ``scan`` drive a ``ByteSource``. A scanner handles a
    single run; create a new one for every file.

    Parameters
    ----------
    profile : ValidationProfile, optional
        Thresholds and record metadata, SARS-CoV-2 by default.
    """

    def __init__(self, profile: ValidationProfile = SARS_COV_2):
        self.profile = profile
        self.report = ValidationReport()
        self.state = ScanState()
        self._previous_seqid = ''
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def feed(self, chunk: Iterable[int]) -> None:
        """
        Process one chunk of raw bytes.

        Parameters
        ----------
        chunk : bytes, bytearray or memoryview
            Bytes to process. Only the bytes actually present are consumed.

        Raises
        ------
        RuntimeError
            If called after ``finish``.
        """
        if self._finished:
            raise RuntimeError('Scanner already finished; create a new one per run.')
        for cc in chunk:
            self._step(cc)

    def _step(self, cc: int) -> None:
        state = self.state
        if cc == NEWLINE:
            state.line_number += 1
            state.column = 0

        if cc == HEADER_MARK and state.at_line_start:
            self._start_header(cc)
        elif cc == HEADER_MARK and not state.in_header:
            state.column += 1
            rules.report_misplaced_header(
                self._previous_seqid, state.line_number, state.column, self.report
            )
        else:
            if state.in_header and state.prev1 == NEWLINE:
                self._close_header()
            if state.in_header:
                state.defline.append(cc)
            else:
                self._consume_body_byte(cc)

        state.prev2 = state.prev1
        state.prev1 = cc

    def _start_header(self, cc: int) -> None:
        state = self.state
        if state.in_header:
            # Previous header had no body
            self._close_header()
        elif state.previous_defline and rules.is_ambiguous(state.last_base):
            rules.report_trailing_n(self._previous_seqid, self.report)
        state.in_header = True
        state.defline.append(cc)

    def _close_header(self) -> None:
        """Finish the pending record and make the active defline current."""
        state = self.state
        state.in_header = False
        if state.previous_defline:
            self._finalize_record()
        # Swap so both buffers are reused
        state.previous_defline, state.defline = state.defline, state.previous_defline
        state.defline.clear()
        self._previous_seqid = extract_seqid(state.previous_defline)
        state.seq_len = 0
        state.n_count = 0
        state.last_base = None

    def _finalize_record(self) -> None:
        state = self.state
        seqid = self._previous_seqid
        rules.check_seqid(seqid, self.report, self.profile)
        rules.check_length(seqid, state.seq_len, self.report, self.profile)
        self.report.add_record(self.profile.new_record(seqid))
        rules.check_n_fraction(
            seqid, state.seq_len, state.n_count, self.report, self.profile
        )

    def _consume_body_byte(self, cc: int) -> None:
        state = self.state
        if cc == NEWLINE:
            return
        state.column += 1
        state.seq_len = (state.seq_len or 0) + 1
        state.last_base = cc
        if rules.is_ambiguous(cc):
            state.n_count += 1
            if state.seq_len == 1 and state.previous_defline:
                rules.report_leading_n(self._previous_seqid, self.report)
        elif not rules.is_nucleotide(cc):
            rules.report_invalid_char(
                cc, state.line_number, state.column, self.report
            )

    def finish(self) -> ValidationReport:
        """
        Finalize the last record and run whole-file checks.

        Safe to call more than once; later calls return the same report.

        Returns
        -------
        ValidationReport
            Records in scan order and diagnostics in emission order.
        """
        if self._finished:
            return self.report
        state = self.state
        if state.in_header:
            self._close_header()
        if state.previous_defline:
            if rules.is_ambiguous(state.last_base):
                rules.report_trailing_n(self._previous_seqid, self.report)
            self._finalize_record()
        rules.check_unique_seqids(self.report.records, self.report)
        self._finished = True
        logging.debug(
            f'Scan finished at line {state.line_number}: '
            f'{len(self.report.records)} records, '
            f'{len(self.report.diagnostics)} diagnostics'
        )
        return self.report

    def scan(
        self, source: ByteSource, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> ValidationReport:
        """
        Read ``source`` to exhaustion and return the finished report.

        Parameters
        ----------
        source : ByteSource
            Opened byte source.
        chunk_size : int, optional
            Size of the read buffer in bytes.

        Returns
        -------
        ValidationReport
            The completed report.
        """
        if chunk_size < 1:
            raise ValueError(f'chunk_size must be positive, got {chunk_size}')
        buffer = bytearray(chunk_size)
        view = memoryview(buffer)
        chunks = 0
        while True:
            count = source.read_next_chunk(buffer)
            if count == 0:
                break
            chunks += 1
            logging.debug(f'Chunk {chunks}: {count} bytes')
            self.feed(view[:count])
        return self.finish()


def scan_bytes(
    data: bytes,
    profile: ValidationProfile = SARS_COV_2,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ValidationReport:
    """
    Validate in-memory FASTA data, fed to the scanner in chunks.

    Parameters
    ----------
    data : bytes
        Complete FASTA content.
    profile : ValidationProfile, optional
        Thresholds and record metadata.
    chunk_size : int, optional
        Number of bytes per ``feed`` call.

    Returns
    -------
    ValidationReport
        The completed report.
    """
    if chunk_size < 1:
        raise ValueError(f'chunk_size must be positive, got {chunk_size}')
    scanner = RecordScanner(profile)
    for start in range(0, len(data), chunk_size):
        scanner.feed(data[start : start + chunk_size])
    return scanner.finish()


def validate_fasta(
    path: Union[str, Path],
    profile: ValidationProfile = SARS_COV_2,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> ValidationReport:
    """
    Validate a plain or gzip-compressed FASTA file.

    Parameters
    ----------
    path : Union[str, Path]
        Input file. The suffix selects the byte source.
    profile : ValidationProfile, optional
        Thresholds and record metadata.
    chunk_size : int, optional
        Read buffer size in bytes.

    Returns
    -------
    ValidationReport
        The completed report.

    Raises
    ------
    UnsupportedFormatError
        If the file suffix is not recognised.
    OSError
        If the file cannot be opened or read, or is not a gzip file.
    EOFError
        If a gzip stream is truncated.
    zlib.error
        If a gzip stream is corrupt.
    """
    source = open_byte_source(path)
    logging.info(f'Validating {path} with {profile.name} rules')
    with source:
        report = RecordScanner(profile).scan(source, chunk_size)
    logging.info(
        f'Read {source.bytes_read} bytes: {len(report.records)} records, '
        f'{len(report.diagnostics)} diagnostics'
    )
    return report
