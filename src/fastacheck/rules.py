"""
Validation rules applied to FASTA records.

Each rule inspects values already computed by the scanner and appends zero or
more diagnostics to a ``ValidationReport``. Rules keep no state between calls.
The boolean return value tells the caller whether the rule passed; the
scanner does not depend on it.
"""

import logging
from typing import Iterable, Optional, Set

from Bio.Data.IUPACData import ambiguous_dna_letters

from fastacheck.profile import SARS_COV_2, ValidationProfile
from fastacheck.report import Category, Record, ValidationReport

# IUPAC nucleotide codes (ACGT plus ambiguity codes) in both cases, as bytes
NUCLEOTIDE_BYTES = frozenset(
    (ambiguous_dna_letters.upper() + ambiguous_dna_letters.lower()).encode('ascii')
)
AMBIGUOUS_BYTES = frozenset(b'Nn')

SEQID_PUNCTUATION = frozenset('_*#.-:')


def is_nucleotide(cc: int) -> bool:
    """Return True if byte ``cc`` is an accepted nucleotide or ambiguity code."""
    return cc in NUCLEOTIDE_BYTES


def is_ambiguous(cc: Optional[int]) -> bool:
    """Return True if byte ``cc`` is an unresolved base (``N`` or ``n``)."""
    return cc in AMBIGUOUS_BYTES


def check_seqid(
    seqid: str,
    report: ValidationReport,
    profile: ValidationProfile = SARS_COV_2,
) -> bool:
    """
    Validate identifier syntax.

    The identifier includes its ``>`` marker. It must carry at least one
    character after the marker, that character must be a letter, every
    character after the marker must be alphanumeric or one of
    ``_ * # . - :``, and the whole identifier must not be longer than
    ``profile.max_seqid_length``. Each violation appends its own diagnostic,
    except a missing identifier which appends one diagnostic and stops.

    Parameters
    ----------
    seqid : str
        Identifier returned by ``extract_seqid``.
    report : ValidationReport
        Diagnostic sink.
    profile : ValidationProfile, optional
        Submission thresholds.

    Returns
    -------
    bool
        True if no diagnostic was appended.
    """
    if len(seqid) < 2:
        report.add_diagnostic(
            Category.DEFLINE,
            f"Found invalid seqid '{seqid}'. seqid must has at least one character.",
        )
        return False

    valid = True
    first_char = seqid[1]
    if not first_char.isalpha():
        report.add_diagnostic(
            Category.DEFLINE,
            f"Found invalid character '{first_char}' in seqid '{seqid}'. "
            'Seqid must starts with a letter.',
        )
        valid = False

    for char in seqid[1:]:
        if not (char.isalnum() or char in SEQID_PUNCTUATION):
            report.add_diagnostic(
                Category.DEFLINE,
                f"Found invalid character: '{char}' in seqid: '{seqid}'. "
                "Only letters, numbers, '_', '-', '*', '#', '.', ':' are permitted.",
            )
            valid = False

    if len(seqid) > profile.max_seqid_length:
        report.add_diagnostic(
            Category.DEFLINE,
            f'Seqid max length is {profile.max_seqid_length - 1}, found length of '
            f'{len(seqid)} for seqid: {seqid}.',
        )
        valid = False

    return valid


def check_length(
    seqid: str,
    seq_len: Optional[int],
    report: ValidationReport,
    profile: ValidationProfile = SARS_COV_2,
) -> bool:
    """
    Validate that the sequence length lies within the profile bounds.

    A length of None means no sequence was observed and always passes.

    Returns
    -------
    bool
        True if the length is acceptable.
    """
    if seq_len is None:
        return True
    if profile.min_length <= seq_len <= profile.max_length:
        return True
    report.add_diagnostic(
        Category.SEQUENCE,
        f'For {profile.name} submission, sequence length must be between '
        f'{profile.min_length} and {profile.max_length}. '
        f"SeqLength of '{seqid}' is {seq_len}",
    )
    return False


def check_n_fraction(
    seqid: str,
    seq_len: Optional[int],
    n_count: int,
    report: ValidationReport,
    profile: ValidationProfile = SARS_COV_2,
) -> bool:
    """
    Validate the proportion of unresolved bases.

    Only evaluated for sequences with a positive length. A fraction equal to
    or above ``profile.max_n_fraction`` is reported.

    Parameters
    ----------
    seqid : str
        Identifier of the sequence.
    seq_len : int or None
        Number of bases in the sequence.
    n_count : int
        Number of ``N``/``n`` bases in the sequence.
    report : ValidationReport
        Diagnostic sink.
    profile : ValidationProfile, optional
        Submission thresholds.

    Returns
    -------
    bool
        True if the proportion is acceptable.
    """
    if seq_len is None or seq_len <= 0:
        return True
    n_fraction = n_count / seq_len
    if n_fraction < profile.max_n_fraction:
        return True
    report.add_diagnostic(
        Category.NUCLEOTIDE,
        f'For {profile.name} submission, the proportion of unknown bases in the '
        f'sequence exceeds {profile.max_n_fraction:.0%} is not allowed. '
        f"Found {n_count}/{seq_len}({n_fraction * 100:.2f}%) for sequence '{seqid}'",
    )
    return False


def report_leading_n(seqid: str, report: ValidationReport) -> None:
    """Report a sequence whose first base is unresolved."""
    report.add_diagnostic(
        Category.NUCLEOTIDE,
        f"Found invalid 'N' at start of sequence '{seqid}'. "
        "It should not start with 'N' or 'n'",
    )


def report_trailing_n(seqid: str, report: ValidationReport) -> None:
    """Report a sequence whose last base is unresolved."""
    report.add_diagnostic(
        Category.NUCLEOTIDE,
        f"Found invalid 'N' at end of sequence '{seqid}'. "
        "It should not end with 'N' or 'n'",
    )


def report_misplaced_header(
    seqid: str, line_number: int, column: int, report: ValidationReport
) -> None:
    """Report a ``>`` found inside a sequence body."""
    report.add_diagnostic(
        Category.NUCLEOTIDE,
        f"Found invalid '>' at Line {line_number}, Column {column} in "
        f"sequence(seqid:'{seqid}'). This symbol is not allowed in the sequence. "
        'Please check whether the new-line character is missing.',
    )


def report_invalid_char(
    cc: int, line_number: int, column: int, report: ValidationReport
) -> None:
    """Report a body byte outside the nucleotide alphabet."""
    char = chr(cc)
    shown = char if char.isprintable() else repr(char)[1:-1]
    report.add_diagnostic(
        Category.NUCLEOTIDE,
        f"Found invalid char '{shown}' at Line {line_number}, Column {column}",
    )


def check_unique_seqids(records: Iterable[Record], report: ValidationReport) -> int:
    """
    Report identifiers that occur more than once.

    One diagnostic is appended for every repeated occurrence, starting with
    the second one.

    Parameters
    ----------
    records : Iterable[Record]
        Records in scan order.
    report : ValidationReport
        Diagnostic sink.

    Returns
    -------
    int
        Number of duplicate occurrences found.
    """
    seen: Set[str] = set()
    duplicates = 0
    for record in records:
        if record.seqid in seen:
            report.add_diagnostic(
                Category.DEFLINE,
                f"Found duplicated sequence id: '{record.seqid}'",
            )
            duplicates += 1
        else:
            seen.add(record.seqid)
    if duplicates:
        logging.debug(f'Found {duplicates} duplicated sequence ids')
    return duplicates
