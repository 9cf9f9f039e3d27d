"""
Streaming validation of FASTA files for viral genome submission.
"""

from fastacheck._version import __version__
from fastacheck.profile import SARS_COV_2, ValidationProfile
from fastacheck.report import Category, Diagnostic, Record, ValidationReport
from fastacheck.scanner import RecordScanner, scan_bytes, validate_fasta

__all__ = [
    '__version__',
    'Category',
    'Diagnostic',
    'Record',
    'RecordScanner',
    'SARS_COV_2',
    'ValidationProfile',
    'ValidationReport',
    'scan_bytes',
    'validate_fasta',
]
