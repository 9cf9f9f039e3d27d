"""
Pytest configuration and fixtures for fastacheck tests.
"""

import gzip
from pathlib import Path
import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def valid_body():
    """A 60 base sequence body that passes every rule."""
    return b'ACGT' * 15


@pytest.fixture
def sample_fasta_content():
    """Two valid records with multi-line bodies."""
    return (
        b'>MN908947.3 Severe acute respiratory syndrome coronavirus 2\n'
        b'ATTAAAGGTTTATACCTTCCCAGGTAACAAACCAACCAACTTTCGATCTCTTGTAGATCT\n'
        b'GTTCTCTAAACGAACTTTAAAATCTGTGTGGCTGTCACTCGGCTGCATGCTTAGTGCACT\n'
        b'>hCoV-19/sample_2\n'
        b'CACGCAGTATAATTAATAACTAATTACTGTCGTTGACAGGACACGAGTAACTCGTCTATC\n'
        b'TTCTGCAGGCTGCTTACGGTTTCGTCCGTGTTGCAGCCGATCATCAGCACATCTAGGTTT\n'
    )


@pytest.fixture
def problem_fasta_content():
    """Records exercising every diagnostic category."""
    return (
        b'>seq1\nACGT\n'
        b'>1bad|id\n' + b'N' + b'ACGT' * 15 + b'\n'
        b'>seq3\n' + b'ACGXT' * 12 + b'n\n'
        b'>seq1\n' + b'A' * 10 + b'N' * 50 + b'\n'
        b'>seq5\n' + b'ACGT' * 10 + b'>seq6\n'
    )


@pytest.fixture
def create_fasta(temp_dir):
    """Write FASTA bytes to a plain or gzip file in the temporary directory."""

    def _create(content, name='test.fasta'):
        path = temp_dir / name
        if name.lower().endswith('.gz'):
            with gzip.open(path, 'wb') as handle:
                handle.write(content)
        else:
            path.write_bytes(content)
        return path

    return _create
