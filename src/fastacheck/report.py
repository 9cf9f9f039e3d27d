"""
Report model for a validation run.

Holds the per-sequence records and the ordered diagnostic messages produced
by the scanner, and renders them: records as a tab-separated table and
diagnostics as a rich table for the terminal.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
import sys
from typing import Dict, List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

RECORD_COLUMNS = [
    'seqid',
    'organism',
    'genetic_code',
    'moltype',
    'topology',
    'strand',
]


class Category(str, Enum):
    """Diagnostic categories."""

    DEFLINE = 'Defline'
    NUCLEOTIDE = 'Nucleotide'
    SEQUENCE = 'Sequence'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A single validation message."""

    category: Category
    message: str


@dataclass(frozen=True)
class Record:
    """
    Report row for one sequence.

    Only ``seqid`` varies between records; the remaining fields carry the
    metadata of the submission target.
    """

    seqid: str
    organism: str
    genetic_code: str
    moltype: str
    topology: str
    strand: str

    def as_row(self) -> List[str]:
        """
        Field values in ``RECORD_COLUMNS`` order.

        Returns
        -------
        List[str]
            Values for one output row.
        """
        return [
            self.seqid,
            self.organism,
            self.genetic_code,
            self.moltype,
            self.topology,
            self.strand,
        ]

    def __str__(self) -> str:
        return (
            f"Seqid: '{self.seqid}',  Organism: '{self.organism}',  "
            f"gcode: '{self.genetic_code}',  moltype: '{self.moltype}',  "
            f"topology: '{self.topology}',  strand: '{self.strand}'"
        )


@dataclass
class ValidationReport:
    """
    Records and diagnostics collected during one scan.

    Both lists keep insertion order. Nothing is filtered, merged or
    reordered.
    """

    records: List[Record] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add_record(self, record: Record) -> None:
        self.records.append(record)

    def add_diagnostic(self, category: Category, message: str) -> None:
        self.diagnostics.append(Diagnostic(Category(category), message))

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)

    def category_counts(self) -> Dict[str, int]:
        """
        Count diagnostics per category.

        Returns
        -------
        Dict[str, int]
            Mapping of category name to number of diagnostics, in order of
            first appearance.
        """
        counts = Counter(d.category.value for d in self.diagnostics)
        return dict(counts)


def write_records_tsv(
    report: ValidationReport, handle: Optional[TextIO] = None
) -> None:
    """
    Write the record table as tab-separated text.

    Parameters
    ----------
    report : ValidationReport
        Completed validation report.
    handle : TextIO, optional
        Output stream. Defaults to stdout.
    """
    if handle is None:
        handle = sys.stdout
    handle.write('\t'.join(RECORD_COLUMNS) + '\n')
    for record in report.records:
        handle.write('\t'.join(record.as_row()) + '\n')


def build_diagnostics_table(report: ValidationReport) -> Table:
    """
    Build a rich table of diagnostics.

    Parameters
    ----------
    report : ValidationReport
        Completed validation report.

    Returns
    -------
    Table
        Two column table (error type, message), one row per diagnostic.
    """
    table = Table(show_lines=False)
    table.add_column('Error_type', no_wrap=True)
    table.add_column('Message', overflow='fold')
    for diagnostic in report.diagnostics:
        table.add_row(str(diagnostic.category), Text(diagnostic.message))
    return table


def print_diagnostics(
    report: ValidationReport, console: Optional[Console] = None
) -> bool:
    """
    Print the diagnostics table if there is anything to show.

    Parameters
    ----------
    report : ValidationReport
        Completed validation report.
    console : Console, optional
        Target console. Defaults to a stderr console.

    Returns
    -------
    bool
        True if a table was printed.
    """
    if not report.has_diagnostics:
        return False
    if console is None:
        console = Console(stderr=True)
    console.print(build_diagnostics_table(report))
    return True
