"""
Validation thresholds and record metadata for a submission target.

A profile bundles the numeric limits used by the validation rules with the
fixed descriptive metadata written into every report row. The default
profile targets SARS-CoV-2 genome deposition.
"""

from dataclasses import dataclass

from fastacheck.report import Record


@dataclass(frozen=True)
class ValidationProfile:
    """Thresholds and record defaults for one submission target."""

    name: str = 'SARS-CoV-2'
    min_length: int = 50
    max_length: int = 30_000
    max_n_fraction: float = 0.5
    max_seqid_length: int = 24
    organism: str = 'Severe acute respiratory syndrome coronavirus 2'
    genetic_code: str = '1'
    moltype: str = 'genomic RNA'
    topology: str = 'linear'
    strand: str = 'single'

    def __post_init__(self):
        if self.min_length > self.max_length:
            raise ValueError(
                f'min_length ({self.min_length}) must not exceed '
                f'max_length ({self.max_length})'
            )
        if not 0.0 < self.max_n_fraction <= 1.0:
            raise ValueError(
                f'max_n_fraction must be in (0, 1], got {self.max_n_fraction}'
            )
        if self.max_seqid_length < 2:
            raise ValueError('max_seqid_length must allow at least one character')

    def new_record(self, seqid: str) -> Record:
        """
        Build a report record carrying this profile's metadata.

        Parameters
        ----------
        seqid : str
            Sequence identifier extracted from the defline.

        Returns
        -------
        Record
            Immutable record for the report.
        """
        return Record(
            seqid=seqid,
            organism=self.organism,
            genetic_code=self.genetic_code,
            moltype=self.moltype,
            topology=self.topology,
            strand=self.strand,
        )


SARS_COV_2 = ValidationProfile()
