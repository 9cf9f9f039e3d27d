"""
Validate sub-command for fastacheck CLI.

Scans a FASTA file once, writes the record table to stdout and the
diagnostics table to stderr.
"""

from dataclasses import replace
import logging
import sys
import zlib

import click

from ..byte_source import DEFAULT_CHUNK_SIZE, UnsupportedFormatError
from ..logs import init_logging
from ..profile import SARS_COV_2
from ..report import print_diagnostics, write_records_tsv
from ..scanner import validate_fasta
from ..utils import isfile


@click.command(
    'validate',
    help='Check a FASTA file (.fa, .fsa, .fna, .fasta, optionally .gz) against '
    'SARS-CoV-2 submission rules.',
)
@click.argument('fasta', required=False, type=click.Path(dir_okay=False))
@click.option(
    '-o',
    '--output',
    type=click.File('w'),
    default='-',
    help='Write the record table to this file. Default: stdout.',
)
@click.option(
    '--min-len',
    default=SARS_COV_2.min_length,
    type=click.IntRange(min=0),
    help=f'Minimum sequence length. Default: {SARS_COV_2.min_length}',
)
@click.option(
    '--max-len',
    default=SARS_COV_2.max_length,
    type=click.IntRange(min=0),
    help=f'Maximum sequence length. Default: {SARS_COV_2.max_length}',
)
@click.option(
    '--max-n-fraction',
    default=SARS_COV_2.max_n_fraction,
    type=click.FloatRange(min=0.0, max=1.0, min_open=True),
    help='Report sequences whose fraction of N bases reaches this value. '
    f'Default: {SARS_COV_2.max_n_fraction}',
)
@click.option(
    '--chunk-size',
    default=DEFAULT_CHUNK_SIZE,
    type=click.IntRange(min=1),
    help=f'Read buffer size in bytes. Default: {DEFAULT_CHUNK_SIZE}',
)
@click.option(
    '--log-level',
    default='INFO',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level (default: INFO).',
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False),
    help='Also write log messages to this file.',
)
@click.pass_context
def validate_cmd(
    ctx,
    fasta,
    output,
    min_len,
    max_len,
    max_n_fraction,
    chunk_size,
    log_level,
    log_file,
):
    """
    Validate a FASTA file against submission rules.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    fasta : str or None
        Path to the FASTA file. If omitted, usage is printed and the command
        exits successfully.
    output : file-like
        Destination of the tab-separated record table.
    min_len : int
        Minimum accepted sequence length.
    max_len : int
        Maximum accepted sequence length.
    max_n_fraction : float
        Fraction of N bases at or above which a sequence is reported.
    chunk_size : int
        Number of bytes read per chunk.
    log_level : str
        Logging level (DEBUG, INFO, WARNING, ERROR).
    log_file : str or None
        Optional log file path.

    Examples
    --------
    .. code-block:: bash

        fastacheck validate genomes.fasta.gz > source_table.tsv
    """
    if fasta is None:
        click.echo(ctx.get_usage())
        click.echo('Please specify Fasta file')
        ctx.exit(0)

    init_logging(log_level, log_file)

    if min_len > max_len:
        raise click.BadParameter(
            f'--min-len ({min_len}) must not exceed --max-len ({max_len})',
            param_hint='--min-len',
        )

    fasta_path = isfile(fasta)
    profile = replace(
        SARS_COV_2,
        min_length=min_len,
        max_length=max_len,
        max_n_fraction=max_n_fraction,
    )

    try:
        report = validate_fasta(fasta_path, profile=profile, chunk_size=chunk_size)
    except UnsupportedFormatError as e:
        logging.error(str(e))
        sys.exit(1)
    except (OSError, EOFError, zlib.error) as e:
        logging.error(f'Error reading {fasta_path}: {e}')
        raise click.ClickException(str(e)) from e

    write_records_tsv(report, output)
    print_diagnostics(report)

    if report.has_diagnostics:
        summary = ', '.join(
            f'{category}: {count}'
            for category, count in report.category_counts().items()
        )
        logging.warning(
            f'{len(report.diagnostics)} problems found in '
            f'{len(report.records)} sequences ({summary})'
        )
    else:
        logging.info(f'All {len(report.records)} sequences passed validation')
