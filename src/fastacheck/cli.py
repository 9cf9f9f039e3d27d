"""
Main CLI entry point for fastacheck with sub-commands.
"""

import click

from fastacheck._version import __version__


@click.group(
    help='Validate FASTA files against viral genome submission rules.',
    invoke_without_command=True,
)
@click.version_option(version=__version__, prog_name='fastacheck')
@click.pass_context
def main(ctx):
    """
    Validate FASTA files against viral genome submission rules.

    Parameters
    ----------
    ctx : click.Context
        Click context object for passing information between commands.
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


def register_commands():
    """Register sub-commands. Import here to avoid circular imports."""
    from fastacheck.commands.validate import validate_cmd

    main.add_command(validate_cmd)


register_commands()
