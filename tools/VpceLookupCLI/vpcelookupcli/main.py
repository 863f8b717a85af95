"""Entry point for the vpcelookup command."""

import click

from . import __version__
from .commands.lookup import lookup
from .commands.invoke import invoke


@click.group()
@click.version_option(version=__version__, prog_name='vpcelookup')
def cli():
    """Resolve VPC interface endpoints to the private IPs behind them."""
    pass


cli.add_command(lookup)
cli.add_command(invoke)


if __name__ == '__main__':
    cli()
