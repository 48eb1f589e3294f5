"""Main CLI entry point for procchart."""

import logging

import click

from .commands.build import build
from .commands.validate import validate


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(verbose):
    """procchart - Build process descriptors for container-orchestration manifests"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


# Register commands
cli.add_command(build)
cli.add_command(validate)


if __name__ == '__main__':
    cli()
