"""Options shared by procchart commands."""

from pathlib import Path

import click

from ...core import FilePortSource
from ...utils import ConfigManager

config_option = click.option(
    '--config', '-c', 'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Application configuration file (default: ./procchart.yaml)',
)
ports_option = click.option(
    '--ports', '-p', 'ports_file',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Port and healthcheck configuration file (default: ./ports.yaml)',
)


def load_inputs(config_file, ports_file):
    """Load application config and a port source from the current project."""
    manager = ConfigManager(Path.cwd(), app_config_file=config_file, port_config_file=ports_file)
    app_config = manager.load_app_config()
    port_source = FilePortSource(manager.load_port_config())
    return manager, app_config, port_source
