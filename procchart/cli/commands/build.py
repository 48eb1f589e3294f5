"""Build command for procchart."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...core import build_process
from ...services import ProcChartError
from ...utils import dump_descriptor
from .options import config_option, load_inputs, ports_option


@click.command()
@click.argument('process')
@config_option
@ports_option
@click.option('--deployment-version', '-d', type=click.IntRange(min=0),
              help='Deployment version labels and annotations are scoped to')
@click.option('--file', '-f', 'output_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the descriptor to a new file instead of stdout')
@click.option('--json', 'as_json', is_flag=True, help='Output JSON instead of YAML')
@click.pass_context
def build(ctx, process, config_file, ports_file, deployment_version, output_file, as_json):
    """Build the descriptor of PROCESS.

    PROCESS: Process name (e.g., 'web', 'worker')
    """
    console = Console(stderr=True)

    try:
        manager, app_config, port_source = load_inputs(config_file, ports_file)
        descriptor = build_process(app_config, process, port_source, deployment_version)

        if output_file:
            manager.export_descriptor(
                descriptor, output_file, as_json=as_json or output_file.suffix == '.json'
            )
            console.print(f"[green]Wrote process '{process}' to {output_file}[/green]")
        else:
            click.echo(dump_descriptor(descriptor, as_json=as_json), nl=False)

    except ProcChartError as e:
        console.print(f"[red]Error building process '{process}': {escape(str(e))}[/red]")
        ctx.exit(1)
