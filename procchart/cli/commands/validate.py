"""Validate command for procchart."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core import build_process, is_routable
from ...services import BuildError, ProcChartError
from .options import config_option, load_inputs, ports_option


@click.command()
@config_option
@ports_option
@click.pass_context
def validate(ctx, config_file, ports_file):
    """Build every configured process and report the result."""
    console = Console()

    try:
        _, app_config, port_source = load_inputs(config_file, ports_file)
    except ProcChartError as e:
        console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        ctx.exit(1)

    if not app_config.processes:
        console.print("[yellow]No processes configured.[/yellow]")
        return

    table = Table(title="Processes")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Routable", style="green")
    table.add_column("Status", style="white")

    failed = 0
    for name in app_config.process_names():
        routable = "yes" if is_routable(name, app_config.processes[name]) else "no"
        try:
            descriptor = build_process(app_config, name, port_source)
        except BuildError as e:
            failed += 1
            table.add_row(name, routable, f"[red]{escape(str(e))}[/red]")
            continue
        ports = ",".join(str(port.container_port) for port in descriptor.container_ports) or "-"
        table.add_row(name, routable, f"ok (ports: {ports}, units: {descriptor.instance_count})")

    console.print(table)
    if failed:
        console.print(f"[red]{failed} process(es) failed to build[/red]")
        ctx.exit(1)
