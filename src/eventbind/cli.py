from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .abi_events import load_abi
from .binding.types import is_supported
from .constants import STDOUT
from .core.config import load_config
from .core.errors import EventbindError
from .orchestration import generate

console = Console()
err_console = Console(stderr=True)


@click.group()
def cli() -> None:
    """eventbind — typed Go bindings for smart-contract events."""


@cli.command("generate")
@click.argument("config_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--template",
    "template_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="jinja2 template; overrides the config file (default: built-in events.go.j2)",
)
@click.option("--package", "package_name", default=None, help="Go package name; overrides the config file")
@click.option("--output", "-o", default=STDOUT, show_default=True, help="Output file, '-' for stdout")
@click.option("--format/--no-format", "format_source", default=True, show_default=True, help="Run gofmt on the output")
@click.option(
    "--eventdata/--no-eventdata",
    default=None,
    help="Also emit the Block / LogInfo / Data[A] wrapper types; overrides the config file",
)
@click.option("--quiet", "-q", is_flag=True, default=False, help="No summary on stderr")
def generate_cmd(
    config_path: Path,
    template_path: Path | None,
    package_name: str | None,
    output: str,
    format_source: bool,
    eventdata: bool | None,
    quiet: bool,
) -> None:
    """Generate Go bindings for the events listed in CONFIG_PATH."""
    try:
        config = load_config(config_path).with_overrides(
            package_name=package_name,
            template_path=template_path,
            output=output,
            format_source=format_source,
            eventdata=eventdata,
        )
        result = generate(config=config)
    except EventbindError as e:
        raise click.ClickException(str(e)) from e

    if result.format_skipped:
        err_console.print("[yellow]warning[/]: gofmt not found on PATH, output left unformatted")
    if not quiet:
        destination = "stdout" if result.output == STDOUT else result.output
        err_console.print(
            f"[bold]done[/]: {len(result.model.events)} events • "
            f"package [cyan]{result.model.package_name}[/] → {destination}"
        )


@cli.command("events")
@click.argument("abi_path", type=click.Path(dir_okay=False, path_type=Path))
def events_cmd(abi_path: Path) -> None:
    """List the events of ABI_PATH with their signatures and IDs."""
    try:
        abi = load_abi(abi_path)
    except EventbindError as e:
        raise click.ClickException(str(e)) from e

    table = Table(title=abi.source_name)
    table.add_column("event", style="bold", no_wrap=True)
    table.add_column("signature", overflow="fold")
    table.add_column("id", overflow="fold")
    table.add_column("supported")
    for event in abi.events:
        supported = all(is_supported(event_input.type) for event_input in event.inputs)
        table.add_row(
            event.name,
            event.signature,
            "0x" + event.id.hex(),
            "[green]yes[/]" if supported else "[red]no[/]",
        )
    console.print(table)
