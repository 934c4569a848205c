"""Functions command for ctapgen CLI."""

from rich import box
from rich.console import Console
from rich.table import Table

from ..core.catalog import CTAP_CHANLOCS, CTAP_FUNCTIONS, struct_field_name


def functions_command(args):
    """
    List the known CTAP functions and channel location files.

    Parameters
    ----------
    args : argparse.Namespace
        Command-line arguments
    """
    console = Console()

    table = Table(
        title=f"\nCTAP Functions ({len(CTAP_FUNCTIONS)})",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Function", style="cyan", no_wrap=True)
    table.add_column("Parameter struct", style="magenta")

    for i, name in enumerate(CTAP_FUNCTIONS, 1):
        table.add_row(str(i), name, f"out.{struct_field_name(name)}")

    console.print(table)

    if args.chanlocs:
        console.print("\n[bold]Channel locations:[/bold]")
        for name in CTAP_CHANLOCS:
            console.print(f"  {name}")
