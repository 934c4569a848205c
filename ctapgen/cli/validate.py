"""Validate command for ctapgen CLI."""

from rich import box
from rich.console import Console
from rich.table import Table

from ..core.config import PipelineConfig
from ..core.validation import PipelineValidationError, Severity, ValidationResult, validate_pipeline


def print_issues(console: Console, result: ValidationResult) -> None:
    """Print validation issues as a table."""
    if not result.issues:
        console.print("[green]✓ Configuration is valid[/green]")
        return

    table = Table(
        title=f"\nValidation Issues ({len(result.errors)} errors, {len(result.warnings)} warnings)",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Severity", no_wrap=True)
    table.add_column("Field", style="cyan")
    table.add_column("Reason", style="white")

    for issue in result.issues:
        color = 'red' if issue.severity is Severity.ERROR else 'yellow'
        table.add_row(f"[{color}]{issue.severity.value}[/{color}]", issue.path, issue.reason)

    console.print(table)


def validate_command(args):
    """
    Validate a pipeline description without generating it.

    Parameters
    ----------
    args : argparse.Namespace
        Command-line arguments
    """
    console = Console()

    config = PipelineConfig.from_yaml(args.config)
    result = validate_pipeline(config)

    console.print(f"\n[bold]ctapgen Validation[/bold]")
    console.print(f"Config: {args.config}")
    console.print(f"Mode: {config.mode.value}\n")
    print_issues(console, result)

    if not result.is_valid or (args.strict and result.warnings):
        raise PipelineValidationError(result)
