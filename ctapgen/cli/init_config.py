"""Init command for ctapgen CLI."""

from rich.console import Console

from ..core.config import PipelineConfig, PipelineMode
from ..core.storage import BasicInfoStore


def init_command(args):
    """
    Write a default pipeline description to start editing from.

    Parameters
    ----------
    args : argparse.Namespace
        Command-line arguments
    """
    console = Console()

    if args.output.exists() and not args.force:
        raise FileExistsError(f"{args.output} already exists (use --force to overwrite)")

    config = PipelineConfig()
    if args.from_storage:
        config.basic = BasicInfoStore(args.storage).load()
    config.basic.set_mode(PipelineMode(args.mode))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    config.to_yaml(args.output)

    console.print(f"[green]✓ Wrote {config.mode.value} pipeline template to {args.output}[/green]")
