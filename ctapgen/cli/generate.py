"""Generate command for ctapgen CLI."""

import logging
from pathlib import Path

from rich.console import Console

from ..core.config import PipelineConfig
from ..core.storage import BasicInfoStore
from ..generation.script import generate_script

logger = logging.getLogger(__name__)


def generate_command(args):
    """
    Generate a CTAP pipeline script from a YAML description.

    Parameters
    ----------
    args : argparse.Namespace
        Command-line arguments
    """
    console = Console()

    config = PipelineConfig.from_yaml(args.config)
    document = generate_script(config, strict=args.strict)

    if args.stdout:
        # Plain print so the script can be redirected untouched
        print(document.text)
    else:
        output_dir = args.output or Path.cwd()
        path = document.write(output_dir)
        console.print(f"\n[bold]ctapgen[/bold]")
        console.print(f"Config: {args.config}")
        console.print(f"Mode: {config.mode.value}")
        console.print(f"[green]✓ Wrote {path} ({len(document.lines)} lines)[/green]")

    store = BasicInfoStore(args.storage)
    store.save(config.basic)
    logger.debug("Basic settings stored for next session")
