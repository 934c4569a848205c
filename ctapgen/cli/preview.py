"""Preview command for ctapgen CLI."""

from rich.console import Console
from rich.syntax import Syntax

from ..core.config import PipelineConfig
from ..core.validation import validate_pipeline
from ..generation.script import render
from .validate import print_issues


def preview_command(args):
    """
    Show the generated script with MATLAB syntax highlighting.

    Validation issues are listed first but do not stop the preview.

    Parameters
    ----------
    args : argparse.Namespace
        Command-line arguments
    """
    console = Console()

    config = PipelineConfig.from_yaml(args.config)
    result = validate_pipeline(config)
    if result.issues:
        print_issues(console, result)

    code = "\n".join(render(config))
    console.print(Syntax(code, "matlab", line_numbers=True, theme="default"))
