"""Main CLI entry point for ctapgen."""

import sys
import argparse
import logging
from pathlib import Path

from rich.console import Console

from ..core.validation import PipelineValidationError
from ..utils.logging import setup_logging
from .functions import functions_command
from .generate import generate_command
from .init_config import init_command
from .preview import preview_command
from .validate import print_issues, validate_command


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog='ctapgen',
        description="ctapgen - CTAP pipeline script generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start from a template
  ctapgen init --output pipeline.yaml --mode branch

  # Check the description
  ctapgen validate --config pipeline.yaml

  # Write <pipeline_name>.m into ./scripts
  ctapgen generate --config pipeline.yaml --output scripts
        """
    )
    parser.add_argument(
        '--verbose',
        '-v',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        help='Also write log messages to this file'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Generate command
    generate_parser = subparsers.add_parser(
        'generate',
        help='Generate a CTAP pipeline script',
        description='Render a pipeline description into a MATLAB script'
    )
    generate_parser.add_argument(
        '--config',
        type=Path,
        required=True,
        help='Pipeline description file (YAML)'
    )
    generate_parser.add_argument(
        '--output',
        type=Path,
        help='Output directory (default: current directory)'
    )
    generate_parser.add_argument(
        '--stdout',
        action='store_true',
        help='Print the script instead of writing a file'
    )
    generate_parser.add_argument(
        '--strict',
        action='store_true',
        help='Treat warnings (e.g. unknown parent pipes) as errors'
    )
    generate_parser.add_argument(
        '--storage',
        type=Path,
        help='Settings storage file (default: ~/.ctapgen/storage.json)'
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        'validate',
        help='Validate a pipeline description',
        description='Report missing fields and unresolved pipe references'
    )
    validate_parser.add_argument(
        '--config',
        type=Path,
        required=True,
        help='Pipeline description file (YAML)'
    )
    validate_parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail on warnings as well as errors'
    )

    # Preview command
    preview_parser = subparsers.add_parser(
        'preview',
        help='Preview the generated script',
        description='Print the generated script with syntax highlighting'
    )
    preview_parser.add_argument(
        '--config',
        type=Path,
        required=True,
        help='Pipeline description file (YAML)'
    )

    # Functions command
    functions_parser = subparsers.add_parser(
        'functions',
        help='List known CTAP functions',
        description='Show the CTAP function catalog'
    )
    functions_parser.add_argument(
        '--chanlocs',
        action='store_true',
        help='Also list known channel location files'
    )

    # Init command
    init_parser = subparsers.add_parser(
        'init',
        help='Write a default pipeline description',
        description='Create a YAML pipeline description with one default entry'
    )
    init_parser.add_argument(
        '--output',
        type=Path,
        required=True,
        help='File to write (YAML)'
    )
    init_parser.add_argument(
        '--mode',
        type=str,
        choices=['linear', 'branch'],
        default='linear',
        help='Pipeline type (default: linear)'
    )
    init_parser.add_argument(
        '--from-storage',
        action='store_true',
        help='Prefill basic settings from the last session'
    )
    init_parser.add_argument(
        '--storage',
        type=Path,
        help='Settings storage file (default: ~/.ctapgen/storage.json)'
    )
    init_parser.add_argument(
        '--force',
        action='store_true',
        help='Overwrite an existing file'
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    # Execute command
    try:
        if args.command == 'generate':
            generate_command(args)
        elif args.command == 'validate':
            validate_command(args)
        elif args.command == 'preview':
            preview_command(args)
        elif args.command == 'functions':
            functions_command(args)
        elif args.command == 'init':
            init_command(args)
        else:
            parser.print_help()
            sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        sys.exit(130)
    except PipelineValidationError as e:
        console = Console(stderr=True)
        if args.command != 'validate':
            print_issues(console, e.result)
        console.print("[red]Error: configuration is not valid[/red]")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
