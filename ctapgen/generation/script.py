"""
Script generation entry points.

Dispatches a PipelineConfig to the linear or branch template and wraps the
lines in a ScriptDocument that can be written to disk.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ctapgen.core.config import PipelineConfig, PipelineMode
from ctapgen.core.validation import PipelineValidationError, validate_pipeline
from ctapgen.generation.branch import branch_template
from ctapgen.generation.linear import linear_template

logger = logging.getLogger(__name__)

SCRIPT_SUFFIX = ".m"


@dataclass
class ScriptDocument:
    """Generated MATLAB script."""

    name: str
    lines: List[str]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def filename(self) -> str:
        return f"{self.name or 'ctap_pipeline'}{SCRIPT_SUFFIX}"

    def write(self, output_dir: Path) -> Path:
        """
        Write the script to ``output_dir/<name>.m``.

        The text goes to a temporary file first and then replaces any file
        left by an earlier generation.

        Returns
        -------
        path : Path
            Path of the written script
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        target = output_dir / self.filename
        if target.resolve().parent != output_dir.resolve():
            raise ValueError(f"Script name {self.name!r} points outside {output_dir}")

        fd, tmp_name = tempfile.mkstemp(dir=output_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(self.text)
                f.write("\n")
            os.replace(tmp_name, target)
        except BaseException:
            os.unlink(tmp_name)
            raise

        logger.info("Wrote %s (%d lines)", target, len(self.lines))
        return target


def render(config: PipelineConfig) -> List[str]:
    """Render the script lines for ``config`` without validating it."""
    if config.mode is PipelineMode.BRANCH:
        return branch_template(config.basic, config.segments)
    return linear_template(config.basic, config.step_sets)


def generate_script(config: PipelineConfig, strict: bool = False) -> ScriptDocument:
    """
    Validate ``config`` and render it.

    Parameters
    ----------
    config : PipelineConfig
        Pipeline description
    strict : bool, default False
        Treat validation warnings (e.g. unknown parent pipes) as errors

    Raises
    ------
    PipelineValidationError
        If validation reports errors, or warnings in strict mode
    """
    result = validate_pipeline(config)
    for issue in result.warnings:
        logger.warning("%s", issue)

    if not result.is_valid or (strict and result.warnings):
        raise PipelineValidationError(result)

    return ScriptDocument(name=config.basic.pipeline_name, lines=render(config))
