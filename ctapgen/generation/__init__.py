"""CTAP script templates."""

from ctapgen.generation.sanitize import input_correction, as_cell_array
from ctapgen.generation.hierarchy import SegmentLink, resolve_hierarchy
from ctapgen.generation.linear import linear_template
from ctapgen.generation.branch import branch_template
from ctapgen.generation.script import ScriptDocument, generate_script, render

__all__ = [
    "input_correction",
    "as_cell_array",
    "SegmentLink",
    "resolve_hierarchy",
    "linear_template",
    "branch_template",
    "ScriptDocument",
    "generate_script",
    "render",
]
