"""
Branch pipeline template.

Every segment becomes a ``sbf_<id>`` sub-function declaring its place in the
hierarchy and its own stepSets; the main script hands all of them to
``CTAP_pipeline_brancher``.
"""

import logging
from typing import List

from ctapgen.core.config import BasicInfo
from ctapgen.core.models import PipeSegment
from ctapgen.generation.blocks import (
    eeg_lines,
    hydra_lines,
    measurement_lines,
    path_lines,
    step_set_lines,
)
from ctapgen.generation.hierarchy import SegmentLink, resolve_hierarchy
from ctapgen.generation.sanitize import quote

logger = logging.getLogger(__name__)

INDENT = "   "


def subfunction_name(segment: PipeSegment) -> str:
    return f"sbf_{segment.segment_id}"


def pipe_array_line(segments: List[PipeSegment]) -> str:
    """Handles to every segment sub-function, in declaration order."""
    handles = ", ".join(f"@{subfunction_name(s)}" for s in segments)
    return f"pipeArr = {{{handles}}};"


def config_subfunction(basic: BasicInfo) -> List[str]:
    """Shared ``sbf_cfg`` sub-function with paths and EEG metadata."""
    lines = [
        "function [Cfg, out] = sbf_cfg(project_root_folder, ID)",
        f"{INDENT}Cfg.id = ID;",
        f"{INDENT}Cfg.srcid = {{''}};",
        f"{INDENT}Cfg.env.paths.projectRoot = project_root_folder;",
        f"{INDENT}% Define important directories and files",
        f"{INDENT}Cfg.env.paths.branchSource = '';",
        f"{INDENT}Cfg.env.paths.ctapRoot = fullfile(Cfg.env.paths.projectRoot, Cfg.id);",
        f"{INDENT}Cfg.env.paths.analysisRoot = Cfg.env.paths.ctapRoot;",
    ]
    lines += eeg_lines(basic, indent=INDENT)
    lines += [f"{INDENT}out = struct([]);", "end"]
    return lines


def segment_subfunction(segment: PipeSegment, link: SegmentLink) -> List[str]:
    """Sub-function for one segment; stepSet numbering restarts at 1."""
    lines = [
        f"function [Cfg, out] = {subfunction_name(segment)}(Cfg)",
        f"{INDENT}%%%%%%%% Define hierarchy %%%%%%%%",
        f"{INDENT}Cfg.id = {quote(segment.segment_id)};",
        f"{INDENT}Cfg.srcid = {{{quote(link.srcid)}}};",
        f"{INDENT}%%%%%%%% Define pipeline %%%%%%%%",
    ]
    lines += step_set_lines(segment.step_sets, indent=INDENT)
    lines += [
        f"{INDENT}Cfg.pipe.runSets = {{stepSet(:).id}};",
        f"{INDENT}Cfg.pipe.stepSets = stepSet;",
        "end",
    ]
    return lines


def branch_template(basic: BasicInfo, segments: List[PipeSegment]) -> List[str]:
    """
    Render a branch CTAP pipeline script.

    Parameters
    ----------
    basic : BasicInfo
        Basic settings
    segments : list of PipeSegment
        Segments in declaration order

    Returns
    -------
    lines : list of str
        Script lines in output order
    """
    logger.debug("Rendering branch pipeline %r with %d segments", basic.pipeline_name, len(segments))
    links = resolve_hierarchy(segments)

    lines = [
        "%% Runtime options",
        "PREPRO = true;",
        "STOP_ON_ERROR = false;",
        "OVERWRITE_OLD_RESULTS = true;",
        "",
        "%% Basic settings",
    ]
    lines += path_lines(basic)
    lines.append("[Cfg, ~] = sbf_cfg(project_dir, pipeline_name);")
    lines += measurement_lines(basic)
    lines += hydra_lines(basic.hydra, basic.eeg_chanloc)

    lines += [
        "",
        "%% Run the pipes",
        "clear Pipe;",
        pipe_array_line(segments),
        "runps = 1:length(pipeArr);",
        "if PREPRO",
        f"{INDENT}CTAP_pipeline_brancher(Cfg, pipeArr, 'runPipes', runps, "
        "'dbg', STOP_ON_ERROR, 'ovw', OVERWRITE_OLD_RESULTS);",
        "end",
        "",
        "%% Subfunctions",
    ]
    lines += config_subfunction(basic)
    for segment, link in zip(segments, links):
        lines.append("")
        lines += segment_subfunction(segment, link)
    return lines
