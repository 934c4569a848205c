"""
Line blocks shared by the linear and branch templates.

Every function returns a list of lines without trailing newlines; the
templates concatenate them in order.
"""

from typing import List

from ctapgen.core.catalog import struct_field_name
from ctapgen.core.config import BasicInfo, HydraSettings
from ctapgen.core.models import StepSet
from ctapgen.generation.sanitize import as_cell_array, input_correction, quote


def sbj_filt_literal(sbj_filt: str) -> str:
    """Subject filter as a scalar literal, or a cell array for several tokens."""
    tokens = input_correction(sbj_filt)
    if "," in tokens:
        return "{" + tokens + "}"
    return tokens or "{}"


def path_lines(basic: BasicInfo) -> List[str]:
    """Pipeline name and the directory variables derived from this file's location."""
    script = quote(basic.pipeline_name)
    lines = [
        f"pipeline_name = {script};",
        "FILE_ROOT = mfilename('fullpath');",
        f"reporoot = FILE_ROOT(1:strfind(FILE_ROOT, fullfile('ctap', 'templates', "
        f"{quote(basic.project_root)}, {script})) - 1);",
        "project_dir = [fileparts(FILE_ROOT) filesep];",
    ]
    if basic.own_data_path:
        lines.append(f"data_dir = {quote(basic.input_data_path)};")
    else:
        lines.append(f"data_dir = append(reporoot, {quote(basic.input_data_path)});")
    return lines


def eeg_lines(basic: BasicInfo, indent: str = "") -> List[str]:
    """EEG metadata assignments; channel lists go through the sanitizer."""
    return [
        f"{indent}Cfg.eeg.chanlocs = {quote(basic.eeg_chanloc)};",
        f"{indent}Cfg.eeg.reference = {as_cell_array(basic.eeg_reference)};",
        f"{indent}Cfg.eeg.veogChannelNames = {as_cell_array(basic.eeg_veog_channel_names)};",
        f"{indent}Cfg.eeg.heogChannelNames = {as_cell_array(basic.eeg_heog_channel_names)};",
    ]


def measurement_lines(basic: BasicInfo) -> List[str]:
    return [
        "Cfg.grfx.on = false;",
        f"Cfg.MC = get_meas_cfg_MC(Cfg, data_dir, 'eeg_ext', {quote(basic.eeg_type)}, "
        f"'sbj_filt', {sbj_filt_literal(basic.sbj_filt)});",
    ]


def hydra_lines(hydra: HydraSettings, chanloc: str) -> List[str]:
    """
    HYDRA configuration block.

    Empty when HYDRA is disabled. The time-range and clean-seed options are
    mutually exclusive; with neither (or both) active no calibration source
    lines are emitted.
    """
    if not hydra.enabled:
        return []

    lines = [
        "HYDRA = true;",
        "PARAM = param_sweep_setup(project_dir);",
        "Cfg.HYDRA.ifapply = HYDRA;",
        f"Cfg.HYDRA.chanloc = {quote(chanloc)};",
        "Cfg.HYDRA.PARAM = PARAM;",
        "Cfg.HYDRA.FULL_CLEAN_SEED = false;",
    ]
    if hydra.time_range_option and not hydra.clean_seed_option:
        lines.append("Cfg.HYDRA.provide_seed_timerange = true;")
        lines.append(f"Cfg.HYDRA.cleanseed_timerange = {hydra.time_range.strip()};")
    elif hydra.clean_seed_option and not hydra.time_range_option:
        lines.append("Cfg.HYDRA.provide_seed_timerange = false;")
        lines.append(f"Cfg.HYDRA.seed_fname = {quote(hydra.clean_seed.strip())};")
    return lines


def step_set_lines(step_sets: List[StepSet], indent: str = "") -> List[str]:
    """
    StepSet construction block.

    Two lines per stepSet (id and function handles, numbered from 1 within
    ``step_sets``), followed by one parameter struct line per function call
    in the same order.
    """
    structure = []
    params = []
    for index, step_set in enumerate(step_sets, start=1):
        handles = ", ".join(f"@{call.func_name}" for call in step_set.functions)
        structure.append(
            f"{indent}stepSet({index}).id = [num2str({index}), {quote(step_set.step_id)}];"
        )
        structure.append(f"{indent}stepSet({index}).funH = {{{handles}}};")
        for call in step_set.functions:
            field = struct_field_name(call.func_name)
            params.append(f"{indent}out.{field} = struct({call.func_params.strip()});")
    return structure + params
