"""Linear pipeline template: one ordered list of stepSets run by the looper."""

import logging
from typing import List

from ctapgen.core.config import BasicInfo
from ctapgen.core.models import StepSet
from ctapgen.generation.blocks import (
    eeg_lines,
    hydra_lines,
    measurement_lines,
    path_lines,
    step_set_lines,
)

logger = logging.getLogger(__name__)


def linear_template(basic: BasicInfo, step_sets: List[StepSet]) -> List[str]:
    """
    Render a linear CTAP pipeline script.

    Parameters
    ----------
    basic : BasicInfo
        Basic settings
    step_sets : list of StepSet
        StepSets in execution order

    Returns
    -------
    lines : list of str
        Script lines in output order
    """
    logger.debug("Rendering linear pipeline %r with %d stepSets", basic.pipeline_name, len(step_sets))

    lines = [
        "%% Runtime options",
        "DEBUG = false;",
        "OVERWRITE_OLD_RESULTS = true;",
        "",
        "%% Basic settings",
    ]
    lines += path_lines(basic)
    lines.append("Cfg.env.paths = cfg_create_paths(project_dir, pipeline_name, {''}, 1);")
    lines += eeg_lines(basic)
    lines += measurement_lines(basic)
    lines += hydra_lines(basic.hydra, basic.eeg_chanloc)

    lines += ["", "%% Define pipeline", "clear Pipe;"]
    lines += step_set_lines(step_sets)
    lines += [
        "Cfg.pipe.stepSets = stepSet;",
        "Cfg.pipe.runSets = {stepSet(:).id};",
        "Cfg = ctap_auto_config(Cfg, out);",
        "",
        "%% Run the pipe",
        "CTAP_pipeline_looper(Cfg, 'debug', DEBUG, 'overwrite', OVERWRITE_OLD_RESULTS);",
        "clear i stepSet Filt ctap_args",
    ]
    return lines
