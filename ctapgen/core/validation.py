"""
Configuration validation utilities.

Validation runs as a separate pass over a PipelineConfig and reports
field paths with reasons; the models themselves carry no check flags.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from ctapgen.core.catalog import is_known_function
from ctapgen.core.config import BasicInfo, PipelineConfig, PipelineMode
from ctapgen.core.models import StepSet

EMPTY_FIELD = "The field cannot be empty. Please enter a value"
EMPTY_FUNCTION = "The field cannot be empty. Please select a function"

REQUIRED_BASIC_FIELDS = [
    "pipeline_name",
    "project_root",
    "sbj_filt",
    "eeg_type",
    "eeg_chanloc",
    "eeg_reference",
]

PATH_SEPARATORS = ("/", "\\")

# Only needed when the pipeline performs blink detection
EOG_FIELDS = ["eeg_veog_channel_names", "eeg_heog_channel_names"]


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """One problem found in a configuration."""

    path: str
    reason: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class PipelineValidationError(Exception):
    """Raised when a configuration is not fit for generation."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        messages = [str(issue) for issue in result.issues]
        super().__init__("Invalid pipeline configuration: " + "; ".join(messages))


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.issues: List[ValidationIssue] = []

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, path: str, reason: str) -> None:
        self.issues.append(ValidationIssue(path, reason, Severity.ERROR))

    def add_warning(self, path: str, reason: str) -> None:
        self.issues.append(ValidationIssue(path, reason, Severity.WARNING))

    def paths(self) -> List[str]:
        return [i.path for i in self.issues]

    def __repr__(self) -> str:
        status = "VALID" if self.is_valid else "INVALID"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


def validate_basic_info(basic: BasicInfo, result: ValidationResult) -> None:
    """Check required basic settings, mode flags and the HYDRA block."""
    for name in REQUIRED_BASIC_FIELDS:
        if not getattr(basic, name).strip():
            result.add_error(f"basic.{name}", EMPTY_FIELD)

    pipeline_name = basic.pipeline_name.strip()
    if any(sep in pipeline_name for sep in PATH_SEPARATORS) or pipeline_name in (".", ".."):
        result.add_error(
            "basic.pipeline_name",
            "The pipeline name is used as the script file name and cannot contain path separators"
        )

    if basic.checked_linear == basic.checked_branch:
        result.add_error(
            "basic.checked_linear",
            "Exactly one of linear or branch pipeline must be selected"
        )

    if basic.own_data_path and not basic.input_data_path.strip():
        result.add_error("basic.input_data_path", EMPTY_FIELD)

    hydra = basic.hydra
    if hydra.enabled:
        if hydra.time_range_option and hydra.clean_seed_option:
            result.add_error(
                "basic.hydra",
                "Choose either a clean data time range or a clean seed file, not both"
            )
        elif hydra.time_range_option and not hydra.time_range.strip():
            result.add_error("basic.hydra.time_range", EMPTY_FIELD)
        elif hydra.clean_seed_option and not hydra.clean_seed.strip():
            result.add_error("basic.hydra.clean_seed", EMPTY_FIELD)
        elif not (hydra.time_range_option or hydra.clean_seed_option):
            result.add_warning(
                "basic.hydra",
                "No calibration source selected, HYDRA block will not set one"
            )


def validate_step_sets(step_sets: List[StepSet], prefix: str, result: ValidationResult) -> None:
    """Check labels and function names of a stepSet list."""
    if not step_sets:
        result.add_error(prefix, "At least one stepSet is required")

    for i, step_set in enumerate(step_sets):
        path = f"{prefix}[{i}]"
        if not step_set.step_id.strip():
            result.add_error(f"{path}.step_id", EMPTY_FIELD)

        if not step_set.functions:
            result.add_error(f"{path}.functions", "At least one function is required")

        for j, call in enumerate(step_set.functions):
            func_path = f"{path}.functions[{j}].func_name"
            if not call.func_name.strip():
                result.add_error(func_path, EMPTY_FUNCTION)
            elif not is_known_function(call.func_name):
                result.add_warning(func_path, f"Unknown CTAP function: {call.func_name}")


def validate_segments(config: PipelineConfig, result: ValidationResult) -> None:
    """Check branch segments and their parent references.

    A parent reference that names no previously declared segment is only
    a warning ("no such pipe"); generation still proceeds.
    """
    segments = config.segments
    if not segments:
        result.add_error("segments", "At least one pipe segment is required")

    declared = set()
    for i, segment in enumerate(segments):
        path = f"segments[{i}]"
        if not segment.segment_id.strip():
            result.add_error(f"{path}.segment_id", EMPTY_FIELD)
        elif segment.segment_id in declared:
            result.add_error(f"{path}.segment_id", f"Duplicate segment id: {segment.segment_id}")

        if not segment.step_id.strip():
            result.add_error(f"{path}.step_id", EMPTY_FIELD)

        if i > 0:
            if not segment.src_id.strip():
                result.add_error(f"{path}.src_id", EMPTY_FIELD)
            elif segment.src_id == segment.segment_id:
                result.add_warning(f"{path}.src_id", "Segment refers to itself")
            elif segment.src_id not in declared:
                result.add_warning(f"{path}.src_id", f"No such pipe: {segment.src_id}")

        validate_step_sets(segment.step_sets, f"{path}.step_sets", result)
        declared.add(segment.segment_id)


def _uses_blink_detection(config: PipelineConfig) -> bool:
    if config.mode is PipelineMode.LINEAR:
        step_sets = config.step_sets
    else:
        step_sets = [s for seg in config.segments for s in seg.step_sets]
    return any("blink" in call.func_name for s in step_sets for call in s.functions)


def validate_pipeline(config: PipelineConfig) -> ValidationResult:
    """
    Validate a pipeline configuration before generation.

    Checks:
    - Required basic settings are present
    - Mode flags and HYDRA options are consistent
    - Every stepSet has a label and every function a name
    - Branch parent references point to declared segments
    """
    result = ValidationResult()

    validate_basic_info(config.basic, result)

    if config.mode is PipelineMode.LINEAR:
        validate_step_sets(config.step_sets, "step_sets", result)
    else:
        validate_segments(config, result)

    if _uses_blink_detection(config):
        for name in EOG_FIELDS:
            if not getattr(config.basic, name).strip():
                result.add_warning(f"basic.{name}", "Required when performing blink detection")

    return result
