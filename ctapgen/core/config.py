"""
Pipeline configuration for ctapgen.

BasicInfo holds the scalar settings collected on the first form page;
PipelineConfig combines them with the linear or branch pipeline tree.
"""

from enum import Enum
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field

from ctapgen.core.models import PipeSegment, StepSet, resize_segments, resize_step_sets

DEFAULT_DATA_PATH = "ctap/data/test_data"


class PipelineMode(str, Enum):
    """Shape of the generated pipeline."""

    LINEAR = "linear"
    BRANCH = "branch"


class HydraSettings(BaseModel):
    """HYDRA parameter-sweep calibration block.

    Attributes
    ----------
    enabled : bool
        Emit the HYDRA block at all
    time_range_option : bool
        Calibrate from a clean time range of the test data
    clean_seed_option : bool
        Calibrate from a clean seed data file
    time_range : str
        Clean segment time range, e.g. ``[10 70]``
    clean_seed : str
        Clean seed data file name
    """

    enabled: bool = Field(default=True, description="Implement HYDRA for artifact parameter optimization")
    time_range_option: bool = Field(default=True, description="Provide clean data time range")
    clean_seed_option: bool = Field(default=False, description="Provide clean seed data")
    time_range: str = Field(default="", description="Clean segment time range [start end] in seconds")
    clean_seed: str = Field(default="", description="Clean seed data file name")

    def select_time_range(self) -> None:
        """Switch to the time-range option, clearing the seed name."""
        self.time_range_option = True
        self.clean_seed_option = False
        self.clean_seed = ""

    def select_clean_seed(self) -> None:
        """Switch to the clean-seed option, clearing the time range."""
        self.clean_seed_option = True
        self.time_range_option = False
        self.time_range = ""


class BasicInfo(BaseModel):
    """Basic pipeline settings."""

    pipeline_name: str = Field(default="", description="Folder name for the outputs of the pipes")
    project_root: str = Field(default="", description="Root directory of the current analysis")
    input_data_path: str = Field(default=DEFAULT_DATA_PATH, description="EEG data directory")
    own_data_path: bool = Field(
        default=False,
        description="Treat input_data_path as an absolute path instead of relative to the CTAP repo"
    )
    sbj_filt: str = Field(default="", description="Unique sequence number in EEG dataset names")
    eeg_type: str = Field(default="", description="EEG data type, e.g. set or bdf")
    eeg_chanloc: str = Field(default="", description="Channel location file of the EEG data")
    eeg_reference: str = Field(default="", description="Reference channels, e.g. L_MASTOID, R_MASTOID")
    eeg_veog_channel_names: str = Field(default="", description="VEOG channel names, e.g. VEOG1, VEOG2")
    eeg_heog_channel_names: str = Field(default="", description="HEOG channel names, e.g. HEOG1, HEOG2")

    checked_linear: bool = Field(default=True, description="Generate a linear pipeline")
    checked_branch: bool = Field(default=False, description="Generate a branch pipeline")

    hydra: HydraSettings = Field(default_factory=HydraSettings)

    @property
    def mode(self) -> PipelineMode:
        return PipelineMode.BRANCH if self.checked_branch else PipelineMode.LINEAR

    def set_mode(self, mode: PipelineMode) -> None:
        """Select linear or branch mode, keeping the two flags exclusive."""
        mode = PipelineMode(mode)
        self.checked_linear = mode is PipelineMode.LINEAR
        self.checked_branch = mode is PipelineMode.BRANCH


class PipelineConfig(BaseModel):
    """Complete description of a pipeline to generate."""

    basic: BasicInfo = Field(default_factory=BasicInfo)
    step_sets: List[StepSet] = Field(
        default_factory=lambda: [StepSet()],
        description="Linear pipeline stepSets"
    )
    segments: List[PipeSegment] = Field(
        default_factory=lambda: [PipeSegment()],
        description="Branch pipeline segments"
    )

    @property
    def mode(self) -> PipelineMode:
        return self.basic.mode

    def resize_step_sets(self, count: int) -> None:
        """Set the number of linear stepSets."""
        resize_step_sets(self.step_sets, count)

    def resize_segments(self, count: int) -> None:
        """Set the number of branch segments."""
        resize_segments(self.segments, count)

    def reset(self) -> None:
        """Discard the pipeline tree, keeping the basic settings."""
        self.step_sets = [StepSet()]
        self.segments = [PipeSegment()]

    @classmethod
    def from_yaml(cls, path: Path) -> "PipelineConfig":
        """Load a pipeline description from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save the pipeline description to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
