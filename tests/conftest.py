"""Shared fixtures for ctapgen tests."""

import pytest

from ctapgen.core.config import BasicInfo, PipelineConfig, PipelineMode
from ctapgen.core.models import FunctionCall, PipeSegment, StepSet


@pytest.fixture
def basic_info():
    """Complete basic settings for a linear pipeline."""
    basic = BasicInfo(
        pipeline_name="demo",
        project_root="demo_project",
        sbj_filt="all",
        eeg_type="set",
        eeg_chanloc="chanlocs128_biosemi.elp",
        eeg_reference="L_MASTOID, R_MASTOID",
        eeg_veog_channel_names="VEOG1, VEOG2",
        eeg_heog_channel_names="HEOG1, HEOG2",
    )
    basic.hydra.enabled = False
    return basic


@pytest.fixture
def linear_config(basic_info):
    """Linear pipeline with a load stepSet and a two-function ICA stepSet."""
    return PipelineConfig(
        basic=basic_info,
        step_sets=[
            StepSet(step_id="_load", functions=[FunctionCall(func_name="CTAP_load_data")]),
            StepSet(
                step_id="_ica",
                functions=[
                    FunctionCall(func_name="CTAP_fir_filter", func_params="'locutoff', 1"),
                    FunctionCall(func_name="CTAP_run_ica", func_params="'method', 'fastica'"),
                ],
            ),
        ],
    )


@pytest.fixture
def branch_config(basic_info):
    """Branch pipeline pipe1 -> pipe2 -> pipe3."""
    basic_info.set_mode(PipelineMode.BRANCH)
    return PipelineConfig(
        basic=basic_info,
        segments=[
            PipeSegment(
                segment_id="pipe1",
                step_id="_load",
                step_sets=[
                    StepSet(step_id="_load", functions=[FunctionCall(func_name="CTAP_load_data")]),
                    StepSet(step_id="_filter", functions=[FunctionCall(func_name="CTAP_fir_filter")]),
                ],
            ),
            PipeSegment(
                segment_id="pipe2",
                step_id="_ica",
                src_id="pipe1",
                step_sets=[
                    StepSet(step_id="_ica", functions=[FunctionCall(func_name="CTAP_run_ica")]),
                ],
            ),
            PipeSegment(
                segment_id="pipe3",
                step_id="_peek",
                src_id="pipe2",
                step_sets=[
                    StepSet(step_id="_peek", functions=[FunctionCall(func_name="CTAP_peek_data")]),
                ],
            ),
        ],
    )
