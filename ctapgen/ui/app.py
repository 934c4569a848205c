"""ctapgen Streamlit UI - CTAP Code Generation Tool

Three-step form: basic settings, pipeline definition, review & download.
Run with: streamlit run ctapgen/ui/app.py
"""

import streamlit as st
from pathlib import Path
import sys
import yaml

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from ctapgen.core.catalog import CTAP_CHANLOCS, CTAP_FUNCTIONS
from ctapgen.core.config import PipelineConfig, PipelineMode
from ctapgen.core.models import StepSet
from ctapgen.core.storage import BasicInfoStore
from ctapgen.core.validation import validate_pipeline
from ctapgen.generation.script import ScriptDocument, render

STEPS = ["Basic Settings", "Pipeline", "Review & Download"]

HELP_TEXT = {
    'time_range': "Set clean segment time range [start end] in seconds from test data",
    'clean_seed': "Name of the clean seed data file extract from test data",
    'pipeline_name': "Name a folder which contains outputs of pipes",
    'project_root': "The root directory of the current analysis.",
    'sbj_filt': "The unique sequence number in EEG dataset name (sbj_filt)",
    'eeg_type': "EEG Data Type, eg, set/bdf",
    'eeg_chanloc': "Channel Location of testing EEG data",
    'eeg_reference': "Reference channel of testing EEG data, eg, L_MASTOID, R_MASTOID",
    'eeg_veog_channel_names': "VEOG Channel Names, required if performing blinks detection, eg, VEOG1, VEOG2",
    'eeg_heog_channel_names': "HEOG Channel Names, required if performing blinks detection, eg, HEOG1, HEOG2",
}


def init_session_state():
    """Create the session config, seeding basic settings from storage."""
    if 'store' not in st.session_state:
        st.session_state.store = BasicInfoStore()
    if 'config' not in st.session_state:
        config = PipelineConfig()
        config.basic = st.session_state.store.load()
        st.session_state.config = config
    if 'active_step' not in st.session_state:
        st.session_state.active_step = 0


def render_basic_settings(config: PipelineConfig):
    """Step 1: pipeline type, HYDRA and basic settings."""
    basic = config.basic

    st.subheader("What type of pipeline would you like to generate?")
    mode = st.radio(
        "Pipeline type",
        options=[PipelineMode.LINEAR.value, PipelineMode.BRANCH.value],
        index=0 if basic.mode is PipelineMode.LINEAR else 1,
        horizontal=True,
        help="Linear pipelines group functions into ordered stepSets; branch pipelines "
             "generate sub-functions that build on each other"
    )
    basic.set_mode(PipelineMode(mode))

    basic.hydra.enabled = st.checkbox(
        "Implement HYDRA for artifact parameter optimization",
        value=basic.hydra.enabled
    )
    if basic.hydra.enabled:
        source = st.radio(
            "Calibration source",
            options=["Provide clean data time-range", "Provide clean seed data"],
            index=1 if basic.hydra.clean_seed_option else 0,
            horizontal=True
        )
        if source.endswith("time-range"):
            if not basic.hydra.time_range_option:
                basic.hydra.select_time_range()
            basic.hydra.time_range = st.text_input(
                "Time Range", value=basic.hydra.time_range, help=HELP_TEXT['time_range']
            )
        else:
            if not basic.hydra.clean_seed_option:
                basic.hydra.select_clean_seed()
            basic.hydra.clean_seed = st.text_input(
                "Seed Data Name", value=basic.hydra.clean_seed, help=HELP_TEXT['clean_seed']
            )

    st.markdown("---")
    st.subheader("Basic settings")

    col1, col2 = st.columns(2)
    with col1:
        basic.pipeline_name = st.text_input(
            "Pipeline Name", value=basic.pipeline_name, help=HELP_TEXT['pipeline_name']
        )
        basic.project_root = st.text_input(
            "Project Root", value=basic.project_root, help=HELP_TEXT['project_root']
        )
        basic.sbj_filt = st.text_input(
            "EEG File Name Sequence", value=basic.sbj_filt, help=HELP_TEXT['sbj_filt']
        )
        basic.eeg_type = st.text_input(
            "EEG Data Type", value=basic.eeg_type, help=HELP_TEXT['eeg_type']
        )
        basic.own_data_path = st.checkbox("Use my own data path", value=basic.own_data_path)
        basic.input_data_path = st.text_input("Data Path", value=basic.input_data_path)

    with col2:
        chanlocs = [""] + CTAP_CHANLOCS
        if basic.eeg_chanloc and basic.eeg_chanloc not in chanlocs:
            chanlocs.append(basic.eeg_chanloc)
        basic.eeg_chanloc = st.selectbox(
            "EEG Data Channel Location",
            options=chanlocs,
            index=chanlocs.index(basic.eeg_chanloc),
            help=HELP_TEXT['eeg_chanloc']
        )
        basic.eeg_reference = st.text_input(
            "EEG Data Reference Channel", value=basic.eeg_reference, help=HELP_TEXT['eeg_reference']
        )
        basic.eeg_veog_channel_names = st.text_input(
            "VEOG Channel Names", value=basic.eeg_veog_channel_names,
            help=HELP_TEXT['eeg_veog_channel_names']
        )
        basic.eeg_heog_channel_names = st.text_input(
            "HEOG Channel Names", value=basic.eeg_heog_channel_names,
            help=HELP_TEXT['eeg_heog_channel_names']
        )

    # Mirror basic settings to storage after every change
    st.session_state.store.save(basic)


def forget_function_widgets(key: str):
    """Drop saved row widget values of one stepSet.

    Row widgets are keyed by position, so after a removal the rows below
    must be rebuilt from the model.
    """
    prefix = f"{key}_f"
    for name in [k for k in st.session_state if str(k).startswith(prefix)]:
        del st.session_state[name]


def render_functions(step_set: StepSet, key: str):
    """Function name / parameter rows of one stepSet."""
    options = [""] + CTAP_FUNCTIONS
    for j, call in enumerate(step_set.functions):
        col_name, col_params, col_remove = st.columns([2, 3, 1])
        with col_name:
            if call.func_name and call.func_name not in options:
                options = options + [call.func_name]
            call.func_name = st.selectbox(
                "Function Name",
                options=options,
                index=options.index(call.func_name),
                key=f"{key}_f{j}_name"
            )
        with col_params:
            call.func_params = st.text_input(
                "Function Parameters",
                value=call.func_params,
                key=f"{key}_f{j}_params",
                help="Input in 'pName', p form, eg. 'method', 'fastica', 'overwrite', true. "
                     "String values need single quotes."
            )
        with col_remove:
            if st.button("➖", key=f"{key}_f{j}_remove", disabled=len(step_set.functions) == 1):
                step_set.remove_function(j)
                forget_function_widgets(key)
                st.rerun()

    if st.button("➕ Add function", key=f"{key}_add"):
        step_set.add_function()
        st.rerun()


def render_step_sets(step_sets, key: str):
    for i, step_set in enumerate(step_sets):
        with st.expander(f"stepSet {i + 1}", expanded=True):
            step_set.step_id = st.text_input(
                "stepID",
                value=step_set.step_id,
                key=f"{key}_s{i}_id",
                help="Describe main work in this stepSet, eg. _load"
            )
            render_functions(step_set, f"{key}_s{i}")


def render_pipeline(config: PipelineConfig):
    """Step 2: linear stepSets or branch segments."""
    if config.mode is PipelineMode.LINEAR:
        st.subheader("Linear Pipeline Setting")
        count = st.selectbox(
            "stepSet number", options=list(range(1, 11)), index=min(len(config.step_sets), 10) - 1
        )
        config.resize_step_sets(count)
        render_step_sets(config.step_sets, "linear")
        return

    st.subheader("Branch Pipeline Setting")
    count = st.selectbox(
        "Pipe-segment number", options=list(range(1, 11)), index=min(len(config.segments), 10) - 1
    )
    config.resize_segments(count)

    for i, segment in enumerate(config.segments):
        st.markdown(f"#### Pipe-segment {i + 1}")
        col1, col2, col3 = st.columns(3)
        with col1:
            segment.step_id = st.text_input(
                "Subfunction Description Label", value=segment.step_id, key=f"seg{i}_label",
                help="Describe main work in this sub function, eg. _load"
            )
        with col2:
            segment.segment_id = st.text_input(
                "Subfunction ID", value=segment.segment_id, key=f"seg{i}_id",
                help="ID of this subfunction, eg. pipe2"
            )
        with col3:
            segment.src_id = st.text_input(
                "Subfunction Srcid", value=segment.src_id, key=f"seg{i}_src",
                disabled=i == 0,
                help="Subfunction ID of the previously executed pipe this one runs after; "
                     "leave empty for the first subfunction"
            )
        n_sets = st.number_input(
            "stepSet number", min_value=1, max_value=10,
            value=len(segment.step_sets), key=f"seg{i}_nsets"
        )
        segment.resize_step_sets(int(n_sets))
        render_step_sets(segment.step_sets, f"seg{i}")


def render_review(config: PipelineConfig):
    """Step 3: validation summary, code preview and download."""
    result = validate_pipeline(config)

    for issue in result.errors:
        st.error(f"❌ `{issue.path}`: {issue.reason}")
    for issue in result.warnings:
        st.warning(f"⚠️ `{issue.path}`: {issue.reason}")

    document = ScriptDocument(name=config.basic.pipeline_name, lines=render(config))
    st.code(document.text, language='matlab', line_numbers=True)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            f"📥 Download {document.filename}",
            data=document.text,
            file_name=document.filename,
            mime="text/plain",
            type="primary",
            disabled=not result.is_valid
        )
    with col2:
        st.download_button(
            "📄 Download pipeline description (YAML)",
            data=yaml.dump(config.model_dump(mode="json"), default_flow_style=False, sort_keys=False),
            file_name=f"{config.basic.pipeline_name or 'pipeline'}.yaml",
            mime="text/yaml"
        )


def main():
    """CTAP code generation form."""

    st.set_page_config(
        page_title="CTAP Code Generation Tool",
        page_icon="🧠",
        layout="wide"
    )

    st.title("🧠 CTAP Code Generation Tool")
    init_session_state()
    config: PipelineConfig = st.session_state.config

    # Sidebar - load an existing description
    st.sidebar.header("📂 Load Description")
    uploaded = st.sidebar.file_uploader("Pipeline description (YAML)", type=["yaml", "yml"])
    if uploaded is not None and st.sidebar.button("📥 Load", type="secondary"):
        st.session_state.config = PipelineConfig(**(yaml.safe_load(uploaded.getvalue()) or {}))
        st.session_state.active_step = 0
        st.rerun()

    if st.sidebar.button("🆕 Reset Pipeline", help="Discard stepSets and segments, keep basic settings"):
        config.reset()
        st.rerun()

    step = st.session_state.active_step
    st.progress((step + 1) / len(STEPS), text=f"Step {step + 1} of {len(STEPS)}: {STEPS[step]}")

    if step == 0:
        render_basic_settings(config)
    elif step == 1:
        render_pipeline(config)
    else:
        render_review(config)

    st.markdown("---")
    col_back, col_next = st.columns(2)
    with col_back:
        if st.button("⬅️ Back", disabled=step == 0):
            st.session_state.active_step -= 1
            st.rerun()
    with col_next:
        if step < len(STEPS) - 1:
            if st.button("Next ➡️", type="primary"):
                st.session_state.active_step += 1
                st.rerun()
        elif st.button("🔄 Start Over"):
            st.session_state.active_step = 0
            st.rerun()


if __name__ == "__main__":
    main()
