"""Tests for the linear and branch script templates."""

import pytest

from ctapgen.core.config import BasicInfo
from ctapgen.core.models import FunctionCall, PipeSegment, StepSet
from ctapgen.generation.blocks import hydra_lines, sbj_filt_literal, step_set_lines
from ctapgen.generation.branch import branch_template, pipe_array_line
from ctapgen.generation.linear import linear_template


class TestStepSetBlock:
    """Test the shared stepSet block."""

    def test_two_lines_per_step_set_plus_one_per_function(self, linear_config):
        lines = step_set_lines(linear_config.step_sets)
        n_functions = sum(len(s.functions) for s in linear_config.step_sets)

        assert len(lines) == 2 * len(linear_config.step_sets) + n_functions

    def test_id_and_handle_lines(self, linear_config):
        lines = step_set_lines(linear_config.step_sets)

        assert lines[0] == "stepSet(1).id = [num2str(1), '_load'];"
        assert lines[1] == "stepSet(1).funH = {@CTAP_load_data};"
        assert lines[2] == "stepSet(2).id = [num2str(2), '_ica'];"
        assert lines[3] == "stepSet(2).funH = {@CTAP_fir_filter, @CTAP_run_ica};"

    def test_parameter_structs_drop_prefix(self, linear_config):
        lines = step_set_lines(linear_config.step_sets)

        assert lines[4:] == [
            "out.load_data = struct();",
            "out.fir_filter = struct('locutoff', 1);",
            "out.run_ica = struct('method', 'fastica');",
        ]

    def test_reordering_functions_is_local(self, linear_config):
        before = step_set_lines(linear_config.step_sets)
        linear_config.step_sets[1].functions.reverse()
        after = step_set_lines(linear_config.step_sets)

        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert changed == [3, 5, 6]
        assert after[3] == "stepSet(2).funH = {@CTAP_run_ica, @CTAP_fir_filter};"
        assert after[5] == "out.run_ica = struct('method', 'fastica');"
        assert after[6] == "out.fir_filter = struct('locutoff', 1);"

    def test_indent(self):
        lines = step_set_lines([StepSet(step_id="_x", functions=[FunctionCall(func_name="CTAP_peek_data")])],
                               indent="   ")
        assert all(line.startswith("   ") for line in lines)


class TestHydraBlock:
    """Test the HYDRA block."""

    def test_disabled_emits_nothing(self):
        basic = BasicInfo()
        basic.hydra.enabled = False
        assert hydra_lines(basic.hydra, "x.elp") == []

    def test_time_range(self):
        basic = BasicInfo()
        basic.hydra.time_range = "[10 70]"
        lines = hydra_lines(basic.hydra, "x.elp")

        assert lines[0] == "HYDRA = true;"
        assert "Cfg.HYDRA.chanloc = 'x.elp';" in lines
        assert lines[-2:] == [
            "Cfg.HYDRA.provide_seed_timerange = true;",
            "Cfg.HYDRA.cleanseed_timerange = [10 70];",
        ]
        assert not any("seed_fname" in line for line in lines)

    def test_clean_seed(self):
        basic = BasicInfo()
        basic.hydra.select_clean_seed()
        basic.hydra.clean_seed = "seed.set"
        lines = hydra_lines(basic.hydra, "x.elp")

        assert lines[-2:] == [
            "Cfg.HYDRA.provide_seed_timerange = false;",
            "Cfg.HYDRA.seed_fname = 'seed.set';",
        ]
        assert not any("cleanseed_timerange" in line for line in lines)

    def test_no_option_selected(self):
        basic = BasicInfo()
        basic.hydra.time_range_option = False
        lines = hydra_lines(basic.hydra, "x.elp")

        assert len(lines) == 6
        assert not any("provide_seed_timerange" in line for line in lines)


class TestSbjFilt:
    """Test subject filter literal."""

    @pytest.mark.parametrize("text,expected", [
        ("all", "'all'"),
        ("3", "3"),
        ("1, 2", "{1, 2}"),
        ("", "{}"),
    ])
    def test_literal(self, text, expected):
        assert sbj_filt_literal(text) == expected


class TestLinearTemplate:
    """Test linear pipeline rendering."""

    def test_documented_scenario(self, basic_info):
        step_sets = [StepSet(step_id="_load", functions=[FunctionCall(func_name="CTAP_load_data")])]
        lines = linear_template(basic_info, step_sets)

        assert "pipeline_name = 'demo';" in lines
        assert "stepSet(1).id = [num2str(1), '_load'];" in lines
        assert any("@CTAP_load_data" in line and "funH" in line for line in lines)

    def test_idempotent(self, linear_config):
        first = "\n".join(linear_template(linear_config.basic, linear_config.step_sets))
        second = "\n".join(linear_template(linear_config.basic, linear_config.step_sets))
        assert first == second

    def test_eeg_fields_sanitized(self, linear_config):
        lines = linear_template(linear_config.basic, linear_config.step_sets)

        assert "Cfg.eeg.chanlocs = 'chanlocs128_biosemi.elp';" in lines
        assert "Cfg.eeg.reference = {'L_MASTOID', 'R_MASTOID'};" in lines
        assert "Cfg.eeg.veogChannelNames = {'VEOG1', 'VEOG2'};" in lines
        assert "Cfg.eeg.heogChannelNames = {'HEOG1', 'HEOG2'};" in lines

    def test_measurement_config(self, linear_config):
        lines = linear_template(linear_config.basic, linear_config.step_sets)
        assert ("Cfg.MC = get_meas_cfg_MC(Cfg, data_dir, 'eeg_ext', 'set', 'sbj_filt', 'all');"
                in lines)

    def test_data_dir(self, linear_config):
        lines = linear_template(linear_config.basic, linear_config.step_sets)
        assert "data_dir = append(reporoot, 'ctap/data/test_data');" in lines

        linear_config.basic.own_data_path = True
        linear_config.basic.input_data_path = "/data/eeg"
        lines = linear_template(linear_config.basic, linear_config.step_sets)
        assert "data_dir = '/data/eeg';" in lines

    def test_project_dir_is_script_folder(self, linear_config):
        """The project folder does not depend on where the pipeline name occurs in the path."""
        lines = linear_template(linear_config.basic, linear_config.step_sets)

        assert "project_dir = [fileparts(FILE_ROOT) filesep];" in lines
        assert not any("strfind(FILE_ROOT, pipeline_name)" in line for line in lines)

    def test_section_order(self, linear_config):
        linear_config.basic.hydra.enabled = True
        linear_config.basic.hydra.time_range = "[0 60]"
        lines = linear_template(linear_config.basic, linear_config.step_sets)

        order = [
            lines.index("DEBUG = false;"),
            lines.index("pipeline_name = 'demo';"),
            lines.index("HYDRA = true;"),
            lines.index("clear Pipe;"),
            lines.index("stepSet(1).id = [num2str(1), '_load'];"),
            lines.index("out.load_data = struct();"),
            lines.index("Cfg.pipe.stepSets = stepSet;"),
            lines.index("CTAP_pipeline_looper(Cfg, 'debug', DEBUG, 'overwrite', OVERWRITE_OLD_RESULTS);"),
        ]
        assert order == sorted(order)

    def test_hydra_only_when_enabled(self, linear_config):
        lines = linear_template(linear_config.basic, linear_config.step_sets)
        assert "HYDRA = true;" not in lines

    def test_no_function_dropped(self, linear_config):
        text = "\n".join(linear_template(linear_config.basic, linear_config.step_sets))
        for step_set in linear_config.step_sets:
            for call in step_set.functions:
                assert f"@{call.func_name}" in text

    def test_runs_all_step_sets(self, linear_config):
        lines = linear_template(linear_config.basic, linear_config.step_sets)
        assert "Cfg.pipe.runSets = {stepSet(:).id};" in lines


class TestBranchTemplate:
    """Test branch pipeline rendering."""

    def test_two_segments(self, basic_info):
        segments = [
            PipeSegment(segment_id="pipe1", step_id="_load",
                        step_sets=[StepSet(step_id="_load",
                                           functions=[FunctionCall(func_name="CTAP_load_data")])]),
            PipeSegment(segment_id="pipe2", step_id="_ica", src_id="pipe1",
                        step_sets=[StepSet(step_id="_ica",
                                           functions=[FunctionCall(func_name="CTAP_run_ica")])]),
        ]
        lines = branch_template(basic_info, segments)

        assert "function [Cfg, out] = sbf_pipe1(Cfg)" in lines
        assert "function [Cfg, out] = sbf_pipe2(Cfg)" in lines
        assert "pipeArr = {@sbf_pipe1, @sbf_pipe2};" in lines
        assert lines.index("function [Cfg, out] = sbf_pipe1(Cfg)") < lines.index(
            "function [Cfg, out] = sbf_pipe2(Cfg)")

    def test_srcid_lines(self, branch_config):
        lines = branch_template(branch_config.basic, branch_config.segments)

        assert "   Cfg.id = 'pipe1';" in lines
        assert "   Cfg.srcid = {''};" in lines
        assert "   Cfg.srcid = {'pipe1#1_load'};" in lines
        assert "   Cfg.srcid = {'pipe1#pipe2#1_ica'};" in lines

    def test_step_set_index_restarts_per_segment(self, branch_config):
        lines = branch_template(branch_config.basic, branch_config.segments)

        assert "   stepSet(2).id = [num2str(2), '_filter'];" in lines
        assert "   stepSet(1).id = [num2str(1), '_ica'];" in lines
        assert "   stepSet(1).id = [num2str(1), '_peek'];" in lines
        assert not any("stepSet(3)" in line for line in lines)

    def test_dispatch(self, branch_config):
        lines = branch_template(branch_config.basic, branch_config.segments)

        assert "runps = 1:length(pipeArr);" in lines
        start = lines.index("if PREPRO")
        assert "CTAP_pipeline_brancher(Cfg, pipeArr, 'runPipes', runps" in lines[start + 1]
        assert lines[start + 2] == "end"

    def test_config_subfunction_carries_eeg_fields(self, branch_config):
        lines = branch_template(branch_config.basic, branch_config.segments)
        start = lines.index("function [Cfg, out] = sbf_cfg(project_root_folder, ID)")

        assert "   Cfg.eeg.reference = {'L_MASTOID', 'R_MASTOID'};" in lines[start:]
        assert lines.index("[Cfg, ~] = sbf_cfg(project_dir, pipeline_name);") < start

    def test_every_subfunction_closed(self, branch_config):
        lines = branch_template(branch_config.basic, branch_config.segments)
        opened = [l for l in lines if l.startswith("function ")]
        closed = [l for l in lines if l == "end"]

        # one extra "end" closes the if PREPRO block
        assert len(closed) == len(opened) + 1

    def test_project_dir_is_script_folder(self, branch_config):
        lines = branch_template(branch_config.basic, branch_config.segments)
        assert "project_dir = [fileparts(FILE_ROOT) filesep];" in lines

    def test_pipe_array_order(self, branch_config):
        branch_config.segments.reverse()
        assert pipe_array_line(branch_config.segments) == "pipeArr = {@sbf_pipe3, @sbf_pipe2, @sbf_pipe1};"

    def test_idempotent(self, branch_config):
        first = branch_template(branch_config.basic, branch_config.segments)
        second = branch_template(branch_config.basic, branch_config.segments)
        assert first == second
