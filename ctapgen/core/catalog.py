"""Known CTAP functions and channel location files offered by the form."""

from typing import List

# Prefix shared by every CTAP pipeline function; generated struct field
# names drop it (CTAP_load_data -> out.load_data).
FUNCTION_PREFIX = "CTAP_"

CTAP_FUNCTIONS: List[str] = [
    "CTAP_load_data",
    "CTAP_load_chanlocs",
    "CTAP_load_events",
    "CTAP_tidy_chanlocs",
    "CTAP_reref_data",
    "CTAP_resample_data",
    "CTAP_select_data",
    "CTAP_select_evdata",
    "CTAP_fir_filter",
    "CTAP_filter_data",
    "CTAP_blink2event",
    "CTAP_run_ica",
    "CTAP_detect_bad_comps",
    "CTAP_filter_blink_ica",
    "CTAP_detect_bad_channels",
    "CTAP_interp_chan",
    "CTAP_detect_bad_segments",
    "CTAP_detect_bad_epochs",
    "CTAP_reject_data",
    "CTAP_epoch_data",
    "CTAP_generate_cseg",
    "CTAP_compute_psd",
    "CTAP_extract_bandpowers",
    "CTAP_extract_PSDindices",
    "CTAP_peek_data",
    "CTAP_export_data",
    "CTAP_clock_start",
    "CTAP_sweep",
]

CTAP_CHANLOCS: List[str] = [
    "chanlocs128_biosemi.elp",
    "chanlocs128_biosemi_withEOG_demo.elp",
    "chanlocs128_pist.elp",
    "chanlocs64_biosemi.elp",
    "chanlocs32_biosemi.elp",
    "standard-10-5-cap385.elp",
    "standard_1005.elc",
]


def is_known_function(name: str) -> bool:
    """Check whether ``name`` is in the CTAP function catalog."""
    return name in CTAP_FUNCTIONS


def struct_field_name(func_name: str) -> str:
    """Name of the ``out.<field>`` struct for a function.

    The five-character prefix is sliced off unconditionally.
    """
    return func_name[len(FUNCTION_PREFIX):]
