"""
ctapgen: CTAP pipeline script generator

Builds CTAP (Computational Testing for Automated Preprocessing) MATLAB
pipeline scripts, linear or branching, from a structured description.
"""

__version__ = "0.1.0"
__author__ = "ctapgen Team"

from ctapgen.core.config import PipelineConfig
from ctapgen.generation.script import generate_script

__all__ = ["PipelineConfig", "generate_script", "__version__"]
