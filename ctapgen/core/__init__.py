"""Core infrastructure for ctapgen."""

from ctapgen.core.models import FunctionCall, StepSet, PipeSegment
from ctapgen.core.config import BasicInfo, HydraSettings, PipelineConfig, PipelineMode
from ctapgen.core.validation import (
    PipelineValidationError,
    ValidationIssue,
    ValidationResult,
    validate_pipeline,
)
from ctapgen.core.storage import BasicInfoStore

__all__ = [
    "FunctionCall",
    "StepSet",
    "PipeSegment",
    "BasicInfo",
    "HydraSettings",
    "PipelineConfig",
    "PipelineMode",
    "PipelineValidationError",
    "ValidationIssue",
    "ValidationResult",
    "validate_pipeline",
    "BasicInfoStore",
]
