"""
Pipeline tree models for ctapgen using Pydantic v2.

A linear pipeline is an ordered list of StepSets. A branch pipeline is an
ordered list of PipeSegments, each holding its own ordered StepSets.
"""

from typing import List

from pydantic import BaseModel, Field


class FunctionCall(BaseModel):
    """Single CTAP function call inside a stepSet."""

    func_name: str = Field(default="", description="CTAP function name (e.g., CTAP_load_data)")
    func_params: str = Field(
        default="",
        description="Parameter text passed to struct(), e.g. 'method', 'fastica'"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "func_name": "CTAP_run_ica",
                "func_params": "'method', 'fastica', 'overwrite', true",
            }
        }
    }


class StepSet(BaseModel):
    """Ordered group of function calls forming one pipeline stage."""

    step_id: str = Field(default="", description="StepSet description label (e.g., '_load')")
    functions: List[FunctionCall] = Field(
        default_factory=lambda: [FunctionCall()],
        description="Function calls in execution order"
    )

    def add_function(self, func_name: str = "", func_params: str = "") -> FunctionCall:
        """Append a function call and return it."""
        call = FunctionCall(func_name=func_name, func_params=func_params)
        self.functions.append(call)
        return call

    def remove_function(self, index: int) -> None:
        """Remove the function call at ``index``.

        The last remaining call of a stepSet is never removed.
        """
        if not 0 <= index < len(self.functions):
            raise IndexError(
                f"No function at index {index}, stepSet has {len(self.functions)}"
            )
        if len(self.functions) <= 1:
            return
        del self.functions[index]


class PipeSegment(BaseModel):
    """Named branch of a branch-mode pipeline."""

    segment_id: str = Field(default="", description="Segment identifier (e.g., pipe1)")
    step_id: str = Field(default="", description="Segment description label (e.g., '_load')")
    src_id: str = Field(
        default="",
        description="Identifier of the parent segment, empty for the first segment"
    )
    step_sets: List[StepSet] = Field(default_factory=lambda: [StepSet()])

    def resize_step_sets(self, count: int) -> None:
        """Grow or shrink this segment's stepSets to ``count``."""
        resize_step_sets(self.step_sets, count)


def resize_step_sets(step_sets: List[StepSet], count: int) -> None:
    """Grow or shrink a stepSet list in place.

    New entries are default stepSets appended at the end; shrinking pops
    from the end. Counts below 1 are ignored.
    """
    if count < 1:
        return
    while len(step_sets) < count:
        step_sets.append(StepSet())
    while len(step_sets) > count:
        step_sets.pop()


def resize_segments(segments: List[PipeSegment], count: int) -> None:
    """Grow or shrink a segment list in place, same rules as stepSets."""
    if count < 1:
        return
    while len(segments) < count:
        segments.append(PipeSegment())
    while len(segments) > count:
        segments.pop()
