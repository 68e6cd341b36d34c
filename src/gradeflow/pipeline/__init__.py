"""Step pipeline over a shared record collection.

- Step shapes: FilterPrintStep, ActionStep, CustomLogicStep
- RecordView: read-only view handed to non-mutating logic
- PipelineRunner / run_pipeline: ordered execution with empty-data skip
- build_default_pipeline: the four analysis steps
"""

from __future__ import annotations

from gradeflow.pipeline.definitions import build_default_pipeline
from gradeflow.pipeline.models import PipelineResult, StepResult, StepStatus
from gradeflow.pipeline.runner import PipelineRunner, run_pipeline
from gradeflow.pipeline.steps import ActionStep, CustomLogicStep, FilterPrintStep, Step
from gradeflow.pipeline.views import RecordView

__all__ = [
    "ActionStep",
    "CustomLogicStep",
    "FilterPrintStep",
    "PipelineResult",
    "PipelineRunner",
    "RecordView",
    "Step",
    "StepResult",
    "StepStatus",
    "build_default_pipeline",
    "run_pipeline",
]
