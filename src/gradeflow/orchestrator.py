"""One full gradeflow run: generate, analyze, report."""

from __future__ import annotations

import time
from collections.abc import Callable

from rich.console import Console

from gradeflow import output
from gradeflow.config import PipelineConfig
from gradeflow.observability import get_logger
from gradeflow.pipeline.definitions import build_default_pipeline
from gradeflow.pipeline.models import PipelineResult
from gradeflow.pipeline.runner import PipelineRunner
from gradeflow.synthesis import synthesize_records

logger = get_logger(__name__)


def run_analysis(
    config: PipelineConfig | None = None,
    *,
    console: Console | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> PipelineResult:
    """Generate the record collection and run the default pipeline over it.

    Args:
        config: Run configuration (default: PipelineConfig())
        console: Optional Rich console for all output
        sleep: Function used to pause between failed generation attempts

    Returns:
        PipelineResult of the analysis steps

    Raises:
        RetryExhaustedError: If an attempt cap is configured and reached
    """
    cfg = config or PipelineConfig()
    out = console if console is not None else output.console

    records = synthesize_records(cfg, console=out, sleep=sleep)

    output.print_banner("Processing Student Data", out)
    steps = build_default_pipeline(cfg.thresholds)
    result = PipelineRunner(steps, console=out).run(records)
    output.print_banner("Processing Complete", out)

    logger.info(
        "analysis_completed",
        records=len(records),
        steps=len(result.steps),
        total_duration_ms=result.total_duration_ms,
    )
    return result
