"""Synthetic student score generation and analysis pipeline.

This package generates a small in-memory collection of student score records
and runs an ordered pipeline of analysis steps over it, printing a table
after each step.

Key Components:
- generators: Seeded score generator with simulated failures
- synthesis: Generation loop that retries failed attempts
- pipeline: Step shapes, runner, and the default analysis pipeline
- output: Rich console helpers and the record table printer
- cli: ``gradeflow`` command line entry point

Example:
    >>> from gradeflow.config import PipelineConfig
    >>> from gradeflow.orchestrator import run_analysis
    >>>
    >>> result = run_analysis(PipelineConfig(seed=42))
    >>> result.executed_count
    4
"""

from __future__ import annotations

__version__ = "0.1.0"
