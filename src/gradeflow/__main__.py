"""Allow ``python -m gradeflow``."""

from __future__ import annotations

from gradeflow.cli import cli

cli(prog_name="gradeflow")
