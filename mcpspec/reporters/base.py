# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
Base reporter for mcpspec.

Reporters observe a run: they are told when it starts, when each test starts
and completes, and when the whole run is done.
"""

from pathlib import Path
from typing import Optional, Union

from mcpspec.models import TestResult, TestRunResult


class TestRunReporter:
    """Observer of a test run; every hook defaults to doing nothing."""

    __test__ = False

    def __init__(self, output_path: Optional[Union[str, Path]] = None):
        """
        Initialize the reporter.

        Args:
            output_path: File the final report is written to, if any
        """
        self.output_path = Path(output_path) if output_path else None
        self.output: Optional[str] = None

    def on_run_start(self, collection_name: str, test_count: int) -> None:
        pass

    def on_test_start(self, test_name: str) -> None:
        pass

    def on_test_complete(self, result: TestResult) -> None:
        pass

    def on_run_complete(self, result: TestRunResult) -> None:
        pass

    def _emit(self, text: str) -> None:
        """Keep the rendered report and write it to ``output_path`` when set."""
        self.output = text
        if self.output_path:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(text, encoding="utf-8")
