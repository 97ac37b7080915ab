# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
JSON reporter for mcpspec.
"""

import json

from mcpspec.models import TestRunResult
from mcpspec.reporters.base import TestRunReporter


class JsonReporter(TestRunReporter):
    """Renders the complete run result as a JSON document."""

    def on_run_complete(self, result: TestRunResult) -> None:
        self._emit(json.dumps(result.to_dict(), indent=2, default=str))
