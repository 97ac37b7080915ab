# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
JUnit XML reporter for mcpspec.

The report is rendered from a Jinja2 template with autoescaping, which keeps
test names and messages XML-safe.
"""

from jinja2 import Environment

from mcpspec.models import TestRunResult, TestStatus
from mcpspec.reporters.base import TestRunReporter

JUNIT_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<testsuites tests="{{ summary.total }}" failures="{{ summary.failed }}" errors="{{ summary.errors }}" time="{{ seconds(run.duration) }}">
  <testsuite name="{{ run.collection_name }}" tests="{{ summary.total }}" failures="{{ summary.failed }}" errors="{{ summary.errors }}" skipped="{{ summary.skipped }}" time="{{ seconds(run.duration) }}">
{%- for test in run.results %}
    <testcase name="{{ test.test_name }}" classname="{{ run.collection_name }}" time="{{ seconds(test.duration) }}">
{%- if test.status == FAILED %}
      <failure message="{{ failure_message(test) }}">{{ failure_message(test) }}</failure>
{%- elif test.status == ERROR %}
      <error message="{{ test.error or 'Unknown error' }}">{{ test.error or 'Unknown error' }}</error>
{%- elif test.status == SKIPPED %}
      <skipped/>
{%- endif %}
    </testcase>
{%- endfor %}
  </testsuite>
</testsuites>
"""


def _seconds(duration_ms: int) -> str:
    return f"{duration_ms / 1000:.3f}"


def _failure_message(test) -> str:
    return "; ".join(assertion.message for assertion in test.assertions if not assertion.passed)


class JunitReporter(TestRunReporter):
    """Renders the run as JUnit XML for CI systems."""

    def __init__(self, output_path=None):
        super().__init__(output_path)
        self._environment = Environment(autoescape=True, keep_trailing_newline=True)
        self._template = self._environment.from_string(JUNIT_TEMPLATE)

    def on_run_complete(self, result: TestRunResult) -> None:
        self._emit(self._template.render(
            run=result,
            summary=result.summary,
            seconds=_seconds,
            failure_message=_failure_message,
            FAILED=TestStatus.FAILED,
            ERROR=TestStatus.ERROR,
            SKIPPED=TestStatus.SKIPPED,
        ))
