#!/usr/bin/env python3
"""
Unit tests for the collection runner.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mcpspec.errors import ConfigurationError
from mcpspec.models import CollectionDefinition, TestDefinition, TestResult, TestStatus
from mcpspec.rate_limiting.rate_limiter import RateLimitConfig
from mcpspec.reporters.base import TestRunReporter
from mcpspec.testing.runner import RunOptions, TestRunner, compute_summary


def _collection(**fields):
    data = {
        "name": "demo",
        "environments": {"dev": {"city": "Paris"}, "prod": {"city": "Berlin"}},
        "tests": [
            TestDefinition(name="weather", tool="weather", input={"city": "{{city}}"}, tags=("smoke",)),
            TestDefinition(name="forecast", tool="forecast"),
        ],
    }
    data.update(fields)
    return CollectionDefinition(**data)


class TestComputeSummary:
    """Tests for compute_summary."""

    def test_counts(self):
        statuses = [TestStatus.PASSED, TestStatus.PASSED, TestStatus.FAILED, TestStatus.ERROR, TestStatus.SKIPPED]
        results = [TestResult(test_id=str(i), test_name=str(i), status=s, duration=1)
                   for i, s in enumerate(statuses)]

        summary = compute_summary(results, 123)

        assert (summary.total, summary.passed, summary.failed, summary.errors, summary.skipped) == (5, 2, 1, 1, 1)
        assert summary.duration == 123

    def test_empty(self):
        summary = compute_summary([], 0)
        assert summary.total == 0


class TestResolveVariables:
    """Environment selection."""

    def test_explicit_environment(self):
        assert TestRunner().resolve_variables(_collection(), "prod") == {"city": "Berlin"}

    def test_unknown_environment(self):
        with pytest.raises(ConfigurationError, match='Environment "qa" not found'):
            TestRunner().resolve_variables(_collection(), "qa")

    def test_default_environment(self):
        collection = _collection(default_environment="dev")
        assert TestRunner().resolve_variables(collection) == {"city": "Paris"}

    def test_no_environment(self):
        assert TestRunner().resolve_variables(_collection()) == {}


class TestRun:
    """Tests for TestRunner.run."""

    @pytest.mark.asyncio
    async def test_run_result(self, tool_client, text_result, fast_config):
        client = tool_client(handler=lambda name, args: text_result({"tool": name}))

        result = await TestRunner(fast_config).run(_collection(), client, RunOptions(environment="dev"))

        assert result.collection_name == "demo"
        assert [r.test_name for r in result.results] == ["weather", "forecast"]
        assert result.summary.total == 2
        assert result.summary.passed == 2
        assert result.success is True
        assert isinstance(result.started_at, datetime)
        assert result.completed_at >= result.started_at
        assert result.id
        assert client.calls[0] == ("weather", {"city": "Paris"})

    @pytest.mark.asyncio
    async def test_run_ids_are_unique(self, tool_client, text_result, fast_config):
        client = tool_client(handler=lambda name, args: text_result({}))
        runner = TestRunner(fast_config)
        first = await runner.run(_collection(), client)
        second = await runner.run(_collection(), client)
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_tags_and_failures_in_summary(self, tool_client, text_result, fast_config):
        client = tool_client(handler=lambda name, args: text_result("42"))

        result = await TestRunner(fast_config).run(_collection(), client, RunOptions(tags=["smoke"]))

        assert result.summary.failed == 1
        assert result.summary.skipped == 1
        assert result.success is False

    @pytest.mark.asyncio
    async def test_reporter_lifecycle(self, tool_client, text_result, fast_config):
        client = tool_client(handler=lambda name, args: text_result({}))
        reporter = MagicMock(spec=TestRunReporter)

        result = await TestRunner(fast_config).run(_collection(), client, RunOptions(reporter=reporter))

        reporter.on_run_start.assert_called_once_with("demo", 2)
        assert reporter.on_test_start.call_count == 2
        assert reporter.on_test_complete.call_count == 2
        reporter.on_run_complete.assert_called_once_with(result)

    @pytest.mark.asyncio
    async def test_rate_limiter_created_and_stopped(self, tool_client, text_result, fast_config):
        client = tool_client(handler=lambda name, args: text_result({}))

        with patch("mcpspec.testing.runner.RateLimiter") as mock_limiter_class:
            limiter = mock_limiter_class.return_value

            async def passthrough(fn):
                return await fn()

            limiter.schedule.side_effect = passthrough
            limiter.stop = AsyncMock()

            result = await TestRunner(fast_config).run(
                _collection(), client, RunOptions(rate_limit=RateLimitConfig(max_calls_per_second=5)))

        mock_limiter_class.assert_called_once_with(RateLimitConfig(max_calls_per_second=5))
        limiter.stop.assert_awaited_once()
        assert result.summary.passed == 2

    @pytest.mark.asyncio
    async def test_unknown_environment_raises(self, tool_client, fast_config):
        with pytest.raises(ConfigurationError):
            await TestRunner(fast_config).run(_collection(), tool_client(), RunOptions(environment="qa"))

    @pytest.mark.asyncio
    async def test_parallel_run(self, tool_client, text_result, fast_config):
        client = tool_client(handler=lambda name, args: text_result({}))
        result = await TestRunner(fast_config).run(_collection(), client, RunOptions(parallelism=2))
        assert [r.test_name for r in result.results] == ["weather", "forecast"]
