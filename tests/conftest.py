#!/usr/bin/env python3
# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Pytest configuration and shared fixtures for mcpspec tests.
"""

import inspect
import json
import logging

import pytest

from mcpspec.client.base import ToolClient
from mcpspec.config import EngineConfig
from mcpspec.rate_limiting.backoff import BackoffConfig


class FakeToolClient(ToolClient):
    """
    In-memory tool client.

    Answers from ``responses`` (tool name -> result, or an exception to raise)
    or from ``handler(name, arguments)``, which may be sync or async.
    Every call is recorded in ``calls``.
    """

    def __init__(self, responses=None, handler=None):
        self.responses = responses or {}
        self.handler = handler
        self.calls = []

    async def call_tool(self, name, arguments):
        self.calls.append((name, arguments))
        if self.handler is not None:
            result = self.handler(name, arguments)
            if inspect.isawaitable(result):
                result = await result
            return result
        response = self.responses[name]
        if isinstance(response, Exception):
            raise response
        return response


def make_text_result(payload, is_error=False):
    """Build a tools/call result with a single text part."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging so they do not outlive a test."""
    yield
    package_logger = logging.getLogger("mcpspec")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def text_result():
    return make_text_result


@pytest.fixture
def tool_client():
    """Factory for FakeToolClient instances."""
    return FakeToolClient


@pytest.fixture
def fast_config():
    """Engine config whose retries do not sleep."""
    return EngineConfig(backoff=BackoffConfig(initial=0, multiplier=2.0, max=0))
