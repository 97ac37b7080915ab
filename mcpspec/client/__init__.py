"""
Tool clients for mcpspec.
"""

from mcpspec.client.base import ToolClient
from mcpspec.client.http import HttpToolClient

__all__ = [
    'HttpToolClient',
    'ToolClient',
]
