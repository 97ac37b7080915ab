# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later
"""
Base Tool Client for mcpspec.

This module defines the only capability the test engine needs from an MCP
connection: invoking a named tool with arguments.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ToolClient(ABC):
    """Base class for connected MCP tool clients."""
    
    @abstractmethod
    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Call a tool on the server.
        
        Args:
            name: The name of the tool to call
            arguments: The arguments to pass to the tool
            
        Returns:
            The tools/call result: a ``content`` list of parts and an
            ``isError`` flag set when the tool reported a failure
            
        Raises:
            ToolInvocationError: If the server could not be asked
        """
        pass
