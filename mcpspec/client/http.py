# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
HTTP Tool Client for mcpspec.

Talks to an MCP server over the Streamable HTTP transport: every JSON-RPC
message is POSTed to the server URL and the answer comes back either as a
plain JSON body or as a ``text/event-stream``.

``requests`` is blocking, so each exchange runs in a worker thread.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import requests
import sseclient

from mcpspec import __version__
from mcpspec.client.base import ToolClient
from mcpspec.errors import ToolInvocationError
from mcpspec.utils.logging import get_logger

logger = get_logger("client.http")

SESSION_HEADER = "Mcp-Session-Id"
PROTOCOL_VERSION_HEADER = "MCP-Protocol-Version"


class HttpToolClient(ToolClient):
    """Tool client for HTTP-based MCP servers."""
    
    def __init__(self,
                 server_url: str,
                 headers: Optional[Dict[str, str]] = None,
                 timeout: float = 30.0,
                 protocol_version: str = "2025-03-26"):
        """
        Initialize the HTTP tool client.
        
        Args:
            server_url: URL of the server's MCP endpoint
            headers: Extra HTTP headers sent with every request
            timeout: Request timeout in seconds
            protocol_version: Protocol version offered in ``initialize``
        """
        self.server_url = server_url
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json, text/event-stream",
        }
        if headers:
            self.headers.update(headers)
        self.timeout = timeout
        self.protocol_version = protocol_version
        self.session = requests.Session()
        self.session_id: Optional[str] = None
        self.server_info: Dict[str, Any] = {}
        self.is_connected = False
        self._next_id = 0
    
    async def __aenter__(self) -> "HttpToolClient":
        await self.connect()
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
    
    async def connect(self) -> Dict[str, Any]:
        """
        Perform the initialize handshake.
        
        Returns:
            The server's initialize result
            
        Raises:
            ToolInvocationError: If the server cannot be reached or rejects the handshake
        """
        logger.debug(f"Connecting to {self.server_url}")
        result = await self._request("initialize", {
            "protocolVersion": self.protocol_version,
            "capabilities": {},
            "clientInfo": {"name": "mcpspec", "version": __version__},
        })
        
        self.server_info = result
        negotiated = result.get("protocolVersion")
        if negotiated:
            self.headers[PROTOCOL_VERSION_HEADER] = negotiated
        
        await self._notify("notifications/initialized")
        self.is_connected = True
        
        server = result.get("serverInfo") or {}
        logger.info(f"Connected to {server.get('name', 'server')} {server.get('version', '')} "
                    f"(protocol {negotiated or 'unknown'}, session {self.session_id or 'none'})")
        return result
    
    async def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
        self.is_connected = False
        logger.debug(f"Closed connection to {self.server_url}")
    
    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        if not self.is_connected:
            raise ToolInvocationError("Client is not connected", {"tool": name})
        
        logger.debug(f"Calling tool {name} with {arguments}")
        return await self._request("tools/call", {"name": name, "arguments": arguments})
    
    async def _request(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        self._next_id += 1
        message = {"jsonrpc": "2.0", "id": self._next_id, "method": method, "params": params}
        
        reply = await asyncio.to_thread(self._exchange, message)
        if "error" in reply:
            error = reply["error"] or {}
            raise ToolInvocationError(
                f"{method} failed: {error.get('message', 'unknown error')}",
                {"method": method, "code": error.get("code"), "data": error.get("data")},
            )
        return reply.get("result") or {}
    
    async def _notify(self, method: str) -> None:
        await asyncio.to_thread(self._exchange, {"jsonrpc": "2.0", "method": method})
    
    def _exchange(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """POST one message and read the matching reply; notifications get an empty dict."""
        headers = dict(self.headers)
        if self.session_id:
            headers[SESSION_HEADER] = self.session_id
        
        method = message["method"]
        try:
            response = self.session.post(
                self.server_url,
                json=message,
                headers=headers,
                timeout=self.timeout,
                stream=True,
            )
        except requests.exceptions.RequestException as e:
            raise ToolInvocationError(f"{method} request to {self.server_url} failed: {e}",
                                      {"method": method}) from e
        
        if response.status_code >= 400:
            raise ToolInvocationError(
                f"{method} failed with HTTP {response.status_code}: {response.text[:200]}",
                {"method": method, "status": response.status_code},
            )
        
        session_id = response.headers.get(SESSION_HEADER)
        if session_id and session_id != self.session_id:
            logger.debug(f"Server assigned session ID {session_id}")
            self.session_id = session_id
        
        if "id" not in message:
            response.close()
            return {}
        
        content_type = response.headers.get("Content-Type", "")
        if content_type.startswith("text/event-stream"):
            return self._read_event_stream(response, message["id"], method)
        
        try:
            reply = response.json()
        except ValueError as e:
            raise ToolInvocationError(f"{method} returned invalid JSON: {e}", {"method": method}) from e
        if not isinstance(reply, dict):
            raise ToolInvocationError(f"{method} returned a non-object reply", {"method": method})
        return reply
    
    @staticmethod
    def _read_event_stream(response: requests.Response, request_id: int, method: str) -> Dict[str, Any]:
        """Read server-sent events until the reply to ``request_id`` arrives."""
        client = sseclient.SSEClient(response)
        try:
            for event in client.events():
                if not event.data:
                    continue
                try:
                    payload = json.loads(event.data)
                except json.JSONDecodeError:
                    logger.warning(f"Ignoring non-JSON event: {event.data[:200]}")
                    continue
                if isinstance(payload, dict) and payload.get("id") == request_id:
                    return payload
                logger.debug(f"Ignoring unrelated event: {payload}")
        finally:
            client.close()
        
        raise ToolInvocationError(f"Event stream ended without a reply to {method}", {"method": method})
