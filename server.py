#!/usr/bin/env python3
"""tsquery Compiler MCP Server - Compile free-text search queries for PostgreSQL.

Every tool is a thin wrapper around QueryCompiler. Invalid queries come back
as a JSON error payload instead of a protocol error, so clients can show the
message to the user as is.
"""

import os
import json
import logging
from typing import List, Dict, Any, Optional
from mcp.server import Server
from mcp.types import Tool, TextContent
from mcp.server.stdio import stdio_server
from mcp.server.models import InitializationOptions
from mcp.server.lowlevel import NotificationOptions

from config.config_service import ConfigurationService
from search.models import QueryValidationError
from search.query_compiler import QueryCompiler
from tools.mcp_tools import get_tools

SERVER_NAME = "tsquery-compiler"
SERVER_VERSION = "1.0.0"

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# Use client root directory if available, otherwise current working directory
client_root = os.environ.get('MCP_CLIENT_ROOT', os.getcwd())
config_service = ConfigurationService(client_root)

# Initialize server
server = Server(SERVER_NAME)
compiler = QueryCompiler(config_service.get_config())


def handle_tool_call(name: str, arguments: Dict[str, Any],
                     query_compiler: Optional[QueryCompiler] = None) -> Dict[str, Any]:
    """
    Run a tool and return its JSON-serializable result.

    Args:
        name: Tool name
        arguments: Tool arguments
        query_compiler: Compiler to use (defaults to the server's compiler)

    Returns:
        Result payload; validation failures produce success=False
    """
    query_compiler = query_compiler or compiler

    try:
        if name == "compile_search_query":
            compiled = query_compiler.compile(arguments.get("query"))
            return {"success": True, **compiled.to_dict()}

        elif name == "extract_search_terms":
            terms = query_compiler.extract_terms(arguments.get("query"))
            return {
                "success": True,
                "include_terms": sorted(terms.include_terms),
                "exclude_terms": sorted(terms.exclude_terms)
            }

        elif name == "extract_compiled_terms":
            compiled_query = arguments.get("compiled_query", "")
            if not isinstance(compiled_query, str):
                raise QueryValidationError(
                    "compiled_query", compiled_query,
                    "Compiled query must be a string"
                )
            return {
                "success": True,
                "terms": sorted(query_compiler.extract_all_terms(compiled_query))
            }

    except QueryValidationError as e:
        logging.info(f"Rejected {name} call: {e.message}")
        return {"success": False, "error": e.to_dict()}

    return {"success": False, "error": {"code": "UNKNOWN_TOOL", "message": f"Unknown tool: {name}"}}


@server.list_tools()
async def list_tools() -> List[Tool]:
    """List available tools."""
    return get_tools()


@server.call_tool()
async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    """Handle tool calls."""
    result = handle_tool_call(name, arguments or {})
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


def main_sync():
    """Main entry point for sync execution."""
    import asyncio
    asyncio.run(main_async())


async def main_async():
    """Main entry point for async stdio execution."""
    logging.info(
        f"Starting stdio server (max query length: {compiler.config.max_query_length})"
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=SERVER_VERSION,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={}
                )
            )
        )


if __name__ == "__main__":
    main_sync()
