"""Tests for MCP tool definitions and dispatch."""

import asyncio
import json
import unittest
from unittest.mock import patch

from mcp.types import Tool, TextContent

from config.compiler_config import CompilerConfig
from search.query_compiler import QueryCompiler
from tools.mcp_tools import get_tools
import server


class TestToolDefinitions(unittest.TestCase):
    """Test the advertised tool list."""

    def test_tool_names(self):
        tools = get_tools()
        self.assertTrue(all(isinstance(tool, Tool) for tool in tools))
        self.assertEqual(
            [tool.name for tool in tools],
            ["compile_search_query", "extract_search_terms", "extract_compiled_terms"]
        )

    def test_required_arguments(self):
        required = {tool.name: tool.inputSchema["required"] for tool in get_tools()}
        self.assertEqual(required["compile_search_query"], ["query"])
        self.assertEqual(required["extract_search_terms"], ["query"])
        self.assertEqual(required["extract_compiled_terms"], ["compiled_query"])

    def test_list_tools_handler(self):
        tools = asyncio.run(server.list_tools())
        self.assertEqual(len(tools), 3)


class TestToolDispatch(unittest.TestCase):
    """Test tool call handling."""

    def setUp(self):
        """Set up test fixtures."""
        self.compiler = QueryCompiler(CompilerConfig(max_query_length=50))

    def call(self, name, arguments):
        return server.handle_tool_call(name, arguments, self.compiler)

    def test_compile_search_query(self):
        result = self.call("compile_search_query", {"query": "cats NOT dogs"})
        self.assertEqual(result, {
            "success": True,
            "compiled_text": "cats & !dogs",
            "include_terms": ["cats"],
            "exclude_terms": ["dogs"]
        })

    def test_extract_search_terms(self):
        result = self.call("extract_search_terms", {"query": '"Big Data" !hype'})
        self.assertEqual(result, {
            "success": True,
            "include_terms": ["big", "data"],
            "exclude_terms": ["hype"]
        })

    def test_extract_search_terms_single_pass(self):
        """Test that both term sets come from one sanitize and classify pass."""
        with patch.object(self.compiler, "sanitize", wraps=self.compiler.sanitize) as sanitize, \
                patch.object(self.compiler, "classify", wraps=self.compiler.classify) as classify:
            result = self.call("extract_search_terms", {"query": "cats NOT dogs"})

        self.assertTrue(result["success"])
        self.assertEqual(sanitize.call_count, 1)
        self.assertEqual(classify.call_count, 1)

    def test_extract_compiled_terms(self):
        result = self.call("extract_compiled_terms", {"compiled_query": "( a <-> b ) & !c"})
        self.assertEqual(result, {"success": True, "terms": ["a", "b", "c"]})

    def test_validation_error_payload(self):
        result = self.call("compile_search_query", {"query": "   "})
        self.assertFalse(result["success"])
        self.assertEqual(result["error"]["code"], "VALIDATION_ERROR")
        self.assertEqual(result["error"]["message"], "Query cannot be empty")

    def test_configured_length_applies(self):
        result = self.call("extract_search_terms", {"query": "a" * 51})
        self.assertFalse(result["success"])
        self.assertEqual(
            result["error"]["message"],
            "Query exceeds maximum length of 50 characters"
        )

    def test_missing_query(self):
        result = self.call("compile_search_query", {})
        self.assertFalse(result["success"])
        self.assertEqual(result["error"]["message"], "Query must be a non-empty string")

    def test_non_string_compiled_query(self):
        result = self.call("extract_compiled_terms", {"compiled_query": 5})
        self.assertFalse(result["success"])
        self.assertEqual(result["error"]["field"], "compiled_query")

    def test_unknown_tool(self):
        result = self.call("drop_tables", {})
        self.assertFalse(result["success"])
        self.assertEqual(result["error"]["message"], "Unknown tool: drop_tables")

    def test_call_tool_returns_json_text(self):
        contents = asyncio.run(server.call_tool("compile_search_query", {"query": "cats dogs"}))
        self.assertEqual(len(contents), 1)
        self.assertIsInstance(contents[0], TextContent)
        self.assertEqual(json.loads(contents[0].text)["compiled_text"], "cats & dogs")


if __name__ == '__main__':
    unittest.main()
