"""MCP tool definitions for the tsquery compiler server."""

from typing import List
from mcp.types import Tool


QUERY_SYNTAX_HELP = """Query Syntax:
• Basic: Multiple words are ANDed together (e.g., "memory consolidation")
• Phrases: Use quotes for exact phrases (e.g., '"working memory"')
• Boolean: AND, OR, NOT in any case, or & | ! (e.g., "cats OR dogs", "cats NOT dogs")
• Grouping: Parentheses group sub-expressions (e.g., "(cats | dogs) & food")
• Other punctuation is ignored; C++, C# and F# are kept as cplusplus, csharp, fsharp

Examples:
- "cats dogs" -> cats & dogs
- '"hello world"' -> ( hello <-> world )
- "a NOT b NOT c" -> a & !b & !c"""


def get_tools() -> List[Tool]:
    """Return all available MCP tools."""
    return [
        Tool(
            name="compile_search_query",
            description=f"""Compile a free-text search query into PostgreSQL tsquery syntax. Returns the compiled query together with the lower-cased include and exclude terms used for highlighting.

{QUERY_SYNTAX_HELP}""",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query as typed by the user"
                    }
                },
                "required": ["query"]
            }
        ),
        Tool(
            name="extract_search_terms",
            description="Extract the include and exclude terms of a free-text search query without compiling it. Terms following NOT or ! are excluded; phrases are split into words.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query as typed by the user"
                    }
                },
                "required": ["query"]
            }
        ),
        Tool(
            name="extract_compiled_terms",
            description="List every term of an already compiled tsquery string, negated terms included. Use this when only the compiled query is available.",
            inputSchema={
                "type": "object",
                "properties": {
                    "compiled_query": {
                        "type": "string",
                        "description": "Compiled tsquery string"
                    }
                },
                "required": ["compiled_query"]
            }
        )
    ]
