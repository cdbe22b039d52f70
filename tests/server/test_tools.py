"""Tests for docshelf.server.tools."""

import json

import pytest

from docshelf.docs.config import SearchConfig
from docshelf.server.tools import SEARCH_TOOL_NAME, SearchArgs, ToolDefinition, create_search_tool, create_tools


class TestToolDefinition:
    def test_from_function_strips_titles(self):
        tool = ToolDefinition.from_function(lambda query: query, "echo", "Echo the query", SearchArgs)
        assert "title" not in tool.parameters
        assert "title" not in tool.parameters["properties"]["query"]
        assert tool.parameters["properties"]["query"]["type"] == "string"
        assert tool.parameters["required"] == ["query"]

    def test_to_schema(self):
        tool = ToolDefinition.from_function(lambda query: query, "echo", "Echo the query", SearchArgs)
        schema = tool.to_schema()
        assert schema["name"] == "echo"
        assert schema["description"] == "Echo the query"
        assert schema["inputSchema"]["type"] == "object"

    def test_to_schema_adds_required(self):
        tool = ToolDefinition(name="noop", description="", parameters={"type": "object", "properties": {}},
                              function=lambda: "ok")
        assert tool.to_schema()["inputSchema"]["required"] == []

    def test_execute_string_result_passthrough(self):
        tool = ToolDefinition.from_function(lambda query: query.upper(), "echo", "", SearchArgs)
        assert tool.execute({"query": "hi"}) == "HI"

    def test_execute_bad_json(self):
        tool = ToolDefinition.from_function(lambda query: query, "echo", "", SearchArgs)
        assert tool.execute("{not json").startswith("Error: could not parse arguments")

    def test_execute_schema_violation(self):
        tool = ToolDefinition.from_function(lambda query: query, "echo", "", SearchArgs)
        assert tool.execute({}).startswith("Error: invalid arguments for echo")
        assert tool.execute({"query": 5}).startswith("Error: invalid arguments")

    def test_execute_function_failure(self):
        def boom(query):
            raise RuntimeError("kaput")

        tool = ToolDefinition.from_function(boom, "boom", "", SearchArgs)
        assert tool.execute({"query": "x"}) == "Error executing boom: kaput"

    def test_call_raises_value_error(self):
        tool = ToolDefinition.from_function(lambda query: query, "echo", "", SearchArgs)
        with pytest.raises(ValueError):
            tool.call("[1, 2]")


class TestSearchTool:
    def test_create_tools(self, registry):
        tools = create_tools(registry)
        assert [t.name for t in tools] == [SEARCH_TOOL_NAME]

    def test_returns_ranked_records(self, registry):
        tool = create_search_tool(registry)
        records = json.loads(tool.execute({"query": "install"}))
        assert [r["slug"] for r in records] == ["intro", "faq"]
        assert records[0] == {
            "slug": "intro",
            "title": "Getting Started",
            "description": "Basics",
            "excerpt": "First, install the tool with pip.",
            "score": 27,
        }

    def test_json_string_arguments(self, registry):
        tool = create_search_tool(registry)
        records = json.loads(tool.execute('{"query": "layers"}'))
        assert records[0]["slug"] == "layers"
        assert isinstance(records[0]["score"], int)

    def test_empty_query_is_empty_array(self, registry):
        tool = create_search_tool(registry)
        assert json.loads(tool.execute({"query": ""})) == []
        assert json.loads(tool.execute({"query": "nothing matches this"})) == []

    def test_call_returns_records(self, registry):
        tool = create_search_tool(registry)
        assert tool.call({"query": "faq"})[0]["slug"] == "faq"

    def test_uses_search_config(self, registry):
        tool = create_search_tool(registry, SearchConfig(body_phrase=0, body_term=0))
        assert json.loads(tool.execute({"query": "install"})) == []
