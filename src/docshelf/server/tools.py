"""Tool framework: defines the tools a protocol server exposes to clients."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from docshelf.docs.config import SearchConfig
from docshelf.docs.registry import DocumentRegistry
from docshelf.docs.search import DocumentSearcher

SEARCH_TOOL_NAME = "search_docshelf"


@dataclass
class ToolDefinition:
    """A tool that a client can invoke by name with JSON arguments."""

    name: str
    description: str
    parameters: dict[str, Any]  # JSON Schema
    function: Callable[..., Any]
    args_schema: type[BaseModel] | None = None

    @classmethod
    def from_function(
        cls,
        func: Callable[..., Any],
        name: str,
        description: str,
        args_schema: type[BaseModel],
    ) -> ToolDefinition:
        """Create a ToolDefinition from a function and a Pydantic args model."""
        schema = args_schema.model_json_schema()
        schema.pop("title", None)
        schema.pop("$defs", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        return cls(
            name=name,
            description=description,
            parameters=schema,
            function=func,
            args_schema=args_schema,
        )

    def to_schema(self) -> dict[str, Any]:
        """Tool listing entry (name, description, input schema)."""
        params = self.parameters
        if params.get("type") == "object" and "required" not in params:
            params = {**params, "required": []}
        return {"name": self.name, "description": self.description, "inputSchema": params}

    def call(self, arguments: dict[str, Any] | str) -> Any:
        """Validate *arguments* and invoke the tool, returning its raw result.

        Raises:
            ValueError: Arguments are not valid JSON or fail schema validation.
        """
        if isinstance(arguments, str):
            try:
                arguments = json.loads(arguments) if arguments.strip() else {}
            except json.JSONDecodeError as e:
                raise ValueError(f"could not parse arguments: {arguments}") from e
        if not isinstance(arguments, dict):
            raise ValueError(f"arguments must be an object, got {type(arguments).__name__}")
        if self.args_schema is not None:
            try:
                arguments = self.args_schema.model_validate(arguments).model_dump()
            except ValidationError as e:
                raise ValueError(f"invalid arguments for {self.name}: {e}") from e
        return self.function(**arguments)

    def execute(self, arguments: dict[str, Any] | str) -> str:
        """Invoke the tool and serialize its result as JSON text.

        Failures are reported as an ``Error: ...`` string instead of raised,
        so one bad call never takes the server down.
        """
        try:
            result = self.call(arguments)
        except ValueError as e:
            logger.warning(f"Tool {self.name} rejected arguments: {e}")
            return f"Error: {e}"
        except Exception as e:
            logger.error(f"Tool {self.name} failed: {e}")
            return f"Error executing {self.name}: {e}"
        return result if isinstance(result, str) else json.dumps(result)


class SearchArgs(BaseModel):
    query: str = Field(description="Free-text keywords to search for")


def create_search_tool(registry: DocumentRegistry, config: SearchConfig | None = None) -> ToolDefinition:
    """Search tool returning ranked ``{slug, title, description, excerpt, score}`` records."""
    searcher = DocumentSearcher(registry, config)

    def search_docs(query: str) -> list[dict[str, Any]]:
        return [result.to_record() for result in searcher.search(query)]

    return ToolDefinition.from_function(
        search_docs,
        name=SEARCH_TOOL_NAME,
        description=(
            "Search docshelf documentation by query string. Returns matching docs with relevance scoring."
        ),
        args_schema=SearchArgs,
    )


def create_tools(registry: DocumentRegistry, config: SearchConfig | None = None) -> list[ToolDefinition]:
    """Build the tool list served for *registry*."""
    return [create_search_tool(registry, config)]
