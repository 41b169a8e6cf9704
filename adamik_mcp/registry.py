"""
Tool registry and dispatch.

Tools are registered once at startup as ``ToolDefinition`` records. Dispatch
validates parameters against the tool's params model, runs the handler and
converts every failure (unknown tool, bad parameters, handler exceptions) into
a ``ToolFailure`` so a single bad invocation never escapes to the transport.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from adamik_mcp.metrics import MetricsRecorder, default_metrics
from adamik_mcp.results import ToolFailure, ToolResult, ToolSuccess, ToolText

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Any], Union[Awaitable[ToolResult], ToolResult]]


class DuplicateToolError(ValueError):
    """Raised when a tool name is registered twice."""


class ToolParams(BaseModel):
    """Base for per-tool parameter models: strict types, no unknown fields."""

    model_config = ConfigDict(extra="forbid", strict=True, populate_by_name=True)


class NoParams(ToolParams):
    """Params model for tools that take no input."""


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    name: str
    description: str
    handler: ToolHandler
    params_model: Type[BaseModel] = NoParams

    @property
    def input_schema(self) -> Dict[str, Any]:
        schema = self.params_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.pop("description", None)
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema


@dataclass(slots=True)
class ToolInvocation:
    tool_name: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    id: Any = None


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "parameters"
        problems.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "Invalid parameters: " + "; ".join(problems)


class ToolRegistry:
    """Name-indexed table of tool definitions."""

    def __init__(self, *, metrics: MetricsRecorder = default_metrics) -> None:
        self._tools: Dict[str, ToolDefinition] = {}
        self._metrics = metrics

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {definition.name}")
        self._tools[definition.name] = definition

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[Dict[str, Any]]:
        """Return tool metadata in registration order."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema,
            }
            for tool in self._tools.values()
        ]

    async def dispatch(self, invocation: ToolInvocation, *, request_id: Optional[str] = None) -> ToolResult:
        """Run one invocation; never raises for handler or validation failures."""
        tool = self._tools.get(invocation.tool_name)
        if tool is None:
            result: ToolResult = ToolFailure(f"Unknown tool: {invocation.tool_name}")
        else:
            result = await self._run(tool, invocation.parameters or {})
        self._log_tool_result(invocation.tool_name, result, request_id)
        return result

    async def call(self, tool_name: str, parameters: Optional[Dict[str, Any]] = None, **kwargs: Any) -> Dict[str, Any]:
        """Dispatch and return the serialized content envelope."""
        result = await self.dispatch(ToolInvocation(tool_name=tool_name, parameters=parameters or {}))
        return result.to_content(**kwargs)

    async def _run(self, tool: ToolDefinition, parameters: Dict[str, Any]) -> ToolResult:
        if not isinstance(parameters, dict):
            return ToolFailure("Invalid parameters: expected an object")
        try:
            params = tool.params_model.model_validate(parameters)
        except ValidationError as exc:
            return ToolFailure(_format_validation_error(exc))

        try:
            outcome = tool.handler(params)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as exc:
            logger.exception("Unexpected error in tool %s", tool.name, extra={"tool": tool.name})
            return ToolFailure(f"Unexpected error: {exc}")

        if isinstance(outcome, (ToolSuccess, ToolText, ToolFailure)):
            return outcome
        return ToolSuccess(outcome)

    def _log_tool_result(self, tool_name: str, result: ToolResult, request_id: Optional[str]) -> None:
        if result.is_error:
            logger.warning(
                "tool=%s outcome=error error=%s request_id=%s",
                tool_name,
                result.render(),
                request_id,
                extra={"tool": tool_name, "request_id": request_id, "error": result.render()},
            )
            self._metrics.record_tool(tool_name, success=False)
        else:
            logger.info(
                "tool=%s outcome=success request_id=%s",
                tool_name,
                request_id,
                extra={"tool": tool_name, "request_id": request_id},
            )
            self._metrics.record_tool(tool_name, success=True)
