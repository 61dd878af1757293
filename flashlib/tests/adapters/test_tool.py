"""Tests for the ActionTool adapter."""

import logging
from typing import Optional
from unittest.mock import AsyncMock

import pytest
from pydantic import Field

from flashlib.actions import Action
from flashlib.adapters import MAX_DESCRIPTION_LENGTH, ActionTool
from flashlib.core.models import ActionParameters
from flashlib.providers.exa import get_exa_actions


class SearchParams(ActionParameters):
    query: str = Field(..., min_length=1, description="Search query")
    limit: int = Field(default=5, gt=0, description="Maximum results")
    schema_: Optional[str] = Field(default=None, alias="schema", description="Aliased field")


def make_tool(func=None, description: str = "Search things") -> ActionTool:
    func = func or AsyncMock(return_value="found")
    return ActionTool(Action("search", description, SearchParams, func))


class TestActionTool:
    """Test tool construction and schema export."""

    def test_copies_identity(self):
        tool = make_tool()
        assert tool.name == "search"
        assert tool.description == "Search things"
        assert tool.schema is SearchParams

    def test_truncates_description(self):
        tool = make_tool(description="x" * 1500)
        assert len(tool.description) == MAX_DESCRIPTION_LENGTH == 1000

    def test_short_description_unchanged(self):
        assert make_tool(description="short").description == "short"

    def test_tool_schema(self):
        schema = make_tool().get_tool_schema()
        assert schema["type"] == "function"
        function = schema["function"]
        assert function["name"] == "search"
        assert function["parameters"]["required"] == ["query"]
        assert "schema" in function["parameters"]["properties"]
        assert function["parameters"]["additionalProperties"] is False


class TestPrepareArguments:
    """Test validation with fallback to the raw input."""

    def test_fills_defaults(self):
        tool = make_tool()
        assert tool.prepare_arguments({"query": "cats"}) == {"query": "cats", "limit": 5, "schema": None}
        assert tool.last_validation_errors is None

    def test_falls_back_to_raw_input(self, caplog):
        tool = make_tool()
        raw = {"query": "", "limit": "many"}
        with caplog.at_level(logging.WARNING, logger="flashlib.adapters.tool"):
            assert tool.prepare_arguments(raw) is raw

        assert {detail.location for detail in tool.last_validation_errors} == {"query", "limit"}
        assert "Invalid input for search" in caplog.text

    def test_errors_cleared_after_success(self):
        tool = make_tool()
        tool.prepare_arguments({})
        assert tool.last_validation_errors
        tool.prepare_arguments({"query": "ok"})
        assert tool.last_validation_errors is None


class TestInvoke:
    """Test that invoke never raises."""

    @pytest.mark.asyncio
    async def test_returns_action_result(self):
        func = AsyncMock(return_value="found 3")
        assert await make_tool(func).invoke({"query": "cats"}) == "found 3"
        func.assert_awaited_once_with({"query": "cats", "limit": 5, "schema": None})

    @pytest.mark.asyncio
    async def test_invalid_input_still_runs_action(self):
        func = AsyncMock(return_value="ran anyway")
        assert await make_tool(func).invoke({"unexpected": 1}) == "ran anyway"
        func.assert_awaited_once_with({"unexpected": 1})

    @pytest.mark.asyncio
    async def test_error_message(self):
        func = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        assert await make_tool(func).invoke({"query": "x"}) == "Error executing search: quota exceeded"

    @pytest.mark.asyncio
    async def test_error_without_message(self):
        func = AsyncMock(side_effect=RuntimeError())
        assert await make_tool(func).invoke({"query": "x"}) == "Error executing search: Unknown error occurred"

    @pytest.mark.asyncio
    async def test_non_mapping_input(self):
        func = AsyncMock(return_value="unused")
        result = await make_tool(func).invoke("not a mapping")
        assert result.startswith("Error executing search: ")

    @pytest.mark.asyncio
    async def test_none_input_is_empty_mapping(self):
        func = AsyncMock(return_value="ran")
        assert await make_tool(func).invoke(None) == "ran"
        func.assert_awaited_once_with({})

    @pytest.mark.asyncio
    async def test_configuration_error_becomes_string(self):
        tool = ActionTool(get_exa_actions()[0])
        result = await tool.invoke({"query": "x"})
        assert result == (
            "Error executing exa_search: Exa API key not found. Please provide it via "
            "constructor or set EXA_API_KEY environment variable."
        )
