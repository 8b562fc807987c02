"""Tests for environment configuration."""

import pytest

from sahayak.config import Config
from sahayak.core.tools import ToolInvocationLoop
from sahayak.flows.lesson_plan import lesson_plan_tools
from sahayak.tests.fakes import FakeGenerationClient
from sahayak.tools.resource_search import SEARCH_EDUCATIONAL_RESOURCES


class TestMaxToolTurns:
    """Test the tool-loop turn bound read from the environment."""

    def test_default(self, monkeypatch):
        """Test that an unset variable gives the default bound."""
        monkeypatch.delenv("SAHAYAK_MAX_TOOL_TURNS", raising=False)

        assert Config.max_tool_turns() == 8

    def test_override(self, monkeypatch):
        """Test that a positive integer overrides the default."""
        monkeypatch.setenv("SAHAYAK_MAX_TOOL_TURNS", "3")

        assert Config.max_tool_turns() == 3

    @pytest.mark.parametrize("value", ["eight", "", "2.5", "0", "-4"])
    def test_malformed_falls_back_to_default(self, monkeypatch, value):
        """Test that malformed or non-positive values fall back to the default."""
        monkeypatch.setenv("SAHAYAK_MAX_TOOL_TURNS", value)

        assert Config.max_tool_turns() == Config.DEFAULT_MAX_TOOL_TURNS

    def test_loop_builds_with_malformed_value(self, monkeypatch):
        """Test that a tool loop can still be created when the variable is malformed."""
        monkeypatch.setenv("SAHAYAK_MAX_TOOL_TURNS", "many")

        loop = ToolInvocationLoop(FakeGenerationClient(), lesson_plan_tools())

        assert loop.max_turns == 8
        assert SEARCH_EDUCATIONAL_RESOURCES in loop.tools.definitions
