"""Tests for the placeholder educational resource search."""

import pytest

from sahayak.core.tools import ToolContext
from sahayak.models.tools import ResourceSearchArgs
from sahayak.tools.resource_search import SAMPLE_RESOURCES, search_educational_resources, search_resources


class TestSearchResources:
    """Test first-word title matching."""

    def test_first_word_matches_all_samples(self):
        """Test first word matching every sample."""
        assert search_resources("photosynthesis for 5th graders") == SAMPLE_RESOURCES

    def test_match_is_case_insensitive(self):
        """Test case-insensitive matching."""
        assert len(search_resources("PHOTOSYNTHESIS")) == 4

    def test_only_first_word_is_used(self):
        """Test later words are ignored."""
        assert search_resources("volcano photosynthesis") == []

    def test_substring_of_title_matches(self):
        """Test substring matching within titles."""
        titles = [r["title"] for r in search_resources("craft ideas")]

        assert titles == ["Photosynthesis Paper Craft Activity"]

    def test_results_are_copies(self):
        """Test results do not alias the sample set."""
        search_resources("photosynthesis")[0]["title"] = "changed"

        assert SAMPLE_RESOURCES[0]["title"] == "Photosynthesis for Kids | Learn with BYJU'S"

    @pytest.mark.asyncio
    async def test_tool_handler_shape(self):
        """Test tool handler result shape."""
        result = await search_educational_resources(ResourceSearchArgs(query="National parks"), ToolContext())

        assert [r["type"] for r in result["resources"]] == ["article"]
