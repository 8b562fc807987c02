"""Educational resource search tool.

Placeholder for a real search API: filters a fixed sample set by the first word
of the query.
"""

from typing import Any, Dict, List

from sahayak.core.logging import logger
from sahayak.core.tools import ToolContext, ToolDefinition
from sahayak.models.tools import ResourceSearchArgs, ResourceSearchResult

SAMPLE_RESOURCES: List[Dict[str, str]] = [
    {
        "title": "Photosynthesis for Kids | Learn with BYJU'S",
        "url": "https://byjus.com/biology/photosynthesis-for-kids/",
        "type": "article",
    },
    {
        "title": "Photosynthesis | Educational Video for Kids",
        "url": "https://www.youtube.com/watch?v=D1Ymc31__xM",
        "type": "video",
    },
    {
        "title": "Photosynthesis Paper Craft Activity",
        "url": "https://www.sugarnspicebaking.com/2020/04/photosynthesis-for-kids-craft.html",
        "type": "activity",
    },
    {
        "title": "What is Photosynthesis? | National Geographic",
        "url": "https://www.nationalgeographic.org/encyclopedia/photosynthesis/",
        "type": "article",
    },
]


def search_resources(query: str) -> List[Dict[str, str]]:
    """Resources whose title contains the query's first word (case-insensitive).

    Examples:
        >>> len(search_resources("photosynthesis for 5th graders"))
        4
        >>> search_resources("volcanoes")
        []
    """
    keyword = query.split(" ")[0].lower()
    return [dict(resource) for resource in SAMPLE_RESOURCES if keyword in resource["title"].lower()]


async def search_educational_resources(args: ResourceSearchArgs, context: ToolContext) -> Dict[str, Any]:
    resources = search_resources(args.query)
    logger.info("resource_search", query=args.query, results=len(resources))
    return {"resources": resources}


SEARCH_EDUCATIONAL_RESOURCES = ToolDefinition(
    name="searchEducationalResources",
    description="Searches for educational online resources like articles, videos, and activities based on a query.",
    input_model=ResourceSearchArgs,
    output_model=ResourceSearchResult,
    handler=search_educational_resources,
)
