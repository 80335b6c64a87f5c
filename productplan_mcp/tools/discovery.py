from mcp.types import Tool

from productplan_mcp.tools.base import Endpoint, fields, input_schema, path, string_param

list_ideas_tool = Tool(
    name="list_ideas",
    description="List all ideas in Discovery",
    inputSchema=input_schema()
)

get_idea_tool = Tool(
    name="get_idea",
    description="Get details of a specific idea",
    inputSchema=input_schema(
        {"id": string_param("Idea ID")},
        required=["id"]
    )
)

create_idea_tool = Tool(
    name="create_idea",
    description="Create a new idea",
    inputSchema=input_schema(
        {
            "title": string_param("Idea title"),
            "description": string_param("Idea description"),
        },
        required=["title"]
    )
)

list_opportunities_tool = Tool(
    name="list_opportunities",
    description="List all opportunities in Discovery",
    inputSchema=input_schema()
)

get_opportunity_tool = Tool(
    name="get_opportunity",
    description="Get details of a specific opportunity, including its problem statement and linked ideas",
    inputSchema=input_schema(
        {"id": string_param("Opportunity ID")},
        required=["id"]
    )
)

DISCOVERY_ENDPOINTS = [
    Endpoint(list_ideas_tool, "GET", path("/discovery/ideas")),
    Endpoint(get_idea_tool, "GET", path("/discovery/ideas/{id}")),
    Endpoint(
        create_idea_tool,
        "POST",
        path("/discovery/ideas"),
        body=fields("title", "description")
    ),
    Endpoint(list_opportunities_tool, "GET", path("/discovery/opportunities")),
    Endpoint(get_opportunity_tool, "GET", path("/discovery/opportunities/{id}")),
]
