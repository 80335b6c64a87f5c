from mcp.types import Tool

from productplan_mcp.tools.base import Endpoint, input_schema, path, string_param

list_roadmaps_tool = Tool(
    name="list_roadmaps",
    description="List all roadmaps in your ProductPlan account",
    inputSchema=input_schema()
)

get_roadmap_tool = Tool(
    name="get_roadmap",
    description="Get details of a specific roadmap",
    inputSchema=input_schema(
        {"id": string_param("Roadmap ID")},
        required=["id"]
    )
)

get_roadmap_bars_tool = Tool(
    name="get_roadmap_bars",
    description="Get all bars (items) from a roadmap",
    inputSchema=input_schema(
        {"roadmap_id": string_param("Roadmap ID")},
        required=["roadmap_id"]
    )
)

get_roadmap_lanes_tool = Tool(
    name="get_roadmap_lanes",
    description="Get all lanes from a roadmap",
    inputSchema=input_schema(
        {"roadmap_id": string_param("Roadmap ID")},
        required=["roadmap_id"]
    )
)

get_roadmap_milestones_tool = Tool(
    name="get_roadmap_milestones",
    description="Get all milestones from a roadmap",
    inputSchema=input_schema(
        {"roadmap_id": string_param("Roadmap ID")},
        required=["roadmap_id"]
    )
)

ROADMAP_ENDPOINTS = [
    Endpoint(list_roadmaps_tool, "GET", path("/roadmaps")),
    Endpoint(get_roadmap_tool, "GET", path("/roadmaps/{id}")),
    Endpoint(get_roadmap_bars_tool, "GET", path("/roadmaps/{roadmap_id}/bars")),
    Endpoint(get_roadmap_lanes_tool, "GET", path("/roadmaps/{roadmap_id}/lanes")),
    Endpoint(get_roadmap_milestones_tool, "GET", path("/roadmaps/{roadmap_id}/milestones")),
]
