from mcp.types import Tool

from productplan_mcp.tools.base import Endpoint, input_schema, path, string_param

list_launches_tool = Tool(
    name="list_launches",
    description="List all launches",
    inputSchema=input_schema()
)

get_launch_tool = Tool(
    name="get_launch",
    description="Get details of a specific launch",
    inputSchema=input_schema(
        {"id": string_param("Launch ID")},
        required=["id"]
    )
)

list_launch_tasks_tool = Tool(
    name="list_launch_tasks",
    description="List tasks for a launch",
    inputSchema=input_schema(
        {"launch_id": string_param("Launch ID")},
        required=["launch_id"]
    )
)

LAUNCH_ENDPOINTS = [
    Endpoint(list_launches_tool, "GET", path("/launches")),
    Endpoint(get_launch_tool, "GET", path("/launches/{id}")),
    Endpoint(list_launch_tasks_tool, "GET", path("/launches/{launch_id}/tasks")),
]
