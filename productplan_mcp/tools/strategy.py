from mcp.types import Tool

from productplan_mcp.tools.base import Endpoint, input_schema, path, string_param

list_objectives_tool = Tool(
    name="list_objectives",
    description="List all strategic objectives",
    inputSchema=input_schema()
)

get_objective_tool = Tool(
    name="get_objective",
    description="Get details of a specific objective",
    inputSchema=input_schema(
        {"id": string_param("Objective ID")},
        required=["id"]
    )
)

list_key_results_tool = Tool(
    name="list_key_results",
    description="List key results for an objective",
    inputSchema=input_schema(
        {"objective_id": string_param("Objective ID")},
        required=["objective_id"]
    )
)

STRATEGY_ENDPOINTS = [
    Endpoint(list_objectives_tool, "GET", path("/strategy/objectives")),
    Endpoint(get_objective_tool, "GET", path("/strategy/objectives/{id}")),
    Endpoint(
        list_key_results_tool,
        "GET",
        path("/strategy/objectives/{objective_id}/key-results")
    ),
]
