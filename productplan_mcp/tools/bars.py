from mcp.types import Tool

from productplan_mcp.tools.base import (
    Endpoint,
    fields,
    input_schema,
    partial_body,
    path,
    string_param,
)

BAR_FIELDS = {
    "name": string_param("Bar name"),
    "start_date": string_param("Start date (YYYY-MM-DD)"),
    "end_date": string_param("End date (YYYY-MM-DD)"),
    "description": string_param("Bar description"),
}

get_bar_tool = Tool(
    name="get_bar",
    description="Get details of a specific bar",
    inputSchema=input_schema(
        {"id": string_param("Bar ID")},
        required=["id"]
    )
)

create_bar_tool = Tool(
    name="create_bar",
    description="Create a new bar on a roadmap",
    inputSchema=input_schema(
        {
            "roadmap_id": string_param("Roadmap ID"),
            "lane_id": string_param("Lane ID"),
            **BAR_FIELDS,
        },
        required=["roadmap_id", "lane_id", "name"]
    )
)

# Only the fields given a non-empty value are changed.
update_bar_tool = Tool(
    name="update_bar",
    description="Update an existing bar",
    inputSchema=input_schema(
        {"id": string_param("Bar ID"), **BAR_FIELDS},
        required=["id"]
    )
)

BAR_ENDPOINTS = [
    Endpoint(get_bar_tool, "GET", path("/bars/{id}")),
    Endpoint(
        create_bar_tool,
        "POST",
        path("/bars"),
        body=fields("roadmap_id", "lane_id", *BAR_FIELDS)
    ),
    Endpoint(
        update_bar_tool,
        "PATCH",
        path("/bars/{id}"),
        body=partial_body(*BAR_FIELDS)
    ),
]
