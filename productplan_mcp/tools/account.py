from typing import Any

from mcp.types import Tool

from productplan_mcp.tools.base import Endpoint, input_schema, path

list_users_tool = Tool(
    name="list_users",
    description="List all users in the account",
    inputSchema=input_schema()
)

list_teams_tool = Tool(
    name="list_teams",
    description="List all teams in the account",
    inputSchema=input_schema()
)

check_status_tool = Tool(
    name="check_status",
    description="Check ProductPlan API status",
    inputSchema=input_schema()
)

health_check_tool = Tool(
    name="health_check",
    description="Check that the server can reach ProductPlan with the configured token. Use this to diagnose connection or authentication problems.",
    inputSchema=input_schema()
)


def to_health_report(status: Any) -> dict[str, Any]:
    return {"status": "healthy", "api": status}


ACCOUNT_ENDPOINTS = [
    Endpoint(list_users_tool, "GET", path("/users")),
    Endpoint(list_teams_tool, "GET", path("/teams")),
    Endpoint(check_status_tool, "GET", path("/status")),
    Endpoint(health_check_tool, "GET", path("/status"), transform=to_health_report),
]
