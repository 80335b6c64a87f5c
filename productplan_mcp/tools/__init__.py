from mcp.types import Tool

from productplan_mcp.tools.account import ACCOUNT_ENDPOINTS
from productplan_mcp.tools.bars import BAR_ENDPOINTS
from productplan_mcp.tools.base import Endpoint, MissingArgumentError
from productplan_mcp.tools.discovery import DISCOVERY_ENDPOINTS
from productplan_mcp.tools.launches import LAUNCH_ENDPOINTS
from productplan_mcp.tools.roadmaps import ROADMAP_ENDPOINTS
from productplan_mcp.tools.strategy import STRATEGY_ENDPOINTS

ENDPOINTS: list[Endpoint] = [
    *ROADMAP_ENDPOINTS,
    *BAR_ENDPOINTS,
    *DISCOVERY_ENDPOINTS,
    *STRATEGY_ENDPOINTS,
    *LAUNCH_ENDPOINTS,
    *ACCOUNT_ENDPOINTS,
]

TOOLS: list[Tool] = [endpoint.tool for endpoint in ENDPOINTS]

TOOL_HANDLERS: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def list_tools() -> list[Tool]:
    return list(TOOLS)


__all__ = [
    "ENDPOINTS",
    "TOOLS",
    "TOOL_HANDLERS",
    "Endpoint",
    "MissingArgumentError",
    "list_tools",
]
