import json
import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent

from productplan_mcp.client import ProductPlanClient
from productplan_mcp.config import ProductPlanConfig
from productplan_mcp.tools import TOOL_HANDLERS, list_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "productplan-mcp-server"


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error
    )


async def dispatch(
    client: ProductPlanClient,
    name: str,
    arguments: Optional[dict[str, Any]]
) -> CallToolResult:
    """Run one tool call against the API.

    Failures are returned as error-flagged results and never raised, so a
    bad call cannot take down the server.
    """
    endpoint = TOOL_HANDLERS.get(name)

    if endpoint is None:
        logger.warning(f"Unknown tool: {name}")
        return _text_result(f"Error: Unknown tool: {name}", is_error=True)

    try:
        logger.info(f"Executing tool: {name} with args: {arguments}")
        result = await endpoint.call(client, arguments or {})
        logger.info(f"Tool {name} completed")
        return _text_result(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        logger.error(f"Tool {name} failed: {e}")
        return _text_result(f"Error: {str(e)}", is_error=True)


def create_server(client: ProductPlanClient) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools():
        return list_tools()

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict):
        return await dispatch(client, name, arguments)

    return server


async def run_server(config: ProductPlanConfig):
    async with ProductPlanClient(config) as client:
        server = create_server(client)
        logger.info(f"Starting ProductPlan MCP server against {config.api_url}...")

        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
