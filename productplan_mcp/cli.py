import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from productplan_mcp.client import ProductPlanClient
from productplan_mcp.config import ConfigError, ProductPlanConfig
from productplan_mcp.server import dispatch, run_server


@dataclass(frozen=True)
class Command:
    list_tool: Optional[str]
    get_tool: Optional[str]
    argument: Optional[str] = None
    usage: str = ""


COMMANDS = {
    "roadmaps": Command("list_roadmaps", "get_roadmap", "id", "roadmaps [id]"),
    "bars": Command(None, "get_roadmap_bars", "roadmap_id", "bars <roadmap_id>"),
    "lanes": Command(None, "get_roadmap_lanes", "roadmap_id", "lanes <roadmap_id>"),
    "milestones": Command(None, "get_roadmap_milestones", "roadmap_id", "milestones <roadmap_id>"),
    "objectives": Command("list_objectives", "get_objective", "id", "objectives [id]"),
    "key-results": Command(None, "list_key_results", "objective_id", "key-results <objective_id>"),
    "ideas": Command("list_ideas", "get_idea", "id", "ideas [id]"),
    "opportunities": Command("list_opportunities", "get_opportunity", "id", "opportunities [id]"),
    "launches": Command("list_launches", "get_launch", "id", "launches [id]"),
    "status": Command("check_status", None, None, "status"),
}

EPILOG = "commands:\n  serve                        Start the MCP server on stdio (default)\n" + "\n".join(
    f"  {command.usage}" for command in COMMANDS.values()
) + "\n\nenvironment:\n  PRODUCTPLAN_API_TOKEN        ProductPlan API token (required)"


class UsageError(Exception):
    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="productplan-mcp",
        description="ProductPlan CLI & MCP server",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", nargs="?", default="serve")
    parser.add_argument("target", nargs="?")
    return parser


def resolve_command(command: str, target: Optional[str]) -> tuple[str, dict[str, str]]:
    entry = COMMANDS.get(command)
    if entry is None:
        raise UsageError(f"Unknown command: {command}")

    if target is None:
        if entry.list_tool is None:
            raise UsageError(f"Usage: productplan-mcp {entry.usage}")
        return entry.list_tool, {}

    if entry.get_tool is None:
        return entry.list_tool, {}

    return entry.get_tool, {entry.argument: target}


async def run_command(config: ProductPlanConfig, tool: str, arguments: dict[str, str]) -> int:
    async with ProductPlanClient(config) as client:
        result = await dispatch(client, tool, arguments)

    text = result.content[0].text
    if result.isError:
        print(text, file=sys.stderr)
        return 1

    print(text)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ProductPlanConfig.from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # stdout carries MCP framing, so logs go to stderr.
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "serve":
        asyncio.run(run_server(config))
        return 0

    try:
        tool, arguments = resolve_command(args.command, args.target)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    return asyncio.run(run_command(config, tool, arguments))
