from productplan_mcp.client import ProductPlanAPIError, ProductPlanClient
from productplan_mcp.config import ConfigError, ProductPlanConfig
from productplan_mcp.server import create_server, dispatch, run_server

__all__ = [
    "ProductPlanAPIError",
    "ProductPlanClient",
    "ConfigError",
    "ProductPlanConfig",
    "create_server",
    "dispatch",
    "run_server",
]
