import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "https://app.productplan.com/api/v2"


class ConfigError(Exception):
    pass


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigError("PRODUCTPLAN_TIMEOUT must be a number of seconds") from None


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"PRODUCTPLAN_LOG_LEVEL has unknown level: {value}")
    return level


@dataclass(frozen=True)
class ProductPlanConfig:
    api_token: str
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ProductPlanConfig":
        api_token = os.environ.get("PRODUCTPLAN_API_TOKEN", "").strip()
        if not api_token:
            raise ConfigError("PRODUCTPLAN_API_TOKEN environment variable is required")

        return cls(
            api_token=api_token,
            api_url=os.environ.get("PRODUCTPLAN_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=_parse_timeout(os.environ.get("PRODUCTPLAN_TIMEOUT")),
            log_level=_parse_log_level(os.environ.get("PRODUCTPLAN_LOG_LEVEL", "INFO")),
        )
