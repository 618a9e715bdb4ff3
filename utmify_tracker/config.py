import os
import logging
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

UTMIFY_ORDERS_URL = "https://api.utmify.com.br/api-credentials/orders"


class Config(BaseModel):
    """Process-wide settings. Built once from the environment, immutable after."""

    model_config = ConfigDict(frozen=True)

    environment: str = "dev"
    utmify_api_token: str = ""
    utmify_api_url: str = UTMIFY_ORDERS_URL
    utmify_platform: str = ""
    utmify_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        timeout_raw = os.getenv("UTMIFY_TIMEOUT")
        timeout = None
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(
                    f"UTMIFY_TIMEOUT must be a number of seconds, got {timeout_raw!r}"
                )

        return cls(
            environment=os.getenv("ENVIRONMENT", "dev").lower(),
            utmify_api_token=os.getenv("UTMIFY_API_TOKEN", ""),
            utmify_api_url=os.getenv("UTMIFY_API_URL") or UTMIFY_ORDERS_URL,
            utmify_platform=os.getenv("UTMIFY_PLATFORM", ""),
            utmify_timeout=timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def is_prd(self) -> bool:
        return self.environment == "prd"

    def is_dev(self) -> bool:
        return self.environment == "dev"


@lru_cache()
def get_config() -> Config:
    """Returns the configuration loaded at first use."""
    return Config.from_env()


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
