"""
Runtime configuration, read from the environment (and a local .env file).
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("techhive.config")

# Development-only fallback; never rely on it outside local testing.
DEFAULT_AUTH_TOKEN = "techhive-dev-token"
DEFAULT_DOCS_PREFIXES = ("/swagger",)


@dataclass(frozen=True)
class Settings:
    auth_token: str = DEFAULT_AUTH_TOKEN
    docs_path_prefixes: Tuple[str, ...] = field(default=DEFAULT_DOCS_PREFIXES)
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def _split_prefixes(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_DOCS_PREFIXES
    prefixes = tuple(p.strip() for p in raw.split(",") if p.strip())
    return prefixes or DEFAULT_DOCS_PREFIXES


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    auth_token = os.getenv("AUTH_TOKEN")
    if not auth_token:
        logger.warning("AUTH_TOKEN not set; falling back to the development token")
        auth_token = DEFAULT_AUTH_TOKEN

    return Settings(
        auth_token=auth_token,
        docs_path_prefixes=_split_prefixes(os.getenv("DOCS_PATH_PREFIXES")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
