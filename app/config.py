import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

from issue_search.github import DEFAULT_TIMEOUT, GITHUB_API_BASE, USER_AGENT
from issue_search.ranker import DEFAULT_MAX_RESULTS, clamp_max_results


load_dotenv()

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {name}={value!r}, using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {name}={value!r}, using {default}")
        return default


class Settings(BaseModel):
    github_token: str = os.getenv("GITHUB_TOKEN", "").strip()
    github_api_base: str = os.getenv("GITHUB_API_BASE", GITHUB_API_BASE).strip() or GITHUB_API_BASE
    github_user_agent: str = os.getenv("GITHUB_USER_AGENT", USER_AGENT).strip() or USER_AGENT
    github_timeout: float = _env_float("GITHUB_TIMEOUT", DEFAULT_TIMEOUT)
    default_max_results: int = _env_int("DEFAULT_MAX_RESULTS", DEFAULT_MAX_RESULTS)
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __init__(self, **data):
        super().__init__(**data)
        self.default_max_results = clamp_max_results(self.default_max_results)
        if self.github_timeout <= 0:
            self.github_timeout = DEFAULT_TIMEOUT

    @property
    def authenticated(self) -> bool:
        return bool(self.github_token)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
