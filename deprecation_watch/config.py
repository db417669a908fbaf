# deprecation_watch/config.py
import os
from dataclasses import dataclass
from typing import Optional

from deprecation_watch.models import RepoRef


def get_env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_env_str(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    github_token: Optional[str]
    slack_webhook_url: Optional[str]
    issue_repo: RepoRef
    eol_api_base: str = "https://endoflife.date/api"
    horizon_months: int = 6
    request_timeout: float = 15.0
    retry_attempts: int = 3
    log_level: str = "INFO"
    log_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            github_token=get_env_str("PERSONAL_ACCESS_TOKEN"),
            slack_webhook_url=get_env_str("SLACK_WEBHOOK_URL"),
            issue_repo=RepoRef(
                owner=get_env_str("ISSUE_REPO_OWNER") or "dusan-trickovic",
                repo=get_env_str("ISSUE_REPO_NAME") or "automation-tests",
            ),
            eol_api_base=(get_env_str("EOL_API_BASE") or "https://endoflife.date/api").rstrip("/"),
            horizon_months=get_env_int("HORIZON_MONTHS", 6),
            request_timeout=get_env_float("REQUEST_TIMEOUT", 15.0),
            retry_attempts=max(1, get_env_int("RETRY_ATTEMPTS", 3)),
            log_level=(get_env_str("LOG_LEVEL") or "INFO").upper(),
            log_path=get_env_str("LOG_PATH"),
        )
