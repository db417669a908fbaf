# deprecation_watch/cli.py
import logging
import sys

from dotenv import load_dotenv

from deprecation_watch.config import Settings
from deprecation_watch.connectors.eol_connector import EolConnector
from deprecation_watch.connectors.github_connector import IssueConnector, ManifestConnector, create_github_client
from deprecation_watch.connectors.slack_connector import SlackNotifier
from deprecation_watch.engine.evaluator import DeprecationEngine
from deprecation_watch.engine.runner import run_all
from deprecation_watch.log_setup import setup_logger
from deprecation_watch.tools import default_tools

load_dotenv()

logger = logging.getLogger("deprecation_watch")


def build_engine(settings: Settings) -> DeprecationEngine:
    github = create_github_client(settings.github_token, timeout=settings.request_timeout)
    return DeprecationEngine(
        feed_conn=EolConnector(timeout=settings.request_timeout, attempts=settings.retry_attempts),
        manifest_conn=ManifestConnector(github, attempts=settings.retry_attempts),
        issue_conn=IssueConnector(github, attempts=settings.retry_attempts),
        notifier=SlackNotifier(settings.slack_webhook_url, timeout=settings.request_timeout),
        issue_repo=settings.issue_repo,
        horizon_months=settings.horizon_months,
    )


def main() -> int:
    settings = Settings.from_env()
    setup_logger(settings.log_level, settings.log_path)

    logger.info("=== Runtime deprecation check, issues go to %s ===", settings.issue_repo)
    report = run_all(build_engine(settings), default_tools(settings.eol_api_base))

    if not report.ok:
        names = ", ".join(r.tool for r in report.failed)
        logger.error("Run failed for: %s", names)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
