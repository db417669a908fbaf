# deprecation_watch/connectors/retry.py
import logging

import requests
from github import GithubException
from tenacity import Retrying, before_sleep_log, retry_if_exception, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)


def is_transient(exc: BaseException) -> bool:
    """Connection problems, timeouts and 5xx answers are worth another try."""
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code >= 500
    if isinstance(exc, GithubException):
        return exc.status is not None and exc.status >= 500
    return False


def read_retrying(attempts: int) -> Retrying:
    # Only for idempotent reads. Writes go out exactly once.
    return Retrying(
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential(multiplier=0.5, max=4),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
