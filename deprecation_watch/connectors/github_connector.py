# deprecation_watch/connectors/github_connector.py
import base64
import json
import logging
import math
from typing import List, Optional

import requests
from github import Auth, Github, GithubException, UnknownObjectException

from deprecation_watch.connectors.retry import read_retrying
from deprecation_watch.errors import ManifestUnavailable, TrackerUnavailable
from deprecation_watch.models import ManifestEntry, ManifestLocation

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (GithubException, requests.RequestException)


def create_github_client(token: Optional[str], timeout: float = 15.0) -> Github:
    # PyGithub only accepts whole seconds. Its own retry would also replay
    # issue creation, so it is disabled.
    seconds = max(1, int(math.ceil(timeout)))
    if token:
        return Github(auth=Auth.Token(token), timeout=seconds, retry=None)
    logger.warning("PERSONAL_ACCESS_TOKEN is not set, GitHub calls are unauthenticated")
    return Github(timeout=seconds, retry=None)


class ManifestConnector:
    def __init__(self, client: Github, attempts: int = 3):
        self.client = client
        self.attempts = attempts

    def _read_encoded(self, location: ManifestLocation) -> str:
        repo = self.client.get_repo(f"{location.owner}/{location.repo}")
        contents = repo.get_contents(location.path)
        if isinstance(contents, list):
            raise ManifestUnavailable(f"{location.path} in {location.owner}/{location.repo} is a directory")
        if contents.encoding == "base64" and contents.content:
            return contents.content
        # Files above 1 MB come back from the contents API without inline content.
        return repo.get_git_blob(contents.sha).content

    def fetch_manifest(self, location: ManifestLocation) -> List[ManifestEntry]:
        source = f"{location.owner}/{location.repo}/{location.path}"
        try:
            for attempt in read_retrying(self.attempts):
                with attempt:
                    encoded = self._read_encoded(location)
        except TRANSPORT_ERRORS as e:
            raise ManifestUnavailable(f"Could not read {source}: {e}") from e

        try:
            data = json.loads(base64.b64decode(encoded).decode("utf-8"))
            return [ManifestEntry.from_json(item) for item in data]
        except (ValueError, TypeError, KeyError) as e:
            raise ManifestUnavailable(f"Could not decode {source}: {e}") from e


class IssueConnector:
    def __init__(self, client: Github, attempts: int = 3):
        self.client = client
        self.attempts = attempts

    def _find(self, owner: str, repo: str, title: str):
        gh_repo = self.client.get_repo(f"{owner}/{repo}")
        for issue in gh_repo.get_issues(state="open"):
            if issue.pull_request is None and issue.title == title:
                return issue
        return None

    def find_open_issue_by_title(self, owner: str, repo: str, title: str):
        """Return the open issue carrying exactly ``title``, or None.

        Only an explicit 404 counts as "not found". Any other failure raises
        TrackerUnavailable so a broken listing never turns into a duplicate.
        """
        try:
            for attempt in read_retrying(self.attempts):
                with attempt:
                    found = self._find(owner, repo, title)
        except UnknownObjectException:
            logger.warning("repo=%s/%s not found while listing issues", owner, repo)
            return None
        except TRANSPORT_ERRORS as e:
            raise TrackerUnavailable(f"Could not list issues in {owner}/{repo}: {e}") from e
        return found

    def create_issue(self, owner: str, repo: str, title: str, body: str, labels: List[str]):
        logger.warning("Creating an issue in the %s/%s repo: %s", owner, repo, title)
        try:
            gh_repo = self.client.get_repo(f"{owner}/{repo}")
            return gh_repo.create_issue(title=title, body=body, labels=labels)
        except TRANSPORT_ERRORS as e:
            raise TrackerUnavailable(f"Error while creating an issue in {owner}/{repo}: {e}") from e
