import pytest

from deprecation_watch.connectors.slack_connector import DeliveryStatus
from deprecation_watch.engine.evaluator import DeprecationEngine
from deprecation_watch.errors import ManifestUnavailable
from deprecation_watch.models import ManifestEntry, RepoRef, VersionRecord
from deprecation_watch.tools import default_tools

ISSUE_REPO = RepoRef("octo-org", "runtime-tracking")


class FakeFeed:
    def __init__(self, feeds):
        self.feeds = feeds
        self.calls = []

    def fetch_eol_feed(self, endpoint):
        self.calls.append(endpoint)
        return [VersionRecord.from_api(item) for item in self.feeds[endpoint]]


class FakeManifests:
    def __init__(self, manifests, broken=()):
        self.manifests = manifests
        self.broken = set(broken)

    def fetch_manifest(self, location):
        if location.repo in self.broken:
            raise ManifestUnavailable(f"Could not read {location.owner}/{location.repo}")
        return [ManifestEntry(version=v) for v in self.manifests[location.repo]]


class FakeIssue:
    def __init__(self, title):
        self.title = title


class FakeTracker:
    def __init__(self, open_titles=()):
        self.open = [FakeIssue(t) for t in open_titles]
        self.created = []
        self.lookups = []

    def find_open_issue_by_title(self, owner, repo, title):
        self.lookups.append((owner, repo, title))
        for issue in self.open:
            if issue.title == title:
                return issue
        return None

    def create_issue(self, owner, repo, title, body, labels):
        self.created.append({"owner": owner, "repo": repo, "title": title, "body": body, "labels": labels})
        issue = FakeIssue(title)
        self.open.append(issue)
        return issue


class FakeNotifier:
    def __init__(self):
        self.sent = []

    def send(self, text):
        self.sent.append(text)
        return DeliveryStatus.SENT


@pytest.fixture
def tools():
    node, python, go = default_tools()
    return {"Node": node, "Python": python, "Go": go}


@pytest.fixture
def tracker():
    return FakeTracker()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def make_engine(tracker, notifier):
    def _make(feeds, manifests, today, broken=(), horizon_months=6):
        return DeprecationEngine(
            feed_conn=FakeFeed(feeds),
            manifest_conn=FakeManifests(manifests, broken=broken),
            issue_conn=tracker,
            notifier=notifier,
            issue_repo=ISSUE_REPO,
            horizon_months=horizon_months,
            today=lambda: today,
        )

    return _make
