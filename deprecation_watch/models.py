# deprecation_watch/models.py
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Union


def parse_feed_date(value) -> Optional[date]:
    # endoflife.date uses booleans for "no announced date"
    if value is None or isinstance(value, bool):
        return None
    return date.fromisoformat(str(value)[:10])


@dataclass(frozen=True)
class VersionRecord:
    cycle: str
    latest: str
    eol: Optional[date] = None
    latest_release_date: Optional[date] = None
    lts: Union[bool, str, None] = None

    @classmethod
    def from_api(cls, item: dict) -> "VersionRecord":
        return cls(
            cycle=str(item.get("cycle", "")),
            latest=str(item["latest"]),
            eol=parse_feed_date(item.get("eol")),
            latest_release_date=parse_feed_date(item.get("latestReleaseDate")),
            lts=item.get("lts"),
        )


@dataclass(frozen=True)
class ManifestEntry:
    version: str
    stable: Optional[bool] = None

    @classmethod
    def from_json(cls, item: dict) -> "ManifestEntry":
        return cls(version=str(item["version"]), stable=item.get("stable"))


@dataclass(frozen=True)
class RepoRef:
    owner: str
    repo: str

    def __str__(self):
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class ManifestLocation:
    owner: str
    repo: str
    path: str = "versions-manifest.json"


class SelectionRule(Enum):
    STANDARD = "standard"
    GO = "go"


@dataclass(frozen=True)
class ToolPolicy:
    name: str
    eol_feed_endpoint: str
    manifest: ManifestLocation
    rule: SelectionRule = SelectionRule.STANDARD
    require_lts: bool = False
    info_url: Optional[str] = None


class Category(Enum):
    MANIFEST_MISMATCH = "manifest-version-mismatch"
    DEPRECATION_NOTICE = "deprecation-notice"


@dataclass(frozen=True)
class NotificationIntent:
    title: str
    body: str
    category: Category

    @property
    def labels(self) -> List[str]:
        return [self.category.value]


class Stage(Enum):
    START = "start"
    FEED_FETCHED = "feed-fetched"
    MANIFEST_FETCHED = "manifest-fetched"
    MISMATCH_PATH = "mismatch-path"
    POLICY_PATH = "policy-path"
    NOTIFYING = "notifying"


class Outcome(Enum):
    NOTIFY_CREATED = "notify-created"
    NOTIFY_SKIPPED_DUPLICATE = "notify-skipped-duplicate"
    NO_ACTION_NEEDED = "no-action-needed"
    FAILED = "failed"


@dataclass
class EvaluationResult:
    tool: str
    outcome: Outcome
    stage: Stage
    version: Optional[str] = None
    intent: Optional[NotificationIntent] = None
    error: Optional[BaseException] = field(default=None, repr=False)

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.FAILED
