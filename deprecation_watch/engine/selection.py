# deprecation_watch/engine/selection.py
import logging
from datetime import date
from typing import List, Optional, Sequence

from deprecation_watch.engine.policy import add_months, is_at_or_after, parse_version
from deprecation_watch.errors import FeedUnavailable, InvalidVersionFormat, NoSupportedVersion
from deprecation_watch.models import ManifestEntry, SelectionRule, ToolPolicy, VersionRecord

logger = logging.getLogger(__name__)

# Go supports a major release until two newer ones exist; the release date of
# the second-newest line plus this many months stands in for its EOL.
GO_SUPPORT_PROXY_MONTHS = 6


def supported_records(records: Sequence[VersionRecord], today: date, require_lts: bool = False) -> List[VersionRecord]:
    """Records still supported today, soonest-expiring first."""
    kept = [
        r for r in records
        if r.eol is not None
        and is_at_or_after(r.eol, today)
        and not (require_lts and r.lts is False)
    ]
    kept.reverse()
    return kept


def select_version(policy: ToolPolicy, records: Sequence[VersionRecord], today: date) -> VersionRecord:
    if policy.rule is SelectionRule.GO:
        if len(records) < 2:
            raise NoSupportedVersion(f"{policy.name} feed has {len(records)} release(s), need at least 2")
        return records[1]

    candidates = supported_records(records, today, require_lts=policy.require_lts)
    if not candidates:
        raise NoSupportedVersion(f"No supported {policy.name} release found in the EOL feed")
    return candidates[0]


def deadline_for(policy: ToolPolicy, record: VersionRecord) -> date:
    if policy.rule is SelectionRule.GO:
        if record.latest_release_date is None:
            raise FeedUnavailable(f"{policy.name} {record.latest} has no latestReleaseDate")
        return add_months(record.latest_release_date, GO_SUPPORT_PROXY_MONTHS)
    return record.eol


def in_release_line(version: str, cycle: str) -> bool:
    if not cycle:
        return True
    return version == cycle or version.startswith(cycle + ".") or version.startswith(cycle + "-")


def reference_entry(entries: Sequence[ManifestEntry], record: VersionRecord) -> Optional[ManifestEntry]:
    """Newest manifest entry of the record's release line.

    Falls back to the newest entry overall when the line is missing entirely,
    so a mismatch still reports what the manifest does carry. Entries that are
    not semver (old "1.21rc1" style tags) are skipped.
    """
    newest_first = list(reversed(entries))
    if not newest_first:
        return None

    parsed = []
    for e in newest_first:
        try:
            parsed.append((parse_version(e.version), e))
        except InvalidVersionFormat:
            logger.debug("Skipping non-semver manifest entry %r", e.version)
    if not parsed:
        raise InvalidVersionFormat(newest_first[0].version)

    same_line = [(v, e) for v, e in parsed if in_release_line(e.version, record.cycle)]
    pool = same_line or parsed
    return max(pool, key=lambda pair: pair[0])[1]
