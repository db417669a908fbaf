# deprecation_watch/engine/composer.py
from datetime import date
from typing import Optional

from deprecation_watch.models import Category, NotificationIntent

# Titles are the dedup key against open issues. Changing a template means
# every already-open issue stops matching and gets filed again.
MISMATCH_TITLE = "[AUTOMATIC MESSAGE] {tool} version `{version}` is not in the manifest"
DEPRECATION_TITLE = "[AUTOMATIC MESSAGE] {tool} version `{version}` is losing support on {eol}"

MISMATCH_BODY = (
    "Hello :wave:\n"
    "The version of {tool} provided by the endoflife.date API is `{version}` "
    "and the one in the manifest is `{manifest}`. Please consider updating the manifest."
)
DEPRECATION_BODY = (
    "Hello :wave:\n"
    "The support for {tool} version `{version}` is ending on {eol}. "
    "Please consider upgrading to a newer version of {tool}."
)


def compose_intent(
    category: Category,
    tool_name: str,
    api_version: str,
    manifest_version: Optional[str] = None,
    eol_date: Optional[date] = None,
) -> NotificationIntent:
    if category is Category.MANIFEST_MISMATCH:
        return NotificationIntent(
            title=MISMATCH_TITLE.format(tool=tool_name, version=api_version),
            body=MISMATCH_BODY.format(tool=tool_name, version=api_version, manifest=manifest_version or "none"),
            category=category,
        )

    if eol_date is None:
        raise ValueError("A deprecation notice needs an EOL date")
    eol = eol_date.isoformat()
    return NotificationIntent(
        title=DEPRECATION_TITLE.format(tool=tool_name, version=api_version, eol=eol),
        body=DEPRECATION_BODY.format(tool=tool_name, version=api_version, eol=eol),
        category=category,
    )
