# deprecation_watch/tools.py
from typing import List

from deprecation_watch.models import ManifestLocation, SelectionRule, ToolPolicy

DEFAULT_EOL_API_BASE = "https://endoflife.date/api"


def default_tools(api_base: str = DEFAULT_EOL_API_BASE) -> List[ToolPolicy]:
    """The three tool families evaluated on every run."""
    return [
        ToolPolicy(
            name="Node",
            eol_feed_endpoint=f"{api_base}/node.json",
            manifest=ManifestLocation("actions", "node-versions"),
            # lts: false marks the odd-numbered unstable lines (e.g. v15)
            require_lts=True,
            info_url="https://endoflife.date/nodejs",
        ),
        ToolPolicy(
            name="Python",
            eol_feed_endpoint=f"{api_base}/python.json",
            manifest=ManifestLocation("actions", "python-versions"),
            info_url="https://endoflife.date/python",
        ),
        ToolPolicy(
            name="Go",
            eol_feed_endpoint=f"{api_base}/go.json",
            manifest=ManifestLocation("actions", "go-versions"),
            rule=SelectionRule.GO,
            info_url="https://endoflife.date/go",
        ),
    ]
