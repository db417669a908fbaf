# deprecation_watch/engine/policy.py
from datetime import date, datetime
from typing import Union

import semver
from dateutil.relativedelta import relativedelta

from deprecation_watch.errors import InvalidVersionFormat

DEFAULT_HORIZON_MONTHS = 6

DateLike = Union[date, datetime]


def parse_version(version: str) -> semver.Version:
    try:
        return semver.Version.parse(version)
    except (TypeError, ValueError) as e:
        raise InvalidVersionFormat(version) from e


def compare_versions(a: str, b: str) -> int:
    """Semantic version precedence: -1 if a < b, 0 if equal, 1 if a > b."""
    return parse_version(a).compare(parse_version(b))


def _day(d: DateLike) -> date:
    return d.date() if isinstance(d, datetime) else d


def is_at_or_after(d: DateLike, reference: DateLike) -> bool:
    return _day(d) >= _day(reference)


def add_months(d: DateLike, months: int) -> date:
    # relativedelta clamps to the end of shorter months (Aug 31 + 6 -> Feb 28/29)
    return _day(d) + relativedelta(months=months)


def months_until(d: DateLike, now: DateLike) -> int:
    """Whole calendar months from ``now`` to ``d``, floored. Negative for the past."""
    delta = relativedelta(_day(d), _day(now))
    months = delta.years * 12 + delta.months
    # relativedelta keeps every field on the same sign
    if delta.days < 0:
        months -= 1
    return months


def is_beyond_horizon(d: DateLike, now: DateLike, horizon_months: int = DEFAULT_HORIZON_MONTHS) -> bool:
    """True when ``d`` lies strictly after ``now`` plus ``horizon_months``.

    A date exactly on the horizon is not beyond it, so the warning fires there.
    """
    return _day(d) > add_months(now, horizon_months)
