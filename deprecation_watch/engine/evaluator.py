# deprecation_watch/engine/evaluator.py
import logging
from datetime import date
from typing import Callable

from deprecation_watch.connectors.eol_connector import EolConnector
from deprecation_watch.connectors.github_connector import IssueConnector, ManifestConnector
from deprecation_watch.connectors.slack_connector import SlackNotifier
from deprecation_watch.engine.composer import compose_intent
from deprecation_watch.engine.policy import DEFAULT_HORIZON_MONTHS, compare_versions, is_beyond_horizon, months_until
from deprecation_watch.engine.selection import deadline_for, reference_entry, select_version
from deprecation_watch.errors import DeprecationWatchError, NotificationDeliveryFailed
from deprecation_watch.models import (
    Category,
    EvaluationResult,
    NotificationIntent,
    Outcome,
    RepoRef,
    Stage,
    ToolPolicy,
)

logger = logging.getLogger(__name__)


class DeprecationEngine:
    """Decides, for one tool family at a time, whether an issue should be filed.

    Every collaborator is passed in, so tests can hand over fakes that expose
    the same methods as the real connectors.
    """

    def __init__(
        self,
        feed_conn: EolConnector,
        manifest_conn: ManifestConnector,
        issue_conn: IssueConnector,
        notifier: SlackNotifier,
        issue_repo: RepoRef,
        horizon_months: int = DEFAULT_HORIZON_MONTHS,
        today: Callable[[], date] = date.today,
    ):
        self.feed_conn = feed_conn
        self.manifest_conn = manifest_conn
        self.issue_conn = issue_conn
        self.notifier = notifier
        self.issue_repo = issue_repo
        self.horizon_months = horizon_months
        self.today = today

    def evaluate(self, policy: ToolPolicy) -> EvaluationResult:
        result = EvaluationResult(tool=policy.name, outcome=Outcome.FAILED, stage=Stage.START)
        try:
            self._evaluate(policy, result)
        except DeprecationWatchError as e:
            logger.error("tool=%s stage=%s outcome=failed error=%s", policy.name, result.stage.value, e)
            result.outcome = Outcome.FAILED
            result.error = e
        except Exception as e:
            logger.exception("tool=%s stage=%s outcome=failed unexpected error", policy.name, result.stage.value)
            result.outcome = Outcome.FAILED
            result.error = e
        return result

    def _evaluate(self, policy: ToolPolicy, result: EvaluationResult) -> None:
        today = self.today()

        records = self.feed_conn.fetch_eol_feed(policy.eol_feed_endpoint)
        result.stage = Stage.FEED_FETCHED
        version = select_version(policy, records, today)
        result.version = version.latest
        logger.info("tool=%s version=%s cycle=%s eol=%s", policy.name, version.latest, version.cycle,
                    version.eol.isoformat() if version.eol else "none")
        if policy.info_url:
            logger.info("tool=%s For more info on %s versions, please visit: %s", policy.name, policy.name, policy.info_url)

        entries = self.manifest_conn.fetch_manifest(policy.manifest)
        result.stage = Stage.MANIFEST_FETCHED
        reference = reference_entry(entries, version)
        manifest_version = reference.version if reference else None

        if manifest_version is None or compare_versions(manifest_version, version.latest) != 0:
            result.stage = Stage.MISMATCH_PATH
            logger.warning("tool=%s manifest=mismatch api_version=%s manifest_version=%s",
                           policy.name, version.latest, manifest_version or "none")
            intent = compose_intent(Category.MANIFEST_MISMATCH, policy.name, version.latest,
                                    manifest_version=manifest_version)
            self._notify(intent, result)
            return

        result.stage = Stage.POLICY_PATH
        logger.info("tool=%s manifest=match version=%s. Checking the EOL support date...", policy.name, version.latest)

        deadline = deadline_for(policy, version)
        months_left = months_until(deadline, today)
        if is_beyond_horizon(deadline, today, self.horizon_months):
            logger.info("tool=%s horizon=beyond deadline=%s months_left=%d outcome=%s",
                        policy.name, deadline.isoformat(), months_left, Outcome.NO_ACTION_NEEDED.value)
            result.outcome = Outcome.NO_ACTION_NEEDED
            return

        logger.warning("tool=%s horizon=within deadline=%s months_left=%d",
                       policy.name, deadline.isoformat(), months_left)
        intent = compose_intent(Category.DEPRECATION_NOTICE, policy.name, version.latest, eol_date=deadline)
        self._notify(intent, result)

    def _notify(self, intent: NotificationIntent, result: EvaluationResult) -> None:
        result.intent = intent
        result.stage = Stage.NOTIFYING
        owner, repo = self.issue_repo.owner, self.issue_repo.repo

        existing = self.issue_conn.find_open_issue_by_title(owner, repo, intent.title)
        if existing is not None:
            logger.info("tool=%s dedup=duplicate title=%r outcome=%s",
                        result.tool, intent.title, Outcome.NOTIFY_SKIPPED_DUPLICATE.value)
            result.outcome = Outcome.NOTIFY_SKIPPED_DUPLICATE
            return

        self.issue_conn.create_issue(owner, repo, intent.title, intent.body, intent.labels)
        logger.info("tool=%s dedup=new outcome=%s Successfully created an issue for %s version %s.",
                    result.tool, Outcome.NOTIFY_CREATED.value, result.tool, result.version)
        result.outcome = Outcome.NOTIFY_CREATED

        try:
            status = self.notifier.send(intent.body)
            logger.info("tool=%s chat=%s", result.tool, status.value)
        except NotificationDeliveryFailed as e:
            logger.warning("tool=%s chat=failed error=%s", result.tool, e)
