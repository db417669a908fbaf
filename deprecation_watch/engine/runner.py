# deprecation_watch/engine/runner.py
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Sequence

from deprecation_watch.engine.evaluator import DeprecationEngine
from deprecation_watch.models import EvaluationResult, Outcome, Stage, ToolPolicy

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    results: List[EvaluationResult] = field(default_factory=list)

    @property
    def failed(self) -> List[EvaluationResult]:
        return [r for r in self.results if r.failed]

    @property
    def ok(self) -> bool:
        return not self.failed


def run_all(engine: DeprecationEngine, tools: Sequence[ToolPolicy]) -> RunReport:
    """Evaluate every tool concurrently and wait for all of them.

    One tool failing never cancels the others; the report lists every outcome
    in the order the tools were given.
    """
    results: List[EvaluationResult] = [None] * len(tools)
    with ThreadPoolExecutor(max_workers=max(1, len(tools)), thread_name_prefix="evaluate") as executor:
        future_to_idx = {executor.submit(engine.evaluate, tool): idx for idx, tool in enumerate(tools)}
        for future in as_completed(future_to_idx):
            idx = future_to_idx[future]
            tool = tools[idx]
            try:
                results[idx] = future.result()
            except Exception as e:
                logger.exception("tool=%s outcome=failed unexpected error", tool.name)
                results[idx] = EvaluationResult(tool=tool.name, outcome=Outcome.FAILED, stage=Stage.START, error=e)

    report = RunReport(results=results)
    for r in report.results:
        logger.info("tool=%s outcome=%s version=%s", r.tool, r.outcome.value, r.version or "n/a")
    return report
