"""
Repeat one application across several ``domain`` query values.
"""
import json
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence
from loguru import logger

from .application_submitter import ApplicationSubmitter, error_record, is_error
from .payload import ApplicationPayload


@dataclass
class SweepOutcome:
    """Result of one sweep iteration."""
    domain: str
    result: Any

    @property
    def succeeded(self) -> bool:
        return not is_error(self.result)


class DomainSweepRunner:
    """Submits the same application once per candidate domain, in order."""

    def __init__(self, submitter: ApplicationSubmitter, job_id: str,
                 payload_factory: Callable[[], ApplicationPayload],
                 domains: Sequence[str]):
        self.submitter = submitter
        self.job_id = job_id
        self.payload_factory = payload_factory
        self.domains = list(domains)

    def run(self) -> List[SweepOutcome]:
        outcomes = []

        for i, domain in enumerate(self.domains):
            label = domain or 'EMPTY'
            logger.info(f"--- Testing with domain: \"{label}\" ({i + 1}/{len(self.domains)}) ---")
            try:
                result = self.submitter.submit(self.job_id, self.payload_factory(), domain=domain)
            except Exception as e:
                logger.error(f"Submission with domain \"{label}\" failed: {e}")
                result = error_record(None, str(e))

            logger.info(f"Result with domain \"{label}\": {json.dumps(result, indent=2, default=str)}")
            outcomes.append(SweepOutcome(domain=domain, result=result))

        succeeded = sum(1 for o in outcomes if o.succeeded)
        logger.info(f"Domain sweep completed: {succeeded}/{len(outcomes)} submissions succeeded")
        return outcomes
