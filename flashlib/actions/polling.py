"""Fixed-interval polling for asynchronous provider jobs.

Video renders and browser tasks are submitted, then their status is polled
until it reaches a terminal value. The poller never raises: a failing status
request counts as "still in progress", and exhaustion yields either the last
status observed by one final check or a synthetic ``unknown`` status.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, FrozenSet, Iterable, List, Optional

from flashlib.core.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_STATUSES: FrozenSet[str] = frozenset({"completed", "failed"})

UNKNOWN_STATUS: Dict[str, Any] = {
    "status": "unknown",
    "error": "Exceeded maximum wait time and could not retrieve status",
}

StatusFetcher = Callable[[str], Awaitable[Dict[str, Any]]]
Sleeper = Callable[[float], Awaitable[Any]]


class PollOutcome(str, Enum):
    """What a single poll attempt observed."""

    TERMINAL = "terminal"
    IN_PROGRESS = "in_progress"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class PollAttempt:
    """Record of one status fetch."""

    number: int
    outcome: PollOutcome
    status: Optional[str] = None
    error: Optional[str] = None


@dataclass
class PollResult:
    """Final payload of a poll together with the attempts that produced it."""

    payload: Dict[str, Any]
    attempts: List[PollAttempt] = field(default_factory=list)
    exhausted: bool = False

    @property
    def status(self) -> Optional[str]:
        return self.payload.get("status")


class JobPoller:
    """Polls a job status function until a terminal status is reached.

    Args:
        fetch_status: Coroutine returning the status payload for a job id
        terminal_statuses: Status values that end polling
        interval: Seconds to wait between attempts
        max_attempts: Number of polling attempts before the final check
        max_consecutive_errors: Stop early after this many consecutive fetch
            errors; ``None`` disables the limit
        status_key: Key holding the status value in the payload
        sleep: Awaitable sleep function
    """

    def __init__(
        self,
        fetch_status: StatusFetcher,
        *,
        terminal_statuses: Iterable[str] = DEFAULT_TERMINAL_STATUSES,
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        max_consecutive_errors: Optional[int] = None,
        status_key: str = "status",
        sleep: Sleeper = asyncio.sleep,
    ):
        settings = get_settings()
        self.fetch_status = fetch_status
        self.terminal_statuses = frozenset(terminal_statuses)
        self.interval = settings.poll_interval_seconds if interval is None else interval
        self.max_attempts = settings.poll_max_attempts if max_attempts is None else max_attempts
        self.max_consecutive_errors = max_consecutive_errors
        self.status_key = status_key
        self._sleep = sleep

    def _status_of(self, payload: Any) -> Optional[str]:
        if not isinstance(payload, dict):
            return None
        status = payload.get(self.status_key)
        return status if isinstance(status, str) else None

    def _classify(self, payload: Any) -> PollOutcome:
        if self._status_of(payload) in self.terminal_statuses:
            return PollOutcome.TERMINAL
        return PollOutcome.IN_PROGRESS

    async def poll(self, job_id: str) -> PollResult:
        """Poll ``job_id`` until it is terminal or attempts run out."""
        attempts: List[PollAttempt] = []
        consecutive_errors = 0

        for number in range(1, self.max_attempts + 1):
            try:
                payload = await self.fetch_status(job_id)
            except Exception as e:
                consecutive_errors += 1
                attempts.append(PollAttempt(number, PollOutcome.TRANSIENT_ERROR, error=str(e)))
                logger.warning(f"Status check {number} for job {job_id} failed: {e}")
                if (
                    self.max_consecutive_errors is not None
                    and consecutive_errors >= self.max_consecutive_errors
                ):
                    logger.warning(
                        f"Giving up on job {job_id} after {consecutive_errors} consecutive errors"
                    )
                    break
                await self._sleep(self.interval)
                continue

            consecutive_errors = 0
            outcome = self._classify(payload)
            status = self._status_of(payload)
            attempts.append(PollAttempt(number, outcome, status=status))
            logger.debug(f"Job {job_id} attempt {number}: {status}")
            if outcome is PollOutcome.TERMINAL:
                return PollResult(payload=payload, attempts=attempts)
            await self._sleep(self.interval)

        return await self._final_check(job_id, attempts)

    async def _final_check(self, job_id: str, attempts: List[PollAttempt]) -> PollResult:
        number = len(attempts) + 1
        try:
            payload = await self.fetch_status(job_id)
        except Exception as e:
            attempts.append(PollAttempt(number, PollOutcome.TRANSIENT_ERROR, error=str(e)))
            logger.warning(f"Final status check for job {job_id} failed: {e}")
            return PollResult(payload=dict(UNKNOWN_STATUS), attempts=attempts, exhausted=True)

        status = self._status_of(payload)
        attempts.append(PollAttempt(number, self._classify(payload), status=status))
        if not isinstance(payload, dict):
            payload = {"status": status, "result": payload}
        return PollResult(payload=payload, attempts=attempts, exhausted=True)


async def wait_for_job(
    fetch_status: StatusFetcher,
    job_id: str,
    *,
    terminal_statuses: Iterable[str] = DEFAULT_TERMINAL_STATUSES,
    interval: Optional[float] = None,
    max_attempts: Optional[int] = None,
    max_consecutive_errors: Optional[int] = None,
    sleep: Sleeper = asyncio.sleep,
) -> Dict[str, Any]:
    """Poll a job and return its final status payload. Never raises.

    Returns:
        The terminal payload, the payload seen by the final check after the
        attempts ran out, or the ``unknown`` status if that check failed
    """
    poller = JobPoller(
        fetch_status,
        terminal_statuses=terminal_statuses,
        interval=interval,
        max_attempts=max_attempts,
        max_consecutive_errors=max_consecutive_errors,
        sleep=sleep,
    )
    result = await poller.poll(job_id)
    return result.payload
