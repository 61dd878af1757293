"""Tests for the async job poller."""

from unittest.mock import AsyncMock

import pytest

from flashlib.actions.polling import UNKNOWN_STATUS, JobPoller, PollOutcome, wait_for_job
from flashlib.core.settings import FlashSettings, configure_settings


def fetcher(*responses):
    """AsyncMock returning (or raising) each response in turn."""
    return AsyncMock(side_effect=list(responses))


class TestJobPollerDefaults:
    """Test defaults taken from the shared settings."""

    def test_defaults(self):
        configure_settings(FlashSettings(_env_file=None))
        poller = JobPoller(AsyncMock())
        assert poller.max_attempts == 60
        assert poller.interval == 5.0
        assert poller.terminal_statuses == frozenset({"completed", "failed"})
        assert poller.max_consecutive_errors is None

    def test_explicit_values(self):
        poller = JobPoller(AsyncMock(), terminal_statuses=["done"], interval=1, max_attempts=3)
        assert poller.terminal_statuses == frozenset({"done"})
        assert poller.interval == 1
        assert poller.max_attempts == 3


class TestJobPoller:
    """Test polling behaviour."""

    @pytest.mark.asyncio
    async def test_returns_first_terminal_status(self):
        fetch = fetcher({"status": "processing"}, {"status": "completed", "video_url": "u"})
        sleep = AsyncMock()
        result = await JobPoller(fetch, interval=5, max_attempts=10, sleep=sleep).poll("job")

        assert result.payload == {"status": "completed", "video_url": "u"}
        assert result.status == "completed"
        assert not result.exhausted
        assert [a.outcome for a in result.attempts] == [PollOutcome.IN_PROGRESS, PollOutcome.TERMINAL]
        fetch.assert_awaited_with("job")
        sleep.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_failed_is_terminal(self):
        fetch = fetcher({"status": "failed", "error": "bad input"})
        result = await JobPoller(fetch, max_attempts=5).poll("job")
        assert result.payload["error"] == "bad input"
        assert fetch.await_count == 1

    @pytest.mark.asyncio
    async def test_fetch_error_counts_as_in_progress(self):
        fetch = fetcher(RuntimeError("timeout"), {"status": "completed"})
        result = await JobPoller(fetch, max_attempts=5).poll("job")

        assert result.status == "completed"
        assert result.attempts[0].outcome is PollOutcome.TRANSIENT_ERROR
        assert result.attempts[0].error == "timeout"

    @pytest.mark.asyncio
    async def test_exhaustion_performs_one_final_fetch(self):
        fetch = fetcher(*[{"status": "processing"}] * 3, {"status": "processing", "progress": 90})
        sleep = AsyncMock()
        result = await JobPoller(fetch, interval=2, max_attempts=3, sleep=sleep).poll("job")

        assert fetch.await_count == 4
        assert sleep.await_count == 3
        assert result.exhausted
        assert result.payload == {"status": "processing", "progress": 90}

    @pytest.mark.asyncio
    async def test_final_fetch_failure_yields_unknown(self):
        fetch = fetcher(*[RuntimeError("down")] * 4)
        result = await JobPoller(fetch, max_attempts=3).poll("job")

        assert result.payload == UNKNOWN_STATUS
        assert result.exhausted
        assert len(result.attempts) == 4
        assert all(a.outcome is PollOutcome.TRANSIENT_ERROR for a in result.attempts)

    @pytest.mark.asyncio
    async def test_unknown_payload_is_a_copy(self):
        fetch = fetcher(RuntimeError("down"), RuntimeError("down"))
        result = await JobPoller(fetch, max_attempts=1).poll("job")
        result.payload["status"] = "changed"
        assert UNKNOWN_STATUS["status"] == "unknown"

    @pytest.mark.asyncio
    async def test_consecutive_error_limit(self):
        fetch = fetcher(RuntimeError("a"), RuntimeError("b"), {"status": "processing"})
        result = await JobPoller(fetch, max_attempts=10, max_consecutive_errors=2).poll("job")

        # two failed attempts, then the final check
        assert fetch.await_count == 3
        assert result.exhausted
        assert result.payload == {"status": "processing"}

    @pytest.mark.asyncio
    async def test_error_streak_resets_on_success(self):
        fetch = fetcher(
            RuntimeError("a"), {"status": "processing"}, RuntimeError("b"), {"status": "completed"}
        )
        result = await JobPoller(fetch, max_attempts=10, max_consecutive_errors=2).poll("job")
        assert result.status == "completed"
        assert not result.exhausted

    @pytest.mark.asyncio
    async def test_custom_terminal_statuses(self):
        fetch = fetcher({"status": "completed"}, {"status": "stopped"})
        result = await JobPoller(fetch, terminal_statuses={"stopped"}, max_attempts=5).poll("task")
        assert result.status == "stopped"
        assert fetch.await_count == 2

    @pytest.mark.asyncio
    async def test_custom_status_key(self):
        fetch = fetcher({"state": "completed"})
        result = await JobPoller(fetch, status_key="state", max_attempts=5).poll("job")
        assert result.attempts[0].outcome is PollOutcome.TERMINAL
        assert result.attempts[0].status == "completed"

    @pytest.mark.asyncio
    async def test_two_running_then_completed(self):
        fetch = fetcher({"status": "running"}, {"status": "running"}, {"status": "completed"})
        sleep = AsyncMock()
        result = await JobPoller(fetch, interval=5, max_attempts=10, sleep=sleep).poll("job")

        assert result.status == "completed"
        assert fetch.await_count == 3
        assert sleep.await_count == 2
        assert [call.args for call in sleep.await_args_list] == [(5,), (5,)]

    @pytest.mark.asyncio
    async def test_unhashable_status_is_in_progress(self):
        fetch = AsyncMock(return_value={"status": {"state": "running"}})
        result = await JobPoller(fetch, max_attempts=2, interval=0).poll("job")

        assert result.exhausted
        assert fetch.await_count == 3
        assert all(a.outcome is PollOutcome.IN_PROGRESS for a in result.attempts)
        assert all(a.status is None for a in result.attempts)
        assert result.payload == {"status": {"state": "running"}}

    @pytest.mark.asyncio
    async def test_list_status_never_raises(self):
        fetch = AsyncMock(return_value={"status": ["completed"]})
        payload = await wait_for_job(fetch, "job", max_attempts=1, interval=0)
        assert payload == {"status": ["completed"]}

    @pytest.mark.asyncio
    async def test_non_dict_payload_is_in_progress(self):
        fetch = fetcher("processing", "processing")
        result = await JobPoller(fetch, max_attempts=1).poll("job")
        assert result.attempts[0].outcome is PollOutcome.IN_PROGRESS
        assert result.payload == {"status": None, "result": "processing"}


class TestWaitForJob:
    """Test the wait_for_job convenience function."""

    @pytest.mark.asyncio
    async def test_returns_payload(self):
        fetch = fetcher({"status": "completed", "id": "v1"})
        assert await wait_for_job(fetch, "v1") == {"status": "completed", "id": "v1"}

    @pytest.mark.asyncio
    async def test_never_raises(self):
        fetch = AsyncMock(side_effect=RuntimeError("down"))
        payload = await wait_for_job(fetch, "v1", max_attempts=2, interval=0)
        assert payload == UNKNOWN_STATUS
        assert fetch.await_count == 3

    @pytest.mark.asyncio
    async def test_uses_settings_max_attempts(self):
        configure_settings(FlashSettings(_env_file=None, poll_interval_seconds=0, poll_max_attempts=2))
        fetch = AsyncMock(return_value={"status": "processing"})
        await wait_for_job(fetch, "v1")
        assert fetch.await_count == 3
