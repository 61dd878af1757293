"""Tests for the Browser Use actions."""

from unittest.mock import AsyncMock, patch

import pytest

from flashlib.core.errors import ConfigurationError, ProviderError
from flashlib.core.settings import FlashSettings, configure_settings
from flashlib.providers.browser_use import BrowserUseConfig, get_browser_use_actions
from flashlib.providers.browser_use.actions import (
    check_browser_use_balance,
    get_browser_use_task,
    get_browser_use_task_media,
    get_browser_use_task_status,
    list_browser_use_tasks,
    pause_browser_use_task,
    ping_browser_use_api,
    resume_browser_use_task,
    run_browser_use_task,
    stop_browser_use_task,
)
from flashlib.providers.core.http import provider_error

REQUEST = "flashlib.providers.browser_use.actions.request_json"
REQUEST_BYTES = "flashlib.providers.browser_use.actions.request_bytes"
BASE = "https://api.browser-use.com/api/v1"


@pytest.fixture
def config():
    return BrowserUseConfig(api_key="bu-key")


class TestBrowserUseActionSet:
    """Test the factory and configuration."""

    def test_action_names(self):
        assert [action.name for action in get_browser_use_actions()] == [
            "run_browser_use_task",
            "get_browser_use_task",
            "get_browser_use_task_status",
            "get_browser_use_task_media",
            "list_browser_use_tasks",
            "stop_browser_use_task",
            "pause_browser_use_task",
            "resume_browser_use_task",
            "check_browser_use_balance",
            "get_browser_use_user_info",
            "ping_browser_use_api",
        ]

    def test_headers(self, config):
        assert config.headers() == {"Authorization": "Bearer bu-key"}
        assert config.headers(json_body=True)["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_missing_key_raises_before_request(self):
        send = AsyncMock()
        with patch(REQUEST, new=send):
            with pytest.raises(ConfigurationError, match="Browser Use API key not found"):
                await run_browser_use_task(BrowserUseConfig(), {"task": "open example.com"})
        send.assert_not_awaited()


class TestRunTask:
    """Test run_browser_use_task."""

    @pytest.mark.asyncio
    async def test_start_without_waiting(self, config):
        response = {"id": "t1", "status": "created", "live_url": "https://live/t1"}
        with patch(REQUEST, new=AsyncMock(return_value=response)) as send:
            result = await run_browser_use_task(config, {"task": "find the weather"})

        assert result.startswith("Successfully started Browser Use task:\n- Task ID: t1\n- Status: created")
        assert "- Live URL: https://live/t1" in result
        assert result.endswith("use the get_browser_use_task tool with the Task ID.")
        assert send.await_args.args == ("POST", f"{BASE}/run-task")
        assert send.await_args.kwargs["json"] == {"task": "find the weather", "save_browser_data": True}

    @pytest.mark.asyncio
    async def test_empty_response(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={})):
            result = await run_browser_use_task(config, {"task": "x"})
        assert result == "Task started, but no detailed information was returned."

    @pytest.mark.asyncio
    async def test_wait_for_completion(self, config):
        responses = [
            {"id": "t1", "status": "created"},
            "running",
            {"status": "finished"},
            "completed",
            {"id": "t1", "task": "find the weather", "status": "completed", "output": "Sunny, 21C"},
        ]
        with patch(REQUEST, new=AsyncMock(side_effect=responses)) as send:
            result = await run_browser_use_task(config, {"task": "find the weather", "wait_for_completion": True})

        assert "Task Information:\n- Task ID: t1" in result
        assert "Output:\nSunny, 21C" in result
        assert send.await_count == 5

    @pytest.mark.asyncio
    async def test_wait_timeout(self, config):
        configure_settings(FlashSettings(_env_file=None, poll_interval_seconds=0, poll_max_attempts=1))
        responses = [{"id": "t1", "status": "created"}, "running", "running"]
        with patch(REQUEST, new=AsyncMock(side_effect=responses)):
            result = await run_browser_use_task(config, {"task": "x", "wait_for_completion": True})
        assert "Task did not finish in time (status: running)." in result

    @pytest.mark.asyncio
    async def test_error_prefix(self, config):
        error = provider_error("API Error (402): Insufficient credits", "browser_use", "run_task", status=402)
        with patch(REQUEST, new=AsyncMock(side_effect=error)):
            with pytest.raises(ProviderError) as exc_info:
                await run_browser_use_task(config, {"task": "x"})
        assert str(exc_info.value) == "Failed to run Browser Use task: API Error (402): Insufficient credits"


class TestTaskQueries:
    """Test task, status, media and list actions."""

    @pytest.mark.asyncio
    async def test_get_task(self, config):
        task = {
            "id": "t1",
            "task": "x",
            "status": "completed",
            "steps": [{"evaluation_previous_goal": "ok", "next_goal": "done"}],
            "browser_data": {"cookies": [{}, {}]},
        }
        with patch(REQUEST, new=AsyncMock(return_value=task)):
            result = await get_browser_use_task(config, {"task_id": "t1"})
        assert "Steps:\nStep 1:\n- Previous Goal Evaluation: ok\n- Next Goal: done" in result
        assert "- Cookies: 2 cookies stored" in result

    @pytest.mark.asyncio
    async def test_status_string(self, config):
        with patch(REQUEST, new=AsyncMock(return_value="running")):
            assert await get_browser_use_task_status(config, {"task_id": "t1"}) == "Task Status: running"

    @pytest.mark.asyncio
    async def test_status_object(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"status": "paused"})):
            assert await get_browser_use_task_status(config, {"task_id": "t1"}) == "Task Status: paused"

    @pytest.mark.asyncio
    async def test_status_unexpected(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"state": 1})):
            result = await get_browser_use_task_status(config, {"task_id": "t1"})
        assert result == 'Unexpected status response: {"state": 1}'

    @pytest.mark.asyncio
    async def test_media(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"recordings": ["https://rec/1.mp4"]})):
            result = await get_browser_use_task_media(config, {"task_id": "t1"})
        assert result == "Task Media:\nFound 1 recording(s):\n\n1. https://rec/1.mp4\n"

    @pytest.mark.asyncio
    async def test_media_empty(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"recordings": []})):
            result = await get_browser_use_task_media(config, {"task_id": "t1"})
        assert result.endswith("No recordings available for this task.")

    @pytest.mark.asyncio
    async def test_list_tasks(self, config):
        tasks = {"tasks": [{"id": "t1", "task": "a" * 120, "status": "running"}]}
        with patch(REQUEST, new=AsyncMock(return_value=tasks)) as send:
            result = await list_browser_use_tasks(config, {"limit": 10, "status": "running"})

        assert result.startswith("Found 1 tasks:\n\n--- Task 1 ---\nID: t1\n")
        assert f"Description: {'a' * 97}...\n" in result
        assert send.await_args.kwargs["params"] == {"limit": "10", "status": "running"}

    @pytest.mark.asyncio
    async def test_list_tasks_empty(self, config):
        with patch(REQUEST, new=AsyncMock(return_value=[])):
            assert await list_browser_use_tasks(config, {}) == "No tasks found."


class TestTaskControl:
    """Test stop, pause and resume."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "func,command,message",
        [
            (stop_browser_use_task, "stop", "Successfully stopped task t1."),
            (pause_browser_use_task, "pause", "Successfully paused task t1."),
            (resume_browser_use_task, "resume", "Successfully resumed task t1."),
        ],
    )
    async def test_control(self, config, func, command, message):
        with patch(REQUEST, new=AsyncMock(return_value={})) as send:
            assert await func(config, {"task_id": "t1"}) == message
        assert send.await_args.args == ("PUT", f"{BASE}/{command}-task")
        assert send.await_args.kwargs["params"] == {"task_id": "t1"}

    @pytest.mark.asyncio
    async def test_control_error(self, config):
        error = provider_error("API Error (404): Task not found", "browser_use", "stop_task", status=404)
        with patch(REQUEST, new=AsyncMock(side_effect=error)):
            with pytest.raises(ProviderError, match="^Failed to stop task: API Error"):
                await stop_browser_use_task(config, {"task_id": "t1"})


class TestAccount:
    """Test balance, user info and ping."""

    @pytest.mark.asyncio
    async def test_balance(self, config):
        with patch(REQUEST, new=AsyncMock(return_value={"credits": 100, "used_credits": 40, "plan": "pro"})):
            result = await check_browser_use_balance(config, {})
        assert "- Remaining Credits: 60" in result
        assert "- Plan: pro" in result

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b'{"status": "ok"}', b'{"message": "pong"}'])
    async def test_ping_online(self, config, body):
        with patch(REQUEST_BYTES, new=AsyncMock(return_value=body)):
            assert await ping_browser_use_api(config, {}) == "API Status: Online"

    @pytest.mark.asyncio
    async def test_ping_plain_text(self, config):
        with patch(REQUEST_BYTES, new=AsyncMock(return_value=b"pong")):
            assert await ping_browser_use_api(config, {}) == "Ping Response: pong"
