"""Browser Use task automation actions."""

import json
import logging
from typing import Any, Dict, List, Optional

from flashlib.actions.base import Action, bind_config
from flashlib.actions.polling import wait_for_job
from flashlib.core.errors import ProviderError
from flashlib.providers.core.http import parse_record, query_params, request_bytes, request_json

from .config import BrowserUseConfig
from .models import (
    TERMINAL_TASK_STATUSES,
    Balance,
    ListTasksParams,
    NoParams,
    RunTaskParams,
    Task,
    TaskIdParams,
    UserInfo,
)
from .prompts import (
    CHECK_BALANCE_PROMPT,
    GET_TASK_MEDIA_PROMPT,
    GET_TASK_PROMPT,
    GET_TASK_STATUS_PROMPT,
    GET_USER_INFO_PROMPT,
    LIST_TASKS_PROMPT,
    PAUSE_TASK_PROMPT,
    PING_PROMPT,
    RESUME_TASK_PROMPT,
    RUN_TASK_PROMPT,
    STOP_TASK_PROMPT,
)

logger = logging.getLogger(__name__)

PROVIDER = "browser_use"


async def _get(config: BrowserUseConfig, path: str, operation: str, params=None) -> Any:
    return await request_json(
        "GET",
        f"{config.base_url}{path}",
        provider=PROVIDER,
        operation=operation,
        headers=config.headers(),
        params=params,
    )


def _status_value(data: Any) -> Optional[str]:
    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        status = data.get("status")
        return status if isinstance(status, str) else None
    return None


async def fetch_task_status(config: BrowserUseConfig, task_id: str) -> Dict[str, Any]:
    data = await _get(config, f"/task/{task_id}/status", "get_task_status")
    return {"status": _status_value(data)}


def format_task(task: Task) -> str:
    result = "Task Information:\n"
    for label, value in (
        ("Task ID", task.id),
        ("Task Description", task.task),
        ("Status", task.status),
        ("Created At", task.created_at),
        ("Finished At", task.finished_at),
        ("Live URL", task.live_url),
    ):
        if value:
            result += f"- {label}: {value}\n"
    if task.output:
        result += f"\nOutput:\n{task.output}\n"
    if task.steps:
        result += "\nSteps:\n"
        for index, step in enumerate(task.steps, start=1):
            result += f"Step {index}:\n"
            if step.evaluation_previous_goal:
                result += f"- Previous Goal Evaluation: {step.evaluation_previous_goal}\n"
            if step.next_goal:
                result += f"- Next Goal: {step.next_goal}\n"
            result += "\n"
    if task.browser_data and task.browser_data.cookies is not None:
        result += "\nBrowser Data:\n"
        result += f"- Cookies: {len(task.browser_data.cookies)} cookies stored\n"
    return result


async def run_browser_use_task(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    """Start a task, optionally waiting for it to finish."""
    save_browser_data = args.get("save_browser_data")
    try:
        data = await request_json(
            "POST",
            f"{config.base_url}/run-task",
            provider=PROVIDER,
            operation="run_task",
            headers=config.headers(json_body=True),
            json={
                "task": args.get("task"),
                "save_browser_data": True if save_browser_data is None else save_browser_data,
            },
        )
        if not isinstance(data, dict) or not data:
            return "Task started, but no detailed information was returned."

        task = parse_record(Task, data, provider=PROVIDER, operation="run_task")
        result = "Successfully started Browser Use task:\n"
        if task.id:
            result += f"- Task ID: {task.id}\n"
        if task.status:
            result += f"- Status: {task.status}\n"
        if task.live_url:
            result += f"- Live URL: {task.live_url}\n"
            result += "\nYou can watch the task execution in real-time at the Live URL."

        if args.get("wait_for_completion") and task.id:
            final = await wait_for_job(
                lambda job_id: fetch_task_status(config, job_id),
                task.id,
                terminal_statuses=TERMINAL_TASK_STATUSES,
            )
            if final.get("status") in TERMINAL_TASK_STATUSES:
                details = parse_record(
                    Task, await _get(config, f"/task/{task.id}", "get_task"), provider=PROVIDER, operation="get_task"
                )
                return result + "\n\n" + format_task(details)
            result += f"\n\nTask did not finish in time (status: {final.get('status')})."
            if final.get("error"):
                result += f"\n{final['error']}"

        result += "\n\nTo check the task status later, use the get_browser_use_task tool with the Task ID."
        return result
    except ProviderError as e:
        raise e.with_prefix("Failed to run Browser Use task")


async def get_browser_use_task(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        data = await _get(config, f"/task/{args.get('task_id')}", "get_task")
    except ProviderError as e:
        raise e.with_prefix("Failed to get task")
    if not isinstance(data, dict) or not data:
        return "No task information was returned."
    return format_task(parse_record(Task, data, provider=PROVIDER, operation="get_task"))


async def get_browser_use_task_status(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        data = await _get(config, f"/task/{args.get('task_id')}/status", "get_task_status")
    except ProviderError as e:
        raise e.with_prefix("Failed to get task status")
    status = _status_value(data)
    if status:
        return f"Task Status: {status}"
    return f"Unexpected status response: {json.dumps(data)}"


async def get_browser_use_task_media(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        data = await _get(config, f"/task/{args.get('task_id')}/media", "get_task_media")
    except ProviderError as e:
        raise e.with_prefix("Failed to get task media")

    result = "Task Media:\n"
    recordings = data.get("recordings") if isinstance(data, dict) else None
    if recordings is None:
        return result + "No recording information available."
    if not recordings:
        return result + "No recordings available for this task."
    result += f"Found {len(recordings)} recording(s):\n\n"
    for index, recording in enumerate(recordings, start=1):
        result += f"{index}. {recording}\n"
    return result


async def list_browser_use_tasks(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        data = await _get(
            config,
            "/tasks",
            "list_tasks",
            params=query_params(limit=args.get("limit"), offset=args.get("offset"), status=args.get("status")),
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to list tasks")

    items = data.get("tasks", []) if isinstance(data, dict) else data
    if not items:
        return "No tasks found."

    result = f"Found {len(items)} tasks:\n\n"
    for index, item in enumerate(items, start=1):
        task = parse_record(Task, item, provider=PROVIDER, operation="list_tasks")
        result += f"--- Task {index} ---\n"
        if task.id:
            result += f"ID: {task.id}\n"
        if task.task:
            description = task.task if len(task.task) <= 100 else task.task[:97] + "..."
            result += f"Description: {description}\n"
        if task.status:
            result += f"Status: {task.status}\n"
        if task.created_at:
            result += f"Created: {task.created_at}\n"
        if task.live_url:
            result += f"Live URL: {task.live_url}\n"
        result += "\n"
    return result


async def _control_task(config: BrowserUseConfig, args: Dict[str, Any], command: str, past: str) -> str:
    task_id = args.get("task_id")
    try:
        await request_json(
            "PUT",
            f"{config.base_url}/{command}-task",
            provider=PROVIDER,
            operation=f"{command}_task",
            headers=config.headers(),
            params=query_params(task_id=task_id),
        )
    except ProviderError as e:
        raise e.with_prefix(f"Failed to {command} task")
    return f"Successfully {past} task {task_id}."


async def stop_browser_use_task(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    return await _control_task(config, args, "stop", "stopped")


async def pause_browser_use_task(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    return await _control_task(config, args, "pause", "paused")


async def resume_browser_use_task(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    return await _control_task(config, args, "resume", "resumed")


async def check_browser_use_balance(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        data = await _get(config, "/balance", "check_balance")
    except ProviderError as e:
        raise e.with_prefix("Failed to check balance")
    if not isinstance(data, dict) or not data:
        return "No balance information was returned."

    balance = parse_record(Balance, data, provider=PROVIDER, operation="check_balance")
    result = "Account Balance:\n"
    if balance.credits is not None:
        result += f"- Total Credits: {balance.credits}\n"
    if balance.used_credits is not None:
        result += f"- Used Credits: {balance.used_credits}\n"
    if balance.credits is not None and balance.used_credits is not None:
        result += f"- Remaining Credits: {balance.credits - balance.used_credits}\n"
    if balance.plan:
        result += f"- Plan: {balance.plan}\n"
    return result


async def get_browser_use_user_info(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        data = await _get(config, "/me", "get_user_info")
    except ProviderError as e:
        raise e.with_prefix("Failed to get user info")
    if not isinstance(data, dict) or not data:
        return "No user information was returned."

    user = parse_record(UserInfo, data, provider=PROVIDER, operation="get_user_info")
    result = "User Information:\n"
    for label, value in (
        ("User ID", user.id),
        ("Email", user.email),
        ("Account Created", user.created_at),
        ("Plan", user.plan),
    ):
        if value:
            result += f"- {label}: {value}\n"
    return result


async def ping_browser_use_api(config: BrowserUseConfig, args: Dict[str, Any]) -> str:
    try:
        body = await request_bytes(
            "GET", f"{config.base_url}/ping", provider=PROVIDER, operation="ping", headers=config.headers()
        )
    except ProviderError as e:
        raise e.with_prefix("Failed to ping API")

    text = body.decode("utf-8", errors="replace").strip()
    try:
        data = json.loads(text)
    except ValueError:
        return f"Ping Response: {text}"
    if isinstance(data, str):
        return f"Ping Response: {data}"
    if isinstance(data, dict):
        if data.get("status") == "ok" or data.get("message") == "pong":
            return "API Status: Online"
        return f"API Response: {json.dumps(data)}"
    return "API Status: Received response but format is unexpected"


def get_browser_use_actions(config: Optional[BrowserUseConfig] = None) -> List[Action]:
    """Build the Browser Use action set."""
    resolve = BrowserUseConfig.resolver(config)
    return [
        Action("run_browser_use_task", RUN_TASK_PROMPT, RunTaskParams, bind_config(run_browser_use_task, resolve)),
        Action("get_browser_use_task", GET_TASK_PROMPT, TaskIdParams, bind_config(get_browser_use_task, resolve)),
        Action("get_browser_use_task_status", GET_TASK_STATUS_PROMPT, TaskIdParams,
               bind_config(get_browser_use_task_status, resolve)),
        Action("get_browser_use_task_media", GET_TASK_MEDIA_PROMPT, TaskIdParams,
               bind_config(get_browser_use_task_media, resolve)),
        Action("list_browser_use_tasks", LIST_TASKS_PROMPT, ListTasksParams,
               bind_config(list_browser_use_tasks, resolve)),
        Action("stop_browser_use_task", STOP_TASK_PROMPT, TaskIdParams, bind_config(stop_browser_use_task, resolve)),
        Action("pause_browser_use_task", PAUSE_TASK_PROMPT, TaskIdParams, bind_config(pause_browser_use_task, resolve)),
        Action("resume_browser_use_task", RESUME_TASK_PROMPT, TaskIdParams,
               bind_config(resume_browser_use_task, resolve)),
        Action("check_browser_use_balance", CHECK_BALANCE_PROMPT, NoParams,
               bind_config(check_browser_use_balance, resolve)),
        Action("get_browser_use_user_info", GET_USER_INFO_PROMPT, NoParams,
               bind_config(get_browser_use_user_info, resolve)),
        Action("ping_browser_use_api", PING_PROMPT, NoParams, bind_config(ping_browser_use_api, resolve)),
    ]
