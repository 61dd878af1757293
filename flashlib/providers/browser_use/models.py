"""Input schemas and response records for Browser Use actions."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from flashlib.core.models import ActionParameters, ProviderRecord


class TaskStatus(str, Enum):
    CREATED = "created"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    FAILED = "failed"
    STOPPED = "stopped"


TERMINAL_TASK_STATUSES = frozenset({TaskStatus.COMPLETED.value, TaskStatus.FAILED.value, TaskStatus.STOPPED.value})


class RunTaskParams(ActionParameters):
    task: str = Field(..., min_length=1, description="The task description for Browser Use to execute")
    save_browser_data: bool = Field(
        default=True, description="Whether to save browser data (cookies, local storage, etc.)"
    )
    wait_for_completion: bool = Field(
        default=False, description="Whether to wait until the task finishes (may time out for long tasks)"
    )


class TaskIdParams(ActionParameters):
    task_id: str = Field(..., min_length=1, description="The ID of the task")


class ListTasksParams(ActionParameters):
    limit: Optional[int] = Field(default=None, gt=0, le=100, description="Maximum number of tasks to return (max 100)")
    offset: Optional[int] = Field(default=None, ge=0, description="Number of tasks to skip")
    status: Optional[TaskStatus] = Field(default=None, description="Filter tasks by status")


class NoParams(ActionParameters):
    pass


class TaskStep(ProviderRecord):
    evaluation_previous_goal: Optional[str] = None
    next_goal: Optional[str] = None


class BrowserData(ProviderRecord):
    cookies: Optional[List[Any]] = None


class Task(ProviderRecord):
    id: Optional[str] = None
    task: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    finished_at: Optional[str] = None
    live_url: Optional[str] = None
    output: Optional[str] = None
    steps: Optional[List[TaskStep]] = None
    browser_data: Optional[BrowserData] = None


class Balance(ProviderRecord):
    credits: Optional[float] = None
    used_credits: Optional[float] = None
    plan: Optional[str] = None


class UserInfo(ProviderRecord):
    id: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None
    plan: Optional[str] = None
