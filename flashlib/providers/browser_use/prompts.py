"""Descriptions shown to the model for Browser Use actions."""

RUN_TASK_PROMPT = """
This tool runs a new task on Browser Use, which automates browser-based work.

Required inputs:
- task: A description of the task to execute (e.g. "Go to example.com and extract all links on the homepage")

Optional inputs:
- save_browser_data: Whether to save browser data like cookies (default: true)
- wait_for_completion: Whether to wait for the task to finish and return its output (default: false)

The response includes the task ID, status and a live URL to watch the task run in real time.

Example usage:
```
{
  "task": "Go to github.com, search for 'browser automation', and collect the top 5 repositories with their star counts"
}
```
"""

GET_TASK_PROMPT = """
This tool retrieves details about a Browser Use task.

Required inputs:
- task_id: The ID of the task to retrieve

The response includes task details such as status, steps, output and browser data.
"""

GET_TASK_STATUS_PROMPT = """
This tool retrieves the current status of a Browser Use task.

Required inputs:
- task_id: The ID of the task to check

The response is a simple status string (e.g. "created", "running", "completed", "failed").
"""

GET_TASK_MEDIA_PROMPT = """
This tool retrieves media (recordings) produced by a Browser Use task.

Required inputs:
- task_id: The ID of the task
"""

LIST_TASKS_PROMPT = """
This tool lists Browser Use tasks, with options for pagination and filtering.

Optional inputs:
- limit: Maximum number of tasks to return (max: 100)
- offset: Number of tasks to skip
- status: Filter tasks by status ("created", "running", "paused", "completed", "failed", "stopped")

Example usage:
```
{
  "limit": 5,
  "status": "completed"
}
```
"""

STOP_TASK_PROMPT = """
This tool stops a running Browser Use task. A stopped task cannot be resumed.

Required inputs:
- task_id: The ID of the task to stop
"""

PAUSE_TASK_PROMPT = """
This tool pauses a running Browser Use task. Use resume_browser_use_task to continue it.

Required inputs:
- task_id: The ID of the task to pause
"""

RESUME_TASK_PROMPT = """
This tool resumes a paused Browser Use task.

Required inputs:
- task_id: The ID of the task to resume
"""

CHECK_BALANCE_PROMPT = """
This tool checks the credit balance of the Browser Use account. No inputs are required.
"""

GET_USER_INFO_PROMPT = """
This tool retrieves information about the current Browser Use user. No inputs are required.
"""

PING_PROMPT = """
This tool checks whether the Browser Use API is reachable. No inputs are required.
"""
