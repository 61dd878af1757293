"""Action abstraction and job polling.

The catalog of provider actions is in ``flashlib.actions.registry``.
"""

from .base import Action, ActionFunc, bind_config
from .polling import JobPoller, PollAttempt, PollOutcome, PollResult, wait_for_job

__all__ = [
    "Action",
    "ActionFunc",
    "bind_config",
    "JobPoller",
    "PollAttempt",
    "PollOutcome",
    "PollResult",
    "wait_for_job",
]
