"""Adapters exposing actions to agent frameworks."""

from .tool import MAX_DESCRIPTION_LENGTH, ActionTool
from .toolkit import ActionToolkit

__all__ = ["ActionTool", "ActionToolkit", "MAX_DESCRIPTION_LENGTH"]
