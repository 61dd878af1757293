"""Host-framework adapter around a single action.

``ActionTool.invoke`` never raises: validation problems fall back to the raw
input and any failure inside the action comes back as an error string.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import ValidationError as PydanticValidationError

from flashlib.actions.base import Action
from flashlib.core.errors import ValidationError, ValidationErrorDetail
from flashlib.core.models import ActionParameters

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 1000
UNKNOWN_ERROR = "Unknown error occurred"


class ActionTool:
    """Exposes an ``Action`` as a tool an agent framework can call."""

    def __init__(self, action: Action):
        self.action = action
        self.name: str = action.name
        self.description: str = action.description[:MAX_DESCRIPTION_LENGTH]
        self.schema: Type[ActionParameters] = action.schema
        self.last_validation_errors: Optional[List[ValidationErrorDetail]] = None

    def get_tool_schema(self) -> Dict[str, Any]:
        """Describe the tool in the OpenAI function-calling format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.schema.model_json_schema(by_alias=True),
            },
        }

    def prepare_arguments(self, tool_input: Any) -> Any:
        """Validate input against the schema, falling back to the raw input.

        Defaults filled in by the schema are included in the returned
        mapping. When validation fails the failure is logged and kept in
        ``last_validation_errors`` and the input is passed through unchanged.
        """
        try:
            validated = self.schema.model_validate(tool_input)
        except PydanticValidationError as e:
            error = ValidationError.from_pydantic(e, action_name=self.name, component=type(self).__name__)
            self.last_validation_errors = error.validation_errors
            logger.warning(f"{error.message}; passing input through unvalidated")
            return tool_input
        self.last_validation_errors = None
        return validated.model_dump(by_alias=True)

    async def invoke(self, tool_input: Optional[Mapping[str, Any]]) -> str:
        """Run the action and return its text result or an error description."""
        if tool_input is None:
            tool_input = {}
        try:
            args = self.prepare_arguments(tool_input)
            return await self.action.run(args)
        except Exception as e:
            message = str(e) or UNKNOWN_ERROR
            logger.error(f"Action {self.name} failed: {message}")
            logger.debug("Action failure details", exc_info=True)
            return f"Error executing {self.name}: {message}"

    def __repr__(self) -> str:
        return f"ActionTool(name={self.name!r})"
