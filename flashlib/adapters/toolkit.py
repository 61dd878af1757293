"""A ready-made set of tools for an agent framework."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from flashlib.actions.registry import ActionRegistry, build_action_registry
from flashlib.providers.core.config import ProviderConfig

from .tool import ActionTool

logger = logging.getLogger(__name__)


class ActionToolkit:
    """Wraps every action of the selected providers in an ``ActionTool``.

    Configurations passed here replace the matching provider singletons, so
    the last toolkit constructed with a given provider's configuration wins
    for actions resolving it lazily. Actions built by this toolkit hold their
    own configuration.

    Args:
        configs: Explicit provider configurations
        providers: Provider names to include; all providers when omitted
    """

    def __init__(
        self,
        configs: Iterable[ProviderConfig] = (),
        providers: Optional[Iterable[str]] = None,
    ):
        self.registry: ActionRegistry = build_action_registry(configs=configs, providers=providers)
        self.tools: List[ActionTool] = [ActionTool(action) for action in self.registry]
        logger.debug(f"Toolkit ready with {len(self.tools)} tools")

    def get_tools(self) -> List[ActionTool]:
        return list(self.tools)

    def get_tool(self, name: str) -> ActionTool:
        """Get a tool by name; the last one wins when names repeat.

        Raises:
            KeyError: If no tool has this name
        """
        for tool in reversed(self.tools):
            if tool.name == name:
                return tool
        raise KeyError(f"Tool '{name}' not found in toolkit")

    def tool_names(self) -> List[str]:
        return [tool.name for tool in self.tools]

    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        return [tool.get_tool_schema() for tool in self.tools]

    async def invoke(self, name: str, tool_input: Dict[str, Any]) -> str:
        """Invoke a tool by name. Unknown names yield an error string."""
        try:
            tool = self.get_tool(name)
        except KeyError:
            return f"Error executing {name}: Tool not found"
        return await tool.invoke(tool_input)
