"""Action registry assembling every provider's action set.

The registry is a flat, ordered list. Names are not deduplicated: two
providers exposing the same action name both appear in ``actions()``, and
name lookups resolve to the most recently registered entry.
"""

import builtins
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type

from flashlib.actions.base import Action
from flashlib.core.registry import BaseRegistry
from flashlib.providers.alchemy import AlchemyConfig, get_alchemy_actions
from flashlib.providers.browser_use import BrowserUseConfig, get_browser_use_actions
from flashlib.providers.coingecko import CoinGeckoConfig, get_coingecko_actions
from flashlib.providers.core.config import ProviderConfig
from flashlib.providers.elevenlabs import ElevenLabsConfig, get_elevenlabs_actions
from flashlib.providers.exa import ExaConfig, get_exa_actions
from flashlib.providers.google import GoogleConfig, get_google_actions
from flashlib.providers.heygen import HeyGenConfig, get_heygen_actions
from flashlib.providers.hyperbolic import HyperbolicConfig, get_hyperbolic_actions
from flashlib.providers.perplexity import PerplexityConfig, get_perplexity_actions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderActionSet:
    """A provider's action factory and the configuration class it accepts."""

    factory: Callable[..., List[Action]]
    config_class: Type[ProviderConfig]


PROVIDER_ACTION_SETS: Dict[str, ProviderActionSet] = {
    "google": ProviderActionSet(get_google_actions, GoogleConfig),
    "hyperbolic": ProviderActionSet(get_hyperbolic_actions, HyperbolicConfig),
    "exa": ProviderActionSet(get_exa_actions, ExaConfig),
    "perplexity": ProviderActionSet(get_perplexity_actions, PerplexityConfig),
    "heygen": ProviderActionSet(get_heygen_actions, HeyGenConfig),
    "elevenlabs": ProviderActionSet(get_elevenlabs_actions, ElevenLabsConfig),
    "browser_use": ProviderActionSet(get_browser_use_actions, BrowserUseConfig),
    "alchemy": ProviderActionSet(get_alchemy_actions, AlchemyConfig),
    "coingecko": ProviderActionSet(get_coingecko_actions, CoinGeckoConfig),
}


class ActionRegistry(BaseRegistry[Action]):
    """Ordered collection of actions."""

    def __init__(self) -> None:
        self._entries: List[Tuple[str, Action, Dict[str, Any]]] = []

    def register(self, name: str, obj: Action, **metadata: Any) -> None:
        """Append an action. An existing entry with the same name is kept.

        Args:
            name: Name the action is looked up by
            obj: The action
            **metadata: Extra attributes usable as ``list()`` filter criteria
        """
        if self.contains(name):
            logger.debug(f"Action '{name}' registered more than once")
        self._entries.append((name, obj, dict(metadata)))

    def extend(self, actions: Iterable[Action], **metadata: Any) -> None:
        """Register several actions under their own names."""
        for action in actions:
            self.register(action.name, action, **metadata)

    def get(self, name: str, expected_type: Optional[Type] = None) -> Action:
        for entry_name, action, _ in reversed(self._entries):
            if entry_name == name:
                if expected_type is not None and not isinstance(action, expected_type):
                    raise TypeError(f"Action '{name}' is not of expected type {expected_type}")
                return action
        raise KeyError(f"Action '{name}' not found in registry")

    def contains(self, name: str) -> bool:
        return any(entry_name == name for entry_name, _, _ in self._entries)

    def list(self, filter_criteria: Optional[Dict[str, Any]] = None) -> builtins.list[str]:
        """List action names in registration order, duplicates included.

        Args:
            filter_criteria: Metadata values every returned entry must match,
                e.g. ``{"provider": "exa"}``

        Returns:
            Names of the matching entries
        """
        return [
            name
            for name, _, metadata in self._entries
            if not filter_criteria
            or all(metadata.get(key) == value for key, value in filter_criteria.items())
        ]

    def clear(self) -> None:
        self._entries.clear()

    def remove(self, name: str) -> bool:
        """Remove every entry with this name."""
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry[0] != name]
        return len(self._entries) != before

    def update(self, name: str, obj: Action, **metadata: Any) -> bool:
        """Replace the most recent entry with this name, or append a new one."""
        for index in range(len(self._entries) - 1, -1, -1):
            if self._entries[index][0] == name:
                merged = {**self._entries[index][2], **metadata}
                self._entries[index] = (name, obj, merged)
                return True
        self._entries.append((name, obj, dict(metadata)))
        return False

    def actions(self) -> builtins.list[Action]:
        """All actions in registration order."""
        return [action for _, action, _ in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions())


def build_action_registry(
    configs: Iterable[ProviderConfig] = (),
    providers: Optional[Iterable[str]] = None,
) -> ActionRegistry:
    """Build a registry from the provider action sets.

    Args:
        configs: Explicit provider configurations; each one is handed to the
            factory of the provider whose config class it is an instance of
        providers: Provider names to include, in catalog order when omitted

    Returns:
        A registry holding every selected provider's actions

    Raises:
        KeyError: If ``providers`` names an unknown provider
    """
    by_class = {type(config): config for config in configs}
    names = builtins.list(providers) if providers is not None else builtins.list(PROVIDER_ACTION_SETS)

    registry = ActionRegistry()
    for name in names:
        if name not in PROVIDER_ACTION_SETS:
            raise KeyError(f"Unknown provider '{name}'. Known providers: {', '.join(PROVIDER_ACTION_SETS)}")
        action_set = PROVIDER_ACTION_SETS[name]
        config = by_class.get(action_set.config_class)
        actions = action_set.factory(config) if config is not None else action_set.factory()
        registry.extend(actions, provider=name)
        logger.debug(f"Registered {len(actions)} {name} actions")

    logger.info(f"Assembled action registry with {len(registry)} actions from {len(names)} providers")
    return registry


_default_registry: Optional[ActionRegistry] = None


def get_default_registry() -> ActionRegistry:
    """Get the process-wide registry, building it on first use.

    Actions in it resolve their configuration when they run, so credentials
    may be provided after this call.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = build_action_registry()
    return _default_registry


def reset_default_registry() -> None:
    global _default_registry
    _default_registry = None
