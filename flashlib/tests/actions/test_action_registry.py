"""Tests for the action registry."""

from unittest.mock import AsyncMock, patch

import pytest

from flashlib.actions import Action
from flashlib.actions.registry import (
    PROVIDER_ACTION_SETS,
    ActionRegistry,
    ProviderActionSet,
    build_action_registry,
    get_default_registry,
    reset_default_registry,
)
from flashlib.core.errors import ConfigurationError
from flashlib.core.models import ActionParameters
from flashlib.providers.elevenlabs import ElevenLabsConfig, get_elevenlabs_actions
from flashlib.providers.exa import ExaConfig, get_exa_actions
from flashlib.providers.heygen import HeyGenConfig, get_heygen_actions
from flashlib.providers.hyperbolic import HyperbolicConfig

EXPECTED_PROVIDER_ORDER = [
    "google",
    "hyperbolic",
    "exa",
    "perplexity",
    "heygen",
    "elevenlabs",
    "browser_use",
    "alchemy",
    "coingecko",
]


class NoParams(ActionParameters):
    pass


def make_action(name: str, result: str = "ok") -> Action:
    return Action(name, f"{name} description", NoParams, AsyncMock(return_value=result))


class TestActionRegistry:
    """Test ActionRegistry storage semantics."""

    def test_register_and_get(self):
        registry = ActionRegistry()
        action = make_action("one")
        registry.register("one", action)
        assert registry.get("one") is action
        assert registry.contains("one")
        assert len(registry) == 1

    def test_get_missing(self):
        with pytest.raises(KeyError, match="missing"):
            ActionRegistry().get("missing")

    def test_get_expected_type(self):
        registry = ActionRegistry()
        registry.register("one", make_action("one"))
        assert isinstance(registry.get("one", Action), Action)
        with pytest.raises(TypeError):
            registry.get("one", str)

    def test_duplicates_are_kept_in_order(self):
        registry = ActionRegistry()
        first, second = make_action("dup", "first"), make_action("dup", "second")
        registry.extend([first, make_action("other"), second])

        assert registry.list() == ["dup", "other", "dup"]
        assert registry.actions() == [first, registry.get("other"), second]
        assert registry.get("dup") is second

    def test_list_filter(self):
        registry = ActionRegistry()
        registry.extend([make_action("a"), make_action("b")], provider="x")
        registry.extend([make_action("c")], provider="y")
        assert registry.list({"provider": "x"}) == ["a", "b"]
        assert registry.list({"provider": "z"}) == []

    def test_remove_all_entries_with_name(self):
        registry = ActionRegistry()
        registry.extend([make_action("dup"), make_action("keep"), make_action("dup")])
        assert registry.remove("dup")
        assert registry.list() == ["keep"]
        assert not registry.remove("dup")

    def test_update(self):
        registry = ActionRegistry()
        registry.extend([make_action("dup"), make_action("dup")], provider="x")
        replacement = make_action("dup", "new")

        assert registry.update("dup", replacement, version=2)
        assert registry.get("dup") is replacement
        assert registry.list({"provider": "x", "version": 2}) == ["dup"]
        assert len(registry) == 2

    def test_update_appends_missing(self):
        registry = ActionRegistry()
        assert not registry.update("new", make_action("new"))
        assert registry.list() == ["new"]

    def test_clear_and_iter(self):
        registry = ActionRegistry()
        registry.extend([make_action("a"), make_action("b")])
        assert [action.name for action in registry] == ["a", "b"]
        registry.clear()
        assert len(registry) == 0


class TestBuildActionRegistry:
    """Test assembling the catalog from provider action sets."""

    def test_provider_order(self):
        assert list(PROVIDER_ACTION_SETS) == EXPECTED_PROVIDER_ORDER

    def test_flat_concatenation(self):
        expected = []
        for action_set in PROVIDER_ACTION_SETS.values():
            expected.extend(a.name for a in action_set.factory())
        registry = build_action_registry()
        assert registry.list() == expected
        assert len(registry) == 5 + 7 + 1 + 1 + 6 + 2 + 11 + 10 + 3

    def test_duplicate_names_across_providers_are_kept(self, monkeypatch):
        first, second = make_action("shared", "first"), make_action("shared", "second")
        monkeypatch.setitem(PROVIDER_ACTION_SETS, "stub_a", ProviderActionSet(lambda: [first], ExaConfig))
        monkeypatch.setitem(
            PROVIDER_ACTION_SETS, "stub_b", ProviderActionSet(lambda: [make_action("other"), second], HeyGenConfig)
        )

        registry = build_action_registry(providers=["stub_a", "stub_b"])

        assert registry.list() == ["shared", "other", "shared"]
        assert registry.list({"provider": "stub_a"}) == ["shared"]
        assert registry.actions()[0] is first
        assert registry.get("shared") is second

    def test_no_credentials_needed_to_build(self):
        registry = build_action_registry()
        assert registry.contains("exa_search")
        assert not ExaConfig.has_instance()
        assert not HyperbolicConfig.has_instance()

    def test_provider_subset(self):
        registry = build_action_registry(providers=["perplexity", "exa"])
        assert registry.list() == ["perplexity_chat", "exa_search"]

    def test_unknown_provider(self):
        with pytest.raises(KeyError, match="Unknown provider 'nope'"):
            build_action_registry(providers=["nope"])

    def test_configs_reach_matching_factory(self):
        config = HeyGenConfig(api_key="explicit")
        build_action_registry(configs=[config], providers=["heygen"])
        assert HeyGenConfig.get_instance().api_key == "explicit"

    def test_fail_fast_config_without_key_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            build_action_registry(configs=[ExaConfig()], providers=["exa"])

    @pytest.mark.asyncio
    async def test_missing_credential_fails_at_invocation(self):
        registry = build_action_registry(providers=["exa"])
        with pytest.raises(ConfigurationError, match="Exa API key not found"):
            await registry.get("exa_search").run({"query": "x"})

    def test_same_order_on_repeat(self):
        assert build_action_registry().list() == build_action_registry().list()


class TestDefaultRegistry:
    """Test the lazily built process-wide registry."""

    def test_lazy_and_cached(self):
        with patch(
            "flashlib.actions.registry.build_action_registry", wraps=build_action_registry
        ) as build:
            first = get_default_registry()
            second = get_default_registry()
        assert first is second
        assert build.call_count == 1

    def test_reset(self):
        first = get_default_registry()
        reset_default_registry()
        assert get_default_registry() is not first


class TestProviderFactories:
    """Test the factory contract shared by every provider."""

    def test_explicit_config_replaces_singleton(self):
        HeyGenConfig.get_instance(api_key="old")
        get_heygen_actions(HeyGenConfig(api_key="new"))
        assert HeyGenConfig.get_instance().api_key == "new"

    @pytest.mark.asyncio
    async def test_actions_hold_their_config(self):
        actions = get_elevenlabs_actions(ElevenLabsConfig(api_key="mine"))
        ElevenLabsConfig.reset_instance()
        ElevenLabsConfig.get_instance(api_key="someone-else")

        with patch("flashlib.providers.elevenlabs.actions.request_bytes", new=AsyncMock(return_value=b"a")) as send:
            await actions[0].run({"text": "hi", "voice_id": "v"})
        assert send.await_args.kwargs["headers"]["xi-api-key"] == "mine"

    def test_factory_is_repeatable(self):
        assert [a.name for a in get_exa_actions(ExaConfig(api_key="k"))] == ["exa_search"]
        assert [a.name for a in get_exa_actions(ExaConfig(api_key="k"))] == ["exa_search"]
