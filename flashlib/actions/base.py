"""The Action record: a named, described, schema-validated async function."""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Type, TypeVar

from flashlib.core.models import ActionParameters

ActionFunc = Callable[[Dict[str, Any]], Awaitable[str]]

C = TypeVar("C")


@dataclass(frozen=True)
class Action:
    """A callable unit exposed to agent frameworks.

    Attributes:
        name: Identifier the host uses to call the action
        description: Natural-language description for the model
        schema: Pydantic model describing the accepted arguments
        func: Coroutine function taking the argument mapping and returning text
    """

    name: str
    description: str
    schema: Type[ActionParameters]
    func: ActionFunc

    async def run(self, args: Mapping[str, Any]) -> str:
        """Invoke the action function directly. Errors propagate."""
        return await self.func(dict(args))


def bind_config(
    func: Callable[[C, Dict[str, Any]], Awaitable[str]],
    resolve: Callable[[], C],
) -> ActionFunc:
    """Adapt ``func(config, args)`` to the single-argument action signature.

    ``resolve`` runs on every call, inside the action, so configuration
    errors surface as action failures rather than at construction.
    """

    async def run(args: Dict[str, Any]) -> str:
        return await func(resolve(), args)

    run.__name__ = getattr(func, "__name__", "action")
    run.__doc__ = func.__doc__
    return run
