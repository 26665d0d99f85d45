"""Event maps: one declaration site for event names and handler signatures.

An event map is a ``TypedDict`` whose values are ``Callable`` types::

    class CounterEvents(TypedDict):
        increment: Callable[[int], None]
        reset: Callable[[], None]

Type checkers validate every handler table written against it (exactly one
entry per key, each with the declared parameter and return types).
``check_handler_table`` and ``check_callback`` repeat the structural part of
that check at runtime, so a mismatched model table fails when the model is
built and a mismatched view callback fails when it is registered.
"""

from __future__ import annotations

import collections.abc
import inspect
import logging
from typing import Any, Callable, Mapping, TypeVar, get_args, get_origin, get_type_hints, is_typeddict

from mvc.errors import HandlerTableError

log = logging.getLogger(__name__)

# Any mapping of event name to handler. Concrete event maps are TypedDicts.
EventMap = Mapping[str, Callable[..., Any]]

EventMapT = TypeVar("EventMapT", bound=Mapping[str, object])


def _require_event_map(event_map: type) -> None:
    if not is_typeddict(event_map):
        raise TypeError(f"{event_map!r} is not an event map (expected a TypedDict)")


def event_names(event_map: type) -> frozenset[str]:
    """Return the event names declared by an event map."""
    _require_event_map(event_map)
    return frozenset(event_map.__required_keys__ | event_map.__optional_keys__)


def _declared_arity(hint: Any) -> int | None:
    """Number of positional parameters in a ``Callable[[...], R]`` hint.

    Returns None for ``Callable[..., R]``, ParamSpec forms and non-callable hints.
    """
    if get_origin(hint) is not collections.abc.Callable:
        return None
    args = get_args(hint)
    if not args or not isinstance(args[0], list):
        return None
    return len(args[0])


def event_signatures(event_map: type) -> dict[str, int | None]:
    """Map each declared event to its positional arity (None if unconstrained)."""
    _require_event_map(event_map)
    return {name: _declared_arity(hint) for name, hint in get_type_hints(event_map).items()}


def _accepts(fn: Callable[..., Any], count: int) -> bool:
    """Check whether fn can be called with ``count`` positional arguments."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins carry no signature metadata
        return True
    try:
        sig.bind(*([None] * count))
    except TypeError:
        return False
    return True


def check_handler_table(event_map: type, table: Mapping[str, Any]) -> None:
    """Validate a handler table against an event map.

    Args:
        event_map: The TypedDict declaring event names and signatures
        table: The concrete handler table

    Raises:
        HandlerTableError: If handlers are missing, unexpected, not callable,
            or cannot take the declared number of positional arguments.
    """
    declared = event_signatures(event_map)
    problems = []

    missing = declared.keys() - table.keys()
    if missing:
        problems.append(f"missing handlers: {', '.join(sorted(missing))}")
    extra = table.keys() - declared.keys()
    if extra:
        problems.append(f"undeclared handlers: {', '.join(sorted(extra))}")

    for name in sorted(declared.keys() & table.keys()):
        handler = table[name]
        if not callable(handler):
            problems.append(f"handler {name!r} is not callable")
            continue
        arity = declared[name]
        if arity is not None and not _accepts(handler, arity):
            problems.append(f"handler {name!r} does not accept {arity} positional argument(s)")

    if problems:
        raise HandlerTableError(f"{event_map.__name__}: " + "; ".join(problems))
    log.debug("Handler table matches %s (%d events)", event_map.__name__, len(declared))


def check_callback(event_map: type, event: str, callback: Any) -> None:
    """Validate a single callback registration against an event map.

    Raises:
        HandlerTableError: If ``event`` is not declared, or ``callback`` is not
            callable or cannot take the declared number of positional arguments.
    """
    names = event_names(event_map)
    if event not in names:
        raise HandlerTableError(
            f"{event_map.__name__}: undeclared event {event!r} (declared: {', '.join(sorted(names))})"
        )
    if not callable(callback):
        raise HandlerTableError(f"{event_map.__name__}: callback for {event!r} is not callable")
    arity = event_signatures(event_map)[event]
    if arity is not None and not _accepts(callback, arity):
        raise HandlerTableError(
            f"{event_map.__name__}: callback for {event!r} does not accept {arity} positional argument(s)"
        )
