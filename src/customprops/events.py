"""
customprops.events  ──  Change hooks fired by `set_property_value`
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List

from pydantic import BaseModel

_ANY = None  # registry key for handlers interested in every property


class PropertyChange(BaseModel):
    """One record's value was overwritten."""

    control: Any
    name: str
    old_value: Any = None
    new_value: Any = None

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


Handler = Callable[[PropertyChange], Any]


class EventRegistry:
    """Per-accessor registry of change handlers"""

    def __init__(self):
        # Maps property name (or _ANY) -> handlers in registration order
        self._handlers: Dict[str | None, List[Handler]] = defaultdict(list)

    def register(self, names: tuple[str, ...], handler: Handler) -> None:
        """Register a handler for specific property names, or all of them"""
        for name in names or (_ANY,):
            if handler not in self._handlers[name]:
                self._handlers[name].append(handler)

    def unregister(self, handler: Handler) -> None:
        """Drop a handler everywhere it was registered (no error if absent)"""
        for handlers in self._handlers.values():
            if handler in handlers:
                handlers.remove(handler)

    def emit(self, event: PropertyChange) -> None:
        """Call every matching handler; handler errors propagate"""
        seen: List[Handler] = []
        for key in (event.name, _ANY):
            for handler in self._handlers.get(key, ()):
                if handler not in seen:
                    seen.append(handler)

        for handler in seen:
            handler(event)


class OnDecorator:
    """Namespace for event decorators"""

    def __init__(self, registry: EventRegistry):
        self._registry = registry

    def change(self, *names: str) -> Callable[[Handler], Handler]:
        """Decorator for handling value changes, optionally filtered by name"""

        def decorator(func: Handler) -> Handler:
            self._registry.register(names, func)
            return func

        return decorator
