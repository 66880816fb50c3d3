"""
customprops.accessor  ──  Read/write named custom properties on any control.

Custom properties can have any name, so editors cannot autocomplete them on
a control. The accessor hides the storage shape behind five calls:

    accessor = CustomPropertyAccessor()
    if accessor.has_properties(control, "min", "max"):
        bounds = accessor.get_property_values(control, "min", "max")
    accessor.set_property_value(control, "min", 0)

Nothing is created or deleted: missing sequences and missing names read as
``False`` / ``None`` and writes to them are no-ops.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Protocol

from .core.properties import (
    property_sequence,
    record_name,
    record_value,
    set_record_value,
)
from .events import EventRegistry, Handler, OnDecorator, PropertyChange
from .settings import AccessorSettings

logger = logging.getLogger(__name__)


class CustomPropertyAccessorInterface(Protocol):
    """What embedding applications can type against (and fake in tests)."""

    def has_property(self, control: Any, name: str) -> bool: ...

    def has_properties(self, control: Any, *names: str) -> bool: ...

    def get_property_value(self, control: Any, name: str) -> Any: ...

    def get_property_values(self, control: Any, *names: str) -> Dict[str, Any]: ...

    def set_property_value(self, control: Any, name: str, value: Any) -> None: ...


class CustomPropertyAccessor:
    """
    Stateless helper over a control's property sequence.

    Read operations use ``settings.read_field``; `set_property_value` uses
    ``settings.write_field``. Controls implementing `HasCustomProperties`
    supply their own sequence and ignore both.
    """

    def __init__(self, settings: AccessorSettings | None = None):
        self.settings = settings or AccessorSettings()
        self._events = EventRegistry()
        self.on = OnDecorator(self._events)

    def unregister(self, handler: Handler) -> None:
        self._events.unregister(handler)

    def _matching(self, control: Any, field: str, name: str) -> Iterator[Any]:
        """Records on `control` called `name`, in sequence order."""
        if not isinstance(name, str) or not name:
            return
        for record in property_sequence(control, field) or ():
            found = record_name(record)
            if found is not None and found == name:
                yield record

    # ---- reads ----------------------------------------------------------
    def has_property(self, control: Any, name: str) -> bool:
        """True if any record on `control` is called `name` (stops at first hit)."""
        for _ in self._matching(control, self.settings.read_field, name):
            return True
        return False

    def has_properties(self, control: Any, *names: str) -> bool:
        """True if every name is present; True for no names."""
        for name in names:
            if not self.has_property(control, name):
                return False
        return True

    def get_property_value(self, control: Any, name: str) -> Any:
        """Value of the **last** record called `name`, else ``None``."""
        result = None
        for record in self._matching(control, self.settings.read_field, name):
            result = record_value(record)
        return result

    def get_property_values(self, control: Any, *names: str) -> Dict[str, Any]:
        """``{name: get_property_value(control, name)}`` in request order."""
        result: Dict[str, Any] = {}
        for name in names:
            result[name] = self.get_property_value(control, name)
        return result

    # ---- writes ---------------------------------------------------------
    def set_property_value(self, control: Any, name: str, value: Any) -> None:
        """
        Overwrite the value of **every** record called `name`.

        Never creates a record or a sequence; fires one change event per
        overwritten record.
        """
        changes = []
        for record in self._matching(control, self.settings.write_field, name):
            old = record_value(record)
            if set_record_value(record, value):
                changes.append(
                    PropertyChange(
                        control=control, name=name, old_value=old, new_value=value
                    )
                )

        if not changes:
            logger.debug("no property %r to set on %s", name, type(control).__name__)
        for change in changes:
            self._events.emit(change)
