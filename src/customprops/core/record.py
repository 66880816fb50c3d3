"""
Record / Control kernel – *pure Pydantic*.

* `PropertyRecord` is one name/value pair; accepts `Name`/`Value` payload keys.
* `Control` carries an ordered list of records and satisfies
  `HasCustomProperties`, so the accessor never has to guess a field name.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class HasCustomProperties(Protocol):
    """Capability: anything that can hand out its own property sequence."""

    def property_sequence(self) -> Sequence[Any] | None: ...


# PropertyRecord
class PropertyRecord(BaseModel):
    """A single custom property. Mutable: `value` is overwritten in place."""

    name: str = Field(alias="Name")
    value: Any = Field(default=None, alias="Value")

    model_config = {
        "populate_by_name": True,
        "frozen": False,
        "arbitrary_types_allowed": True,
    }


# Control base
class Control(BaseModel):
    """Base class – a free-form object with an ordered bag of custom properties."""

    custom_properties: List[PropertyRecord] | None = Field(
        default=None, alias="CustomProperties"
    )

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
    }

    def property_sequence(self) -> List[PropertyRecord] | None:
        return self.custom_properties

    # ------------------------------------------------------------------ #
    # convenience helpers
    # ------------------------------------------------------------------ #
    def add(self, name: str, value: Any = None) -> PropertyRecord:
        """Append a new record (duplicates allowed) and return it."""
        if self.custom_properties is None:
            self.custom_properties = []
        record = PropertyRecord(name=name, value=value)
        self.custom_properties.append(record)
        return record

    def remove(self, name: str) -> None:
        """Remove every record called `name` (no error if absent)."""
        if self.custom_properties is None:
            return
        self.custom_properties[:] = [
            r for r in self.custom_properties if r.name != name
        ]

    def list(self) -> Dict[str, Any]:
        """Return all names/values; the last duplicate wins."""
        return {r.name: r.value for r in self.custom_properties or []}
