"""
Where the accessor looks for property sequences on a control.

Nothing here is required: `AccessorSettings()` gives the unified default.
`AccessorSettings.from_env()` reads overrides from the environment (and a
`.env` file), e.g.

    CUSTOMPROPS_READ_FIELD=CustomProperties
    CUSTOMPROPS_WRITE_FIELD=SomeCustomProperty

The `.env` file is searched for from the working directory upwards.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_FIELD = "CustomProperties"
LEGACY_WRITE_FIELD = "SomeCustomProperty"

READ_FIELD_ENV = "CUSTOMPROPS_READ_FIELD"
WRITE_FIELD_ENV = "CUSTOMPROPS_WRITE_FIELD"


class AccessorSettings(BaseModel):
    """Field consulted by read operations vs. by `set_property_value`."""

    read_field: str = DEFAULT_FIELD
    write_field: str = DEFAULT_FIELD

    model_config = {"frozen": True}

    @field_validator("read_field", "write_field")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field name must not be blank")
        return v

    @classmethod
    def legacy(cls) -> "AccessorSettings":
        """Reads from `CustomProperties`, writes through `SomeCustomProperty`."""
        return cls(read_field=DEFAULT_FIELD, write_field=LEGACY_WRITE_FIELD)

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "AccessorSettings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            read_field=os.environ.get(READ_FIELD_ENV, DEFAULT_FIELD),
            write_field=os.environ.get(WRITE_FIELD_ENV, DEFAULT_FIELD),
        )
