"""
Public surface for customprops.
Nothing is registered globally; construct a `CustomPropertyAccessor` where
you need one (optionally with `AccessorSettings.from_env()`).
"""

from .accessor import CustomPropertyAccessor, CustomPropertyAccessorInterface
from .core.record import Control, HasCustomProperties, PropertyRecord
from .events import PropertyChange
from .settings import AccessorSettings

__all__ = [
    "AccessorSettings",
    "Control",
    "CustomPropertyAccessor",
    "CustomPropertyAccessorInterface",
    "HasCustomProperties",
    "PropertyChange",
    "PropertyRecord",
]
