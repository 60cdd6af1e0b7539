"""
enum_overlay — Enumerated-type semantics over plain scalar model fields.

A field keeps storing its raw code. Declaring it enumerated adds accessors
that read it as a raw code, a display name or the enum table itself, write
it from a raw code or a symbolic key, and check it against a key.
"""

__version__ = "0.1.0"

from enum_overlay.binder import AttributeBinder
from enum_overlay.config import (
    EnumSettings,
    configure,
    get_settings,
    reset_settings,
    settings_override,
)
from enum_overlay.context import (
    EnumContext,
    create_context,
    default_context,
    reset_default_context,
)
from enum_overlay.errors import (
    EnumOverlayError,
    EnumNotFoundError,
    UnmappedKeyError,
    NotBoundError,
)
from enum_overlay.lookup import EnumLookupTable, is_symbolic_key
from enum_overlay.model import Enumerated
from enum_overlay.overlay import (
    AccessorSet,
    BoundEnumAttribute,
    EnumOverlay,
    capture_accessors,
    default_accessors,
    query_value,
)
from enum_overlay.registry import AttributeBinding, EnumRegistry
from enum_overlay.resolver import EnumResolver, create_resolver
from enum_overlay.schemas import EnumEntry
from enum_overlay.vocabulary import AccessorKind, ReadMode, UnmappedKeyPolicy

__all__ = [
    "__version__",
    # Declaration
    "Enumerated",
    "AttributeBinder",
    "EnumContext",
    "create_context",
    "default_context",
    "reset_default_context",
    # Registry / resolution
    "AttributeBinding",
    "EnumRegistry",
    "EnumResolver",
    "create_resolver",
    # Overlay
    "AccessorSet",
    "BoundEnumAttribute",
    "EnumOverlay",
    "capture_accessors",
    "default_accessors",
    "query_value",
    # Lookup tables
    "EnumLookupTable",
    "EnumEntry",
    "is_symbolic_key",
    # Vocabulary
    "AccessorKind",
    "ReadMode",
    "UnmappedKeyPolicy",
    # Configuration
    "EnumSettings",
    "configure",
    "get_settings",
    "reset_settings",
    "settings_override",
    # Errors
    "EnumOverlayError",
    "EnumNotFoundError",
    "UnmappedKeyError",
    "NotBoundError",
]
