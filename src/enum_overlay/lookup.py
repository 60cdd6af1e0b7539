"""
Lookup Table — Protocol every enum type bound to an attribute must satisfy.

The overlay never stores or indexes entries itself. It asks the bound table
to translate between raw codes, symbolic keys and display names.
"""

from typing import Any, Protocol, runtime_checkable

from enum_overlay.schemas import EnumEntry


@runtime_checkable
class EnumLookupTable(Protocol):
    """
    Protocol for enum lookup tables.
    
    Implementations must support lookup by symbolic key and by raw code,
    and expose each entry's display name.
    """
    
    def find_by_id(self, raw_code: Any) -> EnumEntry | None:
        """Return the entry stored under a raw code, or None."""
        ...
    
    def map_to_value(self, key: Any) -> Any | None:
        """
        Translate a key in either direction.
        
        A symbolic key maps to its raw code; a raw code maps to its
        display name. Unknown input maps to None.
        """
        ...


def is_symbolic_key(value: Any) -> bool:
    """Symbolic keys are strings; everything else is a raw code."""
    return isinstance(value, str)


def entry_for(table: EnumLookupTable, value: Any) -> EnumEntry | None:
    """Resolve a raw code or symbolic key to its entry."""
    if value is None:
        return None
    if is_symbolic_key(value):
        raw_code = table.map_to_value(value)
        if raw_code is None:
            return None
        return table.find_by_id(raw_code)
    return table.find_by_id(value)
