"""
Vocabulary enums — the fixed modes and policies of the accessor overlay.
"""

from enum import Enum


class ReadMode(str, Enum):
    """
    Modes accepted by the overlay read accessor.
    
    Any value that is not one of these is treated as "no mode" and the
    default read path applies.
    """
    ID = "id"        # Raw code, only when an entry exists for it
    NAME = "name"    # Display name mapped from the raw code
    ENUM = "enum"    # The bound lookup table itself


class UnmappedKeyPolicy(str, Enum):
    """
    What the write accessor does with a symbolic key the table does not know.
    """
    STORE_NONE = "store_none"        # Write None through the original writer
    PASS_THROUGH = "pass_through"    # Write the key string unchanged
    RAISE = "raise"                  # Raise UnmappedKeyError, nothing is written


class AccessorKind(str, Enum):
    """The three accessors an overlay composes over."""
    READ = "read"
    WRITE = "write"
    CHECK = "check"
