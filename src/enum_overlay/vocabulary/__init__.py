"""
Vocabulary — Enumerated types used across enum_overlay.
"""

from enum_overlay.vocabulary.enums import (
    ReadMode,
    UnmappedKeyPolicy,
    AccessorKind,
)

__all__ = [
    "ReadMode",
    "UnmappedKeyPolicy",
    "AccessorKind",
]
