"""
Schemas — Pydantic models shared by lookup tables and the overlay.
"""

from enum_overlay.schemas.entry import EnumEntry

__all__ = [
    "EnumEntry",
]
