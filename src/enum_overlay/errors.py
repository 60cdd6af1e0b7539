"""
Errors raised by enum declaration and enum-aware accessors.
"""

from typing import Any


class EnumOverlayError(Exception):
    """Base class for enum_overlay errors."""
    pass


class EnumNotFoundError(EnumOverlayError):
    """
    Raised when an attribute's enum type cannot be found by naming convention.
    
    Raised at declaration time, never deferred to first access.
    """
    
    def __init__(self, attribute: str, owner_name: str, candidate: str | None = None):
        self.attribute = attribute
        self.owner_name = owner_name
        self.candidate = candidate
        looked_for = f" (looked for '{candidate}')" if candidate else ""
        super().__init__(
            f"Enum class could not be found for attribute '{attribute}' "
            f"in class {owner_name}{looked_for}. "
            f"Specify the enum class using the enum_type option."
        )


class UnmappedKeyError(EnumOverlayError, ValueError):
    """Raised on write of an unknown symbolic key when the policy is RAISE."""
    
    def __init__(self, attribute: str, key: Any):
        self.attribute = attribute
        self.key = key
        super().__init__(f"Key {key!r} has no entry in the enum bound to '{attribute}'")


class NotBoundError(EnumOverlayError, KeyError):
    """Raised when asking for the overlay of an attribute never declared."""
    
    def __init__(self, attribute: str, owner_name: str):
        self.attribute = attribute
        self.owner_name = owner_name
        super().__init__(f"Attribute '{attribute}' of {owner_name} is not enumerated")
    
    def __str__(self) -> str:
        return str(self.args[0])
