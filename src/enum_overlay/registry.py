"""
Enum Registry — Maps (owner class, attribute) to the bound enum type.

Bindings are written once at declaration time and read on every accessor
call. Lookups follow the owner's MRO, so subclasses see the bindings of
their parents and may shadow them with their own.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Any

from enum_overlay.observability.logging import get_logger

logger = get_logger("registry")


@dataclass(frozen=True)
class AttributeBinding:
    """One enumerated attribute of one owner class."""
    owner: type
    attribute: str
    enum_type: Any


@dataclass
class EnumRegistry:
    """
    Registry of enumerated attributes.
    
    Re-registering the same (owner, attribute) overwrites the previous
    binding. Reads take no lock.
    """
    _bindings: dict[tuple[type, str], AttributeBinding] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)
    
    def register(self, owner: type, attribute: str, enum_type: Any) -> AttributeBinding:
        """Store a binding, replacing any binding for the same key."""
        binding = AttributeBinding(owner=owner, attribute=attribute, enum_type=enum_type)
        with self._lock:
            previous = self._bindings.get((owner, attribute))
            self._bindings[(owner, attribute)] = binding
        
        if previous is not None and previous.enum_type is not enum_type:
            logger.debug(
                f"Rebound {owner.__qualname__}.{attribute}: "
                f"{_type_name(previous.enum_type)} -> {_type_name(enum_type)}"
            )
        return binding
    
    def unregister(self, owner: type, attribute: str) -> AttributeBinding | None:
        """Remove and return a binding declared directly on owner."""
        with self._lock:
            return self._bindings.pop((owner, attribute), None)
    
    def binding(self, owner: type, attribute: str) -> AttributeBinding | None:
        """Get the nearest binding visible from owner."""
        for klass in owner.__mro__:
            found = self._bindings.get((klass, attribute))
            if found is not None:
                return found
        return None
    
    def lookup(self, owner: type, attribute: str) -> Any | None:
        """Get the enum type bound to an attribute, or None if not bound."""
        found = self.binding(owner, attribute)
        return found.enum_type if found is not None else None
    
    def is_bound(self, owner: type, attribute: str) -> bool:
        return self.binding(owner, attribute) is not None
    
    def bindings_for(self, owner: type) -> list[AttributeBinding]:
        """List bindings visible from owner, nearest class winning."""
        seen: dict[str, AttributeBinding] = {}
        for klass in owner.__mro__:
            for (bound_owner, attribute), binding in list(self._bindings.items()):
                if bound_owner is klass and attribute not in seen:
                    seen[attribute] = binding
        return list(seen.values())
    
    def __len__(self) -> int:
        return len(self._bindings)


def _type_name(enum_type: Any) -> str:
    return getattr(enum_type, "__name__", type(enum_type).__name__)
